"""
Pytest configuration and fixtures
"""

import pytest
import yaml

from crossui.factories import MacOSFactory, WindowsFactory


@pytest.fixture
def windows_factory():
    """Windows widget factory with default styles"""
    return WindowsFactory()


@pytest.fixture
def macos_factory():
    """macOS widget factory with default styles"""
    return MacOSFactory()


@pytest.fixture(params=[WindowsFactory, MacOSFactory], ids=["windows", "macos"])
def any_factory(request):
    """Each shipped factory in turn"""
    return request.param()


@pytest.fixture
def sample_config():
    """Sample configuration for testing"""
    return {
        "platform": "windows",
        "widgets": {
            "button": {"label": "Apply"},
            "checkbox": {"label": "Dark mode", "checked": True},
        },
        "styles": {
            "windows": {
                "button": {"background_color": "#FFFFFF", "size": [100, 30]},
            },
            "macos": {
                "checkbox": {"accent_color": "#FF9500"},
            },
        },
    }


@pytest.fixture
def config_file(tmp_path, sample_config):
    """Create a temporary config file"""
    config_path = tmp_path / "test_config.yaml"
    with open(config_path, "w") as f:
        yaml.dump(sample_config, f)
    return config_path
