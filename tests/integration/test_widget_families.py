"""
Integration tests for widget family consistency across the whole stack
"""

from concurrent.futures import ThreadPoolExecutor

import pytest

from crossui import Application, Button, Checkbox, get_factory
from crossui.config.loader import ConfigLoader


def build_form(factory):
    """Client code written against the abstract interface only"""
    return [factory.create_button("OK"), factory.create_checkbox("Remember me")]


class TestWidgetFamilies:
    """A factory never mixes families"""

    @pytest.mark.parametrize("platform", ["windows", "macos"])
    def test_family_is_consistent(self, platform):
        button, checkbox = build_form(get_factory(platform))

        assert isinstance(button, Button)
        assert isinstance(checkbox, Checkbox)
        assert button.platform == checkbox.platform == platform

    def test_families_differ_in_style(self):
        win_button, win_checkbox = build_form(get_factory("windows"))
        mac_button, mac_checkbox = build_form(get_factory("macos"))

        assert win_button.style != mac_button.style
        assert win_checkbox.style != mac_checkbox.style
        assert win_button.render().tobytes() != mac_button.render().tobytes()

    def test_shared_factory_across_threads(self):
        factory = get_factory("windows")

        with ThreadPoolExecutor(max_workers=8) as pool:
            widgets = list(pool.map(lambda _: factory.create_button(), range(200)))

        assert len({id(w) for w in widgets}) == 200
        assert {w.paint() for w in widgets} == {"You have created WindowsButton."}


class TestConfiguredApplication:
    """Config file through factory selection to rendered images"""

    def test_config_to_images(self, tmp_path):
        path = tmp_path / "ui.yaml"
        path.write_text(
            "platform: macos\n"
            "widgets:\n"
            "  checkbox:\n"
            "    label: Notifications\n"
            "    checked: true\n"
            "styles:\n"
            "  macos:\n"
            "    button:\n"
            "      size: [90, 28]\n"
        )
        config = ConfigLoader().load(str(path))
        factory = get_factory(config["platform"], config["styles"].get("macos"))

        app = Application(factory)
        app.create_ui(
            button_label=config["widgets"]["button"]["label"],
            checkbox_label=config["widgets"]["checkbox"]["label"],
            checked=config["widgets"]["checkbox"]["checked"],
        )
        paths = app.render_to(tmp_path / "out")

        assert app.paint() == ["You have created MacOSButton.", "You have created MacOSCheckbox."]
        assert app.button.render().size == (90, 28)
        assert [p.name for p in paths] == ["macos_button.png", "macos_checkbox.png"]
