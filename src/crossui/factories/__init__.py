"""
Widget factories and platform selection
"""

import logging
import sys
from typing import Any, Dict, List, Optional, Type

from ..utils.errors import PlatformError
from .base import GUIFactory
from .macos import MacOSFactory
from .windows import WindowsFactory

logger = logging.getLogger(__name__)

FACTORIES: Dict[str, Type[GUIFactory]] = {
    WindowsFactory.platform: WindowsFactory,
    MacOSFactory.platform: MacOSFactory,
}


def detect_platform() -> str:
    """Return the widget family for the running OS: "macos" or "windows"."""
    # Only two families ship; everything that is not a Mac gets Windows widgets
    return "macos" if sys.platform == "darwin" else "windows"


def available_platforms() -> List[str]:
    """List the registered platform names."""
    return sorted(FACTORIES)


def get_factory(
    name: Optional[str] = None,
    styles: Optional[Dict[str, Dict[str, Any]]] = None,
) -> GUIFactory:
    """
    Build the factory for a platform.

    Args:
        name: Platform name, or None / "auto" to detect the running OS
        styles: Per widget type style overrides passed to the factory

    Returns:
        A new factory instance

    Raises:
        PlatformError: If the platform is unknown
    """
    if name is None or name.strip().lower() == "auto":
        name = detect_platform()
        logger.debug(f"Auto-detected platform: {name}")

    key = name.strip().lower()
    factory_class = FACTORIES.get(key)
    if factory_class is None:
        raise PlatformError(
            f"Unknown platform '{name}'. Available: {', '.join(available_platforms())}"
        )

    logger.info(f"Using {factory_class.__name__} for platform '{key}'")
    return factory_class(styles)


__all__ = [
    "FACTORIES",
    "GUIFactory",
    "MacOSFactory",
    "WindowsFactory",
    "available_platforms",
    "detect_platform",
    "get_factory",
]
