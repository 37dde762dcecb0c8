"""
crossui - platform-consistent widget families built through abstract factories
"""

__version__ = "0.1.0"

from .application import Application
from .factories import GUIFactory, MacOSFactory, WindowsFactory, get_factory
from .widgets import Button, Checkbox

__all__ = [
    "Application",
    "Button",
    "Checkbox",
    "GUIFactory",
    "MacOSFactory",
    "WindowsFactory",
    "get_factory",
]
