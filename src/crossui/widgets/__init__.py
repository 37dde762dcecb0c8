"""
Widget capabilities and their platform variants.

Clients program against Button and Checkbox. The concrete variants
(WindowsButton, MacOSCheckbox, ...) are only instantiated by factories.
"""

from .base import BaseWidget, Button, Checkbox
from .macos import MacOSButton, MacOSCheckbox
from .renderer import WidgetRenderer
from .windows import WindowsButton, WindowsCheckbox

__all__ = [
    "BaseWidget",
    "Button",
    "Checkbox",
    "WindowsButton",
    "WindowsCheckbox",
    "MacOSButton",
    "MacOSCheckbox",
    "WidgetRenderer",
]
