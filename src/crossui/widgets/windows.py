"""
Windows widget family.

Flat, square-cornered controls in the Fluent palette.
"""

from .base import Button, Checkbox


class WindowsButton(Button):
    """Push button in the Windows style."""

    platform = "windows"
    DEFAULT_STYLE = {
        "font": "Segoe UI",
        "font_size": 12,
        "text_color": "#000000",
        "background_color": "#E1E1E1",
        "border_color": "#ADADAD",
        "accent_color": "#0078D7",
        "corner_radius": 0,
        "size": (120, 32),
    }

    def paint(self) -> str:
        return self._announce()


class WindowsCheckbox(Checkbox):
    """Square checkbox with a filled accent check."""

    platform = "windows"
    DEFAULT_STYLE = {
        "font": "Segoe UI",
        "font_size": 12,
        "text_color": "#000000",
        "background_color": "#FFFFFF",
        "border_color": "#333333",
        "accent_color": "#0078D7",
        "corner_radius": 0,
        "size": (160, 24),
    }

    def paint(self) -> str:
        return self._announce()
