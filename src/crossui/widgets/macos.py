"""
macOS widget family.
"""

from .base import Button, Checkbox


class MacOSButton(Button):
    """Rounded push button in the Aqua style."""

    platform = "macos"
    DEFAULT_STYLE = {
        "font": "Helvetica Neue",
        "font_size": 13,
        "text_color": "#FFFFFF",
        "background_color": "#007AFF",
        "border_color": "#0062CC",
        "accent_color": "#007AFF",
        "corner_radius": 6,
        "size": (120, 32),
    }

    def paint(self) -> str:
        return self._announce()


class MacOSCheckbox(Checkbox):
    """Rounded checkbox; the check uses the system accent color."""

    platform = "macos"
    DEFAULT_STYLE = {
        "font": "Helvetica Neue",
        "font_size": 13,
        "text_color": "#1D1D1F",
        "background_color": "#F5F5F7",
        "border_color": "#8E8E93",
        "accent_color": "#007AFF",
        "corner_radius": 4,
        "size": (160, 24),
    }

    def paint(self) -> str:
        return self._announce()
