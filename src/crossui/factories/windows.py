"""
Windows widget factory
"""

from ..widgets.base import Button, Checkbox
from ..widgets.windows import WindowsButton, WindowsCheckbox
from .base import GUIFactory


class WindowsFactory(GUIFactory):
    """Produces Windows buttons and checkboxes only."""

    platform = "windows"
    variants = {"button": WindowsButton, "checkbox": WindowsCheckbox}

    def create_button(self, label: str = "") -> Button:
        return WindowsButton(label, self.style_for("button"))

    def create_checkbox(self, label: str = "", checked: bool = False) -> Checkbox:
        return WindowsCheckbox(label, self.style_for("checkbox"), checked=checked)
