"""
macOS widget factory
"""

from ..widgets.base import Button, Checkbox
from ..widgets.macos import MacOSButton, MacOSCheckbox
from .base import GUIFactory


class MacOSFactory(GUIFactory):
    """Produces macOS buttons and checkboxes only."""

    platform = "macos"
    variants = {"button": MacOSButton, "checkbox": MacOSCheckbox}

    def create_button(self, label: str = "") -> Button:
        return MacOSButton(label, self.style_for("button"))

    def create_checkbox(self, label: str = "", checked: bool = False) -> Checkbox:
        return MacOSCheckbox(label, self.style_for("checkbox"), checked=checked)
