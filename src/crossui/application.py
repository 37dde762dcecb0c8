"""
Client code that builds a small UI through an abstract factory.
"""

import logging
from pathlib import Path
from typing import List, Optional, Union

from .factories.base import GUIFactory
from .widgets.base import Button, Checkbox

logger = logging.getLogger(__name__)


class Application:
    """
    A window with one button and one checkbox.

    The application only knows the abstract factory and the capability
    types. Which platform family it shows is decided by whoever constructs
    it with a concrete factory.

    Attributes:
        factory: Factory used for every widget this application creates
        button: Button created by create_ui(), None before that
        checkbox: Checkbox created by create_ui(), None before that
    """

    def __init__(self, factory: GUIFactory):
        self.factory = factory
        self.button: Optional[Button] = None
        self.checkbox: Optional[Checkbox] = None

    def create_ui(
        self,
        button_label: str = "OK",
        checkbox_label: str = "Remember me",
        checked: bool = False,
    ) -> None:
        """Create the widgets, replacing any created earlier."""
        self.button = self.factory.create_button(button_label)
        self.checkbox = self.factory.create_checkbox(checkbox_label, checked=checked)
        logger.debug(f"Created UI with {self.button!r} and {self.checkbox!r}")

    def paint(self) -> List[str]:
        """
        Paint every widget.

        Returns:
            One line per widget, button first
        """
        if self.button is None or self.checkbox is None:
            self.create_ui()
        return [self.button.paint(), self.checkbox.paint()]

    def render_to(self, output_dir: Union[str, Path]) -> List[Path]:
        """
        Save a PNG per widget into output_dir.

        Args:
            output_dir: Target directory, created if missing

        Returns:
            Paths of the written images, button first
        """
        if self.button is None or self.checkbox is None:
            self.create_ui()

        output_path = Path(output_dir).expanduser()
        output_path.mkdir(parents=True, exist_ok=True)

        written = []
        for widget in (self.button, self.checkbox):
            target = output_path / f"{widget.platform}_{widget.widget_type}.png"
            widget.render().save(target, format="PNG")
            logger.info(f"Rendered {widget.describe()} to {target}")
            written.append(target)
        return written
