"""
Abstract factory for platform widget families
"""

import copy
import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, Optional, Type

from ..widgets.base import BaseWidget, Button, Checkbox

logger = logging.getLogger(__name__)


class GUIFactory(ABC):
    """
    Creates a matched family of widgets for one platform.

    Every widget a factory instance produces belongs to the same platform
    family. Factories are immutable after construction and keep no
    reference to the widgets they create, so one instance can be shared
    freely between threads.

    Class Attributes:
        platform: Platform family this factory is bound to
        variants: Widget type to the variant class this factory builds
    """

    platform: str = None
    variants: Dict[str, Type[BaseWidget]] = {}

    def __init__(self, styles: Optional[Dict[str, Dict[str, Any]]] = None):
        """
        Initialize factory.

        Args:
            styles: Optional per widget type overrides, e.g.
                {"button": {"background_color": "#FFFFFF"}}
        """
        if not self.platform:
            raise ValueError(f"{self.__class__.__name__} must define platform")

        self._styles = copy.deepcopy(styles) if styles else {}

    @abstractmethod
    def create_button(self, label: str = "") -> Button:
        """
        Create a new button of this platform's variant.

        Args:
            label: Button text

        Returns:
            A fresh Button instance
        """
        pass

    @abstractmethod
    def create_checkbox(self, label: str = "", checked: bool = False) -> Checkbox:
        """
        Create a new checkbox of this platform's variant.

        Args:
            label: Checkbox text
            checked: Initial state

        Returns:
            A fresh Checkbox instance
        """
        pass

    def style_for(self, widget_type: str) -> Dict[str, Any]:
        """
        Return the effective style for a widget type.

        Args:
            widget_type: "button" or "checkbox"

        Returns:
            Fresh dict of the variant's DEFAULT_STYLE with this factory's
            overrides merged over it

        Raises:
            ValueError: If this factory has no variant for widget_type
        """
        variant = self.variants.get(widget_type)
        if variant is None:
            raise ValueError(f"{self.__class__.__name__} has no {widget_type!r} variant")

        style = copy.deepcopy(variant.DEFAULT_STYLE)
        style.update(copy.deepcopy(self._styles.get(widget_type, {})))
        return style

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__}(platform={self.platform})>"
