"""
Capability interfaces for all widget types.
"""

import inspect
import logging
from abc import ABC, abstractmethod
from typing import Any, Callable, Dict, List, Optional, Tuple

from PIL import Image

from ..utils.errors import error_boundary
from .renderer import renderer

logger = logging.getLogger(__name__)

ClickHandler = Callable[..., Any]


class BaseWidget(ABC):
    """
    Base class for every widget a factory can produce.

    A widget is one concrete platform variant of a capability (button,
    checkbox). Clients only ever program against the capability classes
    below; the variant is chosen by whichever factory created it.

    Class Attributes:
        widget_type: Capability identifier (e.g., "button", "checkbox")
        platform: Platform family of the variant (e.g., "windows")
        DEFAULT_STYLE: Variant look used when no override is supplied

    Example:
        >>> factory = WindowsFactory()
        >>> button = factory.create_button("OK")
        >>> button.paint()
        'You have created WindowsButton.'
    """

    widget_type: str = None
    platform: str = None
    DEFAULT_STYLE: Dict[str, Any] = {}

    def __init__(self, label: str = "", style: Optional[Dict[str, Any]] = None):
        """
        Initialize widget.

        Args:
            label: Text shown on the widget
            style: Style overrides merged over DEFAULT_STYLE

        Raises:
            ValueError: If the variant does not define widget_type or platform
        """
        if not self.widget_type or not self.platform:
            raise ValueError(
                f"{self.__class__.__name__} must define widget_type and platform"
            )

        self.label = label
        # Each widget owns its style; nothing is shared with the factory
        self.style: Dict[str, Any] = dict(self.DEFAULT_STYLE)
        if style:
            self.style.update(style)

    @abstractmethod
    def paint(self) -> str:
        """
        Paint the widget using platform-specific behavior.

        Returns:
            Line identifying the concrete variant that was painted
        """
        pass

    def describe(self) -> str:
        """Human readable summary, e.g. "Windows button 'OK'"."""
        return f"{self.platform_title} {self.widget_type} '{self.label}'"

    @property
    def platform_title(self) -> str:
        """Display name of the platform family (e.g., "Windows", "macOS")."""
        return {"macos": "macOS"}.get(self.platform, self.platform.capitalize())

    @property
    def size(self) -> Tuple[int, int]:
        """
        Default render size from the style.

        Returns:
            (width, height) in pixels, (120, 32) when the style has no size
        """
        width, height = self.style.get("size", (120, 32))
        return int(width), int(height)

    def render(self, size: Optional[Tuple[int, int]] = None) -> Image.Image:
        """
        Rasterize the widget into a PIL image.

        Args:
            size: (width, height) in pixels, defaults to the style's size

        Returns:
            RGB image of the widget
        """
        return renderer.render(self, size or self.size)

    def _announce(self) -> str:
        line = f"You have created {self.__class__.__name__}."
        logger.debug(line)
        return line

    def __repr__(self) -> str:
        """String representation for debugging."""
        return f"<{self.__class__.__name__}(platform={self.platform}, label={self.label!r})>"


class Button(BaseWidget):
    """
    Button capability.

    Buttons keep a list of click handlers. A handler that raises is logged
    and skipped so the remaining handlers still run.
    """

    widget_type = "button"

    def __init__(self, label: str = "", style: Optional[Dict[str, Any]] = None):
        super().__init__(label, style)
        self._handlers: List[ClickHandler] = []

    def on_click(self, handler: ClickHandler) -> ClickHandler:
        """
        Register a click handler.

        Can be used as a decorator; the handler is returned unchanged.

        Args:
            handler: Callable taking the clicked button, or no arguments
        """
        if not callable(handler):
            raise TypeError(f"Click handler must be callable, got {type(handler).__name__}")
        self._handlers.append(handler)
        return handler

    def click(self) -> int:
        """
        Simulate a click, running every registered handler in order.

        Returns:
            Number of handlers that completed without raising
        """
        completed = 0
        for handler in self._handlers:
            guarded = error_boundary(default_return=False)(_completes(handler))
            if guarded(self):
                completed += 1
        logger.debug(f"{self!r} clicked, {completed}/{len(self._handlers)} handlers completed")
        return completed


class Checkbox(BaseWidget):
    """Checkbox capability with a boolean checked state."""

    widget_type = "checkbox"

    def __init__(
        self,
        label: str = "",
        style: Optional[Dict[str, Any]] = None,
        checked: bool = False,
    ):
        super().__init__(label, style)
        self._checked = bool(checked)

    @property
    def checked(self) -> bool:
        return self._checked

    def set_checked(self, value: bool) -> None:
        self._checked = bool(value)

    def toggle(self) -> bool:
        """Flip the checked state and return the new value."""
        self._checked = not self._checked
        return self._checked

    def __repr__(self) -> str:
        return (
            f"<{self.__class__.__name__}(platform={self.platform}, "
            f"label={self.label!r}, checked={self._checked})>"
        )


def _completes(handler: ClickHandler) -> Callable[["Button"], bool]:
    """Wrap a handler so a normal return reports success."""
    takes_button = _accepts_widget(handler)

    def run(button: "Button") -> bool:
        if takes_button:
            handler(button)
        else:
            handler()
        return True

    run.__name__ = getattr(handler, "__name__", type(handler).__name__)
    run.__module__ = getattr(handler, "__module__", __name__)
    return run


def _accepts_widget(handler: ClickHandler) -> bool:
    """True if the handler can be called with the widget as its one argument."""
    try:
        signature = inspect.signature(handler)
    except (TypeError, ValueError):
        # No introspectable signature (some builtins); pass the widget
        return True

    try:
        signature.bind(None)
    except TypeError:
        try:
            signature.bind()
        except TypeError:
            return True
        return False
    return True
