"""
Error handling utilities and boundaries for crossui.

Provides the exception hierarchy and a decorator for isolating callbacks
that should not bring down their caller.
"""

import logging
from functools import wraps
from typing import Any, Callable, TypeVar

logger = logging.getLogger(__name__)

# Type variable for generic function decoration
F = TypeVar("F", bound=Callable[..., Any])


def error_boundary(
    *,
    reraise: bool = False,
    default_return: Any = None,
    log_level: int = logging.ERROR,
) -> Callable[[F], F]:
    """
    Decorator to create consistent error boundaries around functions.

    Args:
        reraise: If True, re-raise the exception after logging
        default_return: Value to return if error occurs and not reraising
        log_level: Logging level for the error (default: ERROR)

    Returns:
        Decorated function with error handling

    Example:
        >>> @error_boundary(default_return=False)
        ... def on_click(button):
        ...     raise RuntimeError("handler failed")
        >>> on_click(None)
        False
    """

    def decorator(func: F) -> F:
        name = getattr(func, "__name__", repr(func))

        @wraps(func)
        def wrapper(*args, **kwargs):
            try:
                return func(*args, **kwargs)
            except Exception as e:
                logger.log(
                    log_level,
                    f"Error in {name}: {e}",
                    exc_info=True,
                    extra={
                        "function": name,
                        "function_module": getattr(func, "__module__", None),
                    },
                )

                if reraise:
                    raise

                return default_return

        return wrapper  # type: ignore

    return decorator


class CrossUIError(Exception):
    """Base exception for all crossui-specific errors."""

    pass


class ConfigurationError(CrossUIError):
    """Raised when there's an issue with configuration."""

    pass


class PlatformError(CrossUIError):
    """Raised when a platform family is unknown or unavailable."""

    pass


class RenderError(CrossUIError):
    """Raised when a widget cannot be rasterized."""

    pass
