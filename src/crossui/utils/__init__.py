"""
Utility modules for crossui.
"""

from .errors import (
    ConfigurationError,
    CrossUIError,
    PlatformError,
    RenderError,
    error_boundary,
)

__all__ = [
    "CrossUIError",
    "ConfigurationError",
    "PlatformError",
    "RenderError",
    "error_boundary",
]
