"""
YAML configuration for crossui.
"""

from .loader import ConfigLoader

__all__ = ["ConfigLoader"]
