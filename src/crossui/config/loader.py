"""
Configuration loader for crossui
"""

import copy
import logging
from pathlib import Path
from typing import Any, Dict

import yaml
from PIL import ImageColor

from ..factories import available_platforms
from ..utils.errors import ConfigurationError

logger = logging.getLogger(__name__)

# Maximum config file size (1MB should be plenty for YAML configs)
MAX_CONFIG_SIZE = 1024 * 1024

WIDGET_TYPES = ("button", "checkbox")

# Style keys holding integers, with their smallest allowed value
INTEGER_STYLE_KEYS = {"font_size": 1, "corner_radius": 0}

COLOR_STYLE_KEYS = ("text_color", "background_color", "border_color", "accent_color")


class ConfigLoader:
    """Loads and validates YAML configuration files"""

    def load(self, config_path: str) -> Dict[str, Any]:
        """
        Load configuration from YAML file.

        Args:
            config_path: Path to YAML configuration file

        Returns:
            Validated configuration dictionary with defaults applied

        Raises:
            FileNotFoundError: If config file doesn't exist
            ConfigurationError: If config file is invalid or too large
        """
        resolved_path = Path(config_path).expanduser().resolve()

        self._validate_config_path(resolved_path)

        if not resolved_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {resolved_path}")

        file_size = resolved_path.stat().st_size
        if file_size > MAX_CONFIG_SIZE:
            raise ConfigurationError(
                f"Configuration file too large: {file_size} bytes "
                f"(maximum {MAX_CONFIG_SIZE} bytes)"
            )

        try:
            with open(resolved_path, "r", encoding="utf-8") as f:
                config = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Invalid YAML in configuration file: {e}") from e

        config = self.load_dict(config)
        logger.info(f"Loaded configuration from {resolved_path}")
        return config

    def load_dict(self, config: Any) -> Dict[str, Any]:
        """Validate an already parsed configuration and apply defaults"""
        # An empty file is a valid config that uses every default
        if config is None:
            config = {}

        self._validate(config)
        return self._apply_defaults(copy.deepcopy(config))

    def _validate_config_path(self, config_path: Path) -> None:
        """
        Validate that the configuration file path is safe to load.

        Args:
            config_path: Resolved absolute path to config file

        Raises:
            ConfigurationError: If path is a directory
        """
        if config_path.is_dir():
            raise ConfigurationError(f"Path is a directory, not a file: {config_path}")

        if config_path.suffix.lower() not in [".yaml", ".yml"]:
            logger.warning(
                f"Configuration file has unexpected extension: {config_path.suffix}. "
                f"Expected .yaml or .yml"
            )

        logger.debug(f"Configuration path validated: {config_path}")

    def _validate(self, config: Any) -> None:
        """Validate configuration structure"""
        if not isinstance(config, dict):
            raise ConfigurationError("Configuration must be a dictionary")

        platform = config.get("platform", "auto")
        if not isinstance(platform, str):
            raise ConfigurationError("'platform' must be a string")
        if platform.strip().lower() not in ["auto"] + available_platforms():
            raise ConfigurationError(
                f"Unknown platform '{platform}'. "
                f"Expected one of: auto, {', '.join(available_platforms())}"
            )

        widgets = config.get("widgets", {})
        if not isinstance(widgets, dict):
            raise ConfigurationError("'widgets' must be a dictionary")
        for widget_type, widget_config in widgets.items():
            if widget_type not in WIDGET_TYPES:
                raise ConfigurationError(f"Unknown widget type '{widget_type}'")
            if not isinstance(widget_config, dict):
                raise ConfigurationError(f"Widget '{widget_type}' must be a dictionary")
            if "label" in widget_config and not isinstance(widget_config["label"], str):
                raise ConfigurationError(f"Label of widget '{widget_type}' must be a string")
        if "checked" in widgets.get("checkbox", {}):
            if not isinstance(widgets["checkbox"]["checked"], bool):
                raise ConfigurationError("'checkbox.checked' must be true or false")

        styles = config.get("styles", {})
        if not isinstance(styles, dict):
            raise ConfigurationError("'styles' must be a dictionary")
        for platform_name, platform_styles in styles.items():
            if platform_name not in available_platforms():
                raise ConfigurationError(f"Styles given for unknown platform '{platform_name}'")
            if not isinstance(platform_styles, dict):
                raise ConfigurationError(f"Styles for '{platform_name}' must be a dictionary")
            for widget_type, style in platform_styles.items():
                if widget_type not in WIDGET_TYPES:
                    raise ConfigurationError(
                        f"Unknown widget type '{widget_type}' in styles for '{platform_name}'"
                    )
                if not isinstance(style, dict):
                    raise ConfigurationError(
                        f"Style '{platform_name}.{widget_type}' must be a dictionary"
                    )
                self._validate_style(style, f"{platform_name}.{widget_type}")

    def _validate_style(self, style: Dict[str, Any], where: str) -> None:
        """Check the value types of known style keys"""
        if "size" in style:
            self._validate_size(style["size"], where)

        if "font" in style and (not isinstance(style["font"], str) or not style["font"]):
            raise ConfigurationError(f"Font in '{where}' must be a non-empty string")

        for key, minimum in INTEGER_STYLE_KEYS.items():
            if key not in style:
                continue
            value = style[key]
            if isinstance(value, bool) or not isinstance(value, int) or value < minimum:
                raise ConfigurationError(
                    f"'{key}' in '{where}' must be an integer >= {minimum}, got {value!r}"
                )

        for key in COLOR_STYLE_KEYS:
            if key not in style:
                continue
            value = style[key]
            if not isinstance(value, str):
                raise ConfigurationError(f"'{key}' in '{where}' must be a string, got {value!r}")
            try:
                ImageColor.getrgb(value)
            except ValueError as e:
                raise ConfigurationError(
                    f"'{key}' in '{where}' is not a valid color: {value!r} ({e})"
                ) from e

    def _validate_size(self, size: Any, where: str) -> None:
        if (
            not isinstance(size, (list, tuple))
            or len(size) != 2
            or not all(isinstance(v, int) and not isinstance(v, bool) and v > 0 for v in size)
        ):
            raise ConfigurationError(f"Size in '{where}' must be two positive integers")

    def _apply_defaults(self, config: Dict[str, Any]) -> Dict[str, Any]:
        """Apply default values to configuration"""
        config.setdefault("platform", "auto")

        widgets = config.setdefault("widgets", {})
        widgets.setdefault("button", {})
        widgets["button"].setdefault("label", "OK")
        widgets.setdefault("checkbox", {})
        widgets["checkbox"].setdefault("label", "Remember me")
        widgets["checkbox"].setdefault("checked", False)

        styles = config.setdefault("styles", {})
        for platform_styles in styles.values():
            for style in platform_styles.values():
                if "size" in style:
                    style["size"] = tuple(style["size"])

        return config
