#!/usr/bin/env python3
"""
crossui CLI - build a widget family for a platform and paint or render it.
"""

import argparse
import logging
import sys
from typing import Any, Dict, Optional

from .application import Application
from .config.loader import ConfigLoader
from .factories import available_platforms, detect_platform, get_factory
from .utils.errors import CrossUIError

logger = logging.getLogger(__name__)


class CrossUICLI:
    """Main CLI handler for crossui commands."""

    def __init__(self) -> None:
        self.loader = ConfigLoader()

    def load_config(self, config_path: Optional[str]) -> Dict[str, Any]:
        """Load a config file, or the defaults when no file is given."""
        if config_path:
            return self.loader.load(config_path)
        return self.loader.load_dict({})

    def build_application(
        self, platform: Optional[str], config_path: Optional[str]
    ) -> Application:
        """
        Create an Application wired to the selected factory.

        The --platform flag wins over the config file's platform.
        """
        config = self.load_config(config_path)
        name = (platform or config["platform"]).strip().lower()
        # Resolve "auto" first so the right style section is picked
        if name == "auto":
            name = detect_platform()
        factory = get_factory(name, config["styles"].get(name))

        app = Application(factory)
        widgets = config["widgets"]
        app.create_ui(
            button_label=widgets["button"]["label"],
            checkbox_label=widgets["checkbox"]["label"],
            checked=widgets["checkbox"]["checked"],
        )
        return app

    def list_platforms(self) -> int:
        """Print available platforms, marking the detected one."""
        detected = detect_platform()
        print("Available platforms:\n")
        for name in available_platforms():
            if name == detected:
                print(f"  ● {name} (detected)")
            else:
                print(f"  ○ {name}")
        return 0

    def paint(self, platform: Optional[str] = None, config_path: Optional[str] = None) -> int:
        """Paint the widgets and print one line per widget."""
        try:
            app = self.build_application(platform, config_path)
            for line in app.paint():
                print(line)
            return 0
        except (CrossUIError, FileNotFoundError) as e:
            logger.error(f"Paint failed: {e}")
            return 1

    def render(
        self,
        output_dir: str,
        platform: Optional[str] = None,
        config_path: Optional[str] = None,
    ) -> int:
        """Render the widgets to PNG files in output_dir."""
        try:
            app = self.build_application(platform, config_path)
            for path in app.render_to(output_dir):
                print(path)
            return 0
        except (CrossUIError, FileNotFoundError, OSError) as e:
            logger.error(f"Render failed: {e}")
            return 1

    def validate_config(self, config_path: str) -> int:
        """
        Validate a configuration file.

        Args:
            config_path: Path to the YAML file
        """
        print(f"Validating {config_path}...")
        try:
            config = self.loader.load(config_path)
        except (CrossUIError, FileNotFoundError) as e:
            print(f"\n❌ Validation FAILED:\n  {e}")
            return 1

        print("\n✅ Configuration is valid")
        if config["platform"] == "auto":
            print(f"  platform: auto (detected {detect_platform()})")
        else:
            print(f"  platform: {config['platform']}")
        return 0


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="crossui",
        description="crossui - platform-consistent widget families",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  crossui platforms                          # List platforms
  crossui paint --platform macos             # Paint the macOS family
  crossui render ./out --config ui.yaml      # Write PNGs for the configured family
  crossui config validate ui.yaml            # Validate ui.yaml
""",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="WARNING",
        help="Logging level",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    subparsers.add_parser("platforms", help="List available platforms")

    paint_parser = subparsers.add_parser("paint", help="Paint the widget family")
    paint_parser.add_argument("--platform", help="Platform name (default: from config or auto)")
    paint_parser.add_argument("--config", help="Path to configuration file")

    render_parser = subparsers.add_parser("render", help="Render widgets to PNG files")
    render_parser.add_argument("output_dir", help="Directory for the images")
    render_parser.add_argument("--platform", help="Platform name (default: from config or auto)")
    render_parser.add_argument("--config", help="Path to configuration file")

    config_parser = subparsers.add_parser("config", help="Configuration management")
    config_subparsers = config_parser.add_subparsers(dest="config_command")
    validate_parser = config_subparsers.add_parser("validate", help="Validate a configuration")
    validate_parser.add_argument("path", help="Path to configuration file")

    return parser


def main(argv=None) -> int:
    """Main entry point for the CLI."""
    parser = create_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    cli = CrossUICLI()

    if args.command == "platforms":
        return cli.list_platforms()

    elif args.command == "paint":
        return cli.paint(args.platform, args.config)

    elif args.command == "render":
        return cli.render(args.output_dir, args.platform, args.config)

    elif args.command == "config":
        if args.config_command == "validate":
            return cli.validate_config(args.path)
        parser.print_help()
        return 1

    else:
        parser.print_help()
        return 1


if __name__ == "__main__":
    sys.exit(main())
