"""
Widget rendering with Pillow
"""

import logging
import os
from typing import Any, Dict, Tuple

from PIL import Image, ImageColor, ImageDraw, ImageFont

from ..utils.errors import RenderError

logger = logging.getLogger(__name__)

# Padding between the checkbox box and its label, in pixels
CHECKBOX_GAP = 6

FONT_DIRS = [
    "/usr/share/fonts",
    "/usr/local/share/fonts",
    "/Library/Fonts",
    "/System/Library/Fonts",
    os.path.join(os.environ.get("WINDIR", r"C:\Windows"), "Fonts"),
    os.path.expanduser("~/.fonts"),
    os.path.expanduser("~/.local/share/fonts"),
]


class WidgetRenderer:
    """
    Renders widget images.

    The renderer only reads a widget's style dictionary, so every platform
    family shares it. Supported style keys:
        - font (str): Font name or path
        - font_size (int): Size in points
        - text_color (str): Label color
        - background_color (str): Widget fill
        - border_color (str): Outline color
        - accent_color (str): Checkbox fill when checked
        - corner_radius (int): 0 for square corners

    Attributes:
        font_cache: Dictionary mapping font keys to loaded ImageFont objects
    """

    def __init__(self):
        """Initialize the renderer with an empty font cache."""
        self.font_cache = {}

    def render(self, widget, size: Tuple[int, int]) -> Image.Image:
        """Dispatch on the widget's capability type"""
        if widget.widget_type == "button":
            return self.render_button(widget, size)
        if widget.widget_type == "checkbox":
            return self.render_checkbox(widget, size)
        raise RenderError(f"No renderer for widget type '{widget.widget_type}'")

    def render_button(self, widget, size: Tuple[int, int]) -> Image.Image:
        """Render a button: filled (optionally rounded) box with centred label"""
        colors = self._resolve_colors(widget.style)
        metrics = self._resolve_metrics(widget.style)

        image = Image.new("RGB", size, colors["background_color"])
        draw = ImageDraw.Draw(image)

        self._draw_box(
            draw,
            (0, 0, size[0] - 1, size[1] - 1),
            metrics["corner_radius"],
            fill=colors["background_color"],
            outline=colors["border_color"],
        )

        if widget.label:
            font = self._load_font(metrics["font"], metrics["font_size"])
            bbox = draw.textbbox((0, 0), widget.label, font=font)
            text_x = (size[0] - (bbox[2] - bbox[0])) // 2 - bbox[0]
            text_y = (size[1] - (bbox[3] - bbox[1])) // 2 - bbox[1]
            draw.text((text_x, text_y), widget.label, font=font, fill=colors["text_color"])

        return image

    def render_checkbox(self, widget, size: Tuple[int, int]) -> Image.Image:
        """Render a checkbox: square box on the left, label to the right"""
        colors = self._resolve_colors(widget.style)
        metrics = self._resolve_metrics(widget.style)

        image = Image.new("RGB", size, colors["background_color"])
        draw = ImageDraw.Draw(image)

        box_size = max(size[1] - 8, 6)
        top = (size[1] - box_size) // 2
        box = (4, top, 4 + box_size, top + box_size)

        fill = colors["accent_color"] if widget.checked else "#FFFFFF"
        outline = colors["accent_color"] if widget.checked else colors["border_color"]
        self._draw_box(draw, box, metrics["corner_radius"], fill=fill, outline=outline)

        if widget.checked:
            self._draw_check(draw, box)

        if widget.label:
            font = self._load_font(metrics["font"], metrics["font_size"])
            bbox = draw.textbbox((0, 0), widget.label, font=font)
            text_x = box[2] + CHECKBOX_GAP - bbox[0]
            text_y = (size[1] - (bbox[3] - bbox[1])) // 2 - bbox[1]
            draw.text((text_x, text_y), widget.label, font=font, fill=colors["text_color"])

        return image

    def _resolve_colors(self, style: Dict[str, Any]) -> Dict[str, Tuple[int, ...]]:
        """Parse every color key up front so a bad value fails before drawing"""
        defaults = {
            "text_color": "#000000",
            "background_color": "#FFFFFF",
            "border_color": "#000000",
            "accent_color": "#000000",
        }
        colors = {}
        for key, default in defaults.items():
            value = style.get(key, default)
            try:
                colors[key] = ImageColor.getrgb(value)
            except (ValueError, AttributeError, TypeError) as e:
                raise RenderError(f"Invalid {key} {value!r}: {e}") from e
        return colors

    def _resolve_metrics(self, style: Dict[str, Any]) -> Dict[str, Any]:
        """Check font and numeric style keys before drawing"""
        font = style.get("font", "DejaVu Sans")
        if not isinstance(font, str) or not font:
            raise RenderError(f"Invalid font {font!r}: must be a non-empty string")

        metrics = {"font": font}
        for key, default, minimum in (("font_size", 12, 1), ("corner_radius", 0, 0)):
            value = style.get(key, default)
            if isinstance(value, bool) or not isinstance(value, int) or value < minimum:
                raise RenderError(f"Invalid {key} {value!r}: must be an integer >= {minimum}")
            metrics[key] = value
        return metrics

    def _draw_box(self, draw: ImageDraw.ImageDraw, box, radius: int, fill, outline) -> None:
        if radius > 0:
            draw.rounded_rectangle(box, radius=radius, fill=fill, outline=outline)
        else:
            draw.rectangle(box, fill=fill, outline=outline)

    def _draw_check(self, draw: ImageDraw.ImageDraw, box) -> None:
        left, top, right, bottom = box
        width = right - left
        height = bottom - top
        points = [
            (left + width * 0.2, top + height * 0.55),
            (left + width * 0.42, top + height * 0.75),
            (left + width * 0.8, top + height * 0.3),
        ]
        draw.line(points, fill="#FFFFFF", width=max(width // 8, 1))

    def _load_font(self, font_name: str, font_size: int):
        """Load a font with caching"""
        cache_key = f"{font_name}_{font_size}"

        if cache_key in self.font_cache:
            return self.font_cache[cache_key]

        font = None

        if "/" in font_name or font_name.endswith((".ttf", ".otf")):
            font_path = os.path.expanduser(font_name)
            try:
                font = ImageFont.truetype(font_path, font_size)
            except OSError as e:
                logger.warning(f"Failed to load font from path '{font_path}': {e}")

        if not font:
            font = self._search_system_fonts(font_name, font_size)

        if not font:
            logger.warning(f"Failed to load font '{font_name}', using default")
            font = ImageFont.load_default()

        self.font_cache[cache_key] = font
        return font

    def _search_system_fonts(self, font_name: str, font_size: int, font_dirs=None):
        """
        Find a font file by name in the system font directories.

        A file whose name matches exactly (ignoring case, spaces and the
        extension) wins over one that only contains the name, so "Segoe UI"
        loads segoeui.ttf rather than segoeuib.ttf.
        """
        if font_dirs is None:
            font_dirs = FONT_DIRS
        wanted = font_name.lower().replace(" ", "")
        partial_matches = []

        for font_dir in font_dirs:
            if not os.path.isdir(font_dir):
                continue

            for root, _dirs, files in os.walk(font_dir):
                for file in sorted(files):
                    stem, ext = os.path.splitext(file.lower().replace(" ", ""))
                    if ext not in (".ttf", ".otf") or wanted not in stem:
                        continue
                    font_path = os.path.join(root, file)
                    if stem != wanted:
                        partial_matches.append(font_path)
                        continue
                    font = self._try_truetype(font_path, font_size)
                    if font:
                        return font

        for font_path in partial_matches:
            font = self._try_truetype(font_path, font_size)
            if font:
                return font

        return None

    def _try_truetype(self, font_path: str, font_size: int):
        try:
            font = ImageFont.truetype(font_path, font_size)
            logger.debug(f"Loaded font: {font_path}")
            return font
        except OSError as e:
            # Font file might be corrupted or inaccessible
            logger.debug(f"Cannot load font {font_path}: {e}")
            return None


# Shared renderer; holds only the font cache
renderer = WidgetRenderer()
