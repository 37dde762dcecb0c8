"""
Tests for widget rendering
"""

from unittest.mock import Mock, patch

import pytest
from PIL import Image

from crossui.utils.errors import RenderError
from crossui.widgets.macos import MacOSButton, MacOSCheckbox
from crossui.widgets.renderer import WidgetRenderer
from crossui.widgets.windows import WindowsButton, WindowsCheckbox


@pytest.fixture
def renderer():
    return WidgetRenderer()


class TestButtonRendering:
    """Test button images"""

    def test_default_size(self):
        image = WindowsButton("OK").render()

        assert isinstance(image, Image.Image)
        assert image.mode == "RGB"
        assert image.size == (120, 32)

    def test_explicit_size(self):
        assert MacOSButton("OK").render((80, 20)).size == (80, 20)

    def test_background_uses_platform_style(self):
        windows = WindowsButton().render()
        macos = MacOSButton().render()

        assert windows.getpixel((60, 16)) == (0xE1, 0xE1, 0xE1)
        assert macos.getpixel((60, 16)) == (0x00, 0x7A, 0xFF)

    def test_square_border_on_windows(self):
        image = WindowsButton().render()
        assert image.getpixel((0, 0)) == (0xAD, 0xAD, 0xAD)

    def test_label_is_drawn(self):
        blank = WindowsButton().render()
        labelled = WindowsButton("OK").render()
        assert blank.tobytes() != labelled.tobytes()


class TestCheckboxRendering:
    """Test checkbox images"""

    def test_default_size(self):
        assert WindowsCheckbox("Remember me").render().size == (160, 24)

    def test_unchecked_box_is_white(self):
        image = WindowsCheckbox().render()
        assert image.getpixel((12, 6)) == (255, 255, 255)

    def test_checked_box_uses_accent(self):
        image = WindowsCheckbox(checked=True).render()
        assert image.getpixel((12, 6)) == (0x00, 0x78, 0xD7)

    def test_macos_accent(self):
        image = MacOSCheckbox(checked=True).render()
        assert image.getpixel((12, 6)) == (0x00, 0x7A, 0xFF)

    def test_toggle_changes_image(self):
        checkbox = MacOSCheckbox("Sync")
        before = checkbox.render()
        checkbox.toggle()
        assert checkbox.render().tobytes() != before.tobytes()


class TestRendererErrors:
    """Test invalid input handling"""

    def test_invalid_color(self):
        button = WindowsButton(style={"background_color": "not-a-color"})
        with pytest.raises(RenderError, match="background_color"):
            button.render()

    def test_non_string_color(self):
        checkbox = WindowsCheckbox(style={"accent_color": 42})
        with pytest.raises(RenderError):
            checkbox.render()

    def test_unknown_widget_type(self, renderer):
        widget = Mock(widget_type="slider")
        with pytest.raises(RenderError, match="slider"):
            renderer.render(widget, (10, 10))


class TestFontLoading:
    """Test font lookup and caching"""

    def test_font_is_cached(self, renderer):
        with patch.object(renderer, "_search_system_fonts", return_value=None) as search:
            first = renderer._load_font("No Such Font", 12)
            second = renderer._load_font("No Such Font", 12)

        assert first is second
        search.assert_called_once()

    def test_missing_font_falls_back_to_default(self, renderer, caplog):
        with patch.object(renderer, "_search_system_fonts", return_value=None):
            font = renderer._load_font("No Such Font", 12)

        assert font is not None
        assert "using default" in caplog.text

    def test_bad_font_path_falls_back(self, renderer, tmp_path):
        missing = str(tmp_path / "missing.ttf")
        with patch.object(renderer, "_search_system_fonts", return_value=None):
            assert renderer._load_font(missing, 12) is not None


class TestStyleValues:
    """Bad numeric or font style values become RenderError"""

    @pytest.mark.parametrize(
        "style",
        [
            {"corner_radius": "big"},
            {"corner_radius": -1},
            {"corner_radius": 2.5},
            {"font_size": "x"},
            {"font_size": 0},
            {"font_size": True},
            {"font": 123},
            {"font": ""},
        ],
    )
    def test_button_rejects_bad_values(self, style):
        with pytest.raises(RenderError, match="Invalid"):
            WindowsButton("OK", style=style).render()

    def test_checkbox_rejects_bad_radius(self):
        with pytest.raises(RenderError, match="corner_radius"):
            MacOSCheckbox(style={"corner_radius": "big"}).render()

    def test_zero_radius_is_square(self):
        image = MacOSButton(style={"corner_radius": 0}).render()
        assert image.getpixel((0, 0)) == (0x00, 0x62, 0xCC)


class TestSystemFontSearch:
    """Exact font names win over partial matches"""

    @pytest.fixture
    def fake_truetype(self):
        with patch(
            "crossui.widgets.renderer.ImageFont.truetype",
            side_effect=lambda path, size: path,
        ) as truetype:
            yield truetype

    def test_exact_match_preferred(self, renderer, tmp_path, fake_truetype):
        for name in ("segoeuib.ttf", "segoeuii.ttf", "segoeui.ttf"):
            (tmp_path / name).write_bytes(b"")

        found = renderer._search_system_fonts("Segoe UI", 12, font_dirs=[str(tmp_path)])

        assert found == str(tmp_path / "segoeui.ttf")
        fake_truetype.assert_called_once()

    def test_exact_match_ignores_case_and_spaces(self, renderer, tmp_path, fake_truetype):
        (tmp_path / "Helvetica Neue Bold.ttf").write_bytes(b"")
        (tmp_path / "HelveticaNeue.otf").write_bytes(b"")

        found = renderer._search_system_fonts("Helvetica Neue", 13, font_dirs=[str(tmp_path)])

        assert found == str(tmp_path / "HelveticaNeue.otf")

    def test_partial_match_fallback(self, renderer, tmp_path, fake_truetype):
        (tmp_path / "segoeuib.ttf").write_bytes(b"")

        found = renderer._search_system_fonts("Segoe UI", 12, font_dirs=[str(tmp_path)])

        assert found == str(tmp_path / "segoeuib.ttf")

    def test_unreadable_exact_match_falls_back(self, renderer, tmp_path):
        (tmp_path / "segoeui.ttf").write_bytes(b"")
        (tmp_path / "segoeuib.ttf").write_bytes(b"")

        def truetype(path, size):
            if path.endswith("segoeui.ttf"):
                raise OSError("cannot open resource")
            return path

        with patch("crossui.widgets.renderer.ImageFont.truetype", side_effect=truetype):
            found = renderer._search_system_fonts("Segoe UI", 12, font_dirs=[str(tmp_path)])

        assert found == str(tmp_path / "segoeuib.ttf")

    def test_no_match(self, renderer, tmp_path, fake_truetype):
        (tmp_path / "arial.ttf").write_bytes(b"")
        (tmp_path / "segoeui.txt").write_bytes(b"")

        assert renderer._search_system_fonts("Segoe UI", 12, font_dirs=[str(tmp_path)]) is None
        fake_truetype.assert_not_called()
