"""
Tests for the terminal drawing surface: canvas, rasteriser and colour helpers.
"""
import pytest

from wireframe_pipeline.canvas import (INK_LINE, INK_MARKER, INK_NONE, Canvas,
                                       render_cell_ascii, render_cell_braille)
from wireframe_pipeline.color import (init_colors, parse_hex_color, rgb_to_nearest_ansi8,
                                      rgb_to_nearest_xterm)
from wireframe_pipeline.config import PipelineConfig
from wireframe_pipeline.rasterizer import draw_line_dda
from wireframe_pipeline.renderer import Renderer
from wireframe_pipeline.scene import process_scene


class TestCanvas:

    def test_origin_is_bottom_left(self):
        canvas = Canvas(10, 8)
        canvas.set_pixel(0, 0)
        assert canvas.get_pixel(0, 0)
        assert not canvas.get_pixel(0, 7)
        # bottom pixel row lives in the lowest cell row, lowest dot
        assert canvas.grid[1][0] == 1 << 3

    def test_top_row(self):
        canvas = Canvas(10, 8)
        canvas.set_pixel(1, 7)
        assert canvas.grid[0][0] == 1 << 4

    @pytest.mark.parametrize("x, y", [(-1, 0), (10, 0), (0, -1), (0, 8)])
    def test_out_of_bounds_is_ignored(self, x, y):
        canvas = Canvas(10, 8)
        canvas.set_pixel(x, y)
        assert not any(any(row) for row in canvas.grid)
        assert not canvas.get_pixel(x, y)

    def test_higher_ink_wins(self):
        canvas = Canvas(10, 8)
        canvas.set_pixel(0, 0, INK_MARKER)
        canvas.set_pixel(1, 0, INK_LINE)
        assert canvas.c_grid[1][0] == INK_MARKER

    def test_draw_line_marks_endpoints(self):
        canvas = Canvas(10, 8)
        canvas.draw_line(1, 1, 8, 6)
        assert canvas.get_pixel(1, 1) and canvas.get_pixel(8, 6)
        assert canvas.get_pixel(0, 0)        # marker square around (1, 1)
        assert canvas.c_grid[1][0] == INK_MARKER
        assert canvas.get_pixel(4, 3)
        assert canvas.c_grid[1][2] == INK_LINE

    def test_zero_marker_size(self):
        canvas = Canvas(10, 8, marker_size=0)
        canvas.draw_line(1, 1, 8, 1)
        assert not canvas.get_pixel(0, 0)
        assert canvas.c_grid[1][0] == INK_LINE

    def test_clear(self):
        canvas = Canvas(10, 8)
        canvas.draw_line(0, 0, 9, 7)
        canvas.clear()
        assert not any(any(row) for row in canvas.grid)
        assert all(ink == INK_NONE for row in canvas.c_grid for ink in row)

    def test_for_screen(self):
        canvas = Canvas.for_screen(24, 80)
        assert (canvas.w, canvas.h) == (158, 88)
        assert Canvas.for_screen(1, 0).w == 0


class TestRasterizer:

    def test_horizontal_line(self):
        canvas = Canvas(10, 8)
        draw_line_dda(canvas, 2, 3, 6, 3, INK_LINE)
        assert [canvas.get_pixel(x, 3) for x in range(10)] == \
            [False, False, True, True, True, True, True, False, False, False]

    def test_single_point(self):
        canvas = Canvas(10, 8)
        draw_line_dda(canvas, 4.2, 4.4, 3.8, 3.6, INK_LINE)
        assert canvas.get_pixel(4, 4)
        assert sum(bin(m).count('1') for row in canvas.grid for m in row) == 1

    def test_fractional_endpoints_are_rounded(self):
        canvas = Canvas(10, 8)
        draw_line_dda(canvas, 0.6, 0.4, 0.6, 4.6, INK_LINE)
        assert all(canvas.get_pixel(1, y) for y in range(0, 6))


class TestCellRendering:

    def test_braille(self):
        assert render_cell_braille(0) == ' '
        assert render_cell_braille(0xFF) == chr(0x28FF)
        assert render_cell_braille(1) == chr(0x2801)
        # lowest dot of the left column is braille dot 7
        assert render_cell_braille(1 << 3) == chr(0x2840)

    def test_ascii_density(self):
        assert render_cell_ascii(0) == ' '
        assert render_cell_ascii(1) == '.'
        assert render_cell_ascii(0b11) == ':'
        assert render_cell_ascii(0xFF) == '%'


class TestRenderToCanvas:

    def test_cube_corners_are_drawn(self, cube_descriptor):
        canvas = Canvas(200, 200)
        count = Renderer().render(canvas, process_scene(cube_descriptor), 200, 200)
        assert count == 12
        for x in (75, 125):
            for y in (75, 125):
                assert canvas.get_pixel(x, y)
        assert not canvas.get_pixel(100, 100)


class TestColor:

    @pytest.mark.parametrize("text, rgb", [
        ("#ff8000", (255, 128, 0)),
        ("0E0E2C", (14, 14, 44)),
        ("#fff", None),
        ("zzzzzz", None),
        (None, None),
    ])
    def test_parse_hex_color(self, text, rgb):
        assert parse_hex_color(text) == rgb

    @pytest.mark.parametrize("rgb, index", [
        ((255, 0, 0), 196),
        ((0, 0, 0), 16),
        ((128, 128, 128), 244),
    ])
    def test_nearest_xterm(self, rgb, index):
        assert rgb_to_nearest_xterm(*rgb) == index

    def test_nearest_ansi8(self):
        assert rgb_to_nearest_ansi8(250, 10, 10) == 1
        assert rgb_to_nearest_ansi8(200, 200, 200) == 7

    def test_colour_disabled(self):
        assert init_colors(PipelineConfig(use_color=False)) == ({}, 0)


class TestDetectTerminal:

    def test_dumb_terminal(self, monkeypatch):
        monkeypatch.setenv("TERM", "dumb")
        monkeypatch.setenv("LANG", "C")
        config = PipelineConfig.detect_terminal()
        assert not config.use_color
        assert not config.use_braille

    def test_utf8_xterm(self, monkeypatch):
        monkeypatch.setenv("TERM", "xterm-256color")
        monkeypatch.setenv("LANG", "en_US.UTF-8")
        config = PipelineConfig.detect_terminal()
        assert config.use_color and config.use_braille

    def test_linux_console_has_no_braille(self, monkeypatch):
        monkeypatch.setenv("TERM", "linux")
        monkeypatch.setenv("LANG", "en_US.UTF-8")
        assert not PipelineConfig.detect_terminal().use_braille
