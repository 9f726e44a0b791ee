#
# PROJECT: wireframe-pipeline
# MODULE: wireframe_pipeline/color.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-17
#

import curses
import logging

from .canvas import INK_LINE, INK_MARKER

log = logging.getLogger(__name__)


def parse_hex_color(hex_str):
    """
    Parse a hex color string to an (r, g, b) tuple.
    Accepts: '#RRGGBB' or 'RRGGBB' (case-insensitive).
    Returns: (r, g, b) tuple with values 0-255, or None on failure.
    """
    if hex_str is None:
        return None
    val = str(hex_str).strip().lstrip('#')
    if len(val) != 6:
        return None
    try:
        return (int(val[0:2], 16), int(val[2:4], 16), int(val[4:6], 16))
    except ValueError:
        return None


# The 6x6x6 xterm colour cube occupies indices 16-231, one of these per axis
_CUBE_VALUES = [0, 95, 135, 175, 215, 255]

_ANSI8 = [
    (0, 0, 0),       # 0  black
    (128, 0, 0),     # 1  red
    (0, 128, 0),     # 2  green
    (128, 128, 0),   # 3  yellow
    (0, 0, 128),     # 4  blue
    (128, 0, 128),   # 5  magenta
    (0, 128, 128),   # 6  cyan
    (192, 192, 192), # 7  white
]


def rgb_to_nearest_xterm(r, g, b):
    """Nearest xterm-256 index, searching the colour cube and the grey ramp."""
    def nearest(v):
        return min(range(6), key=lambda i: abs(v - _CUBE_VALUES[i]))

    ri, gi, bi = nearest(r), nearest(g), nearest(b)
    cube_idx = 16 + ri * 36 + gi * 6 + bi
    cr, cg, cb = _CUBE_VALUES[ri], _CUBE_VALUES[gi], _CUBE_VALUES[bi]
    cube_dist = (r - cr) ** 2 + (g - cg) ** 2 + (b - cb) ** 2

    gray_step = max(0, min(23, ((r + g + b) // 3 - 8 + 5) // 10))
    gv = 8 + gray_step * 10
    gray_dist = (r - gv) ** 2 + (g - gv) ** 2 + (b - gv) ** 2

    return 232 + gray_step if gray_dist < cube_dist else cube_idx


def rgb_to_nearest_ansi8(r, g, b):
    """Nearest basic ANSI colour (0-7), for 8-colour terminals."""
    return min(range(8), key=lambda i: sum((c - a) ** 2 for c, a in zip((r, g, b), _ANSI8[i])))


def init_colors(config):
    """
    Set up curses colour pairs for wireframe lines, endpoint markers and the
    background. Call once after curses.wrapper init.

    Returns ``(ink_pairs, bg_pair)``: a mapping from canvas INK_* values to
    pair ids, and the pair used to fill the screen (0 when unavailable).
    """
    if not config.use_color:
        return {}, 0

    try:
        if not curses.has_colors():
            return {}, 0
        curses.start_color()

        default_bg = False
        try:
            curses.use_default_colors()
            default_bg = True
        except curses.error:
            pass

        line_rgb = parse_hex_color(config.line_color) or (0, 255, 0)
        marker_rgb = parse_hex_color(config.marker_color) or (255, 0, 0)
        bg_rgb = parse_hex_color(config.bg_color) or (0, 0, 0)

        if curses.COLORS >= 256:
            to_slot = rgb_to_nearest_xterm
        else:
            to_slot = rgb_to_nearest_ansi8

        bg_slot = to_slot(*bg_rgb)
        if bg_rgb == (0, 0, 0) and default_bg:
            bg_slot = -1

        curses.init_pair(1, to_slot(*line_rgb), bg_slot)
        curses.init_pair(2, to_slot(*marker_rgb), bg_slot)
        curses.init_pair(3, 7 if bg_slot != 7 else 0, bg_slot)
        return {INK_LINE: 1, INK_MARKER: 2}, 3

    except curses.error as e:
        log.warning("colour initialisation failed, falling back to monochrome: %s", e)
        return {}, 0
