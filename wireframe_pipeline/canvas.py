#
# PROJECT: wireframe-pipeline
# MODULE: wireframe_pipeline/canvas.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-17
#

import curses

from .rasterizer import draw_line_dda, draw_marker

# Cell colour priorities; a higher value wins when a cell holds both
INK_NONE = 0
INK_LINE = 1
INK_MARKER = 2


class Canvas:
    """
    Sub-cell pixel canvas backing one terminal screen.

    Each terminal cell holds a 2x4 block of pixels, stored as an 8-bit mask.
    Pixel (0, 0) is the bottom-left corner so that viewport y grows upward.
    ``draw_line`` is the only drawing operation the pipeline needs.
    """
    __slots__ = ['w', 'h', 'grid', 'c_grid', 'marker_size']

    # Braille dot mapping for 2x4 grid
    #  1 4
    #  2 5
    #  3 6
    #  7 8
    BRAILLE_REMAP = [0x01, 0x02, 0x04, 0x40, 0x08, 0x10, 0x20, 0x80]

    def __init__(self, w, h, marker_size=2):
        self.w, self.h = w, h
        self.marker_size = marker_size
        self.grid = [[0] * (w // 2 + 1) for _ in range(h // 4 + 1)]
        # Colour grid stores the winning ink per cell
        self.c_grid = [[INK_NONE] * (w // 2 + 1) for _ in range(h // 4 + 1)]

    @classmethod
    def for_screen(cls, rows, cols, marker_size=2):
        """Canvas covering a ``rows`` x ``cols`` terminal minus the HUD line."""
        return cls(max(0, (cols - 1) * 2), max(0, (rows - 2) * 4), marker_size)

    def set_pixel(self, x, y, ink=INK_LINE):
        if x < 0 or x >= self.w or y < 0 or y >= self.h: return

        row = self.h - 1 - y
        cx, cy = x >> 1, row >> 2
        # Bit index 0-3 for the left column, 4-7 for the right
        self.grid[cy][cx] |= (1 << ((row & 3) + (x & 1) * 4))
        if ink > self.c_grid[cy][cx]:
            self.c_grid[cy][cx] = ink

    def get_pixel(self, x, y) -> bool:
        if x < 0 or x >= self.w or y < 0 or y >= self.h:
            return False
        row = self.h - 1 - y
        return bool(self.grid[row >> 2][x >> 1] & (1 << ((row & 3) + (x & 1) * 4)))

    def draw_line(self, x0, y0, x1, y1):
        """Draw a segment with a small square marker on each endpoint."""
        draw_line_dda(self, x0, y0, x1, y1, INK_LINE)
        draw_marker(self, x0, y0, self.marker_size, INK_MARKER)
        draw_marker(self, x1, y1, self.marker_size, INK_MARKER)

    def clear(self):
        for row in self.grid:
            row[:] = [0] * len(row)
        for row in self.c_grid:
            row[:] = [INK_NONE] * len(row)


def render_cell_ascii(mask: int) -> str:
    """
    Renders a 2x4 cell mask as an ASCII character based on pixel density.
    Used when Braille is unavailable.
    """
    if not mask:
        return ' '
    density = bin(mask).count('1')
    chars = " .:-=+*#%@"
    return chars[density] if density < len(chars) else '@'


def render_cell_braille(mask: int) -> str:
    """Renders a 2x4 cell mask as a Unicode Braille character."""
    if not mask:
        return ' '
    b = sum(Canvas.BRAILLE_REMAP[i] for i in range(8) if mask & (1 << i))
    return chr(0x2800 + b)


def blit(stdscr, canvas: Canvas, ink_pairs, use_braille=True, top=1):
    """Copy ``canvas`` onto a curses window starting at row ``top``.

    ``ink_pairs`` maps INK_* values to curses colour pair ids (0 = default).
    Does NOT call refresh().
    """
    th, tw = stdscr.getmaxyx()
    render_cell = render_cell_braille if use_braille else render_cell_ascii

    for y, (row_grid, row_ink) in enumerate(zip(canvas.grid, canvas.c_grid)):
        if y + top >= th:
            break
        for x in range(min(tw - 1, len(row_grid))):
            mask = row_grid[x]
            if not mask:
                continue
            attr = curses.color_pair(ink_pairs.get(row_ink[x], 0))
            try:
                stdscr.addstr(y + top, x, render_cell(mask), attr)
            except curses.error:
                # Writing the bottom-right cell moves the cursor off-screen
                pass
