#
# PROJECT: wireframe-pipeline
# MODULE: wireframe_pipeline/rasterizer.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-17
#


def draw_line_dda(canvas, x0, y0, x1, y1, ink):
    """Draws a line using the DDA algorithm."""
    ix0, iy0 = int(round(x0)), int(round(y0))
    ix1, iy1 = int(round(x1)), int(round(y1))

    dx = ix1 - ix0
    dy = iy1 - iy0
    if dx == 0 and dy == 0:
        canvas.set_pixel(ix0, iy0, ink)
        return

    step = abs(dx) if abs(dx) > abs(dy) else abs(dy)
    x_inc = dx / step
    y_inc = dy / step

    cx, cy = float(ix0), float(iy0)
    for _ in range(step + 1):
        canvas.set_pixel(int(round(cx)), int(round(cy)), ink)
        cx += x_inc; cy += y_inc


def draw_marker(canvas, x, y, size, ink):
    """Fill a ``size`` x ``size`` square centred on (x, y)."""
    if size <= 0:
        return
    half = size / 2.0
    x_start, y_start = int(round(x - half)), int(round(y - half))
    for py in range(y_start, y_start + size):
        for px in range(x_start, x_start + size):
            canvas.set_pixel(px, py, ink)
