#
# PROJECT: wireframe-pipeline
# MODULE: wireframe_pipeline/clipping.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-17
#
"""
Cohen-Sutherland line clipping against the canonical perspective volume.

Inside the volume a point satisfies::

    z <= x <= -z,   z <= y <= -z,   -1 <= z <= z_min

where ``z_min = -near / far``. Every test allows ``eps`` of slack so points
sitting on a plane count as inside.
"""

import logging
from typing import NamedTuple, Optional

from .math_utils import Vec4

log = logging.getLogger(__name__)

LEFT = 32    # 100000
RIGHT = 16   # 010000
BOTTOM = 8   # 001000
TOP = 4      # 000100
FAR = 2      # 000010
NEAR = 1     # 000001

FLOAT_EPSILON = 1e-6
PARALLEL_EPSILON = 1e-12
MAX_CLIP_DEPTH = 12


class LineSegment(NamedTuple):
    pt0: Vec4
    pt1: Vec4


def outcode(p: Vec4, z_min: float, eps: float = FLOAT_EPSILON) -> int:
    """Bitmask of the frustum planes ``p`` lies outside of."""
    code = 0
    if p.x < p.z - eps:
        code |= LEFT
    elif p.x > -p.z + eps:
        code |= RIGHT
    if p.y < p.z - eps:
        code |= BOTTOM
    elif p.y > -p.z + eps:
        code |= TOP
    if p.z < -1.0 - eps:
        code |= FAR
    elif p.z > z_min + eps:
        code |= NEAR
    return code


def edge_intersection(p_out: Vec4, p_in: Vec4, z_min: float,
                      eps: float = FLOAT_EPSILON,
                      parallel_eps: float = PARALLEL_EPSILON) -> Optional[Vec4]:
    """
    Where segment ``p_in -> p_out`` crosses the first plane ``p_out`` violates,
    checked in the order LEFT, RIGHT, BOTTOM, TOP, FAR, NEAR.

    Returns None when the segment runs (nearly) parallel to that plane, or
    when the crossing lies on the line beyond the segment's ends. In the
    latter case both endpoints are outside that plane, so nothing is visible.
    """
    dx = p_out.x - p_in.x
    dy = p_out.y - p_in.y
    dz = p_out.z - p_in.z

    if p_out.x < p_out.z - eps:
        num, den = -p_in.x + p_in.z, dx - dz
    elif p_out.x > -p_out.z + eps:
        num, den = p_in.x + p_in.z, -dx - dz
    elif p_out.y < p_out.z - eps:
        num, den = -p_in.y + p_in.z, dy - dz
    elif p_out.y > -p_out.z + eps:
        num, den = p_in.y + p_in.z, -dy - dz
    elif p_out.z < -1.0 - eps:
        num, den = -p_in.z - 1.0, dz
    elif p_out.z > z_min + eps:
        num, den = p_in.z - z_min, -dz
    else:
        # p_out is not outside any plane
        return p_out

    if abs(den) < parallel_eps:
        log.debug("segment %r -> %r is parallel to its clip plane", p_in, p_out)
        return None

    t = num / den
    if t < -eps or t > 1.0 + eps:
        log.debug("segment %r -> %r stays outside its clip plane (t=%g)", p_in, p_out, t)
        return None
    t = min(max(t, 0.0), 1.0)
    return Vec4(p_in.x + t * dx, p_in.y + t * dy, p_in.z + t * dz, 1.0)


def clip_line(line: LineSegment, z_min: float,
              eps: float = FLOAT_EPSILON,
              max_depth: int = MAX_CLIP_DEPTH,
              parallel_eps: float = PARALLEL_EPSILON,
              _depth: int = 0) -> Optional[LineSegment]:
    """
    Clip ``line`` to the canonical volume.

    Returns the line itself when it is already inside, a new LineSegment
    when an endpoint had to move, or None when nothing is visible.
    """
    out0 = outcode(line.pt0, z_min, eps)
    out1 = outcode(line.pt1, z_min, eps)

    if (out0 | out1) == 0:
        return line
    if (out0 & out1) != 0:
        return None
    if _depth >= max_depth:
        log.debug("clip of %r did not converge after %d steps; skipping", line, _depth)
        return None

    if out0 != 0:
        pt0 = edge_intersection(line.pt0, line.pt1, z_min, eps, parallel_eps)
        if pt0 is None:
            return None
        result = LineSegment(pt0, line.pt1)
    else:
        pt1 = edge_intersection(line.pt1, line.pt0, z_min, eps, parallel_eps)
        if pt1 is None:
            return None
        result = LineSegment(line.pt0, pt1)

    return clip_line(result, z_min, eps, max_depth, parallel_eps, _depth + 1)
