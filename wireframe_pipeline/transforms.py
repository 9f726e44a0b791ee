#
# PROJECT: wireframe-pipeline
# MODULE: wireframe_pipeline/transforms.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-17
#
"""
Canonical 4x4 transform matrices.

Every function here is pure and returns a fresh ``Mat4``. Matrices act on
column vectors (``M * v``), so ``Mat4.chain(a, b, c)`` applies ``c`` first.
Inputs are not validated: NaN in, NaN out. Validation lives with the scene
and model builders.
"""

import math

from .errors import InvalidParameterError
from .math_utils import Mat4, Vec3

AXES = ('x', 'y', 'z')


def translate(tx: float, ty: float, tz: float) -> Mat4:
    return Mat4([[1, 0, 0, tx],
                 [0, 1, 0, ty],
                 [0, 0, 1, tz],
                 [0, 0, 0, 1]])


def scale(sx: float, sy: float, sz: float) -> Mat4:
    return Mat4([[sx, 0, 0, 0],
                 [0, sy, 0, 0],
                 [0, 0, sz, 0],
                 [0, 0, 0, 1]])


def rotate_x(theta: float) -> Mat4:
    c, s = math.cos(theta), math.sin(theta)
    return Mat4([[1, 0, 0, 0],
                 [0, c, -s, 0],
                 [0, s, c, 0],
                 [0, 0, 0, 1]])


def rotate_y(theta: float) -> Mat4:
    c, s = math.cos(theta), math.sin(theta)
    return Mat4([[c, 0, s, 0],
                 [0, 1, 0, 0],
                 [-s, 0, c, 0],
                 [0, 0, 0, 1]])


def rotate_z(theta: float) -> Mat4:
    c, s = math.cos(theta), math.sin(theta)
    return Mat4([[c, -s, 0, 0],
                 [s, c, 0, 0],
                 [0, 0, 1, 0],
                 [0, 0, 0, 1]])


_ROTATIONS = {'x': rotate_x, 'y': rotate_y, 'z': rotate_z}


def rotate_axis(axis: str, theta: float) -> Mat4:
    """Rotation about the named world axis ('x', 'y' or 'z')."""
    key = axis.lower() if isinstance(axis, str) else axis
    if key not in _ROTATIONS:
        raise InvalidParameterError(f"unknown rotation axis {axis!r}, expected one of {AXES}",
                                    field="axis")
    return _ROTATIONS[key](theta)


def shear_xy(shx: float, shy: float) -> Mat4:
    """Shear parallel to the xy-plane: x += shx*z, y += shy*z."""
    return Mat4([[1, 0, shx, 0],
                 [0, 1, shy, 0],
                 [0, 0, 1, 0],
                 [0, 0, 0, 1]])


def vrc_axes(prp: Vec3, srp: Vec3, vup: Vec3):
    """View reference axes (u, v, n) for an eye at ``prp`` looking at ``srp``."""
    n = (prp - srp).normalize()
    u = vup.cross(n).normalize()
    v = n.cross(u)
    return u, v, n


def view_orientation_matrix(prp: Vec3, srp: Vec3, vup: Vec3) -> Mat4:
    """Move the eye to the origin and align (u, v, n) with (x, y, z)."""
    u, v, n = vrc_axes(prp, srp, vup)
    rotate = Mat4([[u.x, u.y, u.z, 0],
                   [v.x, v.y, v.z, 0],
                   [n.x, n.y, n.z, 0],
                   [0, 0, 0, 1]])
    return rotate @ translate(-prp.x, -prp.y, -prp.z)


def perspective_view_matrix(prp: Vec3, srp: Vec3, vup: Vec3, clip) -> Mat4:
    """World space to the canonical perspective view volume.

    ``clip`` is ``[left, right, bottom, top, near, far]`` with near/far given
    as positive distances. In the canonical volume x and y lie in [z, -z] and
    z lies in [-1, -near/far].
    """
    left, right, bottom, top, near, far = clip

    # center of window; direction of projection runs from the eye through it
    cw = Vec3((left + right) / 2, (bottom + top) / 2, -near)
    shear = shear_xy(-cw.x / cw.z, -cw.y / cw.z)

    sper = scale((2 * near) / ((right - left) * far),
                 (2 * near) / ((top - bottom) * far),
                 1 / far)

    return Mat4.chain(sper, shear, view_orientation_matrix(prp, srp, vup))


def canonical_z_min(clip) -> float:
    """Near plane of the canonical volume (``-near / far``)."""
    return -clip[4] / clip[5]


def project_to_plane() -> Mat4:
    """Perspective projection onto z = -1; callers dehomogenize the result."""
    return Mat4([[1, 0, 0, 0],
                 [0, 1, 0, 0],
                 [0, 0, 1, 0],
                 [0, 0, -1, 0]])


def viewport_matrix(width: float, height: float) -> Mat4:
    """Map the projected [-1, 1] square onto [0, width] x [0, height]."""
    return Mat4([[width / 2, 0, 0, width / 2],
                 [0, height / 2, 0, height / 2],
                 [0, 0, 1, 0],
                 [0, 0, 0, 1]])
