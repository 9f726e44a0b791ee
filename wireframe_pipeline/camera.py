#
# PROJECT: wireframe-pipeline
# MODULE: wireframe_pipeline/camera.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-17
#

import math

from . import transforms
from .errors import InvalidParameterError
from .math_utils import Mat4, Vec3
from .params import as_number, as_vec3, require

# Cross-product magnitude below which vup counts as parallel to the view direction
PARALLEL_EPSILON = 1e-9


class View:
    """
    Perspective camera: eye (prp), look-at target (srp), up hint (vup) and
    the clip window ``[left, right, bottom, top, near, far]``.

    A View never changes after construction. The camera operations
    (orbit, truck, dolly) return a new View, so a frame being drawn keeps
    the camera it started with.
    """
    __slots__ = ('prp', 'srp', 'vup', 'clip')

    def __init__(self, prp: Vec3, srp: Vec3, vup: Vec3, clip):
        self.prp = prp
        self.srp = srp
        self.vup = vup
        self.clip = tuple(float(c) for c in clip)

    @classmethod
    def from_descriptor(cls, descriptor: dict) -> 'View':
        """Build a validated View from ``{prp, srp, vup, clip}``.

        Raises:
            InvalidParameterError: malformed vectors, an empty clip window,
                near/far out of order, prp == srp, or vup parallel to the
                view direction.
        """
        if not isinstance(descriptor, dict):
            raise InvalidParameterError(f"expected a mapping, got {descriptor!r}", field="view")
        prp = as_vec3(require(descriptor, 'prp', 'view'), 'view.prp')
        srp = as_vec3(require(descriptor, 'srp', 'view'), 'view.srp')
        vup = as_vec3(require(descriptor, 'vup', 'view'), 'view.vup')

        raw_clip = require(descriptor, 'clip', 'view')
        if isinstance(raw_clip, (str, bytes)) or not hasattr(raw_clip, '__len__') or len(raw_clip) != 6:
            raise InvalidParameterError(
                f"expected [left, right, bottom, top, near, far], got {raw_clip!r}",
                field="view.clip")
        clip = [as_number(c, f"view.clip[{i}]") for i, c in enumerate(raw_clip)]
        left, right, bottom, top, near, far = clip
        if not left < right:
            raise InvalidParameterError("left must be less than right", field="view.clip")
        if not bottom < top:
            raise InvalidParameterError("bottom must be less than top", field="view.clip")
        if not 0 < near < far:
            raise InvalidParameterError(
                f"expected 0 < near < far, got near={near}, far={far}", field="view.clip")

        view = cls(prp, srp, vup, clip)
        view.check_basis()
        return view

    def check_basis(self):
        """Raise InvalidParameterError unless (u, v, n) can be formed."""
        direction = self.prp - self.srp
        if direction.magnitude() == 0:
            raise InvalidParameterError("prp and srp must differ", field="view")
        if self.vup.cross(direction.normalize()).magnitude() < PARALLEL_EPSILON:
            raise InvalidParameterError("vup is parallel to the view direction", field="view.vup")

    def __repr__(self):
        return f"View(prp={self.prp!r}, srp={self.srp!r}, vup={self.vup!r}, clip={self.clip!r})"

    def __eq__(self, other):
        if isinstance(other, View):
            return (self.prp, self.srp, self.vup, self.clip) == \
                   (other.prp, other.srp, other.vup, other.clip)
        return NotImplemented

    __hash__ = None

    # ── View reference coordinates ────────────────────────────────────
    def axes(self):
        """(u, v, n) unit axes of the view reference coordinate system."""
        return transforms.vrc_axes(self.prp, self.srp, self.vup)

    @property
    def n(self) -> Vec3:
        return self.axes()[2]

    @property
    def u(self) -> Vec3:
        return self.axes()[0]

    @property
    def v(self) -> Vec3:
        return self.axes()[1]

    @property
    def z_min(self) -> float:
        return transforms.canonical_z_min(self.clip)

    def perspective_matrix(self) -> Mat4:
        return transforms.perspective_view_matrix(self.prp, self.srp, self.vup, self.clip)

    def _replace(self, prp=None, srp=None) -> 'View':
        return View(prp if prp is not None else self.prp,
                    srp if srp is not None else self.srp,
                    self.vup, self.clip)

    # ── Camera operations ─────────────────────────────────────────────
    def orbit(self, degrees: float) -> 'View':
        """Swing the target about the view's v-axis through the eye.

        Positive angles turn the camera to the left.
        """
        u, v, n = self.axes()
        to_origin = transforms.translate(-self.prp.x, -self.prp.y, -self.prp.z)
        align = Mat4([[u.x, u.y, u.z, 0],
                      [v.x, v.y, v.z, 0],
                      [n.x, n.y, n.z, 0],
                      [0, 0, 0, 1]])
        turn = Mat4.chain(to_origin.inverse(), align.inverse(),
                          transforms.rotate_y(math.radians(degrees)),
                          align, to_origin)
        srp = turn.mul_vec4(self.srp.to_vec4()).dehomogenize().xyz()
        return self._replace(srp=srp)

    def orbit_left(self, degrees: float = 15.0) -> 'View':
        return self.orbit(degrees)

    def orbit_right(self, degrees: float = 15.0) -> 'View':
        return self.orbit(-degrees)

    def truck(self, distance: float) -> 'View':
        """Slide eye and target along u; positive moves right."""
        step = self.u * distance
        return self._replace(prp=self.prp + step, srp=self.srp + step)

    def truck_left(self, distance: float = 1.0) -> 'View':
        return self.truck(-distance)

    def truck_right(self, distance: float = 1.0) -> 'View':
        return self.truck(distance)

    def dolly(self, distance: float) -> 'View':
        """Slide eye and target along n; positive moves backward (away from srp)."""
        step = self.n * distance
        return self._replace(prp=self.prp + step, srp=self.srp + step)

    def dolly_forward(self, distance: float = 1.0) -> 'View':
        return self.dolly(-distance)

    def dolly_backward(self, distance: float = 1.0) -> 'View':
        return self.dolly(distance)
