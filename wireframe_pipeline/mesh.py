#
# PROJECT: wireframe-pipeline
# MODULE: wireframe_pipeline/mesh.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-17
#
"""
Model descriptors and the wireframe topology they expand into.

Each model ``type`` has its own shape class holding only the parameters that
shape understands. ``from_descriptor`` validates eagerly and ``build`` emits
homogeneous vertices (w = 1) plus edges: polylines of vertex indices, closed
when the first index repeats at the end.

Primitive shapes are positioned by the centre of their bounding box.
"""

import logging
import math
from dataclasses import dataclass, field
from numbers import Integral
from typing import Optional, Tuple

from .errors import InvalidParameterError
from .math_utils import Mat4, Vec3, Vec4
from .params import as_count, as_number, as_positive, as_vec3, require
from .transforms import AXES

log = logging.getLogger(__name__)

ORIGIN = Vec3(0.0, 0.0, 0.0)


@dataclass(frozen=True)
class Animation:
    """Constant-rate spin about a world axis through the model's center."""
    axis: str
    rps: float

    @classmethod
    def from_descriptor(cls, descriptor) -> 'Animation':
        if not isinstance(descriptor, dict):
            raise InvalidParameterError(f"expected a mapping, got {descriptor!r}", field="animation")
        axis = require(descriptor, 'axis', 'animation')
        if not isinstance(axis, str) or axis.lower() not in AXES:
            raise InvalidParameterError(f"unknown axis {axis!r}, expected one of {AXES}",
                                        field="animation.axis")
        rps = as_number(require(descriptor, 'rps', 'animation'), 'animation.rps')
        return cls(axis=axis.lower(), rps=rps)


# ── Shapes ──────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class GenericShape:
    vertices: Tuple[Vec3, ...]
    edges: Tuple[Tuple[int, ...], ...]

    @classmethod
    def from_descriptor(cls, d: dict) -> 'GenericShape':
        raw_vertices = require(d, 'vertices', 'generic model')
        raw_edges = require(d, 'edges', 'generic model')
        if not isinstance(raw_vertices, (list, tuple)):
            raise InvalidParameterError("expected a list of [x, y, z]", field="vertices")
        if not isinstance(raw_edges, (list, tuple)):
            raise InvalidParameterError("expected a list of index lists", field="edges")

        vertices = tuple(as_vec3(v, f"vertices[{i}]") for i, v in enumerate(raw_vertices))

        # Copy into fresh tuples so nothing is shared with the caller's lists
        edges = []
        for i, edge in enumerate(raw_edges):
            if not isinstance(edge, (list, tuple)) or len(edge) < 2:
                raise InvalidParameterError(f"expected at least 2 indices, got {edge!r}",
                                            field=f"edges[{i}]")
            for idx in edge:
                if isinstance(idx, bool) or not isinstance(idx, Integral):
                    raise InvalidParameterError(f"vertex index {idx!r} is not an integer",
                                                field=f"edges[{i}]")
                if not 0 <= idx < len(vertices):
                    raise InvalidParameterError(
                        f"vertex index {idx} out of range for {len(vertices)} vertices",
                        field=f"edges[{i}]")
            edges.append(tuple(int(idx) for idx in edge))
        return cls(vertices=vertices, edges=tuple(edges))

    def build(self):
        return tuple(v.to_vec4() for v in self.vertices), self.edges


@dataclass(frozen=True)
class CubeShape:
    center: Vec3
    width: float
    height: float
    depth: float

    @classmethod
    def from_descriptor(cls, d: dict) -> 'CubeShape':
        return cls(center=_center_of(d),
                   width=as_positive(require(d, 'width', 'cube'), 'width'),
                   height=as_positive(require(d, 'height', 'cube'), 'height'),
                   depth=as_positive(require(d, 'depth', 'cube'), 'depth'))

    def build(self):
        c = self.center
        hw, hh, hd = self.width / 2, self.height / 2, self.depth / 2
        corners = [(-hw, hh), (hw, hh), (hw, -hh), (-hw, -hh)]
        # 0-3 back face (z - hd), 4-7 front face (z + hd), same winding
        vertices = tuple(Vec4(c.x + dx, c.y + dy, c.z + dz, 1.0)
                         for dz in (-hd, hd) for dx, dy in corners)
        edges = ((0, 1, 2, 3, 0),
                 (4, 5, 6, 7, 4),
                 (0, 4), (1, 5), (2, 6), (3, 7))
        return vertices, edges


def _ring(center: Vec3, y: float, radius: float, count: int):
    """``count`` points evenly spaced on a horizontal circle at height ``y``."""
    step = 2 * math.pi / count
    return [Vec4(center.x + radius * math.cos(i * step), y,
                 center.z + radius * math.sin(i * step), 1.0)
            for i in range(count)]


def _loop(first: int, count: int):
    return tuple(range(first, first + count)) + (first,)


@dataclass(frozen=True)
class ConeShape:
    center: Vec3
    radius: float
    height: float
    sides: int

    @classmethod
    def from_descriptor(cls, d: dict) -> 'ConeShape':
        return cls(center=_center_of(d),
                   radius=as_positive(require(d, 'radius', 'cone'), 'radius'),
                   height=as_positive(require(d, 'height', 'cone'), 'height'),
                   sides=as_count(require(d, 'sides', 'cone'), 'sides', 3))

    def build(self):
        c = self.center
        apex = Vec4(c.x, c.y + self.height / 2, c.z, 1.0)
        base = _ring(c, c.y - self.height / 2, self.radius, self.sides)
        vertices = tuple([apex] + base)
        edges = (_loop(1, self.sides),) + tuple((i, 0) for i in range(1, self.sides + 1))
        return vertices, edges


@dataclass(frozen=True)
class CylinderShape:
    center: Vec3
    radius: float
    height: float
    sides: int

    @classmethod
    def from_descriptor(cls, d: dict) -> 'CylinderShape':
        return cls(center=_center_of(d),
                   radius=as_positive(require(d, 'radius', 'cylinder'), 'radius'),
                   height=as_positive(require(d, 'height', 'cylinder'), 'height'),
                   sides=as_count(require(d, 'sides', 'cylinder'), 'sides', 3))

    def build(self):
        c, s = self.center, self.sides
        bottom = _ring(c, c.y - self.height / 2, self.radius, s)
        top = _ring(c, c.y + self.height / 2, self.radius, s)
        vertices = tuple(bottom + top)
        edges = (_loop(0, s), _loop(s, s)) + tuple((i, i + s) for i in range(s))
        return vertices, edges


@dataclass(frozen=True)
class SphereShape:
    """
    UV sphere: a pole, ``stacks - 1`` latitude rings of ``slices`` vertices,
    then the opposite pole. Edges are one closed loop per ring plus one
    pole-to-pole meridian per slice, i.e. ``slices + stacks - 1`` polylines
    covering ``slices * (2 * stacks - 1)`` segments.
    """
    center: Vec3
    radius: float
    slices: int
    stacks: int

    @classmethod
    def from_descriptor(cls, d: dict) -> 'SphereShape':
        return cls(center=_center_of(d),
                   radius=as_positive(require(d, 'radius', 'sphere'), 'radius'),
                   slices=as_count(require(d, 'slices', 'sphere'), 'slices', 3),
                   stacks=as_count(require(d, 'stacks', 'sphere'), 'stacks', 2))

    def build(self):
        c, r = self.center, self.radius
        slices, stacks = self.slices, self.stacks

        vertices = [Vec4(c.x, c.y + r, c.z, 1.0)]
        for k in range(1, stacks):
            phi = math.pi * k / stacks
            vertices.extend(_ring(c, c.y + r * math.cos(phi), r * math.sin(phi), slices))
        vertices.append(Vec4(c.x, c.y - r, c.z, 1.0))
        south = len(vertices) - 1

        rings = tuple(_loop(1 + k * slices, slices) for k in range(stacks - 1))
        meridians = tuple((0,) + tuple(1 + k * slices + j for k in range(stacks - 1)) + (south,)
                          for j in range(slices))
        return tuple(vertices), rings + meridians


SHAPES = {
    'generic': GenericShape,
    'cube': CubeShape,
    'cone': ConeShape,
    'cylinder': CylinderShape,
    'sphere': SphereShape,
}


def _center_of(d: dict) -> Vec3:
    if 'center' in d:
        return as_vec3(d['center'], 'center')
    return ORIGIN


# ── Model ───────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class Model:
    """A processed model: object-space topology plus its animation state.

    ``matrix`` is the per-frame animation transform. It starts as identity
    and is replaced (never edited) on each animation tick; ``vertices`` are
    never rewritten.
    """
    type: str
    vertices: Tuple[Vec4, ...]
    edges: Tuple[Tuple[int, ...], ...]
    center: Vec3 = ORIGIN
    animation: Optional[Animation] = None
    matrix: Mat4 = field(default_factory=Mat4.identity, compare=False)

    @property
    def segment_count(self) -> int:
        return sum(len(edge) - 1 for edge in self.edges)


def build_model(descriptor: dict, index: int = 0) -> Model:
    """Expand one model descriptor into a Model.

    Raises:
        InvalidParameterError: unknown type or invalid shape/animation parameters.
    """
    if not isinstance(descriptor, dict):
        raise InvalidParameterError(f"expected a mapping, got {descriptor!r}",
                                    field=f"models[{index}]")
    kind = descriptor.get('type')
    shape_cls = SHAPES.get(kind) if isinstance(kind, str) else None
    if shape_cls is None:
        raise InvalidParameterError(
            f"unknown model type {kind!r}, expected one of {sorted(SHAPES)}",
            field=f"models[{index}].type")

    try:
        shape = shape_cls.from_descriptor(descriptor)
        animation = None
        if descriptor.get('animation') is not None:
            animation = Animation.from_descriptor(descriptor['animation'])
        center = _center_of(descriptor)
    except InvalidParameterError as e:
        field = f"models[{index}].{e.field}" if e.field else f"models[{index}]"
        raise InvalidParameterError(e.detail, field=field) from e

    if animation is not None and 'center' not in descriptor:
        log.warning("models[%d] (%s) is animated but has no center; rotating about the origin",
                    index, kind)

    vertices, edges = shape.build()
    return Model(type=kind, vertices=vertices, edges=edges,
                 center=center, animation=animation)
