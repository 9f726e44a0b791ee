#
# PROJECT: wireframe-pipeline
# MODULE: wireframe_pipeline/math_utils.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-17
#

import logging
import math
from functools import reduce

from .errors import DegenerateGeometryError

log = logging.getLogger(__name__)

# Pivot magnitude below which a matrix is treated as singular
SINGULAR_EPSILON = 1e-12


class Vec3:
    """Immutable 3-component vector."""
    __slots__ = ('x', 'y', 'z')

    def __init__(self, x: float, y: float, z: float):
        self.x = float(x)
        self.y = float(y)
        self.z = float(z)

    def __repr__(self):
        return f"Vec3({self.x:.2f}, {self.y:.2f}, {self.z:.2f})"

    def __iter__(self):
        yield self.x
        yield self.y
        yield self.z

    def __getitem__(self, index):
        if index == 0: return self.x
        if index == 1: return self.y
        if index == 2: return self.z
        raise IndexError("Vec3 index out of range")

    def __eq__(self, other):
        if isinstance(other, Vec3):
            return (self.x, self.y, self.z) == (other.x, other.y, other.z)
        return NotImplemented

    def __hash__(self):
        return hash((self.x, self.y, self.z))

    def __add__(self, other):
        if isinstance(other, Vec3):
            return Vec3(self.x + other.x, self.y + other.y, self.z + other.z)
        return NotImplemented

    def __sub__(self, other):
        if isinstance(other, Vec3):
            return Vec3(self.x - other.x, self.y - other.y, self.z - other.z)
        return NotImplemented

    def __neg__(self):
        return Vec3(-self.x, -self.y, -self.z)

    def __mul__(self, scalar):
        return Vec3(self.x * scalar, self.y * scalar, self.z * scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar):
        return Vec3(self.x / scalar, self.y / scalar, self.z / scalar)

    def dot(self, other) -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other) -> 'Vec3':
        return Vec3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x
        )

    def magnitude(self) -> float:
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)

    def normalize(self) -> 'Vec3':
        """Unit vector in the same direction; the zero vector maps to itself."""
        m = self.magnitude()
        if m == 0:
            log.warning("normalize() called on a zero-length vector")
            return Vec3(0, 0, 0)
        return self / m

    def to_vec4(self, w: float = 1.0) -> 'Vec4':
        return Vec4(self.x, self.y, self.z, w)


class Vec4:
    """Immutable homogeneous 4-component vector."""
    __slots__ = ('x', 'y', 'z', 'w')

    def __init__(self, x: float, y: float, z: float, w: float = 1.0):
        self.x = float(x)
        self.y = float(y)
        self.z = float(z)
        self.w = float(w)

    def __repr__(self):
        return f"Vec4({self.x:.3f}, {self.y:.3f}, {self.z:.3f}, {self.w:.3f})"

    def __iter__(self):
        yield self.x
        yield self.y
        yield self.z
        yield self.w

    def __getitem__(self, index):
        if index == 0: return self.x
        if index == 1: return self.y
        if index == 2: return self.z
        if index == 3: return self.w
        raise IndexError("Vec4 index out of range")

    def __eq__(self, other):
        if isinstance(other, Vec4):
            return tuple(self) == tuple(other)
        return NotImplemented

    def __hash__(self):
        return hash(tuple(self))

    def __add__(self, other):
        if isinstance(other, Vec4):
            return Vec4(self.x + other.x, self.y + other.y,
                        self.z + other.z, self.w + other.w)
        return NotImplemented

    def __sub__(self, other):
        if isinstance(other, Vec4):
            return Vec4(self.x - other.x, self.y - other.y,
                        self.z - other.z, self.w - other.w)
        return NotImplemented

    def __mul__(self, scalar):
        return Vec4(self.x * scalar, self.y * scalar, self.z * scalar, self.w * scalar)

    __rmul__ = __mul__

    def dot(self, other) -> float:
        return (self.x * other.x + self.y * other.y +
                self.z * other.z + self.w * other.w)

    def xyz(self) -> Vec3:
        return Vec3(self.x, self.y, self.z)

    def dehomogenize(self) -> 'Vec4':
        """Divide x, y, z by w. A zero w is returned untouched."""
        if self.w == 0.0:
            log.warning("dehomogenize() called on a point at infinity: %r", self)
            return self
        return Vec4(self.x / self.w, self.y / self.w, self.z / self.w, 1.0)


class Mat4:
    """4x4 Matrix stored as [row][col]. Column vectors: ``M.mul_vec4(v)`` is ``M * v``.

    Instances are treated as values: every operation returns a new matrix and
    nothing in the package writes into ``m`` after construction.
    """
    __slots__ = ('m',)

    def __init__(self, data=None):
        if data:
            self.m = [[float(c) for c in row] for row in data]
        else:
            self.m = [[0.0]*4 for _ in range(4)]

    @classmethod
    def zero(cls) -> 'Mat4':
        return cls()

    @classmethod
    def identity(cls) -> 'Mat4':
        res = cls()
        for i in range(4):
            res.m[i][i] = 1.0
        return res

    @classmethod
    def chain(cls, *matrices) -> 'Mat4':
        """Product of ``matrices`` read left to right; the rightmost applies first."""
        if not matrices:
            return cls.identity()
        return reduce(lambda a, b: a @ b, matrices)

    def __repr__(self):
        rows = ", ".join("[" + ", ".join(f"{c:.3f}" for c in row) + "]" for row in self.m)
        return f"Mat4([{rows}])"

    def __eq__(self, other):
        if isinstance(other, Mat4):
            return self.m == other.m
        return NotImplemented

    __hash__ = None

    def __getitem__(self, index):
        return tuple(self.m[index])

    def rows(self):
        return tuple(tuple(row) for row in self.m)

    def __matmul__(self, other):
        if isinstance(other, Mat4):
            res = Mat4()
            for r in range(4):
                for c in range(4):
                    val = 0.0
                    for k in range(4):
                        val += self.m[r][k] * other.m[k][c]
                    res.m[r][c] = val
            return res
        if isinstance(other, Vec4):
            return self.mul_vec4(other)
        return NotImplemented

    def mul_vec4(self, v: Vec4) -> Vec4:
        m = self.m
        return Vec4(
            m[0][0]*v.x + m[0][1]*v.y + m[0][2]*v.z + m[0][3]*v.w,
            m[1][0]*v.x + m[1][1]*v.y + m[1][2]*v.z + m[1][3]*v.w,
            m[2][0]*v.x + m[2][1]*v.y + m[2][2]*v.z + m[2][3]*v.w,
            m[3][0]*v.x + m[3][1]*v.y + m[3][2]*v.z + m[3][3]*v.w,
        )

    def mul_vec3(self, v: Vec3) -> Vec3:
        """Multiply with Vec3 as if w=1 and dehomogenize the result."""
        return self.mul_vec4(v.to_vec4()).dehomogenize().xyz()

    def transpose(self) -> 'Mat4':
        return Mat4([[self.m[c][r] for c in range(4)] for r in range(4)])

    def inverse(self) -> 'Mat4':
        """General inverse by Gauss-Jordan elimination with partial pivoting.

        Raises:
            DegenerateGeometryError: the matrix is singular.
        """
        a = [row[:] for row in self.m]
        inv = Mat4.identity().m

        for col in range(4):
            pivot = max(range(col, 4), key=lambda r: abs(a[r][col]))
            if abs(a[pivot][col]) < SINGULAR_EPSILON:
                raise DegenerateGeometryError(f"matrix is singular: {self!r}")
            if pivot != col:
                a[col], a[pivot] = a[pivot], a[col]
                inv[col], inv[pivot] = inv[pivot], inv[col]

            p = a[col][col]
            a[col] = [val / p for val in a[col]]
            inv[col] = [val / p for val in inv[col]]

            for r in range(4):
                if r == col:
                    continue
                f = a[r][col]
                if f != 0.0:
                    a[r] = [rv - f * cv for rv, cv in zip(a[r], a[col])]
                    inv[r] = [rv - f * cv for rv, cv in zip(inv[r], inv[col])]

        return Mat4(inv)
