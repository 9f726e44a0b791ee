#
# PROJECT: wireframe-pipeline
# MODULE: wireframe_pipeline/params.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-17
#
"""Coercion helpers shared by the scene and model builders."""

import math
from numbers import Integral, Real

from .errors import InvalidParameterError
from .math_utils import Vec3

_MISSING = object()


def require(descriptor: dict, key: str, owner: str):
    value = descriptor.get(key, _MISSING)
    if value is _MISSING:
        raise InvalidParameterError(f"missing required key for {owner}", field=key)
    return value


def as_number(value, field: str) -> float:
    if isinstance(value, bool) or not isinstance(value, Real):
        raise InvalidParameterError(f"expected a number, got {value!r}", field=field)
    value = float(value)
    if not math.isfinite(value):
        raise InvalidParameterError(f"expected a finite number, got {value!r}", field=field)
    return value


def as_positive(value, field: str) -> float:
    value = as_number(value, field)
    if value <= 0:
        raise InvalidParameterError(f"must be positive, got {value!r}", field=field)
    return value


def as_count(value, field: str, minimum: int) -> int:
    """Integer >= ``minimum``. Integral floats such as ``4.0`` are accepted."""
    if isinstance(value, bool):
        raise InvalidParameterError(f"expected an integer, got {value!r}", field=field)
    if isinstance(value, Integral):
        count = int(value)
    elif isinstance(value, Real) and float(value).is_integer():
        count = int(value)
    else:
        raise InvalidParameterError(f"expected an integer, got {value!r}", field=field)
    if count < minimum:
        raise InvalidParameterError(f"must be >= {minimum}, got {count}", field=field)
    return count


def as_vec3(value, field: str) -> Vec3:
    if isinstance(value, Vec3):
        return value
    if isinstance(value, (str, bytes)) or not hasattr(value, '__len__') or len(value) != 3:
        raise InvalidParameterError(f"expected [x, y, z], got {value!r}", field=field)
    return Vec3(*(as_number(c, f"{field}[{i}]") for i, c in enumerate(value)))
