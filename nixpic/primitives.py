"""Scalar and array primitives used by the particle pushers and shape functions.

Every function accepts either plain Python numbers or NumPy arrays. Arrays are
processed element by element, so a batch of particles can be handled at once.
"""

from __future__ import annotations

import math
import numbers
from typing import Any, Tuple

import numpy as np

__all__ = [
    "to_int",
    "to_float",
    "digitize",
    "sign",
    "ifthenelse",
    "lorentz_factor",
    "push_boris",
    "push_vay",
    "push_higuera_cary",
]

Velocity = Tuple[Any, Any, Any]


def _is_vector(x: Any) -> bool:
    return isinstance(x, np.ndarray)


def _require_real(x: Any, name: str) -> None:
    if _is_vector(x):
        if x.dtype.kind not in "fiu":
            raise TypeError(f"{name} requires a real-valued array, got dtype {x.dtype}")
    elif isinstance(x, bool) or not isinstance(x, numbers.Real):
        raise TypeError(f"{name} requires a real number or a numeric array, got {type(x).__name__}")


def _require_integral(x: Any, name: str) -> None:
    if _is_vector(x):
        if x.dtype.kind not in "iu":
            raise TypeError(f"{name} requires an integer array, got dtype {x.dtype}")
    elif isinstance(x, bool) or not isinstance(x, numbers.Integral):
        raise TypeError(f"{name} requires an integer or an integer array, got {type(x).__name__}")


def _sqrt(x: Any) -> Any:
    return np.sqrt(x) if _is_vector(x) else math.sqrt(x)


def to_int(x: Any) -> Any:
    """Truncate towards zero and convert to integer."""
    _require_real(x, "to_int")
    if _is_vector(x):
        return x.astype(np.int64)
    return int(x)


def to_float(x: Any) -> Any:
    """Convert an integer (or integer array) to double precision."""
    _require_integral(x, "to_float")
    if _is_vector(x):
        return x.astype(np.float64)
    return float(x)


def digitize(x: Any, xmin: Any, rdx: Any) -> Any:
    """Return the grid index ``floor((x - xmin) * rdx)`` as integer."""
    _require_real(x, "digitize")
    value = (x - xmin) * rdx
    if _is_vector(value):
        return np.floor(value).astype(np.int64)
    return int(math.floor(value))


def sign(x: Any) -> Any:
    """Return +1.0 or -1.0 carrying the sign of ``x`` (signed zeros included)."""
    _require_real(x, "sign")
    if _is_vector(x):
        return np.copysign(1.0, x)
    return math.copysign(1.0, x)


def ifthenelse(cond: Any, x: Any, y: Any) -> Any:
    """Select ``x`` where ``cond`` holds and ``y`` elsewhere."""
    if _is_vector(cond) or _is_vector(x) or _is_vector(y):
        return np.where(cond, x, y)
    return x if cond else y


def lorentz_factor(ux: Any, uy: Any, uz: Any, rc: Any) -> Any:
    """Lorentz factor for four-velocity ``(ux, uy, uz)`` and ``rc = 1/c``."""
    return _sqrt(1 + (ux * ux + uy * uy + uz * uz) * rc * rc)


def push_boris(ux, uy, uz, ex, ey, ez, bx, by, bz, cc) -> Velocity:
    """Boris pusher; fields are pre-scaled, returns the updated four-velocity."""
    ux = ux + ex
    uy = uy + ey
    uz = uz + ez

    gm = 1 / _sqrt(cc * cc + ux * ux + uy * uy + uz * uz)

    bx = bx * gm
    by = by * gm
    bz = bz * gm
    bb = 2.0 / (1.0 + bx * bx + by * by + bz * bz)

    vx = ux + (uy * bz - uz * by)
    vy = uy + (uz * bx - ux * bz)
    vz = uz + (ux * by - uy * bx)

    ux = ux + (vy * bz - vz * by) * bb + ex
    uy = uy + (vz * bx - vx * bz) * bb + ey
    uz = uz + (vx * by - vy * bx) * bb + ez
    return ux, uy, uz


def push_vay(ux, uy, uz, ex, ey, ez, bx, by, bz, cc) -> Velocity:
    """Vay (2008) pusher; returns the updated four-velocity."""
    gm = 1 / _sqrt(cc * cc + ux * ux + uy * uy + uz * uz)
    vx = ux + 2 * ex + gm * (uy * bz - uz * by)
    vy = uy + 2 * ey + gm * (uz * bx - ux * bz)
    vz = uz + 2 * ez + gm * (ux * by - uy * bx)

    # Lorentz factor from Eq. (11) of Vay (2008)
    gm = cc * cc + vx * vx + vy * vy + vz * vz
    bb = bx * bx + by * by + bz * bz
    bu = bx * vx + by * vy + bz * vz
    xx = gm - bb
    yy = bb + bu * bu
    gm = 1 / _sqrt(0.5 * (xx + _sqrt(xx * xx + 4 * yy)))

    bx = bx * gm
    by = by * gm
    bz = bz * gm
    bu = bx * vx + by * vy + bz * vz
    bb = 1.0 / (1.0 + bx * bx + by * by + bz * bz)

    ux = (vx + bu * bx + (vy * bz - vz * by)) * bb
    uy = (vy + bu * by + (vz * bx - vx * bz)) * bb
    uz = (vz + bu * bz + (vx * by - vy * bx)) * bb
    return ux, uy, uz


def push_higuera_cary(ux, uy, uz, ex, ey, ez, bx, by, bz, cc) -> Velocity:
    """Higuera-Cary (2017) pusher; returns the updated four-velocity."""
    ux = ux + ex
    uy = uy + ey
    uz = uz + ez

    # Lorentz factor from Eq. (20) of Higuera-Cary (2017)
    gm = cc * cc + ux * ux + uy * uy + uz * uz
    bb = bx * bx + by * by + bz * bz
    bu = bx * ux + by * uy + bz * uz
    xx = gm - bb
    yy = bb + bu * bu
    gm = 1 / _sqrt(0.5 * (xx + _sqrt(xx * xx + 4 * yy)))

    bx = bx * gm
    by = by * gm
    bz = bz * gm
    bb = 2.0 / (1.0 + bx * bx + by * by + bz * bz)

    vx = ux + (uy * bz - uz * by)
    vy = uy + (uz * bx - ux * bz)
    vz = uz + (ux * by - uy * bx)

    ux = ux + (vy * bz - vz * by) * bb + ex
    uy = uy + (vz * bx - vx * bz) * bb + ey
    uz = uz + (vx * by - vy * bx) * bb + ez
    return ux, uy, uz