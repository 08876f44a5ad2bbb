"""Particle shape functions for charge assignment and field interpolation.

Each function takes the particle position ``x``, the grid position ``X`` and
``rdx = 1/dx``, and returns a tuple of weights at consecutive grid points.
Arguments may be plain numbers or NumPy arrays; arrays are handled element by
element, so a batch of particles can be processed in one call.

For an odd order the particle is assumed to satisfy ``X <= x < X + dx``; for
an even order ``X - dx/2 <= x < X + dx/2``. The weights refer to:

- first order:  (X, X + dx)
- second order: (X - dx, X, X + dx)
- third order:  (X - dx, X, X + dx, X + 2dx)
- fourth order: (X - 2dx, X - dx, X, X + dx, X + 2dx)

The ``shape_wt*`` variants implement the time-step dependent shapes of the WT
scheme (Y. Lu et al., J. Comput. Phys. 413, 109388 (2020)), where ``dt`` is
``c*dt/dx`` and ``rdt = 1/dt``.
"""

from __future__ import annotations

from typing import Any, Callable, Dict, Tuple

import numpy as np

from .primitives import ifthenelse

__all__ = [
    "shape_mc1",
    "shape_mc2",
    "shape_mc3",
    "shape_mc4",
    "shape_wt1",
    "shape_wt2",
    "shape_wt3",
    "shape_wt4",
    "shape_mc",
    "shape_wt",
]

Weights = Tuple[Any, ...]


def _is_vector(*values: Any) -> bool:
    return any(isinstance(v, np.ndarray) for v in values)


def _clamp(value: Any, low: float, high: float) -> Any:
    if _is_vector(value):
        return np.minimum(high, np.maximum(low, value))
    return min(high, max(low, value))


def shape_mc1(x: Any, X: Any, rdx: Any) -> Weights:
    """First-order shape function."""
    delta = (x - X) * rdx
    return (1 - delta, delta)


def shape_mc2(x: Any, X: Any, rdx: Any) -> Weights:
    """Second-order shape function."""
    w0 = (x - X) * rdx
    w1 = 0.5 - w0
    w2 = 0.5 + w0
    return (0.50 * w1 * w1, 0.75 - w0 * w0, 0.50 * w2 * w2)


def shape_mc3(x: Any, X: Any, rdx: Any) -> Weights:
    """Third-order shape function."""
    a = 1 / 6.0
    delta = (x - X) * rdx

    w1 = delta
    w2 = 1 - delta
    w1_pow2 = w1 * w1
    w2_pow2 = w2 * w2
    w1_pow3 = w1_pow2 * w1
    w2_pow3 = w2_pow2 * w2

    return (
        a * w2_pow3,
        a * (4 - 6 * w1_pow2 + 3 * w1_pow3),
        a * (4 - 6 * w2_pow2 + 3 * w2_pow3),
        a * w1_pow3,
    )


def shape_mc4(x: Any, X: Any, rdx: Any) -> Weights:
    """Fourth-order shape function."""
    a = 1 / 384.0
    b = 1 / 96.0
    c = 115 / 192.0
    d = 1 / 8.0
    delta = (x - X) * rdx

    w1 = 1 + delta
    w2 = 1 - delta
    w3 = 1 + delta * 2
    w4 = 1 - delta * 2
    w0_pow2 = delta * delta
    w1_pow2 = w1 * w1
    w2_pow2 = w2 * w2
    w1_pow3 = w1_pow2 * w1
    w2_pow3 = w2_pow2 * w2
    w1_pow4 = w1_pow3 * w1
    w2_pow4 = w2_pow3 * w2
    w3_pow4 = w3 * w3 * w3 * w3
    w4_pow4 = w4 * w4 * w4 * w4

    return (
        a * w4_pow4,
        b * (55 + 20 * w1 - 120 * w1_pow2 + 80 * w1_pow3 - 16 * w1_pow4),
        c + d * w0_pow2 * (2 * w0_pow2 - 5),
        b * (55 + 20 * w2 - 120 * w2_pow2 + 80 * w2_pow3 - 16 * w2_pow4),
        a * w3_pow4,
    )


def shape_wt1(x: Any, X: Any, rdx: Any, dt: Any, rdt: Any) -> Weights:
    """First-order shape function of the WT scheme."""
    delta = (x - X) * rdx
    ss = _clamp(0.25 * rdt * (1 + 2 * dt - 2 * delta), 0.0, 1.0)
    return (ss, 1 - ss)


def shape_wt2(x: Any, X: Any, rdx: Any, dt: Any, rdt: Any) -> Weights:
    """Second-order shape function of the WT scheme."""
    delta = (x - X) * rdx

    t1 = ifthenelse(delta < -dt, 1.0, 0.0)
    t2 = 1 - t1
    t3 = ifthenelse(delta < +dt, 1.0, 0.0)
    t4 = 1 - t3
    w0 = abs(delta)
    w1 = dt - delta
    w2 = dt + delta

    s0_1 = w0
    s1_1 = 1 - w0
    s2_1 = 0
    s0_2 = 0.25 * rdt * w1 * w1
    s1_2 = 0.50 * rdt * (dt * (2 - dt) - w0 * w0)
    s2_2 = 0.25 * rdt * w2 * w2
    s0_3 = s2_1
    s1_3 = s1_1
    s2_3 = s0_1

    return (
        s0_1 * t1 + s0_2 * t2 * t3 + s0_3 * t4,
        s1_1 * t1 + s1_2 * t2 * t3 + s1_3 * t4,
        s2_1 * t1 + s2_2 * t2 * t3 + s2_3 * t4,
    )


def shape_wt3(x: Any, X: Any, rdx: Any, dt: Any, rdt: Any) -> Weights:
    """Third-order shape function of the WT scheme."""
    a = 1 / 96.0
    b = 1 / 24.0
    c = 1 / 12.0
    adt = a * rdt
    delta = (x - X) * rdx

    t1 = ifthenelse(delta < 0.5 - dt, 1.0, 0.0)
    t2 = 1 - t1
    t3 = ifthenelse(delta < 0.5 + dt, 1.0, 0.0)
    t4 = 1 - t3
    w0 = delta
    w1 = 1 - delta
    w3 = 1 - 2 * delta
    w4 = 1 + 2 * delta
    w5 = 2 * dt + w3
    w6 = 2 * dt - w3
    w7 = 3 - 2 * delta
    w0_pow2 = w0 * w0
    w1_pow2 = w1 * w1
    w3_pow2 = w3 * w3
    w3_pow3 = w3_pow2 * w3
    w4_pow2 = w4 * w4
    w5_pow3 = w5 * w5 * w5
    w6_pow3 = w6 * w6 * w6
    w7_pow2 = w7 * w7
    dt_pow2 = dt * dt
    dt_pow3 = dt_pow2 * dt
    dt_pow2_4 = 4 * dt_pow2
    s_2_odd = adt * (-8 * dt_pow3 - 6 * dt * w3_pow2)
    s_2_even = adt * (-36 * dt_pow2 * w3 - 3 * w3_pow3)

    s0_1 = b * (dt_pow2_4 + 3 * w3_pow2)
    s1_1 = c * (9 - dt_pow2_4 - 12 * w0_pow2)
    s2_1 = b * (dt_pow2_4 + 3 * w4_pow2)
    s3_1 = 0
    s0_2 = adt * w5_pow3
    s1_2 = s_2_odd + s_2_even + w1
    s2_2 = s_2_odd - s_2_even + w0
    s3_2 = adt * w6_pow3
    s0_3 = 0
    s1_3 = b * (dt_pow2_4 + 3 * w7_pow2)
    s2_3 = c * (9 - dt_pow2_4 - 12 * w1_pow2)
    s3_3 = b * (dt_pow2_4 + 3 * w3_pow2)

    return (
        s0_1 * t1 + s0_2 * t2 * t3 + s0_3 * t4,
        s1_1 * t1 + s1_2 * t2 * t3 + s1_3 * t4,
        s2_1 * t1 + s2_2 * t2 * t3 + s2_3 * t4,
        s3_1 * t1 + s3_2 * t2 * t3 + s3_3 * t4,
    )


def shape_wt4(x: Any, X: Any, rdx: Any, dt: Any, rdt: Any) -> Weights:
    """Fourth-order shape function of the WT scheme."""
    a = 1 / 48.0
    b = 1 / 24.0
    c = 1 / 12.0
    d = 1 / 6.0
    adt = a * rdt
    bdt = b * rdt
    cdt = c * rdt
    delta = (x - X) * rdx

    t1 = ifthenelse(delta < -dt, 1.0, 0.0)
    t2 = 1 - t1
    t3 = ifthenelse(delta < +dt, 1.0, 0.0)
    t4 = 1 - t3
    w0 = abs(delta)
    w1 = 1 - w0
    w2 = 1 - delta
    w3 = 1 + delta
    w4 = dt - delta
    w5 = dt + delta
    w0_pow2 = w0 * w0
    w0_pow3 = w0_pow2 * w0
    w0_pow4 = w0_pow3 * w0
    w1_pow2 = w1 * w1
    w1_pow3 = w1_pow2 * w1
    w2_pow3 = w2 * w2 * w2
    w3_pow3 = w3 * w3 * w3
    w4_pow4 = w4 * w4 * w4 * w4
    w5_pow4 = w5 * w5 * w5 * w5
    dt_pow2 = dt * dt
    dt_pow3 = dt_pow2 * dt
    dt_pow4 = dt_pow3 * dt
    ss1 = -dt_pow4 - 6 * w0_pow2 * dt_pow2 - w0_pow4
    ss2 = (
        3 * dt_pow4
        - 8 * dt_pow3
        + 18 * w0_pow2 * dt_pow2
        + (16 - 24 * w0_pow2) * dt
        + 3 * w0_pow4
    )

    s0_1 = d * w0 * (w0_pow2 + dt_pow2)
    s1_1 = d * (4 - 6 * w1_pow2 + 3 * w1_pow3 + (1 - 3 * w0) * dt_pow2)
    s2_1 = d * (4 - 6 * w0_pow2 + 3 * w0_pow3 - (2 - 3 * w0) * dt_pow2)
    s3_1 = d * w1 * (w1_pow2 + dt_pow2)
    s4_1 = 0
    s0_2 = adt * w4_pow4
    s1_2 = cdt * (ss1 + 2 * dt_pow3 * w3 + 2 * dt * (-6 * delta + w3_pow3))
    s2_2 = bdt * ss2
    s3_2 = cdt * (ss1 + 2 * dt_pow3 * w2 + 2 * dt * (+6 * delta + w2_pow3))
    s4_2 = adt * w5_pow4
    s0_3 = s4_1
    s1_3 = s3_1
    s2_3 = s2_1
    s3_3 = s1_1
    s4_3 = s0_1

    return (
        s0_1 * t1 + s0_2 * t2 * t3 + s0_3 * t4,
        s1_1 * t1 + s1_2 * t2 * t3 + s1_3 * t4,
        s2_1 * t1 + s2_2 * t2 * t3 + s2_3 * t4,
        s3_1 * t1 + s3_2 * t2 * t3 + s3_3 * t4,
        s4_1 * t1 + s4_2 * t2 * t3 + s4_3 * t4,
    )


_MC: Dict[int, Callable[..., Weights]] = {
    1: shape_mc1,
    2: shape_mc2,
    3: shape_mc3,
    4: shape_mc4,
}

_WT: Dict[int, Callable[..., Weights]] = {
    1: shape_wt1,
    2: shape_wt2,
    3: shape_wt3,
    4: shape_wt4,
}


def _lookup(table: Dict[int, Callable[..., Weights]], order: int) -> Callable[..., Weights]:
    try:
        return table[order]
    except (KeyError, TypeError):
        raise ValueError(f"order must be 1, 2, 3, or 4, got {order!r}") from None


def shape_mc(order: int, x: Any, X: Any, rdx: Any) -> Weights:
    """Shape function of the given order (1 to 4); returns ``order + 1`` weights."""
    return _lookup(_MC, order)(x, X, rdx)


def shape_wt(order: int, x: Any, X: Any, rdx: Any, dt: Any, rdt: Any) -> Weights:
    """WT-scheme shape function of the given order (1 to 4)."""
    return _lookup(_WT, order)(x, X, rdx, dt, rdt)