"""Relativistic Maxwell-Juttner distribution with a drift along x.

The distribution is isotropic in the rest frame and Lorentz boosted to the lab
frame. For a drift in another direction, rotate the returned four-velocity.

References:
- S. Zenitani, Physics of Plasmas 22, 042116 (2015).
- S. Zenitani and S. Nakano, Physics of Plasmas 29, 113904 (2022).
"""

from __future__ import annotations

import bisect
import itertools
import math
from typing import List, Tuple

import numpy as np

__all__ = ["MaxwellJuttner"]

_A = 0.56
_B = 0.35
_GAMMA_SHAPES = (1.5, 2.0, 2.5, 3.0)


class MaxwellJuttner:
    """Sampler of four-velocities from a drifting Maxwell-Juttner distribution.

    ``temperature`` is in units of the rest-mass energy. ``drift`` is the
    four-velocity of the bulk flow along x. Samples are drawn with a
    ``numpy.random.Generator``.
    """

    def __init__(self, temperature: float, drift: float = 0.0) -> None:
        self.drift = float(drift)
        self._temperature = 0.0
        self._table: List[float] = []
        self.temperature = temperature

    @property
    def temperature(self) -> float:
        return self._temperature

    @temperature.setter
    def temperature(self, value: float) -> None:
        value = float(value)
        if not value > 0:
            raise ValueError(f"temperature must be positive, got {value}")
        self._temperature = value
        self.reset()

    def reset(self) -> None:
        """Rebuild the cumulative table used to pick the gamma component."""
        t = self._temperature
        weights = [
            0.0,
            math.sqrt(math.pi),
            _A * math.sqrt(2 * t),
            _B * 1.5 * math.sqrt(math.pi) * t,
            math.sqrt(2 * t) * (2 * t),
        ]
        cumulative = list(itertools.accumulate(weights))
        total = cumulative[-1]
        self._table = [w / total for w in cumulative]

    def _lorentz_factor_minus_one(self, rng: np.random.Generator) -> float:
        # modified Canfield method
        sqrt2 = math.sqrt(2)
        while True:
            r1 = rng.random()
            r2 = rng.random()
            index = bisect.bisect_right(self._table, r1) - 1
            xx = rng.gamma(_GAMMA_SHAPES[index], self._temperature)
            accept = (xx + 1) * math.sqrt(xx + 2)
            bound = sqrt2 + _A * math.sqrt(xx) + _B * sqrt2 * xx + xx**1.5
            if r2 <= accept / bound:
                return float(xx)

    def __call__(self, rng: np.random.Generator) -> Tuple[float, float, float]:
        """Draw one four-velocity ``(ux, uy, uz)``."""
        xx = self._lorentz_factor_minus_one(rng)

        # isotropic in the rest frame
        uu = math.sqrt(xx * (xx + 2))
        r3 = rng.random()
        r4 = rng.random()
        transverse = uu * 2 * math.sqrt(r3 * (1 - r3))

        ux = uu * (2 * r3 - 1)
        uy = transverse * math.cos(2 * math.pi * r4)
        uz = transverse * math.sin(2 * math.pi * r4)

        ux = self.lorentz_boost(rng, self.drift, ux, uy, uz)
        return ux, uy, uz

    def lorentz_boost(
        self, rng: np.random.Generator, u0: float, ux: float, uy: float, uz: float
    ) -> float:
        """Boost ``ux`` by drift four-velocity ``u0`` using the flipping method."""
        rr = rng.random()
        gm_drift = math.sqrt(1 + u0 * u0)
        vx_drift = u0 / gm_drift
        gm = math.sqrt(1 + ux * ux + uy * uy + uz * uz)
        vx = ux / gm

        if -vx_drift * vx > rr:
            ux = -ux
        return gm_drift * (ux + vx_drift * gm)