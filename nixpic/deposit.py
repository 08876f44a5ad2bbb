"""Accumulation of local current and moment contributions into global grid arrays.

A local contribution is a small block of values around a particle. Its leading
axes run over the grid points of the stencil (z, y, x order). The next axis runs
over the components: 4 for currents, 14 for moments. An optional last axis runs
over a batch of particles.

Start indices may be plain integers. All particles then share the same stencil
position, and their contributions are summed before they are added. For
currents the start indices may also be integer arrays with one entry per
particle. Each particle's contribution is then added at its own position, and
coinciding positions accumulate correctly.
"""

from __future__ import annotations

from typing import Any, Sequence

import numpy as np

__all__ = [
    "append_current1d",
    "append_current2d",
    "append_current3d",
    "append_moment1d",
    "append_moment2d",
    "append_moment3d",
]

_NUM_CURRENT = 4
_NUM_MOMENT = 14


def _is_vector(value: Any) -> bool:
    return isinstance(value, np.ndarray)


def _check_block(block: np.ndarray, dim: int, ncomp: int, what: str) -> None:
    if block.ndim not in (dim + 1, dim + 2):
        raise ValueError(
            f"{what} must have {dim + 1} or {dim + 2} dimensions, got shape {block.shape}"
        )
    spatial = block.shape[:dim]
    if len(set(spatial)) != 1:
        raise ValueError(f"{what} must have equal stencil extents, got shape {block.shape}")
    if block.shape[dim] != ncomp:
        raise ValueError(
            f"{what} must hold {ncomp} components along axis {dim}, got shape {block.shape}"
        )


def _accumulate(
    array: np.ndarray,
    fixed: Sequence[Any],
    starts: Sequence[Any],
    trailing: Sequence[Any],
    block: Any,
    ncomp: int,
    what: str,
) -> None:
    block = np.asarray(block, dtype=np.float64)
    dim = len(starts)
    _check_block(block, dim, ncomp, what)

    expected_ndim = len(fixed) + dim + len(trailing) + 1
    if array.ndim != expected_ndim:
        raise ValueError(
            f"target array must have {expected_ndim} dimensions, got shape {array.shape}"
        )

    scattered = any(_is_vector(s) for s in (*fixed, *starts))

    for offset in np.ndindex(*block.shape[:dim]):
        values = block[offset]
        position = tuple(start + delta for start, delta in zip(starts, offset))
        index = (*fixed, *position, *trailing, slice(None))
        if scattered:
            # particles may land on different (or coinciding) grid points
            contribution = np.moveaxis(values, 0, -1) if values.ndim == 2 else values
            np.add.at(array, index, contribution)
        else:
            contribution = values.sum(axis=-1) if values.ndim == 2 else values
            array[index] += contribution


def _require_sorted(*indices: Any) -> None:
    if any(_is_vector(i) for i in indices):
        raise TypeError("moment deposition requires scalar integer start indices")


def append_current1d(uj: np.ndarray, iz: Any, iy: Any, ix0: Any, current: Any) -> None:
    """Add a 1D current stencil of shape ``(size, 4[, n])`` to ``uj[z, y, x, 4]``."""
    _accumulate(uj, (iz, iy), (ix0,), (), current, _NUM_CURRENT, "current")


def append_current2d(uj: np.ndarray, iz: Any, iy0: Any, ix0: Any, current: Any) -> None:
    """Add a 2D current stencil of shape ``(size, size, 4[, n])`` to ``uj``."""
    _accumulate(uj, (iz,), (iy0, ix0), (), current, _NUM_CURRENT, "current")


def append_current3d(uj: np.ndarray, iz0: Any, iy0: Any, ix0: Any, current: Any) -> None:
    """Add a 3D current stencil of shape ``(size, size, size, 4[, n])`` to ``uj``."""
    _accumulate(uj, (), (iz0, iy0, ix0), (), current, _NUM_CURRENT, "current")


def append_moment1d(
    um: np.ndarray, iz: int, iy: int, ix0: int, species: int, moment: Any
) -> None:
    """Add a 1D moment stencil of shape ``(size, 14[, n])`` to ``um[z, y, x, s, 14]``."""
    _require_sorted(iz, iy, ix0)
    _accumulate(um, (iz, iy), (ix0,), (species,), moment, _NUM_MOMENT, "moment")


def append_moment2d(
    um: np.ndarray, iz: int, iy0: int, ix0: int, species: int, moment: Any
) -> None:
    """Add a 2D moment stencil of shape ``(size, size, 14[, n])`` to ``um``."""
    _require_sorted(iz, iy0, ix0)
    _accumulate(um, (iz,), (iy0, ix0), (species,), moment, _NUM_MOMENT, "moment")


def append_moment3d(
    um: np.ndarray, iz0: int, iy0: int, ix0: int, species: int, moment: Any
) -> None:
    """Add a 3D moment stencil of shape ``(size, size, size, 14[, n])`` to ``um``."""
    _require_sorted(iz0, iy0, ix0)
    _accumulate(um, (), (iz0, iy0, ix0), (species,), moment, _NUM_MOMENT, "moment")