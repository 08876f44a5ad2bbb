"""Space-filling curves that order the cells of a 1D, 2D or 3D grid.

The curve is a generalized Hilbert curve ("gilbert") for rectangles and boxes
of arbitrary size. When a size is odd the curve needs a diagonal step
somewhere. Only even sizes in every direction give a curve where consecutive
cells are always face neighbours.

Each ``get_map*`` function returns an :class:`SfcMap`:

- ``index`` has the grid's shape in (z, y, x) order and holds the position of
  each cell along the curve;
- ``coord`` has one row per position along the curve and holds the cell's
  coordinates in (x, y, z) order.
"""

from __future__ import annotations

from typing import Iterator, NamedTuple, Tuple

import numpy as np

__all__ = [
    "SfcMap",
    "get_map1d",
    "get_map2d",
    "get_map3d",
    "check_index",
    "check_locality2d",
    "check_locality3d",
]

Point2 = Tuple[int, int]
Point3 = Tuple[int, int, int]


class SfcMap(NamedTuple):
    """Cell-to-curve index and curve-to-cell coordinate arrays."""

    index: np.ndarray
    coord: np.ndarray


def _sign(v: int) -> int:
    return (v > 0) - (v < 0)


def _half(v: int) -> int:
    """Integer division by two, truncating towards zero."""
    return -((-v) // 2) if v < 0 else v // 2


def _check_sizes(*sizes: int) -> None:
    for n in sizes:
        if isinstance(n, bool) or not isinstance(n, (int, np.integer)):
            raise TypeError(f"grid size must be an integer, got {type(n).__name__}")
        if n < 1:
            raise ValueError(f"grid size must be positive, got {n}")


def _gilbert2d(x: int, y: int, ax: int, ay: int, bx: int, by: int) -> Iterator[Point2]:
    w = abs(ax + ay)
    h = abs(bx + by)
    dax, day = _sign(ax), _sign(ay)
    dbx, dby = _sign(bx), _sign(by)

    if h == 1:
        for _ in range(w):
            yield x, y
            x += dax
            y += day
        return

    if w == 1:
        for _ in range(h):
            yield x, y
            x += dbx
            y += dby
        return

    ax2, ay2 = _half(ax), _half(ay)
    bx2, by2 = _half(bx), _half(by)
    w2 = abs(ax2 + ay2)
    h2 = abs(bx2 + by2)

    if 2 * w > 3 * h:
        # split along the long direction only
        if w2 % 2 and w > 2:
            ax2 += dax
            ay2 += day
        ax3, ay3 = ax - ax2, ay - ay2

        yield from _gilbert2d(x, y, ax2, ay2, bx, by)
        x += ax2
        y += ay2
        yield from _gilbert2d(x, y, ax3, ay3, bx, by)
    else:
        if h2 % 2 and h > 2:
            bx2 += dbx
            by2 += dby
        ax3, ay3 = ax - ax2, ay - ay2
        bx3, by3 = bx - bx2, by - by2

        yield from _gilbert2d(x, y, bx2, by2, ax2, ay2)
        x += bx2
        y += by2
        yield from _gilbert2d(x, y, ax, ay, bx3, by3)
        x += ax
        y += ay
        x -= dax + dbx
        y -= day + dby
        yield from _gilbert2d(x, y, -bx2, -by2, -ax3, -ay3)


def _gilbert3d(
    x: int, y: int, z: int,
    ax: int, ay: int, az: int,
    bx: int, by: int, bz: int,
    cx: int, cy: int, cz: int,
) -> Iterator[Point3]:
    w = abs(ax + ay + az)
    h = abs(bx + by + bz)
    d = abs(cx + cy + cz)
    dax, day, daz = _sign(ax), _sign(ay), _sign(az)
    dbx, dby, dbz = _sign(bx), _sign(by), _sign(bz)
    dcx, dcy, dcz = _sign(cx), _sign(cy), _sign(cz)

    # straight segments
    for length, step, trivial in (
        (w, (dax, day, daz), h == 1 and d == 1),
        (h, (dbx, dby, dbz), d == 1 and w == 1),
        (d, (dcx, dcy, dcz), w == 1 and h == 1),
    ):
        if trivial:
            for _ in range(length):
                yield x, y, z
                x += step[0]
                y += step[1]
                z += step[2]
            return

    ax2, ay2, az2 = _half(ax), _half(ay), _half(az)
    bx2, by2, bz2 = _half(bx), _half(by), _half(bz)
    cx2, cy2, cz2 = _half(cx), _half(cy), _half(cz)
    w2 = abs(ax2 + ay2 + az2)
    h2 = abs(bx2 + by2 + bz2)
    d2 = abs(cx2 + cy2 + cz2)

    if w2 % 2 and w > 2:
        ax2, ay2, az2 = ax2 + dax, ay2 + day, az2 + daz
    if h2 % 2 and h > 2:
        bx2, by2, bz2 = bx2 + dbx, by2 + dby, bz2 + dbz
    if d2 % 2 and d > 2:
        cx2, cy2, cz2 = cx2 + dcx, cy2 + dcy, cz2 + dcz

    ax3, ay3, az3 = ax - ax2, ay - ay2, az - az2
    bx3, by3, bz3 = bx - bx2, by - by2, bz - bz2
    cx3, cy3, cz3 = cx - cx2, cy - cy2, cz - cz2

    if 2 * w > 3 * h and 2 * w > 3 * d:
        # split along a only
        yield from _gilbert3d(x, y, z, ax2, ay2, az2, bx, by, bz, cx, cy, cz)
        x += ax2
        y += ay2
        z += az2
        yield from _gilbert3d(x, y, z, ax3, ay3, az3, bx, by, bz, cx, cy, cz)
    elif 3 * h > 4 * d:
        # split in the a-b plane
        yield from _gilbert3d(x, y, z, bx2, by2, bz2, cx, cy, cz, ax2, ay2, az2)
        x += bx2
        y += by2
        z += bz2
        yield from _gilbert3d(x, y, z, ax, ay, az, bx3, by3, bz3, cx, cy, cz)
        x += ax
        y += ay
        z += az
        x -= dax + dbx
        y -= day + dby
        z -= daz + dbz
        yield from _gilbert3d(x, y, z, -bx2, -by2, -bz2, cx, cy, cz, -ax3, -ay3, -az3)
    elif 3 * d > 4 * h:
        # split in the a-c plane
        yield from _gilbert3d(x, y, z, cx2, cy2, cz2, ax2, ay2, az2, bx, by, bz)
        x += cx2
        y += cy2
        z += cz2
        yield from _gilbert3d(x, y, z, ax, ay, az, bx, by, bz, cx3, cy3, cz3)
        x += ax
        y += ay
        z += az
        x -= dax + dcx
        y -= day + dcy
        z -= daz + dcz
        yield from _gilbert3d(x, y, z, -cx2, -cy2, -cz2, -ax3, -ay3, -az3, bx, by, bz)
    else:
        # full three-dimensional split
        yield from _gilbert3d(x, y, z, bx2, by2, bz2, cx2, cy2, cz2, ax2, ay2, az2)
        x += bx2
        y += by2
        z += bz2
        yield from _gilbert3d(x, y, z, cx, cy, cz, ax2, ay2, az2, bx3, by3, bz3)
        x += cx
        y += cy
        z += cz
        x -= dbx + dcx
        y -= dby + dcy
        z -= dbz + dcz
        yield from _gilbert3d(x, y, z, ax, ay, az, -bx2, -by2, -bz2, -cx3, -cy3, -cz3)
        x += ax
        y += ay
        z += az
        x -= dax - dbx
        y -= day - dby
        z -= daz - dbz
        yield from _gilbert3d(x, y, z, -cx, -cy, -cz, -ax3, -ay3, -az3, bx3, by3, bz3)
        x -= cx
        y -= cy
        z -= cz
        x -= dbx - dcx
        y -= dby - dcy
        z -= dbz - dcz
        yield from _gilbert3d(x, y, z, -bx2, -by2, -bz2, cx2, cy2, cz2, -ax3, -ay3, -az3)


def _coord_from_index(index: np.ndarray) -> np.ndarray:
    """Invert ``index`` into per-position coordinates in (x, y, z) order."""
    ndim = index.ndim
    coord = np.empty((index.size, ndim), dtype=np.int64)
    grids = np.indices(index.shape)
    flat_ids = index.ravel()
    # index axes run (z, y, x); coord columns run (x, y, z)
    for column, axis in enumerate(reversed(range(ndim))):
        coord[flat_ids, column] = grids[axis].ravel()
    return coord


def get_map1d(nx: int) -> SfcMap:
    """Trivial curve along a line of ``nx`` cells."""
    _check_sizes(nx)
    index = np.arange(nx, dtype=np.int64)
    return SfcMap(index, index.reshape(nx, 1).copy())


def _index2d(ny: int, nx: int) -> np.ndarray:
    index = np.zeros((ny, nx), dtype=np.int64)
    if ny != 1 and nx != 1:
        if nx >= ny:
            path = _gilbert2d(0, 0, nx, 0, 0, ny)
        else:
            path = _gilbert2d(0, 0, 0, ny, nx, 0)
        for cell_id, (x, y) in enumerate(path):
            index[y, x] = cell_id
    elif ny == 1:
        index[0, :] = np.arange(nx)
    else:
        index[:, 0] = np.arange(ny)
    return index


def get_map2d(ny: int, nx: int) -> SfcMap:
    """Curve through a ``ny`` by ``nx`` rectangle."""
    _check_sizes(ny, nx)
    index = _index2d(ny, nx)
    return SfcMap(index, _coord_from_index(index))


def get_map3d(nz: int, ny: int, nx: int) -> SfcMap:
    """Curve through a ``nz`` by ``ny`` by ``nx`` box."""
    _check_sizes(nz, ny, nx)
    index = np.zeros((nz, ny, nx), dtype=np.int64)

    if nz != 1 and ny != 1 and nx != 1:
        if nx >= ny and nx >= nz:
            path = _gilbert3d(0, 0, 0, nx, 0, 0, 0, ny, 0, 0, 0, nz)
        elif ny >= nx and ny >= nz:
            path = _gilbert3d(0, 0, 0, 0, ny, 0, nx, 0, 0, 0, 0, nz)
        else:
            path = _gilbert3d(0, 0, 0, 0, 0, nz, nx, 0, 0, 0, ny, 0)
        for cell_id, (x, y, z) in enumerate(path):
            index[z, y, x] = cell_id
    elif nz == 1 and ny == 1:
        index[0, 0, :] = np.arange(nx)
    elif nz == 1 and nx == 1:
        index[0, :, 0] = np.arange(ny)
    elif ny == 1 and nx == 1:
        index[:, 0, 0] = np.arange(nz)
    elif nz == 1:
        index[0, :, :] = _index2d(ny, nx)
    elif ny == 1:
        index[:, 0, :] = _index2d(nz, nx)
    else:
        index[:, :, 0] = _index2d(nz, ny)

    return SfcMap(index, _coord_from_index(index))


def check_index(index: np.ndarray) -> bool:
    """True if ``index`` holds every position from 0 to ``size - 1`` exactly once."""
    flat = np.sort(np.asarray(index).ravel())
    return bool(np.array_equal(flat, np.arange(flat.size)))


def _check_locality(coord: np.ndarray, ncol: int, distmax2: int) -> bool:
    coord = np.asarray(coord)
    if coord.ndim != 2 or coord.shape[1] < ncol:
        raise ValueError(f"coord must have at least {ncol} columns, got shape {coord.shape}")
    steps = np.diff(coord[:, :ncol].astype(np.int64), axis=0)
    return bool(np.all((steps * steps).sum(axis=1) <= distmax2))


def check_locality2d(coord: np.ndarray, distmax2: int = 1) -> bool:
    """True if consecutive cells are at most ``sqrt(distmax2)`` apart in x-y."""
    return _check_locality(coord, 2, distmax2)


def check_locality3d(coord: np.ndarray, distmax2: int = 1) -> bool:
    """True if consecutive cells are at most ``sqrt(distmax2)`` apart in x-y-z."""
    return _check_locality(coord, 3, distmax2)