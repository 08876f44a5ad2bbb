# nixpic

Numerical building blocks for relativistic particle-in-cell (PIC) plasma
simulations, built on NumPy.

## Contents

- `nixpic.primitives`: helpers that take plain numbers or NumPy arrays
  (`to_int`, `to_float`, `digitize`, `sign`, `ifthenelse`,
  `lorentz_factor`) and the equation-of-motion pushers `push_boris`,
  `push_vay` and `push_higuera_cary`. The pushers return the updated
  four-velocity as a tuple `(ux, uy, uz)`. `to_int`, `to_float`,
  `digitize` and `sign` raise `TypeError` for non-numeric input.
- `nixpic.shapes`: particle shape functions of order 1 to 4, both the
  standard ones (`shape_mc1` … `shape_mc4`, dispatched by
  `shape_mc(order, x, X, rdx)`) and the time-step dependent WT-scheme
  ones (`shape_wt1` … `shape_wt4`, dispatched by
  `shape_wt(order, x, X, rdx, dt, rdt)`). Each returns a tuple of
  `order + 1` weights; an order outside 1 to 4 raises `ValueError`.
  Numbers or NumPy arrays are accepted.
- `nixpic.deposit`: adds local current blocks to a global array
  `uj[z, y, x, 4]` (`append_current1d/2d/3d`) and local moment blocks to
  `um[z, y, x, species, 14]` (`append_moment1d/2d/3d`). A block has one
  axis per stencil direction, then the component axis, then optionally a
  particle axis. With integer start indices the particle contributions are
  summed and added at one place. Current deposition also takes integer
  arrays of start indices, one per particle, and then adds each particle
  at its own place. Moment deposition takes integer start indices only.
  Blocks or arrays of the wrong shape raise `ValueError`.
- `nixpic.maxwell_juttner`: `MaxwellJuttner(temperature, drift=0.0)`, a
  sampler for the relativistic Maxwell-Juttner distribution with a drift
  along x. Calling it with a `numpy.random.Generator` returns one
  four-velocity `(ux, uy, uz)`. `temperature` is a property and must be
  positive. `drift` is a plain attribute. `lorentz_boost` applies the boost
  on its own.
- `nixpic.sfc`: generalized Hilbert space-filling curves on 1D, 2D and 3D
  grids (`get_map1d`, `get_map2d`, `get_map3d`). Each returns an `SfcMap`
  named tuple `(index, coord)`. `index` has the grid's shape in (z, y, x)
  order and holds each cell's position along the curve. `coord` holds the
  (x, y, z) coordinates of the cell at each position. `check_index`,
  `check_locality2d` and `check_locality3d` check such maps.

## Installation

```
pip install .
```

## Examples

Advance a particle's four-velocity with the Boris pusher:

```python
from nixpic.primitives import push_boris

ux, uy, uz = push_boris(0.1, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0, 0.1, 1.0)
```

Compute second-order shape weights:

```python
from nixpic.shapes import shape_mc

weights = shape_mc(2, 0.3, 0.0, 1.0)   # three weights summing to one
```

Draw momenta from a drifting Maxwell-Juttner distribution:

```python
import numpy as np
from nixpic.maxwell_juttner import MaxwellJuttner

rng = np.random.default_rng(0)
mj = MaxwellJuttner(1.0, drift=0.5)
ux, uy, uz = mj(rng)
```

Build a space-filling curve over an 8 x 8 grid:

```python
from nixpic.sfc import get_map2d, check_index, check_locality2d

index, coord = get_map2d(8, 8)
assert check_index(index)
assert check_locality2d(coord, 1)
```

The curve is local (each step goes to a face neighbour) only when every
dimension longer than one cell has an even size.

## What it does not do

nixpic is a library of parts. It has no simulation loop, no field solver,
no configuration or checkpoint files, no parallel decomposition and no
command-line program. You put these parts together in your own code.

## Tests

```
pip install .[test]
pytest
```