import numpy as np
import pytest

from nixpic.shapes import (
    shape_mc,
    shape_mc1,
    shape_mc2,
    shape_mc3,
    shape_mc4,
    shape_wt,
    shape_wt1,
    shape_wt2,
    shape_wt3,
    shape_wt4,
)

ODD_DELTAS = [0.0, 0.1, 0.25, 0.5, 0.75, 0.99]
EVEN_DELTAS = [-0.5, -0.3, -0.1, 0.0, 0.2, 0.45]


def _deltas(order):
    return ODD_DELTAS if order % 2 == 1 else EVEN_DELTAS


@pytest.mark.parametrize("order", [1, 2, 3, 4])
def test_mc_partition_of_unity(order):
    for delta in _deltas(order):
        weights = shape_mc(order, 2.0 + 0.5 * delta, 2.0, 2.0)
        assert len(weights) == order + 1
        assert sum(weights) == pytest.approx(1.0, abs=1e-14)
        assert all(w >= -1e-15 for w in weights)


@pytest.mark.parametrize("order", [1, 2, 3, 4])
@pytest.mark.parametrize("dt", [0.2, 0.5, 0.9])
def test_wt_partition_of_unity(order, dt):
    for delta in _deltas(order):
        weights = shape_wt(order, delta, 0.0, 1.0, dt, 1 / dt)
        assert len(weights) == order + 1
        assert sum(weights) == pytest.approx(1.0, abs=1e-13)


def test_mc1_at_grid_point():
    assert shape_mc1(3.0, 3.0, 1.0) == (1.0, 0.0)


def test_mc2_center_value():
    weights = shape_mc2(1.0, 1.0, 1.0)
    assert weights[1] == 0.75
    assert weights[0] == weights[2]


def test_mc4_center_value():
    weights = shape_mc4(0.0, 0.0, 1.0)
    assert weights[2] == pytest.approx(115 / 192.0)
    assert weights[0] == pytest.approx(weights[4])
    assert weights[1] == pytest.approx(weights[3])


@pytest.mark.parametrize("func", [shape_mc2, shape_mc4])
def test_even_order_mirror_symmetry(func):
    for delta in [0.1, 0.3, 0.45]:
        forward = func(delta, 0.0, 1.0)
        backward = func(-delta, 0.0, 1.0)
        assert forward == pytest.approx(tuple(reversed(backward)))


@pytest.mark.parametrize("func", [shape_mc1, shape_mc3])
def test_odd_order_mirror_symmetry(func):
    for delta in [0.1, 0.3, 0.7]:
        forward = func(delta, 0.0, 1.0)
        backward = func(1.0 - delta, 0.0, 1.0)
        assert forward == pytest.approx(tuple(reversed(backward)))


def test_wt1_is_clamped():
    low = shape_wt1(0.99, 0.0, 1.0, 0.1, 10.0)
    high = shape_wt1(0.0, 0.0, 1.0, 0.1, 10.0)
    assert low == (0.0, 1.0)
    assert high == (1.0, 0.0)


def test_wt2_outside_window_matches_linear_weights():
    delta = -0.4
    weights = shape_wt2(delta, 0.0, 1.0, 0.2, 5.0)
    assert weights == pytest.approx((0.4, 0.6, 0.0))


def test_wt4_mirror_symmetry():
    dt = 0.3
    for delta in [0.1, 0.25, 0.45]:
        forward = shape_wt4(delta, 0.0, 1.0, dt, 1 / dt)
        backward = shape_wt4(-delta, 0.0, 1.0, dt, 1 / dt)
        assert forward == pytest.approx(tuple(reversed(backward)))


@pytest.mark.parametrize("order", [1, 2, 3, 4])
def test_mc_array_matches_scalar(order):
    deltas = np.array(_deltas(order))
    x = 1.5 + deltas * 0.5
    batch = shape_mc(order, x, 1.5, 2.0)
    for i, xi in enumerate(x):
        scalar = shape_mc(order, float(xi), 1.5, 2.0)
        for w_batch, w_scalar in zip(batch, scalar):
            assert w_batch[i] == pytest.approx(w_scalar, abs=1e-15)


@pytest.mark.parametrize("order", [1, 2, 3, 4])
def test_wt_array_matches_scalar(order):
    dt = 0.4
    deltas = np.array(_deltas(order))
    batch = shape_wt(order, deltas, 0.0, 1.0, dt, 1 / dt)
    for i, d in enumerate(deltas):
        scalar = shape_wt(order, float(d), 0.0, 1.0, dt, 1 / dt)
        for w_batch, w_scalar in zip(batch, scalar):
            assert np.broadcast_to(w_batch, deltas.shape)[i] == pytest.approx(
                w_scalar, abs=1e-14
            )


def test_dispatch_matches_direct_call():
    assert shape_mc(3, 0.3, 0.0, 1.0) == shape_mc3(0.3, 0.0, 1.0)
    assert shape_wt(3, 0.3, 0.0, 1.0, 0.5, 2.0) == shape_wt3(0.3, 0.0, 1.0, 0.5, 2.0)


@pytest.mark.parametrize("order", [0, 5, -1, "2"])
def test_invalid_order_raises(order):
    with pytest.raises(ValueError):
        shape_mc(order, 0.0, 0.0, 1.0)
    with pytest.raises(ValueError):
        shape_wt(order, 0.0, 0.0, 1.0, 0.5, 2.0)