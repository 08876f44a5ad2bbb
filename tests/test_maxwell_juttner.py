import numpy as np
import pytest

from nixpic.maxwell_juttner import MaxwellJuttner


def _samples(dist, seed, n):
    rng = np.random.default_rng(seed)
    return np.array([dist(rng) for _ in range(n)])


def test_rejects_non_positive_temperature():
    with pytest.raises(ValueError):
        MaxwellJuttner(0.0)
    with pytest.raises(ValueError):
        MaxwellJuttner(-1.0)


def test_setting_bad_temperature_raises():
    dist = MaxwellJuttner(0.1)
    assert dist.temperature == 0.1
    dist.temperature = 0.2
    assert dist.temperature == 0.2
    with pytest.raises(ValueError):
        dist.temperature = -0.5


def test_same_seed_reproduces_samples():
    a = _samples(MaxwellJuttner(0.1, 0.5), 7, 50)
    b = _samples(MaxwellJuttner(0.1, 0.5), 7, 50)
    np.testing.assert_array_equal(a, b)


def test_reset_keeps_sampling_reproducible():
    dist = MaxwellJuttner(0.2)
    first = _samples(dist, 3, 20)
    dist.reset()
    second = _samples(dist, 3, 20)
    np.testing.assert_array_equal(first, second)


def test_boost_without_drift_is_identity():
    dist = MaxwellJuttner(0.1)
    rng = np.random.default_rng(1)
    assert dist.lorentz_boost(rng, 0.0, 0.3, -0.2, 0.7) == pytest.approx(0.3)


def test_boost_of_rest_particle_gives_drift():
    dist = MaxwellJuttner(0.1)
    rng = np.random.default_rng(1)
    assert dist.lorentz_boost(rng, 2.5, 0.0, 0.0, 0.0) == pytest.approx(2.5)


def test_zero_drift_is_isotropic():
    u = _samples(MaxwellJuttner(0.05), 11, 20000)
    means = u.mean(axis=0)
    spread = u.std(axis=0)
    assert np.all(np.abs(means) < 0.02)
    assert spread[0] == pytest.approx(spread[1], rel=0.05)
    assert spread[1] == pytest.approx(spread[2], rel=0.05)


def test_nonrelativistic_variance_matches_temperature():
    temperature = 0.01
    u = _samples(MaxwellJuttner(temperature), 5, 20000)
    variance = (u**2).mean(axis=0)
    np.testing.assert_allclose(variance, temperature, rtol=0.1)


def test_cold_beam_follows_drift():
    drift = 1.0
    u = _samples(MaxwellJuttner(1.0e-4, drift), 9, 5000)
    assert u[:, 0].mean() == pytest.approx(drift, rel=0.02)
    assert np.all(np.abs(u[:, 1]) < 0.1)


def test_temperature_change_scales_spread():
    dist = MaxwellJuttner(0.01)
    low = (_samples(dist, 21, 10000) ** 2).sum(axis=1).mean()
    dist.temperature = 0.04
    high = (_samples(dist, 21, 10000) ** 2).sum(axis=1).mean()
    assert high / low == pytest.approx(4.0, rel=0.15)


def test_relativistic_drifting_samples_are_finite_and_drift_forward():
    u = _samples(MaxwellJuttner(1.0, 0.3), 13, 2000)
    assert u.shape == (2000, 3)
    assert np.isfinite(u).all()
    assert u[:, 0].mean() > 0.3
    assert abs(u[:, 1].mean()) < 0.3
    assert abs(u[:, 2].mean()) < 0.3