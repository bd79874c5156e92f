import numpy as np
import pytest

from numlab.diffusion import clamp, diffuse_step, random_field, to_brightness


@pytest.mark.parametrize(
    "val, expected",
    [(-3.0, 0.0), (0.0, 0.0), (12.5, 12.5), (255.0, 255.0), (400.0, 255.0)],
)
def test_clamp(val, expected):
    assert clamp(val, 0.0, 255.0) == expected


def test_random_field_shape_and_range():
    field = random_field(20, 30, np.random.default_rng(1))
    assert field.shape == (20, 30)
    assert field.dtype == np.float32
    assert field.min() >= 0.0
    assert field.max() <= 255.0


def test_random_field_reproducible_with_seed():
    a = random_field(8, 8, np.random.default_rng(42))
    b = random_field(8, 8, np.random.default_rng(42))
    np.testing.assert_array_equal(a, b)


def test_random_field_rejects_empty():
    with pytest.raises(ValueError):
        random_field(0, 5)


def test_constant_field_interior_unchanged_border_zero():
    field = np.full((6, 7), 100.0, dtype=np.float32)
    out = diffuse_step(field)
    np.testing.assert_allclose(out[1:-1, 1:-1], 100.0, rtol=1e-5)
    assert np.all(out[0, :] == 0) and np.all(out[-1, :] == 0)
    assert np.all(out[:, 0] == 0) and np.all(out[:, -1] == 0)


def test_spike_spreads_evenly_and_conserves_mass():
    field = np.zeros((9, 9), dtype=np.float32)
    field[4, 4] = 90.0
    out = diffuse_step(field)
    block = out[3:6, 3:6]
    np.testing.assert_allclose(block, block[0, 0], rtol=1e-6)
    assert out.sum() == pytest.approx(90.0, rel=1e-5)
    assert out[2, 2] == 0.0


def test_diffusion_clamps_to_upper_bound():
    field = np.full((5, 5), 1000.0, dtype=np.float32)
    out = diffuse_step(field)
    assert out[1:-1, 1:-1].tolist() == [[255.0, 255.0, 255.0]] * 3
    assert float(out.max()) == 255.0


def test_diffusion_does_not_modify_input():
    field = random_field(10, 10, np.random.default_rng(3))
    before = field.copy()
    diffuse_step(field)
    np.testing.assert_array_equal(field, before)


def test_diffusion_reduces_variance_of_noise():
    field = random_field(40, 40, np.random.default_rng(7))
    out = diffuse_step(field)
    assert out[1:-1, 1:-1].std() < field[1:-1, 1:-1].std()


def test_tiny_field_becomes_zero():
    out = diffuse_step(np.full((2, 5), 50.0))
    assert out.shape == (2, 5)
    assert np.all(out == 0)


def test_diffuse_rejects_non_2d():
    with pytest.raises(ValueError):
        diffuse_step(np.zeros(5))


def test_to_brightness_clamps_and_truncates():
    shade = to_brightness(np.array([[-5.0, 0.7, 300.0]]))
    assert shade.dtype == np.uint8
    assert shade.tolist() == [[0, 0, 255]]