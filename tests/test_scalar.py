import numpy as np
import pytest

from lair.scalar import eps, sfmin


def test_eps_float64_is_half_ulp_of_one():
    assert eps(np.float64) == 2.0**-53


def test_eps_float32_is_half_ulp_of_one():
    assert eps(np.float32) == np.float32(2.0**-24)


@pytest.mark.parametrize("dtype", [np.float32, np.float64])
def test_eps_rounding_invariant(dtype):
    one = dtype(1)
    e = eps(dtype)
    assert one + e == one
    assert one + e * dtype(2) > one


@pytest.mark.parametrize("dtype", [np.float32, np.float64])
def test_sfmin_reciprocal_is_finite(dtype):
    s = sfmin(dtype)
    assert s > 0
    assert np.isfinite(dtype(1) / s)


def test_sfmin_float64_value():
    assert sfmin(np.float64) == 2.2250738585072014e-308


@pytest.mark.parametrize(
    "complex_type, real_type",
    [(np.complex64, np.float32), (np.complex128, np.float64)],
)
def test_complex_types_use_real_constants(complex_type, real_type):
    assert eps(complex_type) == eps(real_type)
    assert sfmin(complex_type) == sfmin(real_type)