import numpy as np
import pytest

from lair.lapack.geqrf import geqrf
from lair.lapack.orthogonal import (
    ungbr_p_square,
    ungbr_q_tall,
    unglq,
    ungqr,
    ungrq,
)


def test_ungqr_real():
    a = np.array([[2.0, -2.0], [-1.0, 4.0], [3.0, 1.0]])
    tau = np.array([5.0, 3.0])
    ungqr(a, tau)
    np.testing.assert_allclose(a, [[-4.0, 35.0], [5.0, -37.0], [-15.0, 102.0]])


def test_ungqr_after_geqrf_is_orthonormal():
    rng = np.random.default_rng(7)
    a = rng.uniform(0.0, 10.0, (4, 3))
    qr = a.copy()
    tau = geqrf(qr)
    r = np.triu(qr[:3])
    q = qr.copy()
    ungqr(q, tau)
    np.testing.assert_allclose(q.T @ q, np.eye(3), atol=1e-12)
    np.testing.assert_allclose(q @ r, a, atol=1e-12)


def test_ungqr_rejects_wide():
    with pytest.raises(ValueError):
        ungqr(np.zeros((2, 3)), np.zeros(1))


def test_ungqr_rejects_too_many_reflectors():
    with pytest.raises(ValueError):
        ungqr(np.zeros((3, 2)), np.zeros(3))


def test_unglq():
    a = np.array(
        [
            [2 + 1j, 3 - 2j, 1 + 3j],
            [-1 - 2j, -3 + 1j, -2 - 1j],
        ],
        dtype=np.complex64,
    )
    tau = np.array([1 - 1j], dtype=np.complex64)
    unglq(a, tau)
    np.testing.assert_allclose(
        a,
        [
            [-1j, -5 - 1j, 2 - 4j],
            [-1 - 5j, -12 - 13j, 14 - 8j],
        ],
        rtol=1e-6,
    )


def test_unglq_rejects_tall():
    with pytest.raises(ValueError):
        unglq(np.zeros((3, 2)), np.zeros(1))


def test_ungrq():
    a = np.array(
        [
            [2 + 1j, 3 - 2j, 1 + 3j],
            [-1 - 2j, -3 + 1j, -2 - 1j],
        ],
        dtype=np.complex64,
    )
    tau = np.array([1 - 1j], dtype=np.complex64)
    ungrq(a, tau)
    np.testing.assert_allclose(
        a,
        [
            [6 - 8j, -9 - 10j, 2 + 4j],
            [-1 + 3j, 4 + 2j, -1j],
        ],
        rtol=1e-6,
    )


def test_ungrq_rejects_too_many_reflectors():
    with pytest.raises(ValueError):
        ungrq(np.zeros((2, 3)), np.zeros(3))


def test_ungbr_q_tall():
    a = np.array(
        [
            [2 + 1j, -3 + 1j],
            [-1 - 2j, 1 + 3j],
            [3 - 2j, -2 - 1j],
        ],
        dtype=np.complex64,
    )
    tau = np.array([1 - 1j], dtype=np.complex64)
    ungbr_q_tall(a, tau)
    np.testing.assert_allclose(
        a,
        [
            [1j, -1 - 3j],
            [3 + 1j, -4 + 5j],
            [-1 + 5j, -9 - 7j],
        ],
        rtol=1e-6,
    )


def test_ungbr_q_tall_rejects_wide():
    with pytest.raises(ValueError):
        ungbr_q_tall(np.ones((2, 3)), np.zeros(1))


def test_ungbr_p_square():
    a = np.array(
        [[2 + 1j, 1 + 3j], [-1 - 2j, -2 - 1j]],
        dtype=np.complex64,
    )
    tau = np.array([1 - 1j, -2 + 3j], dtype=np.complex64)
    ungbr_p_square(a, tau)
    np.testing.assert_allclose(a, [[1, 0], [0, -1j]], rtol=1e-6)


def test_ungbr_p_square_rejects_non_square():
    with pytest.raises(ValueError):
        ungbr_p_square(np.ones((2, 3)), np.zeros(3))