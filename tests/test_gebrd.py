import numpy as np
import pytest

from lair.lapack.gebrd import gebrd_tall


def test_tall():
    a = np.array(
        [
            [1.0, 2.0, 3.0, 1.0],
            [2.0, 2.0, 1.0, 3.0],
            [3.0, 1.0, 2.0, 2.0],
            [2.0, 3.0, 3.0, 1.0],
            [1.0, 3.0, 1.0, 3.0],
        ]
    )
    d, e, tau_q, tau_p = gebrd_tall(a)
    np.testing.assert_allclose(
        a,
        [
            [-4.358898943540673, 7.152474728151237, 0.36602540378443854, 0.36602540378443865],
            [0.37321099372674155, -3.7204979859096694, 1.1403421539769902, 0.41421356237309526],
            [0.5598164905901123, 0.7245458504029912, -0.836432765895214, 0.0000000000000022881872238998206],
            [0.37321099372674155, -0.018780759811874194, 0.9396262080188605, 2.8284271247461903],
            [0.18660549686337077, -0.4883921008919025, 0.30675112209074024, -0.9081340845417558],
        ],
        rtol=0,
        atol=1e-10,
    )
    np.testing.assert_allclose(
        d,
        [-4.358898943540673, -3.7204979859096694, -0.836432765895214, 2.8284271247461903],
        rtol=0,
        atol=1e-10,
    )
    np.testing.assert_allclose(
        e,
        [7.152474728151237, 1.1403421539769902, 0.0000000000000022881872238998206],
        rtol=0,
        atol=1e-10,
    )
    np.testing.assert_allclose(
        tau_q,
        [1.2294157338705618, 1.133885677079638, 1.0116370318963936, 1.0960660725096263],
        rtol=0,
        atol=1e-10,
    )
    np.testing.assert_allclose(
        tau_p, [1.577350269189626, 1.7071067811865475, 0.0, 0.0], rtol=0, atol=1e-10
    )


def test_empty():
    d, e, tau_q, tau_p = gebrd_tall(np.zeros((3, 0)))
    assert (len(d), len(e), len(tau_q), len(tau_p)) == (0, 0, 0, 0)


def test_rejects_wide():
    with pytest.raises(ValueError):
        gebrd_tall(np.ones((2, 3)))