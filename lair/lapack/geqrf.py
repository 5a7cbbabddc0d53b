"""QR factorization by Householder reflections."""

from __future__ import annotations

import numpy as np

from lair.lapack.reflector import larf_left, larfg


def geqrf(a: np.ndarray) -> np.ndarray:
    """Compute the QR factorization of ``a`` in place.

    On return the upper triangle of ``a`` holds R and the part below the
    diagonal holds the reflector vectors. Returns the reflectors' scalar
    factors.
    """
    nrows, ncols = a.shape
    min_dim = min(nrows, ncols)
    tau = np.zeros(min_dim, dtype=a.dtype)
    for i in range(min_dim):
        beta, t = larfg(a[i, i], a[i + 1 :, i])
        tau[i] = t
        a[i, i] = 1
        v = a[i:, i].copy()
        larf_left(v, np.conj(t), a[i:, i + 1 :])
        a[i, i] = beta
    return tau