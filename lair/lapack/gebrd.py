"""Reduction of a matrix to bidiagonal form."""

from __future__ import annotations

import numpy as np

from lair.lapack.auxiliary import lacgv
from lair.lapack.reflector import larf_left, larf_right, larfg


def gebrd_tall(a: np.ndarray):
    """Reduce a tall ``a`` in place to upper bidiagonal form ``Q^H @ a @ P``.

    Returns ``(d, e, tau_q, tau_p)``: the diagonal, the superdiagonal, and the
    scalar factors of the reflectors representing Q and P. The reflector
    vectors are left in ``a`` below the diagonal and right of the
    superdiagonal.
    """
    nrows, ncols = a.shape
    if nrows < ncols:
        raise ValueError("`a` must have at least as many rows as columns")
    real_dtype = np.finfo(a.dtype).dtype
    if a.size == 0:
        return (
            np.zeros(0, dtype=real_dtype),
            np.zeros(0, dtype=real_dtype),
            np.zeros(0, dtype=a.dtype),
            np.zeros(0, dtype=a.dtype),
        )

    d = np.zeros(ncols, dtype=real_dtype)
    e = np.zeros(ncols - 1, dtype=real_dtype)
    tau_q = np.zeros(ncols, dtype=a.dtype)
    tau_p = np.zeros(ncols, dtype=a.dtype)
    for i in range(ncols):
        beta, tau = larfg(a[i, i], a[i + 1 :, i])
        d[i] = beta
        tau_q[i] = tau
        a[i, i] = 1
        larf_left(a[i:, i], np.conj(tau), a[i:, i + 1 :])
        a[i, i] = beta

        if i < ncols - 1:
            lacgv(a[i, i + 1 :])
            beta, tau = larfg(a[i, i + 1], a[i, i + 2 :])
            e[i] = beta
            tau_p[i] = tau
            a[i, i + 1] = 1
            larf_right(a[i, i + 1 :], tau, a[i + 1 :, i + 1 :])
            lacgv(a[i, i + 1 :])
            a[i, i + 1] = e[i]
        else:
            tau_p[i] = 0
    return d, e, tau_q, tau_p