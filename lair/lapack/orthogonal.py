"""Generation of unitary matrices from elementary reflectors."""

from __future__ import annotations

import numpy as np

from lair import blas
from lair.lapack.auxiliary import lacgv
from lair.lapack.reflector import larf_left, larf_right


def ungqr(a: np.ndarray, tau: np.ndarray) -> None:
    """Overwrite ``a`` with the matrix Q of orthonormal columns.

    ``a`` holds the reflector vectors below its diagonal, as left by a QR
    factorization, and ``tau`` their scalar factors.
    """
    nrows, ncols = a.shape
    k = len(tau)
    if ncols > nrows:
        raise ValueError("too many columns in `a`")
    if k > ncols:
        raise ValueError("too many reflectors")
    if a.size == 0:
        return

    a[:, k:] = 0
    for i in range(k, ncols):
        a[i, i] = 1

    for i in reversed(range(k)):
        tau_i = tau[i]
        if i < ncols - 1:
            a[i, i] = 1
            larf_left(a[i:, i], tau_i, a[i:, i + 1 :])
        if i < nrows - 1:
            blas.scal(-tau_i, a[i + 1 :, i])
        a[i, i] = 1 - tau_i
        if i >= 1:
            a[:i, i] = 0


def unglq(a: np.ndarray, tau: np.ndarray) -> None:
    """Overwrite ``a`` with the matrix Q of orthonormal rows.

    ``a`` holds the reflector vectors right of its diagonal, as left by an LQ
    factorization, and ``tau`` their scalar factors.
    """
    nrows, ncols = a.shape
    k = len(tau)
    if ncols < nrows:
        raise ValueError("too many rows in `a`")
    if nrows < k:
        raise ValueError("too many reflectors")

    if k < nrows:
        for j in range(ncols):
            a[k:nrows, j] = 0
            if k <= j < nrows:
                a[j, j] = 1

    for i in reversed(range(k)):
        tau_i = tau[i]
        row = a[i, i:]
        lower = a[i + 1 :, i:]
        if i < ncols:
            lacgv(row)
            if i < nrows:
                row[0] = 1
                larf_right(row, np.conj(tau_i), lower)
            blas.scal(-tau_i, row)
            lacgv(row)
        row[0] = 1 - np.conj(tau_i)
        a[i, :i] = 0


def ungrq(a: np.ndarray, tau: np.ndarray) -> None:
    """Overwrite ``a`` with the matrix Q of orthonormal rows.

    ``a`` holds the reflector vectors as left by an RQ factorization, and
    ``tau`` their scalar factors.
    """
    nrows, ncols = a.shape
    k = len(tau)
    if ncols < nrows:
        raise ValueError("too many rows in `a`")
    if nrows < k:
        raise ValueError("too many reflectors")

    if k < nrows:
        for j in range(ncols):
            a[: nrows - k, j] = 0
            if ncols - nrows <= j < ncols - k:
                a[j + nrows - ncols, j] = 1

    for i, tau_i in enumerate(tau):
        ii = nrows - k + i
        width = ncols - k + i + 1
        upper = a[:ii, :width]
        row = a[ii, :width]
        lacgv(row)
        row[-1] = 1
        larf_right(row, np.conj(tau_i), upper)
        blas.scal(-tau_i, row)
        lacgv(row)
        row[-1] = 1 - np.conj(tau_i)
        a[i, width:] = 0


def ungbr_q_tall(a: np.ndarray, tau: np.ndarray) -> None:
    """Overwrite a tall ``a`` with Q of a bidiagonal reduction."""
    if a.size == 0:
        return
    nrows, ncols = a.shape
    if nrows < ncols:
        raise ValueError("`a` must have at least as many rows as columns")
    if ncols < len(tau):
        raise ValueError("too many reflectors")
    ungqr(a, tau)


def ungbr_p_square(a: np.ndarray, tau: np.ndarray) -> None:
    """Overwrite a square ``a`` with P^H of a bidiagonal reduction."""
    if a.size == 0:
        return
    nrows, ncols = a.shape
    if nrows != ncols:
        raise ValueError("`a` must be a square matrix")
    if ncols != len(tau):
        raise ValueError(f"tau has {len(tau)} elements; expected {ncols}")

    a[:, 0] = 0
    a[0, 0] = 1
    for j in range(1, ncols):
        if j > 1:
            a[1:j, j] = a[0 : j - 1, j].copy()
        a[0, j] = 0
    if ncols > 1:
        unglq(a[1:, 1:], tau[:-1])