"""Auxiliary matrix routines: searching, copying, swapping and scaling."""

from __future__ import annotations

import numpy as np

from lair.scalar import sfmin


def lacgv(x: np.ndarray) -> None:
    """Conjugate every element of ``x`` in place."""
    x[...] = np.conj(x)


def lapy2(x, y):
    """Return ``sqrt(x**2 + y**2)``."""
    return np.sqrt(x * x + y * y)


def lapy3(x, y, z):
    """Return ``sqrt(x**2 + y**2 + z**2)``."""
    return np.sqrt(x * x + y * y + z * z)


def ilalc(x: np.ndarray) -> int | None:
    """Return the index of the last non-zero column, or None if there is none."""
    if x.size == 0:
        return None
    nonzero = np.flatnonzero(np.any(x != 0, axis=0))
    return int(nonzero[-1]) if nonzero.size else None


def ilalr(x: np.ndarray) -> int | None:
    """Return the index of the last non-zero row, or None if there is none."""
    if x.size == 0:
        return None
    nonzero = np.flatnonzero(np.any(x != 0, axis=1))
    return int(nonzero[-1]) if nonzero.size else None


def laswp(a: np.ndarray, begin: int, pivots) -> None:
    """Swap rows of ``a`` in place: row ``i`` with row ``pivots[i]``.

    Swaps are applied in order, starting at index ``begin``.
    """
    for i, p in enumerate(pivots):
        if i < begin or i == p:
            continue
        a[[i, p]] = a[[p, i]]


def lacpy_lower(a: np.ndarray, b: np.ndarray) -> None:
    """Copy the lower triangle of ``a``, diagonal included, into ``b``."""
    rows = min(a.shape[0], b.shape[0])
    cols = min(a.shape[1], b.shape[1])
    mask = np.tril(np.ones((rows, cols), dtype=bool))
    b[:rows, :cols][mask] = a[:rows, :cols][mask]


def lacpy_upper(a: np.ndarray, b: np.ndarray) -> None:
    """Copy the upper triangle of ``a``, diagonal included, into ``b``."""
    rows = min(a.shape[0], b.shape[0])
    cols = min(a.shape[1], b.shape[1])
    mask = np.triu(np.ones((rows, cols), dtype=bool))
    b[:rows, :cols][mask] = a[:rows, :cols][mask]


def laset_lower_zero(a: np.ndarray) -> None:
    """Zero the lower triangle of ``a``, diagonal included, in place."""
    if a.size == 0:
        return
    a[np.tril(np.ones(a.shape, dtype=bool))] = 0


def lange_maxabs(a: np.ndarray):
    """Return the largest absolute value in ``a``; NaN if any element is NaN."""
    magnitudes = np.abs(a)
    real_type = magnitudes.dtype.type
    if a.size == 0:
        return real_type(0)
    return real_type(np.max(magnitudes))


def lascl_full(c_from, c_to, a: np.ndarray) -> None:
    """Multiply ``a`` in place by ``c_to / c_from`` without over- or underflow."""
    real_type = np.finfo(a.dtype).dtype.type
    small_num = sfmin(a.dtype)
    large_num = real_type(1) / small_num
    c_from = real_type(c_from)
    c_to = real_type(c_to)

    while True:
        small_from = c_from * small_num
        if small_from == c_from:
            multiplier, done = c_to / c_from, True
        else:
            small_to = c_to / large_num
            if small_to == c_to:
                multiplier, done = c_to, True
            elif abs(small_from) > abs(c_to) and c_to != 0:
                c_from = small_from
                multiplier, done = small_num, False
            elif abs(small_to) > c_from:
                c_to = small_to
                multiplier, done = large_num, False
            else:
                multiplier, done = c_to / c_from, True
        a *= multiplier
        if done:
            break