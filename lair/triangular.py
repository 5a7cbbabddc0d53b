"""Products with and solutions of triangular matrices."""

from __future__ import annotations

import numpy as np


def _check_right_operands(a: np.ndarray, b: np.ndarray) -> None:
    if a.ndim != 2 or a.shape[0] != a.shape[1]:
        raise ValueError(f"a must be a square matrix, got shape {a.shape}")
    if b.ndim != 2 or b.shape[1] != a.shape[0]:
        raise ValueError(
            f"b has {b.shape[1] if b.ndim == 2 else b.shape} columns; "
            f"expected {a.shape[0]}"
        )


def _lower(a: np.ndarray, unit: bool) -> np.ndarray:
    if unit:
        return np.tril(a, -1) + np.eye(a.shape[0], dtype=a.dtype)
    return np.tril(a)


def _upper(a: np.ndarray, unit: bool) -> np.ndarray:
    if unit:
        return np.triu(a, 1) + np.eye(a.shape[0], dtype=a.dtype)
    return np.triu(a)


def trmm_right_lower_notrans(a: np.ndarray, b: np.ndarray, unit: bool) -> None:
    """Replace ``b`` with ``b @ L``, ``L`` being the lower triangle of ``a``.

    With ``unit`` set, the diagonal of ``a`` is taken to be all ones.
    """
    _check_right_operands(a, b)
    b[...] = b @ _lower(a, unit)


def trmm_right_upper_conjtrans(a: np.ndarray, b: np.ndarray, unit: bool) -> None:
    """Replace ``b`` with ``b @ U^H``, ``U`` being the upper triangle of ``a``.

    With ``unit`` set, the diagonal of ``a`` is taken to be all ones.
    """
    _check_right_operands(a, b)
    b[...] = b @ np.conj(_upper(a, unit)).T


def trmm_right_lower_conjtrans(a: np.ndarray, b: np.ndarray, unit: bool) -> None:
    """Replace ``b`` with ``b @ L^H``, ``L`` being the lower triangle of ``a``.

    With ``unit`` set, the diagonal of ``a`` is taken to be all ones.
    """
    _check_right_operands(a, b)
    b[...] = b @ np.conj(_lower(a, unit)).T


def trmv_upper_notrans(a: np.ndarray, x: np.ndarray) -> None:
    """Replace ``x`` with ``U @ x``, ``U`` being the upper triangle of ``a``.

    Only the leading square block of ``a`` that matches ``x`` is used.
    """
    n = len(x)
    if a.ndim != 2 or a.shape[1] != n:
        raise ValueError(f"a has shape {a.shape}; expected {n} columns")
    if a.shape[0] < n:
        raise ValueError(f"a has {a.shape[0]} rows; expected at least {n}")
    x[...] = np.triu(a[:n, :n]) @ x


def trsm(a: np.ndarray, b: np.ndarray) -> None:
    """Solve ``L @ x = b`` in place, ``L`` being the unit lower triangle of ``a``.

    Only the leading square block of ``a`` with as many rows as ``b`` is used;
    its diagonal is taken to be all ones.
    """
    n = b.shape[0]
    if a.ndim != 2 or a.shape[0] < n or a.shape[1] < n:
        raise ValueError(f"a has shape {a.shape}; expected at least ({n}, {n})")
    for i in range(1, n):
        b[i] -= a[i, :i] @ b[:i]