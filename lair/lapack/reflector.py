"""Elementary reflectors: generation, application and block forms."""

from __future__ import annotations

import numpy as np

from lair import blas
from lair.lapack.auxiliary import ilalc, ilalr, lapy3
from lair.scalar import eps, sfmin
from lair.triangular import (
    trmm_right_lower_conjtrans,
    trmm_right_lower_notrans,
    trmm_right_upper_conjtrans,
    trmv_upper_notrans,
)


def larfg(alpha, x: np.ndarray):
    """Generate an elementary reflector ``H = I - tau * v @ v^H``.

    ``H^H`` maps ``[alpha, *x]`` onto ``[beta, 0, ..., 0]``. ``x`` is
    overwritten in place with the tail of ``v`` (whose first element is 1).
    Returns ``(beta, tau)``, ``beta`` being real.
    """
    dtype = x.dtype
    scalar_type = dtype.type
    real_type = np.finfo(dtype).dtype.type
    alpha = scalar_type(alpha)

    x_norm = blas.nrm2(x)
    if x_norm == 0 and np.imag(alpha) == 0:
        return real_type(np.real(alpha)), scalar_type(0)

    beta = -np.copysign(
        lapy3(real_type(np.real(alpha)), real_type(np.imag(alpha)), real_type(x_norm)),
        np.real(alpha),
    )
    safe_min = real_type(sfmin(dtype) / eps(dtype))
    knt = 0
    if abs(beta) < safe_min:
        safe_min_recip = real_type(1) / safe_min
        while True:
            knt += 1
            blas.scal(safe_min_recip, x)
            beta *= safe_min_recip
            alpha *= safe_min_recip
            if abs(beta) >= safe_min or knt >= 20:
                break
        x_norm = blas.nrm2(x)
        square = real_type(np.real(alpha * np.conj(alpha)))
        beta = -np.copysign(square + x_norm * x_norm, np.real(alpha))

    beta = real_type(beta)
    tau = scalar_type((beta - alpha) / beta)
    blas.scal(scalar_type(1) / (alpha - beta), x)
    beta = real_type(beta * safe_min**knt)
    return beta, tau


def _last_nonzero(v: np.ndarray) -> int:
    nonzero = np.flatnonzero(v != 0)
    if nonzero.size == 0:
        raise ValueError("v is a zero vector")
    return int(nonzero[-1])


def larf_left(v: np.ndarray, tau, c: np.ndarray) -> None:
    """Replace ``c`` with ``H @ c`` where ``H = I - tau * v @ v^H``."""
    if tau == 0:
        return
    last_v = _last_nonzero(v)
    last_c = ilalc(c[: last_v + 1, :])
    if last_c is None:
        return
    v_head = v[: last_v + 1]
    block = c[: last_v + 1, : last_c + 1]
    w = np.zeros(last_c + 1, dtype=np.result_type(c.dtype, v.dtype))
    blas.gemv_conjtrans(1, block, v_head, 0, w)
    blas.gerc(-tau, v_head, w, block)


def larf_right(v: np.ndarray, tau, c: np.ndarray) -> None:
    """Replace ``c`` with ``c @ H`` where ``H = I - tau * v @ v^H``."""
    if tau == 0:
        return
    last_v = _last_nonzero(v)
    last_r = ilalr(c[:, : last_v + 1])
    if last_r is None:
        return
    v_head = v[: last_v + 1]
    block = c[: last_r + 1, : last_v + 1]
    w = block @ v_head
    blas.gerc(-tau, w, v_head, block)


def larfb_left_notrans_forward_columnwise(v: np.ndarray, t: np.ndarray,
                                          c: np.ndarray) -> None:
    """Apply the block reflector ``H = I - V @ T @ V^H`` to ``c`` from the left.

    ``v`` holds the reflectors column by column with a unit lower triangular
    leading block, and ``t`` is the upper triangular factor.
    """
    if v.shape[0] != c.shape[0]:
        raise ValueError("v and c must have the same number of rows")
    if v.shape[1] != t.shape[1]:
        raise ValueError("v and t must have the same number of columns")
    k = t.shape[1]
    if k > c.shape[0]:
        raise ValueError("t has more columns than c has rows")
    if c.size == 0:
        return

    c_nrows = c.shape[0]
    c_upper = c[:k]
    c_lower = c[k:]
    work = np.array(np.conj(c_upper).T)
    v_upper = v[:k]
    v_lower = v[k:]

    trmm_right_lower_notrans(v_upper, work, True)
    if c_nrows > k:
        blas.gemm(1, c_lower.T, True, v_lower, False, work)
    trmm_right_upper_conjtrans(t, work, False)
    if c_nrows > k:
        blas.gemm(-1, v_lower, False, work.T, True, c_lower)
    trmm_right_lower_conjtrans(v_upper, work, True)
    c_upper -= np.conj(work).T


def larft_forward_columnwise(v: np.ndarray, tau: np.ndarray) -> np.ndarray:
    """Form the upper triangular factor ``T`` of a block reflector.

    ``v`` holds the elementary reflectors column by column and ``tau`` their
    scalar factors.
    """
    nrows, ncols = v.shape
    triangular = np.zeros((ncols, ncols), dtype=np.result_type(v.dtype, tau.dtype))
    if v.size == 0:
        return triangular

    prev_last_v = nrows
    for i in range(min(nrows, ncols, len(tau))):
        tau_i = tau[i]
        if tau_i == 0:
            continue

        triangular[:i, i] = -tau_i * v[i, :i]
        prev_last_v = max(i, prev_last_v)
        nonzero = np.flatnonzero(v[i:, i] != 0)
        last_v = i + int(nonzero[-1]) if nonzero.size else i
        j = min(last_v, prev_last_v)
        blas.gemv_conjtrans(
            -tau_i,
            v[i + 1 : j + 1, :i],
            v[i + 1 : j + 1, i],
            1,
            triangular[:i, i],
        )

        trmv_upper_notrans(triangular[:, :i], triangular[:i, i])
        triangular[i, i] = tau_i
        prev_last_v = max(prev_last_v, last_v) if i > 0 else last_v
    return triangular