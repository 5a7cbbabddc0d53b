"""Plane rotations and singular values of 2x2 triangular matrices."""

from __future__ import annotations

import numpy as np

from lair.scalar import eps, sfmin


def _real_type(*values):
    dtype = np.result_type(*(np.asarray(v).dtype for v in values))
    if not np.issubdtype(dtype, np.floating):
        dtype = np.dtype(np.float64)
    return dtype.type


def _larger_abs(f, g):
    return abs(f) if abs(f) > abs(g) else abs(g)


def lartg(f, g):
    """Generate a plane rotation taking ``(f, g)`` to ``(r, 0)``.

    Returns ``(cos, sin, r)`` with real cosine and sine.
    """
    real = _real_type(f, g)
    f = real(f)
    g = real(g)
    if g == 0:
        return real(1), real(0), f
    if f == 0:
        return real(0), real(1), g

    two = real(2)
    safe_min = real(two ** np.trunc(np.log2(sfmin(f.dtype) / eps(f.dtype)) / two))
    safe_max = real(1) / safe_min

    larger = _larger_abs(f, g)
    if larger >= safe_max:
        fs, gs, count = f, g, 0
        while True:
            count += 1
            fs *= safe_min
            gs *= safe_min
            if _larger_abs(fs, gs) < safe_max:
                break
        r = np.sqrt(fs * fs + gs * gs)
        cos, sin = fs / r, gs / r
        for _ in range(count):
            r *= safe_max
    elif larger <= safe_min:
        fs, gs, count = f, g, 0
        while True:
            count += 1
            fs *= safe_max
            gs *= safe_max
            if _larger_abs(fs, gs) > safe_min:
                break
        r = np.sqrt(fs * fs + gs * gs)
        cos, sin = fs / r, gs / r
        for _ in range(count):
            r *= safe_min
    else:
        r = np.sqrt(f * f + g * g)
        cos, sin = f / r, g / r

    if abs(f) > abs(g) and cos < 0:
        return -cos, -sin, -r
    return cos, sin, r


def las2(f, g, h):
    """Return ``(smallest, largest)`` singular values of ``[[f, g], [0, h]]``."""
    real = _real_type(f, g, h)
    one = real(1)
    f_abs = abs(real(f))
    g_abs = abs(real(g))
    h_abs = abs(real(h))
    f_h_min, f_h_max = (f_abs, h_abs) if f_abs < h_abs else (h_abs, f_abs)

    if f_h_min == 0:
        if f_h_max == 0:
            return f_h_min, g_abs
        biggest = f_h_max if f_h_max > g_abs else g_abs
        smaller = f_h_max if f_h_max < g_abs else g_abs
        ratio = smaller / biggest
        return f_h_min, biggest * np.sqrt(one + ratio * ratio)

    if g_abs < f_h_max:
        a_s = one + f_h_min / f_h_max
        a_t = (f_h_max - f_h_min) / f_h_max
        ratio = g_abs / f_h_max
        a_u = ratio * ratio
        c = real(2) / (np.sqrt(a_s * a_s + a_u) + np.sqrt(a_t * a_t + a_u))
        return f_h_min * c, f_h_max / c

    a_u = f_h_max / g_abs
    if a_u == 0:
        return f_h_min * f_h_max / g_abs, g_abs
    a_s = one + f_h_min / f_h_max
    a_t = (f_h_max - f_h_min) / f_h_max
    s_u = a_s * a_u
    t_u = a_t * a_u
    c = one / (np.sqrt(one + s_u * s_u) + np.sqrt(one + t_u * t_u))
    half_min = f_h_min * c * a_u
    return half_min + half_min, g_abs / (c + c)