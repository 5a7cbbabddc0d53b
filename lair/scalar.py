"""Machine constants for real and complex floating-point types."""

from __future__ import annotations

import numpy as np


def eps(dtype) -> float:
    """Relative machine precision of ``dtype`` (half the machine epsilon)."""
    info = np.finfo(dtype)
    return info.dtype.type(info.eps / 2)


def sfmin(dtype) -> float:
    """Safe minimum of ``dtype``: its reciprocal does not overflow."""
    info = np.finfo(dtype)
    return info.dtype.type(info.tiny)