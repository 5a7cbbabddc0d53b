"""Basic linear algebra operations on numpy vectors and matrices."""

from __future__ import annotations

import numpy as np


def copy(x: np.ndarray, y: np.ndarray) -> None:
    """Copy the elements of ``x`` into the leading elements of ``y``."""
    if len(y) < len(x):
        raise ValueError(f"y has {len(y)} elements; expected at least {len(x)}")
    y[: len(x)] = x


def dot(x: np.ndarray, y: np.ndarray, n: int):
    """Return the unconjugated dot product of the first ``n`` elements."""
    if len(x) < n or len(y) < n:
        raise ValueError(f"x and y must have at least {n} elements")
    return np.dot(x[:n], y[:n])


def gemm(alpha, a: np.ndarray, a_conjugate: bool, b: np.ndarray,
         b_conjugate: bool, c: np.ndarray) -> None:
    """Perform ``c += alpha * op(a) @ op(b)`` in place, op conjugating on request."""
    lhs = np.conj(a) if a_conjugate else a
    rhs = np.conj(b) if b_conjugate else b
    if lhs.shape[1] != rhs.shape[0] or c.shape != (lhs.shape[0], rhs.shape[1]):
        raise ValueError(
            f"incompatible shapes {a.shape}, {b.shape} and {c.shape}"
        )
    c += alpha * (lhs @ rhs)


def _scale_output(beta, y: np.ndarray) -> None:
    if beta == 0:
        y[...] = 0
    elif beta != 1:
        y *= beta


def gemv_notrans(alpha, a: np.ndarray, x: np.ndarray, beta, y: np.ndarray) -> None:
    """Perform ``y = alpha * a @ x + beta * y`` in place."""
    if a.shape != (len(y), len(x)):
        raise ValueError(
            f"incompatible shapes {a.shape}, {x.shape} and {y.shape}"
        )
    _scale_output(beta, y)
    if alpha == 0:
        return
    y += alpha * (a @ x)


def gemv_conjtrans(alpha, a: np.ndarray, x: np.ndarray, beta, y: np.ndarray) -> None:
    """Perform ``y = alpha * a^H @ x + beta * y`` in place."""
    if a.shape != (len(x), len(y)):
        raise ValueError(
            f"incompatible shapes {a.shape}, {x.shape} and {y.shape}"
        )
    _scale_output(beta, y)
    if alpha == 0:
        return
    y += alpha * (np.conj(a).T @ x)


def gerc(alpha, x: np.ndarray, y: np.ndarray, a: np.ndarray) -> None:
    """Perform the rank-one update ``a += alpha * x @ y^H`` in place."""
    if a.shape != (len(x), len(y)):
        raise ValueError(
            f"incompatible shapes {a.shape}, {x.shape} and {y.shape}"
        )
    a += alpha * np.outer(x, np.conj(y))


def iamax(x: np.ndarray):
    """Return the index and value of the element with the largest ``|re| + |im|``.

    The first such element wins; an empty or all-zero vector gives ``(0, 0)``.
    """
    x = np.asarray(x)
    real_type = np.abs(np.zeros(1, dtype=x.dtype)).dtype.type
    if x.size == 0:
        return 0, real_type(0)
    magnitudes = np.abs(np.real(x)) + np.abs(np.imag(x))
    magnitudes = np.where(np.isnan(magnitudes), 0, magnitudes)
    index = int(np.argmax(magnitudes))
    value = real_type(magnitudes[index])
    if not value > 0:
        return 0, real_type(0)
    return index, value


def nrm2(x: np.ndarray):
    """Return the Euclidean norm of a vector."""
    x = np.asarray(x)
    re = np.real(x)
    im = np.imag(x)
    return np.sqrt(np.sum(re * re + im * im))


def scal(alpha, x: np.ndarray) -> None:
    """Multiply every element of ``x`` by ``alpha`` in place."""
    x *= alpha