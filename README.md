# lair

Low-level linear algebra routines written in Python on top of NumPy arrays,
in the style of BLAS and LAPACK. Real and complex arrays are both handled.
Most routines work in place: they update the arrays they are given.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## QR factorization

`lair.lapack.geqrf.geqrf` factorizes a matrix in place with Householder
reflections. Afterwards the upper triangle holds R, the part below the
diagonal holds the reflector vectors, and the returned array holds their
scalar factors. `lair.lapack.orthogonal.ungqr` turns those reflectors into
Q.

```python
import numpy as np
from lair.lapack.geqrf import geqrf
from lair.lapack.orthogonal import ungqr

a = np.array([[1.0, 2.0, 3.0],
              [2.0, 2.0, 1.0],
              [3.0, 1.0, 2.0],
              [2.0, 3.0, 3.0]])
original = a.copy()

tau = geqrf(a)          # a now holds R and the reflectors
r = np.triu(a[:3])
q = a.copy()
ungqr(q, tau)           # q now has orthonormal columns

np.allclose(q @ r, original)   # True
```

## Bidiagonal reduction

`lair.lapack.gebrd.gebrd_tall(a)` reduces a matrix with at least as many rows
as columns to upper bidiagonal form `Q^H @ a @ P`, in place. It returns
`(d, e, tau_q, tau_p)`: the diagonal, the superdiagonal, and the scalar
factors of the reflectors for Q and P. `lair.lapack.orthogonal` has
`ungbr_q_tall` and `ungbr_p_square` to build Q and P^H from them, as well
as `unglq` and `ungrq` for reflectors stored row by row.

## Householder reflectors

`lair.lapack.reflector` holds:

- `larfg(alpha, x)` generates a reflector; `x` is overwritten with the tail
  of the reflector vector and `(beta, tau)` is returned.
- `larf_left(v, tau, c)` and `larf_right(v, tau, c)` apply
  `H = I - tau * v @ v^H` to `c` from the left or the right.
- `larft_forward_columnwise(v, tau)` forms the triangular factor T of a
  block reflector, and `larfb_left_notrans_forward_columnwise(v, t, c)`
  applies the block reflector `I - V @ T @ V^H` to `c`.

```python
from lair.lapack.reflector import larfg

x = np.array([2.0, 3.0, 2.0])
beta, tau = larfg(1.0, x)   # beta ≈ -4.2426, tau ≈ 1.2357
```

## Plane rotations and 2x2 singular values

`lair.lapack.rotation.lartg(f, g)` returns `(cos, sin, r)` for the rotation
taking `(f, g)` to `(r, 0)`, guarding against overflow and underflow.
`las2(f, g, h)` returns the smaller and larger singular values of
`[[f, g], [0, h]]`.

```python
from lair.lapack.rotation import lartg

lartg(2.0, 3.0)   # (0.5547..., 0.8320..., 3.6055...)
```

## Auxiliary routines

`lair.lapack.auxiliary` provides `lacgv` (conjugate in place), `lapy2` and
`lapy3`, `ilalc` and `ilalr` (last non-zero column or row, or `None`),
`laswp` (row interchanges from a pivot list), `lacpy_lower` and
`lacpy_upper` (copy a triangle), `laset_lower_zero`, `lange_maxabs`
(largest absolute value, NaN if any element is NaN) and `lascl_full`
(scale by `c_to / c_from` without over- or underflow).

## Kernels

- `lair.blas`: `copy`, `dot`, `gemm`, `gemv_notrans`, `gemv_conjtrans`,
  `gerc`, `iamax`, `nrm2`, `scal`. Shape mismatches raise `ValueError`.
- `lair.triangular`: triangular products `trmm_right_lower_notrans`,
  `trmm_right_upper_conjtrans`, `trmm_right_lower_conjtrans`,
  `trmv_upper_notrans`, and the unit lower triangular solve `trsm`.
- `lair.scalar`: `eps(dtype)` (half the machine epsilon) and
  `sfmin(dtype)` (the safe minimum).

## What the package does not do

There is no LU factorization, no solver for systems of linear equations,
no high-level decomposition objects wrapping the routines above, and no
constructors for special matrices. The `lair.decomposition` package is
present but holds no modules. Work with the in-place routines directly.