"""BLAS- and LAPACK-style linear algebra routines over NumPy arrays."""

__version__ = "0.1.0"