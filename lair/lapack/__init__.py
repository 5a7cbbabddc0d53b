"""LAPACK-style routines: QR, reflectors, unitary matrices, bidiagonal reduction, rotations."""