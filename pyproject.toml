[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "lair"
version = "0.1.0"
description = "BLAS- and LAPACK-style linear algebra kernels (Householder QR, bidiagonal reduction, plane rotations) in pure Python over NumPy arrays."
requires-python = ">=3.10"
keywords = ["linear algebra", "lapack", "blas", "qr", "householder", "numpy"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Mathematics",
]
dependencies = ["numpy"]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["lair"]

[tool.pytest.ini_options]
addopts = "-ra"
