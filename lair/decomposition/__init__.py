"""Namespace for matrix decompositions; it holds no modules yet."""