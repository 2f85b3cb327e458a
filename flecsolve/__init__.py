"""Vectors, multivectors, operators and operator factories for composing solvers."""

__version__ = "0.0.1"