"""Munkres (Hungarian) algorithm for the linear assignment problem, with a matrix type, container adapters and matrix file helpers."""

__version__ = "2.0.0"
__all__ = ["matrix", "munkres", "adapters", "matrixio", "example"]