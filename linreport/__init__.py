"""Plain-Python dense linear algebra (LU, Householder QR, QR eigenvalues) and a random-matrix timing report."""

__version__ = "0.1.0"
__all__ = ["matrix", "eigen", "analysis", "cli"]