"""Column-major 3x3 and 4x4 matrices and 2D points for graphics math."""

__version__ = "0.1.0"
__all__ = ["mat3", "mat4", "point2d"]