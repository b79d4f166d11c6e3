"""A small printf with c, s, p, d, i, u, x, X and % conversions."""

__version__ = "1.0.0"
__all__ = ["output", "printf"]