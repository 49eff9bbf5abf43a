"""Raycasting first-person maze explorer for .cub map files."""

__version__ = "0.1.0"
__all__ = ["__version__"]