"""Immediate-mode GUI building blocks: geometry, layout cursor, input state, styles, draw commands and mesh rasterization."""

__version__ = "0.1.0"

__all__ = [
    "geometry",
    "cursor",
    "input",
    "style",
    "painter",
    "rasterizer",
]