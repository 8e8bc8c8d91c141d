"""
Rendering

A recording backend (batch) and a moderngl renderer for what it records.
"""

from frameui.render.batch import (
    DrawBatch, DrawTriangle, DrawGlyph,
    BatchBackend, MonospaceFont,
    triangle_vertices, TRIANGLE_CORNERS,
)
from frameui.render.renderer import TriangleRenderer

__all__ = [
    "DrawBatch", "DrawTriangle", "DrawGlyph",
    "BatchBackend", "MonospaceFont",
    "triangle_vertices", "TRIANGLE_CORNERS",
    "TriangleRenderer",
]
