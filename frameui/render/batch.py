"""
Draw Batch

A backend that records draw calls instead of executing them.

Design:
- Collects triangles and glyphs during the UI build phase
- Triangles keep the matrix they were drawn with; vertex data is built
  afterwards with numpy (see triangle_vertices / DrawBatch.vertices_for)
- The batch is handed to a renderer (renderer.TriangleRenderer) or
  inspected directly, e.g. in tests

Image ratios and font metrics are supplied by the host, since there are no
real textures or fonts behind a batch.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, Hashable, List, Mapping, Optional, Sequence, Tuple
import numpy as np

from frameui.core.math2d import AffineTransform
from frameui.ui.backend import Backend, GlyphInfos, UV

# Local-space corners of the triangle every draw_triangle() call refers to
TRIANGLE_CORNERS = ((-1.0, 1.0), (-1.0, -1.0), (1.0, 1.0))


# =============================================================================
# Draw Commands
# =============================================================================

@dataclass(frozen=True)
class DrawTriangle:
    """One textured triangle."""
    resource: Hashable
    matrix: AffineTransform
    uv: Tuple[UV, UV, UV]
    z_index: int = 0


@dataclass(frozen=True)
class DrawGlyph:
    """One glyph, drawn over the [-1, 1] square premultiplied by matrix."""
    font: Hashable
    glyph: str
    matrix: AffineTransform
    z_index: int = 0


def triangle_vertices(matrix: AffineTransform, uv: Sequence[UV]) -> np.ndarray:
    """
    Vertex data of one triangle.

    Returns a (3, 4) float32 array of x, y, u, v, positions in viewport NDC.
    """
    vertices = np.zeros((3, 4), dtype=np.float32)
    for i, (corner, coords) in enumerate(zip(TRIANGLE_CORNERS, uv)):
        x, y = matrix.apply_point(corner)
        vertices[i] = [x, y, coords[0], coords[1]]
    return vertices


# =============================================================================
# Batch
# =============================================================================

@dataclass
class DrawBatch:
    """Draw commands in submission order."""
    triangles: List[DrawTriangle] = field(default_factory=list)
    glyphs: List[DrawGlyph] = field(default_factory=list)

    def add_triangle(self, triangle: DrawTriangle):
        self.triangles.append(triangle)

    def add_glyph(self, glyph: DrawGlyph):
        self.glyphs.append(glyph)

    def clear(self):
        self.triangles.clear()
        self.glyphs.clear()

    @property
    def triangle_count(self) -> int:
        return len(self.triangles)

    @property
    def glyph_count(self) -> int:
        return len(self.glyphs)

    @property
    def total_vertices(self) -> int:
        return len(self.triangles) * 3

    def resources(self) -> List[Hashable]:
        """Distinct triangle resources, in first-use order."""
        return list(dict.fromkeys(t.resource for t in self.triangles))

    def vertices_for(self, resource: Hashable) -> np.ndarray:
        """(N*3, 4) vertex array of every triangle drawn with `resource`."""
        tris = [t for t in self.triangles if t.resource == resource]
        if not tris:
            return np.zeros((0, 4), dtype=np.float32)
        return np.concatenate([triangle_vertices(t.matrix, t.uv) for t in tris])


# =============================================================================
# Fonts
# =============================================================================

@dataclass(frozen=True)
class MonospaceFont:
    """
    Fixed-width font metrics, in EMs.

    kerning: optional (first, second) -> offset table.
    """
    glyph_width: float = 0.5
    glyph_height: float = 0.7
    advance: float = 0.6
    line_height: float = 1.2
    kerning: Mapping[Tuple[str, str], float] = field(default_factory=dict, hash=False)

    def glyph_infos(self, glyph: str) -> GlyphInfos:
        return GlyphInfos(
            width=self.glyph_width,
            height=self.glyph_height,
            x_offset=(self.advance - self.glyph_width) / 2.0,
            y_offset=self.glyph_height,
            x_advance=self.advance,
        )


# =============================================================================
# Recording Backend
# =============================================================================

class BatchBackend(Backend):
    """
    Backend that records into a DrawBatch.

    Usage:
        backend = BatchBackend({"button": 3.0}, {"ui": MonospaceFont()})

        # Each frame:
        backend.clear()
        ctx = session.begin_frame(w, h, backend, cursor, pressed, released)
        build_ui(ctx)
        renderer.render(backend.batch)
    """

    def __init__(self, image_ratios: Optional[Mapping[Hashable, float]] = None,
                 fonts: Optional[Mapping[Hashable, MonospaceFont]] = None):
        self.image_ratios: Dict[Hashable, float] = dict(image_ratios or {})
        self.fonts: Dict[Hashable, MonospaceFont] = dict(fonts or {})
        self.batch = DrawBatch()
        self._z_index = 0

    def clear(self):
        self.batch.clear()
        self._z_index = 0

    def _next_z(self) -> int:
        z = self._z_index
        self._z_index += 1
        return z

    # ImageBackend

    def draw_triangle(self, resource: Any, matrix: AffineTransform, uv_coords: Sequence[UV]):
        self.batch.add_triangle(DrawTriangle(
            resource=resource,
            matrix=matrix,
            uv=tuple(tuple(c) for c in uv_coords),
            z_index=self._next_z(),
        ))

    def get_image_width_per_height(self, resource: Any) -> float:
        return self.image_ratios[resource]

    # TextBackend

    def draw_glyph(self, font: Any, glyph: str, matrix: AffineTransform):
        self.batch.add_glyph(DrawGlyph(
            font=font,
            glyph=glyph,
            matrix=matrix,
            z_index=self._next_z(),
        ))

    def line_height(self, font: Any) -> float:
        return self.fonts[font].line_height

    def glyph_infos(self, font: Any, glyph: str) -> GlyphInfos:
        return self.fonts[font].glyph_infos(glyph)

    def kerning(self, font: Any, first: str, second: str) -> float:
        return self.fonts[font].kerning.get((first, second), 0.0)
