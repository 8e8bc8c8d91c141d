"""
Draw Backend

Contract between the layout core and whatever actually rasterizes.

The core never touches pixels. Every primitive is "the full [-1, 1] square
(or a triangle of it), premultiplied by a matrix", and the backend maps
the result onto its own surface.

Image resources and font resources are separate, opaque types chosen by the
host (a texture handle, a name, an atlas entry...).

The backend is trusted: there is no error channel. Missing images or glyphs
are the backend's business (e.g. draw a placeholder).
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Sequence, Tuple

from frameui.core.math2d import AffineTransform

UV = Tuple[float, float]

# Default UV corners for draw_image(): [0, 0] is the bottom-left of the texture.
UV_TOP_LEFT = (0.0, 1.0)
UV_TOP_RIGHT = (1.0, 1.0)
UV_BOTTOM_RIGHT = (1.0, 0.0)
UV_BOTTOM_LEFT = (0.0, 0.0)


# =============================================================================
# Glyph Metrics
# =============================================================================

@dataclass(frozen=True)
class GlyphInfos:
    """
    Metrics of one glyph. Every value is divided by the size of an EM.

    width, height: size of the glyph box.
    x_offset: distance from the end of the previous glyph to the start of this one.
    y_offset: distance from the baseline to the top of the glyph. Equals
        `height` for glyphs that do not descend below the line.
    x_advance: distance from the end of the previous glyph to the end of this
        one. Should be >= width + x_offset.
    """
    width: float
    height: float
    x_offset: float
    y_offset: float
    x_advance: float


# =============================================================================
# Contracts
# =============================================================================

class ImageBackend(ABC):
    """Draws textured triangles."""

    @abstractmethod
    def draw_triangle(self, resource: Any, matrix: AffineTransform,
                      uv_coords: Sequence[UV]):
        """
        Draw the triangle [-1, 1], [-1, -1], [1, 1] premultiplied by `matrix`.

        `uv_coords` are the texture coordinates of the top-left, bottom-left
        and top-right corners, [0, 0] being the bottom-left of the texture.
        Vulkan/DirectX backends must flip y themselves.
        """

    @abstractmethod
    def get_image_width_per_height(self, resource: Any) -> float:
        """Width of the image divided by its height."""

    def draw_image(self, resource: Any, matrix: AffineTransform):
        """
        Draw the image over the whole [-1, 1] square premultiplied by `matrix`.

        The aspect ratio is not preserved here, that is the caller's job.
        """
        self.draw_image_uv(resource, matrix, UV_TOP_LEFT, UV_TOP_RIGHT,
                           UV_BOTTOM_RIGHT, UV_BOTTOM_LEFT)

    def draw_image_uv(self, resource: Any, matrix: AffineTransform,
                      top_left: UV, top_right: UV, bottom_right: UV, bottom_left: UV):
        """Same as draw_image(), with explicit UVs for the four corners."""
        self.draw_triangle(resource, matrix, (top_left, bottom_left, top_right))

        # The same triangle turned 180 degrees covers the other half
        invert = AffineTransform.scale(-1.0)
        self.draw_triangle(resource, matrix @ invert, (bottom_right, top_right, bottom_left))


class TextBackend(ABC):
    """Draws glyphs and reports font metrics."""

    @abstractmethod
    def draw_glyph(self, font: Any, glyph: str, matrix: AffineTransform):
        """Same as ImageBackend.draw_image(), for a single glyph."""

    @abstractmethod
    def line_height(self, font: Any) -> float:
        """Height of a line of text in EMs, usually around 1.2."""

    @abstractmethod
    def glyph_infos(self, font: Any, glyph: str) -> GlyphInfos:
        """Metrics of one glyph."""

    @abstractmethod
    def kerning(self, font: Any, first: str, second: str) -> float:
        """
        Offset in EMs added to `second` when it follows `first`.

        Negative values pull the glyphs together. Return 0.0 when unsure.
        """


class Backend(ImageBackend, TextBackend, ABC):
    """A backend that can draw both images and text."""
