# frameui/core/math2d.py
"""
2D affine math for viewport transforms.

Everything lives in normalized device coordinates: [-1, 1] on both axes,
(-1, -1) bottom-left, (1, 1) top-right.
Designed for CPU-side composition - upload to GPU with to_mat3_column_major().
"""

from __future__ import annotations
import math
from typing import Optional, Tuple
import numpy as np

Point2 = Tuple[float, float]
Point3 = Tuple[float, float, float]


# =============================================================================
# Affine Transform
# =============================================================================

class AffineTransform:
    """
    2x3 affine matrix.

    Stored row-major as (a, b, c, d, e, f):

        x' = a*x + b*y + c*w
        y' = d*x + e*y + f*w
        w' = w

    `A @ B` applies B first, then A.
    """

    __slots__ = ('m',)

    def __init__(self, values: Optional[Tuple[float, ...]] = None):
        """Initialize with row-major values or identity."""
        if values is None:
            self.m = (
                1.0, 0.0, 0.0,
                0.0, 1.0, 0.0,
            )
        else:
            assert len(values) == 6
            self.m = tuple(float(v) for v in values)

    def __getitem__(self, idx: Tuple[int, int]) -> float:
        row, col = idx
        return self.m[row * 3 + col]

    def __matmul__(self, other: AffineTransform) -> AffineTransform:
        if isinstance(other, AffineTransform):
            return self.compose(other)
        return NotImplemented

    def __eq__(self, other) -> bool:
        if not isinstance(other, AffineTransform):
            return NotImplemented
        return self.m == other.m

    def __hash__(self) -> int:
        return hash(self.m)

    def __repr__(self) -> str:
        a, b, c, d, e, f = self.m
        return f"AffineTransform(({a:g}, {b:g}, {c:g}, {d:g}, {e:g}, {f:g}))"

    def compose(self, other: AffineTransform) -> AffineTransform:
        """Matrix product. The result applies `other` first, then `self`."""
        a0, b0, c0, d0, e0, f0 = self.m
        a1, b1, c1, d1, e1, f1 = other.m
        return AffineTransform((
            a0 * a1 + b0 * d1,  a0 * b1 + b0 * e1,  a0 * c1 + b0 * f1 + c0,
            d0 * a1 + e0 * d1,  d0 * b1 + e0 * e1,  d0 * c1 + e0 * f1 + f0,
        ))

    def apply(self, point: Point3) -> Point3:
        """Transform a homogeneous point. Divide x and y by w for the final position."""
        x, y, w = point
        a, b, c, d, e, f = self.m
        return (a * x + b * y + c * w, d * x + e * y + f * w, w)

    def apply_point(self, point: Point2) -> Point2:
        x, y, w = self.apply((point[0], point[1], 1.0))
        return (x / w, y / w)

    def determinant(self) -> float:
        a, b, _, d, e, _ = self.m
        return a * e - b * d

    def invert(self) -> Optional[AffineTransform]:
        """Inverse matrix, or None if the matrix is singular."""
        det = self.determinant()
        if det == 0.0 or det != det:
            return None

        a, b, c, d, e, f = self.m
        inv_det = 1.0 / det
        return AffineTransform((
            e * inv_det,   -b * inv_det,  (b * f - c * e) * inv_det,
            -d * inv_det,   a * inv_det,  (c * d - a * f) * inv_det,
        ))

    def lerp(self, other: AffineTransform, t: float) -> AffineTransform:
        """
        Per-component linear interpolation towards `other`.

        This is not a decomposed (scale/rotate/translate) interpolation.
        Rotations shrink through the middle of the blend, so it only looks
        right for small deltas.
        """
        return AffineTransform(tuple(
            lerp(a, b, t) for a, b in zip(self.m, other.m)
        ))

    def is_close(self, other: AffineTransform, eps: float = 1e-6) -> bool:
        return all(abs(a - b) <= eps for a, b in zip(self.m, other.m))

    def to_tuple(self) -> Tuple[float, ...]:
        return self.m

    def to_mat3_column_major(self) -> list:
        """For GPU upload (OpenGL expects column-major)."""
        a, b, c, d, e, f = self.m
        return [
            a,   d,   0.0,
            b,   e,   0.0,
            c,   f,   1.0,
        ]

    def to_array(self) -> np.ndarray:
        """Full 3x3 row-major matrix as float32."""
        a, b, c, d, e, f = self.m
        return np.array([
            [a,   b,   c],
            [d,   e,   f],
            [0.0, 0.0, 1.0],
        ], dtype=np.float32)

    @staticmethod
    def identity() -> AffineTransform:
        return AffineTransform()

    @staticmethod
    def scale(factor: float) -> AffineTransform:
        return AffineTransform.scale_wh(factor, factor)

    @staticmethod
    def scale_wh(w: float, h: float) -> AffineTransform:
        return AffineTransform((
            w,   0.0, 0.0,
            0.0, h,   0.0,
        ))

    @staticmethod
    def translate(x: float, y: float) -> AffineTransform:
        return AffineTransform((
            1.0, 0.0, x,
            0.0, 1.0, y,
        ))

    @staticmethod
    def rotate(radians: float) -> AffineTransform:
        """Counter-clockwise rotation."""
        c = math.cos(radians)
        s = math.sin(radians)
        return AffineTransform((
            c,  -s,  0.0,
            s,   c,  0.0,
        ))

    @staticmethod
    def skew_x(radians: float) -> AffineTransform:
        """Shift x proportionally to y."""
        t = math.tan(radians)
        return AffineTransform((
            1.0, t,   0.0,
            0.0, 1.0, 0.0,
        ))


# =============================================================================
# Utility Functions
# =============================================================================

def clamp(value: float, min_val: float, max_val: float) -> float:
    return max(min_val, min(value, max_val))


def lerp(a: float, b: float, t: float) -> float:
    return a + (b - a) * t
