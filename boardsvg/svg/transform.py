"""Affine transformation utilities."""
import math
from collections.abc import Iterable
from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True)
class Matrix:
    """
    2D affine transform in SVG matrix order.

    Maps (x, y) to (a*x + c*y + e, b*x + d*y + f).
    """
    a: float = 1.0
    b: float = 0.0
    c: float = 0.0
    d: float = 1.0
    e: float = 0.0
    f: float = 0.0

    @classmethod
    def identity(cls) -> "Matrix":
        return cls()

    @classmethod
    def translate(cls, tx: float, ty: float = 0.0) -> "Matrix":
        return cls(e=tx, f=ty)

    @classmethod
    def scale(cls, sx: float, sy: float | None = None) -> "Matrix":
        return cls(a=sx, d=sx if sy is None else sy)

    @classmethod
    def rotate_deg(cls, angle_deg: float) -> "Matrix":
        """Rotation about the origin (counterclockwise positive in a Y-up system)."""
        angle_rad = math.radians(angle_deg)
        cos_a = math.cos(angle_rad)
        sin_a = math.sin(angle_rad)
        return cls(a=cos_a, b=sin_a, c=-sin_a, d=cos_a)

    @classmethod
    def from_array(cls, m: np.ndarray) -> "Matrix":
        return cls(
            a=float(m[0, 0]), b=float(m[1, 0]),
            c=float(m[0, 1]), d=float(m[1, 1]),
            e=float(m[0, 2]), f=float(m[1, 2]),
        )

    def to_array(self) -> np.ndarray:
        """Return the 3x3 homogeneous matrix."""
        return np.array([
            [self.a, self.c, self.e],
            [self.b, self.d, self.f],
            [0.0, 0.0, 1.0],
        ])

    @property
    def scale_x(self) -> float:
        """Magnitude of the horizontal scale component."""
        return abs(self.a)

    @property
    def scale_y(self) -> float:
        """Magnitude of the vertical scale component."""
        return abs(self.d)

    def apply_to_point(self, x: float, y: float) -> tuple[float, float]:
        """
        Map a single point through the transform.

        Args:
            x: X coordinate
            y: Y coordinate

        Returns:
            Tuple of (transformed_x, transformed_y)
        """
        return (
            self.a * x + self.c * y + self.e,
            self.b * x + self.d * y + self.f,
        )

    def apply_to_points(self, points: Iterable[tuple[float, float]]) -> list[tuple[float, float]]:
        """Map a sequence of points, preserving order."""
        pts = np.asarray(list(points), dtype=float).reshape(-1, 2)
        if len(pts) == 0:
            return []

        homogeneous = np.hstack([pts, np.ones((len(pts), 1))])
        mapped = homogeneous @ self.to_array().T
        return [(float(x), float(y)) for x, y in mapped[:, :2]]


def compose(*matrices: Matrix) -> Matrix:
    """
    Combine transforms into one.

    Follows the SVG convention: compose(A, B) applies B first, then A, so
    compose(translate, scale) scales about the origin and then translates.
    """
    result = np.identity(3)
    for m in matrices:
        result = result @ m.to_array()
    return Matrix.from_array(result)
