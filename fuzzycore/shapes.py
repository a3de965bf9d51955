"""
Membership shapes: the fuzzy sets a FuzzyVariable is built from.

Two piecewise-linear shapes are supported, the trapezoid and the triangle.
Each one answers two questions:

  * membership_degree(x): how strongly x belongs to the set, in [0, 1].
  * partial_centroid(y): where the area of the shape clipped at height y is
    centred, and how large that area is, as a WeightedPoint.

The clipped area is split into a left sliver (rising edge), a right sliver
(falling edge) and the rectangle between them. Cut positions on the edges are
found by scaling the edge width with y, so vertical edges (a == b or c == d)
simply produce zero-area slivers.
"""

import logging
from dataclasses import dataclass
from typing import Tuple

from fuzzycore.errors import InvalidShapeError
from fuzzycore.weighted_point import WeightedPoint

shapes_log = logging.getLogger("shapes")


def _clamp01(x: float) -> float:
    if x <= 0.0:
        return 0.0
    elif x >= 1.0:
        return 1.0
    else:
        return x


class MembershipShape:
    """Base class for the closed family of membership shapes."""

    def membership_degree(self, x: float) -> float:
        raise NotImplementedError

    def partial_centroid(self, y: float) -> WeightedPoint:
        raise NotImplementedError

    def support(self) -> Tuple[float, float]:
        raise NotImplementedError

    @staticmethod
    def _clipped_centroid(
        left_foot: float,
        left_top: float,
        right_top: float,
        right_foot: float,
        y: float,
    ) -> WeightedPoint:
        """
        Centroid of a trapezoid outline clipped at height y.

        Args:
            left_foot (float): Where the rising edge leaves zero.
            left_top (float): Where the rising edge reaches one.
            right_top (float): Where the falling edge leaves one.
            right_foot (float): Where the falling edge reaches zero.
            y (float): Cut level, clamped into [0, 1].

        Returns:
            WeightedPoint: Centroid and area of the clipped region, or the
                origin with zero weight when y is 0.
        """
        y = _clamp01(y)
        if y == 0.0:
            return WeightedPoint(0.0, 0.0)

        left_max = left_foot + y * (left_top - left_foot)
        right_min = right_foot - y * (right_foot - right_top)

        left = WeightedPoint((left_foot + left_max) / 2, (left_max - left_foot) * y / 2)
        right = WeightedPoint((right_min + right_foot) / 2, (right_foot - right_min) * y / 2)
        center = WeightedPoint((left_max + right_min) / 2, (right_min - left_max) * y)

        result = WeightedPoint.combine((left, right, center))
        shapes_log.debug(
            "Cut y=%.3f -> left=%.3f right=%.3f centroid=%.4f area=%.4f",
            y, left_max, right_min, result.value, result.weight,
        )
        return result


@dataclass(frozen=True)
class Trapezoid(MembershipShape):
    """
    Trapezoidal membership shape.

    Attributes:
        a (float): Left foot (membership leaves 0).
        b (float): Start of the plateau (membership reaches 1).
        c (float): End of the plateau.
        d (float): Right foot (membership returns to 0).
    """

    a: float
    b: float
    c: float
    d: float

    def __post_init__(self) -> None:
        if not (self.a <= self.b <= self.c <= self.d):
            raise InvalidShapeError(
                f"Invalid trapezoid params [{self.a}, {self.b}, {self.c}, {self.d}]: "
                "a <= b <= c <= d is required"
            )

    def membership_degree(self, x: float) -> float:
        a, b, c, d = self.a, self.b, self.c, self.d
        if x <= a or x >= d:
            return 0.0
        elif b <= x <= c:
            return 1.0
        elif a < x < b:
            return (x - a) / (b - a)
        elif c < x < d:
            return (d - x) / (d - c)
        return 0.0

    def partial_centroid(self, y: float) -> WeightedPoint:
        return self._clipped_centroid(self.a, self.b, self.c, self.d, y)

    def support(self) -> Tuple[float, float]:
        return (self.a, self.d)


@dataclass(frozen=True)
class Triangle(MembershipShape):
    """
    Triangular membership shape with its apex at b.

    Attributes:
        a (float): Left foot.
        b (float): Apex (membership 1).
        c (float): Right foot.
    """

    a: float
    b: float
    c: float

    def __post_init__(self) -> None:
        if not (self.a <= self.b <= self.c):
            raise InvalidShapeError(
                f"Invalid triangle params [{self.a}, {self.b}, {self.c}]: "
                "a <= b <= c is required"
            )

    def membership_degree(self, x: float) -> float:
        a, b, c = self.a, self.b, self.c
        if x <= a or x >= c:
            return 0.0
        elif x == b:
            return 1.0
        # left half rt triangle
        elif a < x < b:
            return (x - a) / (b - a)
        # right half rt triangle
        elif b < x < c:
            return (c - x) / (c - b)
        return 0.0

    def partial_centroid(self, y: float) -> WeightedPoint:
        return self._clipped_centroid(self.a, self.b, self.b, self.c, y)

    def support(self) -> Tuple[float, float]:
        return (self.a, self.c)
