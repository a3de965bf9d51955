"""
Point masses on the number line and their weighted-average combination.

A WeightedPoint pairs a position with the area (weight) it stands for. The
defuzzifier reduces every slice of a membership shape to one of these and
merges them with WeightedPoint.combine.
"""

from dataclasses import dataclass
from typing import Iterable


@dataclass(frozen=True)
class WeightedPoint:
    """
    An immutable (value, weight) pair.

    Attributes:
        value (float): Position on the number line.
        weight (float): Mass at that position. 0 means "no contribution".
    """

    value: float = 0.0
    weight: float = 0.0

    @staticmethod
    def combine(points: Iterable["WeightedPoint"]) -> "WeightedPoint":
        """
        Merges point masses into their weighted-average point.

        The result sits at sum(value * weight) / sum(weight) and carries the
        total weight. With no points, or only zero-weight points, the result
        is the origin with zero weight, which is harmless to combine again.

        Args:
            points (Iterable[WeightedPoint]): Points to merge. Consumed once,
                never modified.

        Returns:
            WeightedPoint: The combined point.
        """
        total_weight = 0.0
        weighted_value_sum = 0.0
        for point in points:
            total_weight += point.weight
            weighted_value_sum += point.value * point.weight

        if total_weight > 0:
            return WeightedPoint(weighted_value_sum / total_weight, total_weight)
        return WeightedPoint(0.0, 0.0)
