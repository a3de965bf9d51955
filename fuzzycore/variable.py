"""
Fuzzy variables: three overlapping categories over one numeric domain.

A FuzzyVariable owns a "low", a "medium" and a "high" membership shape. It
fuzzifies a crisp input into an Evaluation (the three membership degrees) and
defuzzifies an Evaluation back into a crisp value by combining the cut-level
centroid of each shape, clipped at that shape's own degree.

Both FuzzyVariable and Evaluation are immutable, so one variable can serve any
number of callers concurrently.
"""

import logging
from dataclasses import dataclass
from typing import Dict, List

from fuzzycore.shapes import MembershipShape
from fuzzycore.weighted_point import WeightedPoint

variable_log = logging.getLogger("variable")

LABELS = ("low", "medium", "high")


@dataclass(frozen=True)
class Evaluation:
    """
    Membership degrees of one input in the low/medium/high categories.

    Attributes:
        low (float): Degree of membership in the "low" shape.
        medium (float): Degree of membership in the "medium" shape.
        high (float): Degree of membership in the "high" shape.
    """

    low: float = 0.0
    medium: float = 0.0
    high: float = 0.0

    # Dominance is non-exclusive: tied categories are all dominant.
    def is_low(self) -> bool:
        return self.low >= self.medium and self.low >= self.high

    def is_medium(self) -> bool:
        return self.medium >= self.low and self.medium >= self.high

    def is_high(self) -> bool:
        return self.high >= self.low and self.high >= self.medium

    def degrees(self) -> Dict[str, float]:
        return {"low": self.low, "medium": self.medium, "high": self.high}

    def dominant(self) -> List[str]:
        """Labels of every category whose degree is not beaten by another."""
        checks = (self.is_low(), self.is_medium(), self.is_high())
        return [label for label, hit in zip(LABELS, checks) if hit]


@dataclass(frozen=True)
class FuzzyVariable:
    """
    A numeric quantity described by three fuzzy categories.

    No cross-shape validation is done; the shapes are expected to overlap.

    Attributes:
        low (MembershipShape): Shape for the "low" category.
        medium (MembershipShape): Shape for the "medium" category.
        high (MembershipShape): Shape for the "high" category.
        name (str): Label used in log output.
    """

    low: MembershipShape
    medium: MembershipShape
    high: MembershipShape
    name: str = ""

    def __post_init__(self) -> None:
        variable_log.info(
            "Variable '%s' initialized: low=%s medium=%s high=%s",
            self.name, self.low, self.medium, self.high,
        )

    def evaluate(self, x: float) -> Evaluation:
        """
        Fuzzifies a crisp input.

        Any real number is accepted; inputs outside every shape's support
        yield an all-zero Evaluation.

        Args:
            x (float): The crisp input value.

        Returns:
            Evaluation: Membership degrees of x in the three shapes.
        """
        evaluation = Evaluation(
            low=self.low.membership_degree(x),
            medium=self.medium.membership_degree(x),
            high=self.high.membership_degree(x),
        )
        variable_log.debug(
            "Evaluated %s= %.3f -> low=%.3f medium=%.3f high=%.3f",
            self.name or "x", x, evaluation.low, evaluation.medium, evaluation.high,
        )
        return evaluation

    def crisp_value(self, evaluation: Evaluation = Evaluation()) -> float:
        """
        Defuzzifies an Evaluation into a single crisp value.

        Each shape is clipped at its own degree; the centroids of the clipped
        areas are combined, weighted by area. When every degree is 0 the
        result is 0.

        Args:
            evaluation (Evaluation): Degrees to defuzzify. Defaults to an
                all-zero evaluation.

        Returns:
            float: The crisp value.
        """
        combined = WeightedPoint.combine(
            (
                self.low.partial_centroid(evaluation.low),
                self.medium.partial_centroid(evaluation.medium),
                self.high.partial_centroid(evaluation.high),
            )
        )
        variable_log.debug(
            "Crisp %s= %.4f (area %.4f)", self.name or "x", combined.value, combined.weight
        )
        return combined.value

    def describe(self, evaluation: Evaluation) -> str:
        """One-line summary of degrees and crisp value for debugging."""
        return (
            f"Low Degree: {evaluation.low:.3f}, "
            f"Medium Degree: {evaluation.medium:.3f}, "
            f"High Degree: {evaluation.high:.3f}, "
            f"Crisp Value: {self.crisp_value(evaluation):.3f}"
        )
