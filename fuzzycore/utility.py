"""
Weighted-average utility scoring.

Turns parallel lists of factor scores and importance weights into a single
utility value, calculated as:

    utility = (Σ(Wi * Fi)) / (Σ Wi)
"""

import logging
from typing import Sequence

from fuzzycore.errors import LengthMismatchError

utility_log = logging.getLogger("utility")


class UtilityCalculator:
    """Stateless weighted-average scorer."""

    @staticmethod
    def calculate_utility(factors: Sequence[float], weights: Sequence[float]) -> float:
        """
        Calculates the weighted average of the factors.

        Args:
            factors (Sequence[float]): Factor scores.
            weights (Sequence[float]): Weight for each factor, same length.

        Returns:
            float: The normalized utility score. Returns 0 when the weights
                sum to zero.

        Raises:
            LengthMismatchError: If factors and weights differ in length.
        """
        if len(factors) != len(weights):
            raise LengthMismatchError(
                f"Factors and weights must be of the same length "
                f"({len(factors)} != {len(weights)})"
            )

        weighted_sum = 0.0
        weight_total = 0.0
        for f, w in zip(factors, weights):
            weighted_sum += f * w
            weight_total += w

        if weight_total == 0:
            utility_log.warning("Sum of weights is zero. Outputting 0.")
            return 0.0

        utility = weighted_sum / weight_total
        utility_log.debug(
            "Utility: %.4f (from %d factors)", utility, len(factors)
        )
        return utility
