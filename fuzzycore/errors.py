"""
Exception types raised by the fuzzy inference core.

All of them derive from ValueError so callers that already guard construction
with ``except ValueError`` keep working.
"""


class FuzzyCoreError(ValueError):
    """Base class for domain errors in fuzzycore."""


class InvalidShapeError(FuzzyCoreError):
    """Membership shape breakpoints are not in the required order."""


class LengthMismatchError(FuzzyCoreError):
    """Parallel factor/weight sequences differ in length."""


class ConfigError(FuzzyCoreError):
    """Configuration file content cannot be turned into fuzzy variables."""
