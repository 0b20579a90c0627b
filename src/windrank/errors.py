from __future__ import annotations


class WindRankError(ValueError):
    """Base class for windrank input errors."""


class InvalidDesignError(WindRankError):
    """
    A design parameter is out of bounds.

    `design` is the design name and `field` the offending parameter, so callers
    can report which input to fix.
    """

    def __init__(self, design: str, field: str, reason: str) -> None:
        self.design = design
        self.field = field
        self.reason = reason
        super().__init__(f"design {design!r}: {field} {reason}")


class EmptyInputError(WindRankError):
    """A batch operation was requested over an empty sequence."""


class InvalidSpeedPointError(WindRankError):
    """A wind-speed test point is negative or not finite."""
