"""Exceptions raised by massaction."""

from __future__ import annotations


class ConcentrationLengthError(ValueError):
    """A concentration vector does not match the number of species."""

    def __init__(self, expected: int, actual: int) -> None:
        super().__init__(
            f"Expected {expected} concentrations (one per species), got {actual}"
        )
        self.expected = expected
        self.actual = actual


class NetworkFormatError(ValueError):
    """A reaction network description is malformed."""


class IntegrationError(RuntimeError):
    """The ODE solver did not complete successfully."""
