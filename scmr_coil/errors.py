"""Exception types raised by the coil calculator."""

from __future__ import annotations

from typing import Any


class InvalidArgument(ValueError):
    """Wrong argument count/shape, an unknown profile, or a non-physical geometry value."""


class GeometryDomainError(ArithmeticError):
    """
    A closed-form formula was evaluated outside its domain.

    Attributes:
        formula: Name of the formula that could not be evaluated
        parameter: The input that violated the formula's precondition
        value: The offending value
        partial: Quantities computed before the failure (filled in by the pipeline)
    """

    def __init__(self, formula: str, parameter: str, value: float, detail: str = ""):
        self.formula = formula
        self.parameter = parameter
        self.value = value
        self.partial: dict[str, Any] = {}
        msg = f"{formula}: {parameter}={value!r} is outside the formula's domain"
        if detail:
            msg += f" ({detail})"
        super().__init__(msg)

