"""
Validity checks for the closed-form coil model.

The formulas assume a near-field, quasi-static coil whose turns are close
enough for the inter-turn capacitance formula to hold. Each assumption is
checked independently; a violated check is reported, never fatal.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from loguru import logger

from ..geometry.base import CoilGeometry
from ..solver.base import CoilProperties
from ..utils.constants import VALID_FREQ_MAX, VALID_FREQ_MIN

# Spacing ratio s/(2rc) above which the capacitance formula is out of range
MAX_SPACING_RATIO = 2.0


@dataclass(frozen=True)
class ValidityWarning:
    """One validity condition and whether this coil violates it."""
    name: str
    condition: str
    message: str
    violated: bool

    def __bool__(self) -> bool:
        return self.violated


@dataclass(frozen=True)
class ValidationReport:
    """All validity checks for one coil, in a fixed order."""
    warnings: tuple[ValidityWarning, ...]

    def _get(self, name: str) -> bool:
        for w in self.warnings:
            if w.name == name:
                return w.violated
        raise KeyError(name)

    @property
    def radius_too_large(self) -> bool:
        return self._get("radius_too_large")

    @property
    def coil_length_too_large(self) -> bool:
        return self._get("coil_length_too_large")

    @property
    def pitch_spacing_out_of_range(self) -> bool:
        return self._get("pitch_spacing_out_of_range")

    @property
    def frequency_out_of_range(self) -> bool:
        return self._get("frequency_out_of_range")

    @property
    def violations(self) -> list[ValidityWarning]:
        return [w for w in self.warnings if w.violated]

    @property
    def ok(self) -> bool:
        return not self.violations

    def as_dict(self) -> dict[str, bool]:
        return {w.name: w.violated for w in self.warnings}


def validate(geometry: CoilGeometry, properties: CoilProperties) -> ValidationReport:
    """Evaluate all four checks. Violations are logged as warnings."""
    lam = properties.wavelength
    f0 = properties.resonant_frequency
    r = geometry.loop_radius

    warnings = (
        ValidityWarning(
            "radius_too_large",
            "r >= λ/(6π)",
            "Coil radius too large",
            r >= lam / (6.0 * math.pi),
        ),
        ValidityWarning(
            "coil_length_too_large",
            "2π·r·N >= λ/3",
            "Coil length too large",
            geometry.wire_length >= lam / 3.0,
        ),
        ValidityWarning(
            "pitch_spacing_out_of_range",
            "s/(2·rc) > 2",
            "Capacitance formula out of valid range",
            geometry.spacing_ratio > MAX_SPACING_RATIO,
        ),
        ValidityWarning(
            "frequency_out_of_range",
            "f0 <= 100 kHz or f0 >= 100 MHz",
            "Resonant frequency may be out of range",
            f0 <= VALID_FREQ_MIN or f0 >= VALID_FREQ_MAX,
        ),
    )

    for w in warnings:
        if w.violated:
            logger.warning(f"{w.message}! ({w.condition})")

    return ValidationReport(warnings)
