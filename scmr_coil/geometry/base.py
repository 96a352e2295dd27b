"""
Helical coil geometry.

A coil is described by its wire cross-section radius, loop radius, turn count
and pitch (center-to-center distance between adjacent turns), plus an optional
capacitor placed across its ends.
"""

from __future__ import annotations

import math
from numbers import Real
from dataclasses import dataclass
from typing import Optional

from ..errors import InvalidArgument


def _require_positive(name: str, value: float) -> None:
    if isinstance(value, bool) or not isinstance(value, Real):
        raise InvalidArgument(f"{name} must be a number, got {type(value).__name__}")
    if not math.isfinite(value) or value <= 0:
        raise InvalidArgument(f"{name} must be a finite positive number, got {value!r}")


@dataclass(frozen=True)
class CoilGeometry:
    """
    Complete geometry of one SCMR helical coil. All lengths in meters.

    turn_count may be fractional (e.g. 5.25 turns).
    """
    cross_section_radius: float
    loop_radius: float
    turn_count: float
    pitch: float
    external_capacitance: float = 0.0   # [F]

    # Metadata
    profile: Optional[str] = None
    nominal_awg: Optional[float] = None

    def __post_init__(self):
        _require_positive("cross_section_radius", self.cross_section_radius)
        _require_positive("loop_radius", self.loop_radius)
        _require_positive("turn_count", self.turn_count)
        _require_positive("pitch", self.pitch)
        excap = self.external_capacitance
        if isinstance(excap, bool) or not isinstance(excap, Real):
            raise InvalidArgument("external_capacitance must be a number")
        if not math.isfinite(excap) or excap < 0:
            raise InvalidArgument(
                f"external_capacitance must be finite and >= 0, got {excap!r}"
            )

    @property
    def loop_diameter(self) -> float:
        return 2.0 * self.loop_radius

    @property
    def wire_length(self) -> float:
        """End-to-end wire length l = 2π·r·N (pitch contribution neglected)."""
        return 2.0 * math.pi * self.loop_radius * self.turn_count

    @property
    def height(self) -> float:
        """Axial coil height h = s·N."""
        return self.pitch * self.turn_count

    @property
    def spacing_ratio(self) -> float:
        """s / (2·rc); the self-capacitance formula needs this above 1."""
        return self.pitch / (2.0 * self.cross_section_radius)

    @property
    def radius_ratio(self) -> float:
        """r / rc."""
        return self.loop_radius / self.cross_section_radius

    @property
    def has_external_capacitance(self) -> bool:
        return self.external_capacitance > 0

    def to_dict(self) -> dict:
        return {
            "cross_section_radius_m": self.cross_section_radius,
            "loop_radius_m": self.loop_radius,
            "turn_count": self.turn_count,
            "pitch_m": self.pitch,
            "external_capacitance_f": self.external_capacitance,
            "profile": self.profile,
        }
