"""
Result record of the electromagnetic model.
"""

from __future__ import annotations

from dataclasses import dataclass, asdict

from ..utils.units import to_mhz, to_pf, to_uh


@dataclass(frozen=True)
class CoilProperties:
    """
    Electrical properties derived from a CoilGeometry. SI units throughout.
    """
    inductance: float               # L [H]
    self_capacitance: float         # C [F]
    total_capacitance: float        # C + external [F]
    resonant_frequency: float       # f0 [Hz]
    angular_frequency: float        # ω [rad/s]
    wavelength: float               # λ [m]
    wavenumber: float               # k [rad/m]
    ohmic_resistance: float         # Ro [Ω]
    radiation_resistance: float     # Rr [Ω]
    damping_coefficient: float      # Γ [1/s]
    quality_factor: float           # Q

    # ─── Convenience accessors ───────────────────────────────────────────

    @property
    def total_resistance(self) -> float:
        return self.ohmic_resistance + self.radiation_resistance

    @property
    def radiation_efficiency(self) -> float:
        """Fraction of the dissipated power that is radiated."""
        return self.radiation_resistance / self.total_resistance

    def as_dict(self) -> dict:
        return asdict(self)

    def summary(self) -> dict:
        """Key quantities in display units."""
        return {
            "resonant_frequency_mhz": to_mhz(self.resonant_frequency),
            "wavelength_m": self.wavelength,
            "inductance_uh": to_uh(self.inductance),
            "self_capacitance_pf": to_pf(self.self_capacitance),
            "total_capacitance_pf": to_pf(self.total_capacitance),
            "ohmic_resistance_ohm": self.ohmic_resistance,
            "radiation_resistance_ohm": self.radiation_resistance,
            "radiation_efficiency": self.radiation_efficiency,
            "damping_coefficient": self.damping_coefficient,
            "quality_factor": self.quality_factor,
        }
