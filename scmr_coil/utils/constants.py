"""
Physical constants for SCMR coil calculations.

All values in SI units. The set is a frozen value passed explicitly into every
formula so one calculation never depends on hidden module state.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field


@dataclass(frozen=True)
class PhysicalConstants:
    """Fixed constants for one calculation. Derived fields follow the primaries."""
    mu_0: float = 4.0 * math.pi * 1e-7    # Permeability of free space [H/m]
    mu_copper: float = 1.256629e-6        # Permeability of copper [H/m]
    c: float = 2.998e8                    # Speed of light in vacuum [m/s]
    planck: float = 6.626e-11             # Planck constant, as tabulated by the source calculator
    q_0: float = 1.602e-19                # Elementary charge [C]
    resistivity: float = 1.68e-8          # Copper resistivity [Ω·m]
    conductivity: float = 5.96e7          # Copper conductivity [S/m]

    eps_0: float = field(init=False)      # Permittivity of free space [F/m]
    z_0: float = field(init=False)        # Impedance of free space [Ω]
    k_e: float = field(init=False)        # Coulomb's constant [N·m²/C²]

    def __post_init__(self):
        eps_0 = 1.0 / (self.mu_0 * self.c**2)
        object.__setattr__(self, "eps_0", eps_0)
        object.__setattr__(self, "z_0", self.mu_0 * self.c)
        object.__setattr__(self, "k_e", 1.0 / (4.0 * math.pi * eps_0))


DEFAULT_CONSTANTS = PhysicalConstants()

# ─── Model validity band ─────────────────────────────────────────────────────
VALID_FREQ_MIN = 100e3                 # Below this the closed forms are untested [Hz]
VALID_FREQ_MAX = 100e6



# ─── Derived Helpers ─────────────────────────────────────────────────────────

def freq_to_wavelength(freq_hz: float,
                       constants: PhysicalConstants = DEFAULT_CONSTANTS) -> float:
    """Convert frequency [Hz] to free-space wavelength [m]."""
    return constants.c / freq_hz


def wavenumber(wavelength_m: float) -> float:
    """Free-space wavenumber k = 2π/λ [rad/m]."""
    return 2.0 * math.pi / wavelength_m
