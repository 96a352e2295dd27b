"""
Closed-form electromagnetic model of an SCMR helical coil.

Every function is a pure evaluation over the coil geometry and an explicit
PhysicalConstants value. Where a formula is evaluated outside its domain
(imaginary square root, division by a zero quantity) a GeometryDomainError is
raised instead of returning NaN/inf.

Symbols: r = loop radius, rc = wire cross-section radius, N = turns,
s = pitch, h = s·N coil height, l = 2π·r·N wire length.
"""

from __future__ import annotations

import math

from loguru import logger

from .base import CoilProperties
from ..errors import GeometryDomainError
from ..geometry.base import CoilGeometry
from ..utils.constants import DEFAULT_CONSTANTS, PhysicalConstants, freq_to_wavelength, wavenumber


def self_inductance(geometry: CoilGeometry,
                    constants: PhysicalConstants = DEFAULT_CONSTANTS) -> float:
    """
    Self-inductance of the helix [H].

    L = μ0·r·N²·(ln(8r/rc) − 2)

    Positive only while ln(8r/rc) > 2, i.e. r/rc > e²/8 ≈ 0.92.
    """
    r = geometry.loop_radius
    rc = geometry.cross_section_radius
    n = geometry.turn_count
    return constants.mu_0 * r * n**2 * (math.log(8.0 * r / rc) - 2.0)


def self_capacitance(pitch: float, cross_section_radius: float, loop_radius: float,
                     constants: PhysicalConstants = DEFAULT_CONSTANTS) -> float:
    """
    Inter-turn self-capacitance of the helix [F].

    With sc = s/(2·rc):
        C = 2π²·r·ε0 / ln(sc + √(sc² − 1))

    Only defined for sc > 1; at sc <= 1 the turns touch or overlap.
    """
    sc = pitch / (2.0 * cross_section_radius)
    if sc <= 1.0:
        raise GeometryDomainError(
            "self_capacitance", "pitch", pitch,
            f"pitch/(2·rc) = {sc:.4g} must exceed 1; the pitch is too small "
            f"for a wire of radius {cross_section_radius:.4g} m",
        )
    # ln(sc + √(sc²−1)) == acosh(sc)
    return 2.0 * math.pi**2 * loop_radius * constants.eps_0 / math.acosh(sc)


def resonant_frequency(inductance: float, capacitance: float) -> float:
    """f0 = 1 / (2π·√(L·C)) [Hz]."""
    lc = inductance * capacitance
    if lc <= 0 or not math.isfinite(lc):
        raise GeometryDomainError(
            "resonant_frequency", "inductance", inductance,
            f"L·C = {lc:.4g} must be positive; ln(8r/rc) <= 2 gives a non-positive inductance",
        )
    return 1.0 / (2.0 * math.pi * math.sqrt(lc))


def _require_angular(formula: str, omega: float) -> None:
    if omega <= 0 or not math.isfinite(omega):
        raise GeometryDomainError(formula, "angular_frequency", omega,
                                  "frequency must be positive")


def ohmic_resistance(geometry: CoilGeometry, angular_frequency: float,
                     constants: PhysicalConstants = DEFAULT_CONSTANTS) -> float:
    """
    Skin-effect ohmic resistance [Ω].

    Ro = √(μ0·ω / (2σ)) · l / (4π·rc)
    """
    _require_angular("ohmic_resistance", angular_frequency)
    surface = math.sqrt(constants.mu_0 * angular_frequency / (2.0 * constants.conductivity))
    return surface * geometry.wire_length / (4.0 * math.pi * geometry.cross_section_radius)


def radiation_resistance(geometry: CoilGeometry, angular_frequency: float,
                         constants: PhysicalConstants = DEFAULT_CONSTANTS) -> float:
    """
    Radiation resistance [Ω]: magnetic-dipole term of the N loops plus the
    electric-dipole term of the coil height.

    Rr = √(μ0/ε0)·[ (π/12)·N²·(ωr/c)⁴ + (2/(3π³))·(ωh/c)² ]
    """
    _require_angular("radiation_resistance", angular_frequency)
    w, c = angular_frequency, constants.c
    n = geometry.turn_count
    loop_term = (math.pi / 12.0) * n**2 * (w * geometry.loop_radius / c) ** 4
    dipole_term = (2.0 / (3.0 * math.pi**3)) * (w * geometry.height / c) ** 2
    return math.sqrt(constants.mu_0 / constants.eps_0) * (loop_term + dipole_term)


def damping_coefficient(ohmic: float, radiation: float, inductance: float) -> float:
    """Γ = (Ro + Rr) / (2L) [1/s]."""
    if inductance == 0:
        raise GeometryDomainError("damping_coefficient", "inductance", inductance,
                                  "division by zero inductance")
    return (ohmic + radiation) / (2.0 * inductance)


def quality_factor(angular_frequency: float, damping: float) -> float:
    """Q = ω / (2Γ)."""
    if damping == 0:
        raise GeometryDomainError("quality_factor", "damping_coefficient", damping,
                                  "division by zero loss")
    return angular_frequency / (2.0 * damping)


def quality_factor_at(geometry: CoilGeometry, frequency: float,
                      constants: PhysicalConstants = DEFAULT_CONSTANTS) -> float:
    """Q of this model for the geometry driven at an arbitrary frequency."""
    omega = 2.0 * math.pi * frequency
    L = self_inductance(geometry, constants)
    gamma = damping_coefficient(
        ohmic_resistance(geometry, omega, constants),
        radiation_resistance(geometry, omega, constants),
        L,
    )
    return quality_factor(omega, gamma)


def evaluate_coil(geometry: CoilGeometry,
                  constants: PhysicalConstants = DEFAULT_CONSTANTS) -> CoilProperties:
    """
    Run the complete model for one coil.

    Raises:
        GeometryDomainError: if a formula's precondition is violated. The
            exception's ``partial`` dict holds what was computed before.
    """
    partial: dict[str, float] = {}
    try:
        L = self_inductance(geometry, constants)
        partial["inductance"] = L
        C = self_capacitance(geometry.pitch, geometry.cross_section_radius,
                             geometry.loop_radius, constants)
        partial["self_capacitance"] = C
        c_tot = C + geometry.external_capacitance
        partial["total_capacitance"] = c_tot
        f0 = resonant_frequency(L, c_tot)
    except GeometryDomainError as exc:
        exc.partial.update(partial)
        raise

    omega = 2.0 * math.pi * f0
    lam = freq_to_wavelength(f0, constants)
    r_ohm = ohmic_resistance(geometry, omega, constants)
    r_rad = radiation_resistance(geometry, omega, constants)
    gamma = damping_coefficient(r_ohm, r_rad, L)
    q = quality_factor(omega, gamma)

    logger.debug(
        f"L={L * 1e6:.4f} uH, C={C * 1e12:.4f} pF, f0={f0 * 1e-6:.4f} MHz, Q={q:.1f}"
    )

    return CoilProperties(
        inductance=L,
        self_capacitance=C,
        total_capacitance=c_tot,
        resonant_frequency=f0,
        angular_frequency=omega,
        wavelength=lam,
        wavenumber=wavenumber(lam),
        ohmic_resistance=r_ohm,
        radiation_resistance=r_rad,
        damping_coefficient=gamma,
        quality_factor=q,
    )
