"""
Closed-form optima for SCMR coils.

The Q model used here treats the coil as N loops with skin-effect loss and
magnetic-dipole radiation only:

    Qeff(f) = 2π·f·μr·r·N²·(ln(8r/rc) − 2) / (Rz(f) + Rr(f))
    Rz(f)   = √(μ0·ρ·π·f) · N·r/rc
    Rr(f)   = (π/6)·Z0·N²·(2π·f·r/c)⁴

Rz grows as √f and Rr as f⁴, so Qeff has a single interior maximum. At that
maximum ½·Rz = 3·Rr, which gives the closed forms below. Nothing here
iterates.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, asdict
from typing import Optional, Union

import numpy as np
from loguru import logger

from ..errors import GeometryDomainError
from ..geometry.base import CoilGeometry
from ..solver.analytical import self_inductance
from ..utils.constants import DEFAULT_CONSTANTS, PhysicalConstants
from ..utils.units import to_mhz, to_pf

ArrayLike = Union[float, np.ndarray]

# r/rc that maximizes the local maximum Q: ln(8r/rc) − 2 = 7/3
OPTIMAL_RADIUS_RATIO = math.exp(13.0 / 3.0) / 8.0   # ≈ 9.54


@dataclass(frozen=True)
class OptimizationResult:
    """Theoretical optima for one coil."""
    local_max_frequency: float          # f maximizing Qeff for this r, rc, N [Hz]
    local_max_q: float                  # Qeff at local_max_frequency
    local_max_q_closed_form: float      # same optimum from the stationarity condition
    global_max_q: float                 # best Qeff over all r and f for this rc, N
    optimal_radius: float               # r achieving global_max_q [m]
    target_frequency: float             # frequency the spacing is tuned for [Hz]
    required_capacitance: float         # Ct tuning the coil to target_frequency [F]
    optimal_spacing: Optional[float]    # pitch whose self-capacitance equals Ct [m]
    spacing_error: Optional[str] = None  # why no pitch realizes Ct, if none does

    def as_dict(self) -> dict:
        return asdict(self)

    def summary(self) -> dict:
        return {
            "local_max_frequency_mhz": to_mhz(self.local_max_frequency),
            "local_max_q": self.local_max_q,
            "local_max_q_closed_form": self.local_max_q_closed_form,
            "global_max_q": self.global_max_q,
            "optimal_radius_m": self.optimal_radius,
            "required_capacitance_pf": to_pf(self.required_capacitance),
            "optimal_spacing_m": self.optimal_spacing,
            "spacing_error": self.spacing_error,
        }


# ═══════════════════════════════════════════════════════════════════════════════
# Q as a function of frequency
# ═══════════════════════════════════════════════════════════════════════════════

def _log_term(r: float, rc: float) -> float:
    return math.log(8.0 * r / rc) - 2.0


def q_for_frequency(freq_hz: ArrayLike, geometry: CoilGeometry,
                    constants: PhysicalConstants = DEFAULT_CONSTANTS) -> ArrayLike:
    """
    Qeff at an arbitrary frequency (scalar or numpy array of frequencies).
    """
    f = np.asarray(freq_hz, dtype=float)
    if np.any(f <= 0) or not np.all(np.isfinite(f)):
        raise GeometryDomainError("q_for_frequency", "frequency", freq_hz,
                                  "frequency must be finite and positive")
    r = geometry.loop_radius
    rc = geometry.cross_section_radius
    n = geometry.turn_count
    c = constants.c

    stored = 2.0 * np.pi * f * constants.mu_copper * r * n**2 * _log_term(r, rc)
    r_ohm = np.sqrt(constants.mu_0 * constants.resistivity * np.pi * f) * n * r / rc
    r_rad = (np.pi / 6.0) * constants.z_0 * n**2 * (2.0 * np.pi * f * r / c) ** 4
    q = stored / (r_ohm + r_rad)
    if q.ndim == 0:
        return float(q)
    return q


def q_sweep(geometry: CoilGeometry, freq_start_hz: float, freq_stop_hz: float,
            n_freq: int = 201,
            constants: PhysicalConstants = DEFAULT_CONSTANTS) -> tuple[np.ndarray, np.ndarray]:
    """Qeff on a log-spaced frequency grid. Returns (frequencies, q)."""
    if freq_start_hz <= 0 or freq_stop_hz <= freq_start_hz:
        raise GeometryDomainError("q_sweep", "frequency", freq_start_hz,
                                  "need 0 < start < stop")
    freqs = np.logspace(math.log10(freq_start_hz), math.log10(freq_stop_hz), n_freq)
    return freqs, q_for_frequency(freqs, geometry, constants)


# ═══════════════════════════════════════════════════════════════════════════════
# Local optimum (fixed r, rc, N)
# ═══════════════════════════════════════════════════════════════════════════════

def _fmax_coefficient(constants: PhysicalConstants) -> float:
    """K in fmax = K / (N^(2/7)·rc^(2/7)·r^(6/7))."""
    num = constants.c ** (8 / 7) * constants.mu_copper ** (1 / 7) * constants.resistivity ** (1 / 7)
    return num / (4.0 * 15.0 ** (2 / 7) * math.pi ** (11 / 7))


def _fmax(r: float, rc: float, n: float, constants: PhysicalConstants) -> float:
    return _fmax_coefficient(constants) / (n ** (2 / 7) * rc ** (2 / 7) * r ** (6 / 7))


def local_max_frequency(geometry: CoilGeometry,
                        constants: PhysicalConstants = DEFAULT_CONSTANTS) -> float:
    """Frequency [Hz] at which Qeff peaks for this coil's r, rc and N."""
    return _fmax(geometry.loop_radius, geometry.cross_section_radius,
                 geometry.turn_count, constants)


def local_max_q(geometry: CoilGeometry,
                constants: PhysicalConstants = DEFAULT_CONSTANTS) -> float:
    """Qeff evaluated at local_max_frequency."""
    return q_for_frequency(local_max_frequency(geometry, constants), geometry, constants)


def _local_max_q_closed(r: float, rc: float, n: float, constants: PhysicalConstants) -> float:
    # At the optimum Rr = Rz/6, so Qeff = (6/7)·(stored/f)/(Rz/√f)·√fmax
    f = _fmax(r, rc, n, constants)
    stored_per_hz = 2.0 * math.pi * constants.mu_copper * r * n**2 * _log_term(r, rc)
    ohmic_per_root_hz = math.sqrt(constants.mu_0 * constants.resistivity * math.pi) * n * r / rc
    return (6.0 / 7.0) * stored_per_hz / ohmic_per_root_hz * math.sqrt(f)


def local_max_q_closed_form(geometry: CoilGeometry,
                            constants: PhysicalConstants = DEFAULT_CONSTANTS) -> float:
    """Local maximum Q from the stationarity condition, without calling Qeff."""
    return _local_max_q_closed(geometry.loop_radius, geometry.cross_section_radius,
                               geometry.turn_count, constants)


# ═══════════════════════════════════════════════════════════════════════════════
# Global optimum and inverse design
# ═══════════════════════════════════════════════════════════════════════════════

def optimal_radius(cross_section_radius: float) -> float:
    """Loop radius maximizing the local maximum Q: r = rc·e^(13/3)/8."""
    return cross_section_radius * OPTIMAL_RADIUS_RATIO


def global_max_q(turn_count: float, cross_section_radius: float,
                 constants: PhysicalConstants = DEFAULT_CONSTANTS) -> float:
    """Highest Qeff reachable with this wire and turn count, over all r and f."""
    r = optimal_radius(cross_section_radius)
    return _local_max_q_closed(r, cross_section_radius, turn_count, constants)


def radius_for_frequency(freq_hz: float, cross_section_radius: float, turn_count: float,
                         constants: PhysicalConstants = DEFAULT_CONSTANTS) -> float:
    """Loop radius [m] whose Q peaks at freq_hz for the given wire and turns."""
    if freq_hz <= 0:
        raise GeometryDomainError("radius_for_frequency", "frequency", freq_hz,
                                  "frequency must be positive")
    k = _fmax_coefficient(constants)
    return (k / (freq_hz * turn_count ** (2 / 7) * cross_section_radius ** (2 / 7))) ** (7 / 6)


def wire_for_frequency(freq_hz: float, turn_count: float,
                       radius_ratio: float = OPTIMAL_RADIUS_RATIO,
                       constants: PhysicalConstants = DEFAULT_CONSTANTS) -> tuple[float, float]:
    """
    Wire radius and loop radius (rc, r) with r = radius_ratio·rc whose Q peaks
    at freq_hz.
    """
    if freq_hz <= 0:
        raise GeometryDomainError("wire_for_frequency", "frequency", freq_hz,
                                  "frequency must be positive")
    if radius_ratio <= 0:
        raise GeometryDomainError("wire_for_frequency", "radius_ratio", radius_ratio,
                                  "r/rc must be positive")
    k = _fmax_coefficient(constants)
    rc = (k / (freq_hz * turn_count ** (2 / 7) * radius_ratio ** (6 / 7))) ** (7 / 8)
    return rc, radius_ratio * rc


def tuning_capacitance(inductance: float, freq_hz: float) -> float:
    """Capacitance Ct = 1 / (4·L·π²·f²) that resonates inductance at freq_hz [F]."""
    if inductance <= 0:
        raise GeometryDomainError("optimal_spacing", "inductance", inductance,
                                  "inductance must be positive")
    if freq_hz <= 0:
        raise GeometryDomainError("optimal_spacing", "frequency", freq_hz,
                                  "frequency must be positive")
    return 1.0 / (4.0 * inductance * math.pi**2 * freq_hz**2)


def optimal_spacing_and_capacitance(inductance: float, loop_radius: float,
                                    cross_section_radius: float, freq_hz: float,
                                    constants: PhysicalConstants = DEFAULT_CONSTANTS
                                    ) -> tuple[float, float]:
    """
    Capacitance that tunes inductance to freq_hz, and the pitch whose
    self-capacitance equals it.

        Ct = 1 / (4·L·π²·f²)
        s  = 2·rc·cosh(2π²·r·ε0 / Ct)

    Returns:
        (spacing [m], capacitance [F])
    """
    ct = tuning_capacitance(inductance, freq_hz)
    arg = 2.0 * math.pi**2 * loop_radius * constants.eps_0 / ct
    try:
        spacing = 2.0 * cross_section_radius * math.cosh(arg)
    except OverflowError as exc:
        raise GeometryDomainError(
            "optimal_spacing", "capacitance", ct,
            "required capacitance is too small to realize with any pitch",
        ) from exc
    return spacing, ct


def optimize_coil(geometry: CoilGeometry,
                  inductance: Optional[float] = None,
                  constants: PhysicalConstants = DEFAULT_CONSTANTS,
                  target_frequency: Optional[float] = None) -> OptimizationResult:
    """
    All optima for one coil. The spacing is tuned to target_frequency, which
    defaults to the coil's max-Q frequency.

    When no pitch realizes the required capacitance, ``optimal_spacing`` is
    None and ``spacing_error`` says why; the other optima are still returned.
    """
    if inductance is None:
        inductance = self_inductance(geometry, constants)
    f_max = local_max_frequency(geometry, constants)
    target = f_max if target_frequency is None else target_frequency
    ct = tuning_capacitance(inductance, target)

    spacing, spacing_error = None, None
    try:
        spacing, _ = optimal_spacing_and_capacitance(
            inductance, geometry.loop_radius, geometry.cross_section_radius, target, constants,
        )
    except GeometryDomainError as exc:
        spacing_error = str(exc)
        logger.warning(f"No optimal pitch: {spacing_error}")

    return OptimizationResult(
        local_max_frequency=f_max,
        local_max_q=q_for_frequency(f_max, geometry, constants),
        local_max_q_closed_form=local_max_q_closed_form(geometry, constants),
        global_max_q=global_max_q(geometry.turn_count, geometry.cross_section_radius, constants),
        optimal_radius=optimal_radius(geometry.cross_section_radius),
        target_frequency=target,
        required_capacitance=ct,
        optimal_spacing=spacing,
        spacing_error=spacing_error,
    )
