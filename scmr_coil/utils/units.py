"""
Unit conversion utilities for coil geometry and reporting.
"""

import math


INCH = 0.0254       # m
FOOT = 0.3048       # m


# ─── Wire gauge ─────────────────────────────────────────────────────────────

def awg_to_radius(gauge: float) -> float:
    """AWG gauge to wire cross-section radius [m]: d_mm = 0.127·92^((36-n)/39)."""
    diameter_mm = 0.127 * 92.0 ** ((36.0 - gauge) / 39.0)
    return diameter_mm * 1e-3 / 2.0


def radius_to_awg(radius_m: float) -> float:
    """Cross-section radius [m] to (fractional) AWG gauge."""
    if radius_m <= 0:
        raise ValueError("Wire radius must be positive")
    diameter_mm = radius_m * 2.0 * 1e3
    return -39.0 * math.log(diameter_mm / 0.127) / math.log(92.0) + 36.0


# ─── Length ─────────────────────────────────────────────────────────────────

def inches_to_meters(val: float) -> float:
    """Convert inches to meters."""
    return val * INCH


def meters_to_inches(val: float) -> float:
    """Convert meters to inches."""
    return val / INCH


def meters_to_feet(val: float) -> float:
    """Convert meters to feet."""
    return val / FOOT


def to_cm(val: float) -> float:
    """Convert meters to cm."""
    return val * 1e2


def to_mm(val: float) -> float:
    """Convert meters to mm."""
    return val * 1e3


# ─── Electrical display units ───────────────────────────────────────────────

def mhz(val: float) -> float:
    """Convert MHz to Hz."""
    return val * 1e6


def to_mhz(hz: float) -> float:
    """Convert Hz to MHz."""
    return hz * 1e-6


def to_pf(farads: float) -> float:
    """Convert F to pF."""
    return farads * 1e12


def pf(val: float) -> float:
    """Convert pF to F."""
    return val * 1e-12


def to_uh(henries: float) -> float:
    """Convert H to µH."""
    return henries * 1e6
