"""
Plain-text coil report, metric and imperial.
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

from ..utils.units import (
    meters_to_feet, meters_to_inches, radius_to_awg,
    to_cm, to_mhz, to_mm, to_pf, to_uh,
)

if TYPE_CHECKING:
    from ..calculator import CalculationResult

RULE = "~" * 20
BANNER = "*" * 36


def _awg_label(radius_m: float) -> str:
    if not math.isfinite(radius_m) or radius_m <= 0:
        return "? AWG"
    return f"{round(radius_to_awg(radius_m))} AWG"


def _line(label: str, value: str) -> str:
    return f"{label:<23}= {value}"


def geometry_lines(result: CalculationResult) -> list[str]:
    g = result.geometry
    nominal = f"{g.nominal_awg:g} AWG nominal, " if g.nominal_awg is not None else ""
    return [
        "Coil Geometry",
        RULE,
        _line("Cross-sectional radius",
              f"{to_mm(g.cross_section_radius):3.5f} mm ({nominal}{_awg_label(g.cross_section_radius)})"),
        _line("Loop radius",
              f"{to_cm(g.loop_radius):3.5f} cm ({meters_to_inches(g.loop_radius):f} in)"),
        _line("Loop diameter",
              f"{to_cm(g.loop_diameter):3.5f} cm ({meters_to_inches(g.loop_diameter):f} in)"),
        _line("Pitch", f"{to_cm(g.pitch):3.5f} cm ({meters_to_inches(g.pitch):f} in)"),
        _line("N", f"{g.turn_count:2.2f} turns"),
        _line("Length of wire/tube",
              f"{to_cm(g.wire_length):3.3f} cm ({meters_to_feet(g.wire_length):f} ft)"),
    ]


def prediction_lines(result: CalculationResult) -> list[str]:
    g, p = result.geometry, result.properties
    lines = [
        "Coil Geometry Predictions",
        RULE,
        _line("Estimated f0", f"{to_mhz(p.resonant_frequency):f} MHz"),
        _line("Estimated wavelength", f"{p.wavelength:f} m"),
        _line("Estimated L", f"{to_uh(p.inductance):f} uH"),
        _line("Estimated C", f"{to_pf(p.self_capacitance):f} pF"),
    ]
    if g.has_external_capacitance:
        lines.append(_line("External capacitor", f"{to_pf(g.external_capacitance):f} pF"))
        lines.append(_line("Estimated C total", f"{to_pf(p.total_capacitance):f} pF"))
    else:
        lines.append(_line("External capacitor", "N/A"))
    lines.append(_line("Estimated Q", f"{p.quality_factor:f}"))
    return lines


def optima_lines(result: CalculationResult) -> list[str]:
    o, p = result.optimization, result.properties
    pitch = f"{to_cm(o.optimal_spacing):g} cm" if o.optimal_spacing is not None else "N/A"
    return [
        "Theoretical Optima",
        RULE,
        _line("Optimal coil pitch", pitch),
        _line("Q global max", f"{o.global_max_q:f}"),
        _line("Q local max", f"{o.local_max_q:f}"),
        _line("Q local max (closed)", f"{o.local_max_q_closed_form:f}"),
        _line("f at local max Q", f"{to_mhz(o.local_max_frequency):f} MHz"),
        _line("Optimal loop radius", f"{to_cm(o.optimal_radius):f} cm"),
        _line("Ct", f"{to_pf(o.required_capacitance):f} pF"),
        _line("Gamma (loss)", f"{p.damping_coefficient:f}"),
        _line("Radiation resistance", f"{p.radiation_resistance:f} Ohms"),
        _line("Ohmic resistance", f"{p.ohmic_resistance:f} Ohms"),
    ]


def validity_lines(result: CalculationResult) -> list[str]:
    lines = ["Validity Checks", RULE]
    for w in result.validation.warnings:
        status = "VIOLATED" if w.violated else "ok"
        lines.append(_line(w.condition, f"{status}" + (f" - {w.message}" if w.violated else "")))
    return lines


def format_report(result: CalculationResult) -> str:
    """Complete text report, sections separated by blank lines."""
    sections = [
        geometry_lines(result),
        prediction_lines(result),
        optima_lines(result),
        validity_lines(result),
    ]
    body = "\n\n".join("\n".join(s) for s in sections)
    return f"{BANNER}\n{BANNER}\n\n{body}\n"
