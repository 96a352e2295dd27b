"""
SCMR coil calculator pipeline.

    resolve geometry → electromagnetic model → optima → validity checks

``compute`` accepts either the positional, argument-count convention
or named fields:

    compute()                                   # "wire" profile
    compute("bigwire")
    compute(3.2e-4, 10, 0.1)                    # rc, N, r
    compute(cross_section_radius=1e-3, turn_count=5, loop_radius=0.05, pitch=3e-3)
"""

from __future__ import annotations

from dataclasses import dataclass

from loguru import logger

from .analysis.validity import ValidationReport, validate
from .errors import GeometryDomainError, InvalidArgument
from .geometry.base import CoilGeometry
from .geometry.profiles import CoilOptions, resolve_geometry
from .optimizer.closed_form import OptimizationResult, optimize_coil
from .solver.analytical import evaluate_coil
from .solver.base import CoilProperties
from .utils.constants import DEFAULT_CONSTANTS, PhysicalConstants


@dataclass(frozen=True)
class CalculationResult:
    """Everything computed for one coil."""
    geometry: CoilGeometry
    properties: CoilProperties
    optimization: OptimizationResult
    validation: ValidationReport
    constants: PhysicalConstants = DEFAULT_CONSTANTS

    # ─── Convenience accessors ───────────────────────────────────────────

    @property
    def inductance(self) -> float:
        return self.properties.inductance

    @property
    def capacitance(self) -> float:
        return self.properties.self_capacitance

    @property
    def total_capacitance(self) -> float:
        return self.properties.total_capacitance

    @property
    def resonant_frequency(self) -> float:
        return self.properties.resonant_frequency

    @property
    def quality_factor(self) -> float:
        return self.properties.quality_factor

    def report(self) -> str:
        """Plain-text report."""
        from .visualization.report import format_report
        return format_report(self)

    def summary(self) -> dict:
        """Compact dict of the geometry, predictions, optima and checks."""
        return {
            "geometry": self.geometry.to_dict(),
            "predictions": self.properties.summary(),
            "optima": self.optimization.summary(),
            "validity": self.validation.as_dict(),
        }


def build_options(*args, **fields) -> CoilOptions:
    """CoilOptions from either positional arguments or named fields."""
    if args and fields:
        raise InvalidArgument("Pass either positional arguments or named fields, not both")
    if fields:
        try:
            return CoilOptions(**fields)
        except TypeError as exc:
            raise InvalidArgument(str(exc)) from exc
    return CoilOptions.from_args(*args)


def compute(*args, constants: PhysicalConstants = DEFAULT_CONSTANTS,
            **fields) -> CalculationResult:
    """
    Run the full calculation for one coil.

    Raises:
        InvalidArgument: bad argument count/shape or unknown profile
        GeometryDomainError: a formula precondition failed; ``exc.partial``
            holds the geometry and whatever was computed before the failure
    """
    geometry = resolve_geometry(build_options(*args, **fields))
    logger.info(
        f"Coil: rc={geometry.cross_section_radius:.4e} m, r={geometry.loop_radius:.4e} m, "
        f"N={geometry.turn_count:g}, s={geometry.pitch:.4e} m"
    )

    try:
        properties = evaluate_coil(geometry, constants)
    except GeometryDomainError as exc:
        exc.partial["geometry"] = geometry
        logger.error(str(exc))
        raise

    try:
        optimization = optimize_coil(geometry, properties.inductance, constants)
    except GeometryDomainError as exc:
        exc.partial.update(geometry=geometry, properties=properties)
        logger.error(str(exc))
        raise

    validation = validate(geometry, properties)

    return CalculationResult(
        geometry=geometry,
        properties=properties,
        optimization=optimization,
        validation=validation,
        constants=constants,
    )
