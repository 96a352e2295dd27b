"""
SCMR Coil — closed-form calculator for strongly-coupled magnetic resonance coils.

Estimates inductance, capacitance, resonant frequency, losses and Q of a
helical wireless-power coil, plus the theoretical Q optima for its geometry.
"""

__version__ = "0.1.0"

from .calculator import CalculationResult, compute
from .errors import GeometryDomainError, InvalidArgument
from .geometry.base import CoilGeometry
from .utils.constants import DEFAULT_CONSTANTS, PhysicalConstants
