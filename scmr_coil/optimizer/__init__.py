"""Closed-form Q optima and inverse design."""

from .closed_form import OptimizationResult, optimize_coil
