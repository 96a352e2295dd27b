"""Closed-form electromagnetic model of the helical coil."""

from .base import CoilProperties
from .analytical import evaluate_coil
