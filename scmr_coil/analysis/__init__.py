"""Validity checks against the model's operating assumptions."""

from .validity import ValidationReport, ValidityWarning, validate
