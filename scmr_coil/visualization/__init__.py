"""Text report and plots."""

from .report import format_report
