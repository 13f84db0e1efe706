"""
PwGuard Output Module
======================

Console display and report generation for PwGuard results.
"""

from pwguard.output.console import PwGuardConsoleOutput
from pwguard.output.report import PwGuardReportGenerator

__all__ = [
    "PwGuardConsoleOutput",
    "PwGuardReportGenerator",
]
