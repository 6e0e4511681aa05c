"""Sieves: rule-based and learned stages that propose TLinks."""

from __future__ import annotations

from .base import RuleBasedSieve, Sieve
from .quarter_reporting import QuarterReportingSieve
from .registry import available_sieves, build_sieves

__all__ = [
    "QuarterReportingSieve",
    "RuleBasedSieve",
    "Sieve",
    "available_sieves",
    "build_sieves",
]
