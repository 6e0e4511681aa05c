"""Evaluation helpers for proposed links."""

from __future__ import annotations

from .precision import SievePrecision, evaluate_links

__all__ = ["SievePrecision", "evaluate_links"]
