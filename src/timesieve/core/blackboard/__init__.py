"""Blackboard state shared across sieve pipeline stages."""

from __future__ import annotations

from .memory import Blackboard
from .storage import TraceWriter
from .trace import TraceSnapshot

__all__ = ["Blackboard", "TraceSnapshot", "TraceWriter"]
