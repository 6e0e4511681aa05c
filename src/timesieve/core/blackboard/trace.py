"""Trace snapshot definition.

Immutable record of the blackboard at one point of a pipeline run, e.g. right
after a sieve's proposals were merged. Kept apart from ``memory.py`` so the
disk writer can import it without pulling in the blackboard.

Timestamps are stored as ISO-8601 strings, converted at capture time, so
snapshots serialize to JSON without custom encoders.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True, slots=True)
class TraceSnapshot:
    """
    Immutable record of a blackboard snapshot.

    Attributes
    ----------
    timestamp : str
        UTC capture time, e.g. "2025-10-27T10:00:00.123456Z".
    revision : int
        Blackboard revision at capture time.
    note : str | None
        Optional label, e.g. "after sieve 'quarter_reporting'".
    data : dict[str, Any]
        JSON-safe, shallow copy of the blackboard content.
    """

    timestamp: str
    revision: int
    note: str | None
    data: dict[str, Any] = field(default_factory=dict)
