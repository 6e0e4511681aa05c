"""
In-memory blackboard with revisioned trace snapshots.

The sieve pipeline keeps its working state here: the links each sieve
proposed, the accepted link set, and evaluation results. Every write bumps a
revision counter and :meth:`Blackboard.trace` freezes a JSON-safe copy of the
whole store, so a run can be replayed sieve by sieve.

Pydantic models (e.g. :class:`~timesieve.core.contracts.tlink.TLink`) are
dumped to plain dicts inside snapshots; the live store keeps the objects.
"""

from __future__ import annotations

from datetime import UTC, datetime
from typing import Any, TypeVar, cast

from .trace import TraceSnapshot

T = TypeVar("T")


def _jsonify(value: Any) -> Any:
    """Return a JSON-safe representation of ``value``.

    - Primitives are returned as-is.
    - Pydantic models are dumped in JSON mode.
    - dict keys are coerced to ``str``; lists/tuples are converted recursively.
    - Anything else falls back to ``repr``.
    """
    if value is None or isinstance(value, bool | int | float | str):
        return value
    if hasattr(value, "model_dump"):
        return value.model_dump(mode="json")
    if isinstance(value, dict):
        return {str(k): _jsonify(v) for k, v in value.items()}
    if isinstance(value, list | tuple):
        return [_jsonify(v) for v in value]
    return repr(value)


class Blackboard:
    """
    Simple in-memory key-value store with revisioned trace snapshots.

    Attributes
    ----------
    _store : dict[str, Any]
        The key-value storage.
    _rev : int
        Monotonically increasing revision counter (bumps on every ``put``).
    _traces : list[TraceSnapshot]
        Captured snapshots, oldest first.
    """

    __slots__ = ("_store", "_rev", "_traces")

    def __init__(self) -> None:
        self._store: dict[str, Any] = {}
        self._rev: int = 0
        self._traces: list[TraceSnapshot] = []

    def put(self, key: str, value: Any) -> None:
        """Insert or update ``key`` with ``value`` and bump the revision."""
        self._store[key] = value
        self._rev += 1

    def get(self, key: str, default: T | None = None) -> T | None:
        """Return the stored value for ``key``, or ``default`` if not found."""
        if key in self._store:
            return cast(T | None, self._store[key])
        return default

    def keys(self) -> tuple[str, ...]:
        """Return the current keys as a sorted tuple."""
        return tuple(sorted(self._store.keys()))

    @property
    def revision(self) -> int:
        return self._rev

    def __len__(self) -> int:  # pragma: no cover - trivial
        return len(self._store)

    def trace(self, note: str | None = None) -> TraceSnapshot:
        """Capture and record an immutable snapshot of the current state."""
        data_copy: dict[str, Any] = {k: _jsonify(v) for k, v in self._store.items()}
        ts_str = datetime.now(UTC).strftime("%Y-%m-%dT%H:%M:%S.%fZ")
        snap = TraceSnapshot(timestamp=ts_str, revision=self._rev, note=note, data=data_copy)
        self._traces.append(snap)
        return snap

    def traces(self) -> tuple[TraceSnapshot, ...]:
        """Return all recorded snapshots."""
        return tuple(self._traces)


__all__ = ["Blackboard"]
