"""Disk-backed trace writer for blackboard snapshots.

- Directory: the ``base_dir`` argument, else settings ``trace_dir``
  (``TIMESIEVE_TRACE_DIR``), else ``artifacts/trace/``.
- Filename:  ``YYYYmmddTHHMMSSffffffZ_rev{rev:06d}.json``
- Content:   a JSON object mirroring :class:`TraceSnapshot`.
"""

from __future__ import annotations

import json
from dataclasses import asdict
from pathlib import Path

from timesieve.core.settings import load_settings

from .trace import TraceSnapshot


def _default_dir() -> Path:
    """Return the configured base directory for trace artifacts."""
    root = load_settings().trace_dir
    return Path(root) if root else Path("artifacts") / "trace"


class TraceWriter:
    """Persist blackboard snapshots to disk as JSON files."""

    def __init__(self, base_dir: Path | None = None) -> None:
        self.base_dir: Path = base_dir if base_dir is not None else _default_dir()
        self.base_dir.mkdir(parents=True, exist_ok=True)

    def write(self, snap: TraceSnapshot) -> Path:
        """Write ``snap`` to disk and return the created file path."""
        safe_ts = snap.timestamp.replace("-", "").replace(":", "").replace(".", "")
        path = self.base_dir / f"{safe_ts}_rev{snap.revision:06d}.json"

        with path.open("w", encoding="utf-8") as f:
            json.dump(asdict(snap), f, ensure_ascii=False, indent=2)
            f.write("\n")
        return path

    def write_all(self, snaps: tuple[TraceSnapshot, ...]) -> list[Path]:
        """Write every snapshot of a run, in order."""
        return [self.write(s) for s in snaps]


__all__ = ["TraceWriter"]
