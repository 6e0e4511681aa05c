"""Shared fixtures and builders for the TimeSieve test suite."""

from __future__ import annotations

from collections.abc import Generator
from pathlib import Path
from typing import Any

import pytest

from timesieve.core.contracts.document import Document
from timesieve.core.corpus import Corpus
from timesieve.core.settings import load_settings

SAMPLE_PATH = Path(__file__).resolve().parent.parent / "samples" / "quarter_report.json"


@pytest.fixture(autouse=True)  # type: ignore[misc]
def _fresh_settings() -> Generator[None, None, None]:
    """Rebuild cached settings around every test so env tweaks do not leak."""
    load_settings.cache_clear()
    yield
    load_settings.cache_clear()


def event(eiid: str, index: int, cls: str = "REPORTING") -> dict[str, Any]:
    return {"eiid": eiid, "class": cls, "index": index}


def timex(
    tid: str, offset: int, value: str = "2004-Q3", text: str = "third quarter"
) -> dict[str, Any]:
    return {"tid": tid, "value": value, "text": text, "offset": offset}


def corpus_of(*sentences: dict[str, Any], name: str = "doc") -> Corpus:
    """Build a one-document corpus from sentence dicts."""
    return Corpus([Document.model_validate({"name": name, "sentences": list(sentences)})])
