"""JSON input/output for annotated documents and proposed links.

Document files look like::

    {
      "name": "wsj_0001",
      "sentences": [
        {
          "tokens": ["Acme", "reported", "in", "2004-Q3", "strong", "earnings"],
          "events": [{"eiid": "ei1", "text": "reported", "class": "REPORTING", "index": 1}],
          "timexes": [{"tid": "t1", "text": "third quarter", "value": "2004-Q3", "offset": 3}]
        }
      ],
      "tlinks": [{"source": "ei1", "target": "t1", "relation": "IS_INCLUDED"}]
    }

Loaders return a :class:`Result` so callers choose how to surface errors.
"""

from __future__ import annotations

import json
from collections.abc import Iterable
from pathlib import Path

from pydantic import ValidationError

from .contracts.document import Document
from .contracts.tlink import TLink
from .result import Result, err, ok


def parse_document(text: str) -> Result[Document, str]:
    """Validate a JSON string into a :class:`Document`."""
    try:
        return ok(Document.model_validate_json(text))
    except ValidationError as e:
        return err(f"invalid document: {e}")


def load_document(path: str | Path) -> Result[Document, str]:
    """Read and validate the document stored at ``path``."""
    p = Path(path)
    try:
        text = p.read_text(encoding="utf-8")
    except OSError as e:
        return err(f"cannot read {p}: {e}")
    return parse_document(text).map_err(lambda msg: f"{p}: {msg}")


def dump_links(links: Iterable[TLink]) -> str:
    """Serialize links as a pretty-printed JSON array."""
    payload = [link.model_dump(mode="json") for link in links]
    return json.dumps(payload, ensure_ascii=False, indent=2)


__all__ = ["dump_links", "load_document", "parse_document"]
