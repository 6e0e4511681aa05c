"""Tests for JSON document loading and link dumping."""

from __future__ import annotations

import json
from pathlib import Path

from conftest import SAMPLE_PATH

from timesieve.core.contracts.tlink import TLink, TLinkType
from timesieve.core.io import dump_links, load_document, parse_document


def test_load_sample_document() -> None:
    res = load_document(SAMPLE_PATH)
    assert res.is_ok()
    doc = res.unwrap()
    assert doc.name == "quarter_report"
    assert len(doc.sentences) == 4
    assert doc.sentences[0].events[0].event_class == "REPORTING"
    assert doc.tlinks[1].relation is TLinkType.BEFORE


def test_missing_file_is_an_err(tmp_path: Path) -> None:
    res = load_document(tmp_path / "nope.json")
    assert res.is_err()
    assert "cannot read" in res.unwrap_err()


def test_invalid_json_is_an_err(tmp_path: Path) -> None:
    p = tmp_path / "bad.json"
    p.write_text("{not json", encoding="utf-8")
    res = load_document(p)
    assert res.is_err()
    assert str(p) in res.unwrap_err()


def test_out_of_range_annotation_is_an_err() -> None:
    payload = {
        "name": "d",
        "sentences": [
            {"tokens": ["a", "b"], "events": [{"eiid": "e1", "class": "REPORTING", "index": 7}]}
        ],
    }
    res = parse_document(json.dumps(payload))
    assert res.is_err()
    assert "invalid document" in res.unwrap_err()


def test_dump_links_is_json_array() -> None:
    links = [
        TLink(source="ei1", target="t1", relation=TLinkType.IS_INCLUDED, origin="quarter_reporting")
    ]
    data = json.loads(dump_links(links))
    assert data == [
        {
            "source": "ei1",
            "target": "t1",
            "relation": "IS_INCLUDED",
            "origin": "quarter_reporting",
        }
    ]
    assert json.loads(dump_links([])) == []
