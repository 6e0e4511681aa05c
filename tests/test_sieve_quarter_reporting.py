"""Tests for the quarter/reporting sieve.

Covers the distance rule (1 -> IS_INCLUDED, 2 -> connector decides), the
event-class and timex-value filters, link ordering, and the optional
surface-text check.
"""

from __future__ import annotations

import logging
from typing import Any

import pytest
from conftest import corpus_of, event, timex

from timesieve.core.contracts.tlink import TLink, TLinkType
from timesieve.core.settings import load_settings
from timesieve.sieves import quarter_reporting
from timesieve.sieves.quarter_reporting import (
    TEXT_QUARTER_RE,
    VALUE_QUARTER_RE,
    QuarterReportingSieve,
    classify_connector,
)


def _links(*sentences: dict[str, Any], **opts: Any) -> list[TLink]:
    corpus = corpus_of(*sentences)
    return QuarterReportingSieve(**opts).annotate(corpus, "doc", [])


def _triples(links: list[TLink]) -> list[tuple[str, str, TLinkType]]:
    return [(link.source, link.target, link.relation) for link in links]


# ---- worked examples ----------------------------------------------------------


def test_in_connector_gives_is_included() -> None:
    links = _links(
        {
            "tokens": ["Acme", "reported", "in", "2004-Q3", "strong", "earnings"],
            "events": [event("ei1", 1)],
            "timexes": [timex("t1", 3)],
        }
    )
    assert _triples(links) == [("ei1", "t1", TLinkType.IS_INCLUDED)]
    assert links[0].origin == "quarter_reporting"


def test_adjacent_quarter_gives_is_included() -> None:
    links = _links(
        {
            "tokens": ["Acme", "posted", "2004-Q3", "losses"],
            "events": [event("ei1", 1)],
            "timexes": [timex("t1", 2)],
        }
    )
    assert _triples(links) == [("ei1", "t1", TLinkType.IS_INCLUDED)]


def test_other_connector_gives_after() -> None:
    links = _links(
        {
            "tokens": ["Acme", "posted", "strong", "2004-Q3", "losses"],
            "events": [event("ei1", 1)],
            "timexes": [timex("t1", 3)],
        }
    )
    assert _triples(links) == [("ei1", "t1", TLinkType.AFTER)]


def test_non_reporting_event_is_skipped() -> None:
    links = _links(
        {
            "tokens": ["Acme", "reported", "in", "2004-Q3", "strong", "earnings"],
            "events": [event("ei1", 1, cls="OCCURRENCE")],
            "timexes": [timex("t1", 3)],
        }
    )
    assert links == []


# ---- filters and distances ----------------------------------------------------


@pytest.mark.parametrize("offset", [1, 2, 5, 6])  # type: ignore[misc]
def test_unsupported_distances_give_no_link(offset: int) -> None:
    # event at index 2: distances -1, 0, 3, 4
    links = _links(
        {
            "tokens": ["Acme", "b", "reported", "c", "d", "e"],
            "events": [event("ei1", 2)],
            "timexes": [timex("t1", offset)],
        }
    )
    assert links == []


@pytest.mark.parametrize(  # type: ignore[misc]
    "value", ["2004", "2004-09", "2004-Q", "04-Q3", "2004-Q3 ", "2004-Q34", "2004-H1"]
)
def test_non_quarter_values_are_skipped(value: str) -> None:
    links = _links(
        {
            "tokens": ["Acme", "posted", "2004-Q3", "losses"],
            "events": [event("ei1", 1)],
            "timexes": [timex("t1", 2, value=value)],
        }
    )
    assert links == []


def test_quarter_number_is_not_range_checked() -> None:
    links = _links(
        {
            "tokens": ["Acme", "posted", "2004-Q7", "losses"],
            "events": [event("ei1", 1)],
            "timexes": [timex("t1", 2, value="2004-Q7")],
        }
    )
    assert _triples(links) == [("ei1", "t1", TLinkType.IS_INCLUDED)]


def test_event_class_match_is_exact() -> None:
    links = _links(
        {
            "tokens": ["Acme", "posted", "2004-Q3", "losses"],
            "events": [event("ei1", 1, cls="reporting")],
            "timexes": [timex("t1", 2)],
        }
    )
    assert links == []


def test_connector_match_is_case_sensitive() -> None:
    links = _links(
        {
            "tokens": ["Acme", "reported", "In", "2004-Q3"],
            "events": [event("ei1", 1)],
            "timexes": [timex("t1", 3)],
        }
    )
    assert _triples(links) == [("ei1", "t1", TLinkType.AFTER)]


def test_classify_connector_never_returns_before() -> None:
    words = ["in", "for", "on", "during", "its", "strong", "in ", "IN", ""]
    labels = {classify_connector(w) for w in words}
    assert labels == {TLinkType.IS_INCLUDED, TLinkType.AFTER}
    assert classify_connector("".join(["i", "n"])) is TLinkType.IS_INCLUDED


# ---- ordering -----------------------------------------------------------------


def test_links_follow_timex_then_event_order() -> None:
    # Events listed out of textual order; the accessor sorts them by index.
    links = _links(
        {
            "tokens": ["Acme", "said", "reported", "in", "2004-Q3"],
            "events": [event("ei2", 2), event("ei1", 1)],
            "timexes": [timex("t2", 4, value="2004-Q4"), timex("t1", 3)],
        }
    )
    assert _triples(links) == [
        ("ei1", "t1", TLinkType.AFTER),
        ("ei2", "t1", TLinkType.IS_INCLUDED),
        ("ei2", "t2", TLinkType.IS_INCLUDED),
    ]


def test_sentences_are_processed_in_order() -> None:
    links = _links(
        {
            "tokens": ["Acme", "posted", "2004-Q3"],
            "events": [event("ei1", 1)],
            "timexes": [timex("t1", 2)],
        },
        {"tokens": ["Nothing", "here"]},
        {
            "tokens": ["Beta", "said", "strong", "2004-Q2"],
            "events": [event("ei2", 1)],
            "timexes": [timex("t2", 3, value="2004-Q2")],
        },
    )
    assert _triples(links) == [
        ("ei1", "t1", TLinkType.IS_INCLUDED),
        ("ei2", "t2", TLinkType.AFTER),
    ]


def test_pairs_never_cross_sentences() -> None:
    links = _links(
        {"tokens": ["Acme", "reported"], "events": [event("ei1", 1)]},
        {"tokens": ["2004-Q3", "x"], "timexes": [timex("t1", 1)]},
    )
    assert links == []


# ---- contract -----------------------------------------------------------------


def test_every_link_has_reporting_event_and_quarter_value() -> None:
    sentence = {
        "tokens": ["Acme", "said", "grew", "in", "2004-Q3", "2004-10", "x"],
        "events": [event("ei1", 1), event("ei2", 2, cls="OCCURRENCE"), event("ei3", 3)],
        "timexes": [timex("t1", 4), timex("t2", 5, value="2004-10"), timex("t3", 3)],
    }
    corpus = corpus_of(sentence)
    links = QuarterReportingSieve().annotate(corpus, "doc", [])
    assert links
    events = {e.eiid: e for e in corpus.get_events_by_sentence("doc")[0]}
    timexes = {t.tid: t for t in corpus.get_timexes_by_sentence("doc")[0]}
    for link in links:
        assert events[link.source].event_class == "REPORTING"
        assert VALUE_QUARTER_RE.fullmatch(timexes[link.target].value)
        assert link.relation is not TLinkType.BEFORE


def test_annotate_is_idempotent_and_leaves_current_links_alone() -> None:
    corpus = corpus_of(
        {
            "tokens": ["Acme", "posted", "strong", "2004-Q3", "losses"],
            "events": [event("ei1", 1)],
            "timexes": [timex("t1", 3)],
        }
    )
    current = [TLink(source="ei9", target="t9", relation=TLinkType.BEFORE)]
    sieve = QuarterReportingSieve()
    first = sieve.annotate(corpus, "doc", current)
    second = sieve.annotate(corpus, "doc", current)
    assert first == second
    assert [link.model_dump_json() for link in first] == [s.model_dump_json() for s in second]
    assert current == [TLink(source="ei9", target="t9", relation=TLinkType.BEFORE)]


def test_train_is_a_no_op() -> None:
    corpus = corpus_of({"tokens": ["x"]})
    sieve = QuarterReportingSieve()
    assert sieve.train(corpus) is None
    assert sieve.annotate(corpus, "doc", []) == []


def test_unknown_document_raises_key_error() -> None:
    with pytest.raises(KeyError):
        QuarterReportingSieve().annotate(corpus_of({"tokens": ["x"]}), "missing", [])


# ---- surface-text check -------------------------------------------------------


def _surface_sentence(text: str) -> dict[str, Any]:
    return {
        "tokens": ["Acme", "posted", "2004-Q3", "losses"],
        "events": [event("ei1", 1)],
        "timexes": [timex("t1", 2, text=text)],
    }


def test_surface_check_off_ignores_timex_text() -> None:
    assert len(_links(_surface_sentence("Q3"), surface_check=False)) == 1


@pytest.mark.parametrize(  # type: ignore[misc]
    "text", ["third quarter", "the 3rd-quarter", "Fourth Quarter", "1st quarter"]
)
def test_surface_check_accepts_quarter_text(text: str) -> None:
    assert len(_links(_surface_sentence(text), surface_check=True)) == 1


@pytest.mark.parametrize("text", ["Q3", "the quarter", "thirdquarter", ""])  # type: ignore[misc]
def test_surface_check_rejects_other_text(text: str) -> None:
    assert _links(_surface_sentence(text), surface_check=True) == []


def test_surface_check_default_comes_from_settings(monkeypatch: Any) -> None:
    assert QuarterReportingSieve().surface_check is False

    monkeypatch.setenv("TIMESIEVE_QUARTER_SURFACE_CHECK", "true")
    load_settings.cache_clear()
    assert QuarterReportingSieve().surface_check is True
    assert QuarterReportingSieve(surface_check=False).surface_check is False


def test_text_pattern_matches_documented_forms() -> None:
    for text in ("first quarter", "second-quarter", "4th quarter"):
        assert TEXT_QUARTER_RE.search(text)
    assert TEXT_QUARTER_RE.search("fifth quarter") is None


# ---- debug logging ------------------------------------------------------------


def _parsed_sentence() -> dict[str, Any]:
    return {
        "tokens": ["Acme", "reported", "in", "2004-Q3"],
        "parse": "(S (NNP Acme) (VBD reported) (IN in) (CD 2004-Q3))",
        "events": [event("ei1", 1)],
        "timexes": [timex("t1", 3)],
    }


def test_connector_tag_lookup_only_when_debugging(monkeypatch: Any) -> None:
    calls: list[int] = []

    def fake_pos_tag(parse: str, index: int) -> str:
        calls.append(index)
        return "IN"

    monkeypatch.setattr(quarter_reporting, "pos_tag", fake_pos_tag)
    log = quarter_reporting.log
    original = log.level
    try:
        log.setLevel(logging.INFO)
        assert _triples(_links(_parsed_sentence())) == [("ei1", "t1", TLinkType.IS_INCLUDED)]
        assert calls == []

        log.setLevel(logging.DEBUG)
        assert _triples(_links(_parsed_sentence())) == [("ei1", "t1", TLinkType.IS_INCLUDED)]
        assert calls == [2]
    finally:
        log.setLevel(original)
