"""Quarter/reporting sieve: link reporting verbs to adjacent fiscal quarters.

When a quarter expression ("third quarter", "3rd-quarter") follows a
reporting verb closely, it is usually not a temporal argument of the verb but
a modifier of one of its arguments. In "Acme reported third quarter losses",
"third quarter" modifies "losses", and the report comes *after* the quarter.
Only when the two are adjacent, or joined by "in", is the report taken to
fall inside the quarter.

Rule
----
For each quarter-valued timex and each REPORTING event of a sentence, with
``distance = timex.offset - event.index``:

- ``distance == 1``: IS_INCLUDED.
- ``distance == 2``: look at the single token in between. "in" gives
  IS_INCLUDED, anything else gives AFTER.
- any other distance: no link.

A future quarter would arguably call for BEFORE rather than AFTER; the rule
does not look at document time, so it never emits BEFORE.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Sequence

from timesieve.core.contracts.document import EventMention, Sentence, Timex
from timesieve.core.contracts.tlink import TLink, TLinkType
from timesieve.core.corpus import Corpus
from timesieve.core.parse_tree import pos_tag
from timesieve.core.settings import get_logger, load_settings

from .base import RuleBasedSieve

VALUE_QUARTER_RE = re.compile(r"\d{4}-Q\d")
TEXT_QUARTER_RE = re.compile(
    r"(first|second|third|fourth|1st|2nd|3rd|4th)[\s-]quarter", flags=re.IGNORECASE
)

REPORTING_CLASS = "REPORTING"
INCLUDING_CONNECTOR = "in"

log = get_logger("timesieve.sieves.quarter_reporting")


class QuarterReportingSieve(RuleBasedSieve):
    """Propose IS_INCLUDED/AFTER links between reporting events and quarters.

    Parameters
    ----------
    surface_check:
        Also require the timex surface text to name a quarter (see
        :data:`TEXT_QUARTER_RE`). ``None`` takes the configured default,
        which checks the normalized value only.
    """

    name = "quarter_reporting"

    def __init__(self, *, surface_check: bool | None = None) -> None:
        if surface_check is None:
            surface_check = load_settings().quarter_surface_check
        self.surface_check: bool = surface_check

    def annotate(
        self, corpus: Corpus, doc_name: str, current_links: Sequence[TLink]
    ) -> list[TLink]:
        all_events = corpus.get_events_by_sentence(doc_name)
        all_timexes = corpus.get_timexes_by_sentence(doc_name)

        proposed: list[TLink] = []
        for sid, sent in enumerate(corpus.get_sentences(doc_name)):
            if log.isEnabledFor(logging.DEBUG):
                log.debug("adding tlinks from %s sentence %d: %s", doc_name, sid, sent.text())
            for timex in all_timexes[sid]:
                if not self.validate_timex(timex):
                    continue
                for event in all_events[sid]:
                    if not self.validate_event(event):
                        continue
                    link = self._link_pair(sent, event, timex)
                    if link is not None:
                        proposed.append(link)

        log.debug("%s: %d tlinks proposed for %s", self.name, len(proposed), doc_name)
        return proposed

    def _link_pair(self, sent: Sentence, event: EventMention, timex: Timex) -> TLink | None:
        distance = timex.offset - event.index
        if distance == 1:
            relation = TLinkType.IS_INCLUDED
        elif distance == 2:
            connector_index = timex.offset - 1
            connector = sent.token_text(connector_index)
            relation = classify_connector(connector)
            if sent.parse is not None and log.isEnabledFor(logging.DEBUG):
                log.debug(
                    "connector %r (%s) between %s and %s -> %s",
                    connector,
                    pos_tag(sent.parse, connector_index),
                    event.eiid,
                    timex.tid,
                    relation.value,
                )
        else:
            return None
        return TLink(source=event.eiid, target=timex.tid, relation=relation, origin=self.name)

    @staticmethod
    def validate_event(event: EventMention) -> bool:
        return event.event_class == REPORTING_CLASS

    def validate_timex(self, timex: Timex) -> bool:
        """Accept timexes whose value is a year quarter, e.g. ``2003-Q3``.

        Some time expressions modify an argument of the verb rather than
        anchor the verb itself ("X said Tuesday that ..." against "X said
        Tuesday's earnings were ..."). Quarters are the common case, since the
        report nearly always follows the quarter it describes.
        """
        if VALUE_QUARTER_RE.fullmatch(timex.value) is None:
            return False
        if self.surface_check:
            return TEXT_QUARTER_RE.search(timex.text) is not None
        return True


def classify_connector(word: str) -> TLinkType:
    """Label for the single word between a reporting verb and a quarter."""
    if word == INCLUDING_CONNECTOR:
        return TLinkType.IS_INCLUDED
    return TLinkType.AFTER


__all__ = [
    "QuarterReportingSieve",
    "TEXT_QUARTER_RE",
    "VALUE_QUARTER_RE",
    "classify_connector",
]
