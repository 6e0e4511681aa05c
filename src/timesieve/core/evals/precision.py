"""
Per-sieve precision of proposed links against gold annotation.

Sieves are ordered by how much they can be trusted, so the number that
matters for each one is precision on the pairs it chose to label:

- *proposed*: links the sieve emitted.
- *matched*: proposed links whose entity pair has a gold link (in either
  direction).
- *correct*: matched links whose relation agrees with gold. A gold link
  stated in the other direction is inverted before comparing, so
  ``e1 AFTER t1`` agrees with gold ``t1 BEFORE e1``.

``precision = correct / matched``; a sieve with no matched links scores 0.0.
Links without an ``origin`` are reported under ``"unknown"``.
"""

from __future__ import annotations

from collections.abc import Iterable

from pydantic import BaseModel, Field

from timesieve.core.contracts.tlink import TLink

UNKNOWN_ORIGIN = "unknown"


class SievePrecision(BaseModel):
    """Precision counters for one sieve."""

    sieve: str
    proposed: int = Field(default=0, ge=0)
    matched: int = Field(default=0, ge=0)
    correct: int = Field(default=0, ge=0)

    @property
    def precision(self) -> float:
        if self.matched == 0:
            return 0.0
        return self.correct / self.matched


def evaluate_links(proposed: Iterable[TLink], gold: Iterable[TLink]) -> list[SievePrecision]:
    """Score ``proposed`` against ``gold``, grouped by link origin.

    Results come back in the order origins are first seen in ``proposed``.
    """
    gold_by_pair: dict[frozenset[str], TLink] = {}
    for g in gold:
        gold_by_pair.setdefault(g.pair(), g)

    scores: dict[str, SievePrecision] = {}
    for link in proposed:
        origin = link.origin or UNKNOWN_ORIGIN
        score = scores.setdefault(origin, SievePrecision(sieve=origin))
        score.proposed += 1
        g = gold_by_pair.get(link.pair())
        if g is None:
            continue
        score.matched += 1
        if g.relation_from(link.source) == link.relation:
            score.correct += 1
    return list(scores.values())


__all__ = ["SievePrecision", "evaluate_links"]
