"""
TLink pipeline: apply sieves to one document and merge their proposals.

Flow
----
1. Seed the accepted link list with ``initial_links`` (e.g. links from a
   previous pass); these are never overridden.
2. For each sieve, in order:
   - call ``sieve.annotate(corpus, doc_name, accepted)``;
   - stash the raw proposals on the blackboard under ``proposed.<name>``;
   - accept each proposal unless a link over the same entity pair (either
     direction) is already accepted. Earlier sieves therefore win, which is
     why sieves are ordered from most to least precise;
   - take a trace snapshot.
3. If the document carries gold links, score the accepted links per sieve.

Sieves receive a tuple copy of the accepted list, so they cannot mutate the
pipeline's state.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import TypedDict

from timesieve.core.blackboard.memory import Blackboard
from timesieve.core.blackboard.storage import TraceWriter
from timesieve.core.contracts.document import Document
from timesieve.core.contracts.tlink import TLink
from timesieve.core.corpus import Corpus
from timesieve.core.evals.precision import SievePrecision, evaluate_links
from timesieve.core.settings import get_logger
from timesieve.sieves.base import Sieve

_TLINKS_KEY = "tlinks"
_PROPOSED_PREFIX = "proposed."
_EVALUATION_KEY = "evaluation"

log = get_logger("timesieve.pipeline")


class PipelineResult(TypedDict):
    """Structured payload returned by :func:`run_sieves`.

    Attributes
    ----------
    blackboard:
        The run's blackboard (traces included).
    document:
        Name of the annotated document.
    tlinks:
        Accepted links, in acceptance order.
    proposed:
        Raw proposals per sieve name, before merging.
    evaluation:
        Per-sieve precision against gold links; empty without gold.
    """

    blackboard: Blackboard
    document: str
    tlinks: list[TLink]
    proposed: dict[str, list[TLink]]
    evaluation: list[SievePrecision]


def merge_links(accepted: list[TLink], proposed: Iterable[TLink]) -> int:
    """Append to ``accepted`` each proposal over a new entity pair.

    Returns the number of links added.
    """
    seen = {link.pair() for link in accepted}
    added = 0
    for link in proposed:
        pair = link.pair()
        if pair in seen:
            continue
        seen.add(pair)
        accepted.append(link)
        added += 1
    return added


def run_sieves(
    corpus: Corpus,
    doc_name: str,
    sieves: Sequence[Sieve],
    *,
    bb: Blackboard | None = None,
    initial_links: Iterable[TLink] = (),
    trace_writer: TraceWriter | None = None,
) -> PipelineResult:
    """Run ``sieves`` over ``doc_name`` and return the merged result."""
    bb = bb if bb is not None else Blackboard()
    document: Document = corpus.document(doc_name)

    accepted: list[TLink] = list(initial_links)
    proposed_by_sieve: dict[str, list[TLink]] = {}
    bb.put(_TLINKS_KEY, list(accepted))
    bb.trace(f"start {doc_name}: {len(accepted)} initial tlinks")

    for sieve in sieves:
        proposed = sieve.annotate(corpus, doc_name, tuple(accepted))
        proposed_by_sieve[sieve.name] = proposed
        added = merge_links(accepted, proposed)
        log.info(
            "%s: sieve '%s' proposed %d, accepted %d",
            doc_name,
            sieve.name,
            len(proposed),
            added,
        )
        bb.put(_PROPOSED_PREFIX + sieve.name, proposed)
        bb.put(_TLINKS_KEY, list(accepted))
        bb.trace(f"after sieve '{sieve.name}'")

    evaluation: list[SievePrecision] = []
    if document.tlinks:
        evaluation = evaluate_links(accepted, document.tlinks)
        bb.put(_EVALUATION_KEY, evaluation)
        bb.trace("evaluation")
        for score in evaluation:
            log.info(
                "%s: %s precision %.3f (%d/%d)",
                doc_name,
                score.sieve,
                score.precision,
                score.correct,
                score.matched,
            )

    if trace_writer is not None:
        trace_writer.write_all(bb.traces())

    return {
        "blackboard": bb,
        "document": doc_name,
        "tlinks": accepted,
        "proposed": proposed_by_sieve,
        "evaluation": evaluation,
    }


def train_sieves(corpus: Corpus, sieves: Iterable[Sieve]) -> None:
    """Train every sieve on ``corpus`` (a no-op for rule-based sieves)."""
    for sieve in sieves:
        log.debug("training sieve '%s' on %d documents", sieve.name, len(corpus))
        sieve.train(corpus)


__all__ = ["PipelineResult", "merge_links", "run_sieves", "train_sieves"]
