"""Sieve contract shared by every stage of the TLink pipeline.

A sieve looks at one document and proposes new links. The pipeline applies
sieves in a fixed order, hands each one the links accepted so far, and merges
what it returns. Statistical sieves learn from a training corpus in
:meth:`Sieve.train`; rule-based sieves inherit the no-op from
:class:`RuleBasedSieve`.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import ClassVar

from timesieve.core.contracts.tlink import TLink
from timesieve.core.corpus import Corpus


class Sieve(ABC):
    """Abstract base for all sieves."""

    #: Registry name, also stamped into ``TLink.origin``.
    name: ClassVar[str] = "sieve"

    @abstractmethod
    def annotate(
        self, corpus: Corpus, doc_name: str, current_links: Sequence[TLink]
    ) -> list[TLink]:
        """Return new links for ``doc_name``.

        ``current_links`` are the links accepted by earlier stages. Sieves may
        read them but must not mutate them.
        """

    @abstractmethod
    def train(self, corpus: Corpus) -> None:
        """Fit any learned state from an annotated training corpus."""


class RuleBasedSieve(Sieve):
    """Base for sieves that carry no learned state."""

    def train(self, corpus: Corpus) -> None:
        """No training. Just rules."""
        return None


__all__ = ["RuleBasedSieve", "Sieve"]
