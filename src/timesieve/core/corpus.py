"""Corpus: the document accessor sieves read from.

A :class:`Corpus` holds annotated :class:`Document` objects by name and hands
out per-sentence views in textual order. Every sieve receives the corpus and a
document name rather than a document, so one accessor can serve a whole
training or evaluation set.

The per-sentence lists are fresh copies; callers may sort or slice them
without touching the underlying documents.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from .contracts.document import Document, EventMention, Sentence, Timex


class Corpus:
    """In-memory collection of annotated documents keyed by name."""

    __slots__ = ("_docs",)

    def __init__(self, documents: Iterable[Document] = ()) -> None:
        self._docs: dict[str, Document] = {}
        for doc in documents:
            self.add(doc)

    def add(self, document: Document) -> None:
        """Add ``document``; a document with the same name is replaced."""
        self._docs[document.name] = document

    def names(self) -> tuple[str, ...]:
        """Return document names in insertion order."""
        return tuple(self._docs)

    def document(self, doc_name: str) -> Document:
        """Return the document called ``doc_name`` (``KeyError`` if unknown)."""
        try:
            return self._docs[doc_name]
        except KeyError:
            raise KeyError(f"unknown document {doc_name!r}") from None

    def __iter__(self) -> Iterator[Document]:
        return iter(self._docs.values())

    def __len__(self) -> int:
        return len(self._docs)

    def __contains__(self, doc_name: object) -> bool:
        return doc_name in self._docs

    # ---- per-sentence views -------------------------------------------------

    def get_sentences(self, doc_name: str) -> list[Sentence]:
        return list(self.document(doc_name).sentences)

    def get_events_by_sentence(self, doc_name: str) -> list[list[EventMention]]:
        """Events of each sentence, ordered by token index."""
        return [
            sorted(s.events, key=lambda e: e.index) for s in self.document(doc_name).sentences
        ]

    def get_timexes_by_sentence(self, doc_name: str) -> list[list[Timex]]:
        """Timexes of each sentence, ordered by end offset."""
        return [
            sorted(s.timexes, key=lambda t: t.offset) for s in self.document(doc_name).sentences
        ]

    def get_parses(self, doc_name: str) -> list[str | None]:
        return [s.parse for s in self.document(doc_name).sentences]

    def token_text(self, doc_name: str, sid: int, index: int) -> str:
        """Return the raw text of token ``index`` in sentence ``sid``."""
        return self.document(doc_name).sentences[sid].token_text(index)


__all__ = ["Corpus"]
