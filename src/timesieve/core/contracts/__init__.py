"""Pydantic contracts shared by sieves, the pipeline, the CLI, and the API."""

from __future__ import annotations

from .document import Document, EventMention, Sentence, Timex, Token
from .tlink import TLink, TLinkType

__all__ = [
    "Document",
    "EventMention",
    "Sentence",
    "TLink",
    "TLinkType",
    "Timex",
    "Token",
]
