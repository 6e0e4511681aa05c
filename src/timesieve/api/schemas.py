"""Request/response models for the TimeSieve HTTP API."""

from __future__ import annotations

from pydantic import BaseModel, Field

from timesieve.core.contracts.document import Document
from timesieve.core.contracts.tlink import TLink


class AnnotateRequest(BaseModel):
    """Body of ``POST /annotate``."""

    document: Document
    sieves: list[str] | None = Field(
        default=None, description="Sieve names in order; defaults to configured sieves."
    )
    surface_check: bool | None = Field(
        default=None, description="Override the quarter sieve's surface-text check."
    )


class SieveScore(BaseModel):
    sieve: str
    proposed: int
    matched: int
    correct: int
    precision: float


class AnnotateResponse(BaseModel):
    """Accepted links for one document, plus precision when gold is present."""

    document: str
    tlinks: list[TLink]
    evaluation: list[SieveScore] = Field(default_factory=list)


__all__ = ["AnnotateRequest", "AnnotateResponse", "SieveScore"]
