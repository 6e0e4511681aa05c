"""TLink contract: a typed temporal relation between two annotated entities.

Links are value objects. Sieves create them fresh and the pipeline only ever
appends them to its accepted list; nothing mutates a link after creation, so
the model is frozen (and therefore hashable).
"""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field


class TLinkType(StrEnum):
    """Closed vocabulary of temporal relation types (TimeML style)."""

    BEFORE = "BEFORE"
    AFTER = "AFTER"
    IBEFORE = "IBEFORE"
    IAFTER = "IAFTER"
    INCLUDES = "INCLUDES"
    IS_INCLUDED = "IS_INCLUDED"
    BEGINS = "BEGINS"
    BEGUN_BY = "BEGUN_BY"
    ENDS = "ENDS"
    ENDED_BY = "ENDED_BY"
    SIMULTANEOUS = "SIMULTANEOUS"
    VAGUE = "VAGUE"
    NONE = "NONE"

    def inverse(self) -> TLinkType:
        """Return the relation that holds when source and target are swapped."""
        return _INVERSES.get(self, self)


_INVERSES: dict[TLinkType, TLinkType] = {
    TLinkType.BEFORE: TLinkType.AFTER,
    TLinkType.AFTER: TLinkType.BEFORE,
    TLinkType.IBEFORE: TLinkType.IAFTER,
    TLinkType.IAFTER: TLinkType.IBEFORE,
    TLinkType.INCLUDES: TLinkType.IS_INCLUDED,
    TLinkType.IS_INCLUDED: TLinkType.INCLUDES,
    TLinkType.BEGINS: TLinkType.BEGUN_BY,
    TLinkType.BEGUN_BY: TLinkType.BEGINS,
    TLinkType.ENDS: TLinkType.ENDED_BY,
    TLinkType.ENDED_BY: TLinkType.ENDS,
}


class TLink(BaseModel):
    """A directed temporal relation ``source -relation-> target``."""

    model_config = ConfigDict(frozen=True)

    source: str = Field(..., description="Id of the first entity (event eiid or timex tid).")
    target: str = Field(..., description="Id of the second entity.")
    relation: TLinkType
    origin: str | None = Field(
        default=None, description="Name of the sieve that proposed the link, if any."
    )

    def pair(self) -> frozenset[str]:
        """Return the undirected entity pair this link covers."""
        return frozenset((self.source, self.target))

    def relation_from(self, source: str) -> TLinkType:
        """Return the relation read with ``source`` as the first argument."""
        if source == self.source:
            return self.relation
        if source == self.target:
            return self.relation.inverse()
        raise ValueError(f"{source!r} is not an argument of {self!r}")

    def __str__(self) -> str:
        return f"{self.source} -{self.relation.value}-> {self.target}"


__all__ = ["TLink", "TLinkType"]
