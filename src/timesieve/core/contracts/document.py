"""Document contracts: sentences, tokens, events, and time expressions.

These models are the boundary between upstream annotation (event detection,
timex normalization, parsing) and the sieves. Sieves only read them.

Index conventions
-----------------
All positions are zero-based token indices into the owning sentence:

- ``EventMention.index`` is the position of the event token.
- ``Timex.offset`` is an *exclusive* end offset: the position of the token
  immediately after the expression. It may therefore equal ``len(tokens)``,
  and is never 0 since a time expression spans at least one token.

Out-of-range positions are upstream bugs. They are rejected here, when the
sentence is built, so that sieves can index tokens without re-checking. The
same goes for a parse whose leaves are not the sentence's tokens: leaf ``i``
must read the same as ``tokens[i]`` once bracket escapes are undone.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from timesieve.core.parse_tree import leaves, unescape_word

from .tlink import TLink


class Token(BaseModel):
    """A single token with its raw surface text."""

    index: int = Field(..., ge=0)
    text: str


class EventMention(BaseModel):
    """An event mention anchored on one token."""

    model_config = ConfigDict(populate_by_name=True)

    eiid: str = Field(..., description="Unique event instance id, e.g. 'ei12'.")
    text: str = Field(default="", description="Surface text of the event token.")
    event_class: str = Field(..., alias="class", description="Class label, e.g. 'REPORTING'.")
    index: int = Field(..., description="Token index of the event inside its sentence.")
    tense: str | None = Field(default=None)


class Timex(BaseModel):
    """A time expression with its normalized value."""

    tid: str = Field(..., description="Unique timex id, e.g. 't3'.")
    text: str = Field(default="", description="Surface form, e.g. 'third quarter'.")
    value: str = Field(..., description="Normalized value, e.g. '2003-Q3'.")
    type: str | None = Field(default=None, description="Timex type, e.g. 'DATE'.")
    offset: int = Field(..., description="Exclusive end offset of the expression.")


class Sentence(BaseModel):
    """One sentence: tokens plus the events and timexes anchored in it."""

    sid: int = Field(..., ge=0)
    tokens: list[Token] = Field(default_factory=list)
    events: list[EventMention] = Field(default_factory=list)
    timexes: list[Timex] = Field(default_factory=list)
    parse: str | None = Field(default=None, description="Bracketed constituency parse.")

    @field_validator("tokens", mode="before")
    @classmethod
    def _promote_plain_tokens(cls, v: Any) -> Any:
        """Accept ``["Acme", "reported", ...]`` as shorthand for Token objects."""
        if isinstance(v, list):
            return [{"index": i, "text": t} if isinstance(t, str) else t for i, t in enumerate(v)]
        return v

    @model_validator(mode="after")
    def _check_positions(self) -> Sentence:
        n = len(self.tokens)
        for pos, tok in enumerate(self.tokens):
            if tok.index != pos:
                raise ValueError(f"sentence {self.sid}: token at {pos} has index {tok.index}")
        for ev in self.events:
            if not 0 <= ev.index < n:
                raise ValueError(
                    f"sentence {self.sid}: event {ev.eiid} index {ev.index} outside 0..{n - 1}"
                )
        for tx in self.timexes:
            if not 1 <= tx.offset <= n:
                raise ValueError(
                    f"sentence {self.sid}: timex {tx.tid} offset {tx.offset} outside 1..{n}"
                )
        if self.parse is not None:
            words = leaves(self.parse)
            if len(words) != n:
                raise ValueError(
                    f"sentence {self.sid}: parse has {len(words)} leaves but {n} tokens"
                )
            for tok, word in zip(self.tokens, words):
                if unescape_word(tok.text) != word:
                    raise ValueError(
                        f"sentence {self.sid}: parse leaf {tok.index} is {word!r}"
                        f" but token is {tok.text!r}"
                    )
        return self

    def token_text(self, index: int) -> str:
        """Return the raw text of the token at ``index``.

        Negative indices are not wrapped around; any index outside the token
        list raises ``IndexError``.
        """
        if not 0 <= index < len(self.tokens):
            raise IndexError(
                f"sentence {self.sid}: token index {index} outside 0..{len(self.tokens) - 1}"
            )
        return self.tokens[index].text

    def text(self) -> str:
        """Return the tokens joined by single spaces."""
        return " ".join(t.text for t in self.tokens)


class Document(BaseModel):
    """An annotated document: ordered sentences plus optional gold links."""

    name: str
    sentences: list[Sentence] = Field(default_factory=list)
    tlinks: list[TLink] = Field(default_factory=list, description="Gold links, if annotated.")

    @field_validator("sentences", mode="before")
    @classmethod
    def _default_sids(cls, v: Any) -> Any:
        """Fill in missing ``sid`` values from sentence position."""
        if isinstance(v, list):
            out = []
            for i, s in enumerate(v):
                if isinstance(s, dict) and "sid" not in s:
                    s = {**s, "sid": i}
                out.append(s)
            return out
        return v

    @model_validator(mode="after")
    def _check_ids(self) -> Document:
        seen: set[str] = set()
        for pos, sent in enumerate(self.sentences):
            if sent.sid != pos:
                raise ValueError(f"{self.name}: sentence at position {pos} has sid {sent.sid}")
            for ident in [e.eiid for e in sent.events] + [t.tid for t in sent.timexes]:
                if ident in seen:
                    raise ValueError(f"{self.name}: duplicate entity id {ident!r}")
                seen.add(ident)
        return self


__all__ = ["Document", "EventMention", "Sentence", "Timex", "Token"]
