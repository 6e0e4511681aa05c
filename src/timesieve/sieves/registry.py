"""Name -> class registry for sieves.

The CLI, the HTTP API, and settings refer to sieves by name. The order of
names handed to :func:`build_sieves` is the order the pipeline applies them.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from .base import Sieve
from .quarter_reporting import QuarterReportingSieve

SIEVE_CLASSES: dict[str, type[Sieve]] = {
    QuarterReportingSieve.name: QuarterReportingSieve,
}


def available_sieves() -> tuple[str, ...]:
    """Return the registered sieve names."""
    return tuple(SIEVE_CLASSES)


def build_sieves(names: Iterable[str], **options: Any) -> list[Sieve]:
    """Instantiate sieves by name, in order.

    ``options`` are forwarded to each sieve constructor; today only
    ``surface_check`` (quarter sieve) is understood.

    Raises
    ------
    ValueError
        If a name is not registered.
    """
    out: list[Sieve] = []
    for name in names:
        cls = SIEVE_CLASSES.get(name)
        if cls is None:
            known = ", ".join(available_sieves())
            raise ValueError(f"unknown sieve {name!r} (known: {known})")
        out.append(cls(**options))
    return out


__all__ = ["SIEVE_CLASSES", "available_sieves", "build_sieves"]
