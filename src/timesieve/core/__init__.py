"""Core package for TimeSieve.

Holds the document contracts, the corpus accessor, configuration, and the
blackboard used by the sieve pipeline:
    from timesieve.core.settings import settings, load_settings, Settings, get_logger
"""

from __future__ import annotations

__all__ = ["__doc__"]
