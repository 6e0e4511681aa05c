"""TimeSieve: rule-based temporal link sieves.

The package proposes TLinks (typed temporal relations) between events and time
expressions of an already annotated document. Each sieve handles one narrow
surface pattern; a pipeline applies sieves in order and merges their output.
"""

from __future__ import annotations

__all__ = ["__version__"]
__version__ = "0.1.0"
