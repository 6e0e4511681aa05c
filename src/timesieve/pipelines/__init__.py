"""Pipeline entry points for TimeSieve.

Currently exposed:

- :func:`run_sieves`: apply sieves to one document and merge their links,
  implemented in ``tlink_pipeline.py``.
"""

from __future__ import annotations

from .tlink_pipeline import PipelineResult, merge_links, run_sieves, train_sieves

__all__ = ["PipelineResult", "merge_links", "run_sieves", "train_sieves"]
