# scripts/smoke.py
"""
Smoke test script for the TimeSieve pipeline.

Usage
-----
1. Run on the bundled sample:
    $ python scripts/smoke.py

2. Run on another annotated document:
    $ python scripts/smoke.py --file path/to/doc.json --surface-check
"""

import argparse
import logging
import sys
from pathlib import Path

from dotenv import load_dotenv

from timesieve.core.corpus import Corpus
from timesieve.core.io import load_document
from timesieve.pipelines.tlink_pipeline import run_sieves
from timesieve.sieves.registry import build_sieves

load_dotenv()

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)],
)

DEFAULT_FILE = Path(__file__).resolve().parent.parent / "samples" / "quarter_report.json"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Run TimeSieve smoke test")
    parser.add_argument("--file", "-f", type=Path, default=DEFAULT_FILE)
    parser.add_argument(
        "--surface-check",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Override TIMESIEVE_QUARTER_SURFACE_CHECK for this run.",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    """Execute the smoke test workflow."""
    args = build_parser().parse_args(argv)

    loaded = load_document(args.file)
    if loaded.is_err():
        print(f"Load failed: {loaded.unwrap_err()}")
        sys.exit(1)
    doc = loaded.unwrap()

    sieves = build_sieves(["quarter_reporting"], surface_check=args.surface_check)
    result = run_sieves(Corpus([doc]), doc.name, sieves)

    print(f"\n{len(result['tlinks'])} tlinks for {doc.name}:")
    for link in result["tlinks"]:
        print(f"  {link}  [{link.origin}]")
    for score in result["evaluation"]:
        print(f"  {score.sieve}: precision {score.precision:.3f} ({score.correct}/{score.matched})")


if __name__ == "__main__":
    main()
