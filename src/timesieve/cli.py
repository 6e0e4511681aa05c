# src/timesieve/cli.py
"""
TimeSieve command line interface.

Built on `typer` and `rich`:

- ``annotate``: run the sieve pipeline over one annotated JSON document and
  render the accepted links (plus per-sieve precision when the document
  carries gold links).
- ``sieves``: list the registered sieves.

Usage
-----
    $ timesieve annotate samples/quarter_report.json
    $ timesieve annotate doc.json --sieve quarter_reporting --surface-check -o links.json
    $ timesieve sieves
"""

from __future__ import annotations

import traceback
from pathlib import Path
from typing import Annotated

import typer
from dotenv import load_dotenv
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from timesieve.core.blackboard.storage import TraceWriter
from timesieve.core.corpus import Corpus
from timesieve.core.io import dump_links, load_document
from timesieve.core.settings import load_settings
from timesieve.pipelines.tlink_pipeline import PipelineResult, run_sieves
from timesieve.sieves.registry import SIEVE_CLASSES, available_sieves, build_sieves

load_dotenv()

app = typer.Typer(
    help="TimeSieve: propose temporal links between events and time expressions.",
    rich_markup_mode="markdown",
)
console = Console()


# --------------------------------------------------------------------------- #
# Rendering
# --------------------------------------------------------------------------- #


def _render_links(result: PipelineResult) -> None:
    table = Table(title=f"TLinks for {result['document']}")
    table.add_column("source", style="cyan")
    table.add_column("relation", style="bold")
    table.add_column("target", style="cyan")
    table.add_column("sieve", style="dim")
    for link in result["tlinks"]:
        table.add_row(link.source, link.relation.value, link.target, link.origin or "-")
    console.print(table)


def _render_evaluation(result: PipelineResult) -> None:
    if not result["evaluation"]:
        return
    table = Table(title="Precision against gold")
    table.add_column("sieve")
    table.add_column("proposed", justify="right")
    table.add_column("matched", justify="right")
    table.add_column("correct", justify="right")
    table.add_column("precision", justify="right")
    for score in result["evaluation"]:
        table.add_row(
            score.sieve,
            str(score.proposed),
            str(score.matched),
            str(score.correct),
            f"{score.precision:.3f}",
        )
    console.print(table)


# --------------------------------------------------------------------------- #
# Commands
# --------------------------------------------------------------------------- #


@app.command()  # type: ignore[misc]
def annotate(
    file: Annotated[
        Path,
        typer.Argument(
            exists=True,
            file_okay=True,
            dir_okay=False,
            readable=True,
            help="Annotated document (JSON).",
        ),
    ],
    sieve: Annotated[
        list[str] | None,
        typer.Option(
            "--sieve",
            "-s",
            help="Sieve to apply; repeat to set the order. Defaults to TIMESIEVE_SIEVES.",
        ),
    ] = None,
    surface_check: Annotated[
        bool | None,
        typer.Option(
            "--surface-check/--no-surface-check",
            help="Also require quarter timexes to read like 'third quarter'.",
        ),
    ] = None,
    output: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Write accepted links to this JSON file."),
    ] = None,
    trace: Annotated[
        bool,
        typer.Option("--trace/--no-trace", help="Write blackboard snapshots to the trace dir."),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Show full error tracebacks."),
    ] = False,
) -> None:
    """Run the sieve pipeline over one document."""
    loaded = load_document(file)
    if loaded.is_err():
        console.print(f"[bold red]Load Error:[/bold red] {escape(loaded.unwrap_err())}")
        raise typer.Exit(code=1)
    document = loaded.unwrap()

    names = sieve if sieve else load_settings().sieves
    try:
        sieves = build_sieves(names, surface_check=surface_check)
        result = run_sieves(
            Corpus([document]),
            document.name,
            sieves,
            trace_writer=TraceWriter() if trace else None,
        )
    except Exception as e:
        console.print(f"[bold red]Pipeline Error:[/bold red] {escape(str(e))}")
        if verbose:
            traceback.print_exc()
        raise typer.Exit(code=1) from e

    _render_links(result)
    _render_evaluation(result)

    if output is not None:
        output.write_text(dump_links(result["tlinks"]) + "\n", encoding="utf-8")
        console.print(f"[dim]Saved {len(result['tlinks'])} tlinks to: {output}[/dim]")


@app.command("sieves")  # type: ignore[misc]
def list_sieves() -> None:
    """List the registered sieves."""
    for name in available_sieves():
        doc = (SIEVE_CLASSES[name].__doc__ or "").strip().splitlines()
        console.print(f"[bold]{name}[/bold]  {doc[0] if doc else ''}")


if __name__ == "__main__":
    app()
