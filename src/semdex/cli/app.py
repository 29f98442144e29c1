# src/semdex/cli/app.py
"""Command-line interface for semdex.

This module provides a thin Typer wrapper around the commands layer.
Each command:
1. Parses args (via Typer)
2. Creates progress callbacks (for Rich display)
3. Calls commands module functions
4. Renders results with Rich
"""

from __future__ import annotations

import logging

import typer
from rich.console import Console
from rich.progress import BarColumn, Progress, SpinnerColumn, TextColumn
from rich.table import Table

from semdex import __version__
from semdex.commands import CommandStage, ProgressUpdate, ingest, list_cmd, query, status
from semdex.commands.base import IngestResult
from semdex.config import load_env_file

app = typer.Typer(
    name="semdex",
    help="semdex - Semantic search over pre-embedded document chunks.",
    no_args_is_help=True,
)
console = Console()

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def version_callback(value: bool) -> None:
    if value:
        console.print(f"semdex {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        None,
        "--version",
        "-V",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Show debug logging (progress, skipped rows, queries).",
    ),
) -> None:
    """semdex - Semantic search over pre-embedded document chunks."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format=LOG_FORMAT,
    )
    load_env_file()


# Stage names for progress display
STAGE_NAMES = {
    CommandStage.METADATA: "Metadata",
    CommandStage.IMPORTING: "Importing",
    CommandStage.PROCESSING: "Processing",
}


@app.command(name="ingest")
def ingest_cmd(
    metadata: str = typer.Argument(..., help="Metadata source (id, filename, title, topic, ...)"),
    chunks: str = typer.Argument(..., help="Chunk source (id, source_url, index, content, vector)"),
    data_dir: str = typer.Option(
        None,
        "--data-dir",
        "-d",
        help="Data directory (default: from settings)",
    ),
    config_file: str = typer.Option(
        None,
        "--config",
        "-c",
        help="Path to config file",
    ),
    plain: bool = typer.Option(
        False,
        "--plain",
        help="Plain output (no colors/formatting)",
    ),
    no_progress: bool = typer.Option(
        False,
        "--no-progress",
        help="Disable progress display",
    ),
) -> None:
    """Load pre-embedded chunks into an empty store."""
    show_progress = not plain and not no_progress and console.is_terminal

    if show_progress:
        result = _ingest_with_progress(metadata, chunks, data_dir, config_file)
    else:
        result = ingest.ingest(
            metadata_path=metadata,
            chunks_path=chunks,
            data_dir=data_dir,
            config_path=config_file,
        )

    _render_ingest_result(result, plain=plain)


def _ingest_with_progress(
    metadata: str,
    chunks: str,
    data_dir: str | None,
    config_file: str | None,
) -> IngestResult:
    """Ingest with a Rich progress display."""
    with Progress(
        SpinnerColumn(),
        TextColumn("[bold]{task.fields[stage]:>12}", justify="right"),
        BarColumn(bar_width=20),
        TextColumn("{task.description}", style="dim"),
        console=console,
    ) as progress:
        task = progress.add_task("", total=None, stage="")

        def on_progress(update: ProgressUpdate) -> None:
            progress.update(
                task,
                stage=STAGE_NAMES.get(update.stage, update.stage.value),
                description=update.message or "",
                total=None if update.is_indeterminate else update.total,
                completed=update.current,
            )

        return ingest.ingest(
            metadata_path=metadata,
            chunks_path=chunks,
            data_dir=data_dir,
            config_path=config_file,
            on_progress=on_progress,
        )


def _render_ingest_result(result: IngestResult, plain: bool) -> None:
    """Render ingest result to console."""
    if not result.success:
        console.print(f"[red]Error: {result.error}[/red]")
        raise typer.Exit(1)

    if result.skipped:
        if plain:
            console.print("Store already contains data, nothing imported.")
        else:
            console.print("[yellow]Store already contains data, nothing imported.[/yellow]")
        return

    if plain:
        console.print(f"Loaded {result.metadata_entries} metadata entries")
        console.print(f"Imported {result.written} chunks")
        if result.failed > 0:
            console.print(f"Skipped {result.failed} invalid rows")
    else:
        console.print(f"[green]Loaded {result.metadata_entries} metadata entries[/green]")
        console.print(f"[green]Imported {result.written} chunks[/green]")
        if result.failed > 0:
            console.print(f"[dim]Skipped {result.failed} invalid rows[/dim]")


@app.command(name="search")
def search_cmd(
    text: str = typer.Argument(..., help="Search text"),
    limit: int = typer.Option(
        None,
        "--limit",
        "-n",
        help="Number of results (default 5, max 20)",
    ),
    within: str = typer.Option(
        None,
        "--within",
        "-w",
        help="Only search documents whose filename contains this text",
    ),
    data_dir: str = typer.Option(
        None,
        "--data-dir",
        "-d",
        help="Data directory (default: from settings)",
    ),
    config_file: str = typer.Option(
        None,
        "--config",
        "-c",
        help="Path to config file",
    ),
    plain: bool = typer.Option(
        False,
        "--plain",
        help="Plain output (no colors/formatting)",
    ),
) -> None:
    """Find the chunks most similar to the search text."""
    result = query.search(
        query=text,
        limit=limit,
        filename_pattern=within,
        data_dir=data_dir,
        config_path=config_file,
    )

    if not result.success:
        console.print(f"[red]Error: {result.error}[/red]")
        raise typer.Exit(1)

    if not result.results:
        if plain:
            console.print("No results found.")
        else:
            console.print("[yellow]No results found.[/yellow]")
        raise typer.Exit(0)

    for i, r in enumerate(result.results, 1):
        heading = r.title or r.filename or r.source_url
        preview = r.content[:200].replace("\n", " ")
        if len(r.content) > 200:
            preview += "..."
        if plain:
            console.print(f"[{i}] {heading}")
            console.print(f"    {r.source_url}")
            console.print(f"    {preview}")
        else:
            console.print(f"  [{i}] [cyan]{heading}[/cyan]", highlight=False)
            if r.topic:
                console.print(f"      [magenta]{r.topic}[/magenta]", highlight=False)
            console.print(f"      [dim]{r.source_url}[/dim]", highlight=False)
            console.print(f"      {preview}", highlight=False)


@app.command(name="list")
def list_documents_cmd(
    data_dir: str = typer.Option(
        None,
        "--data-dir",
        "-d",
        help="Data directory (default: from settings)",
    ),
    config_file: str = typer.Option(
        None,
        "--config",
        "-c",
        help="Path to config file",
    ),
    plain: bool = typer.Option(
        False,
        "--plain",
        help="Plain output (no colors/formatting)",
    ),
) -> None:
    """List all indexed document filenames."""
    result = list_cmd.list_documents(data_dir=data_dir, config_path=config_file)

    if not result.success:
        console.print(f"[red]Error: {result.error}[/red]")
        raise typer.Exit(1)

    if not result.documents:
        if plain:
            console.print("No documents indexed.")
        else:
            console.print("[dim]No documents indexed.[/dim]")
        raise typer.Exit(0)

    if plain:
        console.print(f"Indexed documents ({len(result.documents)}):")
        for filename in result.documents:
            console.print(f"  {filename}")
    else:
        table = Table(title=f"Indexed Documents ({len(result.documents)})")
        table.add_column("Filename", style="cyan")
        for filename in result.documents:
            table.add_row(filename)
        console.print(table)


@app.command(name="status")
def status_cmd(
    data_dir: str = typer.Option(
        None,
        "--data-dir",
        "-d",
        help="Data directory (default: from settings)",
    ),
    config_file: str = typer.Option(
        None,
        "--config",
        "-c",
        help="Path to config file",
    ),
    plain: bool = typer.Option(
        False,
        "--plain",
        help="Plain output (no colors/formatting)",
    ),
) -> None:
    """Show store statistics."""
    result = status.status(data_dir=data_dir, config_path=config_file)

    if not result.success:
        console.print(f"[red]Error: {result.error}[/red]")
        raise typer.Exit(1)

    if result.total_chunks == 0:
        if plain:
            console.print("Store is empty.")
        else:
            console.print("[dim]Store is empty. Run 'semdex ingest' first.[/dim]")
        raise typer.Exit(0)

    if plain:
        console.print("Store Status:")
        console.print(f"  Storage: {result.storage}")
        console.print(f"  Location: {result.location}")
        console.print(f"  Documents: {result.total_documents}")
        console.print(f"  Chunks: {result.total_chunks}")
    else:
        table = Table(title="Store Status")
        table.add_column("Metric", style="cyan")
        table.add_column("Value", justify="right")
        table.add_row("Storage", result.storage)
        table.add_row("Location", result.location)
        table.add_row("Documents", str(result.total_documents))
        table.add_row("Chunks", str(result.total_chunks))
        console.print(table)
