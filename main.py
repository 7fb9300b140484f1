#!/usr/bin/env python3
"""Harmony puzzle tools.

Usage::

    python main.py check fixtures/stuck_row.txt     # which filter fires?
    python main.py generate 3 3 --colors RED,BLUE,GREEN --moves 8
    python main.py generate 4 4 -c RED,BLUE,GREEN,GOLD -m 10 -o easy.txt
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import typer
from rich.logging import RichHandler

from harmony.engine.puzzleparser import PuzzleFormatError
from harmony.frontend.cli.app import console, run_check, run_generate

DEFAULT_MOVES = 8

app = typer.Typer(add_completion=False, help="Harmony puzzle tools.")


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


# -- commands -----------------------------------------------------------------


@app.command()
def check(
    puzzle_file: Path = typer.Argument(..., help="Puzzle file to analyse."),
    verbose: bool = typer.Option(False, "-v", "--verbose", help="Debug logging."),
) -> None:
    """Report whether any invalidity filter proves the puzzle unsolvable."""
    _configure_logging(verbose)
    try:
        pruned = run_check(puzzle_file)
    except OSError as exc:
        console.print(f"[red]Error reading puzzle file:[/red] {exc}")
        raise typer.Exit(code=2) from exc
    except PuzzleFormatError as exc:
        console.print(f"[red]Invalid puzzle:[/red] {exc}")
        raise typer.Exit(code=2) from exc
    if pruned:
        raise typer.Exit(code=1)


@app.command()
def generate(
    rows: int = typer.Argument(..., min=1, help="Number of rows."),
    cols: int = typer.Argument(..., min=1, help="Number of columns."),
    colors: str = typer.Option(
        ..., "-c", "--colors",
        help="Comma-separated color names, one per row (e.g. RED,BLUE,GREEN).",
    ),
    moves: int = typer.Option(
        DEFAULT_MOVES, "-m", "--moves", min=0,
        help="Number of scramble moves (difficulty).",
    ),
    seed: Optional[int] = typer.Option(None, "--seed", help="Random seed."),
    output: Optional[Path] = typer.Option(
        None, "-o", "--output", help="Write the puzzle here instead of stdout.",
    ),
    verbose: bool = typer.Option(False, "-v", "--verbose", help="Debug logging."),
) -> None:
    """Generate a solvable puzzle by scrambling a solved board."""
    _configure_logging(verbose)
    names = [c.strip().upper() for c in colors.split(",") if c.strip()]
    if len(names) != rows:
        console.print(
            f"[red]Error:[/red] number of colors ({len(names)}) must equal "
            f"number of rows ({rows})"
        )
        raise typer.Exit(code=2)
    if len(set(names)) != len(names):
        console.print("[red]Error:[/red] color names must be distinct")
        raise typer.Exit(code=2)
    run_generate(rows, cols, names, moves, seed=seed, output=output)


if __name__ == "__main__":
    app()
