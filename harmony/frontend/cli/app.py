"""Rich terminal reports: board tables and filter verdicts."""

from __future__ import annotations

from pathlib import Path

import rich.box
from rich.align import Align
from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from harmony.engine.invalidity import DEFAULT_COORDINATOR, InvalidityTestCoordinator
from harmony.engine.puzzlegenerator import PuzzleGenerator
from harmony.engine.puzzleparser import Puzzle, PuzzleParser
from harmony.models.board import Board
from harmony.models.state import BoardState

console = Console()


# -- board rendering ----------------------------------------------------------


def render_board(board: Board, color_names: tuple[str, ...] | list[str]) -> Table:
    """Return a Rich Table representing the puzzle grid."""
    table = Table(
        show_header=True,
        show_edge=True,
        pad_edge=True,
        box=rich.box.HEAVY,
        border_style="bright_blue",
        padding=(0, 1),
    )
    table.add_column("", style="bold cyan", justify="right")
    for c in range(board.cols):
        table.add_column(str(c + 1), justify="center")

    for r in range(board.rows):
        cells: list[str] = []
        for c in range(board.cols):
            tile = board.get_tile(r, c)
            label = color_names[tile.color]
            if tile.remaining_moves:
                label = f"{label} {tile.remaining_moves}"
            if board.is_tile_correct(r, c):
                cells.append(f"[bold green]{label}[/bold green]")
            elif tile.remaining_moves == 0:
                cells.append(f"[bold red]{label}[/bold red]")
            else:
                cells.append(f"[bold white]{label}[/bold white]")
        row_label = f"{chr(ord('A') + r)} → {color_names[board.target_color(r)]}"
        table.add_row(row_label, *cells)

    return table


def render_verdicts(state: BoardState, coordinator: InvalidityTestCoordinator) -> Table:
    """One row per filter, in coordinator order."""
    table = Table(box=rich.box.SIMPLE, show_edge=False)
    table.add_column("Filter", style="cyan")
    table.add_column("Verdict", justify="center")
    for test in coordinator.tests:
        if test.is_invalid(state):
            table.add_row(test.name, "[bold red]unsolvable[/bold red]")
        else:
            table.add_row(test.name, "[green]pass[/green]")
    return table


# -- commands -----------------------------------------------------------------


def run_check(
    puzzle_file: Path,
    coordinator: InvalidityTestCoordinator = DEFAULT_COORDINATOR,
) -> bool:
    """Print the board and every filter's verdict.  Returns True if pruned."""
    puzzle: Puzzle = PuzzleParser.parse_file(puzzle_file)
    board = puzzle.board

    fired = coordinator.first_failure(puzzle.state)

    status = Text()
    status.append("  Total moves: ", style="dim")
    status.append(str(board.total_moves()), style="bold yellow")
    status.append("    Solved: ", style="dim")
    status.append("yes" if board.is_solved() else "no", style="bold yellow")

    panel = Panel(
        Group(
            Align.center(render_board(board, puzzle.color_names)),
            Text(""),
            Align.center(status),
            Text(""),
            Align.center(render_verdicts(puzzle.state, coordinator)),
        ),
        title=f"[bold cyan]{puzzle_file.name}  {board.rows}×{board.cols}[/bold cyan]",
        border_style="cyan",
        padding=(1, 2),
    )
    console.print()
    console.print(panel)

    if fired is None:
        console.print("[green]No filter can rule this puzzle out.[/green]")
    else:
        console.print(
            f"[bold red]Unsolvable:[/bold red] proven by [bold]{fired.name}[/bold]"
        )
    return fired is not None


def run_generate(
    rows: int,
    cols: int,
    color_names: list[str],
    num_moves: int,
    seed: int | None = None,
    output: Path | None = None,
) -> str:
    """Generate a puzzle and write it to *output* (or the console)."""
    scramble = PuzzleGenerator.generate(rows, cols, num_moves, seed=seed)
    text = PuzzleGenerator.to_text(scramble.board, color_names)

    if output is None:
        console.print(text, markup=False, highlight=False)
    else:
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_text(text)
        console.print(f"[green]Puzzle written to[/green] {output}")
    console.print(
        Align.left(render_board(scramble.board, color_names)),
    )
    console.print(
        "[dim]Solution:[/dim] " + " ".join(m.notation for m in scramble.solution)
    )
    return text
