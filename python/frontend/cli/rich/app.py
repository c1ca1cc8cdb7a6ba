"""Rich terminal output for the ``generate`` and ``solve`` commands.

Boards are written in the canonical puzzle text format, so the output of
``generate`` can be piped straight into ``solve``. Tables, panels and
colours are only used for statistics and the step-by-step view.
"""

from __future__ import annotations

import random
import time

import rich.box
from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from npuzzle.engine.gamegenerator import GameGenerator
from npuzzle.engine.gameplay import GamePlay
from npuzzle.engine.gamesolver import Algorithm, SolveResult, resolve_algorithm
from npuzzle.engine.heuristics import get_heuristic
from npuzzle.errors import ConfigurationError
from npuzzle.models.board import Board

console = Console()
err_console = Console(stderr=True)


# -- helpers ------------------------------------------------------------------


def _format_elapsed(seconds: float) -> str:
    if seconds < 1:
        return f"{seconds * 1000:.2f} ms"
    m, s = divmod(seconds, 60)
    return f"{int(m)}:{s:05.2f}" if m else f"{s:.2f} s"


def _print_text(text: str) -> None:
    console.print(text, markup=False, highlight=False, soft_wrap=True, end="")


# -- board rendering ----------------------------------------------------------


def _render_board(board: Board) -> Table:
    """Return a Rich Table representing the puzzle grid."""
    width = len(str(board.size * board.size - 1))
    table = Table(
        show_header=False,
        show_edge=True,
        pad_edge=True,
        box=rich.box.HEAVY,
        border_style="bright_blue",
        padding=(0, 1),
    )
    for _ in range(board.size):
        table.add_column(width=width + 1, justify="center")

    for r, row in enumerate(board.rows):
        cells: list[str] = []
        for c, val in enumerate(row):
            if val == 0:
                cells.append("[dim]·[/dim]")
            elif board.is_tile_correct(r, c):
                cells.append(f"[bold green]{val:>{width}}[/bold green]")
            else:
                cells.append(f"[bold white]{val:>{width}}[/bold white]")
        table.add_row(*cells)

    return table


def _render_stats(result: SolveResult) -> Panel:
    stats = Table(show_header=False, box=None, padding=(0, 2))
    stats.add_column(style="dim")
    stats.add_column(style="bold yellow", justify="right")
    stats.add_row("Moves", str(result.move_count))
    stats.add_row("Time complexity", str(result.iterations))
    stats.add_row("Size complexity", str(result.peak_size))
    stats.add_row("Elapsed", _format_elapsed(result.elapsed))
    return Panel(
        stats,
        title=f"[bold green]{result.algorithm.value} / {result.heuristic}[/bold green]",
        border_style="green",
        expand=False,
    )


# -- commands -----------------------------------------------------------------


def run_generate(
    size: int,
    complexity: int,
    impossible: bool = False,
    seed: int | None = None,
) -> int:
    """Print a generated puzzle. Returns the process exit code."""
    rng = random.Random(seed)
    board = GameGenerator.generate(size, complexity, impossible, rng)
    if board is None:
        err_console.print(
            f"[red]Error:[/red] cannot generate a {size}×{size} puzzle "
            f"of complexity {complexity}."
        )
        return 1

    solvable = "solvable" if board.is_solvable() else "unsolvable"
    _print_text(f"# This puzzle is {solvable}\n")
    _print_text(board.to_text())
    return 0


def run_solve(
    text: str,
    algorithm: str,
    heuristic: str,
    steps: bool = False,
    quiet: bool = False,
    delay: float = 0.0,
) -> int:
    """Parse *text*, solve it and print the history and statistics."""
    algo = resolve_algorithm(algorithm)
    if steps and algo is not Algorithm.OPTIMIZED:
        raise ConfigurationError(
            f"Step-by-step solving only runs the {Algorithm.OPTIMIZED.value} "
            f"solver, not {algo.value}."
        )
    game = GamePlay.from_text(text)
    console.print(f"[dim]Using {algorithm} with {heuristic}.[/dim]", highlight=False)

    if steps:
        result = _solve_steps(game, heuristic, quiet, delay)
    else:
        result = game.solve(algorithm, heuristic)

    if not result.solved:
        console.print("[bold red]This puzzle is unsolvable.[/bold red]")
        return 0

    if not quiet:
        h = get_heuristic(heuristic)
        for state in result.history:
            state.heuristic_value(h)
            _print_text(state.to_text(comments=True))
    console.print(_render_stats(result))
    return 0


def _solve_steps(game: GamePlay, heuristic: str, quiet: bool, delay: float) -> SolveResult:
    """Drive the interactive search, drawing every expanded board."""
    if not game.is_solvable:
        return game.solve(heuristic=heuristic)

    search = game.steps(heuristic)
    start = time.perf_counter()
    for step in search:
        if not quiet:
            node = step.node
            panel = Panel(
                Align.center(_render_board(node)),
                title=f"[bold cyan]g={node.g}  h={node.h:g}[/bold cyan]",
                subtitle=f"[dim]{step.status}[/dim]",
                border_style="cyan",
                expand=False,
            )
            console.print(panel)
        if delay:
            time.sleep(delay)
    elapsed = time.perf_counter() - start

    game.result = SolveResult.from_outcome(
        search.run(), Algorithm.OPTIMIZED, heuristic, elapsed
    )
    return game.result
