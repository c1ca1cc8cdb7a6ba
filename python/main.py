#!/usr/bin/env python3
"""n-puzzle generator and solver.

Usage::

    python main.py generate 4 40 > puzzle.txt    # 4×4, 40-move shuffle
    python main.py generate 3 -i                 # unsolvable 3×3
    python main.py solve puzzle.txt -e manhattan
    python main.py generate 3 20 | python main.py solve --steps
"""

import logging
import sys
from pathlib import Path
from typing import Optional

import typer
from rich.logging import RichHandler

ROOT = Path(__file__).resolve().parent  # python/

if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from frontend.cli.rich.app import err_console, run_generate, run_solve  # noqa: E402
from npuzzle.config import (  # noqa: E402
    COMPLEXITY_LIMITS,
    DEFAULT_ALGORITHM,
    DEFAULT_HEURISTIC,
    SIZE_LIMITS,
)
from npuzzle.errors import PuzzleError  # noqa: E402


# -- helpers ------------------------------------------------------------------


def _setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )


def _read_puzzle(file: Optional[Path]) -> str:
    if file is None or str(file) == "-":
        return sys.stdin.read()
    return file.read_text()


def _fail(message: object) -> None:
    err_console.print(f"[red]Error:[/red] {message}", highlight=False)
    raise typer.Exit(1)


# -- CLI entry point ----------------------------------------------------------

app = typer.Typer(add_completion=False, no_args_is_help=True)


@app.callback()
def main(
    verbose: bool = typer.Option(
        False, "-v", "--verbose",
        help="Log search and generation details.",
    ),
) -> None:
    """n-puzzle generator and solver."""
    _setup_logging(verbose)


@app.command()
def generate(
    size: int = typer.Argument(
        ..., min=SIZE_LIMITS[0], max=SIZE_LIMITS[1],
        help="Side of the board.",
    ),
    complexity: Optional[int] = typer.Argument(
        None, min=COMPLEXITY_LIMITS[0], max=COMPLEXITY_LIMITS[1],
        help="Length of the shuffle walk. Defaults to SIZE - 1.",
    ),
    impossible: bool = typer.Option(
        False, "-i", "--impossible",
        help="Make the puzzle unsolvable.",
    ),
    seed: Optional[int] = typer.Option(
        None, "--seed",
        help="Seed the shuffle for a reproducible puzzle.",
    ),
) -> None:
    """Generate a new n-puzzle."""
    if complexity is None:
        complexity = size - 1
    try:
        code = run_generate(size, complexity, impossible, seed)
    except PuzzleError as e:
        _fail(e)
    raise typer.Exit(code)


@app.command()
def solve(
    file: Optional[Path] = typer.Argument(
        None,
        help="Puzzle file. Reads stdin when omitted or '-'.",
    ),
    algo: str = typer.Option(
        DEFAULT_ALGORITHM, "-a", "--algo",
        help="Can be: reference, optimized, best-first.",
    ),
    heuristic: str = typer.Option(
        DEFAULT_HEURISTIC, "-e", "--heuristic",
        help="Can be: hamming, cartesian, manhattan, linear-conflict, permutation-count.",
    ),
    steps: bool = typer.Option(
        False, "--steps",
        help="Show every expanded board (optimized search only).",
    ),
    delay: float = typer.Option(
        0.0, "--delay", min=0.0,
        help="Pause between shown steps, in seconds.",
    ),
    quiet: bool = typer.Option(
        False, "-q", "--quiet",
        help="Only print the statistics.",
    ),
) -> None:
    """Read the puzzle and solve it."""
    try:
        text = _read_puzzle(file)
    except OSError as e:
        _fail(e)
    try:
        code = run_solve(text, algo, heuristic, steps=steps, quiet=quiet, delay=delay)
    except PuzzleError as e:
        _fail(e)
    raise typer.Exit(code)


if __name__ == "__main__":
    app()
