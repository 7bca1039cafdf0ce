from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Callable, List, Optional

import typer

from .board import Board
from .config import resolve_parameters
from .core import GameEngine, GameResult
from .errors import BingoError, NoWinnerError
from .logging_setup import setup_logging
from .parse import read_input
from .serialize import build_run_meta, emit_report_json, input_hash
from .version import __version__

logger = logging.getLogger(__name__)

app = typer.Typer(help="Bingo game simulator CLI")

RESULT_LABELS = {"first": "part1", "last": "part2"}


@app.callback(invoke_without_command=True)
def common_options(
    ctx: typer.Context,
    version: bool = typer.Option(
        False, "--version", help="Show application version and exit", is_eager=True
    ),
) -> None:
    if version:
        typer.echo(__version__)
        raise typer.Exit(0)
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit(0)


def _marked_style(colors: str) -> Optional[Callable[[str], str]]:
    if colors == "never" or (colors == "auto" and not sys.stdout.isatty()):
        return None
    return lambda text: typer.style(text, fg=typer.colors.GREEN, bold=True)


def _load(path: Path, size: int) -> tuple[List[int], List[Board]]:
    try:
        return read_input(path, size=size)
    except (BingoError, OSError, ValueError) as exc:
        logger.error("Failed to read input %s: %s", path, exc)
        raise typer.Exit(code=1)


@app.command()
def run(
    input_path: Optional[str] = typer.Argument(
        None, metavar="INPUT", help="Input file (default: ./input)"
    ),
    config: str = typer.Option(None, "--config", help="Path to config file (YAML/JSON)"),
    strategy: str = typer.Option(None, "--strategy", help="first|last|both"),
    board_size: int = typer.Option(None, "--board-size", help="Board dimension N (N x N)"),
    show_board: Optional[bool] = typer.Option(
        None, "--show-board/--no-show-board", help="Print the decisive board"
    ),
    out_report: str = typer.Option(None, "--out-report", help="report.json output path"),
    log_file: str = typer.Option(None, "--log-file", help="Log file path"),
    colors: str = typer.Option(None, "--colors", help="auto|always|never"),
    log_level: str = typer.Option(None, "--log-level", help="DEBUG|INFO|WARN|ERROR"),
    dry_run: bool = typer.Option(False, "--dry-run", help="Resolve params and exit"),
    force: bool = typer.Option(False, "--force", help="Overwrite outputs if they exist"),
    no_mkdirs: bool = typer.Option(False, "--no-mkdirs", help="Do not create parent directories"),
) -> None:
    """Play the draws against every board and print the winning results."""

    cli_overrides = {
        "input": input_path,
        "strategy": strategy,
        "board_size": board_size,
        "show_board": show_board,
        "out_report": out_report,
        "log_file": log_file,
        "colors": colors,
        "log_level": log_level,
    }
    try:
        resolved, params_hash, _cfg_path = resolve_parameters(
            config_path_str=config, cli_overrides=cli_overrides
        )
    except (OSError, ValueError) as exc:
        typer.echo(f"Configuration error: {exc}", err=True)
        raise typer.Exit(code=1)

    try:
        setup_logging(
            level=str(resolved["log_level"]),
            log_file=resolved.get("log_file"),
            json_format=(resolved["log_format"] == "json"),
        )
    except OSError as exc:
        typer.echo(f"Configuration error: cannot open log file: {exc}", err=True)
        raise typer.Exit(code=1)

    if dry_run:
        typer.echo(f"Strategy: {resolved['strategy']}")
        typer.echo(f"Params hash: {params_hash}")
        raise typer.Exit(0)

    size = int(resolved["board_size"])
    input_file = Path(resolved["input"])
    draws, boards = _load(input_file, size)
    logger.info("Loaded %d draw(s) and %d board(s) from %s", len(draws), len(boards), input_file)

    selected = ["first", "last"] if resolved["strategy"] == "both" else [resolved["strategy"]]
    style = _marked_style(str(resolved["colors"]))
    results: List[GameResult] = []
    for name in selected:
        try:
            result = GameEngine(strategy=name).play(boards, draws)
        except NoWinnerError as exc:
            logger.error("%s", exc)
            raise typer.Exit(code=2)
        results.append(result)
        if resolved["show_board"]:
            typer.echo(result.board.render(style=style))
        typer.echo(f"{RESULT_LABELS[name]} result: {result.result}")

    if resolved.get("out_report"):
        run_meta = build_run_meta(
            app_version=__version__,
            params_hash=params_hash,
            input_digest=input_hash(draws, boards),
            board_size=size,
        )
        try:
            emit_report_json(
                Path(resolved["out_report"]),
                results=results,
                run_meta=run_meta,
                mkdirs=(not no_mkdirs),
                overwrite=force,
            )
        except OSError as exc:
            logger.error("Failed to write report: %s", exc)
            raise typer.Exit(code=1)

    raise typer.Exit(code=0)


@app.command()
def check(
    input_path: Optional[str] = typer.Argument(
        None, metavar="INPUT", help="Input file (default: ./input)"
    ),
    config: str = typer.Option(None, "--config", help="Path to config file (YAML/JSON)"),
    board_size: int = typer.Option(None, "--board-size", help="Board dimension N (N x N)"),
) -> None:
    """Parse and validate the input without playing."""
    try:
        resolved, _hash, _cfg_path = resolve_parameters(
            config_path_str=config,
            cli_overrides={"input": input_path, "board_size": board_size},
        )
    except (OSError, ValueError) as exc:
        typer.echo(f"Configuration error: {exc}", err=True)
        raise typer.Exit(code=1)

    setup_logging(level="WARNING")
    size = int(resolved["board_size"])
    draws, boards = _load(Path(resolved["input"]), size)
    typer.echo(f"{len(draws)} draw(s), {len(boards)} board(s) of {size}x{size}")
    raise typer.Exit(code=0)


def main(_argv: list[str] | None = None) -> int:
    try:
        app(standalone_mode=True)
        return 0
    except SystemExit as e:
        return int(e.code) if e.code is not None else 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
