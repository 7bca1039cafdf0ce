from __future__ import annotations

import hashlib
import json
import platform
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import Dict, List, Sequence

from .board import Board
from .core import GameResult


def ensure_parent(path: Path, *, mkdirs: bool) -> None:
    parent = path.parent
    if not parent.exists() and mkdirs:
        parent.mkdir(parents=True, exist_ok=True)


def write_json(path: Path, data: object, *, mkdirs: bool, overwrite: bool) -> None:
    if path.exists() and not overwrite:
        raise FileExistsError(
            f"Refusing to overwrite existing file without --force: {path}"
        )
    ensure_parent(path, mkdirs=mkdirs)
    text = json.dumps(data, ensure_ascii=True, sort_keys=True, indent=2)
    path.write_text(text + "\n", encoding="utf-8")


def input_hash(draws: Sequence[int], boards: Sequence[Board]) -> str:
    payload = json.dumps(
        {"draws": list(draws), "boards": [b.values() for b in boards]},
        ensure_ascii=True,
        separators=(",", ":"),
    )
    return "sha256:" + hashlib.sha256(payload.encode("utf-8")).hexdigest()


def build_run_meta(
    *,
    app_version: str,
    params_hash: str,
    input_digest: str,
    board_size: int,
) -> Dict[str, object]:
    return {
        "app_version": app_version,
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "python_version": sys.version.split()[0],
        "platform": platform.system().lower(),
        "params_hash": params_hash,
        "input_hash": input_digest,
        "board_size": board_size,
    }


def result_entry(result: GameResult) -> Dict[str, object]:
    return {
        "strategy": result.strategy,
        "result": result.result,
        "board_score": result.board_score,
        "number": result.number,
        "draw_index": result.draw_index,
        "board_index": result.board_index,
        "winners": result.winners,
        "board": result.board.values(),
        "marked": result.board.marked_mask(),
        "total_time": round(result.metrics.total_time, 6),
    }


def emit_report_json(
    path: Path,
    *,
    results: Sequence[GameResult],
    run_meta: Dict[str, object],
    mkdirs: bool,
    overwrite: bool,
) -> None:
    entries: List[Dict[str, object]] = [result_entry(r) for r in results]
    write_json(
        path,
        {"run_meta": run_meta, "results": entries},
        mkdirs=mkdirs,
        overwrite=overwrite,
    )
