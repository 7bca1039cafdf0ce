from __future__ import annotations

import os
from pathlib import Path

import pytest

from bingo_sim.config import resolve_parameters


def test_defaults(tmp_path: Path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    resolved, params_hash, cfg = resolve_parameters(config_path_str=None, cli_overrides={}, env={})
    assert resolved["board_size"] == 5
    assert resolved["strategy"] == "both"
    assert resolved["show_board"] is True
    assert Path(resolved["input"]) == (tmp_path / "input").resolve()
    assert params_hash.startswith("sha256:")
    assert cfg is None


def test_env_precedence_over_config(tmp_path: Path, monkeypatch):
    cfg = tmp_path / "config.yaml"
    cfg.write_text("board_size: 4\nstrategy: first\n", encoding="utf-8")
    monkeypatch.setenv("BINGO_SIM_BOARD_SIZE", "6")

    resolved, _hash, _ = resolve_parameters(
        config_path_str=str(cfg), cli_overrides={}, env=os.environ
    )
    assert resolved["board_size"] == 6
    assert resolved["strategy"] == "first"


def test_cli_precedence_over_env(tmp_path: Path, monkeypatch):
    cfg = tmp_path / "config.json"
    cfg.write_text('{"strategy": "first"}', encoding="utf-8")
    monkeypatch.setenv("BINGO_SIM_STRATEGY", "last")

    resolved, _hash, _ = resolve_parameters(
        config_path_str=str(cfg), cli_overrides={"strategy": "both", "board_size": None}, env=os.environ
    )
    assert resolved["strategy"] == "both"
    assert resolved["board_size"] == 5


def test_env_bool_parsing():
    resolved, _hash, _ = resolve_parameters(
        config_path_str=None, cli_overrides={}, env={"BINGO_SIM_SHOW_BOARD": "no"}
    )
    assert resolved["show_board"] is False


def test_path_normalization_cli_vs_config(tmp_path: Path, monkeypatch):
    cfg_dir = tmp_path / "cfg"
    cfg_dir.mkdir()
    cfg = cfg_dir / "conf.yaml"
    cfg.write_text("input: boards.txt\nout_report: report.json\n", encoding="utf-8")

    monkeypatch.chdir(tmp_path)
    resolved, _hash, _ = resolve_parameters(
        config_path_str=str(cfg),
        cli_overrides={"out_report": "rep.json"},
        env={},
    )
    assert Path(resolved["input"]).parent == cfg_dir.resolve()
    assert Path(resolved["out_report"]).parent == tmp_path.resolve()


@pytest.mark.parametrize(
    "overrides",
    [{"strategy": "middle"}, {"board_size": 0}, {"board_size": "five"}],
)
def test_invalid_values_rejected(overrides):
    with pytest.raises(ValueError):
        resolve_parameters(config_path_str=None, cli_overrides=overrides, env={})


def test_missing_config_file(tmp_path: Path):
    with pytest.raises(FileNotFoundError):
        resolve_parameters(config_path_str=str(tmp_path / "nope.yaml"), cli_overrides={}, env={})


def test_params_hash_contract_stability():
    base = {"board_size": 5, "strategy": "both", "log_level": "INFO"}
    _, h1, _ = resolve_parameters(config_path_str=None, cli_overrides=base, env={})
    altered = dict(base)
    altered["log_level"] = "DEBUG"
    _, h2, _ = resolve_parameters(config_path_str=None, cli_overrides=altered, env={})
    assert h1 == h2
    altered["strategy"] = "last"
    _, h3, _ = resolve_parameters(config_path_str=None, cli_overrides=altered, env={})
    assert h3 != h1


def test_invalid_colors_rejected():
    with pytest.raises(ValueError):
        resolve_parameters(config_path_str=None, cli_overrides={"colors": "purple"}, env={})


@pytest.mark.parametrize(
    "name, text",
    [("conf.json", '{"show_board": "no"}'), ("conf.yaml", 'show_board: "no"\n')],
)
def test_config_file_show_board_string_is_parsed(tmp_path: Path, name, text):
    cfg = tmp_path / name
    cfg.write_text(text, encoding="utf-8")
    resolved, _hash, _ = resolve_parameters(config_path_str=str(cfg), cli_overrides={}, env={})
    assert resolved["show_board"] is False


def test_non_boolean_show_board_rejected(tmp_path: Path):
    cfg = tmp_path / "conf.json"
    cfg.write_text('{"show_board": 3}', encoding="utf-8")
    with pytest.raises(ValueError):
        resolve_parameters(config_path_str=str(cfg), cli_overrides={}, env={})
