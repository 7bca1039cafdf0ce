from __future__ import annotations

import hashlib
import json
import os
from pathlib import Path
from typing import Any, Dict, Iterable, Mapping, Tuple

import yaml

ENV_PREFIX = "BINGO_SIM_"

STRATEGY_CHOICES = ("first", "last", "both")
COLOR_CHOICES = ("auto", "always", "never")
PATH_KEYS = ("input", "out_report", "log_file")


def _read_config_file(config_path: Path | None) -> Dict[str, Any]:
    if not config_path:
        return {}
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")
    suffix = config_path.suffix.lower()
    text = config_path.read_text(encoding="utf-8")
    if suffix in (".yaml", ".yml"):
        data = yaml.safe_load(text) or {}
        if not isinstance(data, dict):
            raise ValueError("Top-level YAML config must be a mapping")
        return data
    if suffix == ".json":
        data = json.loads(text)
        if not isinstance(data, dict):
            raise ValueError("Top-level JSON config must be a mapping")
        return data
    raise ValueError(f"Unsupported config extension: {suffix}")


def _parse_bool(value: str) -> bool:
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _collect_env_vars(env: Mapping[str, str]) -> Dict[str, Any]:
    """Map ENV variables with BINGO_SIM_ prefix to config keys.

    Unknown variables are ignored.
    """
    mapping: Dict[str, str] = {
        f"{ENV_PREFIX}INPUT": "input",
        f"{ENV_PREFIX}BOARD_SIZE": "board_size",
        f"{ENV_PREFIX}STRATEGY": "strategy",
        f"{ENV_PREFIX}SHOW_BOARD": "show_board",
        # Output & UX
        f"{ENV_PREFIX}COLORS": "colors",
        f"{ENV_PREFIX}LOG_LEVEL": "log_level",
        f"{ENV_PREFIX}LOG_FORMAT": "log_format",
        f"{ENV_PREFIX}LOG_FILE": "log_file",
        f"{ENV_PREFIX}OUT_REPORT": "out_report",
    }

    result: Dict[str, Any] = {}
    for env_key, cfg_key in mapping.items():
        if env_key not in env:
            continue
        raw = env[env_key]
        if cfg_key == "board_size":
            try:
                result[cfg_key] = int(raw)
            except ValueError:
                result[cfg_key] = raw
        elif cfg_key == "show_board":
            result[cfg_key] = _parse_bool(raw)
        else:
            result[cfg_key] = raw
    return result


def _apply_overrides(base: Dict[str, Any], overrides: Mapping[str, Any]) -> Dict[str, Any]:
    merged = dict(base)
    for key, value in overrides.items():
        if value is not None:
            merged[key] = value
    return merged


def _validate(resolved: Dict[str, Any]) -> None:
    size = resolved.get("board_size")
    if not isinstance(size, int) or isinstance(size, bool) or size < 1:
        raise ValueError(f"board_size must be a positive integer, got {size!r}")
    strategy = resolved.get("strategy")
    if strategy not in STRATEGY_CHOICES:
        raise ValueError(
            f"strategy must be one of {', '.join(STRATEGY_CHOICES)}, got {strategy!r}"
        )
    colors = resolved.get("colors")
    if colors not in COLOR_CHOICES:
        raise ValueError(
            f"colors must be one of {', '.join(COLOR_CHOICES)}, got {colors!r}"
        )
    if resolved.get("log_format") not in ("text", "json"):
        raise ValueError("log_format must be 'text' or 'json'")
    if not isinstance(resolved.get("show_board"), bool):
        raise ValueError(f"show_board must be a boolean, got {resolved.get('show_board')!r}")


def canonical_json_dumps(data: Any) -> str:
    return json.dumps(data, ensure_ascii=True, sort_keys=True, separators=(",", ":"))


def compute_params_hash(resolved: Mapping[str, Any]) -> str:
    include = ("board_size", "strategy")
    contract = {key: resolved[key] for key in include if key in resolved}
    digest = hashlib.sha256(canonical_json_dumps(contract).encode("utf-8")).hexdigest()
    return f"sha256:{digest}"


def resolve_paths(
    resolved: Dict[str, Any],
    config_file: Path | None,
    config_keys: Iterable[str],
) -> Dict[str, Any]:
    """Normalize paths per policy.

    - Paths from config file: resolve relative to config directory
    - Paths from CLI, ENV or defaults: resolve relative to CWD
    """
    cwd = Path.cwd()
    cfg_dir = config_file.parent if config_file else None

    from_config = set(config_keys)

    def normalize(path_value: str, from_cwd: bool) -> str | None:
        if path_value == "":
            return None
        p = Path(path_value)
        if p.is_absolute():
            return str(p)
        base = cwd if from_cwd else (cfg_dir or cwd)
        return str((base / p).resolve())

    result = dict(resolved)
    for key in PATH_KEYS:
        value = resolved.get(key)
        if value is None:
            continue
        result[key] = normalize(str(value), key not in from_config)
    return result


def resolve_parameters(
    *,
    config_path_str: str | None,
    cli_overrides: Mapping[str, Any],
    env: Mapping[str, str] | None = None,
) -> Tuple[Dict[str, Any], str, Path | None]:
    """Resolve parameters with precedence CLI > ENV > config > defaults.

    Returns (resolved_params, params_hash, config_path)
    """
    config_path = Path(config_path_str).resolve() if config_path_str else None
    file_cfg = _read_config_file(config_path) if config_path else {}
    if isinstance(file_cfg.get("show_board"), str):
        file_cfg["show_board"] = _parse_bool(file_cfg["show_board"])
    env_map = _collect_env_vars(os.environ if env is None else env)

    defaults: Dict[str, Any] = {
        "input": "input",
        "board_size": 5,
        "strategy": "both",
        "show_board": True,
        "colors": "auto",
        "log_level": "INFO",
        "log_format": "text",
    }

    merged = _apply_overrides(defaults, file_cfg)
    merged = _apply_overrides(merged, env_map)
    merged = _apply_overrides(merged, cli_overrides)

    _validate(merged)
    config_keys = [
        key
        for key in file_cfg
        if key not in env_map and cli_overrides.get(key) is None
    ]
    merged = resolve_paths(merged, config_path, config_keys)

    params_hash = compute_params_hash(merged)
    return merged, params_hash, config_path
