from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
import os
import yaml


@dataclass(frozen=True)
class Settings:
    # Storage
    db_path: str = "./data/employees.sqlite3"

    # Logging
    log_dir: str = "./logs"
    log_level: str = "INFO"

    # Messages / input
    messages_file: str | None = None
    csv_has_header: bool = True


@dataclass(frozen=True)
class LoadedSettings:
    settings: Settings
    sources_used: list[str]


def _read_yaml_config(path: Path) -> dict:
    if not path.exists():
        return {}
    if not path.is_file():
        return {}
    try:
        with path.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as exc:
        raise ValueError(f"Invalid config file {path}: {exc}") from exc
    if not isinstance(data, dict):
        return {}
    return data


def _env_get(name: str) -> str | None:
    v = os.getenv(name)
    if v is None or v.strip() == "":
        return None
    return v.strip()


def _parse_bool(v: str | None) -> bool | None:
    if v is None:
        return None
    vv = v.lower()
    if vv in ("1", "true", "yes", "y"):
        return True
    if vv in ("0", "false", "no", "n"):
        return False
    raise ValueError(f"Invalid boolean value: {v}")


def load_settings(
    config_path: str | None,
    cli_overrides: dict,
) -> LoadedSettings:
    """
    Priority: CLI > ENV > config > defaults
    """
    sources: list[str] = []
    defaults = Settings()

    # 1) config file
    cfg: dict = {}
    if config_path:
        cfg = _read_yaml_config(Path(config_path))
        if cfg:
            sources.append("config")

    # 2) env
    env = {
        "db_path": _env_get("EMPADMIN_DB_PATH"),
        "log_dir": _env_get("EMPADMIN_LOG_DIR"),
        "log_level": _env_get("EMPADMIN_LOG_LEVEL"),
        "messages_file": _env_get("EMPADMIN_MESSAGES_FILE"),
        "csv_has_header": _parse_bool(_env_get("EMPADMIN_CSV_HAS_HEADER")),
    }
    if any(v is not None for v in env.values()):
        sources.append("env")

    merged = {
        "db_path": cfg.get("db_path", defaults.db_path),
        "log_dir": cfg.get("log_dir", defaults.log_dir),
        "log_level": cfg.get("log_level", defaults.log_level),
        "messages_file": cfg.get("messages_file", defaults.messages_file),
        "csv_has_header": cfg.get("csv_has_header", defaults.csv_has_header),
    }
    # YAML может отдать булево значение строкой ("false").
    if isinstance(merged["csv_has_header"], str):
        merged["csv_has_header"] = _parse_bool(merged["csv_has_header"].strip())
    for k, v in env.items():
        if v is not None:
            merged[k] = v

    # 3) CLI overrides (only those explicitly passed)
    if any(v is not None for v in cli_overrides.values()):
        sources.append("cli")

    for k, v in cli_overrides.items():
        if v is None:
            continue
        merged[k] = v

    settings = Settings(
        db_path=str(merged["db_path"]),
        log_dir=str(merged["log_dir"]),
        log_level=str(merged["log_level"]),
        messages_file=merged["messages_file"],
        csv_has_header=bool(merged["csv_has_header"]),
    )

    return LoadedSettings(settings=settings, sources_used=sources)
