import os
from dataclasses import dataclass
from pathlib import Path
import json
from typing import Optional


class ConfigurationError(RuntimeError):
    pass


@dataclass
class AppConfig:
    database_url: Optional[str]
    log_level: str


DEFAULT_SETTINGS_FILE = Path(__file__).resolve().parents[1] / "data" / "settings.json"


def _blank_to_none(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    v = value.strip()
    return v if v else None


def _load_settings_file(path: Optional[Path] = None) -> dict:
    path = path or DEFAULT_SETTINGS_FILE
    try:
        if path.exists():
            payload = json.loads(path.read_text(encoding="utf-8"))
            if isinstance(payload, dict):
                return payload
    except (OSError, ValueError):
        pass
    return {}


def _default_connection(settings: dict) -> Optional[str]:
    strings = settings.get("ConnectionStrings") or {}
    if not isinstance(strings, dict):
        return None
    return strings.get("DefaultConnection")


def load_env(settings_file: Optional[Path] = None) -> AppConfig:
    """Build the config once; the settings file wins over the environment.

    ``ConnectionStrings.DefaultConnection`` in the settings file, then
    ``DATABASE_URL``. A blank value means "not configured".
    """
    s = _load_settings_file(settings_file)
    database_url = _blank_to_none(_default_connection(s)) or _blank_to_none(os.getenv("DATABASE_URL"))
    log_level = (os.getenv("LOG_LEVEL") or "INFO").strip().upper()
    return AppConfig(database_url=database_url, log_level=log_level)
