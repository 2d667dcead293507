import json

from storefront.config import load_env
from storefront.services.logging import log_event, set_log_level


def test_settings_file_wins_over_env(tmp_path, monkeypatch):
    settings = tmp_path / "settings.json"
    settings.write_text(json.dumps({"ConnectionStrings": {"DefaultConnection": "sqlite:///a.db"}}), encoding="utf-8")
    monkeypatch.setenv("DATABASE_URL", "sqlite:///b.db")
    cfg = load_env(settings)
    assert cfg.database_url == "sqlite:///a.db"


def test_env_used_when_settings_missing(tmp_path, monkeypatch):
    monkeypatch.setenv("DATABASE_URL", "sqlite:///b.db")
    assert load_env(tmp_path / "missing.json").database_url == "sqlite:///b.db"


def test_blank_connection_is_unset(tmp_path, monkeypatch):
    settings = tmp_path / "settings.json"
    settings.write_text(json.dumps({"ConnectionStrings": {"DefaultConnection": "  "}}), encoding="utf-8")
    monkeypatch.delenv("DATABASE_URL", raising=False)
    cfg = load_env(settings)
    assert cfg.database_url is None


def test_malformed_settings_file_is_ignored(tmp_path, monkeypatch):
    settings = tmp_path / "settings.json"
    settings.write_text("{not json", encoding="utf-8")
    monkeypatch.delenv("DATABASE_URL", raising=False)
    monkeypatch.setenv("LOG_LEVEL", "debug")
    cfg = load_env(settings)
    assert cfg.database_url is None
    assert cfg.log_level == "DEBUG"


def test_log_event_writes_json_line(capsys):
    log_event("INFO", "cart.cleared", owner="sess-1", deleted=2)
    payload = json.loads(capsys.readouterr().out.strip())
    assert payload["level"] == "info"
    assert payload["event"] == "cart.cleared"
    assert payload["deleted"] == 2


def test_log_event_below_level_is_dropped(capsys):
    set_log_level("WARNING")
    log_event("info", "cart.saved", owner="sess-1")
    log_event("error", "cart.save_failed", owner="sess-1")
    lines = capsys.readouterr().out.strip().splitlines()
    assert [json.loads(line)["event"] for line in lines] == ["cart.save_failed"]


def test_unknown_log_level_falls_back_to_info(capsys):
    set_log_level("chatty")
    log_event("debug", "cart.loaded")
    log_event("info", "cart.cleared")
    lines = capsys.readouterr().out.strip().splitlines()
    assert [json.loads(line)["event"] for line in lines] == ["cart.cleared"]
