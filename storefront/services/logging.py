import json
import logging
import sys
from datetime import datetime, timezone


_threshold = logging.INFO


def _level_no(level: str) -> int:
    value = logging.getLevelName((level or "INFO").upper())
    return value if isinstance(value, int) else logging.INFO


def set_log_level(level: str) -> None:
    """Apply ``LOG_LEVEL`` to JSON events and to the package's module loggers."""
    global _threshold
    _threshold = _level_no(level)
    logging.getLogger("storefront").setLevel(_threshold)


def log_event(level: str, event: str, **fields) -> None:
    if _level_no(level) < _threshold:
        return
    payload = {
        "ts": datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%S.%fZ"),
        "level": level.lower(),
        "event": event,
    }
    payload.update(fields or {})
    try:
        sys.stdout.write(json.dumps(payload, ensure_ascii=False, default=str) + "\n")
    except OSError:
        # best-effort logging
        pass
