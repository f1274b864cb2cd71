# glove_core/logger.py
import json
import sys
from datetime import datetime

from glove_core.config import get_settings


def _log_path():
    date = datetime.now().strftime("%Y-%m-%d")
    return get_settings().log_dir / f"{date}.jsonl"


def _append(entry):
    """Best-effort append; a broken log dir must not fail a load."""
    path = _log_path()
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "a", encoding="utf-8") as f:
            f.write(json.dumps(entry, default=str) + "\n")
    except OSError as e:
        print(f"[WARN] could not write event log {path}: {e}", file=sys.stderr)


def log_event(event_type, payload, level="info"):
    """Record an event in today's JSONL log and echo it to stderr."""
    entry = {
        "timestamp": datetime.now().isoformat(),
        "level": level,
        "type": event_type,
        "payload": payload,
    }
    if get_settings().log_to_file:
        _append(entry)
    details = " ".join(f"{k}={v}" for k, v in payload.items())
    print(f"[{level.upper()}] {event_type} {details}", file=sys.stderr)
    return entry
