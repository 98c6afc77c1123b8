"""JSON line formatter for the ``workos`` logger.

Records produced by ``log_event`` already hold a JSON object as their
message; its keys are merged into the line instead of being nested as a
string. Any other message is written under ``msg``.
"""
from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from typing import Any, Dict, Optional

ISO = "%Y-%m-%dT%H:%M:%S.%fZ"

# Attributes every LogRecord has; anything else arrived through ``extra=``.
_STANDARD_ATTRS = frozenset(vars(logging.LogRecord("", 0, "", 0, "", None, None))) | {"message", "asctime", "taskName"}


def _event_payload(text: str) -> Optional[Dict[str, Any]]:
    if not text.startswith("{"):
        return None
    try:
        parsed = json.loads(text)
    except ValueError:
        return None
    return parsed if isinstance(parsed, dict) and "event" in parsed else None


class JsonFormatter(logging.Formatter):
    """Render each record as one JSON object with ``ts``, ``level`` and ``logger``."""

    def format(self, record: logging.LogRecord) -> str:
        line: Dict[str, Any] = {
            "ts": datetime.fromtimestamp(record.created, timezone.utc).strftime(ISO),
            "level": record.levelname,
            "logger": record.name,
        }
        text = record.getMessage()
        payload = _event_payload(text)
        if payload is None:
            line["msg"] = text
        else:
            line.update(payload)
        for key, value in vars(record).items():
            if key.startswith("_") or key in _STANDARD_ATTRS:
                continue
            line.setdefault(key, value)
        if record.exc_info:
            line.setdefault("exc", self.formatException(record.exc_info))
        return json.dumps(line, ensure_ascii=False, default=str)


__all__ = ["JsonFormatter", "ISO"]
