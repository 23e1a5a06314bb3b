"""Small utility functions."""

import hashlib
import json
from typing import Any

def hash_text(text: str) -> str:
    """Create a stable short hash of a document, used to tag log events."""
    return hashlib.sha256(text.encode('utf-8')).hexdigest()[:16]

def safe_json(obj: Any) -> str:
    """Safely serialize tokens and results to JSON."""
    def serialize_item(item):
        if hasattr(item, '__dataclass_fields__'):
            return {k: serialize_item(getattr(item, k)) for k in item.__dataclass_fields__}
        elif isinstance(item, (list, tuple)):
            return [serialize_item(x) for x in item]
        elif isinstance(item, dict):
            return {k: serialize_item(v) for k, v in item.items()}
        else:
            return item

    try:
        return json.dumps(serialize_item(obj), indent=2, ensure_ascii=False)
    except Exception as e:
        return f"<serialization error: {e}>"

class ConsoleLogger:
    """Logger that prints structured events as single lines."""

    def __init__(self, stream=None):
        self.stream = stream

    def _emit(self, level: str, msg: str, kv: dict):
        details = " ".join(f"{k}={v}" for k, v in kv.items())
        print(f"{level}: {msg} {details}" if details else f"{level}: {msg}", file=self.stream)

    def info(self, msg: str, **kv):
        self._emit("INFO", msg, kv)

    def warn(self, msg: str, **kv):
        self._emit("WARN", msg, kv)

    def error(self, msg: str, **kv):
        self._emit("ERROR", msg, kv)
