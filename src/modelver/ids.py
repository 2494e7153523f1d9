"""ID generation and JSON pass-through helpers for model objects."""

from __future__ import annotations

import itertools
import json
import threading
import time
from typing import Any

# Counter shared by all ids in the process; keeps ids unique within one ms.
_counter = itertools.count(100)
_counter_lock = threading.Lock()


def generate_id(prefix: str | None = None) -> str:
    """Return ``<prefix>-<epoch ms>-<counter>``, e.g. ``grid-1700000000000-100``."""
    prefix = prefix or "id"
    with _counter_lock:
        seq = next(_counter)
    return f"{prefix}-{int(time.time() * 1000)}-{seq}"


def get_as_object(json_string_or_object: Any) -> Any:
    """Decode a JSON string; anything else is assumed decoded and returned as is."""
    if isinstance(json_string_or_object, str):
        return json.loads(json_string_or_object)
    return json_string_or_object
