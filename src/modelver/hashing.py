"""Change-detection hash over the semantic content of a model object."""

from __future__ import annotations

import copy
import json
from typing import Any

from .schemas import versions


def _to_int32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - 0x100000000 if value & 0x80000000 else value


def hash_code(model_item: Any) -> int:
    """Return a 32-bit signed hash of ``model_item`` ignoring its identity.

    ``_id``, ``_rev`` and ``id`` are removed before hashing, so two revisions
    with the same content hash equal. Key order matters. Not a digest:
    collisions are possible.
    """
    plain = copy.deepcopy(model_item if model_item is not None else {})
    if isinstance(plain, dict):
        for field in versions.IDENTITY_FIELDS:
            plain.pop(field, None)
    text = json.dumps(plain, separators=(",", ":"), ensure_ascii=False)
    # lone surrogates from decoded JSON are hashed as single code units
    data = text.encode("utf-16-le", "surrogatepass")
    h = 0
    for i in range(0, len(data), 2):
        unit = data[i] | (data[i + 1] << 8)
        h = _to_int32(h * 31 + unit)
    return h
