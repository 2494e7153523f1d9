"""Backfill missing fields from a previous instance of a model."""

from __future__ import annotations

from typing import Any, Mapping, MutableMapping, Optional


def _field_names(fields: Any) -> set[str]:
    definition = getattr(fields, "definition", None)
    if isinstance(definition, Mapping):
        return set(definition)
    return set(fields)


def set_defaults(
    target: Optional[MutableMapping[str, Any]],
    source: Optional[Mapping[str, Any]],
    fields: Any,
) -> Optional[MutableMapping[str, Any]]:
    """Copy whitelisted keys from ``source`` that ``target`` lacks.

    ``fields`` is either an iterable of field names or a model class with a
    ``definition`` mapping. A key already present in ``target`` is kept even
    when its value is ``None``. Returns ``target``.
    """
    if target is None or source is None or fields is None:
        return target
    allowed = _field_names(fields)
    for key, value in source.items():
        if key in allowed and key not in target:
            target[key] = value
    return target
