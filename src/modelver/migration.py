"""Version-driven conversion of model objects.

Each object is parsed for its ``modelVersion``, the caller's resolver picks
the converters for that version, and the converters are folded over the
object in order. A converter returning ``None`` rejects the object, which is
then left out of the result.
"""

from __future__ import annotations

import logging
from typing import Any, Iterable, Optional

from .schemas import versions
from .types import ModelObject, Resolver
from .version import Version, VersionParseError, parse_version

logger = logging.getLogger(__name__)


def _describe(obj: ModelObject) -> str:
    for field in ("_id", "id"):
        if obj.get(field):
            return f"{field}={obj[field]!r}"
    return "<no id>"


def _detect_version(obj: ModelObject) -> Version:
    raw = obj.get(versions.MODEL_VERSION_FIELD)
    try:
        return parse_version(raw)
    except VersionParseError as exc:
        logger.warning("Treating object %s as unversioned: %s", _describe(obj), exc)
        return Version()


def _convert(obj: ModelObject, resolver: Resolver, options: Any) -> Optional[ModelObject]:
    version = _detect_version(obj)
    converted: Optional[ModelObject] = obj
    for converter in resolver(version):
        converted = converter(converted, options)
        if converted is None:
            logger.debug(
                "Object %s at version %s rejected by %s",
                _describe(obj),
                version,
                getattr(converter, "__name__", repr(converter)),
            )
            return None
    return converted


def convert_many(
    objects: Optional[Iterable[ModelObject]],
    resolver: Optional[Resolver],
    options: Any = None,
) -> Optional[list[ModelObject]]:
    """Convert a batch of objects, dropping the ones a converter rejects.

    Survivors keep their input order. The resolver is called once per object
    with that object's own version, so one batch may run several chains.
    Returns ``objects`` unchanged if either ``objects`` or ``resolver`` is None.
    """
    if objects is None or resolver is None:
        return objects
    results: list[ModelObject] = []
    for obj in objects:
        converted = _convert(obj, resolver, options)
        if converted is not None:
            results.append(converted)
    return results


def convert_one(
    obj: Optional[ModelObject],
    resolver: Optional[Resolver],
    options: Any = None,
) -> Optional[ModelObject]:
    """Convert a single object; returns None if it was rejected."""
    if obj is None or resolver is None:
        return obj
    return _convert(obj, resolver, options)
