"""Converter table keyed by version thresholds.

Register each upgrade with the first version that no longer needs it; the
registry then acts as the resolver for :mod:`modelver.migration`::

    registry = ConverterRegistry()

    @registry.upgrade(below="1.1.0")
    def add_tags(obj, options):
        obj.setdefault("tags", [])
        return obj

    convert_many(objects, registry.converters_for)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional

from .types import Converter
from .version import Version, parse_version


def _as_version(value: Version | str) -> Version:
    if isinstance(value, Version):
        return value
    if value.lstrip().startswith("{"):
        return parse_version(value)
    parts = [int(p) for p in value.split(".")]
    if len(parts) > 3:
        raise ValueError(f"Version {value!r} has more than three components")
    if not parts[0]:
        # same rule as parse_version: major 0 means unversioned
        return Version()
    parts += [0] * (3 - len(parts))
    return Version(*parts)


@dataclass
class _Entry:
    converter: Converter
    below: Optional[Version]


class ConverterRegistry:
    """Ordered list of converters, each applicable below a version."""

    def __init__(self) -> None:
        self._entries: list[_Entry] = []

    def __len__(self) -> int:
        return len(self._entries)

    def register(self, converter: Converter, *, below: Version | str) -> Converter:
        """Run ``converter`` for objects whose version sorts before ``below``."""
        threshold = _as_version(below)
        if threshold.is_unknown:
            raise ValueError("Upgrade threshold must be a numbered version")
        self._entries.append(_Entry(converter, threshold))
        return converter

    def register_always(self, converter: Converter) -> Converter:
        """Run ``converter`` for every object regardless of version."""
        self._entries.append(_Entry(converter, None))
        return converter

    def upgrade(self, *, below: Version | str) -> Callable[[Converter], Converter]:
        def decorator(fn: Converter) -> Converter:
            return self.register(fn, below=below)

        return decorator

    def converters_for(self, version: Version) -> list[Converter]:
        """Resolver: converters needed by an object written at ``version``."""
        return [
            entry.converter
            for entry in self._entries
            if entry.below is None or version < entry.below
        ]
