"""Semantic model versions and their compact JSON string form."""

from __future__ import annotations

import json
from dataclasses import dataclass
from functools import total_ordering
from typing import Any, Optional

from .schemas import versions


class VersionParseError(ValueError):
    """Raised when a model version string cannot be decoded."""


@total_ordering
@dataclass(frozen=True)
class Version:
    """A (major, minor, patch) triple, or the all-``None`` unknown version.

    The unknown version sorts before every numbered version so that objects
    written before versioning existed receive the full upgrade chain.
    """

    major: Optional[int] = None
    minor: Optional[int] = None
    patch: Optional[int] = None

    def __post_init__(self) -> None:
        parts = (self.major, self.minor, self.patch)
        if all(p is None for p in parts):
            return
        if any(p is None for p in parts):
            raise ValueError(f"Partial version is not allowed: {parts!r}")
        if any(p < 0 for p in parts):
            raise ValueError(f"Version components must be >= 0: {parts!r}")

    @property
    def is_unknown(self) -> bool:
        return self.major is None

    def _key(self) -> tuple[int, int, int, int]:
        if self.is_unknown:
            return (0, 0, 0, 0)
        return (1, self.major, self.minor, self.patch)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self._key() < other._key()

    def to_dict(self) -> dict[str, Optional[int]]:
        return {"major": self.major, "minor": self.minor, "patch": self.patch}

    def to_string(self) -> str:
        """Return the compact JSON form stored in ``modelVersion`` fields."""
        return json.dumps(self.to_dict(), separators=(",", ":"))

    def __str__(self) -> str:
        if self.is_unknown:
            return "unknown"
        return f"{self.major}.{self.minor}.{self.patch}"


UNKNOWN_VERSION = Version()


def _coerce(value: Any) -> int:
    if isinstance(value, str):
        return int(value.strip())
    return int(value)


def parse_version(version_string: str | None) -> Version:
    """Parse a ``modelVersion`` string into a fresh :class:`Version`.

    Empty input yields the unknown version, as does JSON without usable
    components. A record whose ``major`` is missing or zero is also reported
    as unknown, which means an explicit ``0.x.x`` cannot be told apart from an
    unversioned object.

    Raises:
        VersionParseError: if the string is not valid JSON.
    """
    if not version_string:
        return Version()
    try:
        data = json.loads(version_string)
    except (TypeError, ValueError) as exc:
        raise VersionParseError(f"Invalid model version {version_string!r}: {exc}") from exc
    if not isinstance(data, dict):
        return Version()
    try:
        major = _coerce(data.get("major") or 0)
        if not major:
            return Version()
        return Version(
            major,
            _coerce(data.get("minor") or 0),
            _coerce(data.get("patch") or 0),
        )
    except (TypeError, ValueError, OverflowError):
        return Version()


def model_version_string() -> str:
    """Return the built-in target version string."""
    return versions.MODEL_VERSION
