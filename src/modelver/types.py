"""Shared enums and type aliases for conversion."""

from __future__ import annotations

from enum import Enum
from typing import Any, Callable, Dict, Optional, Sequence, TYPE_CHECKING

if TYPE_CHECKING:
    from .version import Version

ModelObject = Dict[str, Any]
Converter = Callable[[ModelObject, Any], Optional[ModelObject]]
Resolver = Callable[["Version"], Sequence[Converter]]


class StorageKind(str, Enum):
    PERSISTED = "persisted"
    LOCAL = "local"
