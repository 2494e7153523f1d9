"""
modelver - Versioned Model Migrations
=====================================

Tags persisted model objects with a semantic version and upgrades older
objects on load through ordered chains of converter functions.

Core Components:
    Version / parse_version: Compact JSON version strings
    VersionConfig: Target versions for persisted and local objects
    convert_one / convert_many: Version-driven conversion pipeline
    ConverterRegistry: Resolver built from version thresholds

Helpers:
    new_name, set_defaults, hash_code, generate_id, get_as_object

Example:
    >>> from modelver import ConverterRegistry, convert_many, load_config
    >>>
    >>> config = load_config()
    >>> registry = ConverterRegistry()
    >>> migrated = convert_many(objects, registry.converters_for)
"""

__version__ = "0.1.0"

from .config import VersionConfig, load_config
from .defaults import set_defaults
from .hashing import hash_code
from .ids import generate_id, get_as_object
from .migration import convert_many, convert_one
from .naming import new_name
from .registry import ConverterRegistry
from .types import StorageKind
from .version import UNKNOWN_VERSION, Version, VersionParseError, model_version_string, parse_version

__all__ = [
    "ConverterRegistry",
    "StorageKind",
    "UNKNOWN_VERSION",
    "Version",
    "VersionConfig",
    "VersionParseError",
    "convert_many",
    "convert_one",
    "generate_id",
    "get_as_object",
    "hash_code",
    "load_config",
    "model_version_string",
    "new_name",
    "parse_version",
    "set_defaults",
    "__version__",
]
