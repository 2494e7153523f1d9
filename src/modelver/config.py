"""Target model versions, loaded once at startup.

Environment Variables:
    MODEL_VERSION        - Target version for persisted objects
                           (default: ``schemas.versions.MODEL_VERSION``)
    MODEL_VERSION_LOCAL  - Target version for local-only objects
                           (default: same as MODEL_VERSION)
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping

from dotenv import load_dotenv

from .schemas import versions
from .types import StorageKind
from .version import Version, VersionParseError, parse_version

logger = logging.getLogger(__name__)


def _parse_target(version_string: str) -> Version:
    version = parse_version(version_string)
    if version.is_unknown:
        raise VersionParseError(f"Target model version must name a major version: {version_string!r}")
    return version


@dataclass(frozen=True)
class VersionConfig:
    """Current target versions for persisted and local objects.

    Both targets start out equal but are separate instances, so the local
    schema can lag or lead the persisted one in a later revision.
    """

    version_string: str
    latest_persisted: Version
    latest_local: Version

    @classmethod
    def from_string(cls, version_string: str, local_version_string: str | None = None) -> "VersionConfig":
        """Build a config, failing fast on an invalid target version."""
        return cls(
            version_string=version_string,
            latest_persisted=_parse_target(version_string),
            latest_local=_parse_target(local_version_string or version_string),
        )

    def latest(self, kind: StorageKind = StorageKind.PERSISTED) -> Version:
        if kind == StorageKind.LOCAL:
            return self.latest_local
        return self.latest_persisted

    def is_outdated(self, obj: Mapping[str, Any], kind: StorageKind = StorageKind.PERSISTED) -> bool:
        """Return True if ``obj`` was written before the current target."""
        return parse_version(obj.get(versions.MODEL_VERSION_FIELD)) < self.latest(kind)


def load_config(env_file: str | Path | None = None) -> VersionConfig:
    """Load target versions from the environment (and an optional .env file)."""
    if env_file is not None:
        load_dotenv(env_file)
    else:
        load_dotenv()
    version_string = os.getenv("MODEL_VERSION") or versions.MODEL_VERSION
    local_string = os.getenv("MODEL_VERSION_LOCAL")
    config = VersionConfig.from_string(version_string, local_string)
    logger.info(
        "Model version targets: persisted=%s local=%s",
        config.latest_persisted,
        config.latest_local,
    )
    return config
