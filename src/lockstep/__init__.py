"""Optimistic-locking version generation for persisted records."""

from __future__ import annotations

from lockstep.core.config import (
    VersioningConfig,
    bind_fields,
    load_versioning_config,
    resolve_kind,
    setup_versioning,
)
from lockstep.core.errors import MappingError, UnsupportedVersionType
from lockstep.core.generator import GenerateStrategy, VersionGenerator, bind
from lockstep.core.kinds import ScalarKind
from lockstep.core.logging import configure_logging
from lockstep.core.sequences import SequenceRegistry, lookup, supported_kinds

__all__ = [
    "GenerateStrategy",
    "MappingError",
    "ScalarKind",
    "SequenceRegistry",
    "UnsupportedVersionType",
    "VersionGenerator",
    "VersioningConfig",
    "bind",
    "bind_fields",
    "configure_logging",
    "load_versioning_config",
    "lookup",
    "resolve_kind",
    "setup_versioning",
    "supported_kinds",
]
