"""Config loading for declared version fields."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TextIO

import yaml
from pydantic import BaseModel, Field

from lockstep.core.errors import UnsupportedVersionType
from lockstep.core.generator import VersionGenerator
from lockstep.core.kinds import ScalarKind
from lockstep.core.logging import configure_logging
from lockstep.core.sequences import DEFAULT_REGISTRY, SequenceRegistry

logger = logging.getLogger(__name__)


class VersioningConfig(BaseModel):
    """Version fields by name, plus logging options."""

    log_level: str = "INFO"
    json_logs: bool = False
    fields: dict[str, str] = Field(default_factory=dict)


def load_versioning_config(path: Path) -> VersioningConfig:
    """Load a YAML versioning config.

    Returns the defaults if the file doesn't exist or doesn't hold a mapping.
    """
    if not path.exists():
        logger.debug("No versioning config found at %s; using defaults", path)
        return VersioningConfig()

    logger.info("Loading versioning config from %s", path)
    with path.open() as f:
        data = yaml.safe_load(f)

    if not isinstance(data, dict):
        logger.warning("%s did not contain a mapping; using defaults", path.name)
        return VersioningConfig()

    valid_fields = VersioningConfig.model_fields
    filtered = {k: v for k, v in data.items() if k in valid_fields}

    if dropped := set(data) - set(filtered):
        logger.warning("Ignoring unknown versioning config keys: %s", sorted(dropped))

    return VersioningConfig(**filtered)


def resolve_kind(name: str, registry: SequenceRegistry | None = None) -> ScalarKind:
    """Map a kind name such as ``"int32"`` to its registered ScalarKind."""
    if registry is None:
        registry = DEFAULT_REGISTRY
    try:
        kind = ScalarKind(name)
    except ValueError:
        raise UnsupportedVersionType(name, registry.kinds()) from None
    registry.get(kind)
    return kind


def bind_fields(
    config: VersioningConfig, registry: SequenceRegistry | None = None,
) -> dict[str, VersionGenerator]:
    """Bind a generator to every declared field.

    Raises:
        UnsupportedVersionType: On the first field whose kind is unsupported.
    """
    generators: dict[str, VersionGenerator] = {}
    for field_name, kind_name in config.fields.items():
        kind = resolve_kind(kind_name, registry)
        generators[field_name] = VersionGenerator(kind.python_type, registry)
    logger.info("Bound %d version field(s): %s", len(generators), sorted(generators))
    return generators


def setup_versioning(
    path: Path,
    registry: SequenceRegistry | None = None,
    stream: TextIO | None = None,
) -> dict[str, VersionGenerator]:
    """Load *path*, configure logging from it and bind its version fields."""
    config = load_versioning_config(path)
    configure_logging(json_output=config.json_logs, level=config.log_level, stream=stream)
    return bind_fields(config, registry)
