"""Version generator bound to a field's declared numeric type."""

from __future__ import annotations

import logging
from enum import StrEnum
from typing import Any, Generic, TypeVar

from lockstep.core.errors import describe_type
from lockstep.core.kinds import ScalarKind
from lockstep.core.sequences import DEFAULT_REGISTRY, Sequence, SequenceRegistry

logger = logging.getLogger(__name__)

T = TypeVar("T")


class GenerateStrategy(StrEnum):
    """When an auto-generated attribute receives a new value."""

    always = "always"  # on every write
    create = "create"  # only when the current value is absent


class VersionGenerator(Generic[T]):
    """Produces the version value to persist on each write.

    The sequence is resolved once, at construction, so an unsupported type
    fails when the field is bound rather than on its first write.
    """

    def __init__(self, target_type: Any, registry: SequenceRegistry | None = None) -> None:
        self._target_type = target_type
        if registry is None:
            registry = DEFAULT_REGISTRY
        self._sequence: Sequence = registry.lookup(target_type)
        logger.debug(
            "Bound version generator for %s to kind %s",
            describe_type(target_type),
            self._sequence.kind,
        )

    @property
    def target_type(self) -> Any:
        return self._target_type

    @property
    def kind(self) -> ScalarKind:
        return self._sequence.kind

    @property
    def strategy(self) -> GenerateStrategy:
        return GenerateStrategy.always

    def generate(self, current_value: T | None) -> T:
        """Return the first version for a new record, else the successor."""
        if current_value is None:
            return self._sequence.init()
        return self._sequence.next(current_value)

    def __repr__(self) -> str:
        return f"VersionGenerator({describe_type(self._target_type)}, kind={self.kind})"


def bind(target_type: Any, registry: SequenceRegistry | None = None) -> VersionGenerator:
    """Bind a version generator to *target_type*.

    Raises:
        UnsupportedVersionType: If *target_type* is not a supported kind.
    """
    return VersionGenerator(target_type, registry)
