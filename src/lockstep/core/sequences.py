"""Version sequences and the registry that selects one per scalar kind.

A sequence is a pair of pure operations: ``init()`` yields the first version
of a new record and ``next(current)`` yields the successor of *current*.
Sequences hold no state, so one instance per kind serves every field.
"""

from __future__ import annotations

import logging
import operator
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Protocol

from lockstep.core.errors import UnsupportedVersionType
from lockstep.core.kinds import INT8_MAX, ScalarKind

logger = logging.getLogger(__name__)


class Sequence(Protocol):
    """Generation rule for the values of one scalar kind."""

    @property
    def kind(self) -> ScalarKind: ...

    def init(self) -> Any:
        """Return the first value of the sequence."""
        ...

    def next(self, current: Any) -> Any:
        """Return the value following *current*."""
        ...


@dataclass(frozen=True)
class BigIntegerSequence:
    """Unbounded ``current + 1`` over Python ints."""

    kind: ScalarKind = ScalarKind.big_integer

    def init(self) -> int:
        return 1

    def next(self, current: Any) -> int:
        return operator.index(current) + 1


@dataclass(frozen=True)
class ByteSequence:
    """int8 sequence that wraps modulo 127, the type's maximum value.

    The remainder is truncated (its sign follows the dividend), so 126 is
    followed by 0 and 127 by 1. Stored versions depend on this, so the
    modulus stays at 127 rather than the full 8-bit range.
    """

    kind: ScalarKind = ScalarKind.int8

    def init(self) -> Any:
        return self.kind.narrow(1)

    def next(self, current: Any) -> Any:
        return self.kind.narrow(_truncated_rem(operator.index(current) + 1, INT8_MAX))


@dataclass(frozen=True)
class FixedWidthSequence:
    """``current + 1`` wrapped to the kind's width on overflow."""

    kind: ScalarKind

    def init(self) -> Any:
        return self.kind.narrow(1)

    def next(self, current: Any) -> Any:
        return self.kind.narrow(operator.index(current) + 1)


def _truncated_rem(dividend: int, divisor: int) -> int:
    rem = abs(dividend) % divisor
    return rem if dividend >= 0 else -rem


class SequenceRegistry:
    """Ordered, read-only set of sequences with at most one per kind."""

    def __init__(self, sequences: Iterable[Sequence]) -> None:
        self._sequences: dict[ScalarKind, Sequence] = {}
        for sequence in sequences:
            if sequence.kind in self._sequences:
                raise ValueError(f"Duplicate sequence for kind '{sequence.kind}'")
            self._sequences[sequence.kind] = sequence

    def __iter__(self) -> Iterator[Sequence]:
        return iter(self._sequences.values())

    def __len__(self) -> int:
        return len(self._sequences)

    def kinds(self) -> tuple[ScalarKind, ...]:
        """Registered kinds in declaration order."""
        return tuple(self._sequences)

    def get(self, kind: ScalarKind) -> Sequence:
        """Return the sequence registered for *kind*.

        Raises:
            UnsupportedVersionType: If *kind* has no registered sequence.
        """
        try:
            return self._sequences[kind]
        except KeyError:
            raise UnsupportedVersionType(kind, self.kinds()) from None

    def lookup(self, target_type: Any) -> Sequence:
        """Return the first sequence whose kind matches *target_type*.

        Kinds are mutually exclusive, so declaration order only makes the
        scan deterministic.

        Raises:
            UnsupportedVersionType: If no registered kind matches.
        """
        for kind, sequence in self._sequences.items():
            if kind.matches(target_type):
                return sequence
        logger.debug("No version sequence matches %r", target_type)
        raise UnsupportedVersionType(target_type, self.kinds())


DEFAULT_REGISTRY = SequenceRegistry(
    [
        BigIntegerSequence(),
        ByteSequence(),
        FixedWidthSequence(ScalarKind.int32),
        FixedWidthSequence(ScalarKind.int64),
        FixedWidthSequence(ScalarKind.int16),
    ]
)


def lookup(target_type: Any) -> Sequence:
    """Look up *target_type* in the default registry."""
    return DEFAULT_REGISTRY.lookup(target_type)


def supported_kinds() -> tuple[ScalarKind, ...]:
    return DEFAULT_REGISTRY.kinds()
