"""Errors raised while binding version fields."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any


class MappingError(RuntimeError):
    """A field cannot be mapped onto a version sequence."""


class UnsupportedVersionType(MappingError):
    """The requested type matches none of the registered scalar kinds."""

    def __init__(self, target_type: Any, supported: Sequence[str]) -> None:
        self.target_type = target_type
        self.supported = tuple(supported)
        super().__init__(
            f"type [{describe_type(target_type)}] is not supported; "
            f"allowed only [{', '.join(self.supported)}]"
        )


def describe_type(target_type: Any) -> str:
    """Human-readable name for a type descriptor, e.g. ``numpy.int8``."""
    if isinstance(target_type, type):
        module = target_type.__module__
        if module == "builtins":
            return target_type.__qualname__
        return f"{module.split('.')[0]}.{target_type.__qualname__}"
    return repr(target_type)
