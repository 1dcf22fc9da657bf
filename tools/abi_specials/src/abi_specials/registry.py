from __future__ import annotations

import enum
from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType

from .model import Version
from .vocabulary import OperationKind


class StringifyKind(enum.Enum):
    # Returns a borrowed, statically valid string instead of an owned allocation.
    STATIC_STRINGIFY = "static_stringify"


@dataclass(frozen=True)
class TraitInfo:
    c_name: str
    version: Version | None = None


@dataclass(frozen=True)
class FunctionInfo:
    kind: StringifyKind
    version: Version | None = None


class Registry:
    """Special operations found on a single type.

    A later registration for the same kind replaces the earlier one without
    any diagnostic; callers rely on that last-write-wins order. ``traits`` and
    ``functions`` are read-only views kept in key order after every write:
    operation kinds in declaration order, functions sorted by symbol.
    """

    def __init__(self) -> None:
        self._traits: dict[OperationKind, TraitInfo] = {}
        self._functions: dict[str, FunctionInfo] = {}

    @property
    def traits(self) -> Mapping[OperationKind, TraitInfo]:
        return MappingProxyType(self._traits)

    @property
    def functions(self) -> Mapping[str, FunctionInfo]:
        return MappingProxyType(self._functions)

    def _reorder_traits(self) -> None:
        self._traits = {kind: self._traits[kind] for kind in OperationKind if kind in self._traits}

    def has_trait(self, kind: OperationKind) -> bool:
        return kind in self._traits

    def get_trait(self, kind: OperationKind) -> TraitInfo | None:
        return self._traits.get(kind)

    def set_trait(self, kind: OperationKind, c_name: str, version: Version | None) -> None:
        self._traits[kind] = TraitInfo(c_name=c_name, version=version)
        self._reorder_traits()

    def remove_trait(self, kind: OperationKind) -> TraitInfo | None:
        return self._traits.pop(kind, None)

    def set_function(self, c_name: str, kind: StringifyKind, version: Version | None) -> None:
        self._functions[c_name] = FunctionInfo(kind=kind, version=version)
        self._functions = {name: self._functions[name] for name in sorted(self._functions)}

    def trait_items(self) -> list[tuple[OperationKind, TraitInfo]]:
        return list(self._traits.items())

    def function_items(self) -> list[tuple[str, FunctionInfo]]:
        return list(self._functions.items())
