from __future__ import annotations

from .model import Version
from .registry import Registry, StringifyKind
from .vocabulary import OperationKind

ORDERING_SUPPORT = "std::cmp"
FORMATTING_SUPPORT = "std::fmt"
HASHING_SUPPORT = "std::hash"
STATIC_STRING_REF = "std::ffi::CStr"

TRAIT_DECLARATIONS: dict[OperationKind, str] = {
    OperationKind.COMPARE: ORDERING_SUPPORT,
    OperationKind.FORMAT: FORMATTING_SUPPORT,
    OperationKind.HASH: HASHING_SUPPORT,
}

FUNCTION_DECLARATIONS: dict[StringifyKind, str] = {
    StringifyKind.STATIC_STRINGIFY: STATIC_STRING_REF,
}


def _less_restrictive(current: Version | None, candidate: Version | None) -> Version | None:
    if current is None or candidate is None:
        return None
    return min(current, candidate)


class Imports:
    """External declarations required by emitted code, each gated at a version.

    A gate of ``None`` means the declaration is unconditional. When the same
    declaration is requested more than once the least restrictive gate wins.
    """

    def __init__(self) -> None:
        self._entries: dict[str, Version | None] = {}

    def add(self, name: str) -> None:
        self._entries[name] = None

    def add_with_version(self, name: str, version: Version | None) -> None:
        if name in self._entries:
            self._entries[name] = _less_restrictive(self._entries[name], version)
        else:
            self._entries[name] = version

    def get(self, name: str) -> Version | None:
        return self._entries[name]

    def __contains__(self, name: object) -> bool:
        return name in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def items(self) -> list[tuple[str, Version | None]]:
        return [(name, self._entries[name]) for name in sorted(self._entries)]

    def as_dict(self) -> dict[str, str | None]:
        return {name: (str(version) if version is not None else None) for name, version in self.items()}


def analyze_imports(registry: Registry, imports: Imports | None = None) -> Imports:
    if imports is None:
        imports = Imports()
    for kind, info in registry.trait_items():
        declaration = TRAIT_DECLARATIONS.get(kind)
        if declaration is not None:
            imports.add_with_version(declaration, info.version)
    for _name, info in registry.function_items():
        imports.add_with_version(FUNCTION_DECLARATIONS[info.kind], info.version)
    return imports
