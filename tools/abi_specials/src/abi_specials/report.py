from __future__ import annotations

from typing import Any

from . import __version__
from .imports import Imports
from .model import FunctionDescriptor, TypeContext, Version
from .registry import Registry

TOOL_NAME = "abi_specials"
TOOL_VERSION = __version__


def _version_text(version: Version | None) -> str | None:
    return str(version) if version is not None else None


def build_type_report(
    type_context: TypeContext,
    functions: list[FunctionDescriptor],
    registry: Registry,
    imports: Imports,
) -> dict[str, Any]:
    return {
        "name": type_context.name,
        "kind": type_context.kind.value,
        "traits": {
            kind.value: {"c_name": info.c_name, "version": _version_text(info.version)}
            for kind, info in registry.trait_items()
        },
        "functions": {
            c_name: {"kind": info.kind.value, "version": _version_text(info.version)}
            for c_name, info in registry.function_items()
        },
        "imports": imports.as_dict(),
        "visibility": [
            {"name": func.name, "c_name": func.c_name, "visibility": func.visibility.value}
            for func in functions
        ],
    }


def build_report(type_reports: list[dict[str, Any]]) -> dict[str, Any]:
    return {
        "tool": {"name": TOOL_NAME, "version": TOOL_VERSION},
        "type_count": len(type_reports),
        "types": type_reports,
    }
