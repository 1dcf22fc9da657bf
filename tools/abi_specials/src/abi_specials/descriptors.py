from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Any, TypeVar

from .config import SpecialsConfig
from .model import (
    FunctionDescriptor,
    Parameter,
    ReturnValue,
    SpecialsError,
    Transfer,
    TypeContext,
    TypeKind,
    Version,
    Visibility,
)

E = TypeVar("E", bound=enum.Enum)


@dataclass
class TypeEntry:
    context: TypeContext
    functions: list[FunctionDescriptor]


def _require_str(item: dict[str, Any], key: str, label: str) -> str:
    value = item.get(key)
    if not isinstance(value, str) or not value:
        raise SpecialsError(f"{label}.{key} must be a non-empty string")
    return value


def _read_enum(enum_type: type[E], value: Any, default: E, label: str) -> E:
    if value is None:
        return default
    if not isinstance(value, str):
        raise SpecialsError(f"{label} must be a string when specified")
    try:
        return enum_type(value.strip().lower())
    except ValueError as exc:
        known = "/".join(member.value for member in enum_type)
        raise SpecialsError(f"{label} must be one of {known}, got '{value}'") from exc


def _read_flag(item: dict[str, Any], key: str, label: str, default: bool) -> bool:
    value = item.get(key, default)
    if not isinstance(value, bool):
        raise SpecialsError(f"{label}.{key} must be boolean when specified")
    return value


def parameter_from_dict(item: Any, label: str) -> Parameter:
    if not isinstance(item, dict):
        raise SpecialsError(f"{label} must be an object")
    type_name = item.get("type", "")
    if not isinstance(type_name, str):
        raise SpecialsError(f"{label}.type must be a string when specified")
    return Parameter(
        name=_require_str(item, "name", label),
        type_name=type_name,
        instance=_read_flag(item, "instance", label, False),
    )


def return_from_dict(item: Any, label: str) -> ReturnValue | None:
    if item is None:
        return None
    if not isinstance(item, dict):
        raise SpecialsError(f"{label} must be an object or null")
    return ReturnValue(
        type_name=_require_str(item, "type", label),
        nullable=_read_flag(item, "nullable", label, False),
        transfer=_read_enum(Transfer, item.get("transfer"), Transfer.NONE, f"{label}.transfer"),
    )


def function_from_dict(item: Any, label: str, config: SpecialsConfig | None = None) -> FunctionDescriptor:
    if not isinstance(item, dict):
        raise SpecialsError(f"{label} must be an object")

    raw_parameters = item.get("parameters", [])
    if not isinstance(raw_parameters, list):
        raise SpecialsError(f"{label}.parameters must be an array when specified")
    parameters = [
        parameter_from_dict(param, f"{label}.parameters[{idx}]") for idx, param in enumerate(raw_parameters)
    ]

    version = None
    raw_version = item.get("version")
    if raw_version is not None:
        if not isinstance(raw_version, str):
            raise SpecialsError(f"{label}.version must be a version string when specified")
        version = Version.parse(raw_version)
    if config is not None:
        version = config.filter_version(version)

    return FunctionDescriptor(
        name=_require_str(item, "name", label),
        c_name=_require_str(item, "c_name", label),
        parameters=parameters,
        ret=return_from_dict(item.get("return"), f"{label}.return"),
        visibility=_read_enum(Visibility, item.get("visibility"), Visibility.PUBLIC, f"{label}.visibility"),
        version=version,
        generate=_read_flag(item, "generate", label, True),
    )


def type_from_dict(item: Any, label: str, config: SpecialsConfig | None = None) -> TypeEntry:
    if not isinstance(item, dict):
        raise SpecialsError(f"{label} must be an object")
    name = _require_str(item, "name", label)
    kind = _read_enum(TypeKind, item.get("kind"), TypeKind.OTHER, f"{label}.kind")

    raw_functions = item.get("functions", [])
    if not isinstance(raw_functions, list):
        raise SpecialsError(f"{label}.functions must be an array when specified")
    functions = [
        function_from_dict(func, f"{label}.functions[{idx}]", config) for idx, func in enumerate(raw_functions)
    ]
    return TypeEntry(context=TypeContext(name=name, kind=kind), functions=functions)


def load_types(payload: dict[str, Any], config: SpecialsConfig | None = None) -> list[TypeEntry]:
    types = payload.get("types")
    if not isinstance(types, list):
        raise SpecialsError("Descriptor payload is missing required array: 'types'.")
    return [type_from_dict(item, f"types[{idx}]", config) for idx, item in enumerate(types)]
