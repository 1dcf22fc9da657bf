from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from .common import load_json_object
from .model import SpecialsError, TypePolicy, Version

POLICY_KEYS = ("trust_return_value_nullability", "generate_display_trait")
OPTION_KEYS = POLICY_KEYS + ("min_cfg_version",)


@dataclass(frozen=True)
class SpecialsConfig:
    defaults: TypePolicy = TypePolicy()
    objects: dict[str, TypePolicy] = field(default_factory=dict)
    min_cfg_version: Version | None = None

    def policy_for(self, type_name: str) -> TypePolicy:
        return self.objects.get(type_name, self.defaults)

    def filter_version(self, version: Version | None) -> Version | None:
        # Anything already guaranteed by the minimum supported version needs no gate.
        if version is None:
            return None
        if self.min_cfg_version is not None and version <= self.min_cfg_version:
            return None
        return version


def _read_bool(raw: dict[str, Any], key: str, label: str, default: bool) -> bool:
    value = raw.get(key)
    if value is None:
        return default
    if not isinstance(value, bool):
        raise SpecialsError(f"{label}.{key} must be boolean when specified")
    return value


def _read_policy(raw: Any, label: str, base: TypePolicy) -> TypePolicy:
    if not isinstance(raw, dict):
        raise SpecialsError(f"{label} must be an object")
    unknown = sorted(key for key in raw if key not in POLICY_KEYS)
    if unknown:
        raise SpecialsError(f"{label} has unknown keys: {', '.join(unknown)}")
    return TypePolicy(
        trust_return_value_nullability=_read_bool(
            raw, "trust_return_value_nullability", label, base.trust_return_value_nullability
        ),
        generate_display_trait=_read_bool(raw, "generate_display_trait", label, base.generate_display_trait),
    )


def parse_config(payload: dict[str, Any]) -> SpecialsConfig:
    options = payload.get("options")
    if options is None:
        options = {}
    if not isinstance(options, dict):
        raise SpecialsError("options must be an object when specified")
    unknown = sorted(key for key in options if key not in OPTION_KEYS)
    if unknown:
        raise SpecialsError(f"options has unknown keys: {', '.join(unknown)}")

    min_cfg_version = None
    raw_min_version = options.get("min_cfg_version")
    if raw_min_version is not None:
        if not isinstance(raw_min_version, str) or not raw_min_version:
            raise SpecialsError("options.min_cfg_version must be a non-empty version string")
        min_cfg_version = Version.parse(raw_min_version)

    policy_options = {key: value for key, value in options.items() if key in POLICY_KEYS}
    defaults = _read_policy(policy_options, "options", TypePolicy())

    raw_objects = payload.get("objects")
    if raw_objects is None:
        raw_objects = {}
    if not isinstance(raw_objects, dict):
        raise SpecialsError("objects must be an object when specified")

    objects: dict[str, TypePolicy] = {}
    for name, item in raw_objects.items():
        if not name:
            raise SpecialsError("objects keys must be non-empty type names")
        objects[name] = _read_policy(item, f"objects.{name}", defaults)

    return SpecialsConfig(defaults=defaults, objects=objects, min_cfg_version=min_cfg_version)


def load_config(path: Path | None) -> SpecialsConfig:
    if path is None:
        return SpecialsConfig()
    return parse_config(load_json_object(path))
