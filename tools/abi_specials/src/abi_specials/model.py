from __future__ import annotations

import enum
import re
from dataclasses import dataclass, field


class SpecialsError(Exception):
    pass


_VERSION_RE = re.compile(r"^(?P<major>[0-9]+)(?:\.(?P<minor>[0-9]+))?(?:\.(?P<patch>[0-9]+))?$")


@dataclass(frozen=True, order=True)
class Version:
    major: int
    minor: int = 0
    patch: int = 0

    @classmethod
    def parse(cls, text: str) -> "Version":
        match = _VERSION_RE.match(text.strip())
        if not match:
            raise SpecialsError(f"Invalid version string '{text}', expected MAJOR[.MINOR[.PATCH]]")
        return cls(
            major=int(match.group("major")),
            minor=int(match.group("minor") or 0),
            patch=int(match.group("patch") or 0),
        )

    def __str__(self) -> str:
        return f"{self.major}.{self.minor}.{self.patch}"


class Visibility(enum.Enum):
    PUBLIC = "public"
    PRIVATE = "private"
    HIDDEN = "hidden"
    # Emitted as a commented-out stub only; never touched by classification.
    SUPPRESSED = "suppressed"


class Transfer(enum.Enum):
    NONE = "none"
    FULL = "full"
    CONTAINER = "container"


class TypeKind(enum.Enum):
    ENUMERATION = "enumeration"
    BITFIELD = "bitfield"
    OTHER = "other"

    @property
    def is_enum_like(self) -> bool:
        return self in (TypeKind.ENUMERATION, TypeKind.BITFIELD)


STRING_TYPES = frozenset({"utf8"})


@dataclass
class Parameter:
    name: str
    type_name: str = ""
    instance: bool = False


@dataclass
class ReturnValue:
    type_name: str
    nullable: bool = False
    transfer: Transfer = Transfer.NONE

    @property
    def is_string(self) -> bool:
        return self.type_name in STRING_TYPES


@dataclass
class FunctionDescriptor:
    """One exported function of a library type, as seen by the emitter.

    ``name`` is the short method-style name (``copy``, ``to_string``) and may be
    rewritten during classification. ``c_name`` is the exported symbol and is
    the key every registry entry refers back to.
    """

    name: str
    c_name: str
    parameters: list[Parameter] = field(default_factory=list)
    ret: ReturnValue | None = None
    visibility: Visibility = Visibility.PUBLIC
    version: Version | None = None
    generate: bool = True

    @property
    def suppressed(self) -> bool:
        return self.visibility is Visibility.SUPPRESSED


@dataclass(frozen=True)
class TypeContext:
    name: str
    kind: TypeKind = TypeKind.OTHER


@dataclass(frozen=True)
class TypePolicy:
    trust_return_value_nullability: bool = False
    generate_display_trait: bool = True
