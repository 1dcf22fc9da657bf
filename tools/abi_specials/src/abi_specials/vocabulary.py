from __future__ import annotations

import enum

from .model import Visibility


class OperationKind(enum.Enum):
    # Declaration order is the registry iteration order.
    COMPARE = "compare"
    CLONE = "clone"
    EQUAL = "equal"
    DESTROY = "destroy"
    REF_INCREMENT = "ref_increment"
    FORMAT = "format"
    REF_DECREMENT = "ref_decrement"
    HASH = "hash"


OPERATION_NAMES: dict[str, OperationKind] = {
    "compare": OperationKind.COMPARE,
    "copy": OperationKind.CLONE,
    "equal": OperationKind.EQUAL,
    "is_equal": OperationKind.EQUAL,
    "free": OperationKind.DESTROY,
    "destroy": OperationKind.DESTROY,
    "ref": OperationKind.REF_INCREMENT,
    "ref_": OperationKind.REF_INCREMENT,
    "unref": OperationKind.REF_DECREMENT,
    "hash": OperationKind.HASH,
}

# Destroy-kind functions with this name only register as a fallback after the pass.
DESTROY_FALLBACK_NAME = "destroy"

# Reserved by the target's owned-string formatting contract.
RESERVED_FORMAT_NAME = "to_string"
RENAMED_FORMAT_NAME = "to_str"

FORMAT_CANDIDATE_NAMES = frozenset({"to_string", "to_str", "name", "get_name"})

VISIBILITY_POLICY: dict[OperationKind, Visibility] = {
    OperationKind.CLONE: Visibility.HIDDEN,
    OperationKind.DESTROY: Visibility.HIDDEN,
    OperationKind.REF_INCREMENT: Visibility.HIDDEN,
    OperationKind.REF_DECREMENT: Visibility.HIDDEN,
    OperationKind.HASH: Visibility.PRIVATE,
    OperationKind.COMPARE: Visibility.PRIVATE,
    OperationKind.EQUAL: Visibility.PRIVATE,
    OperationKind.FORMAT: Visibility.PUBLIC,
}


def parse_operation_kind(name: str) -> OperationKind | None:
    """Map a short function name onto an operation kind. Matching is case-exact."""
    return OPERATION_NAMES.get(name)


def parse_operation_kind_label(label: str) -> OperationKind:
    """Resolve a user-facing kind label (``clone`` or ``CLONE``) for the CLI."""
    text = label.strip().lower().replace("-", "_")
    for kind in OperationKind:
        if kind.value == text:
            return kind
    known = ", ".join(kind.value for kind in OperationKind)
    raise ValueError(f"Unknown operation kind '{label}'. Known kinds: {known}")


def visibility_for(kind: OperationKind) -> Visibility:
    return VISIBILITY_POLICY[kind]
