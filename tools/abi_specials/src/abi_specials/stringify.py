from __future__ import annotations

from .model import FunctionDescriptor, TypeContext, TypePolicy
from .vocabulary import RENAMED_FORMAT_NAME, RESERVED_FORMAT_NAME


def rename_reserved(func: FunctionDescriptor) -> bool:
    if func.name != RESERVED_FORMAT_NAME:
        return False
    func.name = RENAMED_FORMAT_NAME
    return True


def is_stringify(func: FunctionDescriptor, type_context: TypeContext, policy: TypePolicy) -> bool:
    """Return True for functions that take only the instance and return a string.

    Side effects: ``to_string`` is renamed to ``to_str`` once the signature
    matches, and its return may be forced non-nullable. Both persist even if
    the function is rejected afterwards.
    """
    if len(func.parameters) != 1:
        return False
    if not func.parameters[0].instance:
        return False

    ret = func.ret
    if ret is None or not ret.is_string:
        return False

    if rename_reserved(func):
        # Enumerations and bitfields are annotated correctly upstream; other
        # types keep the historical non-null behaviour for to_string only.
        if not policy.trust_return_value_nullability and not type_context.kind.is_enum_like:
            ret.nullable = False

    # A nullable result cannot back a non-optional formatting implementation.
    return not ret.nullable
