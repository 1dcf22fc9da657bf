from __future__ import annotations

from dataclasses import dataclass

from .model import FunctionDescriptor, Transfer, TypeContext, TypePolicy, Visibility
from .registry import Registry, StringifyKind
from .stringify import is_stringify
from .vocabulary import (
    DESTROY_FALLBACK_NAME,
    FORMAT_CANDIDATE_NAMES,
    OperationKind,
    parse_operation_kind,
    visibility_for,
)


@dataclass(frozen=True)
class DeferredDestroy:
    c_name: str
    position: int


def _apply_visibility(func: FunctionDescriptor, kind: OperationKind) -> None:
    if not func.suppressed:
        func.visibility = visibility_for(kind)


def _returns_static_string(func: FunctionDescriptor, type_context: TypeContext) -> bool:
    ret = func.ret
    if ret is None or ret.transfer is not Transfer.NONE:
        return False
    # Only enumerations and bitfields are assumed to hand out static strings,
    # and a borrowed lifetime can only be promised for generated functions.
    return type_context.kind.is_enum_like and func.generate


def extract(
    functions: list[FunctionDescriptor],
    type_context: TypeContext,
    policy: TypePolicy,
) -> Registry:
    """Classify the special operations of one type.

    ``functions`` is mutated in place: ``to_string`` may be renamed, return
    nullability may be overridden and visibility follows the operation kind.
    A function literally named ``destroy`` is held back and only registered
    when ``copy`` was found and no other destroying function was.
    """
    registry = Registry()
    has_clone = False
    has_destroy = False
    deferred: DeferredDestroy | None = None

    for position, func in enumerate(functions):
        # is_stringify performs the to_string rename; nothing below may read
        # func.name before it has run.
        if is_stringify(func, type_context, policy):
            if _returns_static_string(func, type_context):
                registry.set_function(func.c_name, StringifyKind.STATIC_STRINGIFY, func.version)

            # TODO: pick a preferred Format source when several candidates exist.
            if func.name in FORMAT_CANDIDATE_NAMES:
                registry.set_trait(OperationKind.FORMAT, func.c_name, func.version)
            continue

        kind = parse_operation_kind(func.name)
        if kind is None:
            continue

        if kind is OperationKind.DESTROY and func.name == DESTROY_FALLBACK_NAME:
            deferred = DeferredDestroy(c_name=func.c_name, position=position)
            continue

        _apply_visibility(func, kind)
        if kind is OperationKind.CLONE:
            has_clone = True
        elif kind is OperationKind.DESTROY:
            has_destroy = True
        registry.set_trait(kind, func.c_name, func.version)

    if has_clone and not has_destroy and deferred is not None:
        func = functions[deferred.position]
        _apply_visibility(func, OperationKind.DESTROY)
        registry.set_trait(OperationKind.DESTROY, deferred.c_name, func.version)

    return registry


def unhide(functions: list[FunctionDescriptor], registry: Registry, kind: OperationKind) -> bool:
    """Re-expose the function backing ``kind``, e.g. ``copy`` on refcounted types."""
    info = registry.get_trait(kind)
    if info is None:
        return False
    for func in functions:
        if func.c_name == info.c_name and not func.suppressed:
            func.visibility = Visibility.PUBLIC
            return True
    return False


def apply_type_policy(registry: Registry, policy: TypePolicy) -> Registry:
    if not policy.generate_display_trait:
        registry.remove_trait(OperationKind.FORMAT)
    return registry


def is_refcounted(registry: Registry) -> bool:
    return registry.has_trait(OperationKind.REF_INCREMENT) and registry.has_trait(OperationKind.REF_DECREMENT)


def unhide_refcounted_copy(functions: list[FunctionDescriptor], registry: Registry) -> bool:
    # Clone only adds a reference on shared types; copy still duplicates, so keep it callable.
    if not is_refcounted(registry):
        return False
    return unhide(functions, registry, OperationKind.CLONE)
