__version__ = "1.0.0"

from .classifier import apply_type_policy, extract, is_refcounted, unhide, unhide_refcounted_copy
from .config import SpecialsConfig, load_config, parse_config
from .imports import Imports, analyze_imports
from .model import (
    FunctionDescriptor,
    Parameter,
    ReturnValue,
    SpecialsError,
    Transfer,
    TypeContext,
    TypeKind,
    TypePolicy,
    Version,
    Visibility,
)
from .registry import FunctionInfo, Registry, StringifyKind, TraitInfo
from .stringify import is_stringify
from .vocabulary import OperationKind, parse_operation_kind

__all__ = [
    "FunctionDescriptor",
    "FunctionInfo",
    "Imports",
    "OperationKind",
    "Parameter",
    "Registry",
    "ReturnValue",
    "SpecialsConfig",
    "SpecialsError",
    "StringifyKind",
    "TraitInfo",
    "Transfer",
    "TypeContext",
    "TypeKind",
    "TypePolicy",
    "Version",
    "Visibility",
    "analyze_imports",
    "apply_type_policy",
    "extract",
    "is_refcounted",
    "is_stringify",
    "load_config",
    "parse_config",
    "parse_operation_kind",
    "unhide",
    "unhide_refcounted_copy",
]
