from __future__ import annotations

import sys
import unittest
from pathlib import Path

SRC_ROOT = Path(__file__).resolve().parents[1] / "src"
if str(SRC_ROOT) not in sys.path:
    sys.path.insert(0, str(SRC_ROOT))

from abi_specials.model import (
    FunctionDescriptor,
    Parameter,
    ReturnValue,
    TypeContext,
    TypeKind,
    TypePolicy,
)
from abi_specials.stringify import is_stringify

OTHER = TypeContext(name="DemoThing", kind=TypeKind.OTHER)
FLAGS = TypeContext(name="DemoFlags", kind=TypeKind.BITFIELD)


def make_func(name: str, parameters: list[Parameter], ret: ReturnValue | None) -> FunctionDescriptor:
    return FunctionDescriptor(name=name, c_name=f"demo_{name}", parameters=parameters, ret=ret)


def instance() -> Parameter:
    return Parameter(name="self", type_name="DemoThing*", instance=True)


class IsStringifyTests(unittest.TestCase):
    def test_accepts_instance_only_string_getter(self) -> None:
        func = make_func("get_label", [instance()], ReturnValue(type_name="utf8"))
        self.assertTrue(is_stringify(func, OTHER, TypePolicy()))
        self.assertEqual(func.name, "get_label")

    def test_rejects_extra_parameters(self) -> None:
        params = [instance(), Parameter(name="indent", type_name="int")]
        func = make_func("to_string", params, ReturnValue(type_name="utf8", nullable=True))
        self.assertFalse(is_stringify(func, OTHER, TypePolicy()))
        self.assertEqual(func.name, "to_string")
        self.assertTrue(func.ret.nullable)

    def test_rejects_non_instance_parameter(self) -> None:
        func = make_func("name", [Parameter(name="value", type_name="int")], ReturnValue(type_name="utf8"))
        self.assertFalse(is_stringify(func, OTHER, TypePolicy()))

    def test_rejects_missing_return(self) -> None:
        func = make_func("to_string", [instance()], None)
        self.assertFalse(is_stringify(func, OTHER, TypePolicy()))
        self.assertEqual(func.name, "to_string")

    def test_rejects_non_string_return(self) -> None:
        func = make_func("to_string", [instance()], ReturnValue(type_name="gint"))
        self.assertFalse(is_stringify(func, OTHER, TypePolicy()))
        self.assertEqual(func.name, "to_string")

    def test_rename_persists_when_rejected(self) -> None:
        func = make_func("to_string", [instance()], ReturnValue(type_name="utf8", nullable=True))
        self.assertFalse(is_stringify(func, FLAGS, TypePolicy()))
        self.assertEqual(func.name, "to_str")
        self.assertTrue(func.ret.nullable)

    def test_nullable_override_only_applies_to_to_string(self) -> None:
        func = make_func("get_name", [instance()], ReturnValue(type_name="utf8", nullable=True))
        self.assertFalse(is_stringify(func, OTHER, TypePolicy()))
        self.assertTrue(func.ret.nullable)

    def test_non_null_enum_to_string_accepted(self) -> None:
        func = make_func("to_string", [instance()], ReturnValue(type_name="utf8"))
        self.assertTrue(is_stringify(func, FLAGS, TypePolicy(trust_return_value_nullability=True)))
        self.assertEqual(func.name, "to_str")


if __name__ == "__main__":
    unittest.main()
