from __future__ import annotations

import sys
import unittest
from pathlib import Path

SRC_ROOT = Path(__file__).resolve().parents[1] / "src"
if str(SRC_ROOT) not in sys.path:
    sys.path.insert(0, str(SRC_ROOT))

from abi_specials.config import parse_config
from abi_specials.descriptors import function_from_dict, load_types
from abi_specials.model import SpecialsError, Transfer, TypeKind, Version, Visibility


class DescriptorTests(unittest.TestCase):
    def test_loads_types_with_defaults(self) -> None:
        payload = {
            "types": [
                {
                    "name": "DemoMode",
                    "kind": "enumeration",
                    "functions": [
                        {
                            "name": "to_string",
                            "c_name": "demo_mode_to_string",
                            "parameters": [{"name": "mode", "type": "DemoMode", "instance": True}],
                            "return": {"type": "utf8", "transfer": "none"},
                            "version": "1.2",
                        },
                        {"name": "get_type", "c_name": "demo_mode_get_type"},
                    ],
                }
            ]
        }
        entries = load_types(payload)
        self.assertEqual(len(entries), 1)
        entry = entries[0]
        self.assertEqual(entry.context.kind, TypeKind.ENUMERATION)

        to_string, get_type = entry.functions
        self.assertTrue(to_string.parameters[0].instance)
        self.assertEqual(to_string.ret.transfer, Transfer.NONE)
        self.assertFalse(to_string.ret.nullable)
        self.assertEqual(to_string.version, Version(1, 2, 0))
        self.assertIsNone(get_type.ret)
        self.assertEqual(get_type.visibility, Visibility.PUBLIC)
        self.assertTrue(get_type.generate)

    def test_config_filters_versions(self) -> None:
        config = parse_config({"options": {"min_cfg_version": "1.4"}})
        func = function_from_dict(
            {"name": "copy", "c_name": "demo_copy", "version": "1.2"},
            "types[0].functions[0]",
            config,
        )
        self.assertIsNone(func.version)

    def test_reports_index_path_on_bad_enum(self) -> None:
        payload = {
            "types": [
                {
                    "name": "DemoThing",
                    "functions": [{"name": "copy", "c_name": "demo_copy", "visibility": "secret"}],
                }
            ]
        }
        with self.assertRaises(SpecialsError) as ctx:
            load_types(payload)
        self.assertIn("types[0].functions[0].visibility", str(ctx.exception))

    def test_requires_types_array(self) -> None:
        with self.assertRaises(SpecialsError):
            load_types({"types": {}})

    def test_requires_c_name(self) -> None:
        with self.assertRaises(SpecialsError) as ctx:
            function_from_dict({"name": "copy"}, "fn")
        self.assertIn("fn.c_name", str(ctx.exception))


if __name__ == "__main__":
    unittest.main()
