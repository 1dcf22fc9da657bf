from __future__ import annotations

import sys
import unittest
from pathlib import Path

SRC_ROOT = Path(__file__).resolve().parents[1] / "src"
if str(SRC_ROOT) not in sys.path:
    sys.path.insert(0, str(SRC_ROOT))

from abi_specials.model import Visibility
from abi_specials.vocabulary import (
    OperationKind,
    parse_operation_kind,
    parse_operation_kind_label,
    visibility_for,
)


class VocabularyTests(unittest.TestCase):
    def test_parses_known_names(self) -> None:
        expected = {
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
        actual = {name: parse_operation_kind(name) for name in expected}
        self.assertEqual(actual, expected)

    def test_unknown_names_are_not_errors(self) -> None:
        for name in ["", "Copy", "ref_sink", "to_string", "clone", "dup"]:
            self.assertIsNone(parse_operation_kind(name), name)

    def test_every_kind_has_a_visibility(self) -> None:
        self.assertEqual(visibility_for(OperationKind.FORMAT), Visibility.PUBLIC)
        self.assertEqual(visibility_for(OperationKind.HASH), Visibility.PRIVATE)
        self.assertEqual(visibility_for(OperationKind.REF_DECREMENT), Visibility.HIDDEN)
        for kind in OperationKind:
            self.assertIsInstance(visibility_for(kind), Visibility)

    def test_kind_labels_for_cli(self) -> None:
        self.assertEqual(parse_operation_kind_label("CLONE"), OperationKind.CLONE)
        self.assertEqual(parse_operation_kind_label("ref-increment"), OperationKind.REF_INCREMENT)
        with self.assertRaises(ValueError):
            parse_operation_kind_label("copy")


if __name__ == "__main__":
    unittest.main()
