from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Any

from .classifier import apply_type_policy, extract, unhide, unhide_refcounted_copy
from .common import load_json_object, render_json, write_if_changed
from .config import SpecialsConfig, load_config
from .descriptors import TypeEntry, load_types
from .imports import analyze_imports
from .model import SpecialsError
from .report import build_report, build_type_report
from .vocabulary import OPERATION_NAMES, OperationKind, parse_operation_kind_label


def _operation_kind_arg(value: str) -> OperationKind:
    try:
        return parse_operation_kind_label(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from exc


def classify_type(
    entry: TypeEntry,
    config: SpecialsConfig,
    unhide_kinds: list[OperationKind],
) -> dict[str, Any]:
    policy = config.policy_for(entry.context.name)
    registry = extract(entry.functions, entry.context, policy)
    unhide_refcounted_copy(entry.functions, registry)
    for kind in unhide_kinds:
        unhide(entry.functions, registry, kind)
    apply_type_policy(registry, policy)
    imports = analyze_imports(registry)
    return build_type_report(entry.context, entry.functions, registry, imports)


def command_classify(args: argparse.Namespace) -> int:
    config = load_config(Path(args.config).resolve() if args.config else None)
    payload = load_json_object(Path(args.descriptors).resolve())
    entries = load_types(payload, config)

    unhide_kinds = list(args.unhide or [])
    report = build_report([classify_type(entry, config, unhide_kinds) for entry in entries])
    content = render_json(report)

    if args.print_json:
        print(content, end="")
    if args.output:
        return write_if_changed(Path(args.output).resolve(), content, args.check, args.dry_run)
    if args.check:
        raise SpecialsError("--check requires --output")
    return 0


def command_vocabulary(args: argparse.Namespace) -> int:
    table = {name: kind.value for name, kind in sorted(OPERATION_NAMES.items())}
    if args.json:
        print(json.dumps(table, indent=2))
        return 0
    width = max(len(name) for name in table)
    for name, kind in table.items():
        print(f"{name.ljust(width)}  {kind}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="abi_specials",
        description="Classify special operations (clone/destroy/ref/compare/format/hash) of binding types.",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    classify = sub.add_parser("classify", help="Classify all types in a descriptor JSON file.")
    classify.add_argument("--descriptors", required=True, help="Path to function descriptor JSON.")
    classify.add_argument("--config", help="Path to policy config JSON.")
    classify.add_argument("--output", help="Write analysis report JSON to path.")
    classify.add_argument(
        "--unhide",
        action="append",
        type=_operation_kind_arg,
        help="Re-expose the function backing this operation kind (repeatable).",
    )
    classify.add_argument("--check", action="store_true", help="Fail if the report at --output is out of date.")
    classify.add_argument("--dry-run", action="store_true", help="Do not write the report.")
    classify.add_argument("--print-json", action="store_true", help="Print the report JSON to stdout.")
    classify.set_defaults(func=command_classify)

    vocabulary = sub.add_parser("vocabulary", help="Print the function name to operation kind table.")
    vocabulary.add_argument("--json", action="store_true", help="Print as JSON.")
    vocabulary.set_defaults(func=command_vocabulary)

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        return int(args.func(args))
    except SpecialsError as exc:
        print(f"abi_specials error: {exc}", file=sys.stderr)
        return 2
