"""
Command line entry point for quiz content.

    qcm validate quiz.json
    qcm check quiz.json 2 false true false false
    qcm reveal quiz.yaml 4
    qcm example --format yaml > case_classes.yaml
"""
import argparse
import sys
from typing import List, Optional

from qcm.analyzer import analyze_document
from qcm.checker import check_answers
from qcm.errors import ArityMismatch, MalformedContent
from qcm.examples import build_case_classes_document
from qcm.loader import load_document_file
from qcm.placeholders import fill_placeholders
from qcm.serialization import document_to_json, document_to_yaml


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="qcm", description="Load, lint and check quiz content")
    parser.add_argument(
        "--placeholder-pattern",
        default=None,
        help="Regex matching placeholder markers (default: resN)",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    p_validate = sub.add_parser("validate", help="Load a quiz file and report authoring issues")
    p_validate.add_argument("path", help="Path to a .json/.yaml quiz file")

    p_check = sub.add_parser("check", help="Check answers for one module")
    p_check.add_argument("path", help="Path to a .json/.yaml quiz file")
    p_check.add_argument("index", type=int, help="Zero-based module index")
    p_check.add_argument("values", nargs="*", help="Submitted values, one per placeholder")

    p_reveal = sub.add_parser("reveal", help="Print a module's code with the solutions filled in")
    p_reveal.add_argument("path", help="Path to a .json/.yaml quiz file")
    p_reveal.add_argument("index", type=int, help="Zero-based module index")

    p_example = sub.add_parser("example", help="Dump the built-in case classes quiz")
    p_example.add_argument("--format", choices=["json", "yaml"], default="json")

    return parser


def _cmd_validate(args) -> int:
    doc = load_document_file(args.path, pattern=args.placeholder_pattern)
    report = analyze_document(doc, pattern=args.placeholder_pattern)

    print(f"Quiz: {doc.title}")
    print(f" Modules     : {report.total_modules}")
    print(f" Placeholders: {report.total_placeholders}")
    kinds = ", ".join(f"{k}={v}" for k, v in sorted(report.solution_kinds.items()))
    print(f" Solutions   : {kinds}")
    if report.warnings:
        print(f"\nWarnings ({len(report.warnings)}):")
        for warning in report.warnings:
            print(f"  - {warning}")
    else:
        print("\nNo authoring issues found")
    return 0


def _get_module(doc, index: int):
    module = doc.get_module(index)
    if module is None:
        raise ArityMismatch(f"Module index {index} out of range (document has {len(doc.modules)})")
    return module


def _cmd_check(args) -> int:
    doc = load_document_file(args.path, pattern=args.placeholder_pattern)
    module = _get_module(doc, args.index)
    matches = check_answers(module, args.values)

    for position, (given, ok) in enumerate(zip(args.values, matches)):
        mark = "ok" if ok else "wrong"
        print(f" [{position}] {given!s:<20} {mark}")
    correct = sum(1 for m in matches if m)
    print(f"\n{correct}/{len(matches)} correct")
    return 0 if all(matches) else 1


def _cmd_reveal(args) -> int:
    doc = load_document_file(args.path, pattern=args.placeholder_pattern)
    module = _get_module(doc, args.index)
    if module.preparagraph:
        print(module.preparagraph)
        print()
    print(fill_placeholders(module.code, module.solutions, pattern=args.placeholder_pattern))
    if module.postparagraph:
        print()
        print(module.postparagraph)
    return 0


def _cmd_example(args) -> int:
    doc = build_case_classes_document()
    if args.format == "yaml":
        sys.stdout.write(document_to_yaml(doc))
    else:
        sys.stdout.write(document_to_json(doc, indent=2) + "\n")
    return 0


_COMMANDS = {
    "validate": _cmd_validate,
    "check": _cmd_check,
    "reveal": _cmd_reveal,
    "example": _cmd_example,
}


def main(argv: Optional[List[str]] = None) -> int:
    args = _build_parser().parse_args(argv)
    try:
        return _COMMANDS[args.command](args)
    except FileNotFoundError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2
    except (MalformedContent, ArityMismatch) as e:
        print(f"{type(e).__name__}: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
