#!/usr/bin/env python3
"""
Complete Pipeline Demo: Example → YAML → Document → Analysis → Checking

Shows the full workflow:
1. Dump the built-in quiz to YAML and load it back
2. Analyze the content
3. Check a mix of right and wrong answers
4. Reveal a solved module
"""

from qcm.analyzer import analyze_document
from qcm.checker import check_document
from qcm.examples import build_case_classes_document
from qcm.loader import load_document_yaml
from qcm.placeholders import fill_placeholders
from qcm.serialization import document_to_yaml


def main():
    print("=" * 80)
    print("QUIZ PIPELINE DEMO")
    print("=" * 80)

    print("\n1. LOADING...")
    doc = load_document_yaml(document_to_yaml(build_case_classes_document()))
    print(f"   ✓ Loaded quiz: {doc.title}")
    print(f"   ✓ Modules: {len(doc.modules)}")
    print(f"   ✓ Placeholders: {doc.total_placeholders}")

    print("\n2. ANALYZING...")
    report = analyze_document(doc)
    print(f"   ✓ Solution kinds: {report.solution_kinds}")
    for warning in report.warnings:
        print(f"      - {warning}")

    print("\n3. CHECKING...")
    result = check_document(doc, {
        0: ["true", "false"],
        2: ["false", "true", "false", "true"],
        4: ['"Dog(Scooby,Doberman)"'],
    })
    for r in result.results:
        print(f"   module {r.index}: {r.matches}")
    print(f"   ✓ Skipped: {result.skipped}")
    print(f"   ✓ Score: {result.score_percent:.1f}%")

    print("\n4. REVEALING MODULE 6:")
    print("-" * 80)
    module = doc.get_module(6)
    print(fill_placeholders(module.code, module.solutions))
    print("=" * 80)


if __name__ == "__main__":
    main()
