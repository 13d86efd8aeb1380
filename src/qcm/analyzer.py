"""
Content Analyzer: authoring diagnostics for loaded quiz documents.

This module provides lightweight analysis of Document objects:
    - Module and placeholder inventory
    - Solution kind breakdown (boolean / numeric / string)
    - Placeholder numbering checks (out of order, gaps, duplicates)
    - Prose coverage (modules without an introduction)

IMPORTANT: This is read-only. It does NOT modify the document and does
not raise for content the loader accepted.
"""

from __future__ import annotations

import re
from collections import Counter
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from qcm.model import Document, Module
from qcm.placeholders import find_placeholders, marker_index


_NUMBER_RE = re.compile(r"^-?(\d+(\.\d*)?|\.\d+)[LlFfDd]?$")


def solution_kind(value: str) -> str:
    """Classify a solution literal as 'boolean', 'numeric' or 'string'."""
    if value in ("true", "false"):
        return "boolean"
    if _NUMBER_RE.match(value):
        return "numeric"
    return "string"


@dataclass
class ModuleDiagnostics:
    """Findings for a single module."""
    index: int
    markers: List[str] = field(default_factory=list)
    out_of_order: bool = False
    missing_indices: List[int] = field(default_factory=list)
    duplicate_markers: List[str] = field(default_factory=list)


def _analyze_module(index: int, module: Module, pattern: Optional[str]) -> ModuleDiagnostics:
    diag = ModuleDiagnostics(index=index, markers=find_placeholders(module.code, pattern))

    counts = Counter(diag.markers)
    diag.duplicate_markers = sorted(m for m, n in counts.items() if n > 1)

    indices = [marker_index(m) for m in diag.markers]
    if indices and all(i is not None for i in indices):
        diag.out_of_order = indices != sorted(indices)
        present = set(indices)
        diag.missing_indices = [i for i in range(max(present) + 1) if i not in present]

    return diag


@dataclass
class ContentReport:
    """Analysis report for a quiz document."""

    title: str
    total_modules: int = 0
    total_placeholders: int = 0

    solution_kinds: Dict[str, int] = field(default_factory=dict)
    modules_without_preparagraph: List[int] = field(default_factory=list)
    modules_without_postparagraph: List[int] = field(default_factory=list)
    modules: List[ModuleDiagnostics] = field(default_factory=list)

    warnings: List[str] = field(default_factory=list)

    def add_warning(self, msg: str) -> None:
        """Add a warning to the report."""
        if msg not in self.warnings:
            self.warnings.append(msg)


def analyze_document(document: Document, pattern: Optional[str] = None) -> ContentReport:
    """
    Analyze a Document for authoring smells.

    Returns a ContentReport with counts and warnings.
    """
    report = ContentReport(title=document.title)
    report.total_modules = len(document.modules)

    kinds: Counter = Counter()

    for index, module in enumerate(document.modules):
        report.total_placeholders += len(module.solutions)
        kinds.update(solution_kind(s) for s in module.solutions)

        if not module.preparagraph.strip():
            report.modules_without_preparagraph.append(index)
        if not module.postparagraph.strip():
            report.modules_without_postparagraph.append(index)

        report.modules.append(_analyze_module(index, module, pattern))

    report.solution_kinds = dict(kinds)

    if not document.title.strip():
        report.add_warning("Document has an empty title")

    if report.modules_without_preparagraph:
        report.add_warning(
            "Modules without an introduction: "
            + ", ".join(str(i) for i in report.modules_without_preparagraph)
        )

    for diag in report.modules:
        if diag.out_of_order:
            report.add_warning(
                f"Module {diag.index}: placeholders out of order ({', '.join(diag.markers)})"
            )
        if diag.missing_indices:
            report.add_warning(
                f"Module {diag.index}: placeholder numbering has gaps "
                f"(missing {', '.join(str(i) for i in diag.missing_indices)})"
            )
        if diag.duplicate_markers:
            report.add_warning(
                f"Module {diag.index}: repeated placeholder(s) {', '.join(diag.duplicate_markers)}"
            )

    return report
