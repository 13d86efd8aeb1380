"""
Answer Checker: compare submitted values against a module's answer key.

Comparison is exact and literal: no numeric coercion, no case folding,
no whitespace trimming. "True" does not match "true", "1.0" does not
match "1".

check_answers works on one module. check_document scores a whole quiz
session and produces a read-only QuizResult.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Mapping, Sequence

from qcm.errors import ArityMismatch
from qcm.model import Document, Module


def check_answers(module: Module, submitted: Sequence[str]) -> List[bool]:
    """
    Check submitted values against a module's solutions.

    Args:
        module: Module holding the expected solutions
        submitted: One value per placeholder, in positional order

    Returns:
        One boolean per placeholder: True at i iff submitted[i] == solutions[i]

    Raises:
        ArityMismatch: If len(submitted) != len(module.solutions)
    """
    if isinstance(submitted, str):
        raise TypeError("submitted must be a sequence of values, not a single string")

    expected = module.solutions
    if len(submitted) != len(expected):
        raise ArityMismatch(
            f"Expected {len(expected)} answer(s), got {len(submitted)}"
        )

    return [given == wanted for given, wanted in zip(submitted, expected)]


@dataclass
class ModuleResult:
    """Outcome of checking one module."""
    index: int
    matches: List[bool] = field(default_factory=list)

    @property
    def correct(self) -> bool:
        return all(self.matches)

    @property
    def matched_count(self) -> int:
        return sum(1 for m in self.matches if m)


@dataclass
class QuizResult:
    """Outcome of checking a whole quiz session."""

    title: str
    total_modules: int = 0
    results: List[ModuleResult] = field(default_factory=list)
    skipped: List[int] = field(default_factory=list)

    @property
    def correct_modules(self) -> int:
        return sum(1 for r in self.results if r.correct)

    @property
    def total_answers(self) -> int:
        return sum(len(r.matches) for r in self.results)

    @property
    def correct_answers(self) -> int:
        return sum(r.matched_count for r in self.results)

    @property
    def score_percent(self) -> float:
        if self.total_modules == 0:
            return 0.0
        return (self.correct_modules / self.total_modules) * 100

    def get_result(self, index: int) -> ModuleResult | None:
        for result in self.results:
            if result.index == index:
                return result
        return None


def check_document(document: Document, answers: Mapping[int, Sequence[str]]) -> QuizResult:
    """
    Check answers for several modules of a document.

    Args:
        document: Loaded quiz
        answers: Submitted values keyed by zero-based module index

    Returns:
        QuizResult with one ModuleResult per answered module;
        modules without an entry are listed in `skipped`

    Raises:
        ArityMismatch: If an index does not exist in the document, is not
            an integer, or a module received the wrong number of values
    """
    report = QuizResult(title=document.title, total_modules=len(document.modules))

    bad_keys = [k for k in answers if not isinstance(k, int) or isinstance(k, bool)]
    if bad_keys:
        raise ArityMismatch(f"Module indices must be integers, got: {bad_keys!r}")

    unknown = sorted(i for i in answers if document.get_module(i) is None)
    if unknown:
        raise ArityMismatch(
            f"Answers given for unknown module index(es): {unknown} "
            f"(document has {len(document.modules)})"
        )

    by_index: Dict[int, Sequence[str]] = dict(answers)
    for index, module in enumerate(document.modules):
        if index not in by_index:
            report.skipped.append(index)
            continue
        try:
            matches = check_answers(module, by_index[index])
        except ArityMismatch as e:
            raise ArityMismatch(f"modules[{index}]: {e}") from e
        report.results.append(ModuleResult(index=index, matches=matches))

    return report


__all__ = [
    "check_answers",
    "check_document",
    "ModuleResult",
    "QuizResult",
    "ArityMismatch",
]
