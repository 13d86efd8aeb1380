"""
Placeholder markers in quiz code samples.

A placeholder stands for a blanked-out expected value. The quiz content
uses the `resN` convention:

    p1 == p2 should be(res0)
    p1.hashCode == p2.hashCode should be(res1)

Markers are matched in order of appearance. The i-th occurrence
corresponds to the i-th solution, whatever its numeric suffix.

The pattern is a plain regular expression so content written with a
different convention (e.g. `__`) can be loaded by passing `pattern=`.
"""

import re
from typing import List, Optional, Sequence

from .errors import ArityMismatch


PLACEHOLDER_PATTERN = r"\bres\d+\b"

_INDEX_RE = re.compile(r"(\d+)$")


def _compile(pattern: Optional[str]) -> "re.Pattern[str]":
    return re.compile(pattern if pattern is not None else PLACEHOLDER_PATTERN)


def find_placeholders(code: str, pattern: Optional[str] = None) -> List[str]:
    """Return every placeholder marker in `code`, in order of appearance."""
    if not code:
        return []
    return [m.group(0) for m in _compile(pattern).finditer(code)]


def count_placeholders(code: str, pattern: Optional[str] = None) -> int:
    """Count placeholder occurrences in `code`."""
    return len(find_placeholders(code, pattern))


def marker_index(marker: str) -> Optional[int]:
    """
    Extract the numeric suffix of a marker (`res3` -> 3).

    Returns None for markers without one (e.g. `__`).
    """
    m = _INDEX_RE.search(marker)
    if m is None:
        return None
    return int(m.group(1))


def fill_placeholders(code: str, values: Sequence[str], pattern: Optional[str] = None) -> str:
    """
    Substitute the i-th placeholder occurrence with `values[i]`.

    Args:
        code: Code sample containing placeholders
        values: One replacement per occurrence, in positional order
        pattern: Optional marker regex (defaults to PLACEHOLDER_PATTERN)

    Returns:
        Code with every marker replaced

    Raises:
        ArityMismatch: If len(values) differs from the number of markers
    """
    regex = _compile(pattern)
    expected = sum(1 for _ in regex.finditer(code or ""))
    if expected != len(values):
        raise ArityMismatch(
            f"Code has {expected} placeholder(s) but {len(values)} value(s) were given"
        )

    replacements = iter(values)
    return regex.sub(lambda _m: str(next(replacements)), code or "")


__all__ = [
    "PLACEHOLDER_PATTERN",
    "find_placeholders",
    "count_placeholders",
    "marker_index",
    "fill_placeholders",
]
