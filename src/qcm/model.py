"""
Core Quiz Content Objects

Defines the data structures of the Quiz Content Model:
    - Modules (one quiz unit: prose, code with blanks, answer key)
    - Documents (root container)

ARCHITECTURAL RULE:
    These objects:
        - Know nothing about rendering or grading UIs
        - Are immutable (frozen, tuple sequences)
        - Are fully serializable
        - Represent content, not behavior

Structural validation (placeholder/solution counts, required fields)
happens in the loader. These classes do not validate themselves, so
tests and builders can construct them freely.
"""

from dataclasses import dataclass, field
from typing import Optional, Tuple

from .placeholders import count_placeholders


@dataclass(frozen=True)
class Module:
    """
    One quiz unit.

    Properties:
        code:
            Code sample containing one or more placeholder markers
            Example: "p1 == p2 should be(res0)"

        solutions:
            Expected value for each placeholder, in positional order.
            Every solution is a literal held as text: "false", "42", "\"Tom\""

        preparagraph:
            Prose shown before the code (may be empty)

        postparagraph:
            Prose shown after the code (may be empty)

    INVARIANT (enforced by the loader):
        count of placeholders in `code` == len(solutions)
    """

    code: str
    solutions: Tuple[str, ...] = ()
    preparagraph: str = ""
    postparagraph: str = ""

    @property
    def placeholder_count(self) -> int:
        """Marker count under the default resN convention."""
        return self.count_markers()

    def count_markers(self, pattern: Optional[str] = None) -> int:
        """Marker count under `pattern` (defaults to resN)."""
        return count_placeholders(self.code, pattern)


@dataclass(frozen=True)
class Document:
    """
    Root container for a whole quiz.

    Properties:
        title:
            Quiz title
            Example: "Case Classes"

        modules:
            Ordered quiz units

    INVARIANTS (enforced by the loader):
        - modules is non-empty
        - every module satisfies the placeholder/solution invariant

    The document is read once and shared read-only for a whole session.
    """

    title: str
    modules: Tuple[Module, ...] = field(default_factory=tuple)

    def get_module(self, index: int) -> Optional[Module]:
        """
        Retrieve a module by position.

        Args:
            index: Zero-based module position

        Returns:
            Module or None if out of range
        """
        if 0 <= index < len(self.modules):
            return self.modules[index]
        return None

    @property
    def total_placeholders(self) -> int:
        return sum(len(m.solutions) for m in self.modules)
