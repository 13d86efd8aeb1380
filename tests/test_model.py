"""
Tests for the core quiz content objects.

These tests verify:
    - Basic model creation and defaults
    - Immutability
    - Retrieval helpers
"""

import dataclasses

import pytest
from qcm.model import Document, Module


class TestModule:
    """Test Module objects."""

    def test_minimal_module(self):
        """Should create a module with just code."""
        module = Module(code="x should be(res0)")
        assert module.code == "x should be(res0)"
        assert module.solutions == ()
        assert module.preparagraph == ""
        assert module.postparagraph == ""

    def test_placeholder_count(self):
        """Should count markers in the code."""
        module = Module(code="a should be(res0)\nb should be(res1)", solutions=("1", "2"))
        assert module.placeholder_count == 2

    def test_count_markers_with_pattern(self):
        """Content using another convention is counted with its own pattern."""
        module = Module(code="x should be(__)\ny should be(__)", solutions=("1", "2"))
        assert module.placeholder_count == 0
        assert module.count_markers(r"__") == 2

    def test_module_is_frozen(self):
        """Modules must not be mutated after construction."""
        module = Module(code="x should be(res0)", solutions=("1",))
        with pytest.raises(dataclasses.FrozenInstanceError):
            module.code = "changed"

    def test_modules_compare_by_value(self):
        """Two modules with the same fields are equal."""
        a = Module(code="x should be(res0)", solutions=("true",), preparagraph="Intro")
        b = Module(code="x should be(res0)", solutions=("true",), preparagraph="Intro")
        assert a == b


class TestDocument:
    """Test Document objects."""

    def test_get_module(self):
        """Should retrieve modules by position."""
        first = Module(code="res0", solutions=("1",))
        second = Module(code="res0 res1", solutions=("1", "2"))
        doc = Document(title="Quiz", modules=(first, second))

        assert doc.get_module(0) is first
        assert doc.get_module(1) is second

    def test_get_module_out_of_range(self):
        """Out of range (including negative) indices return None."""
        doc = Document(title="Quiz", modules=(Module(code="res0", solutions=("1",)),))
        assert doc.get_module(1) is None
        assert doc.get_module(-1) is None

    def test_total_placeholders(self):
        """Should sum solutions across modules."""
        doc = Document(title="Quiz", modules=(
            Module(code="res0", solutions=("1",)),
            Module(code="res0 res1 res2", solutions=("1", "2", "3")),
        ))
        assert doc.total_placeholders == 4

    def test_document_is_frozen(self):
        """Documents must not be mutated after construction."""
        doc = Document(title="Quiz")
        with pytest.raises(dataclasses.FrozenInstanceError):
            doc.title = "Other"
