"""
Tests for the content loader (stored text → Document).

We need to:
1. Accept well-formed content in dict, JSON and YAML form
2. Reject missing fields and placeholder/solution count mismatches
3. Normalise literal solutions to text
4. Read files by suffix
"""

import json

import pytest
from qcm.errors import MalformedContent, QuizContentError
from qcm.loader import (
    load_document_dict,
    load_document_file,
    load_document_json,
    load_document_yaml,
    load_module_dict,
)
from qcm.model import Document, Module


def sample_data():
    return {
        "title": "Case Classes",
        "modules": [
            {
                "preparagraph": "Case classes compare by structure.",
                "code": "(x1 == y1) should be(res0)\n(x1 == x2) should be(res1)",
                "solutions": ["false", "true"],
                "postparagraph": "",
            },
            {
                "preparagraph": "",
                "code": "d1.toString should be(res0)",
                "solutions": ['"Dog(Scooby,Doberman)"'],
                "postparagraph": "toString is generated too.",
            },
        ],
    }


class TestLoadWellFormed:
    """Well-formed content never fails."""

    def test_load_dict(self):
        doc = load_document_dict(sample_data())
        assert isinstance(doc, Document)
        assert doc.title == "Case Classes"
        assert len(doc.modules) == 2
        assert doc.modules[0].solutions == ("false", "true")
        assert doc.modules[1].postparagraph == "toString is generated too."

    def test_modules_keep_order(self):
        doc = load_document_dict(sample_data())
        assert doc.modules[0].code.startswith("(x1 == y1)")
        assert doc.modules[1].code.startswith("d1.toString")

    def test_optional_paragraphs_default_to_empty(self):
        data = {"title": "T", "modules": [{"code": "x should be(res0)", "solutions": ["1"]}]}
        module = load_document_dict(data).modules[0]
        assert module.preparagraph == ""
        assert module.postparagraph == ""

    def test_null_paragraph_becomes_empty(self):
        data = {"title": "T", "modules": [
            {"code": "res0", "solutions": ["1"], "preparagraph": None}
        ]}
        assert load_document_dict(data).modules[0].preparagraph == ""

    def test_placeholder_invariant_holds(self):
        doc = load_document_dict(sample_data())
        for module in doc.modules:
            assert module.placeholder_count == len(module.solutions)

    def test_load_json(self):
        doc = load_document_json(json.dumps(sample_data()))
        assert doc == load_document_dict(sample_data())

    def test_load_yaml(self):
        content = '''
title: Case Classes
modules:
  - preparagraph: Equality
    code: |
      (p1 == p2) should be(res0)
      (p1 == p3) should be(res1)
    solutions: ["false", "true"]
    postparagraph: ""
'''
        doc = load_document_yaml(content)
        assert doc.title == "Case Classes"
        assert doc.modules[0].solutions == ("false", "true")

    def test_custom_pattern(self):
        data = {"title": "T", "modules": [{"code": "x should be(__)", "solutions": ["1"]}]}
        doc = load_document_dict(data, pattern=r"__")
        assert doc.modules[0].solutions == ("1",)


class TestSolutionLiterals:
    """Solutions are literals held as text."""

    def test_yaml_booleans_become_lowercase_text(self):
        content = '''
title: T
modules:
  - code: "a should be(res0) and b should be(res1)"
    solutions: [true, false]
'''
        doc = load_document_yaml(content)
        assert doc.modules[0].solutions == ("true", "false")

    def test_numbers_become_text(self):
        data = {"title": "T", "modules": [{"code": "res0 res1", "solutions": [23, 1.5]}]}
        assert load_document_dict(data).modules[0].solutions == ("23", "1.5")

    def test_strings_are_kept_verbatim(self):
        data = {"title": "T", "modules": [{"code": "res0", "solutions": ['"Scooby"']}]}
        assert load_document_dict(data).modules[0].solutions == ('"Scooby"',)

    def test_nested_solution_rejected(self):
        data = {"title": "T", "modules": [{"code": "res0", "solutions": [["a"]]}]}
        with pytest.raises(MalformedContent, match=r"modules\[0\]\.solutions\[0\]"):
            load_document_dict(data)

    def test_null_solution_rejected(self):
        data = {"title": "T", "modules": [{"code": "res0", "solutions": [None]}]}
        with pytest.raises(MalformedContent):
            load_document_dict(data)


class TestMalformedContent:
    """Structural defects always fail with MalformedContent."""

    def test_missing_solutions(self):
        data = sample_data()
        del data["modules"][1]["solutions"]
        with pytest.raises(MalformedContent, match=r"modules\[1\].*solutions"):
            load_document_dict(data)

    def test_missing_code(self):
        data = sample_data()
        del data["modules"][0]["code"]
        with pytest.raises(MalformedContent, match="code"):
            load_document_dict(data)

    def test_missing_title(self):
        data = sample_data()
        del data["title"]
        with pytest.raises(MalformedContent, match="title"):
            load_document_dict(data)

    def test_missing_modules(self):
        with pytest.raises(MalformedContent, match="modules"):
            load_document_dict({"title": "T"})

    def test_empty_modules(self):
        with pytest.raises(MalformedContent, match="no modules"):
            load_document_dict({"title": "T", "modules": []})

    def test_too_few_solutions(self):
        data = sample_data()
        data["modules"][0]["solutions"] = ["false"]
        with pytest.raises(MalformedContent, match="2 placeholder"):
            load_document_dict(data)

    def test_too_many_solutions(self):
        data = sample_data()
        data["modules"][1]["solutions"] = ["a", "b"]
        with pytest.raises(MalformedContent):
            load_document_dict(data)

    def test_code_without_placeholders(self):
        data = {"title": "T", "modules": [{"code": "println(1)", "solutions": []}]}
        with pytest.raises(MalformedContent, match="no placeholders"):
            load_document_dict(data)

    def test_solutions_not_a_list(self):
        data = {"title": "T", "modules": [{"code": "res0", "solutions": "true"}]}
        with pytest.raises(MalformedContent, match="expected a list"):
            load_document_dict(data)

    def test_module_not_a_mapping(self):
        with pytest.raises(MalformedContent):
            load_document_dict({"title": "T", "modules": ["res0"]})

    def test_document_not_a_mapping(self):
        with pytest.raises(MalformedContent):
            load_document_dict(["not", "a", "document"])

    def test_invalid_json(self):
        with pytest.raises(MalformedContent, match="Invalid JSON"):
            load_document_json("{not json")

    def test_invalid_yaml(self):
        with pytest.raises(MalformedContent, match="Invalid YAML"):
            load_document_yaml("title: [unclosed")

    def test_is_a_quiz_content_error(self):
        """Callers can catch the common base class."""
        with pytest.raises(QuizContentError):
            load_document_dict({"title": "T", "modules": []})


class TestUnknownFields:

    def test_unknown_module_field_warns(self):
        data = sample_data()
        data["modules"][0]["hint"] = "look closely"
        with pytest.warns(UserWarning, match="hint"):
            doc = load_document_dict(data)
        assert len(doc.modules) == 2

    def test_unknown_document_field_warns(self):
        data = sample_data()
        data["author"] = "someone"
        with pytest.warns(UserWarning, match="author"):
            load_document_dict(data)


class TestLoadModuleDict:

    def test_index_in_error_message(self):
        with pytest.raises(MalformedContent, match=r"modules\[7\]"):
            load_module_dict({"code": "res0"}, index=7)

    def test_returns_module(self):
        module = load_module_dict({"code": "res0", "solutions": ["x"]})
        assert module == Module(code="res0", solutions=("x",))


class TestLoadFile:
    """Test file I/O operations."""

    def test_json_file(self, tmp_path):
        path = tmp_path / "quiz.json"
        path.write_text(json.dumps(sample_data()), encoding="utf-8")
        doc = load_document_file(str(path))
        assert doc.title == "Case Classes"

    def test_yaml_file(self, tmp_path):
        path = tmp_path / "quiz.yml"
        path.write_text("title: T\nmodules:\n  - code: res0\n    solutions: ['1']\n", encoding="utf-8")
        doc = load_document_file(str(path))
        assert doc.modules[0].solutions == ("1",)

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_document_file(str(tmp_path / "missing.json"))

    def test_non_utf8_file(self, tmp_path):
        """Undecodable bytes are reported as malformed content."""
        path = tmp_path / "quiz.json"
        path.write_bytes(b'{"title": "\xff", "modules": []}')
        with pytest.raises(MalformedContent, match="not valid UTF-8"):
            load_document_file(str(path))

    def test_unknown_suffix(self, tmp_path):
        path = tmp_path / "quiz.txt"
        path.write_text("{}", encoding="utf-8")
        with pytest.raises(MalformedContent, match="Unsupported file type"):
            load_document_file(str(path))


class TestFloatNormalisation:
    """Floats are stored the way Python prints them."""

    def test_float_spelling_is_normalised(self):
        content = "title: T\nmodules:\n  - code: res0 res1\n    solutions: [1.10, 1.0e+20]\n"
        assert load_document_yaml(content).modules[0].solutions == ("1.1", "1e+20")

    def test_quoted_float_keeps_spelling(self):
        content = "title: T\nmodules:\n  - code: res0\n    solutions: ['1.10']\n"
        assert load_document_yaml(content).modules[0].solutions == ("1.10",)
