"""
Content Loader (Stored text → Quiz Content Model).

Converts the stored quiz resource into a Document.

Stored format (JSON or YAML):
    title: text
    modules:
      - preparagraph: text      (optional, defaults to "")
        code: text              (required, contains placeholders)
        solutions: [literal]    (required, one per placeholder)
        postparagraph: text     (optional, defaults to "")

Solutions are literals stored as text. Booleans become "true"/"false";
numbers go through str(), so a stored float is normalised the way Python
prints it (1.10 -> "1.1", 1e20 -> "1e+20"). Quote a solution in the
source to keep its exact spelling.

Loading either returns a fully valid Document or raises MalformedContent.
Unknown keys are tolerated but reported with a UserWarning.
"""

import json
import os
import warnings
from typing import Any, Dict, List, Optional

import yaml

from .errors import MalformedContent
from .model import Document, Module
from .placeholders import count_placeholders


DOCUMENT_FIELDS = {"title", "modules"}
MODULE_FIELDS = {"preparagraph", "code", "solutions", "postparagraph"}
REQUIRED_MODULE_FIELDS = ["code", "solutions"]


def _solution_to_text(value: Any, where: str) -> str:
    """Normalise one solution literal to its text form."""
    # bool first: bool is a subclass of int
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float, str)):
        return str(value)
    raise MalformedContent(
        f"{where}: solution must be a string, boolean or number, got {type(value).__name__}"
    )


def _optional_text(raw: Dict[str, Any], key: str, where: str) -> str:
    value = raw.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise MalformedContent(f"{where}.{key}: expected text, got {type(value).__name__}")
    return value


def _warn_unknown_keys(raw: Dict[str, Any], known: set, where: str) -> None:
    unknown = sorted(set(raw) - known)
    if unknown:
        warnings.warn(f"Ignoring unknown field(s) in {where}: {unknown}", UserWarning)


def load_module_dict(raw: Any, index: int = 0, pattern: Optional[str] = None) -> Module:
    """
    Build a single Module from its dict form.

    Args:
        raw: Mapping with code/solutions/preparagraph/postparagraph
        index: Position of the module (used in error messages)
        pattern: Optional placeholder regex

    Returns:
        Module object

    Raises:
        MalformedContent: If a required field is missing or the
            placeholder count does not match the solution count
    """
    where = f"modules[{index}]"

    if not isinstance(raw, dict):
        raise MalformedContent(f"{where}: expected a mapping, got {type(raw).__name__}")

    missing = [key for key in REQUIRED_MODULE_FIELDS if key not in raw or raw[key] is None]
    if missing:
        raise MalformedContent(f"{where}: missing required field(s): {missing}")

    _warn_unknown_keys(raw, MODULE_FIELDS, where)

    code = raw["code"]
    if not isinstance(code, str):
        raise MalformedContent(f"{where}.code: expected text, got {type(code).__name__}")

    raw_solutions = raw["solutions"]
    if not isinstance(raw_solutions, list):
        raise MalformedContent(
            f"{where}.solutions: expected a list, got {type(raw_solutions).__name__}"
        )
    solutions = tuple(
        _solution_to_text(value, f"{where}.solutions[{i}]")
        for i, value in enumerate(raw_solutions)
    )

    placeholders = count_placeholders(code, pattern)
    if placeholders == 0:
        raise MalformedContent(f"{where}.code: no placeholders found")
    if placeholders != len(solutions):
        raise MalformedContent(
            f"{where}: code has {placeholders} placeholder(s) "
            f"but {len(solutions)} solution(s) were given"
        )

    return Module(
        code=code,
        solutions=solutions,
        preparagraph=_optional_text(raw, "preparagraph", where),
        postparagraph=_optional_text(raw, "postparagraph", where),
    )


def load_document_dict(data: Any, pattern: Optional[str] = None) -> Document:
    """
    Build a Document from its dict form.

    Args:
        data: Mapping with `title` and `modules`
        pattern: Optional placeholder regex

    Returns:
        Document object

    Raises:
        MalformedContent: If any structural invariant is violated
    """
    if not isinstance(data, dict):
        raise MalformedContent(f"Document must be a mapping, got {type(data).__name__}")

    missing = [key for key in ("title", "modules") if key not in data or data[key] is None]
    if missing:
        raise MalformedContent(f"Missing required field(s): {missing}")

    _warn_unknown_keys(data, DOCUMENT_FIELDS, "document")

    title = data["title"]
    if not isinstance(title, str):
        raise MalformedContent(f"title: expected text, got {type(title).__name__}")

    raw_modules = data["modules"]
    if not isinstance(raw_modules, list):
        raise MalformedContent(f"modules: expected a list, got {type(raw_modules).__name__}")
    if not raw_modules:
        raise MalformedContent("modules: document has no modules")

    modules: List[Module] = [
        load_module_dict(raw, index=i, pattern=pattern) for i, raw in enumerate(raw_modules)
    ]

    return Document(title=title, modules=tuple(modules))


def load_document_json(content: str, pattern: Optional[str] = None) -> Document:
    """Parse a JSON string into a Document."""
    try:
        data = json.loads(content)
    except json.JSONDecodeError as e:
        raise MalformedContent(f"Invalid JSON: {e}") from e
    return load_document_dict(data, pattern=pattern)


def load_document_yaml(content: str, pattern: Optional[str] = None) -> Document:
    """Parse a YAML string into a Document."""
    try:
        data = yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise MalformedContent(f"Invalid YAML: {e}") from e
    return load_document_dict(data, pattern=pattern)


def load_document_file(filepath: str, pattern: Optional[str] = None) -> Document:
    """
    Load a quiz document from disk.

    The format is chosen from the file suffix: `.json`, `.yaml` or `.yml`.

    Args:
        filepath: Path to the stored quiz
        pattern: Optional placeholder regex

    Returns:
        Document object

    Raises:
        FileNotFoundError: If file doesn't exist
        MalformedContent: If the suffix is unknown, the file is not UTF-8,
            or parsing fails
    """
    suffix = os.path.splitext(filepath)[1].lower()
    if suffix == ".json":
        parse = load_document_json
    elif suffix in (".yaml", ".yml"):
        parse = load_document_yaml
    else:
        raise MalformedContent(f"Unsupported file type '{suffix}' for {filepath}")

    try:
        with open(filepath, "r", encoding="utf-8") as f:
            content = f.read()
    except FileNotFoundError:
        raise FileNotFoundError(f"Quiz file not found: {filepath}")
    except UnicodeDecodeError as e:
        raise MalformedContent(f"{filepath} is not valid UTF-8: {e}") from e

    return parse(content, pattern=pattern)


__all__ = [
    "load_module_dict",
    "load_document_dict",
    "load_document_json",
    "load_document_yaml",
    "load_document_file",
    "MalformedContent",
]
