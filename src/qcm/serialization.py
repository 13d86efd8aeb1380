"""
Serialization helpers for quiz content (Document, Module).

Provides lossless JSON/YAML round-trip via intermediate dict representation.
Deserialization goes through the loader so every invariant is checked
on the way back in.
"""
from __future__ import annotations

import json
from typing import Any, Dict, Optional

import yaml

from qcm.model import Document, Module
from qcm.loader import (
    load_document_dict,
    load_document_json,
    load_document_yaml,
    load_module_dict,
)


def module_to_dict(m: Module) -> Dict[str, Any]:
    return {
        "preparagraph": m.preparagraph,
        "code": m.code,
        "solutions": list(m.solutions),
        "postparagraph": m.postparagraph,
    }


def module_from_dict(d: Dict[str, Any], pattern: Optional[str] = None) -> Module:
    return load_module_dict(d, pattern=pattern)


def document_to_dict(doc: Document) -> Dict[str, Any]:
    return {
        "title": doc.title,
        "modules": [module_to_dict(m) for m in doc.modules],
    }


def document_from_dict(d: Dict[str, Any], pattern: Optional[str] = None) -> Document:
    return load_document_dict(d, pattern=pattern)


def document_to_json(doc: Document, indent: int | None = None) -> str:
    return json.dumps(document_to_dict(doc), sort_keys=True, indent=indent)


def document_from_json(s: str, pattern: Optional[str] = None) -> Document:
    return load_document_json(s, pattern=pattern)


def document_to_yaml(doc: Document) -> str:
    return yaml.safe_dump(document_to_dict(doc), sort_keys=False, allow_unicode=True)


def document_from_yaml(s: str, pattern: Optional[str] = None) -> Document:
    return load_document_yaml(s, pattern=pattern)
