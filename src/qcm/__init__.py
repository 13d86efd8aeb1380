"""
Quiz Content Model (QCM) Package

Immutable representation of a fill-in-the-blanks quiz: a titled document
made of modules, each with prose, a code sample containing placeholders,
and the ordered answer key.

ARCHITECTURAL GUARANTEE:
------------------------
This package contains ZERO knowledge of:
    - Rendering or presentation
    - Grading UI
    - Persistence of user progress

This package defines QUIZ CONTENT and ANSWER CHECKING only.
"""

from .errors import QuizContentError, MalformedContent, ArityMismatch
from .model import Document, Module

__version__ = "0.1.0"

__all__ = [
    "Document",
    "Module",
    "QuizContentError",
    "MalformedContent",
    "ArityMismatch",
]
