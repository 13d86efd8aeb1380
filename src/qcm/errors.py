"""Exception types raised by the loader and the checker."""


class QuizContentError(Exception):
    """Base class for all quiz content errors."""
    pass


class MalformedContent(QuizContentError):
    """Raised when stored content violates a structural invariant at load time."""
    pass


class ArityMismatch(QuizContentError):
    """Raised when the number of submitted values differs from the expected count."""
    pass
