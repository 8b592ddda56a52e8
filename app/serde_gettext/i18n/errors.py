"""Exceptions raised while decoding and resolving gettext documents.

Every error carries a machine-readable ``code`` so callers can report
failures without matching on message text.
"""

from typing import Optional, Sequence, Union


class GettextError(Exception):
    """Base exception for all decoding and resolution errors.

    Example:
        try:
            text = resolver.resolve_value(document)
        except GettextError as e:
            logger.error("resolution_failed", error=str(e), code=e.code)
    """

    code = "GETTEXT_ERROR"


class DecodeError(GettextError):
    """Raised when a document cannot be interpreted as a gettext request."""

    code = "DECODE_ERROR"


class AmbiguousOrMissingFunction(DecodeError):
    """Raised when a document names zero or several gettext functions.

    Attributes:
        found: Function keys present in the document, in document order.
    """

    code = "AMBIGUOUS_OR_MISSING_FUNCTION"

    def __init__(self, found: Sequence[str]):
        self.found = tuple(found)
        if self.found:
            message = "expected exactly one function key, found: " + ", ".join(
                self.found
            )
        else:
            message = "expected exactly one function key, found none"
        super().__init__(message)


class TypeMismatch(DecodeError):
    """Raised when a value does not have the expected shape.

    Attributes:
        path: Dotted location of the value inside the document.
        expected: Description of the expected shape.
    """

    code = "TYPE_MISMATCH"

    def __init__(
        self,
        path: str,
        expected: str,
        actual: Optional[str] = None,
        message: Optional[str] = None,
    ):
        self.path = path
        self.expected = expected
        self.actual = actual
        if message is None:
            message = f"{path}: expected {expected}"
            if actual:
                message += f", got {actual}"
        super().__init__(message)


class MissingField(TypeMismatch):
    """Raised when a required request field is absent."""

    code = "MISSING_FIELD"

    def __init__(self, path: str, expected: str = "a value"):
        super().__init__(path, expected, message=f"{path}: missing required field")


class UnexpectedKey(DecodeError):
    """Raised when a document or request body holds an unknown key.

    The document format is closed so that typos surface as errors.
    """

    code = "UNEXPECTED_KEY"

    def __init__(self, path: str, keys: Sequence[str]):
        self.path = path
        self.keys = tuple(keys)
        super().__init__(f"{path}: unexpected key(s): {', '.join(self.keys)}")


class UnrecognizedCategory(DecodeError):
    """Raised when a ``category`` token is not one of the locale categories."""

    code = "UNRECOGNIZED_CATEGORY"

    def __init__(self, token: str):
        self.token = token
        super().__init__(f"unrecognized locale category: {token!r}")


class FormatError(GettextError):
    """Raised when a message template cannot be formatted."""

    code = "FORMAT_ERROR"


class MissingArgument(FormatError):
    """Raised when a placeholder refers to an absent argument.

    Attributes:
        key: Argument name for named placeholders, index for positional ones.
    """

    code = "MISSING_ARGUMENT"

    def __init__(self, key: Union[str, int]):
        self.key = key
        if isinstance(key, int):
            message = f"missing positional argument #{key}"
        else:
            message = f"missing argument {key!r}"
        super().__init__(message)


class InvalidPlaceholder(FormatError):
    """Raised when a template holds a ``%`` sequence outside the dialect."""

    code = "INVALID_PLACEHOLDER"

    def __init__(self, template: str, position: int):
        self.template = template
        self.position = position
        super().__init__(
            f"invalid placeholder at position {position} in {template!r}"
        )


class MalformedArgument(FormatError):
    """Raised when an argument value cannot be rendered.

    Covers join sequences without separator and items, and nested documents
    that fail their own resolution; the latter keep the failure in ``inner``.
    """

    code = "MALFORMED_ARGUMENT"

    def __init__(self, message: str, inner: Optional[GettextError] = None):
        self.inner = inner
        super().__init__(message)


class TooDeeplyNested(GettextError):
    """Raised when argument nesting exceeds the configured maximum depth."""

    code = "TOO_DEEPLY_NESTED"

    def __init__(self, max_depth: int):
        self.max_depth = max_depth
        super().__init__(f"document nesting exceeds maximum depth of {max_depth}")


class DocumentParseError(GettextError):
    """Raised when raw JSON or YAML text cannot be parsed."""

    code = "DOCUMENT_PARSE_ERROR"
