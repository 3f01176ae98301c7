"""Exception hierarchy for firestore-path.

Every validation failure in this library is raised as a FirestorePathError
carrying exactly one ErrorKind. The kinds form a closed set so callers can
branch on them without parsing messages.
"""

from enum import StrEnum


class ErrorKind(StrEnum):
    """Reason a string or component was rejected."""

    LENGTH_OUT_OF_BOUNDS = "length out of bounds"
    CONTAINS_INVALID_CHARACTER = "contains invalid character"
    CONTAINS_SLASH = "contains slash"
    NOT_CONTAINS_SLASH = "not contains slash"
    STARTS_WITH_NON_LETTER = "starts with non letter"
    ENDS_WITH_HYPHEN = "ends with hyphen"
    MATCHES_RESERVED_ID_PATTERN = "matches the reserved id pattern"
    SINGLE_PERIOD_OR_DOUBLE_PERIODS = "single period or double periods"
    INVALID_NUMBER_OF_PATH_COMPONENTS = "invalid number of path components"
    INVALID_NAME = "invalid name"
    COLLECTION_ID_CONVERSION = "collection id conversion"
    DOCUMENT_ID_CONVERSION = "document id conversion"
    COLLECTION_PATH_CONVERSION = "collection path conversion"
    DOCUMENT_PATH_CONVERSION = "document path conversion"

    @property
    def is_conversion(self) -> bool:
        """True for the kinds that wrap a nested failure."""
        return self in _CONVERSION_KINDS


_CONVERSION_KINDS = frozenset(
    {
        ErrorKind.COLLECTION_ID_CONVERSION,
        ErrorKind.DOCUMENT_ID_CONVERSION,
        ErrorKind.COLLECTION_PATH_CONVERSION,
        ErrorKind.DOCUMENT_PATH_CONVERSION,
    }
)


class FirestorePathError(Exception):
    """Base exception for all firestore-path errors.

    Not a ValueError subclass, so pydantic lets it escape field and model
    validators untouched instead of wrapping it in a ValidationError.

    Attributes:
        kind: The single validation rule that failed.
        detail: Rendered message of the nested failure for conversion kinds,
            None otherwise.
    """

    def __init__(self, kind: ErrorKind, detail: str | None = None) -> None:
        self.kind = kind
        self.detail = detail
        message = str(kind) if detail is None else f"{kind}: {detail}"
        super().__init__(message)

    @classmethod
    def conversion(cls, kind: ErrorKind, cause: Exception) -> "FirestorePathError":
        """Wrap a failure raised while converting a caller-supplied argument."""
        assert kind.is_conversion, kind
        return cls(kind, str(cause))

    def __repr__(self) -> str:
        if self.detail is None:
            return f"{type(self).__name__}({self.kind.name})"
        return f"{type(self).__name__}({self.kind.name}, {self.detail!r})"
