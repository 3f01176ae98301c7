"""Identifier types: one validated path segment each.

Limits follow the Firestore and Resource Manager naming rules:

* ProjectId: 6-30 bytes of ``[a-z0-9-]``, starting with a letter, not ending
  with a hyphen, and free of the reserved words google, null, undefined, ssl.
* DatabaseId: ``(default)``, or 4-63 bytes with the same character rules.
* CollectionId / DocumentId: 1-1500 bytes, no ``/``, not ``.`` or ``..``,
  and not both starting and ending with ``__``.

All lengths are UTF-8 byte lengths. Strings with no UTF-8 encoding (lone
surrogates) are rejected as CONTAINS_INVALID_CHARACTER.
"""

import string
from typing import Any, ClassVar

from pydantic import StrictStr, field_validator

from firestore_path._base import PathValue, log_rejection
from firestore_path.exceptions import ErrorKind, FirestorePathError
from firestore_path.settings import DEFAULT_DATABASE_ID

_LOWERCASE = frozenset(string.ascii_lowercase)
_SLUG_CHARS = _LOWERCASE | frozenset(string.digits) | {"-"}
_RESERVED_PROJECT_WORDS = ("google", "null", "undefined", "ssl")
_RESERVED_AFFIX = "__"

MAX_SEGMENT_BYTES = 1500


def byte_length(s: str) -> int:
    """Length of ``s`` in UTF-8 bytes.

    Raises:
        FirestorePathError: CONTAINS_INVALID_CHARACTER if ``s`` has no UTF-8
            encoding (lone surrogates).
    """
    try:
        return len(s.encode("utf-8"))
    except UnicodeEncodeError as e:
        raise FirestorePathError(ErrorKind.CONTAINS_INVALID_CHARACTER) from e


def _check_slug(s: str, min_len: int, max_len: int) -> None:
    if not min_len <= byte_length(s) <= max_len:
        raise FirestorePathError(ErrorKind.LENGTH_OUT_OF_BOUNDS)
    if not all(c in _SLUG_CHARS for c in s):
        raise FirestorePathError(ErrorKind.CONTAINS_INVALID_CHARACTER)
    # Non-empty and ASCII from here on.
    if s[0] not in _LOWERCASE:
        raise FirestorePathError(ErrorKind.STARTS_WITH_NON_LETTER)
    if s[-1] == "-":
        raise FirestorePathError(ErrorKind.ENDS_WITH_HYPHEN)


def _check_segment(s: str) -> None:
    if not 1 <= byte_length(s) <= MAX_SEGMENT_BYTES:
        raise FirestorePathError(ErrorKind.LENGTH_OUT_OF_BOUNDS)
    if "/" in s:
        raise FirestorePathError(ErrorKind.CONTAINS_SLASH)
    if s in (".", ".."):
        raise FirestorePathError(ErrorKind.SINGLE_PERIOD_OR_DOUBLE_PERIODS)
    if s.startswith(_RESERVED_AFFIX) and s.endswith(_RESERVED_AFFIX):
        raise FirestorePathError(ErrorKind.MATCHES_RESERVED_ID_PATTERN)


class Identifier(PathValue):
    """A single validated segment, compared and hashed by its string value.

    Construct positionally (``CollectionId("rooms")``), with ``from_str``, or
    with ``model_validate("rooms")``. Invalid input raises FirestorePathError.
    """

    value: StrictStr

    def __init__(self, value: str) -> None:
        super().__init__(value=value)

    @classmethod
    def _fields_from_str(cls, s: str) -> dict[str, Any]:
        return {"value": s}

    @field_validator("value")
    @classmethod
    def _validate_value(cls, v: str) -> str:
        with log_rejection(cls.__name__, v):
            cls._check(v)
        return v

    @classmethod
    def _check(cls, s: str) -> None:
        raise NotImplementedError

    def _key(self) -> tuple[str, ...]:
        return (self.value,)

    def __str__(self) -> str:
        return self.value


class ProjectId(Identifier):
    """Google Cloud project id, e.g. ``my-project``."""

    @classmethod
    def _check(cls, s: str) -> None:
        _check_slug(s, 6, 30)
        if any(word in s for word in _RESERVED_PROJECT_WORDS):
            raise FirestorePathError(ErrorKind.MATCHES_RESERVED_ID_PATTERN)


class DatabaseId(Identifier):
    """Firestore database id. ``DatabaseId()`` is the ``(default)`` database."""

    DEFAULT: ClassVar[str] = DEFAULT_DATABASE_ID

    def __init__(self, value: str = DEFAULT_DATABASE_ID) -> None:
        super().__init__(value)

    @classmethod
    def default(cls) -> "DatabaseId":
        return cls(DEFAULT_DATABASE_ID)

    @property
    def is_default(self) -> bool:
        return self.value == DEFAULT_DATABASE_ID

    @classmethod
    def _check(cls, s: str) -> None:
        if s == DEFAULT_DATABASE_ID:
            return
        _check_slug(s, 4, 63)


class CollectionId(Identifier):
    """Collection id, the last segment of a collection path."""

    @classmethod
    def _check(cls, s: str) -> None:
        _check_segment(s)


class DocumentId(Identifier):
    """Document id, the last segment of a document path."""

    @classmethod
    def _check(cls, s: str) -> None:
        _check_segment(s)


CollectionIdLike = CollectionId | str
DocumentIdLike = DocumentId | str
ProjectIdLike = ProjectId | str

__all__ = [
    "CollectionId",
    "CollectionIdLike",
    "DatabaseId",
    "DocumentId",
    "DocumentIdLike",
    "Identifier",
    "ProjectId",
    "ProjectIdLike",
]
