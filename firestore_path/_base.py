"""Shared base for every identifier, path and name type.

All values are frozen pydantic models whose wire form is a single string.
Equality, ordering and hashing go through ``_key()`` so that nested paths are
compared without walking the parent chain recursively.
"""

from contextlib import contextmanager
from functools import cache, cached_property
from typing import Any, Iterator, Mapping, Self

from pydantic import BaseModel, ConfigDict, model_serializer, model_validator

from firestore_path.exceptions import FirestorePathError
from firestore_path.logging import get_path_logger

logger = get_path_logger(__name__)


@contextmanager
def log_rejection(type_name: str, raw: object) -> Iterator[None]:
    """Record rejected input at DEBUG level and re-raise."""
    try:
        yield
    except FirestorePathError as e:
        logger.debug(f"Rejected {type_name} {raw!r}: {e}")
        raise


@cache
def _cached_names(cls: type) -> tuple[str, ...]:
    """Names of the cached_property attributes defined on ``cls`` and its bases."""
    return tuple(
        name for klass in cls.__mro__ for name, attr in vars(klass).items() if isinstance(attr, cached_property)
    )


class PathValue(BaseModel):
    """Immutable value parsed from and formatted to a canonical string.

    Subclasses implement ``_fields_from_str`` (string to field mapping),
    ``_key`` (comparison key) and ``__str__``.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    @model_validator(mode="before")
    @classmethod
    def _accept_string(cls, data: Any) -> Any:
        """Let pydantic validate the canonical string form directly."""
        if isinstance(data, str):
            with log_rejection(cls.__name__, data):
                return cls._fields_from_str(data)
        return data

    @model_serializer
    def _serialize(self) -> str:
        return str(self)

    @classmethod
    def _fields_from_str(cls, s: str) -> dict[str, Any]:
        raise NotImplementedError

    def _key(self) -> tuple[str, ...]:
        raise NotImplementedError

    @classmethod
    def from_str(cls, s: str) -> Self:
        """Parse the canonical string form.

        Raises:
            FirestorePathError: If the string is not a valid value of this type.
            pydantic.ValidationError: If ``s`` is not a string.
        """
        return cls.model_validate(s)

    def model_copy(self, *, update: Mapping[str, Any] | None = None, deep: bool = False) -> Self:
        """Copy with optional field updates; cached derived values are recomputed."""
        copied = super().model_copy(update=update, deep=deep)
        for name in _cached_names(type(self)):
            copied.__dict__.pop(name, None)
        return copied

    def __str__(self) -> str:
        raise NotImplementedError

    def __repr__(self) -> str:
        return f"{type(self).__name__}({str(self)!r})"

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._key() == other._key()  # type: ignore[attr-defined]

    def __hash__(self) -> int:
        return hash(self._key())

    def __lt__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._key() < other._key()  # type: ignore[attr-defined]

    def __le__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._key() <= other._key()  # type: ignore[attr-defined]

    def __gt__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._key() > other._key()  # type: ignore[attr-defined]

    def __ge__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._key() >= other._key()  # type: ignore[attr-defined]
