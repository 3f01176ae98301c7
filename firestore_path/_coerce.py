"""Conversion of caller-supplied arguments into validated values.

Navigation methods accept either an already-built value or its raw string
form. A raw string that fails to parse is reported as a conversion error that
names the argument type and carries the nested failure's message.
"""

from typing import TypeVar

from firestore_path._base import PathValue
from firestore_path.exceptions import ErrorKind, FirestorePathError

TValue = TypeVar("TValue", bound=PathValue)


def convert(value: object, target: type[TValue], kind: ErrorKind) -> TValue:
    """Return ``value`` as an instance of ``target``.

    Args:
        value: An instance of ``target`` (returned as is) or a string to parse.
        target: The expected value type.
        kind: Conversion kind raised when the string does not parse.

    Raises:
        FirestorePathError: ``kind``, wrapping the parse failure.
        TypeError: If ``value`` is neither a ``target`` nor a string.
    """
    if isinstance(value, target):
        return value
    if not isinstance(value, str):
        raise TypeError(f"Expected {target.__name__} or str, got {type(value).__name__}")
    try:
        return target.from_str(value)
    except FirestorePathError as e:
        raise FirestorePathError.conversion(kind, e) from e
