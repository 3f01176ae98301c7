"""Relative paths: chains of alternating collection and document ids.

A ``CollectionPath`` is ``{collection_id}`` or
``{document_path}/{collection_id}``; a ``DocumentPath`` is always
``{collection_path}/{document_id}``. Each level holds its parent, so the
structure is a linked chain ending at a root collection.

Parsing and formatting walk the chain iteratively, which keeps very deep paths
(thousands of segments) clear of the interpreter's recursion limit while
reporting exactly the errors the recursive grammar implies.

Example:
    >>> from firestore_path import CollectionPath, DocumentPath
    >>> rooms = CollectionPath.from_str("chatrooms")
    >>> room = rooms.doc("chatroom1")
    >>> str(room.collection("messages/message1/replies"))
    'chatrooms/chatroom1/messages/message1/replies'
"""

from functools import cached_property
from typing import Any, Sequence, Union

from firestore_path._base import PathValue
from firestore_path._coerce import convert
from firestore_path.exceptions import ErrorKind, FirestorePathError
from firestore_path.ids import CollectionId, CollectionIdLike, DocumentId, DocumentIdLike, Identifier

Node = Union["CollectionPath", "DocumentPath"]


def _parse_ids(s: str, ends_with_document: bool) -> list[Identifier]:
    """Split ``s`` into validated ids, root first.

    A parity mismatch means the root segment would have to be a parentless
    document path, so it is reported as NOT_CONTAINS_SLASH before any segment
    is validated.
    """
    parts = s.split("/")
    if (len(parts) % 2 == 0) != ends_with_document:
        raise FirestorePathError(ErrorKind.NOT_CONTAINS_SLASH)
    return [CollectionId(part) if i % 2 == 0 else DocumentId(part) for i, part in enumerate(parts)]


def _extend(base: "DocumentPath | None", ids: Sequence[Identifier]) -> Node:
    """Attach ``ids`` (starting with a collection id) below ``base``."""
    assert ids, "a relative path has at least one segment"
    node: Any = base
    for i, identifier in enumerate(ids):
        if i % 2 == 0:
            node = CollectionPath(document_path=node, collection_id=identifier)
        else:
            node = DocumentPath(collection_path=node, document_id=identifier)
    return node


class CollectionPath(PathValue):
    """Relative path to a collection, e.g. ``chatrooms/chatroom1/messages``.

    Attributes:
        collection_id: The last segment.
        document_path: The enclosing document, or None for a root collection.
    """

    collection_id: CollectionId
    document_path: "DocumentPath | None" = None

    @classmethod
    def new(cls, parent: "DocumentPath | None", collection_id: CollectionIdLike) -> "CollectionPath":
        """Combine an optional parent document path with a collection id.

        Raises:
            FirestorePathError: COLLECTION_ID_CONVERSION if ``collection_id`` is a
                string that is not a valid collection id.
        """
        collection_id = convert(collection_id, CollectionId, ErrorKind.COLLECTION_ID_CONVERSION)
        return cls(document_path=parent, collection_id=collection_id)

    @classmethod
    def _fields_from_str(cls, s: str) -> dict[str, Any]:
        leaf = _extend(None, _parse_ids(s, ends_with_document=False))
        assert isinstance(leaf, CollectionPath)
        return {"document_path": leaf.document_path, "collection_id": leaf.collection_id}

    @cached_property
    def ids(self) -> tuple[Identifier, ...]:
        """Every identifier in the path, root first."""
        ids: list[Identifier] = []
        node: Any = self
        while node is not None:
            if isinstance(node, CollectionPath):
                ids.append(node.collection_id)
                node = node.document_path
            else:
                ids.append(node.document_id)
                node = node.collection_path
        ids.reverse()
        return tuple(ids)

    @cached_property
    def segments(self) -> tuple[str, ...]:
        """The string segments, root first."""
        return tuple(identifier.value for identifier in self.ids)

    def _key(self) -> tuple[str, ...]:
        return self.segments

    def __str__(self) -> str:
        return "/".join(self.segments)

    def parent(self) -> "DocumentPath | None":
        """The enclosing document path, or None at the root."""
        return self.document_path

    def into_parent(self) -> "DocumentPath | None":
        """Same as ``parent()``; values are immutable, so nothing is consumed."""
        return self.parent()

    def doc(self, document_id: DocumentIdLike) -> "DocumentPath":
        """Descend into a document of this collection.

        Raises:
            FirestorePathError: DOCUMENT_ID_CONVERSION if ``document_id`` is a
                string that is not a valid document id.
        """
        return DocumentPath.new(self, document_id)


class DocumentPath(PathValue):
    """Relative path to a document, e.g. ``chatrooms/chatroom1``.

    Attributes:
        collection_path: The collection holding the document. Always present.
        document_id: The last segment.
    """

    collection_path: CollectionPath
    document_id: DocumentId

    @classmethod
    def new(cls, collection_path: CollectionPath, document_id: DocumentIdLike) -> "DocumentPath":
        """Combine a collection path with a document id.

        Raises:
            FirestorePathError: DOCUMENT_ID_CONVERSION if ``document_id`` is a
                string that is not a valid document id.
        """
        document_id = convert(document_id, DocumentId, ErrorKind.DOCUMENT_ID_CONVERSION)
        return cls(collection_path=collection_path, document_id=document_id)

    @classmethod
    def _fields_from_str(cls, s: str) -> dict[str, Any]:
        leaf = _extend(None, _parse_ids(s, ends_with_document=True))
        assert isinstance(leaf, DocumentPath)
        return {"collection_path": leaf.collection_path, "document_id": leaf.document_id}

    @cached_property
    def ids(self) -> tuple[Identifier, ...]:
        """Every identifier in the path, root first."""
        return (*self.collection_path.ids, self.document_id)

    @cached_property
    def segments(self) -> tuple[str, ...]:
        """The string segments, root first."""
        return tuple(identifier.value for identifier in self.ids)

    @property
    def collection_id(self) -> CollectionId:
        """Id of the collection holding this document."""
        return self.collection_path.collection_id

    def _key(self) -> tuple[str, ...]:
        return self.segments

    def __str__(self) -> str:
        return "/".join(self.segments)

    def parent(self) -> CollectionPath:
        """The collection holding this document. Document paths are never root."""
        return self.collection_path

    def into_parent(self) -> CollectionPath:
        """Same as ``parent()``; values are immutable, so nothing is consumed."""
        return self.parent()

    def collection(self, collection_path: "CollectionPathLike") -> CollectionPath:
        """Descend into a collection below this document.

        A multi-segment ``collection_path`` is re-rooted under this document:
        its ids are read root first and rebuilt on top of ``self``, so
        ``chatrooms/chatroom1`` + ``messages/message1/col`` gives
        ``chatrooms/chatroom1/messages/message1/col``.

        Raises:
            FirestorePathError: COLLECTION_PATH_CONVERSION if ``collection_path``
                is a string that is not a valid collection path.
        """
        relative = to_collection_path(collection_path)
        leaf = _extend(self, relative.ids)
        assert isinstance(leaf, CollectionPath)
        return leaf

    def doc(self, document_path: "DocumentPathLike") -> "DocumentPath":
        """Descend into a document below this document.

        ``document_path`` is relative to ``self`` and therefore has at least
        two segments (``collection/document``).

        Raises:
            FirestorePathError: DOCUMENT_PATH_CONVERSION if ``document_path`` is
                a string that is not a valid document path.
        """
        relative = to_document_path(document_path)
        leaf = _extend(self, relative.ids)
        assert isinstance(leaf, DocumentPath)
        return leaf


CollectionPath.model_rebuild()
DocumentPath.model_rebuild()

CollectionPathLike = CollectionPath | CollectionId | str
DocumentPathLike = DocumentPath | str


def to_collection_path(value: CollectionPathLike) -> CollectionPath:
    """Convert a collection path argument.

    Raises:
        FirestorePathError: COLLECTION_PATH_CONVERSION on an invalid string.
    """
    if isinstance(value, CollectionId):
        return CollectionPath(collection_id=value)
    return convert(value, CollectionPath, ErrorKind.COLLECTION_PATH_CONVERSION)


def to_document_path(value: DocumentPathLike) -> DocumentPath:
    """Convert a document path argument.

    Raises:
        FirestorePathError: DOCUMENT_PATH_CONVERSION on an invalid string.
    """
    return convert(value, DocumentPath, ErrorKind.DOCUMENT_PATH_CONVERSION)


__all__ = [
    "CollectionPath",
    "CollectionPathLike",
    "DocumentPath",
    "DocumentPathLike",
    "to_collection_path",
    "to_document_path",
]
