"""Fully-qualified resource names.

``DatabaseName`` is ``projects/{project_id}/databases/{database_id}`` and
``RootDocumentName`` appends ``/documents``. Collection and document names
are a root document name followed by a relative path:

    projects/my-project/databases/(default)/documents/chatrooms/chatroom1

Names are at most 6144 bytes long. A collection name has an odd number of
segments after the five root segments and a document name an even number
(at least two).

Example:
    >>> from firestore_path import DatabaseName
    >>> db = DatabaseName.from_project_id("my-project")
    >>> name = db.collection("chatrooms").doc("chatroom1")
    >>> str(name)
    'projects/my-project/databases/(default)/documents/chatrooms/chatroom1'
    >>> str(name.parent())
    'projects/my-project/databases/(default)/documents/chatrooms'
"""

from functools import cached_property
from typing import Any

from pydantic import field_validator

from firestore_path._base import PathValue
from firestore_path.exceptions import ErrorKind, FirestorePathError
from firestore_path.ids import (
    CollectionId,
    DatabaseId,
    DocumentId,
    DocumentIdLike,
    ProjectId,
    ProjectIdLike,
    byte_length,
)
from firestore_path.paths import (
    CollectionPath,
    CollectionPathLike,
    DocumentPath,
    DocumentPathLike,
    to_collection_path,
    to_document_path,
)
from firestore_path.settings import Settings, settings

MAX_NAME_BYTES = 6 * 1024
ROOT_SEGMENT_COUNT = 5

_PROJECTS = "projects"
_DATABASES = "databases"
_DOCUMENTS = "documents"


def _split_name(s: str) -> list[str]:
    """Check the overall length of a name and split it into segments."""
    if not 1 <= byte_length(s) <= MAX_NAME_BYTES:
        raise FirestorePathError(ErrorKind.LENGTH_OUT_OF_BOUNDS)
    return s.split("/")


def _parse_database_parts(parts: list[str]) -> dict[str, Any]:
    if parts[0] != _PROJECTS or parts[2] != _DATABASES:
        raise FirestorePathError(ErrorKind.INVALID_NAME)
    return {"project_id": ProjectId(parts[1]), "database_id": DatabaseId(parts[3])}


class DatabaseName(PathValue):
    """Name of a Firestore database: ``projects/{project_id}/databases/{database_id}``.

    Attributes:
        project_id: Project owning the database.
        database_id: Database within the project.

    Example:
        >>> DatabaseName.new(ProjectId("my-project"), DatabaseId("my-database"))
        DatabaseName('projects/my-project/databases/my-database')
    """

    project_id: ProjectId
    database_id: DatabaseId

    @classmethod
    def new(cls, project_id: ProjectId, database_id: DatabaseId) -> "DatabaseName":
        return cls(project_id=project_id, database_id=database_id)

    @classmethod
    def from_project_id(cls, project_id: ProjectIdLike) -> "DatabaseName":
        """Name of the ``(default)`` database of a project.

        Raises:
            FirestorePathError: If ``project_id`` is a string that is not a
                valid project id.
        """
        if isinstance(project_id, str):
            project_id = ProjectId(project_id)
        return cls(project_id=project_id, database_id=DatabaseId.default())

    @classmethod
    def from_settings(cls, config: Settings | None = None) -> "DatabaseName":
        """Name built from FIRESTORE_PROJECT_ID and FIRESTORE_DATABASE_ID.

        Args:
            config: Settings to read; the process-wide settings when omitted.

        Raises:
            FirestorePathError: If the configured project id is missing or
                either configured id is invalid.
        """
        if config is None:
            config = settings
        return cls(
            project_id=ProjectId(config.firestore_project_id),
            database_id=DatabaseId(config.firestore_database_id),
        )

    @classmethod
    def _fields_from_str(cls, s: str) -> dict[str, Any]:
        parts = _split_name(s)
        if len(parts) != 4:
            raise FirestorePathError(ErrorKind.INVALID_NUMBER_OF_PATH_COMPONENTS)
        return _parse_database_parts(parts)

    @cached_property
    def segments(self) -> tuple[str, ...]:
        return (_PROJECTS, self.project_id.value, _DATABASES, self.database_id.value)

    def _key(self) -> tuple[str, ...]:
        return self.segments

    def __str__(self) -> str:
        return "/".join(self.segments)

    def root_document_name(self) -> "RootDocumentName":
        """The ``.../documents`` root that collections of this database hang off."""
        return RootDocumentName(database_name=self)

    def collection(self, collection_path: CollectionPathLike) -> "CollectionName":
        """Name of a collection in this database.

        Raises:
            FirestorePathError: COLLECTION_PATH_CONVERSION on an invalid string.
        """
        return self.root_document_name().collection(collection_path)

    def doc(self, document_path: DocumentPathLike) -> "DocumentName":
        """Name of a document in this database.

        Raises:
            FirestorePathError: DOCUMENT_PATH_CONVERSION on an invalid string.
        """
        return self.root_document_name().doc(document_path)


class RootDocumentName(PathValue):
    """Root of a database's document tree: ``{database_name}/documents``."""

    database_name: DatabaseName

    @classmethod
    def new(cls, database_name: DatabaseName) -> "RootDocumentName":
        return cls(database_name=database_name)

    @classmethod
    def _fields_from_str(cls, s: str) -> dict[str, Any]:
        parts = _split_name(s)
        if len(parts) != ROOT_SEGMENT_COUNT:
            raise FirestorePathError(ErrorKind.INVALID_NUMBER_OF_PATH_COMPONENTS)
        if parts[4] != _DOCUMENTS:
            raise FirestorePathError(ErrorKind.INVALID_NAME)
        return {"database_name": DatabaseName(**_parse_database_parts(parts))}

    @property
    def project_id(self) -> ProjectId:
        return self.database_name.project_id

    @property
    def database_id(self) -> DatabaseId:
        return self.database_name.database_id

    @cached_property
    def segments(self) -> tuple[str, ...]:
        return (*self.database_name.segments, _DOCUMENTS)

    def _key(self) -> tuple[str, ...]:
        return self.segments

    def __str__(self) -> str:
        return "/".join(self.segments)

    def collection(self, collection_path: CollectionPathLike) -> "CollectionName":
        """Name of a collection below this root.

        Raises:
            FirestorePathError: COLLECTION_PATH_CONVERSION on an invalid string.
        """
        return CollectionName(root_document_name=self, collection_path=to_collection_path(collection_path))

    def doc(self, document_path: DocumentPathLike) -> "DocumentName":
        """Name of a document below this root.

        Raises:
            FirestorePathError: DOCUMENT_PATH_CONVERSION on an invalid string.
        """
        return DocumentName(root_document_name=self, document_path=to_document_path(document_path))


class _RootedName(PathValue):
    """Shared parts of CollectionName and DocumentName."""

    root_document_name: RootDocumentName

    @field_validator("root_document_name", mode="before")
    @classmethod
    def _promote_database_name(cls, v: Any) -> Any:
        if isinstance(v, DatabaseName):
            return v.root_document_name()
        return v

    @staticmethod
    def _split_rooted(s: str, ends_with_document: bool) -> tuple[RootDocumentName, str]:
        parts = _split_name(s)
        remainder = len(parts) - ROOT_SEGMENT_COUNT
        min_remainder = 2 if ends_with_document else 1
        if remainder < min_remainder or (remainder % 2 == 0) != ends_with_document:
            raise FirestorePathError(ErrorKind.INVALID_NUMBER_OF_PATH_COMPONENTS)
        root = RootDocumentName.from_str("/".join(parts[:ROOT_SEGMENT_COUNT]))
        return root, "/".join(parts[ROOT_SEGMENT_COUNT:])

    @property
    def database_name(self) -> DatabaseName:
        return self.root_document_name.database_name

    def into_root_document_name(self) -> RootDocumentName:
        """Same as the ``root_document_name`` attribute."""
        return self.root_document_name

    def _key(self) -> tuple[str, ...]:
        return self.segments  # type: ignore[attr-defined]

    def __str__(self) -> str:
        return "/".join(self.segments)  # type: ignore[attr-defined]


class CollectionName(_RootedName):
    """Fully-qualified collection name.

    Attributes:
        root_document_name: Root of the database the collection lives in.
        collection_path: Path of the collection below the root.
    """

    collection_path: CollectionPath

    @classmethod
    def new(cls, root: RootDocumentName | DatabaseName, collection_path: CollectionPath) -> "CollectionName":
        """Combine a root (either form) with a relative collection path."""
        return cls(root_document_name=root, collection_path=collection_path)

    @classmethod
    def _fields_from_str(cls, s: str) -> dict[str, Any]:
        root, relative = cls._split_rooted(s, ends_with_document=False)
        return {"root_document_name": root, "collection_path": CollectionPath.from_str(relative)}

    @cached_property
    def segments(self) -> tuple[str, ...]:
        return (*self.root_document_name.segments, *self.collection_path.segments)

    @property
    def collection_id(self) -> CollectionId:
        return self.collection_path.collection_id

    def doc(self, document_id: DocumentIdLike) -> "DocumentName":
        """Name of a document in this collection.

        Raises:
            FirestorePathError: DOCUMENT_ID_CONVERSION on an invalid string.
        """
        return DocumentName(
            root_document_name=self.root_document_name,
            document_path=self.collection_path.doc(document_id),
        )

    def parent(self) -> "DocumentName | None":
        """The document holding this collection, or None for a root collection."""
        document_path = self.collection_path.parent()
        if document_path is None:
            return None
        return DocumentName(root_document_name=self.root_document_name, document_path=document_path)

    def into_parent(self) -> "DocumentName | None":
        """Same as ``parent()``; values are immutable, so nothing is consumed."""
        return self.parent()


class DocumentName(_RootedName):
    """Fully-qualified document name.

    Attributes:
        root_document_name: Root of the database the document lives in.
        document_path: Path of the document below the root.
    """

    document_path: DocumentPath

    @classmethod
    def new(cls, root: RootDocumentName | DatabaseName, document_path: DocumentPath) -> "DocumentName":
        """Combine a root (either form) with a relative document path."""
        return cls(root_document_name=root, document_path=document_path)

    @classmethod
    def _fields_from_str(cls, s: str) -> dict[str, Any]:
        root, relative = cls._split_rooted(s, ends_with_document=True)
        return {"root_document_name": root, "document_path": DocumentPath.from_str(relative)}

    @cached_property
    def segments(self) -> tuple[str, ...]:
        return (*self.root_document_name.segments, *self.document_path.segments)

    @property
    def collection_id(self) -> CollectionId:
        return self.document_path.collection_id

    @property
    def document_id(self) -> DocumentId:
        return self.document_path.document_id

    def collection(self, collection_path: CollectionPathLike) -> CollectionName:
        """Name of a collection below this document.

        Multi-segment paths are re-rooted under this document, see
        ``DocumentPath.collection``.

        Raises:
            FirestorePathError: COLLECTION_PATH_CONVERSION on an invalid string.
        """
        return CollectionName(
            root_document_name=self.root_document_name,
            collection_path=self.document_path.collection(collection_path),
        )

    def doc(self, document_path: DocumentPathLike) -> "DocumentName":
        """Name of a document below this document.

        Raises:
            FirestorePathError: DOCUMENT_PATH_CONVERSION on an invalid string.
        """
        return DocumentName(
            root_document_name=self.root_document_name,
            document_path=self.document_path.doc(document_path),
        )

    def parent(self) -> CollectionName:
        """The collection holding this document."""
        return CollectionName(
            root_document_name=self.root_document_name,
            collection_path=self.document_path.parent(),
        )

    def into_parent(self) -> CollectionName:
        """Same as ``parent()``; values are immutable, so nothing is consumed."""
        return self.parent()

    def parent_document_name(self) -> "DocumentName | None":
        """The document two levels up, or None for a top-level document."""
        return self.parent().parent()

    def into_parent_document_name(self) -> "DocumentName | None":
        """Same as ``parent_document_name()``."""
        return self.parent_document_name()


__all__ = [
    "CollectionName",
    "DatabaseName",
    "DocumentName",
    "RootDocumentName",
    "MAX_NAME_BYTES",
]
