"""firestore-path - Validated Cloud Firestore resource names and paths.

Immutable value types for the identifiers, relative paths and fully-qualified
names used by the Firestore API. Every type parses from and formats to its
canonical slash-delimited string, rejects invalid input with a
FirestorePathError carrying a single ErrorKind, and works as a pydantic field.

Types:
    - **Identifiers**: ProjectId, DatabaseId, CollectionId, DocumentId
    - **Relative paths**: CollectionPath, DocumentPath
    - **Names**: DatabaseName, RootDocumentName, CollectionName, DocumentName

Quick Start:
    >>> from firestore_path import DatabaseName, DocumentName
    >>>
    >>> db = DatabaseName.from_project_id("my-project")
    >>> message = db.doc("chatrooms/chatroom1").collection("messages").doc("message1")
    >>> str(message)
    'projects/my-project/databases/(default)/documents/chatrooms/chatroom1/messages/message1'
    >>> DocumentName.from_str(str(message)) == message
    True

Optional Environment Variables:
    - FIRESTORE_PROJECT_ID: Project for DatabaseName.from_settings()
    - FIRESTORE_DATABASE_ID: Database for DatabaseName.from_settings()
    - FIRESTORE_PATH_LOG_LEVEL: Level of the library loggers under setup_logging()
"""

from .exceptions import ErrorKind, FirestorePathError
from .ids import CollectionId, DatabaseId, DocumentId, ProjectId
from .logging import LoggingConfig, get_path_logger, setup_logging
from .names import CollectionName, DatabaseName, DocumentName, RootDocumentName
from .paths import CollectionPath, DocumentPath
from .settings import Settings, settings

__version__ = "0.1.0"

__all__ = [
    # Errors
    "ErrorKind",
    "FirestorePathError",
    # Identifiers
    "ProjectId",
    "DatabaseId",
    "CollectionId",
    "DocumentId",
    # Relative paths
    "CollectionPath",
    "DocumentPath",
    # Names
    "DatabaseName",
    "RootDocumentName",
    "CollectionName",
    "DocumentName",
    # Configuration
    "Settings",
    "settings",
    # Logging
    "LoggingConfig",
    "setup_logging",
    "get_path_logger",
]
