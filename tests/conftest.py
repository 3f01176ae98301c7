"""Common test fixtures for firestore-path."""

import pytest

from firestore_path import (
    CollectionName,
    CollectionPath,
    DatabaseId,
    DatabaseName,
    DocumentName,
    DocumentPath,
    ProjectId,
    RootDocumentName,
)

ROOT = "projects/my-project/databases/my-database/documents"


@pytest.fixture
def database_name() -> DatabaseName:
    return DatabaseName.new(ProjectId("my-project"), DatabaseId("my-database"))


@pytest.fixture
def root_document_name(database_name: DatabaseName) -> RootDocumentName:
    return database_name.root_document_name()


@pytest.fixture
def chatrooms() -> CollectionPath:
    return CollectionPath.from_str("chatrooms")


@pytest.fixture
def chatroom() -> DocumentPath:
    return DocumentPath.from_str("chatrooms/chatroom1")


@pytest.fixture
def messages_name() -> CollectionName:
    return CollectionName.from_str(f"{ROOT}/chatrooms/chatroom1/messages")


@pytest.fixture
def message_name() -> DocumentName:
    return DocumentName.from_str(f"{ROOT}/chatrooms/chatroom1/messages/message1")

