"""Tests for identifier validation."""

import pytest
from pydantic import BaseModel, ValidationError

from firestore_path import (
    CollectionId,
    CollectionPath,
    DatabaseId,
    DocumentId,
    DocumentName,
    ErrorKind,
    FirestorePathError,
    ProjectId,
)


def kind_of(factory, value: str) -> ErrorKind:
    with pytest.raises(FirestorePathError) as exc_info:
        factory(value)
    return exc_info.value.kind


class TestProjectId:
    """Test ProjectId rules."""

    @pytest.mark.parametrize("value", ["my-project", "abcdef", "a" * 30, "project-123", "a1b2c3"])
    def test_accepts_valid(self, value: str):
        assert ProjectId(value).value == value
        assert str(ProjectId(value)) == value

    @pytest.mark.parametrize("value", ["", "abcde", "a" * 31])
    def test_length_bounds(self, value: str):
        assert kind_of(ProjectId, value) == ErrorKind.LENGTH_OUT_OF_BOUNDS

    @pytest.mark.parametrize("value", ["My-project", "my_project", "my.project", "my project", "projéct1"])
    def test_invalid_characters(self, value: str):
        assert kind_of(ProjectId, value) == ErrorKind.CONTAINS_INVALID_CHARACTER

    @pytest.mark.parametrize("value", ["1project", "-project"])
    def test_starts_with_non_letter(self, value: str):
        assert kind_of(ProjectId, value) == ErrorKind.STARTS_WITH_NON_LETTER

    def test_ends_with_hyphen(self):
        assert kind_of(ProjectId, "project-") == ErrorKind.ENDS_WITH_HYPHEN

    @pytest.mark.parametrize("value", ["google", "my-google-app", "nullable", "undefined1", "ssl-project"])
    def test_reserved_words(self, value: str):
        assert kind_of(ProjectId, value) == ErrorKind.MATCHES_RESERVED_ID_PATTERN

    def test_length_checked_before_characters(self):
        assert kind_of(ProjectId, "ABC") == ErrorKind.LENGTH_OUT_OF_BOUNDS

    def test_characters_checked_before_first_letter(self):
        assert kind_of(ProjectId, "1Project") == ErrorKind.CONTAINS_INVALID_CHARACTER

    def test_first_letter_checked_before_reserved_words(self):
        assert kind_of(ProjectId, "1google") == ErrorKind.STARTS_WITH_NON_LETTER

    def test_length_counts_bytes(self):
        # 15 two-byte characters are 30 bytes: still in bounds, rejected on charset
        assert kind_of(ProjectId, "é" * 15) == ErrorKind.CONTAINS_INVALID_CHARACTER
        assert kind_of(ProjectId, "é" * 16) == ErrorKind.LENGTH_OUT_OF_BOUNDS


class TestDatabaseId:
    """Test DatabaseId rules."""

    def test_default(self):
        assert DatabaseId().value == "(default)"
        assert DatabaseId.default() == DatabaseId("(default)")
        assert DatabaseId.DEFAULT == "(default)"
        assert DatabaseId().is_default
        assert not DatabaseId("my-database").is_default

    @pytest.mark.parametrize("value", ["abcd", "my-database", "a" * 63, "db-google"])
    def test_accepts_valid(self, value: str):
        assert str(DatabaseId(value)) == value

    @pytest.mark.parametrize("value", ["", "abc", "a" * 64])
    def test_length_bounds(self, value: str):
        assert kind_of(DatabaseId, value) == ErrorKind.LENGTH_OUT_OF_BOUNDS

    @pytest.mark.parametrize("value", ["(defaults)", "(DEFAULT)", "My-database", "my_database"])
    def test_invalid_characters(self, value: str):
        assert kind_of(DatabaseId, value) == ErrorKind.CONTAINS_INVALID_CHARACTER

    def test_starts_with_non_letter(self):
        assert kind_of(DatabaseId, "1database") == ErrorKind.STARTS_WITH_NON_LETTER

    def test_ends_with_hyphen(self):
        assert kind_of(DatabaseId, "database-") == ErrorKind.ENDS_WITH_HYPHEN


@pytest.mark.parametrize("id_type", [CollectionId, DocumentId])
class TestSegmentIds:
    """CollectionId and DocumentId share the same rules."""

    @pytest.mark.parametrize("value", ["chatrooms", "a", "a" * 1500, "é" * 750, "...", "__foo", "foo__", "_", "(default)"])
    def test_accepts_valid(self, id_type, value: str):
        assert id_type(value).value == value

    @pytest.mark.parametrize("value", ["", "a" * 1501, "é" * 751, "/" * 1501])
    def test_length_bounds(self, id_type, value: str):
        assert kind_of(id_type, value) == ErrorKind.LENGTH_OUT_OF_BOUNDS

    @pytest.mark.parametrize("value", ["/", "a/b", "chatrooms/"])
    def test_contains_slash(self, id_type, value: str):
        assert kind_of(id_type, value) == ErrorKind.CONTAINS_SLASH

    @pytest.mark.parametrize("value", [".", ".."])
    def test_single_or_double_period(self, id_type, value: str):
        assert kind_of(id_type, value) == ErrorKind.SINGLE_PERIOD_OR_DOUBLE_PERIODS

    @pytest.mark.parametrize("value", ["__", "___", "__foo__", "__.__"])
    def test_reserved_pattern(self, id_type, value: str):
        assert kind_of(id_type, value) == ErrorKind.MATCHES_RESERVED_ID_PATTERN

    def test_from_str_matches_constructor(self, id_type):
        assert id_type.from_str("rooms") == id_type("rooms")
        with pytest.raises(FirestorePathError, match="contains slash"):
            id_type.from_str("a/b")

    def test_non_string_rejected_by_pydantic(self, id_type):
        with pytest.raises(ValidationError):
            id_type(123)


class TestUnencodableInput:
    """Strings without a UTF-8 encoding never become values."""

    @pytest.mark.parametrize(
        "id_type, value",
        [
            (CollectionId, "\ud800"),
            (DocumentId, "room\udfff"),
            (ProjectId, "my-project\ud800"),
            (DatabaseId, "my-database\ud800"),
        ],
    )
    def test_lone_surrogate_rejected(self, id_type, value: str):
        assert kind_of(id_type, value) == ErrorKind.CONTAINS_INVALID_CHARACTER

    def test_lone_surrogate_in_path_rejected(self):
        with pytest.raises(FirestorePathError) as exc_info:
            CollectionPath.from_str("rooms/\ud800/msgs")
        assert exc_info.value.kind == ErrorKind.CONTAINS_INVALID_CHARACTER

    def test_lone_surrogate_in_name_rejected(self):
        with pytest.raises(FirestorePathError) as exc_info:
            DocumentName.from_str("projects/my-project/databases/(default)/documents/rooms/\ud800")
        assert exc_info.value.kind == ErrorKind.CONTAINS_INVALID_CHARACTER

    def test_astral_characters_accepted(self):
        room = CollectionId("rooms-\U0001f600")
        assert room.model_dump_json() == '"rooms-\U0001f600"'
        assert str(room).encode("utf-8") == b"rooms-\xf0\x9f\x98\x80"


class TestIdentifierValueSemantics:
    """Equality, ordering, hashing and immutability."""

    def test_equality_and_hash(self):
        assert CollectionId("rooms") == CollectionId("rooms")
        assert hash(CollectionId("rooms")) == hash(CollectionId("rooms"))
        assert len({CollectionId("rooms"), CollectionId("rooms"), CollectionId("users")}) == 2

    def test_different_types_never_equal(self):
        assert CollectionId("rooms") != DocumentId("rooms")
        assert CollectionId("rooms") != "rooms"

    def test_ordering_by_value(self):
        ids = [DocumentId("b"), DocumentId("c"), DocumentId("a")]
        assert sorted(ids) == [DocumentId("a"), DocumentId("b"), DocumentId("c")]
        assert DocumentId("a") < DocumentId("b") <= DocumentId("b")

    def test_ordering_across_types_is_an_error(self):
        with pytest.raises(TypeError):
            CollectionId("a") < DocumentId("b")  # noqa: B015

    def test_frozen(self):
        collection_id = CollectionId("rooms")
        with pytest.raises(ValidationError):
            collection_id.value = "users"  # type: ignore[misc]

    def test_repr(self):
        assert repr(ProjectId("my-project")) == "ProjectId('my-project')"
        assert repr(DatabaseId()) == "DatabaseId('(default)')"


class Room(BaseModel):
    collection_id: CollectionId
    document_id: DocumentId


class TestIdentifierAsField:
    """Identifiers validate from and serialize to plain strings."""

    def test_validate_from_strings(self):
        room = Room(collection_id="chatrooms", document_id="chatroom1")  # type: ignore[arg-type]
        assert room.collection_id == CollectionId("chatrooms")
        assert room.document_id == DocumentId("chatroom1")

    def test_dump(self):
        room = Room(collection_id=CollectionId("chatrooms"), document_id=DocumentId("chatroom1"))
        assert room.model_dump() == {"collection_id": "chatrooms", "document_id": "chatroom1"}
        assert room.model_dump_json() == '{"collection_id":"chatrooms","document_id":"chatroom1"}'

    def test_json_round_trip(self):
        room = Room.model_validate_json('{"collection_id":"chatrooms","document_id":"chatroom1"}')
        assert Room.model_validate_json(room.model_dump_json()) == room

    def test_invalid_field_raises_path_error(self):
        with pytest.raises(FirestorePathError) as exc_info:
            Room(collection_id="chatrooms", document_id="..")  # type: ignore[arg-type]
        assert exc_info.value.kind == ErrorKind.SINGLE_PERIOD_OR_DOUBLE_PERIODS

    def test_model_validate_string(self):
        assert CollectionId.model_validate("rooms") == CollectionId("rooms")
        assert CollectionId("rooms").model_dump() == "rooms"
