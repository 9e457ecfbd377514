"""Tests for record decoding"""

import pytest
from pydantic import ValidationError

from student_directory.models.record import Record, RecordDecodeError, parse_records


class TestRecord:
    """Tests for the Record model"""

    def test_wire_keys(self):
        """Test that camelCase wire keys populate snake_case attributes"""
        record = Record.model_validate(
            {
                "id": "7",
                "name": "Ana Cruz",
                "avatar": "https://example.com/a.png",
                "createdAt": "2025-08-16T04:14:39.021Z",
            }
        )

        assert record.avatar_url == "https://example.com/a.png"
        assert record.created_at == "2025-08-16T04:14:39.021Z"

    def test_avatar_url_alias(self):
        """Test that avatarUrl is accepted as well as avatar"""
        record = Record.model_validate({"id": "1", "avatarUrl": "a.png"})

        assert record.avatar_url == "a.png"

    def test_optional_fields_default_to_none(self):
        """Test that only id is required"""
        record = Record.model_validate({"id": "1"})

        assert record.name is None
        assert record.email is None
        assert record.major is None
        assert record.stage is None
        assert record.level is None
        assert record.created_at is None

    def test_numbers_are_coerced(self):
        """Test that numeric ids and fields become strings"""
        record = Record.model_validate({"id": 3, "level": 2})

        assert record.id == "3"
        assert record.level == "2"

    def test_malformed_optional_fields_read_as_missing(self):
        """Test that wrongly typed optional fields become None"""
        record = Record.model_validate(
            {
                "id": "2",
                "name": "Ben",
                "level": True,
                "major": {"code": "CS"},
                "stage": ["senior"],
                "createdAt": None,
            }
        )

        assert record.name == "Ben"
        assert record.level is None
        assert record.major is None
        assert record.stage is None
        assert record.created_at is None

    def test_unknown_keys_are_ignored(self):
        """Test that extra keys on the wire are dropped"""
        record = Record.model_validate({"id": "1", "favouriteColour": "red"})

        assert not hasattr(record, "favouriteColour")

    def test_frozen(self):
        """Test that records cannot be mutated"""
        record = Record(id="1", name="Ana")

        with pytest.raises(ValidationError):
            record.name = "Ben"


class TestParseRecords:
    """Tests for parse_records"""

    def test_parse_list(self):
        """Test that a list of objects becomes a tuple in order"""
        records = parse_records([{"id": "1"}, {"id": "2", "name": "Ben"}])

        assert isinstance(records, tuple)
        assert [r.id for r in records] == ["1", "2"]

    def test_one_malformed_row_keeps_the_directory(self):
        """Test that a bad optional field does not reject the whole payload"""
        records = parse_records(
            [
                {"id": "1", "name": "Ana Cruz", "major": "CS"},
                {"id": "2", "name": "Ben", "level": True},
            ]
        )

        assert [r.id for r in records] == ["1", "2"]
        assert records[1].level is None

    def test_malformed_id_is_still_rejected(self):
        """Test that id keeps its strict validation"""
        with pytest.raises(RecordDecodeError, match="element 0"):
            _ = parse_records([{"id": {"nested": 1}, "name": "Ana"}])

    def test_parse_empty_list(self):
        """Test that an empty array is a valid, empty directory"""
        assert parse_records([]) == ()

    def test_not_a_list(self):
        """Test that an object payload is rejected"""
        with pytest.raises(RecordDecodeError, match="JSON array"):
            _ = parse_records({"id": "1"})

    def test_element_not_an_object(self):
        """Test that scalar elements are rejected"""
        with pytest.raises(RecordDecodeError, match="element 1"):
            _ = parse_records([{"id": "1"}, "oops"])

    def test_missing_id(self):
        """Test that an element without id is rejected"""
        with pytest.raises(RecordDecodeError, match="element 0"):
            _ = parse_records([{"name": "Ana"}])

    def test_duplicate_id(self):
        """Test that ids must be unique within a load"""
        with pytest.raises(RecordDecodeError, match="duplicate"):
            _ = parse_records([{"id": "1"}, {"id": 1}])
