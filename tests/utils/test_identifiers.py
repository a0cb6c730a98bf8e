# tests/utils/test_identifiers.py
"""Tests for bloglist/utils/identifiers.py module."""

from uuid import UUID, uuid4

import pytest

from bloglist.errors import MalformedIdentifierError
from bloglist.utils.identifiers import parse_identifier


class TestParseIdentifier:
    """Tests for parse_identifier function."""

    def test_parses_canonical_string(self) -> None:
        value = uuid4()
        assert parse_identifier(str(value)) == value

    def test_parses_hex_without_dashes(self) -> None:
        value = uuid4()
        assert parse_identifier(value.hex) == value

    def test_uuid_is_returned_unchanged(self) -> None:
        value = uuid4()
        assert parse_identifier(value) is value

    @pytest.mark.parametrize("value", ["panko", "", "5a422a851b54a676234d17f7", "123"])
    def test_malformed_value_raises(self, value: str) -> None:
        with pytest.raises(MalformedIdentifierError) as exc_info:
            parse_identifier(value)

        assert exc_info.value.status_code == 400
        assert isinstance(exc_info.value.__cause__, ValueError)

    def test_returns_uuid_type(self) -> None:
        assert isinstance(parse_identifier("0b6c5a1e-3d1b-4a55-9d5e-7f1c2b3a4d5e"), UUID)
