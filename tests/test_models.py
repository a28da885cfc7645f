"""
Tests for result objects and coercion helpers.
"""

import pytest

from typingdna_client import UserQuery, VerifyResult, InvalidUserIdError
from typingdna_client.models import parse_status, round_half_up


class TestParseStatus:
    """Tests for parse_status."""
    
    @pytest.mark.parametrize("value,expected", [
        ("200", 200),
        (200, 200),
        (" 445 ", 445),
        ("200 OK", 200),
        (200.7, 200),
        (None, None),
        ("", None),
        ("OK", None),
    ])
    def test_parse(self, value, expected):
        assert parse_status(value) == expected


class TestRoundHalfUp:
    """Tests for round_half_up."""
    
    @pytest.mark.parametrize("value,expected", [
        (87.6, 88),
        (91.2, 91),
        (0.5, 1),
        (2.5, 3),
        (-0.5, 0),
        (-1.5, -1),
        ("42.5", 43),
        (7, 7),
    ])
    def test_round(self, value, expected):
        assert round_half_up(value) == expected
    
    def test_not_a_number(self):
        assert round_half_up("abc") is None
        assert round_half_up(float("nan")) is None


class TestVerifyResult:
    """Tests for VerifyResult."""
    
    def test_absent_fields_are_omitted(self):
        """Test that missing scores are not reported as zero."""
        result = VerifyResult.from_response({"status": 200})
        assert result.to_dict() == {"message": None, "success": 0, "statusCode": 200}
    
    def test_null_fields_are_kept(self):
        """Test that null result and score are reported, the score as 0."""
        result = VerifyResult.from_response(
            {"status": "200", "success": 1, "score": None, "result": None}
        )
        assert result.to_dict() == {
            "message": None,
            "success": 1,
            "statusCode": 200,
            "result": None,
            "score": 0,
        }
        assert result.has("score")
        assert not result.has("net_score")


class TestUserQuery:
    """Tests for UserQuery.from_options."""
    
    def test_camel_case_keys(self):
        query = UserQuery.from_options(
            {"userId": "abcdef", "type": "0", "textId": "t1", "device": "desktop"}
        )
        assert query == UserQuery("abcdef", "0", "t1", "desktop")
        assert query.types == ["0"]
    
    def test_snake_case_keys(self):
        query = UserQuery.from_options({"user_id": "abcdef", "text_id": "t1"})
        assert query.text_id == "t1"
        assert query.types == []
    
    def test_list_types(self):
        query = UserQuery("abcdef", type=["0", "", "2"])
        assert query.types == ["0", "2"]
    
    def test_passthrough(self):
        query = UserQuery("abcdef")
        assert UserQuery.from_options(query) is query
    
    def test_blank_user_id(self):
        with pytest.raises(InvalidUserIdError):
            UserQuery.from_options(UserQuery(" \t"))
