"""
Unit tests for blog_backend.application.validators
"""
import pytest

from blog_backend.application.validators import (
    check_email,
    check_min_length,
    check_not_empty,
    first_failure,
)
from blog_backend.core.errors import ValidationError


class TestCheckEmail:
    @pytest.mark.parametrize("value", ["a@x.com", "first.last@example.org"])
    def test_valid(self, value):
        assert check_email(value) is None

    @pytest.mark.parametrize("value", [None, "", "plainaddress", "a@", "@x.com", "a b@x.com"])
    def test_invalid(self, value):
        error = check_email(value)
        assert isinstance(error, ValidationError)
        assert error.status_code == 422
        assert error.message == "E-Mail is invalid."


class TestCheckNotEmpty:
    def test_valid(self):
        assert check_not_empty("A", "name") is None

    @pytest.mark.parametrize("value", [None, "", "   "])
    def test_invalid(self, value):
        assert check_not_empty(value, "name").message == "name must not be empty"


class TestCheckMinLength:
    def test_exactly_five_is_valid(self):
        assert check_min_length("abcde", "password") is None

    def test_short_value(self):
        assert check_min_length("Hi", "title").message == "title must contain at least 5 characters"

    def test_whitespace_does_not_count(self):
        assert check_min_length("  ab  ", "content") is not None

    def test_custom_minimum(self):
        assert check_min_length("abc", "code", minimum=3) is None


class TestFirstFailure:
    def test_all_valid_returns_none(self):
        assert first_failure(None, None) is None

    def test_first_error_wins(self):
        first = ValidationError("first")
        second = ValidationError("second")
        with pytest.raises(ValidationError) as exc_info:
            first_failure(None, first, second)
        assert exc_info.value is first
