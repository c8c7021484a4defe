"""Tests for blog input validation and the likes default."""

from fractions import Fraction

import pytest

from bloglist.core.modules.blog.validators import MAX_LIKES, normalize_likes, validate_new_blog
from bloglist.errors import MissingRequiredFieldError, ValidationError


class TestValidateNewBlog:
    """Tests for required blog fields."""

    def test_title_and_url_accepted(self):
        assert validate_new_blog("T", "u") == ("T", "u")

    @pytest.mark.parametrize(
        ("title", "url"),
        [(None, "http://x"), ("Title", None), (None, None), ("", "http://x"), ("Title", "")],
    )
    def test_missing_field_raises(self, title, url):
        with pytest.raises(MissingRequiredFieldError, match="title and url are required"):
            validate_new_blog(title, url)

    def test_missing_field_is_a_validation_error(self):
        with pytest.raises(ValidationError) as exc_info:
            validate_new_blog(None, "http://x")
        assert exc_info.value.error_type == "missing_required_field"


class TestNormalizeLikes:
    """Tests for likes normalization."""

    def test_absent_defaults_to_zero(self):
        assert normalize_likes(None) == 0

    @pytest.mark.parametrize("value", ["5", "many", [], {}, True, False])
    def test_non_numbers_default_to_zero(self, value):
        """Strings, containers and booleans are treated as absent."""
        assert normalize_likes(value) == 0

    def test_integer_kept(self):
        assert normalize_likes(17) == 17

    def test_zero_kept(self):
        assert normalize_likes(0) == 0

    def test_whole_float_becomes_int(self):
        result = normalize_likes(4.0)
        assert result == 4
        assert isinstance(result, int)

    def test_whole_fraction_becomes_int(self):
        assert normalize_likes(Fraction(6, 2)) == 3

    def test_largest_storable_count_kept(self):
        assert normalize_likes(MAX_LIKES) == 2**63 - 1

    @pytest.mark.parametrize("value", [-1, 2.5, float("inf"), float("nan"), 2**63, 10**30, 1e19])
    def test_invalid_numbers_raise(self, value):
        with pytest.raises(ValidationError, match="non-negative integer"):
            normalize_likes(value)
