"""
Unit tests for input validation helpers.
"""

import pytest

from moresettings.utils.validation import (
    ValidationError,
    validate_page,
    validate_page_size,
    validate_sort_field,
)


class TestValidatePage:

    def test_valid(self):
        assert validate_page(1) == 1
        assert validate_page(7) == 7

    @pytest.mark.parametrize("page", [0, -1])
    def test_non_positive(self, page):
        with pytest.raises(ValidationError, match="positive"):
            validate_page(page)

    @pytest.mark.parametrize("page", ["1", 1.0, True, None])
    def test_non_integer(self, page):
        with pytest.raises(ValidationError, match="integer"):
            validate_page(page)

    def test_is_value_error(self):
        with pytest.raises(ValueError):
            validate_page(0)


class TestValidatePageSize:

    def test_valid(self):
        assert validate_page_size(50) == 50
        assert validate_page_size(1000) == 1000

    def test_exceeds_maximum(self):
        with pytest.raises(ValidationError, match="maximum of 1000"):
            validate_page_size(1001)

    def test_custom_maximum(self):
        with pytest.raises(ValidationError, match="maximum of 10"):
            validate_page_size(11, max_page_size=10)

    def test_zero(self):
        with pytest.raises(ValidationError):
            validate_page_size(0)


class TestValidateSortField:

    def test_valid(self):
        assert validate_sort_field(" id ", {"id"}) == "id"
        assert validate_sort_field("-name", {"id", "name"}) == "-name"

    @pytest.mark.parametrize("sort", ["", None, "id; drop", "--id", "1id"])
    def test_invalid(self, sort):
        with pytest.raises(ValidationError):
            validate_sort_field(sort, {"id"})

    def test_not_allowed(self):
        with pytest.raises(ValidationError, match="Allowed: id, name"):
            validate_sort_field("value", {"name", "id"})
