"""
Unit tests for the settings grid search.
"""

import pytest

from moresettings.core.models import Setting
from moresettings.settings import DataPage, SettingsSearch, paginate
from moresettings.utils.validation import ValidationError


def ids(page: DataPage) -> list[int]:
    return [setting.id for setting in page.items]


class TestSettingsSearch:
    """Tests for SettingsSearch.search"""

    def test_no_filters_sorted_by_id(self, sample_settings):
        page = SettingsSearch().search(sample_settings, {})

        assert ids(page) == [1, 2, 3, 4, 5]
        assert page.total_count == 5
        assert page.page_count == 1
        assert all(isinstance(s, Setting) for s in page.items)

    def test_equality_filters(self, sample_settings):
        page = SettingsSearch().search(sample_settings, {"SettingsSearch": {"status": "1", "cat_id": "2"}})
        assert ids(page) == [3]

    def test_status_zero_is_a_filter(self, sample_settings):
        page = SettingsSearch().search(sample_settings, {"SettingsSearch": {"status": 0}})
        assert ids(page) == [4, 5]

    def test_name_substring_case_insensitive(self, sample_settings):
        page = SettingsSearch().search(sample_settings, {"SettingsSearch": {"name": "MAIL"}})
        assert ids(page) == [3, 4]

    def test_label_matches_title(self, sample_settings):
        page = SettingsSearch().search(sample_settings, {"SettingsSearch": {"label": "server"}})
        assert ids(page) == [3, 4]

    def test_blank_filters_ignored(self, sample_settings):
        page = SettingsSearch().search(
            sample_settings, {"SettingsSearch": {"status": "", "name": "  ", "label": None}}
        )
        assert ids(page) == [1, 2, 3, 4, 5]

    def test_invalid_filters_return_unfiltered(self, sample_settings):
        search = SettingsSearch()
        page = search.search(sample_settings, {"SettingsSearch": {"status": "active", "name": "mail"}})

        assert ids(page) == [1, 2, 3, 4, 5]
        assert search.errors == {"status": ["Status must be an integer."]}

    def test_very_long_status_filter(self, sample_settings):
        search = SettingsSearch()
        page = search.search(sample_settings, {"SettingsSearch": {"status": "9" * 5000}})

        assert ids(page) == []
        assert not search.has_errors()

    def test_non_ascii_digit_filter_returns_unfiltered(self, sample_settings):
        search = SettingsSearch()
        page = search.search(sample_settings, {"SettingsSearch": {"cat_id": "\u0661"}})

        assert ids(page) == [1, 2, 3, 4, 5]
        assert list(search.errors) == ["cat_id"]

    def test_unscoped_params(self, sample_settings):
        page = SettingsSearch().search(sample_settings, {"cat_id": 1}, form_name="")
        assert ids(page) == [1, 2]

    def test_unsafe_params_ignored(self, sample_settings):
        page = SettingsSearch().search(sample_settings, {"id": 3, "value": "x"}, form_name="")
        assert ids(page) == [1, 2, 3, 4, 5]

    def test_sort_descending(self, sample_settings):
        page = SettingsSearch().search(sample_settings, {}, sort="-id")
        assert ids(page) == [5, 4, 3, 2, 1]

    def test_sort_by_name(self, sample_settings):
        page = SettingsSearch().search(sample_settings, {}, sort="name")
        assert [s.name for s in page.items] == ["mail_host", "mail_port", "maintenance", "site_logo", "site_title"]

    def test_unsortable_field(self, sample_settings):
        with pytest.raises(ValidationError, match="not sortable"):
            SettingsSearch().search(sample_settings, {}, sort="value")

    def test_default_page_size_is_fifty(self, many_settings):
        page = SettingsSearch().search(many_settings, {})

        assert page.page_size == 50
        assert page.page_count == 3
        assert ids(page) == list(range(1, 51))
        assert page.has_next is True

    def test_last_page(self, many_settings):
        page = SettingsSearch().search(many_settings, {}, page=3)

        assert ids(page) == list(range(101, 121))
        assert page.has_next is False

    def test_page_size_from_environment(self, many_settings, monkeypatch):
        monkeypatch.setenv("SETTINGS_PAGE_SIZE", "100")
        page = SettingsSearch().search(many_settings, {})
        assert page.page_size == 100
        assert page.page_count == 2

    def test_filter_then_paginate(self, many_settings):
        page = SettingsSearch().search(many_settings, {"cat_id": "0"}, form_name="", page_size=10)

        assert page.total_count == 40
        assert ids(page) == [3, 6, 9, 12, 15, 18, 21, 24, 27, 30]

    def test_accepts_setting_models(self, sample_settings):
        settings = [Setting(**s) for s in sample_settings]
        page = SettingsSearch().search(settings, {"status": 1}, form_name="")
        assert ids(page) == [1, 2, 3]


class TestPaginate:
    """Tests for paginate"""

    def test_empty(self):
        page = paginate([], page=1, page_size=50)
        assert page.items == []
        assert page.total_count == 0
        assert page.page_count == 0

    def test_beyond_last_page(self):
        page = paginate(list(range(5)), page=3, page_size=2)
        assert page.items == [4]

        page = paginate(list(range(5)), page=4, page_size=2)
        assert page.items == []
        assert page.page_count == 3

    @pytest.mark.parametrize("page, page_size", [(0, 10), (1, 0), (1, 5000), ("1", 10)])
    def test_invalid_arguments(self, page, page_size):
        with pytest.raises(ValidationError):
            paginate([1, 2, 3], page=page, page_size=page_size)
