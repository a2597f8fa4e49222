"""
SettingsSearch - filtering, sorting and paging for the settings grid.

Filters are taken from request parameters and validated like any other
form before they are applied; invalid filters produce the unfiltered
listing instead of an error.
"""

import os
import time
from decimal import Decimal
from typing import Any, Iterable

from moresettings.core.models import Setting
from moresettings.core.rules import FormModel, RuleConfigBuilder
from moresettings.observability import metrics
from moresettings.observability.logger import get_logger, log_operation
from moresettings.utils.validation import validate_sort_field

from .pagination import DataPage, paginate

logger = get_logger(__name__)

DEFAULT_PAGE_SIZE = 50


def default_page_size() -> int:
    """Page size from SETTINGS_PAGE_SIZE, or 50."""
    return int(os.getenv("SETTINGS_PAGE_SIZE", str(DEFAULT_PAGE_SIZE)))


class SettingsSearch(FormModel):
    """
    Search form behind the settings grid.

    Equality filters: status, cat_id.
    Substring filters (case-insensitive): name, label (matched against title).
    Default order: id ascending.
    """

    INTEGER_FIELDS = ("status", "created_at", "updated_by", "updated_at", "cat_id", "type")
    SAFE_FIELDS = ("name", "label")
    EQUALITY_FILTERS = ("status", "cat_id")
    LIKE_FILTERS = {"name": "name", "label": "title"}
    SORTABLE_FIELDS = {"id", "name", "title", "status", "cat_id", "type", "created_at", "updated_at"}

    def rules(self) -> list[dict[str, Any]]:
        builder = RuleConfigBuilder()
        for field_name in self.INTEGER_FIELDS:
            builder.add_integer(field_name)
        builder.add_safe(*self.SAFE_FIELDS)
        return builder.build()

    def attribute_labels(self) -> dict[str, str]:
        return {
            "cat_id": "Category",
            "label": "Title",
            "updated_by": "Updated By",
        }

    def search(
        self,
        settings: Iterable[Setting | dict[str, Any]],
        params: dict[str, Any],
        page: int = 1,
        page_size: int | None = None,
        sort: str = "id",
        form_name: str | None = None,
    ) -> DataPage[Setting]:
        """
        Filter, sort and paginate settings.

        Args:
            settings: The settings collection (models or plain dicts)
            params: Request parameters, scoped by form name like load()
            page: 1-based page number
            page_size: Items per page (default: SETTINGS_PAGE_SIZE or 50)
            sort: Sort field, "-" prefix for descending
            form_name: Override the parameter scope passed to load()

        Returns:
            The requested page of matching settings

        Raises:
            ValidationError: If page, page_size or sort is invalid
        """
        sort = validate_sort_field(sort, self.SORTABLE_FIELDS)
        if page_size is None:
            page_size = default_page_size()

        start = time.perf_counter()
        with log_operation("Searching settings", logger=logger, page=page, sort=sort):
            items = [s if isinstance(s, Setting) else Setting.model_validate(s) for s in settings]

            self.load(params, form_name)
            if self.validate():
                items = [s for s in items if self._matches(s)]
                status = "filtered"
            else:
                logger.info("Invalid settings filters, returning unfiltered listing",
                            extra={"errors": self.errors})
                status = "unfiltered"

            items = self._sort(items, sort)
            result = paginate(items, page=page, page_size=page_size)

        metrics.settings_searches_total.labels(status=status).inc()
        metrics.settings_search_duration_seconds.observe(time.perf_counter() - start)
        return result

    def _matches(self, setting: Setting) -> bool:
        for field_name in self.EQUALITY_FILTERS:
            value = self.get_value(field_name)
            if self._is_blank(value):
                continue
            if getattr(setting, field_name) != Decimal(str(value).strip()):
                return False

        for field_name, column in self.LIKE_FILTERS.items():
            value = self.get_value(field_name)
            if self._is_blank(value):
                continue
            if str(value).lower() not in str(getattr(setting, column) or "").lower():
                return False

        return True

    @staticmethod
    def _is_blank(value: Any) -> bool:
        return value is None or (isinstance(value, str) and value.strip() == "")

    @staticmethod
    def _sort(items: list[Setting], sort: str) -> list[Setting]:
        descending = sort.startswith("-")
        column = sort.lstrip("-")
        # None sorts first ascending, last descending
        return sorted(
            items,
            key=lambda s: (getattr(s, column) is not None, getattr(s, column), s.id),
            reverse=descending,
        )
