"""
Input validation utilities for listing and paging arguments.

These guard programmatic inputs (page numbers, page sizes, sort keys)
and raise immediately, unlike form rules which report errors on a model.
"""

import re


class ValidationError(ValueError):
    """Raised when input validation fails."""
    pass


def validate_page(page: int, field_name: str = "page") -> int:
    """
    Validate a 1-based page number.

    Args:
        page: The page number to validate
        field_name: Name of the field (for error messages)

    Returns:
        The validated page number

    Raises:
        ValidationError: If validation fails

    Examples:
        >>> validate_page(1)
        1
        >>> validate_page(0)  # doctest: +SKIP
        ValidationError: page must be a positive integer, got 0
    """
    if isinstance(page, bool) or not isinstance(page, int):
        raise ValidationError(f"{field_name} must be an integer, got {type(page).__name__}")

    if page <= 0:
        raise ValidationError(f"{field_name} must be a positive integer, got {page}")

    return page


def validate_page_size(page_size: int, field_name: str = "page_size", max_page_size: int = 1000) -> int:
    """
    Validate a page size.

    Args:
        page_size: The page size to validate
        field_name: Name of the field (for error messages)
        max_page_size: Maximum allowed page size

    Returns:
        The validated page size

    Raises:
        ValidationError: If validation fails

    Examples:
        >>> validate_page_size(50)
        50
        >>> validate_page_size(5000)  # doctest: +SKIP
        ValidationError: page_size exceeds maximum of 1000
    """
    if isinstance(page_size, bool) or not isinstance(page_size, int):
        raise ValidationError(f"{field_name} must be an integer, got {type(page_size).__name__}")

    if page_size <= 0:
        raise ValidationError(f"{field_name} must be a positive integer, got {page_size}")

    if page_size > max_page_size:
        raise ValidationError(f"{field_name} exceeds maximum of {max_page_size}")

    return page_size


def validate_sort_field(sort_field: str, allowed: set[str], field_name: str = "sort") -> str:
    """
    Validate a sort key against the sortable fields.

    Args:
        sort_field: Field name, optionally prefixed with "-" for descending order
        allowed: Fields that may be sorted on
        field_name: Name of the field (for error messages)

    Returns:
        The validated sort key (stripped of whitespace)

    Raises:
        ValidationError: If validation fails

    Examples:
        >>> validate_sort_field("-id", {"id", "name"})
        '-id'
    """
    if not sort_field or not isinstance(sort_field, str):
        raise ValidationError(f"{field_name} must be a non-empty string")

    sort_field = sort_field.strip()

    if not re.match(r'^-?[a-zA-Z_][a-zA-Z0-9_]*$', sort_field):
        raise ValidationError(f"{field_name} contains invalid characters")

    if sort_field.lstrip("-") not in allowed:
        raise ValidationError(
            f"{field_name} '{sort_field}' is not sortable. Allowed: {', '.join(sorted(allowed))}"
        )

    return sort_field
