"""
Settings grid search and pagination.
"""

from .pagination import DataPage, paginate
from .search import SettingsSearch

__all__ = ["DataPage", "SettingsSearch", "paginate"]
