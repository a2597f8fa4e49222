"""
Validation rule implementations.

Provides the number validator with fixed or deferred bounds, the safe
validator used for attribute loading, and the shared base interface.
"""

from .base_validator import BaseValidator, SubjectProtocol
from .bounds import Deferred, Fixed, InvalidBoundError, as_bound, to_number
from .number_validator import NumberValidator, ResolvedBounds, is_not_number, normalize_number
from .safe_validator import SafeValidator

__all__ = [
    "BaseValidator",
    "SubjectProtocol",
    "Fixed",
    "Deferred",
    "InvalidBoundError",
    "as_bound",
    "to_number",
    "NumberValidator",
    "ResolvedBounds",
    "is_not_number",
    "normalize_number",
    "SafeValidator",
]
