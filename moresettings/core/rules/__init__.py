"""
Validation rule engine, rule configuration and form models.
"""

from .form_model import FormModel, generate_attribute_label
from .rule_config import RuleConfigBuilder, RuleConfigLoader, import_callable
from .rule_engine import RuleEngine

__all__ = [
    "FormModel",
    "RuleEngine",
    "RuleConfigLoader",
    "RuleConfigBuilder",
    "generate_attribute_label",
    "import_callable",
]
