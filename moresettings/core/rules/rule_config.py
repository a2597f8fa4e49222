"""
Rule configuration management.

Loads number validation rules from YAML files and provides a builder
for declaring rules in code.
"""

import importlib
from pathlib import Path
from typing import Any, Callable

import yaml


def import_callable(reference: str) -> Callable:
    """
    Import a callable from a "package.module:attribute" reference.

    Raises:
        ValueError: If the reference is malformed or does not point to a callable
    """
    module_name, sep, attr_path = reference.partition(":")
    if not sep or not module_name or not attr_path:
        raise ValueError(f"Callable reference must look like 'module:function', got '{reference}'")

    try:
        target: Any = importlib.import_module(module_name)
        for attr in attr_path.split("."):
            target = getattr(target, attr)
    except (ImportError, AttributeError) as e:
        raise ValueError(f"Cannot import '{reference}': {e}")

    if not callable(target):
        raise ValueError(f"'{reference}' is not callable")
    return target


class RuleConfigLoader:
    """
    Loads validation rules from YAML configuration files.

    Expected YAML format:
    ```yaml
    rules:
      quantity:
        - type: integer
          params:
            min: 1
            max:
              ref: "shop.bounds:max_quantity"

      price:
        - type: number
          params:
            min: 0.01
            too_small: "{attribute} cannot be free."

      note:
        - type: safe
    ```

    A `ref` bound is imported and called with (subject, field_name) on
    every validation.
    """

    BOUND_KEYS = ("min", "max")

    def __init__(self, config_path: str | Path):
        """
        Initialize the rule config loader.

        Args:
            config_path: Path to the YAML configuration file
        """
        self.config_path = Path(config_path)
        if not self.config_path.exists():
            raise FileNotFoundError(f"Rule configuration file not found: {config_path}")

    def load_rules(self) -> list[dict[str, Any]]:
        """
        Load and parse validation rules from YAML file.

        Returns:
            List of rule dictionaries suitable for RuleEngine

        Raises:
            ValueError: If YAML is invalid or missing required fields
        """
        with open(self.config_path) as f:
            try:
                config = yaml.safe_load(f)
            except yaml.YAMLError as e:
                raise ValueError(f"Invalid YAML in {self.config_path}: {e}")

        if not config or "rules" not in config:
            raise ValueError("Configuration file must contain 'rules' section")

        rules = []
        field_rules = config["rules"]

        for field_name, field_rule_list in field_rules.items():
            if not isinstance(field_rule_list, list):
                raise ValueError(f"Rules for field '{field_name}' must be a list")

            for idx, rule_def in enumerate(field_rule_list):
                rules.append(self._parse_rule(field_name, rule_def, idx))

        return rules

    def _parse_rule(self, field_name: str, rule_def: dict[str, Any], idx: int) -> dict[str, Any]:
        """
        Parse a single rule definition.

        Args:
            field_name: The field this rule applies to
            rule_def: The rule definition from YAML
            idx: Index of this rule for the field (for naming)

        Returns:
            Parsed rule dictionary

        Raises:
            ValueError: If rule definition is invalid
        """
        if not isinstance(rule_def, dict) or "type" not in rule_def:
            raise ValueError(f"Rule for field '{field_name}' is missing 'type'")

        rule_type = rule_def["type"]
        rule_name = rule_def.get("name", f"{field_name}_{rule_type}_{idx}")

        parameters = dict(rule_def.get("params", rule_def.get("parameters")) or {})
        for key in self.BOUND_KEYS:
            bound = parameters.get(key)
            if isinstance(bound, dict):
                if "ref" not in bound:
                    raise ValueError(f"Bound '{key}' of rule '{rule_name}' must be a number or {{ref: ...}}")
                parameters[key] = import_callable(bound["ref"])

        severity = rule_def.get("severity", "error")
        if severity not in ("error", "warning"):
            raise ValueError(f"Invalid severity '{severity}' for rule '{rule_name}'. Must be 'error' or 'warning'")

        enabled = rule_def.get("enabled", True)

        return {
            "rule_name": rule_name,
            "rule_type": rule_type,
            "field_name": field_name,
            "parameters": parameters,
            "severity": severity,
            "enabled": enabled,
        }


class RuleConfigBuilder:
    """
    Programmatically build rule configurations (for form models or tests).
    """

    def __init__(self):
        self.rules: list[dict[str, Any]] = []

    def _add(self, rule_name: str, rule_type: str, field_name: str,
             parameters: dict[str, Any], severity: str) -> "RuleConfigBuilder":
        self.rules.append({
            "rule_name": rule_name,
            "rule_type": rule_type,
            "field_name": field_name,
            "parameters": parameters,
            "severity": severity,
            "enabled": True,
        })
        return self

    def add_number(
        self,
        field_name: str,
        min_value: Any = None,
        max_value: Any = None,
        severity: str = "error",
        **options: Any,
    ) -> "RuleConfigBuilder":
        """Add a number rule; min_value/max_value may be callables(subject, field_name)."""
        params = dict(options)
        if min_value is not None:
            params["min"] = min_value
        if max_value is not None:
            params["max"] = max_value
        return self._add(f"{field_name}_number", "number", field_name, params, severity)

    def add_integer(
        self,
        field_name: str,
        min_value: Any = None,
        max_value: Any = None,
        severity: str = "error",
        **options: Any,
    ) -> "RuleConfigBuilder":
        """Add an integer-only number rule."""
        params = dict(options)
        if min_value is not None:
            params["min"] = min_value
        if max_value is not None:
            params["max"] = max_value
        return self._add(f"{field_name}_integer", "integer", field_name, params, severity)

    def add_safe(self, *field_names: str) -> "RuleConfigBuilder":
        """Mark fields as safe to load without validating them."""
        for field_name in field_names:
            self._add(f"{field_name}_safe", "safe", field_name, {}, "error")
        return self

    def build(self) -> list[dict[str, Any]]:
        """Build and return the rule configuration."""
        return self.rules
