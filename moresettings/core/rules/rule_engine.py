"""
Rule engine for running validation rules against a subject.

The rule engine plays the host role for validators: it instantiates them
from rule configurations, skips empty values, collects formatted errors,
and produces a ValidationResult.
"""

from typing import Any, Iterable

from pydantic import ValidationError as ModelValidationError

from moresettings.core.models import ClientRulePayload, ValidationResult, ValidationRule
from moresettings.core.validators import (
    BaseValidator,
    NumberValidator,
    SafeValidator,
    SubjectProtocol,
)
from moresettings.observability.logger import get_logger

logger = get_logger(__name__)


class _WarningCollector:
    """Subject proxy that keeps a warning rule's errors off the real subject."""

    def __init__(self, subject: SubjectProtocol):
        self.subject = subject
        self.errors: list[tuple[str, str, dict[str, Any]]] = []

    def get_value(self, field_name: str) -> Any:
        return self.subject.get_value(field_name)

    def get_label(self, field_name: str) -> str:
        return self.subject.get_label(field_name)

    def add_error(self, field_name: str, message: str, params: dict[str, Any] | None = None) -> None:
        self.errors.append((field_name, message, params or {}))


class RuleEngine:
    """
    Runs validation rules on subjects.

    Loads rules from configuration and applies them in order, collecting
    every failure rather than stopping at the first one.
    """

    VALIDATOR_REGISTRY = {
        "number": NumberValidator,
        "integer": NumberValidator,
        "safe": SafeValidator,
    }

    def __init__(self, rules: Iterable[dict[str, Any] | ValidationRule]):
        """
        Initialize the rule engine with validation rules.

        Args:
            rules: Rule configurations (dicts or ValidationRule models), each containing:
                   - rule_name: str
                   - rule_type: str (number, integer, safe)
                   - field_name: str
                   - parameters: Dict[str, Any] (optional)
                   - severity: str (error or warning)
                   - enabled: bool (default True)
        """
        self.rules = list(rules)
        self.validators: list[tuple[str, str, BaseValidator]] = []
        self._build_validators()

    def _build_validators(self) -> None:
        """Build validator instances from rule configurations."""
        for raw_rule in self.rules:
            try:
                rule = raw_rule if isinstance(raw_rule, ValidationRule) else ValidationRule.model_validate(raw_rule)
            except ModelValidationError as e:
                if isinstance(raw_rule, dict) and raw_rule.get("rule_type") not in self.VALIDATOR_REGISTRY:
                    raise ValueError(f"Unknown rule type: {raw_rule.get('rule_type')}")
                raise ValueError(f"Invalid rule configuration: {e}")

            if not rule.enabled:
                continue

            validator_class = self.VALIDATOR_REGISTRY[rule.rule_type]
            parameters = dict(rule.parameters or {})
            if rule.rule_type == "integer":
                parameters["integer_only"] = True

            try:
                validator = validator_class(rule.field_name, **parameters)
            except (TypeError, ValueError) as e:
                raise ValueError(f"Failed to create validator for rule '{rule.rule_name}': {e}")

            self.validators.append((rule.rule_name, rule.severity, validator))

    def validate_subject(
        self,
        subject: SubjectProtocol,
        attribute_names: Iterable[str] | None = None,
    ) -> ValidationResult:
        """
        Validate a subject against all rules.

        Args:
            subject: The record to validate
            attribute_names: Only run rules for these fields (default: all)

        Returns:
            ValidationResult containing pass/fail status and formatted errors
        """
        only = set(attribute_names) if attribute_names is not None else None
        passed_rules = []
        failed_rules = []
        warnings = []
        skipped_rules = []
        errors: dict[str, list[str]] = {}

        for rule_name, severity, validator in self.validators:
            if validator.rule_type == "safe":
                continue

            fields = [f for f in validator.attributes if only is None or f in only]
            if not fields:
                continue

            target = subject if severity == "error" else _WarningCollector(subject)
            checked = False
            failed = False
            for field_name in fields:
                if validator.skip_on_empty and validator.is_empty(subject.get_value(field_name)):
                    continue
                checked = True
                outcomes = validator.validate_attribute(target, field_name)
                if outcomes:
                    failed = True
                    if severity == "error":
                        label = subject.get_label(field_name)
                        errors.setdefault(field_name, []).extend(o.render(label) for o in outcomes)

            if not checked:
                skipped_rules.append(rule_name)
            elif not failed:
                passed_rules.append(rule_name)
            elif severity == "error":
                failed_rules.append(rule_name)
            else:
                warnings.append(rule_name)

        passed = len(failed_rules) == 0
        subject_id = getattr(subject, "subject_id", None)

        logger.debug(
            "Validated subject",
            extra={"subject_id": subject_id, "passed": passed, "failed_rules": failed_rules},
        )

        return ValidationResult(
            subject_id=str(subject_id) if subject_id is not None else None,
            passed=passed,
            passed_rules=passed_rules,
            failed_rules=failed_rules,
            warnings=warnings,
            skipped_rules=skipped_rules,
            errors=errors,
        )

    def client_options(self, subject: SubjectProtocol, field_name: str) -> list[ClientRulePayload]:
        """
        Client-side descriptors of every number rule on a field.

        Args:
            subject: The record the form is rendered for
            field_name: The field to describe

        Returns:
            One payload per enabled number/integer rule on the field
        """
        return [
            validator.client_options(subject, field_name)
            for _, _, validator in self.validators
            if isinstance(validator, NumberValidator) and field_name in validator.attributes
        ]

    def safe_attributes(self) -> list[str]:
        """Fields that appear in any enabled rule, in rule order."""
        seen: list[str] = []
        for _, _, validator in self.validators:
            for attribute in validator.attributes:
                if attribute not in seen:
                    seen.append(attribute)
        return seen

    def get_rule_summary(self) -> dict[str, Any]:
        """
        Get summary of loaded rules.

        Returns:
            Dictionary with rule counts and types
        """
        return {
            "total_rules": len(self.validators),
            "rules_by_type": self._count_by_type(),
            "rules_by_severity": self._count_by_severity(),
        }

    def _count_by_type(self) -> dict[str, int]:
        counts: dict[str, int] = {}
        for _, _, validator in self.validators:
            rule_type = validator.rule_type
            counts[rule_type] = counts.get(rule_type, 0) + 1
        return counts

    def _count_by_severity(self) -> dict[str, int]:
        counts: dict[str, int] = {}
        for _, severity, _ in self.validators:
            counts[severity] = counts.get(severity, 0) + 1
        return counts
