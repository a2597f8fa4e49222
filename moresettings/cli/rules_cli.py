"""
Command-line interface for checking records against number rules.

Usage:
    python -m moresettings.cli.rules_cli validate --rules <rules.yaml> --data <record.json> [options]
    python -m moresettings.cli.rules_cli client-options --rules <rules.yaml> --data <record.json> --field <name>
"""

import argparse
import json
import sys
from pathlib import Path
from typing import Any

from moresettings.core.rules import FormModel, RuleConfigLoader
from moresettings.observability.logger import get_logger


logger = get_logger(__name__)


def load_json_file(path: str, description: str) -> Any:
    """
    Read a JSON file, exiting with status 1 when it is missing or malformed.

    Args:
        path: Path to the file
        description: What the file holds (for log messages)
    """
    file_path = Path(path)
    if not file_path.exists():
        logger.error(f"{description} file not found: {path}")
        sys.exit(1)
    try:
        with open(file_path) as f:
            return json.load(f)
    except json.JSONDecodeError as e:
        logger.error(f"Invalid JSON in {description} file {path}: {e}")
        sys.exit(1)


def build_form(args) -> FormModel:
    """Create a form model from the rules, data and labels arguments."""
    try:
        rules = RuleConfigLoader(args.rules).load_rules()
    except (FileNotFoundError, ValueError) as e:
        logger.error(f"Cannot load rules: {e}")
        sys.exit(1)

    data = load_json_file(args.data, "Data")
    if not isinstance(data, dict):
        logger.error("Data file must contain a JSON object")
        sys.exit(1)

    labels = load_json_file(args.labels, "Labels") if args.labels else {}

    return FormModel(
        attributes=data,
        labels=labels,
        rules=rules,
        subject_id=args.subject_id,
    )


def validate_command(args):
    """
    Validate one record and print the ValidationResult as JSON.

    Exits with status 1 when the record fails validation.

    Args:
        args: Command-line arguments
    """
    form = build_form(args)
    try:
        passed = form.validate()
    except ValueError as e:
        logger.error(f"Invalid rule configuration: {e}")
        sys.exit(1)

    print(form.last_result.model_dump_json(indent=2))
    if not passed:
        sys.exit(1)


def client_options_command(args):
    """
    Print the client-side rule descriptors for one field as a JSON list.

    Args:
        args: Command-line arguments
    """
    form = build_form(args)
    try:
        payloads = form.engine.client_options(form, args.field)
    except ValueError as e:
        logger.error(f"Invalid rule configuration: {e}")
        sys.exit(1)

    if not payloads:
        logger.warning(f"No number rules configured for field: {args.field}")
    print(json.dumps([payload.to_dict() for payload in payloads], indent=2))


def main(argv: list[str] | None = None):
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Validate records against number rules",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Validate an order against its rules
  python -m moresettings.cli.rules_cli validate --rules config/order_rules.yaml --data order.json

  # Show the browser-side descriptor for the quantity field
  python -m moresettings.cli.rules_cli client-options --rules config/order_rules.yaml \\
      --data order.json --field quantity
        """
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    for name, help_text in (
        ("validate", "Validate a record"),
        ("client-options", "Print client-side rule descriptors for a field"),
    ):
        sub = subparsers.add_parser(name, help=help_text)
        sub.add_argument("--rules", required=True, help="Path to validation rules YAML file")
        sub.add_argument("--data", required=True, help="Path to a JSON object with the record's fields")
        sub.add_argument("--labels", help="Path to a JSON object mapping fields to display labels")
        sub.add_argument("--subject-id", help="Identifier reported in the result")
        if name == "client-options":
            sub.add_argument("--field", required=True, help="Field to describe")

    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        sys.exit(1)

    if args.command == "validate":
        validate_command(args)
    elif args.command == "client-options":
        client_options_command(args)


if __name__ == "__main__":
    main()
