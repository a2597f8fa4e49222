"""
Command-line interface for searching a settings collection.

Usage:
    python -m moresettings.cli.settings_cli search --settings <settings.json> [options]
"""

import argparse
import json
import sys

from pydantic import ValidationError as ModelValidationError

from moresettings.cli.rules_cli import load_json_file
from moresettings.observability.logger import get_logger
from moresettings.settings import SettingsSearch
from moresettings.utils.validation import ValidationError


logger = get_logger(__name__)


def search_command(args):
    """
    Filter and paginate settings, printing the page as JSON.

    Args:
        args: Command-line arguments
    """
    settings = load_json_file(args.settings, "Settings")
    if not isinstance(settings, list):
        logger.error("Settings file must contain a JSON list")
        sys.exit(1)

    try:
        params = json.loads(args.params) if args.params else {}
    except json.JSONDecodeError as e:
        logger.error(f"Invalid --params JSON: {e}")
        sys.exit(1)

    search = SettingsSearch()
    try:
        page = search.search(
            settings,
            params,
            page=args.page,
            page_size=args.page_size,
            sort=args.sort,
            form_name=args.form_name,
        )
    except (ValidationError, ModelValidationError) as e:
        logger.error(f"Search failed: {e}")
        sys.exit(1)

    output = page.model_dump(mode="json")
    if search.has_errors():
        output["filter_errors"] = search.errors
    print(json.dumps(output, indent=2))


def main(argv: list[str] | None = None):
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Search the settings grid",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Active settings in category 2 whose title contains "mail"
  python -m moresettings.cli.settings_cli search --settings settings.json \\
      --params '{"status": 1, "cat_id": 2, "label": "mail"}'

  # Second page, newest first
  python -m moresettings.cli.settings_cli search --settings settings.json --page 2 --sort=-created_at
        """
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    search_parser = subparsers.add_parser("search", help="Search settings")
    search_parser.add_argument("--settings", required=True, help="Path to a JSON list of settings")
    search_parser.add_argument("--params", help="Filter parameters as a JSON object")
    search_parser.add_argument(
        "--form-name",
        default="",
        help="Key wrapping the filters inside --params (default: filters at top level)"
    )
    search_parser.add_argument("--page", type=int, default=1, help="Page number (default: 1)")
    search_parser.add_argument("--page-size", type=int, help="Items per page (default: 50)")
    search_parser.add_argument("--sort", default="id", help="Sort field, '-' prefix for descending (default: id)")

    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        sys.exit(1)

    if args.command == "search":
        search_command(args)


if __name__ == "__main__":
    main()
