"""
Command-line interface for validating a JSON document against a rule set.

Usage:
    python -m fieldrules.cli.validate_cli --rules <rules.yaml> --input <data.json> [options]
"""

import argparse
import json
import sys
from pathlib import Path

from fieldrules.core.config import RuleConfigError, RuleConfigLoader
from fieldrules.core.validation import ValidationExecutor
from fieldrules.observability.logger import get_logger


logger = get_logger(__name__)

EXIT_VALID = 0
EXIT_INVALID = 1
EXIT_USAGE = 2


def load_input(input_path: Path) -> dict:
    """
    Load the input mapping from a JSON file.

    Args:
        input_path: Path to a JSON file holding a flat object

    Returns:
        Field name to value

    Raises:
        ValueError: If the file is not a JSON object
    """
    with open(input_path) as f:
        data = json.load(f)

    if not isinstance(data, dict):
        raise ValueError(f"Input must be a JSON object, got {type(data).__name__}")

    return data


def validate_command(args) -> int:
    """
    Execute the validate command.

    Args:
        args: Command-line arguments

    Returns:
        Process exit code
    """
    try:
        rules = RuleConfigLoader(args.rules).load_rules()
        data = load_input(Path(args.input))
    except (FileNotFoundError, RuleConfigError, ValueError) as e:
        logger.error(f"Cannot run validation: {e}")
        return EXIT_USAGE

    errors = ValidationExecutor().validate(data, rules)

    if args.format == "json":
        print(json.dumps(errors, indent=2, ensure_ascii=False))
    elif errors:
        for field_name, message in errors.items():
            print(f"{field_name}: {message}")
    else:
        print("All fields are valid")

    return EXIT_INVALID if errors else EXIT_VALID


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Validate input fields against a rule set",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Validate a signup form
  fieldrules-validate --rules config/signup_rules.yaml --input form.json

  # Human-readable output
  fieldrules-validate --rules config/signup_rules.yaml --input form.json --format text

Exit codes: 0 valid, 1 invalid fields, 2 configuration or input error.
        """
    )
    parser.add_argument(
        "--rules",
        required=True,
        help="Path to rule set YAML file"
    )
    parser.add_argument(
        "--input",
        required=True,
        help="Path to input JSON file"
    )
    parser.add_argument(
        "--format",
        default="json",
        choices=["json", "text"],
        help="Output format (default: json)"
    )

    args = parser.parse_args(argv)
    return validate_command(args)


if __name__ == "__main__":
    sys.exit(main())
