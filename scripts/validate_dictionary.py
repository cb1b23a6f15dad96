"""Script to validate a data dictionary directory of relvar headings."""
import argparse
import logging
import sys
from pathlib import Path
from typing import List

import yaml

from relvar.core.errors import RelvarError
from relvar.core.registry import heading_from_dict

REQUIRED_ATTRIBUTE_KEYS = ("name", "type")


def validate_heading_file(file_path: Path) -> List[str]:
    """Validate a single heading file, returning error messages."""
    errors = []
    try:
        with open(file_path, 'r') as f:
            content = yaml.safe_load(f)
    except yaml.YAMLError as e:
        return [f"Invalid YAML in {file_path}: {str(e)}"]

    if not isinstance(content, dict):
        return [f"Expected a mapping in {file_path}"]

    attributes = content.get("attributes")
    if not isinstance(attributes, list) or not attributes:
        return [f"{file_path}: 'attributes' must be a non-empty list"]

    for i, attribute in enumerate(attributes):
        if not isinstance(attribute, dict) or not all(k in attribute for k in REQUIRED_ATTRIBUTE_KEYS):
            errors.append(f"{file_path}: attribute at index {i} is missing required properties (name, type)")

    if not errors:
        try:
            heading_from_dict(content)
        except RelvarError as e:
            errors.append(f"{file_path}: {e}")

    return errors


def main():
    """Main validation function."""
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("dictionary", type=Path, help="Directory containing heading YAML files")
    args = parser.parse_args()
    logging.basicConfig(level=logging.WARNING)

    if not args.dictionary.is_dir():
        print(f"Not a directory: {args.dictionary}", file=sys.stderr)
        sys.exit(1)

    all_errors = []
    for file_path in sorted(args.dictionary.glob("**/*.yaml")):
        all_errors.extend(validate_heading_file(file_path))

    if all_errors:
        print("\nValidation failed with the following errors:", file=sys.stderr)
        for error in all_errors:
            print(f"- {error}", file=sys.stderr)
        sys.exit(1)
    else:
        print("Data dictionary validation passed!")
        sys.exit(0)


if __name__ == "__main__":
    main()
