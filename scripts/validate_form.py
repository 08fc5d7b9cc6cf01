#!/usr/bin/env python3
"""
Validate a registered form from the command line.

Usage:
    python scripts/validate_form.py signup name=Ada phone=6155551234 \
        zip_code=37201 email=ada@example.com password=hunter22

Exits 0 when the form is valid, 1 when it is not, 2 on usage errors.
"""

import argparse
import logging
import os
import sys

# Add project root to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from formvalidator.config.settings import LOG_LEVEL, VERBOSE
from formvalidator.config.form_registry import get_registry
from formvalidator.errors import UnknownFieldError

logging.basicConfig(
    level=logging.DEBUG if VERBOSE else getattr(logging, LOG_LEVEL.upper(), logging.INFO),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)


def parse_assignments(args):
    """Turn ["a=1", "b=2"] into {"a": "1", "b": "2"}."""
    values = {}
    for arg in args:
        if "=" not in arg:
            raise ValueError(f"Expected field=value, got '{arg}'")
        field_id, value = arg.split("=", 1)
        values[field_id] = value
    return values


def build_parser():
    parser = argparse.ArgumentParser(
        description="Validate a registered form and submit it if every field passes",
        prog="validate_form",
    )
    parser.add_argument(
        "form_id",
        type=str,
        help="ID of the form to validate (see forms/)",
    )
    parser.add_argument(
        "assignments",
        nargs="*",
        metavar="field=value",
        help="Field values to set before validating",
    )
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)

    registry = get_registry()
    form_def = registry.get_form(args.form_id)
    if form_def is None:
        print(f"Unknown form: '{args.form_id}'. Available: {registry.form_ids}")
        return 2

    try:
        values = parse_assignments(args.assignments)
    except ValueError as e:
        print(e)
        return 2

    form = form_def.build()
    try:
        for field_id, value in values.items():
            form.set_value(field_id, value)
    except UnknownFieldError as e:
        print(e)
        return 2

    valid = form.validate_all()

    print(f"\n=== {form_def.name} ===\n")
    for section, names in form_def.sections.items():
        if section:
            print(f"{section}:")
        for name in names:
            error = form.field(name).error
            status = "[OK]" if error is None else "[!!]"
            print(f"  {status} {form_def.get_field_label(name)}: {error or 'valid'}")

    if valid:
        print("\nForm submitted successfully!")
        return 0

    print("\nForm validation failed.")
    return 1


if __name__ == "__main__":
    sys.exit(main())
