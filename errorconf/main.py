from __future__ import annotations

import argparse
import json
import logging
import os
import sys
import uuid

from errorconf.domain.categories import classify_category
from errorconf.domain.configuration import build_error_configuration, resolve_category
from errorconf.domain.defaults import DEFAULT_ERROR_CONFIGURATION_ENTRIES
from errorconf.domain.entries import ErrorConfigurationEntry
from errorconf.domain.errors import DomainValidationError
from errorconf.lib.remote import load_entries
from errorconf.logging_setup import configure_logging


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Resolve the category of a server error code")
    parser.add_argument("--major", type=int, required=True, help="Major error code")
    parser.add_argument("--minor", type=int, default=None, help="Minor error code (subcode)")
    parser.add_argument(
        "--entries",
        default=os.getenv("ERRORCONF_ENTRIES_PATH"),
        help="JSON or YAML file with remote error configuration entries",
    )
    parser.add_argument(
        "--no-defaults",
        action="store_true",
        help="Do not apply the built-in default entries",
    )
    return parser.parse_args(argv)


def run(argv: list[str] | None = None) -> int:
    args = parse_args(argv)

    configure_logging(stream=sys.stderr)
    run_id = str(uuid.uuid4())
    logger = logging.getLogger("errorconf")

    entries: list[ErrorConfigurationEntry] = []
    if not args.no_defaults:
        entries.extend(DEFAULT_ERROR_CONFIGURATION_ENTRIES)

    try:
        if args.entries:
            logger.info("loading error configuration", extra={"source": args.entries, "run_id": run_id})
            entries.extend(load_entries(file_path=args.entries))
        configuration = build_error_configuration(entries)
    except DomainValidationError as exc:
        sys.stderr.write(f"ERROR: {exc}\n")
        return 2

    category = resolve_category(configuration, args.major, args.minor)
    result = {
        "major_code": args.major,
        "minor_code": args.minor,
        "category": category.value if category is not None else None,
        "recovery": classify_category(category) if category is not None else None,
    }
    sys.stdout.write(json.dumps(result) + "\n")
    return 0 if category is not None else 1


if __name__ == "__main__":
    raise SystemExit(run())
