# =============================================================================
# ddex_ern/cli/generate.py — CLI Generate Command (JSON payload → ERN XML)
# =============================================================================
#
# Standalone CLI for producing an ERN document from a release snapshot on
# disk, bypassing the HTTP service entirely.  The payload is the same JSON
# body POST /api/ddex/generate accepts: {"release": {...}, "tracks": [...]}.
#
# Typical usage:
#   python -m ddex_ern.cli.generate payload.json              # XML to stdout
#   python -m ddex_ern.cli.generate payload.json -o ern.xml   # Write to file
#   python -m ddex_ern.cli.generate payload.json --profile reduced
#
# Log lines always go to stderr so stdout carries only the XML document.
# --quiet raises the log threshold to WARNING.
# =============================================================================

"""Standalone CLI for generating a DDEX ERN 3.8.2 document.

Usage::

    python -m ddex_ern.cli.generate payload.json
    python -m ddex_ern.cli.generate payload.json --output ern.xml
    python -m ddex_ern.cli.generate payload.json --profile reduced --skip-validation

Exits 0 on success and 1 when the payload cannot be read, fails
validation, or holds a value the generator cannot interpret.
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

from pydantic import ValidationError

from ddex_ern.config.loader import document_options, load_config
from ddex_ern.config.settings import Settings
from ddex_ern.models.options import DealProfile, DocumentOptions
from ddex_ern.models.release import ReleaseBundle
from ddex_ern.services.document_assembler import DocumentAssembler
from ddex_ern.services.release_validator import validate_release_bundle
from ddex_ern.utils.errors import ErnGeneratorError, ReleaseValidationError
from ddex_ern.utils.logging import configure_logging


def _load_bundle(payload_path: Path) -> ReleaseBundle:
    with open(payload_path, encoding="utf-8") as f:
        return ReleaseBundle.model_validate(json.load(f))


def _resolve_options(config_path: str, profile: str | None) -> DocumentOptions:
    options = document_options(load_config(config_path, settings=Settings()))
    if profile:
        options = options.model_copy(update={"deal_profile": DealProfile(profile)})
    return options


def _run(
    payload_path: Path,
    output_file: str | None,
    options: DocumentOptions,
    skip_validation: bool,
) -> int:
    """Generate the document and write it out.  Returns the exit code."""
    if not payload_path.is_file():
        print(f"Error: File not found: {payload_path}", file=sys.stderr)
        return 1

    try:
        bundle = _load_bundle(payload_path)
    except json.JSONDecodeError as exc:
        print(f"Error: {payload_path.name} is not valid JSON: {exc}", file=sys.stderr)
        return 1
    except ValidationError as exc:
        print(f"Error: {payload_path.name} is not a release payload:\n{exc}", file=sys.stderr)
        return 1

    try:
        if not skip_validation:
            validate_release_bundle(bundle)
        xml = DocumentAssembler(options=options).generate(bundle)
    except ReleaseValidationError as exc:
        print(f"Validation failed: {exc}", file=sys.stderr)
        return 1
    except ErnGeneratorError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    if output_file:
        Path(output_file).write_text(xml, encoding="utf-8")
        print(f"ERN written to: {output_file}", file=sys.stderr)
    else:
        sys.stdout.write(xml)
    return 0


def _build_parser() -> argparse.ArgumentParser:
    """Build the argparse parser for the generate CLI."""
    parser = argparse.ArgumentParser(
        prog="python -m ddex_ern.cli.generate",
        description="Generate a DDEX ERN 3.8.2 NewReleaseMessage from a release JSON payload.",
    )
    parser.add_argument("payload", help="Path to the release bundle JSON file")
    parser.add_argument(
        "--output", "-o",
        default=None,
        help="Write the XML to this file instead of stdout",
    )
    parser.add_argument(
        "--profile",
        choices=[profile.value for profile in DealProfile],
        default=None,
        help="Deal catalog profile (default: from configuration)",
    )
    parser.add_argument(
        "--config",
        default="config/config.yaml",
        help="YAML configuration file (default: config/config.yaml)",
    )
    parser.add_argument(
        "--skip-validation",
        action="store_true",
        help="Generate even when business-required fields are missing",
    )
    parser.add_argument(
        "--quiet", "-q",
        action="store_true",
        help="Only log warnings and errors",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the generate tool."""
    args = _build_parser().parse_args(argv)
    configure_logging(log_level="WARNING" if args.quiet else "INFO", stream=sys.stderr)

    try:
        options = _resolve_options(args.config, args.profile)
    except ErnGeneratorError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        sys.exit(1)

    payload_path = Path(args.payload).resolve()
    sys.exit(_run(payload_path, args.output, options, args.skip_validation))


if __name__ == "__main__":
    main()
