"""
Command-line interface for the entry-requirements classifier.

Provides subcommands for building a dataset from saved advisory payloads,
classifying it, validating it, and summarizing the result.
"""

import argparse
import json
import sys
from pathlib import Path
from typing import Optional

from . import advisory
from . import config
from . import pipeline
from . import report
from . import validation
from .logging_config import configure_logging


def cmd_classify(args: argparse.Namespace) -> int:
    """Classify every record and write the result."""
    settings: config.Settings = args.settings
    input_path = Path(args.input or settings.input_path)
    output_path = Path(args.output or settings.output_path or input_path)
    workers = args.workers or settings.workers

    try:
        document = validation.load_dataset(input_path)
        validation.validate_dataset(document, strict=False)
        classified = pipeline.classify_dataset(document, workers=workers)

        if args.dry:
            print(json.dumps(classified, indent=settings.indent, ensure_ascii=False))
        else:
            validation.write_dataset(classified, output_path, indent=settings.indent)
            print(f"Updated classifications written to {output_path}")

        return 0

    except (FileNotFoundError, json.JSONDecodeError, validation.DatasetValidationError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


def cmd_build(args: argparse.Namespace) -> int:
    """Build an unclassified dataset from a directory of advisory payloads."""
    settings: config.Settings = args.settings

    try:
        countries = advisory.load_country_index(Path(args.countries) if args.countries else None)
        document = advisory.build_from_directory(
            Path(args.payload_dir),
            countries=countries,
            only=args.country,
            skip=settings.skip_countries,
        )

        if args.country:
            print(json.dumps(document, indent=settings.indent, ensure_ascii=False))
        else:
            output_path = Path(args.output or settings.input_path)
            validation.write_dataset(document, output_path, indent=settings.indent)
            print(f"Saved {document['total']} entries to {output_path}")

        return 0

    except (FileNotFoundError, json.JSONDecodeError, advisory.CountryIndexError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


def cmd_validate(args: argparse.Namespace) -> int:
    """Validate a dataset document."""
    input_path = Path(args.input or args.settings.input_path)

    try:
        document = validation.load_dataset(input_path)
        validation.validate_dataset(document)

        print(f"Dataset valid: {input_path}")
        print(f"  Generated: {document.get('generatedAt')}")
        print(f"  Records:   {len(document['results'])}")
        return 0

    except validation.DatasetValidationError as e:
        print(f"Validation failed: {e}", file=sys.stderr)
        return 1
    except (FileNotFoundError, json.JSONDecodeError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


def cmd_status(args: argparse.Namespace) -> int:
    """Show the color distribution of a dataset."""
    input_path = Path(args.input or args.settings.input_path)

    try:
        document = validation.load_dataset(input_path)
        summary = report.summarize_dataset(document)

        if args.json:
            print(json.dumps(summary, indent=2))
        else:
            print(report.format_summary(summary))
        return 0

    except (FileNotFoundError, json.JSONDecodeError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


def main(argv: Optional[list] = None) -> int:
    """Main CLI entrypoint."""
    parser = argparse.ArgumentParser(
        prog="entry-requirements",
        description="Classify countries by entry requirements (visa, e-authorization, vaccines)",
    )
    parser.add_argument("--config", help="Path to YAML config (default: config/entry_requirements.yaml)")
    parser.add_argument("--verbose", "-v", action="store_true", help="Debug logging")

    subparsers = parser.add_subparsers(dest="command", help="Commands")

    # classify command
    classify_parser = subparsers.add_parser("classify", help="Infer facts and assign colors")
    classify_parser.add_argument("--input", help="Dataset to classify")
    classify_parser.add_argument("--output", help="Output path (default: overwrite input)")
    classify_parser.add_argument("--dry", action="store_true", help="Print to stdout instead of writing")
    classify_parser.add_argument("--workers", type=int, help="Thread pool size")
    classify_parser.set_defaults(func=cmd_classify)

    # build command
    build_parser = subparsers.add_parser("build", help="Build dataset from saved advisory payloads")
    build_parser.add_argument("--payload-dir", required=True, help="Directory of <CCA3>.json payloads")
    build_parser.add_argument("--countries", help="JSON list of {cca3, cca2, name}")
    build_parser.add_argument("--output", help="Output path (default: config input_path)")
    build_parser.add_argument("--country", help="Only this country (cca3 or cca2); prints to stdout")
    build_parser.set_defaults(func=cmd_build)

    # validate command
    validate_parser = subparsers.add_parser("validate", help="Validate a dataset")
    validate_parser.add_argument("--input", help="Dataset to validate")
    validate_parser.set_defaults(func=cmd_validate)

    # status command
    status_parser = subparsers.add_parser("status", help="Show color summary")
    status_parser.add_argument("--input", help="Dataset to summarize")
    status_parser.add_argument("--json", action="store_true", help="Print summary as JSON")
    status_parser.set_defaults(func=cmd_status)

    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 0

    try:
        args.settings = config.load_settings(args.config)
    except config.ConfigError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    configure_logging("DEBUG" if args.verbose else args.settings.log_level, log_file=args.settings.log_file)

    if getattr(args, "workers", None) is not None and args.workers < 1:
        print("Error: --workers must be >= 1", file=sys.stderr)
        return 1

    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
