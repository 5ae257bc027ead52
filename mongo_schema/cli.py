"""
Command-line interface for MongoDB schema extraction.
"""

import argparse
import logging
import sys
from typing import List, Optional

from pydantic import ValidationError

from mongo_schema.common.logging_config import setup_logging, set_run_id, clear_run_id
from mongo_schema.config.settings import get_settings
from mongo_schema.export.writers import ExportError, export_schema
from mongo_schema.inference.builder import CollectionSchemaBuilder, DatabaseSchemaBuilder
from mongo_schema.source.adapter import ConfigurationError, SourceError
from mongo_schema.source.mongo import open_session

logger = logging.getLogger(__name__)


def positive_int(value: str) -> int:
    """argparse type for counts that must be at least 1."""
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid int value: '{value}'") from None
    if number <= 0:
        raise argparse.ArgumentTypeError(f"must be a positive integer, got {number}")
    return number


def build_parser() -> argparse.ArgumentParser:
    settings = get_settings()

    parser = argparse.ArgumentParser(
        prog="mongo-schema",
        description="Extract a MongoDB database schema from sampled documents",
    )
    parser.add_argument(
        "--database",
        required=True,
        help='Database connection string. Example: "mongodb://localhost:3001/meteor"',
    )
    parser.add_argument(
        "--output",
        required=True,
        help="Output file",
    )
    parser.add_argument(
        "--format",
        default=settings.output_format,
        help='Output file format. Can be "json" or "csv". Default is "json"',
    )
    parser.add_argument(
        "--sample-size",
        type=positive_int,
        default=settings.max_try_records,
        help=f"Documents sampled per collection (default: {settings.max_try_records})",
    )
    parser.add_argument(
        "--exclude",
        action="append",
        default=[],
        metavar="COLLECTION",
        help="Collection to skip (repeatable)",
    )
    parser.add_argument(
        "--legacy-order",
        action="store_true",
        default=settings.preserve_first_entry,
        help="Keep each collection's first discovered field ahead of the sorted rest",
    )
    parser.add_argument(
        "--pretty",
        action="store_true",
        help="Indent JSON output",
    )
    parser.add_argument(
        "--log-level",
        default=settings.log_level,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        type=str.upper,
        help=f"Log level (default: {settings.log_level})",
    )
    parser.add_argument(
        "--log-json",
        action="store_true",
        default=settings.log_json,
        help="Emit logs as JSON lines",
    )
    return parser


def extract_schema(args: argparse.Namespace) -> int:
    """Run one extraction; returns the process exit code."""
    settings = get_settings()

    builder = DatabaseSchemaBuilder(
        CollectionSchemaBuilder(
            sample_size=args.sample_size,
            preserve_first_entry=args.legacy_order,
        )
    )

    with open_session(args.database, settings.server_selection_timeout_ms) as session:
        logger.info(f"Sampling collections of {session.database_name}")
        schema = builder.build(
            session.database.list_collection_names,
            session.database.source_for,
            exclude=args.exclude,
        )

    fmt = export_schema(args.output, schema, args.format, indent=2 if args.pretty else None)
    logger.info(f"Wrote {fmt} schema for {len(schema)} collections to {args.output}")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the CLI."""
    if argv is None:
        argv = sys.argv[1:]

    try:
        parser = build_parser()
    except ValidationError as e:
        print(f"Invalid configuration: {e}", file=sys.stderr)
        return 1

    if not argv:
        parser.print_help(sys.stderr)
        return 1

    args = parser.parse_args(argv)
    setup_logging(args.log_level, json_format=args.log_json)
    set_run_id()

    try:
        return extract_schema(args)
    except (ConfigurationError, SourceError, ExportError) as e:
        logger.error(str(e))
        return 1
    finally:
        clear_run_id()


if __name__ == "__main__":
    sys.exit(main())
