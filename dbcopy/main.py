#!/usr/bin/env python3
"""
MongoDB Database Copy

Replaces every non-system collection of the destination database with a copy
of the source one: drop, recreate indexes, stream documents.

Usage:
    dbcopy --src mongodb://host-a:27017/app --dst mongodb://host-b:27017/app

Environment Variables:
    SRC_URI: Source connection string (used when --src is not given)
    DST_URI: Destination connection string (used when --dst is not given)
    CONTINUE_ON_ERROR: Copy remaining collections after a failure (default: false)
    SERVER_SELECTION_TIMEOUT_MS: Connection timeout (default: 5000)
    LOG_LEVEL: Logging level (default: INFO)
"""
import argparse
import asyncio
import logging
import sys
from typing import Callable, Optional

from dbcopy.config import Settings, get_settings
from dbcopy.core.confirmation import confirm_destination_clear
from dbcopy.core.errors import DbCopyError
from dbcopy.database.connections import open_databases
from dbcopy.schemas.transfer import TransferResult
from dbcopy.services.copier import DatabaseCopier

logger = logging.getLogger("dbcopy")


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s | %(levelname)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="dbcopy",
        description="Copy all collections, indexes and documents between MongoDB databases.",
    )
    parser.add_argument("--src", "-src", dest="src", help="source database URL")
    parser.add_argument("--dst", "-dst", dest="dst", help="destination database URL")
    parser.add_argument(
        "--continue-on-error",
        action="store_true",
        default=None,
        help="copy the remaining collections when one fails, report failures at the end",
    )
    return parser.parse_args(argv)


def resolve_settings(args: argparse.Namespace, settings: Settings) -> Settings:
    """CLI flags take precedence over environment settings."""
    overrides = {}
    if args.src is not None:
        overrides["src_uri"] = args.src
    if args.dst is not None:
        overrides["dst_uri"] = args.dst
    if args.continue_on_error is not None:
        overrides["continue_on_error"] = args.continue_on_error
    return settings.model_copy(update=overrides)


async def run(
    settings: Settings,
    confirm: Callable[[str], bool] = confirm_destination_clear,
) -> Optional[list[TransferResult]]:
    """
    Connect, confirm and copy.

    Returns:
        Per-collection results, or None when the operator declined
    """
    async with open_databases(
        settings.src_uri,
        settings.dst_uri,
        timeout_ms=settings.server_selection_timeout_ms,
    ) as ctx:
        # Prompt reads stdin, keep it off the event loop
        if not await asyncio.to_thread(confirm, ctx.destination.name):
            logger.info("Copy cancelled, destination left untouched")
            return None

        copier = DatabaseCopier(
            ctx.source,
            ctx.destination,
            continue_on_error=settings.continue_on_error,
        )
        results = await copier.copy_database()

    logger.info("database was copied")
    return results


def cli(argv: Optional[list[str]] = None) -> None:
    """Console entry point."""
    args = parse_args(argv)
    settings = resolve_settings(args, get_settings())
    configure_logging(settings.log_level)

    try:
        asyncio.run(run(settings))
    except DbCopyError as e:
        logger.error(f"database copy error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    cli()
