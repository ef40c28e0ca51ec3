"""Application entry point for the bulletin announcements backend."""

from __future__ import annotations

import argparse
import json
import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from typing import Callable, Optional

from art import tprint

import settings
from adapters.announcement_formatting import format_details, format_listing
from adapters.seed_file import read_seed_file
from adapters.sqlite_storage import SQLiteStorage
from core.config import ServiceConfig
from core.errors import (
    AnnouncementNotFoundError,
    AnnouncementValidationError,
    InvalidArgumentError,
)
from core.models import AnnouncementDraft
from core.service import AnnouncementService

NAME = "BULLETIN"
FONT = "tarty-1"

EXIT_OK = 0
EXIT_NOT_FOUND = 1
EXIT_INVALID = 2

LOGGER = logging.getLogger(__name__)


def _print_banner() -> None:
    tprint(NAME, FONT, space=1)


def _configure_logging() -> None:
    config = settings.LOGGING or {}
    if not config.get("enabled", False):
        return

    level_name = str(config.get("level", "INFO")).upper()
    level = getattr(logging, level_name, logging.INFO)

    fmt = "%(asctime)s %(levelname)s %(name)s: %(message)s"
    datefmt = "%Y-%m-%d %H:%M:%S"
    formatter = logging.Formatter(fmt=fmt, datefmt=datefmt)

    handlers: list[logging.Handler] = []

    if config.get("console", True):
        console_handler = logging.StreamHandler()
        console_handler.setLevel(level)
        console_handler.setFormatter(formatter)
        handlers.append(console_handler)

    file_cfg = config.get("file", {})
    if file_cfg.get("enabled", False):
        path = file_cfg.get("path", "logs/bulletin.log")
        if not os.path.isabs(path):
            path = os.path.join(settings.PROJECT_ROOT, path)
        directory = os.path.dirname(path)
        if directory:
            os.makedirs(directory, exist_ok=True)

        max_bytes = int(file_cfg.get("max_bytes", 5 * 1024 * 1024))
        backup_count = int(file_cfg.get("backup_count", 5))
        file_handler = RotatingFileHandler(
            path,
            maxBytes=max_bytes,
            backupCount=backup_count,
            encoding="utf-8",
        )
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        handlers.append(file_handler)

    if not handlers:
        return

    logging.basicConfig(level=level, handlers=handlers)


def build_service(db_path: Optional[str] = None) -> AnnouncementService:
    """Wire the SQLite adapter into the service using config.json defaults."""

    storage = SQLiteStorage(db_path or settings.DB_PATH)
    storage.init_db()
    config = ServiceConfig(
        default_similar_count=settings.DEFAULT_SIMILAR_COUNT,
        default_page_size=settings.DEFAULT_PAGE_SIZE,
        max_similar_count=settings.MAX_SIMILAR_COUNT,
    )
    return AnnouncementService(storage, config)


def _cmd_init(service: AnnouncementService, args: argparse.Namespace) -> int:
    # build_service already created the schema
    print(f"Database ready: {args.db or settings.DB_PATH}")
    return EXIT_OK


def _cmd_list(service: AnnouncementService, args: argparse.Namespace) -> int:
    announcements = service.list_announcements(page=args.page, page_size=args.page_size)
    print(format_listing(announcements, args.format))
    return EXIT_OK


def _cmd_show(service: AnnouncementService, args: argparse.Namespace) -> int:
    details = service.get_details(args.id, similar_count=args.similar)
    print(format_details(details, args.format, settings.SNIPPET_CHARS))
    return EXIT_OK


def _cmd_add(service: AnnouncementService, args: argparse.Namespace) -> int:
    announcement_id = service.create(AnnouncementDraft(title=args.title, description=args.description))
    print(announcement_id)
    return EXIT_OK


def _cmd_update(service: AnnouncementService, args: argparse.Namespace) -> int:
    service.update(args.id, AnnouncementDraft(title=args.title, description=args.description))
    print(f"Announcement #{args.id} updated")
    return EXIT_OK


def _cmd_delete(service: AnnouncementService, args: argparse.Namespace) -> int:
    service.delete(args.id)
    print(f"Announcement #{args.id} deleted")
    return EXIT_OK


def _cmd_seed(service: AnnouncementService, args: argparse.Namespace) -> int:
    try:
        drafts, dates = read_seed_file(args.file)
    except (OSError, json.JSONDecodeError, ValueError) as exc:
        print(f"error: cannot read seed file: {exc}", file=sys.stderr)
        return EXIT_INVALID
    created = service.import_drafts(drafts, dates)
    print(f"Imported {len(created)} announcements")
    return EXIT_OK


def _cmd_panel(service: AnnouncementService, args: argparse.Namespace) -> int:
    _print_banner()
    from frontend.app import AnnouncementsPanelApp

    AnnouncementsPanelApp(service).run()
    return EXIT_OK


def run_command(
    service: AnnouncementService,
    args: argparse.Namespace,
    handler: Callable[[AnnouncementService, argparse.Namespace], int],
) -> int:
    """Run one command handler and map domain errors to exit codes."""

    try:
        return handler(service, args)
    except AnnouncementNotFoundError as exc:
        LOGGER.info("%s", exc)
        print(f"error: {exc}", file=sys.stderr)
        return EXIT_NOT_FOUND
    except (AnnouncementValidationError, InvalidArgumentError) as exc:
        LOGGER.info("Rejected %s: %s", args.command, exc)
        print(f"error: {exc}", file=sys.stderr)
        return EXIT_INVALID


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="bulletin")
    parser.add_argument("--db", help="SQLite database path (overrides config.json)")
    subparsers = parser.add_subparsers(dest="command")

    init_parser = subparsers.add_parser("init", help="Create the database schema")
    init_parser.set_defaults(handler=_cmd_init)

    list_parser = subparsers.add_parser("list", help="List announcements")
    list_parser.add_argument("--page", type=int, help="1-based page number")
    list_parser.add_argument("--page-size", type=int, dest="page_size", help="Announcements per page")
    list_parser.add_argument("--format", choices=["text", "json"], default=settings.OUTPUT_FORMAT)
    list_parser.set_defaults(handler=_cmd_list)

    show_parser = subparsers.add_parser("show", help="Show one announcement with similar ones")
    show_parser.add_argument("id", type=int)
    show_parser.add_argument(
        "--similar",
        type=int,
        help=f"How many similar announcements to include (default {settings.DEFAULT_SIMILAR_COUNT})",
    )
    show_parser.add_argument("--format", choices=["text", "json"], default=settings.OUTPUT_FORMAT)
    show_parser.set_defaults(handler=_cmd_show)

    add_parser = subparsers.add_parser("add", help="Create an announcement")
    add_parser.add_argument("--title", required=True)
    add_parser.add_argument("--description", required=True)
    add_parser.set_defaults(handler=_cmd_add)

    update_parser = subparsers.add_parser("update", help="Update an announcement")
    update_parser.add_argument("id", type=int)
    update_parser.add_argument("--title", required=True)
    update_parser.add_argument("--description", required=True)
    update_parser.set_defaults(handler=_cmd_update)

    delete_parser = subparsers.add_parser("delete", help="Delete an announcement")
    delete_parser.add_argument("id", type=int)
    delete_parser.set_defaults(handler=_cmd_delete)

    seed_parser = subparsers.add_parser("seed", help="Import announcements from a JSON file")
    seed_parser.add_argument("file")
    seed_parser.set_defaults(handler=_cmd_seed)

    panel_parser = subparsers.add_parser("panel", help="Launch the announcements TUI")
    panel_parser.set_defaults(handler=_cmd_panel)

    return parser


def main(argv: Optional[list[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if not args.command:
        _print_banner()
        parser.print_help()
        return EXIT_OK

    _configure_logging()
    service = build_service(args.db)
    return run_command(service, args, args.handler)


if __name__ == "__main__":
    sys.exit(main())
