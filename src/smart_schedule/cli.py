"""Command-line interface for Smart Schedule.

This module provides the main entry point for the CLI application.
"""

from __future__ import annotations

import argparse
import asyncio
import json
import sys
from pathlib import Path

import structlog

from smart_schedule import __version__
from smart_schedule.agent import EventExtractor
from smart_schedule.calendar import ICS_FILENAME, build_google_calendar_link, generate_ics
from smart_schedule.config import get_settings
from smart_schedule.exceptions import ConfigurationError, ExtractionError, InvalidDataUriError
from smart_schedule.log import configure_logging
from smart_schedule.models import Event
from smart_schedule.utils.data_uri import encode_image_file
from smart_schedule.validation import validate_events

logger = structlog.get_logger()


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="smart-schedule", description="Smart Schedule")
    subparsers = parser.add_subparsers(dest="command", required=True)

    extract_parser = subparsers.add_parser(
        "extract",
        help="Extract events from a timetable image",
    )
    extract_parser.add_argument("image", type=Path, help="Path to the timetable image")
    extract_parser.add_argument(
        "--ics",
        type=Path,
        default=None,
        help=f"Write the events to this .ics file (e.g. {ICS_FILENAME})",
    )
    extract_parser.add_argument(
        "--links",
        action="store_true",
        help="Print an 'Add to Google Calendar' link for each event",
    )
    extract_parser.add_argument(
        "--json",
        action="store_true",
        help="Print events as a JSON array instead of a table",
    )

    ics_parser = subparsers.add_parser(
        "ics",
        help="Convert a JSON array of events into an .ics file",
    )
    ics_parser.add_argument("events", type=Path, help="JSON file holding the events array")
    ics_parser.add_argument(
        "--output",
        type=Path,
        default=Path(ICS_FILENAME),
        help=f"Output path (default: {ICS_FILENAME})",
    )

    return parser


def _print_events(events: list[Event], *, as_json: bool, with_links: bool) -> None:
    if as_json:
        payload = []
        for e in events:
            item = e.to_wire()
            if with_links:
                item["googleCalendarLink"] = build_google_calendar_link(e)
            payload.append(item)
        print(json.dumps(payload, indent=2, ensure_ascii=False))
        return

    for e in events:
        line = f"{e.start_time}\t{e.end_time}\t{e.display_title}"
        if e.description:
            line += f"\t{e.description}"
        print(line)
        if with_links:
            link = build_google_calendar_link(e)
            if link:
                print(f"\t{link}")


def _write_ics(events: list[Event], path: Path) -> None:
    content = generate_ics(events, prodid=get_settings().ics_prodid)
    # Content lines are already CRLF terminated.
    path.write_text(content, encoding="utf-8", newline="")
    print(f"Wrote {len(events)} events to {path}")


async def _cmd_extract(args: argparse.Namespace) -> int:
    try:
        image_data_uri = encode_image_file(args.image)
    except (OSError, InvalidDataUriError) as e:
        print(f"Cannot read image {args.image}: {e}", file=sys.stderr)
        return 2

    extractor = EventExtractor(settings=get_settings())
    try:
        events = await extractor.extract_events(image_data_uri)
    except ExtractionError as e:
        print(f"Extraction failed: {e}", file=sys.stderr)
        return 1

    if events:
        _print_events(events, as_json=args.json, with_links=args.links)
    else:
        print("No events found.")
    # --ics always writes a file, an empty calendar if need be.
    if args.ics:
        _write_ics(events, args.ics)
    return 0


def _cmd_ics(args: argparse.Namespace) -> int:
    try:
        raw = json.loads(args.events.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as e:
        print(f"Cannot read events from {args.events}: {e}", file=sys.stderr)
        return 2

    if not isinstance(raw, list):
        print(f"{args.events} must contain a JSON array of events", file=sys.stderr)
        return 2

    events = validate_events(raw, allow_non_positive_duration=get_settings().allow_non_positive_duration)
    _write_ics(events, args.output)
    return 0


def main(args: list[str] | None = None) -> int:
    """Main entry point for the Smart Schedule CLI.

    Args:
        args: Command-line arguments. If None, uses sys.argv.

    Returns:
        Exit code (0 for success, non-zero for failure).
    """
    if args is None:
        args = sys.argv[1:]

    settings = get_settings()
    try:
        configure_logging(settings.log_level, json=settings.log_json)
    except ConfigurationError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 2

    logger.info("smart_schedule_started", version=__version__, debug=settings.debug)

    parser = _build_parser()
    parsed = parser.parse_args(args)

    if parsed.command == "extract":
        return asyncio.run(_cmd_extract(parsed))
    if parsed.command == "ics":
        return _cmd_ics(parsed)

    logger.error("unknown_command", command=parsed.command)
    return 2


if __name__ == "__main__":
    sys.exit(main())
