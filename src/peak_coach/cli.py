#!/usr/bin/env python3
"""
Peak Coach CLI.

Score a day's readiness and print coaching from a JSON day file.

Usage:
    peak-coach score -i day.json            # Readiness score and components
    peak-coach briefing -i day.json         # Morning briefing
    peak-coach checkin -i day.json --hour 15
    peak-coach ask -i day.json "should I train today?"
"""

import argparse
import asyncio
import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import List, Optional

import pydantic
from rich import box
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from .coaching import CoachService, build_advanced_coach
from .config import get_settings
from .exceptions import PeakCoachError
from .models import CoachingMessage, ReadinessScore
from .providers import DayRecord, StaticDataProvider


logger = logging.getLogger(__name__)

console = Console()

LABEL_COLORS = {
    "peak": "bright_green",
    "high": "green",
    "moderate": "yellow",
    "low": "dark_orange",
    "recovery": "red",
}


def load_day(path: Path) -> DayRecord:
    """Read and validate a day file."""
    return DayRecord.model_validate_json(path.read_text(encoding="utf-8"))


def build_service(day: DayRecord) -> CoachService:
    settings = get_settings()
    provider = StaticDataProvider(day)
    return CoachService(
        snapshot_provider=provider,
        baseline_provider=provider,
        log_provider=provider,
        advanced_coach=build_advanced_coach(settings),
        target_sleep_hours=settings.target_sleep_hours,
    )


def print_readiness(readiness: ReadinessScore) -> None:
    color = LABEL_COLORS[readiness.label.value]
    console.print(Panel(
        f"[bold {color}]{readiness.score}/10 {readiness.label.value.upper()}[/bold {color}]",
        title="Readiness",
    ))

    table = Table(title="Components", box=box.ROUNDED)
    table.add_column("Component")
    table.add_column("Weight", justify="right")
    table.add_column("Score", justify="right")
    table.add_row("HRV", "40%", f"{readiness.hrv_score:.2f}")
    table.add_row("Sleep", "30%", f"{readiness.sleep_score:.2f}")
    table.add_row("Resting HR", "20%", f"{readiness.rhr_score:.2f}")
    table.add_row("Activity", "10%", f"{readiness.activity_score:.2f}")
    console.print(table)


def print_message(message: CoachingMessage) -> None:
    title = message.type.value.replace("_", " ").title()
    console.print(Panel(escape(message.content), title=title, subtitle=message.source.value))
    for i, item in enumerate(message.action_items, 1):
        console.print(f"  {i}. {escape(item)}")


def cmd_score(args, service: CoachService) -> None:
    print_readiness(service.get_readiness())


def cmd_briefing(args, service: CoachService) -> None:
    print_message(asyncio.run(service.morning_briefing()))


def cmd_checkin(args, service: CoachService) -> None:
    hour = args.hour if args.hour is not None else datetime.now().hour
    print_message(service.check_in(hour))


def cmd_ask(args, service: CoachService) -> None:
    print_message(asyncio.run(service.ask_coach(args.query)))


COMMANDS = {
    "score": cmd_score,
    "briefing": cmd_briefing,
    "checkin": cmd_checkin,
    "ask": cmd_ask,
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Peak Coach - readiness scoring and coaching",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  peak-coach score -i today.json
  peak-coach checkin -i today.json --hour 21
  peak-coach ask -i today.json "how was my sleep?"
        """,
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Debug logging")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    for name, help_text in (
        ("score", "Show readiness score"),
        ("briefing", "Generate the morning briefing"),
        ("checkin", "Generate a time-of-day check-in"),
        ("ask", "Ask the coach a question"),
    ):
        sub = subparsers.add_parser(name, help=help_text)
        sub.add_argument("--input", "-i", type=Path, required=True, help="Day JSON file")
        if name == "checkin":
            sub.add_argument("--hour", type=int, help="Hour of day (0-23), defaults to now")
        if name == "ask":
            sub.add_argument("query", help="Question for the coach")

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    settings = get_settings()
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    command = COMMANDS.get(args.command)
    if command is None:
        parser.print_help()
        return 1

    try:
        day = load_day(args.input)
        command(args, build_service(day))
    except OSError as e:
        console.print(f"[red]Cannot read {args.input}: {escape(str(e))}[/red]")
        return 1
    except pydantic.ValidationError as e:
        console.print(f"[red]Invalid day file {args.input}:[/red]\n{escape(str(e))}")
        return 1
    except PeakCoachError as e:
        console.print(f"[red]Error: {escape(e.message)}[/red]")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
