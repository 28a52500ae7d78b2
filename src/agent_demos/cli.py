"""Agent demos CLI.

Run a demo:
  agent-demos resume "Jane Doe"
  agent-demos research "solid-state batteries"
  agent-demos inbox ./mail --limit 10
  agent-demos spreadsheet ./sales.csv "add a total column"

Settings come from ./config/settings.yaml (optional) and AGENT_DEMOS_* env vars.
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import os
import sys
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from rich.console import Console
from rich.table import Table

from agent_demos.config.settings import AppSettings, ensure_api_key_env
from agent_demos.demos import DEMOS, inbox, research, resume, spreadsheet
from agent_demos.runner import run_demo
from agent_demos.storage.transcript_store import TranscriptStore

LOG = logging.getLogger("agent_demos")

EXIT_BAD_INPUT = 2


def configure_logging(level: str) -> None:
    """Configure logging to stdout for CLI runs."""
    lvl = (level or "WARNING").upper()
    numeric = getattr(logging, lvl, logging.WARNING)
    logging.basicConfig(
        level=numeric,
        format="%(asctime)s %(levelname)s %(name)s - %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S%z",
        stream=sys.stdout,
    )


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="agent-demos", description="Claude Agent SDK demos")
    ap.add_argument(
        "--config",
        action="append",
        default=None,
        help="settings YAML file; repeat to merge several (default: ./config/settings.yaml)",
    )
    ap.add_argument("--log-level", default=None, help="debug|info|warning|error (default from settings)")
    ap.add_argument("--transcript", default=None, help="append every agent event to this JSONL file")

    sub = ap.add_subparsers(dest="command", required=True)

    sub.add_parser("list", help="list available demos")

    res = sub.add_parser("resume", help=resume.INFO.title)
    res.add_argument("person", nargs="?", default="", help="full name of the person")

    rsch = sub.add_parser("research", help=research.INFO.title)
    rsch.add_argument("topic", help="topic to research")

    inb = sub.add_parser("inbox", help=inbox.INFO.title)
    inb.add_argument("mail_dir", help="folder with exported .eml/.mbox/.txt messages")
    inb.add_argument("--limit", type=int, default=inbox.DEFAULT_LIMIT, help="number of recent messages to cover")

    sheet = sub.add_parser("spreadsheet", help=spreadsheet.INFO.title)
    sheet.add_argument("source", help="path to a .csv/.xlsx/.xls file")
    sheet.add_argument("instruction", help="what to change, in plain language")

    for p in (res, rsch, inb, sheet):
        p.add_argument("--max-turns", type=int, default=None)
        p.add_argument("--model", default=None)

    return ap


def handle_list(console: Console) -> int:
    table = Table(title="Agent demos")
    table.add_column("Demo")
    table.add_column("Description")
    table.add_column("Tools")
    table.add_column("Max turns")
    table.add_column("Output")
    for info in DEMOS.values():
        table.add_row(info.name, info.title, ", ".join(info.allowed_tools), str(info.max_turns), info.output)
    console.print(table)
    return 0


def dispatch(args: argparse.Namespace, settings: AppSettings, console: Console) -> int:
    if args.command == "list":
        return handle_list(console)

    if args.command == "resume" and not args.person.strip():
        console.print(resume.USAGE, markup=False)
        console.print(resume.EXAMPLE, markup=False)
        return 1

    try:
        if args.command == "resume":
            request = resume.build_request(args.person, settings, args.max_turns, args.model)
            expected, label, banner = resume.expected_output(settings), "Resume", resume.banner(args.person)
        elif args.command == "research":
            request = research.build_request(args.topic, settings, args.max_turns, args.model)
            expected, label, banner = (
                research.expected_output(args.topic, settings),
                "Report",
                research.banner(args.topic),
            )
        elif args.command == "inbox":
            mail_dir = inbox.resolve_mail_dir(args.mail_dir, settings)
            request = inbox.build_request(mail_dir, settings, args.limit, args.max_turns, args.model)
            expected, label, banner = inbox.expected_output(settings), "Inbox summary", inbox.banner(mail_dir)
        elif args.command == "spreadsheet":
            source = spreadsheet.resolve_source(args.source, settings)
            request = spreadsheet.build_request(source, args.instruction, settings, args.max_turns, args.model)
            expected, label, banner = (
                spreadsheet.expected_output(source, settings),
                "Spreadsheet",
                spreadsheet.banner(source),
            )
        else:
            raise ValueError(f"unknown command: {args.command}")
    except (ValueError, FileNotFoundError) as exc:
        LOG.error("invalid input command=%s err=%s", args.command, exc)
        console.print(f"❌ {exc}", markup=False)
        return EXIT_BAD_INPUT

    transcript_path: Optional[Path] = Path(args.transcript) if args.transcript else settings.transcript_path
    transcript = TranscriptStore(str(transcript_path), request.name) if transcript_path else None
    return asyncio.run(
        run_demo(
            request,
            settings,
            console,
            expected,
            label,
            banner,
            transcript=transcript,
            working=DEMOS[request.name].working,
        )
    )


def main() -> None:
    load_dotenv()
    args = build_parser().parse_args()

    # Settings may set the level, so log loading errors at a default level first.
    configure_logging(args.log_level or os.getenv("AGENT_DEMOS_LOG_LEVEL") or "WARNING")
    try:
        settings = AppSettings.load(args.config or [os.path.join("config", "settings.yaml")])
    except ValueError as exc:
        LOG.error("invalid settings: %s", exc)
        print(f"invalid settings: {exc}")
        raise SystemExit(EXIT_BAD_INPUT)
    if not args.log_level:
        logging.getLogger().setLevel(getattr(logging, settings.log_level, logging.WARNING))

    ensure_api_key_env()
    raise SystemExit(dispatch(args, settings, Console()))


if __name__ == "__main__":
    main()
