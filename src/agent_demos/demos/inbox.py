"""Inbox briefing over a local folder of exported emails."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from agent_demos.adapters.claude_sdk import DemoRequest
from agent_demos.config.settings import AppSettings
from agent_demos.demos.base import DemoInfo, make_request
from agent_demos.reporting.prompt_templates import build_inbox_prompt, inbox_system_prompt

INFO = DemoInfo(
    name="inbox",
    title="Summarize a local inbox into a Markdown briefing",
    allowed_tools=("Read", "Glob", "Grep", "Write"),
    max_turns=15,
    output="<output_dir>/inbox/summary.md",
    working="📨 Reading messages and writing the briefing...",
)

DEFAULT_LIMIT = 25


def expected_output(settings: AppSettings) -> Path:
    return settings.output_root / "inbox" / "summary.md"


def banner(mail_dir: Path) -> str:
    return f"📬 Summarizing inbox: {mail_dir}"


def resolve_mail_dir(mail_dir: str, settings: AppSettings) -> Path:
    path = Path(mail_dir).expanduser()
    if not path.is_absolute():
        path = settings.cwd / path
    if not path.is_dir():
        raise FileNotFoundError(f"mail directory not found: {path}")
    return path


def build_request(
    mail_dir: Path,
    settings: AppSettings,
    limit: int = DEFAULT_LIMIT,
    max_turns: Optional[int] = None,
    model: Optional[str] = None,
) -> DemoRequest:
    if limit < 1:
        raise ValueError("limit must be a positive integer")
    summary_path = expected_output(settings)
    return make_request(
        INFO,
        build_inbox_prompt(mail_dir, summary_path, limit),
        inbox_system_prompt(mail_dir, summary_path),
        settings,
        max_turns=max_turns,
        model=model,
    )
