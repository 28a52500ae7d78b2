"""Spreadsheet edits driven by a plain-language instruction."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from agent_demos.adapters.claude_sdk import DemoRequest
from agent_demos.config.settings import AppSettings
from agent_demos.demos.base import DemoInfo, make_request
from agent_demos.reporting.prompt_templates import build_spreadsheet_prompt, spreadsheet_system_prompt

INFO = DemoInfo(
    name="spreadsheet",
    title="Apply an instruction to a .csv/.xlsx file and save a copy",
    allowed_tools=("Read", "Write", "Edit", "Bash", "Glob"),
    max_turns=20,
    output="<output_dir>/spreadsheets/<name>_updated.<ext>",
    working="🧮 Inspecting and editing the spreadsheet...",
)

SUPPORTED_SUFFIXES = (".csv", ".xlsx", ".xls")


def resolve_source(source: str, settings: AppSettings) -> Path:
    path = Path(source).expanduser()
    if not path.is_absolute():
        path = settings.cwd / path
    if path.suffix.lower() not in SUPPORTED_SUFFIXES:
        raise ValueError(f"unsupported spreadsheet type {path.suffix or '<none>'}; expected one of {', '.join(SUPPORTED_SUFFIXES)}")
    if not path.is_file():
        raise FileNotFoundError(f"spreadsheet not found: {path}")
    return path


def expected_output(source: Path, settings: AppSettings) -> Path:
    return settings.output_root / "spreadsheets" / f"{source.stem}_updated{source.suffix}"


def banner(source: Path) -> str:
    return f"📊 Editing spreadsheet: {source.name}"


def build_request(
    source: Path,
    instruction: str,
    settings: AppSettings,
    max_turns: Optional[int] = None,
    model: Optional[str] = None,
) -> DemoRequest:
    instruction = (instruction or "").strip()
    if not instruction:
        raise ValueError("instruction is required")
    output_path = expected_output(source, settings)
    return make_request(
        INFO,
        build_spreadsheet_prompt(source, instruction, output_path),
        spreadsheet_system_prompt(source, output_path),
        settings,
        max_turns=max_turns,
        model=model,
    )
