"""Resume generator: research a person and write a 1-page .docx resume."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from agent_demos.adapters.claude_sdk import DemoRequest
from agent_demos.config.settings import AppSettings
from agent_demos.demos.base import DemoInfo, make_request
from agent_demos.reporting.prompt_templates import build_resume_prompt, resume_system_prompt

INFO = DemoInfo(
    name="resume",
    title="Research a person and generate a 1-page .docx resume",
    allowed_tools=("WebSearch", "WebFetch", "Bash", "Write", "Read", "Glob"),
    max_turns=30,
    output="<output_dir>/resume.docx",
    working="🔍 Researching and creating resume...",
)

USAGE = 'Usage: agent-demos resume "Person Name"'
EXAMPLE = 'Example: agent-demos resume "Jane Doe"'


def expected_output(settings: AppSettings) -> Path:
    return settings.output_root / "resume.docx"


def banner(person: str) -> str:
    return f"📝 Generating resume for: {person}"


def build_request(
    person: str,
    settings: AppSettings,
    max_turns: Optional[int] = None,
    model: Optional[str] = None,
) -> DemoRequest:
    person = (person or "").strip()
    if not person:
        raise ValueError("person name is required")
    return make_request(
        INFO,
        build_resume_prompt(person),
        resume_system_prompt(settings.output_root),
        settings,
        max_turns=max_turns,
        model=model,
    )
