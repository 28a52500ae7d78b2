"""Topic research via web search, written up as a Markdown report."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from agent_demos.adapters.claude_sdk import DemoRequest
from agent_demos.config.settings import AppSettings
from agent_demos.demos.base import DemoInfo, make_request, normalize_output_name
from agent_demos.reporting.prompt_templates import build_research_prompt, research_system_prompt

INFO = DemoInfo(
    name="research",
    title="Research a topic with web search and write a Markdown report",
    allowed_tools=("WebSearch", "WebFetch", "Write", "Read"),
    max_turns=20,
    output="<output_dir>/research/<topic>.md",
    working="🌐 Searching the web and writing the report...",
)


def expected_output(topic: str, settings: AppSettings) -> Path:
    return settings.output_root / "research" / f"{normalize_output_name(topic, 'report')}.md"


def banner(topic: str) -> str:
    return f"🔎 Researching: {topic}"


def build_request(
    topic: str,
    settings: AppSettings,
    max_turns: Optional[int] = None,
    model: Optional[str] = None,
) -> DemoRequest:
    topic = (topic or "").strip()
    if not topic:
        raise ValueError("research topic is required")
    report_path = expected_output(topic, settings)
    return make_request(
        INFO,
        build_research_prompt(topic, report_path),
        research_system_prompt(report_path),
        settings,
        max_turns=max_turns,
        model=model,
    )
