"""Demo metadata and request assembly."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional, Tuple

from agent_demos.adapters.claude_sdk import DemoRequest
from agent_demos.config.settings import AppSettings


@dataclass(frozen=True)
class DemoInfo:
    name: str
    title: str
    allowed_tools: Tuple[str, ...]
    max_turns: int
    output: str
    working: str


def normalize_output_name(name: str, fallback: str = "output") -> str:
    base = re.sub(r"[^\w]+", "_", name, flags=re.UNICODE).strip("_")
    return base.lower() if base else fallback


def make_request(
    info: DemoInfo,
    prompt: str,
    system_prompt: str,
    settings: AppSettings,
    max_turns: Optional[int] = None,
    model: Optional[str] = None,
) -> DemoRequest:
    """Explicit arguments win over per-demo settings, which win over demo defaults."""
    overrides = settings.overrides_for(info.name)
    if max_turns is None:
        max_turns = overrides.max_turns if overrides.max_turns is not None else info.max_turns
    if max_turns < 1:
        raise ValueError(f"max turns must be at least 1, got {max_turns}")
    allowed_tools = overrides.allowed_tools if overrides.allowed_tools is not None else info.allowed_tools
    return DemoRequest(
        name=info.name,
        prompt=prompt,
        system_prompt=system_prompt,
        allowed_tools=allowed_tools,
        max_turns=max_turns,
        model=model or overrides.model or settings.model,
        cwd=settings.cwd,
    )
