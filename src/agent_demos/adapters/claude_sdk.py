"""Claude Agent SDK adapter."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, AsyncIterator, Callable, Tuple

from claude_agent_sdk import ClaudeAgentOptions, query

from agent_demos.config.settings import AppSettings, build_sdk_env

LOG = logging.getLogger(__name__)

QueryFn = Callable[..., AsyncIterator[Any]]


@dataclass(frozen=True)
class DemoRequest:
    name: str
    prompt: str
    system_prompt: str
    allowed_tools: Tuple[str, ...]
    max_turns: int
    model: str
    cwd: Path


def build_options(request: DemoRequest, settings: AppSettings) -> ClaudeAgentOptions:
    kwargs: dict[str, Any] = {
        "max_turns": request.max_turns,
        "cwd": str(request.cwd),
        "model": request.model,
        "allowed_tools": list(request.allowed_tools),
        "system_prompt": request.system_prompt,
        "env": build_sdk_env(),
    }
    if settings.permission_mode:
        kwargs["permission_mode"] = settings.permission_mode
    return ClaudeAgentOptions(**kwargs)


async def stream_messages(
    request: DemoRequest,
    settings: AppSettings,
    query_fn: QueryFn = query,
) -> AsyncIterator[Any]:
    """Yield SDK messages for one demo run; SDK errors propagate."""
    options = build_options(request, settings)
    LOG.info(
        "query start demo=%s model=%s max_turns=%s tools=%s",
        request.name,
        request.model,
        request.max_turns,
        ",".join(request.allowed_tools),
    )
    LOG.debug("prompt length=%d system_prompt length=%d", len(request.prompt), len(request.system_prompt))
    count = 0
    async for message in query_fn(prompt=request.prompt, options=options):
        count += 1
        yield message
    LOG.info("query done demo=%s messages=%d", request.name, count)
