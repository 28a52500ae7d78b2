"""Shared demo runner: banner, event stream, output check."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from claude_agent_sdk import ClaudeSDKError, query
from rich.console import Console

from agent_demos.adapters.claude_sdk import DemoRequest, QueryFn, stream_messages
from agent_demos.config.settings import AppSettings
from agent_demos.reporting.events import format_message
from agent_demos.storage.transcript_store import TranscriptStore

LOG = logging.getLogger(__name__)

RULE = "=" * 50


def echo(console: Console, line: str) -> None:
    console.print(line, markup=False, highlight=False, emoji=False)


async def run_demo(
    request: DemoRequest,
    settings: AppSettings,
    console: Console,
    expected_path: Path,
    label: str,
    banner: str,
    query_fn: QueryFn = query,
    transcript: Optional[TranscriptStore] = None,
    working: Optional[str] = None,
) -> int:
    echo(console, f"\n{banner}\n")
    echo(console, RULE)

    expected_path.parent.mkdir(parents=True, exist_ok=True)
    LOG.debug("output directory ready: %s", expected_path.parent)
    if working:
        echo(console, f"\n{working}\n")

    try:
        async for message in stream_messages(request, settings, query_fn=query_fn):
            if transcript is not None:
                transcript.record(message)
            for line in format_message(message):
                echo(console, line)
    except ClaudeSDKError as exc:
        LOG.error("agent sdk call failed demo=%s err=%s", request.name, exc)
        echo(console, f"\n❌ Agent SDK call failed: {exc}")
        return 1
    except Exception as exc:
        # The SDK also surfaces stream and control-protocol failures as plain exceptions.
        LOG.error("agent query failed demo=%s err=%s", request.name, exc)
        echo(console, f"\n❌ Agent SDK call failed: {exc}")
        return 1

    if expected_path.exists():
        echo(console, "\n" + RULE)
        echo(console, f"📄 {label} saved to: {expected_path}")
        echo(console, RULE + "\n")
        return 0

    LOG.warning("expected output missing demo=%s path=%s", request.name, expected_path)
    echo(console, f"\n❌ {label} file was not created. Check the output above for errors.")
    return 1
