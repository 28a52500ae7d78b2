"""Turn Agent SDK messages into console lines."""

from __future__ import annotations

import json
from typing import Any, List

from claude_agent_sdk import (
    AssistantMessage,
    ResultMessage,
    TextBlock,
    ToolResultBlock,
    ToolUseBlock,
    UserMessage,
)

RESULT_PREVIEW_CHARS = 200


def truncate_result(content: Any, limit: int = RESULT_PREVIEW_CHARS) -> str:
    text = json.dumps(content, ensure_ascii=False, default=str)[:limit]
    if len(text) >= limit:
        text += "..."
    return text


def format_tool_use(block: ToolUseBlock) -> str:
    tool_input = block.input if isinstance(block.input, dict) else {}
    if block.name == "WebSearch" and "query" in tool_input:
        return f'\n🔍 Searching: "{tool_input["query"]}"'
    return f"\n🔧 Using tool: {block.name}"


def format_tool_result(block: ToolResultBlock) -> str:
    label = "Error" if block.is_error else "Result"
    return f"   ↳ {label}: {truncate_result(block.content)}"


def format_result(message: ResultMessage) -> List[str]:
    parts = [f"{message.num_turns} turns", f"{message.duration_ms / 1000:.1f}s"]
    if message.total_cost_usd is not None:
        parts.append(f"${message.total_cost_usd:.4f}")
    lines = [f"\n✅ Agent finished ({', '.join(parts)})"]
    if message.is_error or message.subtype != "success":
        lines.append(f"⚠️  Agent stopped early: {message.subtype}")
    return lines


def format_message(message: Any) -> List[str]:
    if isinstance(message, AssistantMessage):
        lines: List[str] = []
        for block in message.content:
            if isinstance(block, TextBlock):
                lines.append(block.text)
            elif isinstance(block, ToolUseBlock):
                lines.append(format_tool_use(block))
        return lines

    if isinstance(message, UserMessage):
        # Tool results come back as user turns; plain string content is the prompt echo.
        if isinstance(message.content, str):
            return []
        return [format_tool_result(b) for b in message.content if isinstance(b, ToolResultBlock)]

    if isinstance(message, ResultMessage):
        return format_result(message)

    return []
