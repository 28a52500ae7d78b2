"""Transcript store: one JSON line per SDK event."""

from __future__ import annotations

import json
import os
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from claude_agent_sdk import (
    AssistantMessage,
    ResultMessage,
    SystemMessage,
    TextBlock,
    ToolResultBlock,
    ToolUseBlock,
    UserMessage,
)


def now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


def message_records(message: Any) -> List[Dict[str, Any]]:
    if isinstance(message, AssistantMessage):
        records: List[Dict[str, Any]] = []
        for block in message.content:
            if isinstance(block, TextBlock):
                records.append({"type": "text", "text": block.text})
            elif isinstance(block, ToolUseBlock):
                records.append({"type": "tool_use", "tool": block.name, "input": block.input})
        return records
    if isinstance(message, UserMessage) and not isinstance(message.content, str):
        return [
            {"type": "tool_result", "tool_use_id": b.tool_use_id, "result": b.content, "is_error": bool(b.is_error)}
            for b in message.content
            if isinstance(b, ToolResultBlock)
        ]
    if isinstance(message, ResultMessage):
        return [
            {
                "type": "result",
                "subtype": message.subtype,
                "session_id": message.session_id,
                "num_turns": message.num_turns,
                "duration_ms": message.duration_ms,
                "total_cost_usd": message.total_cost_usd,
                "is_error": message.is_error,
            }
        ]
    if isinstance(message, SystemMessage):
        return [{"type": "system", "subtype": message.subtype, "session_id": message.data.get("session_id")}]
    return []


class TranscriptStore:
    def __init__(self, path: Optional[str], demo: str) -> None:
        self.path = path
        self.demo = demo
        self.session_id: Optional[str] = None

    def write(self, record: Dict[str, Any]) -> None:
        if not self.path:
            return
        parent = os.path.dirname(self.path)
        if parent:
            os.makedirs(parent, exist_ok=True)
        with open(self.path, "a", encoding="utf-8") as f:
            f.write(json.dumps(record, ensure_ascii=False, default=str) + "\n")

    def record(self, message: Any) -> None:
        for rec in message_records(message):
            if rec.get("session_id"):
                self.session_id = rec["session_id"]
            self.write({"ts": now_iso(), "demo": self.demo, "session_id": self.session_id, **rec})

    def read_all(self) -> List[Dict[str, Any]]:
        if not self.path or not os.path.exists(self.path):
            return []
        records: List[Dict[str, Any]] = []
        with open(self.path, "r", encoding="utf-8") as f:
            for line in f:
                line = line.strip()
                if not line:
                    continue
                try:
                    records.append(json.loads(line))
                except json.JSONDecodeError:
                    continue
        return records
