import asyncio
import io
import os
import sys
import tempfile
import unittest
from pathlib import Path

ROOT_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", ".."))
SRC_DIR = os.path.join(ROOT_DIR, "src")
if SRC_DIR not in sys.path:
    sys.path.insert(0, SRC_DIR)

from claude_agent_sdk import (  # noqa: E402
    AssistantMessage,
    ClaudeSDKError,
    ResultMessage,
    SystemMessage,
    TextBlock,
    ToolResultBlock,
    ToolUseBlock,
    UserMessage,
)
from rich.console import Console  # noqa: E402

from agent_demos.adapters.claude_sdk import build_options  # noqa: E402
from agent_demos.config.settings import AppSettings  # noqa: E402
from agent_demos.demos import resume  # noqa: E402
from agent_demos.runner import run_demo  # noqa: E402
from agent_demos.storage.transcript_store import TranscriptStore  # noqa: E402


def session_messages():
    return [
        SystemMessage(subtype="init", data={"session_id": "sess-1"}),
        AssistantMessage(
            content=[
                TextBlock(text="Searching now."),
                ToolUseBlock(id="t1", name="WebSearch", input={"query": "Jane Doe"}),
            ],
            model="sonnet",
        ),
        UserMessage(content=[ToolResultBlock(tool_use_id="t1", content="Jane Doe is a staff engineer")]),
        ResultMessage(
            subtype="success",
            duration_ms=2000,
            duration_api_ms=1800,
            is_error=False,
            num_turns=2,
            session_id="sess-1",
            total_cost_usd=0.01,
        ),
    ]


class FakeQuery:
    def __init__(self, messages, create=None, error=None):
        self.messages = messages
        self.create = create
        self.error = error
        self.calls = []

    async def __call__(self, prompt, options):
        self.calls.append((prompt, options))
        for message in self.messages:
            yield message
        if self.error is not None:
            raise self.error
        if self.create is not None:
            self.create.write_bytes(b"docx")


class TestRunDemo(unittest.TestCase):
    def setUp(self) -> None:
        self.tmp = tempfile.TemporaryDirectory()
        self.addCleanup(self.tmp.cleanup)
        self.settings = AppSettings(cwd=Path(self.tmp.name))
        self.out = io.StringIO()
        self.console = Console(file=self.out, width=200, color_system=None)
        self.request = resume.build_request("Jane Doe", self.settings)
        self.expected = resume.expected_output(self.settings)

    def run_demo(self, fake, transcript=None) -> int:
        return asyncio.run(
            run_demo(
                self.request,
                self.settings,
                self.console,
                self.expected,
                "Resume",
                resume.banner("Jane Doe"),
                query_fn=fake,
                transcript=transcript,
                working=resume.INFO.working,
            )
        )

    def test_success_prints_events_and_path(self) -> None:
        fake = FakeQuery(session_messages(), create=self.expected)
        code = self.run_demo(fake)
        text = self.out.getvalue()
        self.assertEqual(code, 0)
        self.assertIn("📝 Generating resume for: Jane Doe", text)
        self.assertIn("Searching now.", text)
        self.assertIn('🔍 Searching: "Jane Doe"', text)
        self.assertIn('↳ Result: "Jane Doe is a staff engineer"', text)
        self.assertIn(f"📄 Resume saved to: {self.expected}", text)

        prompt, options = fake.calls[0]
        self.assertIn('"Jane Doe"', prompt)
        self.assertEqual(options.max_turns, 30)
        self.assertEqual(options.model, "sonnet")
        self.assertIn("WebSearch", options.allowed_tools)

    def test_output_directory_created(self) -> None:
        self.run_demo(FakeQuery([]))
        self.assertTrue(self.expected.parent.is_dir())

    def test_missing_output_reported(self) -> None:
        code = self.run_demo(FakeQuery(session_messages()))
        self.assertEqual(code, 1)
        self.assertIn("❌ Resume file was not created. Check the output above for errors.", self.out.getvalue())

    def test_sdk_error_reported(self) -> None:
        code = self.run_demo(FakeQuery(session_messages()[:2], error=ClaudeSDKError("connection lost")))
        self.assertEqual(code, 1)
        self.assertIn("❌ Agent SDK call failed: connection lost", self.out.getvalue())

    def test_plain_exception_from_query_reported(self) -> None:
        fake = FakeQuery(session_messages()[:2], error=Exception("Control request timeout: initialize"))
        code = self.run_demo(fake)
        self.assertEqual(code, 1)
        self.assertIn("❌ Agent SDK call failed: Control request timeout: initialize", self.out.getvalue())

    def test_working_line_printed_before_events(self) -> None:
        self.run_demo(FakeQuery(session_messages(), create=self.expected))
        text = self.out.getvalue()
        self.assertIn("🔍 Researching and creating resume...", text)
        self.assertLess(text.index("Researching and creating resume"), text.index("Searching now."))

    def test_markup_like_text_printed_verbatim(self) -> None:
        msg = AssistantMessage(content=[TextBlock(text="[bold]not markup[/bold] :smile:")], model="sonnet")
        self.run_demo(FakeQuery([msg]))
        self.assertIn("[bold]not markup[/bold] :smile:", self.out.getvalue())

    def test_transcript_written(self) -> None:
        path = os.path.join(self.tmp.name, "logs", "events.jsonl")
        store = TranscriptStore(path, "resume")
        self.run_demo(FakeQuery(session_messages(), create=self.expected), transcript=store)

        records = store.read_all()
        self.assertEqual([r["type"] for r in records], ["system", "text", "tool_use", "tool_result", "result"])
        self.assertTrue(all(r["session_id"] == "sess-1" for r in records))
        self.assertEqual(records[2]["input"], {"query": "Jane Doe"})


class TestBuildOptions(unittest.TestCase):
    def test_permission_mode_only_when_set(self) -> None:
        settings = AppSettings(cwd=Path("/tmp"))
        request = resume.build_request("Jane Doe", settings)
        self.assertIsNone(build_options(request, settings).permission_mode)

        settings = AppSettings(cwd=Path("/tmp"), permission_mode="acceptEdits")
        options = build_options(request, settings)
        self.assertEqual(options.permission_mode, "acceptEdits")
        self.assertEqual(options.cwd, "/tmp")
        self.assertEqual(options.system_prompt, request.system_prompt)


class TestTranscriptStore(unittest.TestCase):
    def test_no_path_is_noop(self) -> None:
        store = TranscriptStore(None, "resume")
        store.record(AssistantMessage(content=[TextBlock(text="hi")], model="sonnet"))
        self.assertEqual(store.read_all(), [])

    def test_malformed_lines_skipped(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, "t.jsonl")
            with open(path, "w", encoding="utf-8") as f:
                f.write('{"type": "text"}\nnot json\n\n')
            self.assertEqual(TranscriptStore(path, "resume").read_all(), [{"type": "text"}])


if __name__ == "__main__":
    unittest.main()
