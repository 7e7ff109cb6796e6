#!/usr/bin/env python3
"""
YouTube Summarizer CLI
Fetches a video transcript and summarizes it with the configured language model.
"""

import sys
import json
import asyncio
import argparse
from typing import List, Optional

from dotenv import load_dotenv
from rich.console import Console
from rich.markdown import Markdown
from rich.panel import Panel

from youtube_summarizer import __version__
from youtube_summarizer.core.config import validate_config
from youtube_summarizer.core.exceptions import AlreadyProcessingError, TranscriptError
from youtube_summarizer.services import FileNoteWriter, SettingsStore, VideoSummarizer
from youtube_summarizer.utils.youtube_utils import is_youtube_url


class SummarizerCLI:
    """Command line front end for VideoSummarizer."""

    def __init__(self, args: argparse.Namespace, console: Optional[Console] = None):
        self.args = args
        self.console = console or Console()
        self.settings_store = SettingsStore(args.settings) if args.settings else SettingsStore()
        self.summarizer = VideoSummarizer(
            settings_store=self.settings_store,
            note_writer=FileNoteWriter(args.output) if args.output else None
        )

    def print(self, message: str, style: str = None):
        self.console.print(message, style=style)

    def print_panel(self, content: str, title: str = None, style: str = "blue"):
        self.console.print(Panel(content, title=title, border_style=style))

    def apply_settings(self) -> None:
        """Persist settings given on the command line."""
        updates = {}
        if self.args.model:
            updates["model"] = self.args.model
        if self.args.temperature is not None:
            updates["temperature"] = self.args.temperature
        if self.args.lang:
            updates["language"] = self.args.lang
        if self.args.prompt:
            updates["custom_prompt"] = self.args.prompt
        if updates:
            self.settings_store.update_settings(**updates)
            self.print(f"✅ Saved settings: {', '.join(sorted(updates))}", style="green")

    async def show_transcript(self) -> None:
        transcript = await self.summarizer.get_transcript(self.args.url, self.args.lang)

        if self.args.json:
            self.console.print_json(json.dumps(transcript.to_dict(), ensure_ascii=False))
            return

        self.print_panel(
            f"👤 {transcript.author}\n🔗 {transcript.url}\n"
            f"🌐 {transcript.language_code}{' (auto-generated)' if transcript.is_auto_generated else ''}",
            title=transcript.title or transcript.video_id
        )
        text = transcript.timestamped_text if self.args.timestamps else transcript.text
        self.console.print(text, markup=False)

        if self.args.output:
            self.summarizer.note_writer.insert(text)

    async def summarize(self) -> None:
        self.print("📥 Fetching video transcript...", style="cyan")
        note = await self.summarizer.summarize_video(
            self.args.url,
            prompt=self.args.prompt,
            structured=self.args.structured,
            lang_code=self.args.lang
        )
        self.console.print(Markdown(note))
        if self.args.output:
            self.print(f"💾 Note written to {self.args.output}", style="green")

    async def run(self) -> int:
        if self.args.save_settings:
            self.apply_settings()
            if not self.args.url:
                return 0

        if not self.args.url:
            self.print("❌ A YouTube URL is required", style="red")
            return 1

        if not is_youtube_url(self.args.url):
            self.print("❌ Not a valid YouTube URL", style="red")
            return 1

        if not self.args.transcript_only:
            problems = validate_config()
            for problem in problems:
                self.print(f"⚠️  {problem}", style="yellow")

        try:
            if self.args.transcript_only:
                await self.show_transcript()
            else:
                await self.summarize()
        except TranscriptError as e:
            self.print(f"❌ Failed to fetch transcript: {e.message}", style="red")
            return 1
        except AlreadyProcessingError as e:
            self.print(f"⏳ {e.message}", style="yellow")
            return 1
        except RuntimeError as e:
            self.print(f"❌ {e}", style="red")
            return 1
        return 0


def setup_argument_parser() -> argparse.ArgumentParser:
    """Setup command line argument parser."""
    parser = argparse.ArgumentParser(
        description="Summarize a YouTube video from its transcript",
        epilog="Set OPENAI_API_KEY, ANTHROPIC_API_KEY or GEMINI_API_KEY for the chosen model."
    )

    parser.add_argument("url", nargs="?", help="YouTube video URL")
    parser.add_argument("-l", "--lang", default=None, help="Caption language code (default: en)")
    parser.add_argument("-p", "--prompt", default=None, help="Instruction used instead of the stored prompt")
    parser.add_argument("-o", "--output", default=None, help="Append the note to this file")
    parser.add_argument("--model", default=None, help="Model name, e.g. gemini-1.5-pro or gpt-4o-mini")
    parser.add_argument("--temperature", type=float, default=None, help="Model temperature")
    parser.add_argument(
        "--transcript-only",
        action="store_true",
        help="Print the transcript without summarizing it"
    )
    parser.add_argument(
        "--timestamps",
        action="store_true",
        help="Prefix transcript lines with timestamps (with --transcript-only)"
    )
    parser.add_argument("--json", action="store_true", help="Print the transcript as JSON (with --transcript-only)")
    parser.add_argument("--structured", action="store_true", help="Request a structured summary")
    parser.add_argument("--settings", default=None, help="Path of the settings file")
    parser.add_argument(
        "--save-settings",
        action="store_true",
        help="Store --model, --temperature, --lang and --prompt as defaults"
    )
    parser.add_argument("--version", action="version", version=f"YouTube Summarizer v{__version__}")

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    load_dotenv()
    args = setup_argument_parser().parse_args(argv)

    try:
        cli = SummarizerCLI(args)
        return asyncio.run(cli.run())
    except KeyboardInterrupt:
        print("\n👋 Goodbye!")
        return 130


if __name__ == "__main__":
    sys.exit(main())
