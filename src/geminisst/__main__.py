"""
Gemini speech-to-text command line.

Transcribes one audio file and prints the result as JSON.
"""

import argparse
import sys

from .api import audio_to_text
from .config import load_config
from .domain import ThinkingLevel
from .exceptions import GeminiSSTError
from .logging import setup_logging


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="geminisst", description="Transcribe audio with Google Gemini."
    )
    parser.add_argument("audio", help="Audio file path or https:// file locator.")
    parser.add_argument("--prompt", help="Guidance text sent with the audio.")
    parser.add_argument("--model", help="Gemini model identifier.")
    parser.add_argument(
        "--thinking-budget", type=int, help="Thinking budget for gemini-2.x models."
    )
    parser.add_argument(
        "--thinking-level",
        choices=[level.value for level in ThinkingLevel],
        help="Thinking level for gemini-3 models.",
    )
    parser.add_argument(
        "--inline-max-bytes",
        type=int,
        help="Send local files up to this size inline instead of uploading.",
    )
    parser.add_argument("--verbose", action="store_true", help="Log request details.")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Runs one transcription and writes the JSON result to stdout."""
    args = build_parser().parse_args(argv)
    config = load_config()
    logger = setup_logging(config.logging.level)

    options = {
        "prompt": args.prompt,
        "model": args.model or config.gemini.model_name,
        "verbose": args.verbose,
        "thinking_budget": args.thinking_budget,
        "thinking_level": args.thinking_level,
        "inline_max_bytes": args.inline_max_bytes,
    }
    options = {key: value for key, value in options.items() if value is not None}

    try:
        result = audio_to_text(args.audio, config.gemini.api_key, options)
    except GeminiSSTError as e:
        logger.error("Transcription failed", extra={"error": str(e)})
        return 1

    print(result.model_dump_json(by_alias=True, exclude_none=True, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
