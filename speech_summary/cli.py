"""
Командная строка: аудио -> транскрипт -> саммари через локальную LLM.

Два режима:

* ``speech-summary chunked [chunk_count]``: читает ``input.wav``, делит
  транскрипт на части, суммаризирует каждую и пишет ``summary.txt``;
* ``speech-summary file <input.wav>``: подставляет весь транскрипт в шаблон
  ``prompt.txt`` и пишет ``<stem>.transcript`` и ``<stem>.summary``.

Любая ошибка шага фатальна: сообщение в лог и код выхода 1. Файлы,
записанные до ошибки, остаются на диске.
"""

import argparse
import asyncio
import logging
import sys
from pathlib import Path
from typing import List, Optional

from speech_summary.core.config import Settings, settings as default_settings
from speech_summary.core.exceptions import InputError, SpeechSummaryError
from speech_summary.services.ollama import PLACEHOLDER, OllamaClient
from speech_summary.services.pipeline import SummaryPipeline
from speech_summary.services.transcriber import load_transcriber

logger = logging.getLogger(__name__)


def _build_parser(settings: Settings) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="speech-summary",
        description="Transcribe a mono WAV file and summarize it with a local LLM",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    subparsers = parser.add_subparsers(dest="command", required=True)

    chunked = subparsers.add_parser(
        "chunked", help="summarize the transcript in N word-count chunks")
    chunked.add_argument(
        "chunk_count", nargs="?", type=int, default=1,
        help="number of chunks to summarize separately (default: 1); "
             "short transcripts may yield fewer chunks")
    chunked.add_argument("--input", type=Path, default=Path(settings.input_file))
    chunked.add_argument("--output", type=Path, default=Path(settings.summary_file))

    single = subparsers.add_parser(
        "file", help="summarize the whole transcript with a prompt template")
    single.add_argument("audio", type=Path, help="path to a mono 16-bit .wav file")
    single.add_argument("--prompt", type=Path, default=Path(settings.prompt_file))

    return parser


def _setup_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def _read_prompt_template(path: Path) -> str:
    try:
        template = path.read_text(encoding="utf-8")
    except FileNotFoundError as e:
        raise InputError(f"Prompt template not found: {path}", e) from e
    except (OSError, UnicodeDecodeError) as e:
        raise InputError(f"Cannot read prompt template {path}: {e}", e) from e
    if PLACEHOLDER not in template:
        raise InputError(f"Prompt template {path} has no '{PLACEHOLDER}' placeholder")
    return template


def _write_text(path: Path, text: str) -> None:
    path.write_text(text, encoding="utf-8")
    logger.info(f"Saved {path}")


async def run_chunked(args: argparse.Namespace, settings: Settings) -> None:
    transcriber = load_transcriber(settings)
    async with OllamaClient(settings) as summarizer:
        pipeline = SummaryPipeline(
            transcriber, summarizer, expected_sample_rate=settings.whisper_sample_rate)

        transcript = pipeline.transcribe_file(args.input)
        text = transcript.flat()
        print(f"--- TRANSCRIPTION ---\n{text}")

        # Знаменатель: запрошенное число частей, фактических может быть меньше
        def on_chunk(index: int, total: int) -> None:
            print(f"--- Summarizing chunk {index}/{args.chunk_count} ---")

        final_summary = await pipeline.summarize_chunked(
            text, args.chunk_count, on_chunk=on_chunk)

    print(f"--- FINAL SUMMARY ---\n{final_summary}")
    _write_text(args.output, final_summary)


async def run_file(args: argparse.Namespace, settings: Settings) -> None:
    audio_path: Path = args.audio
    if audio_path.suffix.lower() != ".wav":
        raise InputError(f"Expected a .wav file, got '{audio_path.name}'")
    # Шаблон проверяется до загрузки модели и любых сетевых запросов
    template = _read_prompt_template(args.prompt)

    transcript_path = audio_path.with_suffix(".transcript")
    summary_path = audio_path.with_suffix(".summary")

    transcriber = load_transcriber(settings)
    async with OllamaClient(settings) as summarizer:
        pipeline = SummaryPipeline(
            transcriber, summarizer, expected_sample_rate=settings.whisper_sample_rate)

        transcript = pipeline.transcribe_file(audio_path)
        text = transcript.pretty()
        print(f"--- TRANSCRIPTION ---\n{text}")
        _write_text(transcript_path, text)

        print("--- Summarizing transcript ---")
        summary = await pipeline.summarize_with_template(text, template)

    print(f"--- SUMMARY ---\n{summary}")
    _write_text(summary_path, summary)


def main(argv: Optional[List[str]] = None, settings: Optional[Settings] = None) -> int:
    settings = settings or default_settings
    args = _build_parser(settings).parse_args(argv)
    _setup_logging("DEBUG" if args.verbose else settings.log_level)

    runner = run_chunked if args.command == "chunked" else run_file
    try:
        asyncio.run(runner(args, settings))
    except SpeechSummaryError as e:
        logger.error(str(e))
        return 1
    except OSError as e:
        logger.error(f"I/O error: {e}")
        return 1
    return 0


def run() -> None:
    sys.exit(main())
