# Экспортируем все сервисы для удобного импорта
from speech_summary.services.audio_loader import load_wav_mono
from speech_summary.services.chunker import split_into_chunks
from speech_summary.services.ollama import OllamaClient, parse_stream, render_prompt_template
from speech_summary.services.pipeline import SummaryPipeline
from speech_summary.services.transcriber import (
    LocalWhisperTranscriber,
    Transcriber,
    load_transcriber,
)

__all__ = [
    # Audio
    "load_wav_mono",

    # Transcription
    "Transcriber",
    "LocalWhisperTranscriber",
    "load_transcriber",

    # Summarization
    "split_into_chunks",
    "OllamaClient",
    "parse_stream",
    "render_prompt_template",

    # Pipeline
    "SummaryPipeline",
]
