import logging
from pathlib import Path
from typing import Callable, Optional

from speech_summary.models.transcript import Transcript
from speech_summary.services.audio_loader import load_wav_mono
from speech_summary.services.chunker import split_into_chunks
from speech_summary.services.ollama import OllamaClient, render_prompt_template
from speech_summary.services.transcriber import Transcriber

logger = logging.getLogger(__name__)


class SummaryPipeline:
    """
    Координирует загрузку аудио, транскрипцию и суммаризацию.
    Все шаги выполняются последовательно, первая ошибка прерывает запуск.
    """

    def __init__(
        self,
        transcriber: Transcriber,
        summarizer: OllamaClient,
        expected_sample_rate: Optional[int] = None,
    ):
        self.transcriber = transcriber
        self.summarizer = summarizer
        self.expected_sample_rate = expected_sample_rate

    def transcribe_file(self, audio_path: Path) -> Transcript:
        audio = load_wav_mono(audio_path, expected_rate=self.expected_sample_rate)
        segments = self.transcriber.transcribe(audio)
        transcript = Transcript(segments=segments)
        logger.info(f"Transcript: {len(transcript.segments)} segments, "
                    f"{transcript.words_total} words")
        return transcript

    async def summarize_chunked(
        self,
        transcript_text: str,
        chunk_count: int,
        on_chunk: Optional[Callable[[int, int], None]] = None,
    ) -> str:
        """Саммари частей, разделённые пустой строкой"""
        chunks = split_into_chunks(transcript_text, chunk_count)
        logger.info(f"Transcript split into {len(chunks)} chunks "
                    f"(requested {chunk_count})")
        summaries = await self.summarizer.summarize_chunks(chunks, on_chunk=on_chunk)
        return "\n\n".join(summaries)

    async def summarize_with_template(self, transcript_text: str, template: str) -> str:
        prompt = render_prompt_template(template, transcript_text)
        return await self.summarizer.generate(prompt)
