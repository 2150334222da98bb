import logging
from typing import List, Protocol

from faster_whisper import WhisperModel

from speech_summary.core.config import Settings
from speech_summary.core.exceptions import ModelLoadError, TranscriptionError
from speech_summary.models.audio import AudioSample
from speech_summary.models.transcript import TranscriptSegment

logger = logging.getLogger(__name__)


class Transcriber(Protocol):
    def transcribe(self, audio: AudioSample) -> List[TranscriptSegment]:
        ...


def _segment_text(raw) -> str:
    """Невалидный UTF-8 декодируется с заменой, а не роняет запуск"""
    if isinstance(raw, (bytes, bytearray)):
        return bytes(raw).decode("utf-8", errors="replace")
    return raw or ""


class LocalWhisperTranscriber:
    """
    Использует локальную модель Whisper через faster-whisper.
    Декодирование жадное и детерминированное: beam_size=1, best_of=1,
    temperature=0, язык фиксирован.
    """

    def __init__(
        self,
        model_size: str,
        device: str = "cpu",
        compute_type: str = "int8",
        language: str = "en",
    ):
        self.model_size = model_size
        self.language = language
        try:
            self.model = WhisperModel(
                model_size,
                device=device,
                compute_type=compute_type,
            )
        except Exception as e:
            raise ModelLoadError(model_size, e) from e
        logger.info(f"Loaded Whisper model {model_size} ({device}, {compute_type})")

    def transcribe(self, audio: AudioSample) -> List[TranscriptSegment]:
        segments: List[TranscriptSegment] = []
        try:
            # segments_iter ленивый, ошибки движка всплывают при итерации
            segments_iter, info = self.model.transcribe(
                audio.samples,
                language=self.language,
                beam_size=1,
                best_of=1,
                temperature=0.0,
                vad_filter=False,
                word_timestamps=False,
            )
            for seg in segments_iter:
                segments.append(
                    TranscriptSegment(
                        start=float(seg.start),
                        end=float(seg.end),
                        text=_segment_text(seg.text),
                    )
                )
        except Exception as e:
            raise TranscriptionError(f"Whisper transcription failed: {e}", e) from e

        logger.info(f"Transcribed {len(segments)} segments")
        return segments


def load_transcriber(settings: Settings) -> LocalWhisperTranscriber:
    """Загружает модель один раз на запуск."""
    return LocalWhisperTranscriber(
        settings.whisper_model,
        device=settings.whisper_device,
        compute_type=settings.whisper_compute_type,
        language=settings.whisper_language,
    )
