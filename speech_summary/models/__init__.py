# Экспортируем все модели для удобного импорта
from .audio import AudioSample
from .transcript import Transcript, TranscriptSegment

__all__ = [
    "AudioSample",
    "Transcript",
    "TranscriptSegment",
]
