"""
Модели транскрипта: сегменты распознавания и их текстовые представления.
"""
from pydantic import BaseModel
from typing import List


class TranscriptSegment(BaseModel):
    start: float
    end: float
    text: str

    class Config:
        frozen = True


class Transcript(BaseModel):
    segments: List[TranscriptSegment] = []

    def flat(self) -> str:
        """Текст сегментов через одиночный пробел"""
        return " ".join(seg.text.strip() for seg in self.segments)

    def pretty(self) -> str:
        """По одному сегменту на строку"""
        return "\n".join(seg.text.strip() for seg in self.segments)

    @property
    def words_total(self) -> int:
        return len(self.flat().split())
