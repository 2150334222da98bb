"""
Модель нормализованного аудио.
"""
import numpy as np
from pydantic import BaseModel


class AudioSample(BaseModel):
    """Моно-сэмплы float32 в диапазоне примерно [-1.0, 1.0]"""
    samples: np.ndarray
    sample_rate: int

    class Config:
        arbitrary_types_allowed = True
        frozen = True

    @property
    def duration_sec(self) -> float:
        if self.sample_rate <= 0:
            return 0.0
        return len(self.samples) / self.sample_rate
