import logging
import wave
from pathlib import Path

import numpy as np

from speech_summary.core.exceptions import InputError, UnsupportedFormatError
from speech_summary.models.audio import AudioSample

logger = logging.getLogger(__name__)

INT16_MAX = 32767
SAMPLE_WIDTH_BYTES = 2


def load_wav_mono(path: Path | str, expected_rate: int | None = None) -> AudioSample:
    """
    Читает моно WAV (PCM, 16 бит) и нормализует сэмплы делением на 32767.

    Любая ошибка декодирования фатальна: частичный результат не возвращается.
    """
    audio_path = Path(path)
    try:
        with wave.open(str(audio_path), "rb") as wf:
            n_channels, sampwidth, framerate, n_frames, *_ = wf.getparams()

            if n_channels != 1:
                raise UnsupportedFormatError(
                    f"Expected mono audio (1 channel), got {n_channels}")
            if sampwidth != SAMPLE_WIDTH_BYTES:
                raise UnsupportedFormatError(
                    f"Expected 16-bit PCM samples, got {sampwidth * 8}-bit")

            frames = wf.readframes(n_frames)
    except FileNotFoundError as e:
        raise InputError(f"Audio file not found: {audio_path}", e) from e
    except (wave.Error, EOFError, OSError) as e:
        raise InputError(f"Cannot read WAV file {audio_path}: {e}", e) from e

    if len(frames) != n_frames * SAMPLE_WIDTH_BYTES:
        raise InputError(
            f"Truncated audio data in {audio_path}: "
            f"expected {n_frames * SAMPLE_WIDTH_BYTES} bytes, got {len(frames)}")

    num_samples = n_frames
    # frombuffer не копирует байты, деление на месте
    samples = np.frombuffer(frames, dtype="<i2").astype(np.float32)
    samples /= np.float32(INT16_MAX)

    audio = AudioSample(samples=samples, sample_rate=framerate)

    logger.info(
        f"Loaded {audio_path}: {num_samples} samples at {framerate} Hz "
        f"({audio.duration_sec:.1f} s)")
    if expected_rate and framerate != expected_rate:
        logger.warning(
            f"Sample rate {framerate} Hz differs from the expected {expected_rate} Hz")

    return audio
