import pytest

from speech_summary.core.config import Settings

from helpers import write_wav


@pytest.fixture
def settings():
    return Settings(
        ollama_url="http://ollama.test/api/generate",
        ollama_model="gemma",
        whisper_model="base.en",
    )


@pytest.fixture
def silence_wav(tmp_path):
    # 3 секунды тишины, 16 кГц
    return write_wav(tmp_path / "input.wav", [0] * 16000 * 3)
