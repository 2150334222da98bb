from typing import Optional
from pydantic_settings import BaseSettings
from pydantic import Field


DEFAULT_CHUNK_PROMPT = (
    "Thoroughly summarize the following part of a transcript:\n{}"
)


class Settings(BaseSettings):
    # Локальный Whisper (faster-whisper): имя модели или путь к каталогу модели
    whisper_model: str = Field(
        default="base.en", alias="WHISPER_MODEL"
    )  # варианты: tiny.en, base.en, small.en, medium.en, large-v3
    whisper_device: str = Field(
        default="cpu", alias="WHISPER_DEVICE"
    )  # cpu или cuda
    whisper_compute_type: str = Field(
        default="int8", alias="WHISPER_COMPUTE_TYPE"
    )  # int8, int8_float16, float16, float32
    whisper_language: str = Field(
        default="en", alias="WHISPER_LANGUAGE"
    )
    # Частота, которую ожидает модель для сырых сэмплов
    whisper_sample_rate: int = Field(
        default=16000, alias="WHISPER_SAMPLE_RATE"
    )

    # Локальный сервер Ollama
    ollama_url: str = Field(
        default="http://localhost:11434/api/generate", alias="OLLAMA_URL"
    )
    ollama_model: str = Field(
        default="gemma", alias="OLLAMA_MODEL"
    )
    # None = без таймаута
    ollama_timeout: Optional[float] = Field(
        default=None, alias="OLLAMA_TIMEOUT"
    )
    chunk_prompt: str = Field(
        default=DEFAULT_CHUNK_PROMPT, alias="CHUNK_PROMPT"
    )

    # Файлы по умолчанию
    input_file: str = Field(default="input.wav", alias="INPUT_FILE")
    summary_file: str = Field(default="summary.txt", alias="SUMMARY_FILE")
    prompt_file: str = Field(default="prompt.txt", alias="PROMPT_FILE")

    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = False
        populate_by_name = True
        extra = "ignore"


settings = Settings()
