"""Исключения пайплайна транскрипции и суммаризации."""


class SpeechSummaryError(Exception):
    """Базовая ошибка: любая из них завершает запуск."""

    def __init__(self, message: str, cause: Exception | None = None):
        self.cause = cause
        super().__init__(message)


class InputError(SpeechSummaryError):
    """Неверный входной файл, шаблон промпта или аргумент."""
    pass


class UnsupportedFormatError(InputError):
    """WAV-файл не моно или не 16 бит."""
    pass


class ModelLoadError(SpeechSummaryError):
    """Не удалось загрузить модель распознавания речи."""

    def __init__(self, model: str, cause: Exception | None = None):
        super().__init__(f"Failed to load speech model '{model}'", cause)


class TranscriptionError(SpeechSummaryError):
    """Сбой движка распознавания."""
    pass


class NetworkError(SpeechSummaryError):
    """Сбой запроса к серверу генерации или чтения ответа."""

    def __init__(self, url: str, message: str, cause: Exception | None = None):
        super().__init__(f"Request to {url} failed: {message}", cause)
