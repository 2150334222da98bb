import json
import logging
from typing import Callable, List, Optional

import httpx

from speech_summary.core.config import Settings
from speech_summary.core.exceptions import InputError, NetworkError

logger = logging.getLogger(__name__)

PLACEHOLDER = "{}"


def parse_stream(body: str) -> str:
    """
    Склеивает поля "response" из NDJSON-ответа /api/generate.

    Пустые строки пропускаются, строка с невалидным JSON молча отбрасывается,
    остальной ответ продолжает разбираться.
    """
    parts: List[str] = []
    for line in body.splitlines():
        if not line.strip():
            continue
        try:
            value = json.loads(line)
        except json.JSONDecodeError:
            logger.debug(f"Skipping malformed stream line: {line[:200]}")
            continue
        if not isinstance(value, dict):
            continue
        fragment = value.get("response")
        if isinstance(fragment, str):
            parts.append(fragment)
    return "".join(parts)


def render_prompt_template(template: str, transcript: str) -> str:
    """Подставляет транскрипт вместо единственного {} в шаблоне"""
    if PLACEHOLDER not in template:
        raise InputError(f"Prompt template has no '{PLACEHOLDER}' placeholder")
    return template.replace(PLACEHOLDER, transcript, 1)


class OllamaClient:
    """Клиент для локального сервера генерации (Ollama /api/generate)"""

    def __init__(
        self,
        settings: Settings,
        client: Optional[httpx.AsyncClient] = None,
    ):
        self.url = settings.ollama_url
        self.model = settings.ollama_model
        self.chunk_prompt = settings.chunk_prompt

        self.client = client or httpx.AsyncClient(timeout=settings.ollama_timeout)

    async def generate(self, prompt: str) -> str:
        """Один POST-запрос; весь ответ читается целиком и разбирается построчно"""
        request_data = {
            "model": self.model,
            "prompt": prompt,
        }

        logger.info(f"Sending generate request to {self.url} (model {self.model}, "
                    f"{len(prompt)} characters)")

        try:
            response = await self.client.post(self.url, json=request_data)
            response.raise_for_status()
            body = response.text
        except httpx.HTTPStatusError as e:
            raise NetworkError(
                self.url, f"HTTP {e.response.status_code}", e) from e
        except httpx.HTTPError as e:
            raise NetworkError(self.url, str(e) or type(e).__name__, e) from e

        summary = parse_stream(body)
        logger.info(f"Generate response received: {len(summary)} characters")
        return summary

    async def summarize_chunk(self, chunk: str) -> str:
        return await self.generate(render_prompt_template(self.chunk_prompt, chunk))

    async def summarize_chunks(
        self,
        chunks: List[str],
        on_chunk: Optional[Callable[[int, int], None]] = None,
    ) -> List[str]:
        """Части суммаризируются строго по очереди"""
        summaries: List[str] = []
        for i, chunk in enumerate(chunks):
            if on_chunk:
                on_chunk(i + 1, len(chunks))
            summaries.append(await self.summarize_chunk(chunk))
        return summaries

    async def close(self):
        """Закрывает HTTP-клиент"""
        await self.client.aclose()
        logger.debug("Ollama HTTP client closed")

    async def __aenter__(self) -> "OllamaClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.close()
