import json
import struct
import wave
from pathlib import Path
from typing import List

import httpx

from speech_summary.models.transcript import TranscriptSegment


def write_wav(path: Path, samples: List[int], channels: int = 1,
              sample_rate: int = 16000, sampwidth: int = 2) -> Path:
    """Пишет PCM WAV; samples: уже перемежённые значения всех каналов"""
    if sampwidth == 1:
        frames = bytes((s + 128) & 0xFF for s in samples)
    else:
        frames = struct.pack("<{}h".format(len(samples)), *samples)
    with wave.open(str(path), "wb") as wf:
        wf.setnchannels(channels)
        wf.setsampwidth(sampwidth)
        wf.setframerate(sample_rate)
        wf.writeframes(frames)
    return path


def write_silence(path: Path, num_samples: int, sample_rate: int = 16000) -> Path:
    """Длинная тишина без промежуточного списка int"""
    with wave.open(str(path), "wb") as wf:
        wf.setnchannels(1)
        wf.setsampwidth(2)
        wf.setframerate(sample_rate)
        wf.writeframes(bytes(num_samples * 2))
    return path


# GUID KSDATAFORMAT_SUBTYPE_PCM
PCM_SUBFORMAT = struct.pack("<IHH", 1, 0, 0x10) + b"\x80\x00\x00\xaa\x00\x38\x9b\x71"


def write_extensible_wav(path: Path, samples: List[int], sample_rate: int = 16000) -> Path:
    """Моно 16 бит с заголовком WAVE_FORMAT_EXTENSIBLE (0xFFFE)"""
    data = struct.pack("<{}h".format(len(samples)), *samples)
    fmt = struct.pack(
        "<HHIIHHHHI",
        0xFFFE,            # wFormatTag
        1,                 # каналы
        sample_rate,
        sample_rate * 2,   # байт в секунду
        2,                 # block align
        16,                # бит на сэмпл
        22,                # cbSize
        16,                # valid bits
        0x4,               # channel mask: front center
    ) + PCM_SUBFORMAT
    body = (
        b"WAVE"
        + b"fmt " + struct.pack("<I", len(fmt)) + fmt
        + b"data" + struct.pack("<I", len(data)) + data
    )
    path.write_bytes(b"RIFF" + struct.pack("<I", len(body)) + body)
    return path


def ndjson(*fragments: str) -> str:
    lines = [json.dumps({"model": "gemma", "response": f, "done": False}) for f in fragments]
    lines.append(json.dumps({"model": "gemma", "response": "", "done": True}))
    return "\n".join(lines) + "\n"


class FakeTranscriber:
    def __init__(self, texts: List[str] | None = None):
        self.texts = texts or []
        self.calls = []

    def transcribe(self, audio):
        self.calls.append(audio)
        return [
            TranscriptSegment(start=float(i), end=float(i + 1), text=text)
            for i, text in enumerate(self.texts)
        ]


class RecordingHandler:
    """Обработчик для httpx.MockTransport, запоминающий запросы"""

    def __init__(self, body: str = "", status_code: int = 200):
        self.body = body
        self.status_code = status_code
        self.requests: List[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return httpx.Response(self.status_code, text=self.body)

    @property
    def prompts(self) -> List[str]:
        return [json.loads(r.content)["prompt"] for r in self.requests]
