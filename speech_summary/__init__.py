"""
Транскрипция речи локальным Whisper и суммаризация через локальную LLM.
"""

__version__ = "0.1.0"
