import math
from typing import List


def split_into_chunks(text: str, n: int) -> List[str]:
    """
    Делит текст на n примерно равных по числу слов частей.

    При n <= 1 текст возвращается целиком и без изменений. Размер части:
    ceil(слов / n), поэтому частей может получиться меньше n. Текст без слов
    при n > 1 даёт пустой список.
    """
    if n <= 1:
        return [text]

    words = text.split()
    if not words:
        return []

    chunk_size = math.ceil(len(words) / n)
    return [
        " ".join(words[i:i + chunk_size])
        for i in range(0, len(words), chunk_size)
    ]
