import math
from collections import Counter

import pytest

from speech_summary.services.chunker import split_into_chunks


@pytest.mark.parametrize("text", ["", "   ", " hello  world \n", "one"])
@pytest.mark.parametrize("n", [1, 0, -3])
def test_single_chunk_returns_text_unchanged(text, n):
    assert split_into_chunks(text, n) == [text]


def test_even_split():
    text = "a b c d e f"
    assert split_into_chunks(text, 3) == ["a b", "c d", "e f"]


def test_last_chunk_holds_remainder():
    text = "one two three four five six seven"
    # ceil(7 / 3) = 3
    assert split_into_chunks(text, 3) == [
        "one two three", "four five six", "seven"]


def test_whitespace_is_normalized_inside_chunks():
    text = "  alpha\tbeta\n\ngamma   delta "
    assert split_into_chunks(text, 2) == ["alpha beta", "gamma delta"]


def test_fewer_words_than_chunks():
    # ceil(3 / 5) = 1 слово на часть, частей меньше запрошенного
    assert split_into_chunks("x y z", 5) == ["x", "y", "z"]


def test_fewer_chunks_than_requested_when_sizes_round_up():
    words = " ".join(str(i) for i in range(10))
    chunks = split_into_chunks(words, 4)
    # ceil(10 / 4) = 3 -> части 3, 3, 3, 1
    assert [len(c.split()) for c in chunks] == [3, 3, 3, 1]

    chunks = split_into_chunks(words, 6)
    # ceil(10 / 6) = 2 -> 5 частей вместо 6
    assert len(chunks) == 5


@pytest.mark.parametrize("text", ["", "  \n\t "])
def test_no_words_gives_no_chunks(text):
    assert split_into_chunks(text, 2) == []


@pytest.mark.parametrize("word_count,n", [(1, 2), (7, 2), (100, 7), (13, 13), (40, 3)])
def test_chunks_partition_the_words(word_count, n):
    words = [f"w{i % 5}" for i in range(word_count)]
    text = " ".join(words)

    chunks = split_into_chunks(text, n)

    rejoined = " ".join(chunks).split()
    assert rejoined == words
    assert Counter(rejoined) == Counter(words)
    chunk_size = math.ceil(word_count / n)
    assert len(chunks) == math.ceil(word_count / chunk_size)
    assert len(chunks) <= n
