import pytest

from textcraft.text import count_occurrences, count_words


@pytest.mark.parametrize(
    "text, expected",
    [
        ("  a  b   c ", 3),
        ("one\ttwo\nthree", 3),
        ("", 0),
        ("   ", 0),
        ("\ufeffone\ufefftwo", 2),
    ],
)
def test_count_words(text, expected):
    assert count_words(text) == expected


@pytest.mark.parametrize(
    "text, sub, expected",
    [
        ("aaaa", "aa", 2),
        ("aaa", "aa", 1),
        ("banana", "ana", 1),
        ("abcabc", "abc", 2),
        ("abc", "", 0),
        ("", "a", 0),
        ("", "", 0),
    ],
)
def test_count_occurrences(text, sub, expected):
    assert count_occurrences(text, sub) == expected
