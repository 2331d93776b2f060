import re

import pytest

from textcraft.text import normalize_whitespace, remove_accents, reverse, strip_non_ascii

SAMPLES = [
    "",
    "Café Déjà Vu",
    "Crème brûlée",
    "  tabs\tand\nnewlines  ",
    "Ελληνικά",
    "日本語のテキスト",
    "éx",
    "😀 emoji 👍🏽",
]


def test_remove_accents():
    assert remove_accents("Café Déjà Vu") == "Cafe Deja Vu"
    assert remove_accents("Ñandú naïve") == "Nandu naive"


def test_remove_accents_leaves_other_scripts():
    assert remove_accents("日本語") == "日本語"


@pytest.mark.parametrize("text", SAMPLES)
def test_remove_accents_is_idempotent(text):
    once = remove_accents(text)
    assert remove_accents(once) == once


@pytest.mark.parametrize(
    "text, expected",
    [
        ("  a \t\n b   c  ", "a b c"),
        ("single", "single"),
        ("", ""),
        ("   ", ""),
        ("\ufeffa\ufeff b\ufeff", "a b"),
    ],
)
def test_normalize_whitespace(text, expected):
    assert normalize_whitespace(text) == expected


@pytest.mark.parametrize("text", SAMPLES)
def test_normalize_whitespace_has_no_runs_or_edges(text):
    result = normalize_whitespace(text)
    assert result == result.strip()
    assert not re.search(r"\s\s", result)


def test_reverse():
    assert reverse("abc") == "cba"
    assert reverse("héllo") == "olléh"
    assert reverse("😀ab") == "ba😀"
    assert reverse("") == ""


@pytest.mark.parametrize("text", SAMPLES)
def test_reverse_twice_is_identity(text):
    assert reverse(reverse(text)) == text


def test_strip_non_ascii():
    assert strip_non_ascii("Café ☕ time") == "Caf  time"
    assert strip_non_ascii("plain ascii\n") == "plain ascii\n"
    assert strip_non_ascii("日本") == ""
