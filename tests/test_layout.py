"""Testy html_text.layout — normalizacja, zawijanie wierszy, składanie wyniku."""

import pytest

from html_text.layout import assemble, normalize_text, word_wrap


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("  Hello   world  ", "Hello world"),
        ("line one\nline two\n\n", "line one line two"),
        ("\ttabs\t and\r\nbreaks ", "tabs and breaks"),
        ("   ", ""),
    ],
)
def test_normalize_text(raw, expected):
    assert normalize_text(raw) == expected


def test_word_wrap_exact_fit_then_new_line():
    assert word_wrap("aaaa bbbb cccc dddd", 9) == "aaaa bbbb\ncccc dddd"


def test_word_wrap_one_char_too_long_breaks():
    assert word_wrap("aaaa bbbbb", 9) == "aaaa\nbbbbb"


def test_word_wrap_never_splits_long_word():
    wrapped = word_wrap("a supercalifragilistic b", 5)
    assert wrapped.split("\n") == ["a", "supercalifragilistic", "b"]


def test_word_wrap_long_word_first():
    assert word_wrap("extraordinarily ok", 6) == "extraordinarily\nok"


def test_word_wrap_short_text_single_line():
    assert word_wrap("short text", 80) == "short text"


def test_word_wrap_empty():
    assert word_wrap("", 80) == ""


def test_word_wrap_lines_respect_width():
    text = " ".join(["word"] * 40)
    lines = word_wrap(text, 80).split("\n")
    assert all(len(line) <= 80 for line in lines)
    # 16 słów = 79 znaków; 17-te się nie mieści
    assert lines[0] == " ".join(["word"] * 16)
    assert " ".join(lines) == text


def test_assemble_collapses_blank_runs():
    assert assemble(["a", "", "", "", "b"]) == "a\n\nb"


def test_assemble_keeps_single_blank_line():
    assert assemble(["a", "", "b"]) == "a\n\nb"
    assert assemble(["a", "b"]) == "a\nb"


def test_assemble_trims_outer_whitespace():
    assert assemble(["", "", "  x", ""]) == "x"


def test_assemble_multiline_entries():
    assert assemble(["first\nsecond", "", "", "third"]) == "first\nsecond\n\nthird"


def test_assemble_empty_buffer():
    assert assemble([]) == ""
