"""Testy html_text.formats — tablice formatowania obu potoków."""

import pytest

from data_model.blocks import PipelineKind, SelectedBlock
from html_text.formats import OUTLINE, PIPELINES, READABLE


def _lines(config, tag, text):
    return config.format_block(SelectedBlock(tag, text))


# ---------------------------------------------------------------------------
# Potok "text"
# ---------------------------------------------------------------------------

def test_readable_h1_upper_with_underline():
    assert _lines(READABLE, "h1", "Hello") == ["", "HELLO", "=====", ""]


def test_readable_h1_underline_capped_at_50():
    lines = _lines(READABLE, "h1", "x" * 70)
    assert lines[2] == "=" * 50


def test_readable_h2_underline_capped_at_40():
    assert _lines(READABLE, "h2", "Intro") == ["", "Intro", "-----", ""]
    assert _lines(READABLE, "h2", "y" * 45)[2] == "-" * 40


@pytest.mark.parametrize("tag", ["h3", "h4", "h5", "h6"])
def test_readable_minor_headings_in_brackets(tag):
    assert _lines(READABLE, tag, "Details") == ["", "[Details]", ""]


@pytest.mark.parametrize(
    ("tag", "text", "expected"),
    [
        ("li", "Milk", ["  - Milk"]),
        ("blockquote", "Be brief", ["", '  "Be brief"', ""]),
        ("td", "42", ["| 42 |"]),
        ("th", "Total", ["| Total |"]),
        ("figcaption", "A cat", ["  (A cat)"]),
    ],
)
def test_readable_single_blocks(tag, text, expected):
    assert _lines(READABLE, tag, text) == expected


@pytest.mark.parametrize("tag", ["p", "article", "section", "main"])
def test_readable_paragraph_length_gate(tag):
    assert _lines(READABLE, tag, "a" * 15) == []
    assert _lines(READABLE, tag, "a" * 16) == ["a" * 16, ""]


def test_readable_paragraph_is_wrapped_as_one_entry():
    text = " ".join(["lorem"] * 30)
    lines = _lines(READABLE, "p", text)
    assert len(lines) == 2
    assert "\n" in lines[0]
    assert all(len(part) <= 80 for part in lines[0].split("\n"))


def test_readable_title():
    assert READABLE.title_lines("Doc") == ["Doc", "===", ""]


# ---------------------------------------------------------------------------
# Potok "outline"
# ---------------------------------------------------------------------------

@pytest.mark.parametrize(
    ("tag", "marker"),
    [("h1", "#"), ("h2", "##"), ("h3", "###"), ("h4", "####"), ("h5", "####"), ("h6", "####")],
)
def test_outline_headings(tag, marker):
    assert _lines(OUTLINE, tag, "Setup") == ["", f"{marker} Setup", ""]


def test_outline_list_quote_pre():
    assert _lines(OUTLINE, "li", "Milk") == ["• Milk"]
    assert _lines(OUTLINE, "blockquote", "Be brief") == ["> Be brief"]
    assert _lines(OUTLINE, "pre", "x = 1") == ["```", "x = 1", "```"]


@pytest.mark.parametrize("tag", ["p", "div"])
def test_outline_paragraph_length_gate(tag):
    assert _lines(OUTLINE, tag, "b" * 20) == []
    assert _lines(OUTLINE, tag, "b" * 21) == ["b" * 21, ""]


def test_outline_paragraph_is_not_wrapped():
    text = " ".join(["lorem"] * 30)
    assert _lines(OUTLINE, "p", text) == [text, ""]


@pytest.mark.parametrize("tag", ["a", "span", "td", "th"])
def test_outline_carriers_produce_nothing(tag):
    assert tag in OUTLINE.selectors
    assert _lines(OUTLINE, tag, "Some inline text") == []


def test_outline_title():
    assert OUTLINE.title_lines("Doc") == ["# Doc", ""]


# ---------------------------------------------------------------------------
# Wspólne
# ---------------------------------------------------------------------------

def test_unknown_tag_produces_nothing():
    assert _lines(READABLE, "div", "A long enough division text") == []


@pytest.mark.parametrize("config", [READABLE, OUTLINE])
def test_formatting_is_deterministic(config):
    for tag in config.table:
        block = SelectedBlock(tag, "Repeatable block of text content")
        assert config.format_block(block) == config.format_block(block)


def test_pipeline_registry():
    assert PIPELINES[PipelineKind.READABLE] is READABLE
    assert PIPELINES[PipelineKind("outline")] is OUTLINE
    assert READABLE.dedupe and not OUTLINE.dedupe
