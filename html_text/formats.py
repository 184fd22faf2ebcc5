"""
html_text/formats.py — konfiguracje potoków i tablice formatowania linii.

Oba potoki ("text" i "outline") korzystają z jednego walkera; różnią się
wyłącznie wartością PipelineConfig:

  selectors      tagi wybierane jako bloki
  containers     tagi-przodkowie, w których zagnieżdżony blok jest pomijany
  exempt         tagi zwolnione z reguły pomijania
  text_excluded  poddrzewa wycinane z tekstu bloku
  min_length     minimalna długość znormalizowanego tekstu
  short_exempt   tagi zwolnione z progu min_length (dowolny niepusty tekst)
  noise_*        dodatkowe reguły filtra szumu (ponad BASE_NOISE_TAGS)
  dedupe         deduplikacja bloków bez rozróżniania wielkości liter
  title_lines    linie dla tekstu <title>
  table          tag → funkcja (tekst → linie); brak wpisu = brak wyjścia

Pusta linia w wyniku formatera to "" — Assembler zwija ich nadmiar.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from types import MappingProxyType

from data_model.blocks import PipelineKind, SelectedBlock
from html_text.layout import word_wrap
from html_text.noise import AD_CLASSES, CHROME_NOISE_TAGS, CHROME_ROLES

type LineFormatter = Callable[[str], list[str]]

HEADING_TAGS: frozenset[str] = frozenset({"h1", "h2", "h3", "h4", "h5", "h6"})

WRAP_WIDTH = 80

# Progi długości akapitu (tekst musi być DŁUŻSZY niż próg)
_READABLE_PARAGRAPH_MIN = 15
_OUTLINE_PARAGRAPH_MIN  = 20


@dataclass(frozen=True, slots=True)
class PipelineConfig:
    kind:          PipelineKind
    selectors:     frozenset[str]
    containers:    frozenset[str]
    exempt:        frozenset[str]
    text_excluded: frozenset[str]
    min_length:    int
    short_exempt:  frozenset[str]
    noise_tags:    frozenset[str]
    noise_classes: frozenset[str]
    noise_roles:   frozenset[str]
    dedupe:        bool
    title_lines:   LineFormatter
    table:         Mapping[str, LineFormatter]

    def format_block(self, block: SelectedBlock) -> list[str]:
        """Linie wyjściowe dla bloku; [] gdy tag nie ma wpisu w tablicy."""
        formatter = self.table.get(block.tag)
        if formatter is None:
            return []
        return formatter(block.text)


def _underline(char: str, text: str, limit: int) -> str:
    return char * min(len(text), limit)


# ---------------------------------------------------------------------------
# Potok "text" — czytelny tekst
# ---------------------------------------------------------------------------

def _text_title(text: str) -> list[str]:
    return [text, _underline("=", text, 50), ""]


def _text_h1(text: str) -> list[str]:
    return ["", text.upper(), _underline("=", text, 50), ""]


def _text_h2(text: str) -> list[str]:
    return ["", text, _underline("-", text, 40), ""]


def _text_minor_heading(text: str) -> list[str]:
    return ["", f"[{text}]", ""]


def _text_list_item(text: str) -> list[str]:
    return [f"  - {text}"]


def _text_quote(text: str) -> list[str]:
    return ["", f'  "{text}"', ""]


def _text_cell(text: str) -> list[str]:
    return [f"| {text} |"]


def _text_caption(text: str) -> list[str]:
    return [f"  ({text})"]


def _text_paragraph(text: str) -> list[str]:
    if len(text) <= _READABLE_PARAGRAPH_MIN:
        return []
    # Zawinięty akapit to jeden wpis bufora (z "\n" w środku)
    return [word_wrap(text, WRAP_WIDTH), ""]


_TEXT_TABLE: dict[str, LineFormatter] = {
    "h1":         _text_h1,
    "h2":         _text_h2,
    "h3":         _text_minor_heading,
    "h4":         _text_minor_heading,
    "h5":         _text_minor_heading,
    "h6":         _text_minor_heading,
    "li":         _text_list_item,
    "blockquote": _text_quote,
    "td":         _text_cell,
    "th":         _text_cell,
    "figcaption": _text_caption,
    "p":          _text_paragraph,
    "article":    _text_paragraph,
    "section":    _text_paragraph,
    "main":       _text_paragraph,
}

READABLE = PipelineConfig(
    kind          = PipelineKind.READABLE,
    selectors     = frozenset(_TEXT_TABLE),
    containers    = frozenset({"p", "li", "td", "th", "blockquote", "figcaption"}),
    exempt        = HEADING_TAGS,
    text_excluded = frozenset({"script", "style", "nav", "footer", "header", "aside"}),
    min_length    = 3,
    short_exempt  = HEADING_TAGS,
    noise_tags    = CHROME_NOISE_TAGS,
    noise_classes = AD_CLASSES,
    noise_roles   = CHROME_ROLES,
    dedupe        = True,
    title_lines   = _text_title,
    table         = MappingProxyType(_TEXT_TABLE),
)


# ---------------------------------------------------------------------------
# Potok "outline" — konspekt w stylu Markdown
# ---------------------------------------------------------------------------

def _outline_title(text: str) -> list[str]:
    return [f"# {text}", ""]


def _outline_heading(marker: str) -> LineFormatter:
    def fmt(text: str) -> list[str]:
        return ["", f"{marker} {text}", ""]
    return fmt


def _outline_list_item(text: str) -> list[str]:
    return [f"• {text}"]


def _outline_quote(text: str) -> list[str]:
    return [f"> {text}"]


def _outline_pre(text: str) -> list[str]:
    return ["```", text, "```"]


def _outline_paragraph(text: str) -> list[str]:
    if len(text) <= _OUTLINE_PARAGRAPH_MIN:
        return []
    return [text, ""]


_OUTLINE_TABLE: dict[str, LineFormatter] = {
    "h1":         _outline_heading("#"),
    "h2":         _outline_heading("##"),
    "h3":         _outline_heading("###"),
    "h4":         _outline_heading("####"),
    "h5":         _outline_heading("####"),
    "h6":         _outline_heading("####"),
    "li":         _outline_list_item,
    "blockquote": _outline_quote,
    "pre":        _outline_pre,
    "p":          _outline_paragraph,
    "div":        _outline_paragraph,
}

# a, span, td, th są wybierane, ale nie mają wpisu w tablicy: walker nie
# zbiera ich tekstu i nic dla nich nie emituje.
OUTLINE = PipelineConfig(
    kind          = PipelineKind.OUTLINE,
    selectors     = frozenset(_OUTLINE_TABLE) | {"td", "th", "span", "a"},
    containers    = frozenset({"p", "li"}) | HEADING_TAGS,
    exempt        = frozenset({"a", "span"}),
    text_excluded = frozenset({"script", "style"}),
    min_length    = 2,
    short_exempt  = frozenset(),
    noise_tags    = frozenset(),
    noise_classes = frozenset(),
    noise_roles   = frozenset(),
    dedupe        = False,
    title_lines   = _outline_title,
    table         = MappingProxyType(_OUTLINE_TABLE),
)

PIPELINES: dict[PipelineKind, PipelineConfig] = {
    PipelineKind.READABLE: READABLE,
    PipelineKind.OUTLINE:  OUTLINE,
}
