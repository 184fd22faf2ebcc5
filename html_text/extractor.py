"""
html_text/extractor.py — publiczne API silnika ekstrakcji.

  extract_readable_text(doc)       -> str   potok "text"
  extract_structured_outline(doc)  -> str   potok "outline"
  extract(doc, kind)               -> str   wybór potoku przez PipelineKind

doc to sparsowane drzewo BeautifulSoup (Tag / BeautifulSoup) albo surowy HTML
(str / bytes), parsowany wtedy parserem `parser` (domyślnie lxml, który domyka <li>/<p>
według reguł HTML5).

Funkcje są czyste: nie modyfikują drzewa, nie trzymają stanu między
wywołaniami i zawsze zwracają napis (dla pustego dokumentu — "").
"""

from __future__ import annotations

from bs4 import BeautifulSoup, Tag

from data_model.blocks import PipelineKind
from html_text.formats import PIPELINES, PipelineConfig
from html_text.layout import assemble
from html_text.walker import DEFAULT_MAX_NODES, find_title, iter_blocks

DEFAULT_PARSER = "lxml"

type HtmlInput = Tag | str | bytes


def parse_html(doc: HtmlInput, parser: str = DEFAULT_PARSER) -> Tag:
    """Zwraca drzewo dla doc; drzewa (Tag) przepuszcza bez kopiowania."""
    if isinstance(doc, Tag):
        return doc
    if isinstance(doc, (str, bytes)):
        return BeautifulSoup(doc, parser)
    raise TypeError(f"Oczekiwano Tag, str lub bytes, otrzymano {type(doc).__name__}")


def render(root: Tag, config: PipelineConfig, *, max_nodes: int = DEFAULT_MAX_NODES) -> str:
    """Przebiega walker + formater + assembler dla jednej konfiguracji."""
    lines: list[str] = []
    seen: set[str] = set()

    title = find_title(root)
    if title:
        lines.extend(config.title_lines(title))
        if config.dedupe:
            seen.add(title.lower())

    for block in iter_blocks(root, config, max_nodes=max_nodes):
        if config.dedupe:
            if block.key in seen:
                continue
            # Rejestrujemy przed formatowaniem: krótki akapit, który nic nie
            # wypisze, i tak przesłania późniejsze duplikaty.
            seen.add(block.key)
        lines.extend(config.format_block(block))

    return assemble(lines)


def extract(
    doc: HtmlInput,
    kind: PipelineKind | str = PipelineKind.READABLE,
    *,
    max_nodes: int = DEFAULT_MAX_NODES,
    parser: str = DEFAULT_PARSER,
) -> str:
    config = PIPELINES[PipelineKind(kind)]
    return render(parse_html(doc, parser), config, max_nodes=max_nodes)


def extract_readable_text(
    doc: HtmlInput,
    *,
    max_nodes: int = DEFAULT_MAX_NODES,
    parser: str = DEFAULT_PARSER,
) -> str:
    """Czytelny tekst: nagłówki podkreślone, listy, akapity zawinięte do 80 kolumn."""
    return extract(doc, PipelineKind.READABLE, max_nodes=max_nodes, parser=parser)


def extract_structured_outline(
    doc: HtmlInput,
    *,
    max_nodes: int = DEFAULT_MAX_NODES,
    parser: str = DEFAULT_PARSER,
) -> str:
    """Konspekt w stylu Markdown: #-nagłówki, punktory •, cytaty >, bloki ```."""
    return extract(doc, PipelineKind.OUTLINE, max_nodes=max_nodes, parser=parser)
