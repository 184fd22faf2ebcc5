"""
html_text/walker.py — przejście drzewa DOM i wybór bloków treści.

Walker odwiedza elementy w kolejności dokumentu (pre-order), w zakresie <body>
(albo całego drzewa, gdy <body> nie ma), i emituje SelectedBlock dla tagów
z PipelineConfig.selectors.

Reguła unikania duplikowania treści:
- Element, którego ścisły przodek ma tag z config.containers, jest pomijany
  (jego tekst trafił już do bloku przodka) — chyba że jego tag należy do
  config.exempt.
- Pominięcie nie zatrzymuje zejścia w dzieci: zagnieżdżone nagłówki
  (potok "text") nadal są wybierane, a a/span (potok "outline") nadal
  zamykają swoje poddrzewa.

Przejście używa jawnego stosu zamiast rekurencji, więc głębokość zagnieżdżenia
nie jest ograniczona stosem wywołań. Flaga "wewnątrz kontenera" jedzie na
stosie razem z węzłem — nie trzeba przechodzić łańcucha parents dla każdego
kandydata.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator

from bs4.element import CData, NavigableString, PreformattedString, Tag

from data_model.blocks import SelectedBlock
from html_text.formats import PipelineConfig
from html_text.layout import normalize_text
from html_text.noise import is_noise

logger = logging.getLogger(__name__)

# Limit odwiedzin elementów na jedno wywołanie (walker + zbieranie tekstu);
# po przekroczeniu walker kończy i zwraca to, co zebrał.
DEFAULT_MAX_NODES = 1_000_000


# ---------------------------------------------------------------------------
# Publiczne API
# ---------------------------------------------------------------------------

def find_scope(root: Tag) -> Tag:
    """Zwraca <body> dokumentu albo sam korzeń, gdy <body> nie istnieje."""
    if root.name == "body":
        return root
    body = root.find("body")
    return body if isinstance(body, Tag) else root


def find_title(root: Tag) -> str:
    """Znormalizowany tekst pierwszego <title> spoza <svg>; "" gdy brak."""
    for title in root.find_all("title"):
        if any(p.name == "svg" for p in title.parents):
            continue
        return normalize_text(title.get_text())
    return ""


def iter_blocks(
    root: Tag,
    config: PipelineConfig,
    *,
    max_nodes: int = DEFAULT_MAX_NODES,
) -> Iterator[SelectedBlock]:
    """
    Generuje bloki w kolejności dokumentu.

    Bloki z pustym tekstem są odrzucane; krótsze niż config.min_length także,
    chyba że tag należy do config.short_exempt (nagłówki w potoku "text").
    Kandydaci bez wpisu w config.table (a/span/td/th w potoku "outline")
    tylko zamykają poddrzewo regułą pomijania — ich tekstu się nie liczy
    i nie są emitowani.
    Deduplikacja NIE odbywa się tutaj — to zadanie formatera.

    max_nodes ogranicza łączną liczbę odwiedzin elementów: przez walker
    i przez zbieranie tekstu kandydatów (zagnieżdżone kandydaty czytają
    te same poddrzewa wielokrotnie).
    """
    scope = find_scope(root)
    if is_noise(scope, config) or any(
        isinstance(p, Tag) and is_noise(p, config) for p in scope.parents
    ):
        return

    in_container = any(p.name in config.containers for p in scope.parents)
    stack: list[tuple[Tag, bool]] = [
        (child, in_container) for child in reversed(_child_tags(scope))
    ]
    budget = _Budget(max_nodes)

    while stack:
        tag, inside = stack.pop()
        if not budget.spend():
            _warn_limit(max_nodes, config)
            return

        if is_noise(tag, config):
            continue

        name = tag.name
        if (
            name in config.selectors
            and name in config.table
            and (not inside or name in config.exempt)
        ):
            raw = _collect_text(tag, config, budget)
            if raw is None:
                _warn_limit(max_nodes, config)
                return
            text = normalize_text(raw)
            if text and (len(text) >= config.min_length or name in config.short_exempt):
                yield SelectedBlock(tag=name, text=text)

        child_inside = inside or name in config.containers
        stack.extend((child, child_inside) for child in reversed(_child_tags(tag)))


def element_text(tag: Tag, config: PipelineConfig) -> str:
    """
    Tekst wszystkich potomków elementu, bez poddrzew szumu i bez tagów
    z config.text_excluded. Komentarze, doctype itp. są pomijane.
    """
    return _collect_text(tag, config, None) or ""


# ---------------------------------------------------------------------------
# Pomocnicze
# ---------------------------------------------------------------------------

class _Budget:
    """Licznik odwiedzin elementów współdzielony przez walker i zbieranie tekstu."""

    __slots__ = ("left",)

    def __init__(self, limit: int) -> None:
        self.left = limit

    def spend(self) -> bool:
        self.left -= 1
        return self.left >= 0


def _warn_limit(max_nodes: int, config: PipelineConfig) -> None:
    logger.warning(
        "Przekroczono limit %d odwiedzin elementów — ekstrakcja (%s) przerwana",
        max_nodes, config.kind,
    )


def _collect_text(tag: Tag, config: PipelineConfig, budget: _Budget | None) -> str | None:
    """Jak element_text; None, gdy budżet wyczerpał się w trakcie."""
    parts: list[str] = []
    stack: list[object] = list(reversed(tag.contents))

    while stack:
        node = stack.pop()
        if isinstance(node, Tag):
            if budget is not None and not budget.spend():
                return None
            if node.name in config.text_excluded or is_noise(node, config):
                continue
            stack.extend(reversed(node.contents))
        elif _is_visible_string(node):
            parts.append(str(node))

    return "".join(parts)


def _child_tags(tag: Tag) -> list[Tag]:
    return [c for c in tag.contents if isinstance(c, Tag)]


def _is_visible_string(node: object) -> bool:
    # Comment, Doctype, Declaration, ProcessingInstruction dziedziczą
    # po PreformattedString; CData to wyjątek — jego treść jest tekstem.
    if not isinstance(node, NavigableString):
        return False
    return isinstance(node, CData) or not isinstance(node, PreformattedString)
