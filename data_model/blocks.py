"""
data_model/blocks.py — bloki tekstu wybrane z drzewa DOM.

SelectedBlock to rekord pośredni między walkerem a formaterem linii:
tag elementu + znormalizowany tekst (białe znaki zwinięte do jednej spacji,
obcięte na brzegach). Żyje tylko w obrębie jednego wywołania ekstrakcji.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class PipelineKind(StrEnum):
    """Wariant potoku ekstrakcji."""
    READABLE = "text"      # czytelny tekst: zawijanie wierszy + deduplikacja
    OUTLINE  = "outline"   # konspekt w stylu Markdown, bez deduplikacji


@dataclass(frozen=True, slots=True)
class SelectedBlock:
    """
    Wybrany blok treści.

    - tag:  nazwa tagu małymi literami, np. "h1", "p", "li"
    - text: tekst znormalizowany (bez podwójnych spacji i znaków nowej linii)
    """
    tag:  str
    text: str

    @property
    def key(self) -> str:
        """Klucz deduplikacji (porównanie bez rozróżniania wielkości liter)."""
        return self.text.lower()
