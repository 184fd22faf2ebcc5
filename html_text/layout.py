"""
html_text/layout.py — normalizacja tekstu, zawijanie wierszy i składanie wyniku.

Publiczne API:
  normalize_text(text)        -> str   białe znaki → jedna spacja, strip
  word_wrap(text, width)      -> str   zachłanne pakowanie słów w linie
  assemble(lines)             -> str   join + max jedna pusta linia + strip
"""

from __future__ import annotations

import re
from collections.abc import Iterable

_WHITESPACE_RE = re.compile(r"\s+")

# 3+ znaki nowej linii pod rząd → dokładnie 2 (co najwyżej jedna pusta linia)
_BLANK_RUN_RE = re.compile(r"\n{3,}")


def normalize_text(text: str) -> str:
    """Zwija każdy ciąg białych znaków (w tym \\n) do jednej spacji i obcina brzegi."""
    return _WHITESPACE_RE.sub(" ", text).strip()


def word_wrap(text: str, width: int) -> str:
    """
    Zachłanne zawijanie: słowo trafia do bieżącej linii, jeśli po dopisaniu
    " " + słowo linia nadal ma <= width znaków; w przeciwnym razie linia jest
    zamykana i nowa zaczyna się od tego słowa.

    Słów nie dzielimy — pojedyncze słowo dłuższe niż width ląduje samo
    w (za długiej) linii. Zwraca linie połączone "\\n".
    """
    lines: list[str] = []
    current = ""

    for word in text.split():
        if not current:
            current = word
        elif len(current) + 1 + len(word) <= width:
            current += " " + word
        else:
            lines.append(current)
            current = word

    if current:
        lines.append(current)

    return "\n".join(lines)


def assemble(lines: Iterable[str]) -> str:
    """Skleja bufor linii w wynik końcowy."""
    result = "\n".join(lines)
    result = _BLANK_RUN_RE.sub("\n\n", result)
    return result.strip()
