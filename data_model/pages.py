"""
data_model/pages.py — wynik pobrania i przetworzenia strony HTML.

PageResult zbiera wszystkie reprezentacje jednej strony: surowy HTML,
HTML sformatowany (wcięcia), czytelny tekst i konspekt, plus długości.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class PageResult:
    url:               str
    html:              str   # HTML po prettify (wcięcia 2 spacje)
    raw_html:          str
    text_only:         str   # potok "text"
    structured_text:   str   # potok "outline"
    content_length:    int   # len(raw_html)
    beautified_length: int   # len(html)
    text_length:       int   # len(text_only)

    def to_dict(self) -> dict[str, Any]:
        """Kształt JSON zgodny z odpowiedzią API (klucze camelCase)."""
        return {
            "html":             self.html,
            "rawHtml":          self.raw_html,
            "textOnly":         self.text_only,
            "structuredText":   self.structured_text,
            "url":              self.url,
            "contentLength":    self.content_length,
            "beautifiedLength": self.beautified_length,
            "textLength":       self.text_length,
        }
