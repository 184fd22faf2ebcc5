"""
html_text — silnik ekstrakcji tekstu z dokumentów HTML.

Użycie:
  from html_text import extract_readable_text, extract_structured_outline

Moduły:
  noise     — filtr szumu (is_noise, is_hidden)
  walker    — przejście drzewa i wybór bloków (iter_blocks, element_text)
  formats   — PipelineConfig, READABLE, OUTLINE, tablice formatowania
  layout    — normalize_text, word_wrap, assemble
  extractor — publiczne API (extract, extract_readable_text, ...)
"""

from .extractor import (
    DEFAULT_PARSER,
    extract,
    extract_readable_text,
    extract_structured_outline,
    parse_html,
    render,
)
from .formats import (
    OUTLINE,
    PIPELINES,
    READABLE,
    PipelineConfig,
)
from .layout import (
    assemble,
    normalize_text,
    word_wrap,
)
from .walker import (
    DEFAULT_MAX_NODES,
    iter_blocks,
)

__all__ = [
    # extractor
    "DEFAULT_PARSER",
    "extract",
    "extract_readable_text",
    "extract_structured_outline",
    "parse_html",
    "render",
    # formats
    "OUTLINE",
    "PIPELINES",
    "READABLE",
    "PipelineConfig",
    # layout
    "assemble",
    "normalize_text",
    "word_wrap",
    # walker
    "DEFAULT_MAX_NODES",
    "iter_blocks",
]
