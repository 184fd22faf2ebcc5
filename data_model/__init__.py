"""
data_model — struktury danych html-plaintext.

Użycie:
  from data_model import SelectedBlock, PipelineKind, PageResult

Moduły:
  blocks — SelectedBlock, PipelineKind (rekordy pośrednie silnika ekstrakcji)
  pages  — PageResult (wynik pobrania strony: HTML, tekst, konspekt, długości)
"""

from .blocks import (
    PipelineKind,
    SelectedBlock,
)
from .pages import (
    PageResult,
)

__all__ = [
    # blocks
    "PipelineKind",
    "SelectedBlock",
    # pages
    "PageResult",
]
