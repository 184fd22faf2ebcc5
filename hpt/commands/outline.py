"""Komenda: hpt outline — konspekt w stylu Markdown z pliku HTML (lub stdin)."""

from __future__ import annotations

import argparse

from data_model.blocks import PipelineKind
from hpt.commands.text import _add_common_arguments, _run_pipeline


def run(args: argparse.Namespace) -> None:
    _run_pipeline(args, PipelineKind.OUTLINE)


def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "outline",
        help="Wyciąga konspekt (nagłówki, listy, cytaty, kod) z dokumentu HTML.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="""
Zamienia dokument HTML na konspekt w stylu Markdown:
  - <title> jako "# tytuł", h1–h3 jako #/##/###, h4–h6 jako ####
  - elementy list jako "• tekst", cytaty jako "> tekst"
  - <pre> w blokach ```, akapity i div-y dłuższe niż 20 znaków
  - bez deduplikacji i bez zawijania wierszy

Przykłady:
  hpt outline strona.html
  hpt outline - < strona.html --out konspekt.md
        """,
    )
    _add_common_arguments(p)
    p.set_defaults(func=run)
