"""
hpt — narzędzie CLI dla html-plaintext.

Użycie:
  hpt [--verbose] <komenda> [opcje]

Komendy:
  text     Czytelny tekst z pliku HTML (lub stdin).
  outline  Konspekt w stylu Markdown z pliku HTML (lub stdin).
  fetch    Pobiera stronę spod URL i wypisuje tekst / konspekt / HTML / JSON.
"""

from __future__ import annotations

import argparse
import logging
import sys

from rich.console import Console
from rich.logging import RichHandler

from hpt.commands import fetch as cmd_fetch
from hpt.commands import outline as cmd_outline
from hpt.commands import text as cmd_text

__version__ = "0.1.0"


def _setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="hpt",
        description="html-plaintext — zamiana HTML na czytelny tekst i konspekt.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--version", action="version", version=f"hpt {__version__}"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Szczegółowe logi (DEBUG) na stderr.",
    )

    subparsers = parser.add_subparsers(
        title="komendy",
        metavar="<komenda>",
        dest="command",
    )
    subparsers.required = True

    cmd_text.add_parser(subparsers)
    cmd_outline.add_parser(subparsers)
    cmd_fetch.add_parser(subparsers)

    return parser


def main(argv: list[str] | None = None) -> None:
    # Windows: terminal może używać cp1252 — wymuszamy UTF-8, żeby znaki
    # spoza ASCII (•, polskie litery) były wypisywane poprawnie.
    for stream in (sys.stdout, sys.stderr):
        if hasattr(stream, "reconfigure"):
            stream.reconfigure(encoding="utf-8", errors="replace")

    parser = build_parser()
    args = parser.parse_args(argv)
    _setup_logging(args.verbose)
    args.func(args)


if __name__ == "__main__":
    main()
