"""Komenda: hpt text — czytelny tekst z pliku HTML (lub stdin)."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from rich.console import Console

from data_model.blocks import PipelineKind
from html_text import extract
from page_fetch.settings import get_settings

console = Console(stderr=True)


# ---------------------------------------------------------------------------
# Wejście / wyjście
# ---------------------------------------------------------------------------

def _read_source(source: str) -> str:
    if source == "-":
        return sys.stdin.read()
    try:
        return Path(source).read_text(encoding="utf-8", errors="replace")
    except OSError as e:
        console.print(f"[red]Błąd odczytu pliku:[/red] {e}")
        raise SystemExit(1)


def _emit(result: str, out: str | None) -> None:
    """Wypisuje wynik na stdout albo zapisuje do pliku."""
    if not out:
        print(result)
        return
    out_path = Path(out)
    out_path.write_text(result + "\n", encoding="utf-8")
    console.print(f"[green]Zapisano:[/green] {out_path}  ({len(result)} znaków)")


def _run_pipeline(args: argparse.Namespace, kind: PipelineKind) -> None:
    settings  = get_settings()
    max_nodes = args.max_nodes if args.max_nodes is not None else settings.max_nodes
    html      = _read_source(args.source)

    result = extract(html, kind, max_nodes=max_nodes, parser=settings.parser)
    if not result:
        console.print("[yellow]Brak treści tekstowej w dokumencie.[/yellow]")
    _emit(result, args.out)


def _positive_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"oczekiwano liczby całkowitej, otrzymano {value!r}")
    if number <= 0:
        raise argparse.ArgumentTypeError(f"wartość musi być dodatnia, otrzymano {number}")
    return number


def _add_common_arguments(p: argparse.ArgumentParser) -> None:
    p.add_argument(
        "source",
        metavar="PLIK",
        nargs="?",
        default="-",
        help="Plik HTML do przetworzenia (domyślnie: stdin).",
    )
    p.add_argument(
        "--out", "-o",
        metavar="PLIK",
        help="Zapisz wynik do pliku (domyślnie: stdout).",
    )
    p.add_argument(
        "--max-nodes",
        type=_positive_int,
        default=None,
        metavar="N",
        help="Limit odwiedzin elementów, liczba > 0 (domyślnie: HPT_MAX_NODES lub 1000000).",
    )


def run(args: argparse.Namespace) -> None:
    _run_pipeline(args, PipelineKind.READABLE)


def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "text",
        help="Wyciąga czytelny tekst z dokumentu HTML.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="""
Zamienia dokument HTML na czytelny tekst:
  - <title> i h1 podkreślone znakami "=", h2 znakami "-", h3–h6 w [nawiasach]
  - elementy list jako "  - tekst", komórki tabel jako "| tekst |"
  - akapity zawinięte do 80 kolumn, powtórzenia pominięte
  - nawigacja, stopki, formularze, reklamy i elementy ukryte są pomijane

Przykłady:
  hpt text strona.html
  curl -s https://example.com | hpt text
  hpt text strona.html --out strona.txt
        """,
    )
    _add_common_arguments(p)
    p.set_defaults(func=run)
