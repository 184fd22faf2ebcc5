"""Komenda: hpt fetch — pobiera stronę HTML i wypisuje wybraną reprezentację."""

from __future__ import annotations

import argparse
import json

from rich import box
from rich.console import Console
from rich.table import Table

from data_model.pages import PageResult
from hpt.commands.text import _emit
from page_fetch import FetchError, fetch_page, get_settings

console = Console(stderr=True)

_MODES = ("text", "outline", "html", "raw", "json")


# ---------------------------------------------------------------------------
# Prezentacja
# ---------------------------------------------------------------------------

def _select_output(page: PageResult, mode: str) -> str:
    match mode:
        case "text":
            return page.text_only
        case "outline":
            return page.structured_text
        case "html":
            return page.html
        case "raw":
            return page.raw_html
        case "json":
            return json.dumps(page.to_dict(), ensure_ascii=False, indent=2)
    raise ValueError(f"Nieznany tryb: {mode}")


def _show_stats(page: PageResult) -> None:
    table = Table(
        box=box.SIMPLE_HEAD,
        show_header=True,
        header_style="bold",
        expand=False,
    )
    table.add_column("REPREZENTACJA", no_wrap=True, style="bold cyan")
    table.add_column("ZNAKI", justify="right", no_wrap=True)

    table.add_row("surowy HTML",      str(page.content_length))
    table.add_row("HTML sformatowany", str(page.beautified_length))
    table.add_row("tekst",            str(page.text_length))
    table.add_row("konspekt",         str(len(page.structured_text)))

    console.print()
    console.print(table)
    console.print(f"  [dim]{page.url}[/dim]\n")


# ---------------------------------------------------------------------------
# Główna logika komendy
# ---------------------------------------------------------------------------

def run(args: argparse.Namespace) -> None:
    settings = get_settings()

    console.print(f"Pobieranie [bold]{args.url}[/bold] …")

    try:
        page = fetch_page(args.url, settings)
    except FetchError as e:
        console.print(f"[red]Błąd pobierania ({e.status_code}):[/red] {e}")
        raise SystemExit(1)

    _emit(_select_output(page, args.mode), args.out)

    if args.stats:
        _show_stats(page)


# ---------------------------------------------------------------------------
# Rejestracja parsera
# ---------------------------------------------------------------------------

def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "fetch",
        help="Pobiera stronę HTML i wypisuje tekst, konspekt lub HTML.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="""
Pobiera stronę spod podanego URL (http/https, limit czasu HPT_TIMEOUT)
i wypisuje jedną z reprezentacji:

  text     czytelny tekst (domyślnie)
  outline  konspekt w stylu Markdown
  html     HTML sformatowany (wcięcia 2 spacje)
  raw      surowy HTML
  json     wszystkie reprezentacje + długości jako JSON

Przykłady:
  hpt fetch https://example.com
  hpt fetch https://example.com --mode outline --stats
  hpt fetch https://example.com --mode json --out strona.json
        """,
    )
    p.add_argument(
        "url",
        metavar="URL",
        help="Adres URL strony HTML do pobrania.",
    )
    p.add_argument(
        "--mode", "-m",
        choices=_MODES,
        default="text",
        help="Reprezentacja do wypisania (domyślnie: text).",
    )
    p.add_argument(
        "--out", "-o",
        metavar="PLIK",
        help="Zapisz wynik do pliku (domyślnie: stdout).",
    )
    p.add_argument(
        "--stats",
        action="store_true",
        help="Wyświetl tabelę długości wszystkich reprezentacji.",
    )
    p.set_defaults(func=run)
