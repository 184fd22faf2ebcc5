"""page_fetch/beautify.py — formatowanie (wcięcia) znaczników HTML przez BeautifulSoup."""

from __future__ import annotations

from bs4 import BeautifulSoup
from bs4.dammit import EntitySubstitution
from bs4.formatter import HTMLFormatter

# html.parser nie dopisuje <html>/<body> ani domkniętych tagów — formatujemy
# znaczniki tak, jak przyszły z serwera.
BEAUTIFY_PARSER = "html.parser"


def beautify_html(html: str, indent: int = 2, parser: str = BEAUTIFY_PARSER) -> str:
    """Zwraca HTML z jednym elementem na linię i wcięciem `indent` spacji."""
    if not html.strip():
        return ""
    soup = BeautifulSoup(html, parser)
    # Jak formatter "minimal", ale z własnym wcięciem: &, <, > pozostają encjami
    formatter = HTMLFormatter(
        entity_substitution=EntitySubstitution.substitute_xml,
        indent=indent,
    )
    return soup.prettify(formatter=formatter).strip()
