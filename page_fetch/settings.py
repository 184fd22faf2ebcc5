"""
page_fetch/settings.py — konfiguracja przez zmienne środowiskowe.

Zmienne środowiskowe (wszystkie opcjonalne):
  HPT_TIMEOUT          limit czasu żądania HTTP w sekundach (15)
  HPT_USER_AGENT       nagłówek User-Agent (przeglądarka desktopowa)
  HPT_ACCEPT_LANGUAGE  nagłówek Accept-Language (en-US,en;q=0.5)
  HPT_PARSER           parser BeautifulSoup (lxml)
  HPT_MAX_NODES        limit odwiedzin elementów w jednej ekstrakcji (1000000)

Opcjonalnie plik .env w katalogu głównym projektu, np.:
  HPT_TIMEOUT=30
"""

from __future__ import annotations

import os
import pathlib
from dataclasses import dataclass

from dotenv import load_dotenv

from html_text import DEFAULT_MAX_NODES, DEFAULT_PARSER

load_dotenv(pathlib.Path(__file__).resolve().parent.parent / ".env")

DEFAULT_TIMEOUT = 15
DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) "
    "AppleWebKit/537.36 (KHTML, like Gecko) "
    "Chrome/120.0.0.0 Safari/537.36"
)
DEFAULT_ACCEPT = "text/html,application/xhtml+xml,application/xml;q=0.9,image/webp,*/*;q=0.8"
DEFAULT_ACCEPT_LANGUAGE = "en-US,en;q=0.5"


@dataclass(frozen=True, slots=True)
class Settings:
    timeout:         float = DEFAULT_TIMEOUT
    user_agent:      str   = DEFAULT_USER_AGENT
    accept_language: str   = DEFAULT_ACCEPT_LANGUAGE
    parser:          str   = DEFAULT_PARSER
    max_nodes:       int   = DEFAULT_MAX_NODES

    @property
    def headers(self) -> dict[str, str]:
        return {
            "User-Agent":      self.user_agent,
            "Accept":          DEFAULT_ACCEPT,
            "Accept-Language": self.accept_language,
        }


def get_settings() -> Settings:
    """Czyta ustawienia ze środowiska; błędne liczby → wartość domyślna."""
    return Settings(
        timeout         = _env_number("HPT_TIMEOUT", DEFAULT_TIMEOUT, float),
        user_agent      = os.getenv("HPT_USER_AGENT", DEFAULT_USER_AGENT),
        accept_language = os.getenv("HPT_ACCEPT_LANGUAGE", DEFAULT_ACCEPT_LANGUAGE),
        parser          = os.getenv("HPT_PARSER", DEFAULT_PARSER),
        max_nodes       = _env_number("HPT_MAX_NODES", DEFAULT_MAX_NODES, int),
    )


def _env_number(name: str, default: int | float, cast: type[int] | type[float]) -> int | float:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = cast(raw)
    except ValueError:
        return default
    return value if value > 0 else default
