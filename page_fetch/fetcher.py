"""
page_fetch/fetcher.py — pobieranie strony HTML i budowa PageResult.

Publiczne API:
  validate_url(url)                       -> str         (InvalidURLError)
  fetch_html(url, settings, session)      -> str         (FetchError i pochodne)
  build_page_result(html, url, settings)  -> PageResult
  fetch_page(url, settings, session)      -> PageResult
"""

from __future__ import annotations

import logging
from urllib.parse import urlparse

import requests
from bs4 import BeautifulSoup

from data_model.pages import PageResult
from html_text import extract_readable_text, extract_structured_outline
from page_fetch.beautify import beautify_html
from page_fetch.errors import FetchError, FetchStatusError, FetchTimeoutError, InvalidURLError
from page_fetch.settings import Settings, get_settings

logger = logging.getLogger(__name__)

_ALLOWED_SCHEMES = ("http", "https")


def validate_url(url: str | None) -> str:
    """Sprawdza URL (niepusty, http/https, z hostem) i zwraca go oczyszczonego."""
    if not url or not url.strip():
        raise InvalidURLError("URL is required")
    url = url.strip()
    try:
        parsed = urlparse(url)
    except ValueError as e:
        raise InvalidURLError("Invalid URL format") from e
    if parsed.scheme.lower() not in _ALLOWED_SCHEMES or not parsed.netloc:
        raise InvalidURLError("Invalid URL format")
    return parsed.geturl()


def fetch_html(
    url: str,
    settings: Settings | None = None,
    session: requests.Session | None = None,
) -> str:
    """
    Pobiera surowy HTML spod url.

    Błędy:
      FetchTimeoutError  — przekroczony limit czasu (408)
      FetchStatusError   — status spoza 2xx (status serwera)
      FetchError         — inny błąd połączenia (500)
    """
    settings = settings or get_settings()
    http = session or requests
    logger.debug("GET %s (timeout=%ss)", url, settings.timeout)

    try:
        resp = http.get(url, timeout=settings.timeout, headers=settings.headers)
    except requests.Timeout as e:
        raise FetchTimeoutError() from e
    except requests.RequestException as e:
        raise FetchError(str(e)) from e

    if not resp.ok:
        raise FetchStatusError(resp.status_code, resp.reason or "")

    # Bez charset w nagłówku requests przyjmuje ISO-8859-1 dla text/*
    if "charset" not in resp.headers.get("Content-Type", "").lower():
        resp.encoding = resp.apparent_encoding or "utf-8"
    html = resp.text
    logger.info("Pobrano %s: %d znaków", url, len(html))
    return html


def build_page_result(html: str, url: str, settings: Settings | None = None) -> PageResult:
    """Buduje wszystkie reprezentacje strony; HTML jest parsowany raz dla obu potoków."""
    settings = settings or get_settings()
    soup = BeautifulSoup(html, settings.parser)

    beautified = beautify_html(html)
    text_only  = extract_readable_text(soup, max_nodes=settings.max_nodes)
    structured = extract_structured_outline(soup, max_nodes=settings.max_nodes)

    return PageResult(
        url               = url,
        html              = beautified,
        raw_html          = html,
        text_only         = text_only,
        structured_text   = structured,
        content_length    = len(html),
        beautified_length = len(beautified),
        text_length       = len(text_only),
    )


def fetch_page(
    url: str,
    settings: Settings | None = None,
    session: requests.Session | None = None,
) -> PageResult:
    settings = settings or get_settings()
    url = validate_url(url)
    html = fetch_html(url, settings, session)
    return build_page_result(html, url, settings)
