"""
page_fetch — pobieranie stron HTML i składanie wszystkich reprezentacji.

Moduły:
  fetcher  — validate_url, fetch_html, fetch_page, build_page_result
  beautify — beautify_html (prettify przez BeautifulSoup)
  errors   — FetchError, InvalidURLError, FetchTimeoutError, FetchStatusError
  settings — Settings, get_settings (zmienne HPT_* / plik .env)
"""

from .beautify import beautify_html
from .errors import (
    FetchError,
    FetchStatusError,
    FetchTimeoutError,
    InvalidURLError,
)
from .fetcher import (
    build_page_result,
    fetch_html,
    fetch_page,
    validate_url,
)
from .settings import Settings, get_settings

__all__ = [
    "beautify_html",
    "FetchError",
    "FetchStatusError",
    "FetchTimeoutError",
    "InvalidURLError",
    "build_page_result",
    "fetch_html",
    "fetch_page",
    "validate_url",
    "Settings",
    "get_settings",
]
