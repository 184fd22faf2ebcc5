"""
page_fetch/errors.py — błędy warstwy pobierania.

Każdy błąd niesie status_code odpowiadający statusowi HTTP, jakim
zakończyłoby się żądanie do API (400 / 408 / status serwera / 500).
"""

from __future__ import annotations


class FetchError(RuntimeError):
    """Bazowy błąd pobierania strony."""

    status_code: int = 500

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        if status_code is not None:
            self.status_code = status_code


class InvalidURLError(FetchError, ValueError):
    """Brak URL albo URL spoza http/https."""

    status_code = 400


class FetchTimeoutError(FetchError):
    """Serwer nie odpowiedział w limicie czasu."""

    status_code = 408

    def __init__(self, message: str = "Request timed out. The website took too long to respond.") -> None:
        super().__init__(message)


class FetchStatusError(FetchError):
    """Serwer zwrócił status spoza 2xx."""

    def __init__(self, status_code: int, reason: str = "") -> None:
        self.reason = reason
        super().__init__(f"Failed to fetch: {status_code} {reason}".rstrip(), status_code)
