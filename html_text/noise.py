"""
html_text/noise.py — filtr szumu: elementy bez widocznej treści tekstowej.

Filtr nie modyfikuje drzewa — is_noise() jest predykatem sprawdzanym przez
walker w trakcie przechodzenia; wykluczenie elementu wyklucza całe poddrzewo.

Zawsze wykluczane:
  - tagi script, style, noscript, iframe, svg, head
  - elementy z atrybutem hidden
  - elementy z aria-hidden="true"
  - elementy, których atrybut style zawiera "display: none" lub "display:none"

Potok "text" dokłada: nav, footer, header, kontrolki formularzy,
klasy advertisement/ads oraz role navigation/banner/complementary
(patrz PipelineConfig.noise_tags / noise_classes / noise_roles).

Ograniczenie: style sprawdzamy dosłownym dopasowaniem podciągu, nie parserem
CSS — "display :none", "DISPLAY:NONE" ani reguły z arkuszy stylów nie są
wykrywane.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from bs4 import Tag

if TYPE_CHECKING:
    from html_text.formats import PipelineConfig

# ---------------------------------------------------------------------------
# Stałe
# ---------------------------------------------------------------------------

BASE_NOISE_TAGS: frozenset[str] = frozenset({
    "script", "style", "noscript", "iframe", "svg", "head",
})

CHROME_NOISE_TAGS: frozenset[str] = frozenset({
    "nav", "footer", "header",
    "button", "input", "select", "form",
})

AD_CLASSES: frozenset[str] = frozenset({"advertisement", "ads"})

CHROME_ROLES: frozenset[str] = frozenset({"navigation", "banner", "complementary"})

_DISPLAY_NONE = ("display: none", "display:none")


# ---------------------------------------------------------------------------
# Publiczne API
# ---------------------------------------------------------------------------

def is_hidden(tag: Tag) -> bool:
    """True dla elementu ukrytego atrybutami (hidden / aria-hidden / style)."""
    attrs = tag.attrs
    if "hidden" in attrs:
        return True
    if _attr_str(attrs.get("aria-hidden")) == "true":
        return True
    style = _attr_str(attrs.get("style"))
    return any(marker in style for marker in _DISPLAY_NONE)


def is_noise(tag: Tag, config: PipelineConfig) -> bool:
    """
    Czy element (wraz z poddrzewem) ma zostać pominięty w danym potoku.
    """
    name = tag.name
    if name in BASE_NOISE_TAGS or name in config.noise_tags:
        return True
    if is_hidden(tag):
        return True

    if config.noise_classes:
        classes = tag.get("class") or ()
        if isinstance(classes, str):
            classes = classes.split()
        if any(c in config.noise_classes for c in classes):
            return True

    if config.noise_roles:
        role = _attr_str(tag.get("role"))
        if role in config.noise_roles:
            return True

    return False


# ---------------------------------------------------------------------------
# Pomocnicze
# ---------------------------------------------------------------------------

def _attr_str(value: object) -> str:
    """Wartość atrybutu jako napis (bs4 zwraca listę dla atrybutów wielowartościowych)."""
    if value is None:
        return ""
    if isinstance(value, (list, tuple)):
        return " ".join(str(v) for v in value)
    return str(value)
