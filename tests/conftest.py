"""Wspólne fikstury testów: przykładowe dokumenty HTML."""

import pytest
from bs4 import BeautifulSoup

from page_fetch.settings import Settings

ARTICLE_HTML = """
<!DOCTYPE html>
<html>
<head>
  <title>Field Notes</title>
  <style>body { color: red; }</style>
</head>
<body>
  <header><a href="/">Site logo and tagline</a></header>
  <nav><ul><li>Home page link</li><li>About page link</li></ul></nav>
  <h1>Field Notes</h1>
  <h2>Morning walk</h2>
  <p>The river was higher than usual after a week of steady rain.</p>
  <ul>
    <li>Two herons near the bridge</li>
    <li>One kingfisher</li>
  </ul>
  <blockquote>Look deep into nature.</blockquote>
  <div class="ads"><p>Buy our premium boots today please!</p></div>
  <p style="display:none">This paragraph is hidden by inline style.</p>
  <pre>x = 1
    y = 2</pre>
  <script>console.log("tracking");</script>
  <footer><p>Copyright notice for the whole site.</p></footer>
</body>
</html>
"""


@pytest.fixture
def article_html() -> str:
    return ARTICLE_HTML


@pytest.fixture
def article_soup() -> BeautifulSoup:
    return BeautifulSoup(ARTICLE_HTML, "html.parser")


@pytest.fixture
def settings() -> Settings:
    """Ustawienia domyślne, niezależne od zmiennych środowiskowych."""
    return Settings()
