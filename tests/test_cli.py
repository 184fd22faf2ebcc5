"""Testy CLI hpt — komendy text, outline, fetch (bez sieci)."""

import io
import json

import pytest

from hpt.cli import build_parser
from hpt.commands import fetch as cmd_fetch
from page_fetch import FetchStatusError, build_page_result

DOC = "<title>Doc</title><body><h1>Hi</h1><p>Some text here that is long enough.</p></body>"


def _run(argv):
    args = build_parser().parse_args(argv)
    args.func(args)


@pytest.fixture
def doc_file(tmp_path):
    path = tmp_path / "page.html"
    path.write_text(DOC, encoding="utf-8")
    return path


def test_text_command_prints_to_stdout(doc_file, capsys):
    _run(["text", str(doc_file)])
    out = capsys.readouterr().out
    assert out == "Doc\n===\n\nHI\n==\n\nSome text here that is long enough.\n"


def test_text_command_reads_stdin(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO(DOC))
    _run(["text"])
    assert capsys.readouterr().out.startswith("Doc\n===")


def test_outline_command_writes_file(doc_file, tmp_path):
    out_path = tmp_path / "outline.md"
    _run(["outline", str(doc_file), "--out", str(out_path)])
    assert out_path.read_text(encoding="utf-8") == (
        "# Doc\n\n# Hi\n\nSome text here that is long enough.\n"
    )


def test_max_nodes_option(tmp_path, capsys):
    path = tmp_path / "many.html"
    path.write_text("<body><li>first item</li><li>second item</li></body>", encoding="utf-8")
    _run(["outline", str(path), "--max-nodes", "1"])
    assert capsys.readouterr().out == "• first item\n"


@pytest.mark.parametrize("value", ["0", "-1", "many"])
def test_max_nodes_must_be_positive(value, capsys):
    with pytest.raises(SystemExit) as exc:
        build_parser().parse_args(["outline", "--max-nodes=" + value])
    assert exc.value.code == 2
    assert "--max-nodes" in capsys.readouterr().err


def test_missing_file_exits(tmp_path):
    with pytest.raises(SystemExit) as exc:
        _run(["text", str(tmp_path / "nope.html")])
    assert exc.value.code == 1


def test_fetch_json_mode(monkeypatch, capsys, settings):
    page = build_page_result(DOC, "https://example.com/", settings)
    monkeypatch.setattr(cmd_fetch, "fetch_page", lambda url, settings: page)

    _run(["fetch", "https://example.com/", "--mode", "json"])
    data = json.loads(capsys.readouterr().out)
    assert data["url"] == "https://example.com/"
    assert data["textOnly"] == page.text_only
    assert data["contentLength"] == len(DOC)


def test_fetch_outline_with_stats(monkeypatch, capsys, settings):
    page = build_page_result(DOC, "https://example.com/", settings)
    monkeypatch.setattr(cmd_fetch, "fetch_page", lambda url, settings: page)

    _run(["fetch", "https://example.com/", "--mode", "outline", "--stats"])
    captured = capsys.readouterr()
    assert captured.out == page.structured_text + "\n"
    assert "konspekt" in captured.err


def test_fetch_error_exits(monkeypatch, capsys):
    def boom(url, settings):
        raise FetchStatusError(404, "Not Found")

    monkeypatch.setattr(cmd_fetch, "fetch_page", boom)
    with pytest.raises(SystemExit) as exc:
        _run(["fetch", "https://example.com/missing"])
    assert exc.value.code == 1
    assert "404" in capsys.readouterr().err


def test_version():
    with pytest.raises(SystemExit) as exc:
        build_parser().parse_args(["--version"])
    assert exc.value.code == 0


def test_command_is_required():
    with pytest.raises(SystemExit):
        build_parser().parse_args([])
