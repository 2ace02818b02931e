from pathlib import Path

import httpx
import pytest
from bs4 import BeautifulSoup

from blogshell import cli


def _read_soup(path: Path) -> BeautifulSoup:
    return BeautifulSoup(path.read_text(encoding="utf-8"), "html.parser")


def test_render_with_header_and_content(tmp_path: Path, capsys):
    fragment = tmp_path / "post.html"
    fragment.write_text('<article class="post"><h2>Context managers</h2></article>', encoding="utf-8")
    out = tmp_path / "site" / "index.html"

    cli.main(["render", "--out", str(out), "--header", "--content", str(fragment)])

    html = out.read_text(encoding="utf-8")
    assert html.startswith("<!doctype html>")
    soup = _read_soup(out)
    layout = soup.select_one("div.app-layout")
    children = [child.name for child in layout.find_all(recursive=False)]
    assert children[:3] == ["header", "nav", "article"]
    assert soup.find("form", id="lead-form") is not None
    assert "Rendered" in capsys.readouterr().out


def test_render_without_header(tmp_path: Path):
    out = tmp_path / "index.html"
    cli.main(["render", "--out", str(out)])

    soup = _read_soup(out)
    assert soup.find("header") is None
    assert soup.select_one("div.app-layout").find(recursive=False).name == "nav"


def test_render_with_missing_content_exits(tmp_path: Path):
    with pytest.raises(SystemExit):
        cli.main(["render", "--out", str(tmp_path / "x.html"), "--content", str(tmp_path / "nope.html")])


def test_assets_writes_page_script(tmp_path: Path):
    cli.main(["assets", "--out", str(tmp_path)])
    assert (tmp_path / "js" / "main.js").exists()


def _patch_client(monkeypatch, handler) -> None:
    real_client = httpx.AsyncClient

    def fake_client(**kwargs):
        return real_client(transport=httpx.MockTransport(handler), **kwargs)

    monkeypatch.setattr(cli.httpx, "AsyncClient", fake_client)


def test_subscribe_success(monkeypatch, capsys):
    received = []

    def handler(request: httpx.Request) -> httpx.Response:
        received.append(str(request.url))
        return httpx.Response(201, json={"msg": "lead created"})

    _patch_client(monkeypatch, handler)
    cli.main(
        ["subscribe", "--base-url", "http://blog.test", "--name", "Arthur", "--email", "art@bpc.com"]
    )

    assert received == ["http://blog.test/addLead"]
    assert "Submission succeeded." in capsys.readouterr().out


def test_subscribe_failure_exits_nonzero(monkeypatch):
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("refused", request=request)

    _patch_client(monkeypatch, handler)
    with pytest.raises(SystemExit) as excinfo:
        cli.main(
            ["subscribe", "--base-url", "http://blog.test", "--name", "Arthur", "--email", "art@bpc.com"]
        )
    assert excinfo.value.code == 1


def test_version_flag(capsys):
    with pytest.raises(SystemExit):
        cli.main(["--version"])
    assert "blogshell 0.1.0" in capsys.readouterr().out
