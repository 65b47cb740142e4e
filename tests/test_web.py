import socket
import threading
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer

import pytest

from gopl import web

ROOT_HTML = (
    "<html><head><title>Home</title></head><body>"
    '<a href="/page.html">one</a><a href="page.html">two</a>'
    "</body></html>"
)
PAGE_HTML = (
    "<html><head><title>Page</title></head><body>"
    '<a href="/">home</a><a href="missing">gone</a>'
    "</body></html>"
)
HTML_TYPE = "text/html; charset=utf-8"

ROUTES = {
    "/": (200, HTML_TYPE, ROOT_HTML.encode()),
    "/page.html": (200, HTML_TYPE, PAGE_HTML.encode()),
    "/img.png": (200, "image/png", b"\x89PNG"),
}
MISSING = (404, "text/plain", b"not found")


class _Handler(BaseHTTPRequestHandler):
    def _respond(self, with_body: bool) -> None:
        status, ctype, body = ROUTES.get(self.path, MISSING)
        self.send_response(status)
        self.send_header("Content-Type", ctype)
        self.send_header("Content-Length", str(len(body)))
        self.end_headers()
        if with_body:
            self.wfile.write(body)

    def do_GET(self):
        self._respond(True)

    def do_HEAD(self):
        self._respond(False)

    def log_message(self, format, *args):
        pass


@pytest.fixture(scope="module")
def base():
    server = ThreadingHTTPServer(("127.0.0.1", 0), _Handler)
    thread = threading.Thread(target=server.serve_forever, daemon=True)
    thread.start()
    yield f"http://127.0.0.1:{server.server_address[1]}"
    server.shutdown()
    server.server_close()


@pytest.fixture
def dead_url():
    with socket.socket() as s:
        s.bind(("127.0.0.1", 0))
        port = s.getsockname()[1]
    return f"http://127.0.0.1:{port}/"


def test_fetch_returns_body(base):
    assert web.fetch(f"{base}/page.html") == PAGE_HTML.encode()


def test_fetch_returns_body_of_error_page(base):
    assert web.fetch(f"{base}/missing") == MISSING[2]


def test_fetch_unreachable_raises(dead_url):
    with pytest.raises(OSError):
        web.fetch(dead_url)


def test_fetch_all_reports_each_url(base):
    urls = [f"{base}/", f"{base}/page.html"]
    lines = web.fetch_all(urls)
    assert len(lines) == 2
    by_url = {url: next(line for line in lines if line.endswith("  " + url)) for url in urls}
    assert f"{len(ROOT_HTML.encode()):7d}" in by_url[f"{base}/"]
    assert f"{len(PAGE_HTML.encode()):7d}" in by_url[f"{base}/page.html"]


def test_fetch_all_empty():
    assert web.fetch_all([]) == []


def test_save_writes_file(base, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    name, n = web.save(f"{base}/page.html")
    assert name == "page.html"
    assert n == len(PAGE_HTML.encode())
    assert (tmp_path / "page.html").read_bytes() == PAGE_HTML.encode()


def test_save_root_is_index(base, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    name, n = web.save(f"{base}/")
    assert name == "index.html"
    assert (tmp_path / name).read_bytes() == ROOT_HTML.encode()
    assert n == len(ROOT_HTML.encode())


def test_find_links_raw(base):
    assert web.find_links(f"{base}/") == ["/page.html", "page.html"]


def test_find_links_bad_status(base):
    with pytest.raises(OSError, match="getting"):
        web.find_links(f"{base}/missing")


def test_extract_resolves(base):
    assert web.extract(f"{base}/page.html") == [f"{base}/", f"{base}/missing"]


def test_title(base):
    assert web.title(f"{base}/") == ["Home"]


def test_title_rejects_non_html(base):
    with pytest.raises(ValueError, match="image/png, not text/html"):
        web.title(f"{base}/img.png")


def test_wait_for_server_live(base):
    assert web.wait_for_server(f"{base}/", timeout=5) == 1


def test_wait_for_server_zero_timeout(base):
    with pytest.raises(TimeoutError, match="failed to respond"):
        web.wait_for_server(f"{base}/", timeout=0)


def test_wait_for_server_dead(dead_url):
    with pytest.raises(TimeoutError, match="failed to respond"):
        web.wait_for_server(dead_url, timeout=0.1)


def test_crawl_main(base, capsys):
    assert web.crawl_main([f"{base}/"]) == 0
    captured = capsys.readouterr()
    assert captured.out.splitlines() == [
        f"{base}/",
        f"{base}/page.html",
        f"{base}/missing",
    ]
    assert "getting" in captured.err


def test_title_main(base, capsys):
    assert web.title_main([f"{base}/page.html", f"{base}/img.png"]) == 0
    captured = capsys.readouterr()
    assert captured.out.splitlines() == ["Page"]
    assert captured.err.startswith("title: ")


def test_fetch_main(base, capsysbinary):
    assert web.fetch_main([f"{base}/page.html"]) == 0
    assert capsysbinary.readouterr().out == PAGE_HTML.encode()


def test_fetch_main_failure(dead_url, capsysbinary):
    assert web.fetch_main([dead_url]) == 1
    assert capsysbinary.readouterr().err.startswith(b"fetch: ")