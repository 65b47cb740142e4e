"""Small web applications: path echo, counter, request dump and search."""

from __future__ import annotations

import argparse
import logging
import sys
import threading
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from socketserver import ThreadingMixIn
from urllib.parse import parse_qs, quote
from wsgiref.simple_server import WSGIServer, make_server

from gopl.params import _quote, unpack

logger = logging.getLogger(__name__)

StartResponse = Callable[..., object]

_PATH_SAFE = "/:@!$&'()*+,;=-._~"


@dataclass
class SearchQuery:
    """Parameters of a search: labels, a result limit and exact matching."""

    labels: list[str] = field(default_factory=list, metadata={"http": "l"})
    max_results: int = field(default=10, metadata={"http": "max"})
    exact: bool = field(default=False, metadata={"http": "x"})

    def __str__(self) -> str:
        labels = " ".join(self.labels)
        exact = "true" if self.exact else "false"
        return f"{{Labels:[{labels}] MaxResults:{self.max_results} Exact:{exact}}}"


def _respond(
    start_response: StartResponse, body: str, status: str = "200 OK"
) -> Iterable[bytes]:
    data = body.encode("utf-8")
    start_response(
        status,
        [("Content-Type", "text/plain; charset=utf-8"), ("Content-Length", str(len(data)))],
    )
    return [data]


def _path(environ: dict) -> str:
    raw = environ.get("PATH_INFO", "") or "/"
    return raw.encode("latin-1").decode("utf-8", errors="replace")


def _parse_form(environ: dict) -> dict[str, list[str]]:
    """Collect form values: a urlencoded body first, then the query string."""
    form: dict[str, list[str]] = {}
    if environ.get("REQUEST_METHOD", "GET") in ("POST", "PUT", "PATCH"):
        ctype = environ.get("CONTENT_TYPE", "").split(";")[0].strip().lower()
        if ctype == "application/x-www-form-urlencoded":
            length = int(environ.get("CONTENT_LENGTH") or 0)
            body = environ["wsgi.input"].read(length) if length > 0 else b""
            text = body.decode("utf-8", errors="replace")
            for k, vs in parse_qs(text, keep_blank_values=True).items():
                form.setdefault(k, []).extend(vs)
    query = environ.get("QUERY_STRING", "")
    for k, vs in parse_qs(query, keep_blank_values=True).items():
        form.setdefault(k, []).extend(vs)
    return form


def _quote_list(values: Iterable[str]) -> str:
    return "[" + " ".join(_quote(v) for v in values) + "]"


def _headers(environ: dict) -> dict[str, list[str]]:
    headers: dict[str, list[str]] = {}
    for key, value in environ.items():
        if key.startswith("HTTP_"):
            name = key[5:]
        elif key in ("CONTENT_TYPE", "CONTENT_LENGTH") and value:
            name = key
        else:
            continue
        canonical = "-".join(part.capitalize() for part in name.split("_"))
        if canonical == "Host":
            continue
        headers.setdefault(canonical, []).append(value)
    return headers


def echo_app(environ: dict, start_response: StartResponse) -> Iterable[bytes]:
    """Answer with the quoted path of the request."""
    return _respond(start_response, f"URL.Path = {_quote(_path(environ))}\n")


class CounterApp:
    """Echo the path of each request and count them; /count shows the count."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self.count = 0

    def __call__(self, environ: dict, start_response: StartResponse) -> Iterable[bytes]:
        if _path(environ) == "/count":
            with self._lock:
                body = f"Count {self.count}\n"
            return _respond(start_response, body)
        with self._lock:
            self.count += 1
        return echo_app(environ, start_response)


def request_app(environ: dict, start_response: StartResponse) -> Iterable[bytes]:
    """Answer with the request line, headers, host, remote address and form."""
    path = quote(_path(environ), safe=_PATH_SAFE)
    query = environ.get("QUERY_STRING", "")
    url = f"{path}?{query}" if query else path
    method = environ.get("REQUEST_METHOD", "GET")
    proto = environ.get("SERVER_PROTOCOL", "HTTP/1.1")
    lines = [f"{method} {url} {proto}"]
    for name, values in _headers(environ).items():
        lines.append(f"Header[{_quote(name)}] = {_quote_list(values)}")
    host = environ.get("HTTP_HOST") or (
        f"{environ.get('SERVER_NAME', '')}:{environ.get('SERVER_PORT', '')}"
    )
    lines.append(f"Host = {_quote(host)}")
    remote = environ.get("REMOTE_ADDR", "")
    if environ.get("REMOTE_PORT"):
        remote = f"{remote}:{environ['REMOTE_PORT']}"
    lines.append(f"RemoteAddr = {_quote(remote)}")
    try:
        form = _parse_form(environ)
    except ValueError as err:
        logger.warning("%s", err)
        form = {}
    for name, values in form.items():
        lines.append(f"Form[{_quote(name)}] = {_quote_list(values)}")
    return _respond(start_response, "\n".join(lines) + "\n")


def search_app(environ: dict, start_response: StartResponse) -> Iterable[bytes]:
    """Serve /search: decode its parameters and show them, or answer 400."""
    if _path(environ) != "/search":
        return _respond(start_response, "404 page not found\n", "404 Not Found")
    data = SearchQuery()
    try:
        unpack(_parse_form(environ), data)
    except ValueError as err:
        return _respond(start_response, f"{err}\n", "400 Bad Request")
    return _respond(start_response, f"Search: {data}\n")


class _ThreadingWSGIServer(ThreadingMixIn, WSGIServer):
    daemon_threads = True


def serve(app: Callable, host: str = "localhost", port: int = 8000) -> None:
    """Serve app on host and port until interrupted."""
    with make_server(host, port, app, server_class=_ThreadingWSGIServer) as server:
        server.serve_forever()


def main(argv: list[str] | None = None) -> int:
    """Run one of the applications as a web server."""
    parser = argparse.ArgumentParser(prog="server", description="Run a small web server.")
    parser.add_argument("app", choices=("echo", "counter", "request", "search"))
    parser.add_argument("--host", default=None)
    parser.add_argument("--port", type=int, default=None)
    ns = parser.parse_args(argv)
    apps = {
        "echo": echo_app,
        "counter": CounterApp(),
        "request": request_app,
        "search": search_app,
    }
    is_search = ns.app == "search"
    host = ns.host if ns.host is not None else ("" if is_search else "localhost")
    port = ns.port if ns.port is not None else (12345 if is_search else 8000)
    try:
        serve(apps[ns.app], host, port)
    except KeyboardInterrupt:
        return 0
    except OSError as err:
        print(f"server: {err}", file=sys.stderr)
        return 1
    return 0