"""Fetching URLs: contents, timings, saved files, links and titles."""

from __future__ import annotations

import itertools
import logging
import posixpath
import sys
import time
import urllib.error
import urllib.request
from concurrent.futures import ThreadPoolExecutor, as_completed
from dataclasses import dataclass
from email.message import Message
from urllib.parse import unquote, urljoin, urlsplit

from gopl.graph import breadth_first
from gopl.htmltree import parse, titles, visit

logger = logging.getLogger(__name__)


@dataclass
class _Response:
    status: int
    reason: str
    headers: Message
    url: str
    body: bytes

    @property
    def status_line(self) -> str:
        return f"{self.status} {self.reason}"

    def text(self) -> str:
        charset = self.headers.get_content_charset() or "utf-8"
        try:
            return self.body.decode(charset, errors="replace")
        except LookupError:
            return self.body.decode("utf-8", errors="replace")


def _get(url: str, method: str = "GET") -> _Response:
    """Perform a request; any HTTP status, even an error one, is a response."""
    request = urllib.request.Request(url, method=method)
    try:
        with urllib.request.urlopen(request) as resp:
            return _Response(resp.status, resp.reason, resp.headers, resp.geturl(), resp.read())
    except urllib.error.HTTPError as err:
        with err:
            return _Response(err.code, str(err.reason), err.headers, err.geturl() or url, err.read())


def fetch(url: str) -> bytes:
    """Return the body found at url, whatever the status."""
    return _get(url).body


def _fetch_report(url: str) -> str:
    start = time.monotonic()
    try:
        resp = _get(url)
    except (OSError, ValueError) as err:
        return str(err)
    secs = time.monotonic() - start
    return f"{secs:.2f}s  {len(resp.body):7d}  {url}"


def fetch_all(urls: list[str]) -> list[str]:
    """Fetch urls in parallel; return a time and size line for each, as they finish."""
    if not urls:
        return []
    with ThreadPoolExecutor(max_workers=len(urls)) as pool:
        futures = [pool.submit(_fetch_report, url) for url in urls]
        return [future.result() for future in as_completed(futures)]


def _path_base(path: str) -> str:
    if path == "":
        return "."
    path = path.rstrip("/")
    if path == "":
        return "/"
    return posixpath.basename(path)


def save(url: str) -> tuple[str, int]:
    """Download url into a file in the current directory.

    Returns the file name and the number of bytes written.
    """
    resp = _get(url)
    local = _path_base(unquote(urlsplit(resp.url).path))
    if local == "/":
        local = "index.html"
    with open(local, "wb") as f:
        n = f.write(resp.body)
    return local, n


def _get_html(url: str) -> _Response:
    resp = _get(url)
    if resp.status != 200:
        raise OSError(f"getting {url}: {resp.status_line}")
    return resp


def find_links(url: str) -> list[str]:
    """Return the hrefs of the HTML page at url, as written."""
    return visit(parse(_get_html(url).text()))


def extract(url: str) -> list[str]:
    """Return the links of the HTML page at url, resolved against its address."""
    resp = _get_html(url)
    links = []
    for href in visit(parse(resp.text())):
        try:
            links.append(urljoin(resp.url, href))
        except ValueError:
            continue
    return links


def title(url: str) -> list[str]:
    """Return the title texts of the HTML page at url.

    Raises ValueError if the page is not text/html.
    """
    resp = _get(url)
    ct = resp.headers.get("Content-Type", "")
    if ct != "text/html" and not ct.startswith("text/html;"):
        raise ValueError(f"{url} has type {ct}, not text/html")
    return titles(parse(resp.text()))


def wait_for_server(url: str, timeout: float = 60.0) -> int:
    """Try to reach url with exponential back-off until timeout seconds pass.

    Returns the number of attempts made; raises TimeoutError on failure.
    """
    deadline = time.monotonic() + timeout
    for tries in itertools.count():
        if time.monotonic() >= deadline:
            break
        try:
            _get(url, method="HEAD")
        except (OSError, ValueError) as err:
            logger.warning("server not responding (%s); retrying...", err)
            time.sleep(1 << tries)
        else:
            return tries + 1
    raise TimeoutError(f"server {url} failed to respond after {timeout}s")


def _write_bytes(data: bytes) -> None:
    sys.stdout.flush()
    sys.stdout.buffer.write(data)
    sys.stdout.buffer.flush()


def fetch_main(argv: list[str] | None = None) -> int:
    """Print the content found at each URL; stop at the first failure."""
    urls = sys.argv[1:] if argv is None else argv
    for url in urls:
        try:
            body = fetch(url)
        except (OSError, ValueError) as err:
            print(f"fetch: {err}", file=sys.stderr)
            return 1
        _write_bytes(body)
    return 0


def fetchall_main(argv: list[str] | None = None) -> int:
    """Fetch URLs in parallel and report their times and sizes."""
    urls = sys.argv[1:] if argv is None else argv
    start = time.monotonic()
    for line in fetch_all(urls):
        print(line)
    print(f"{time.monotonic() - start:.2f}s elapsed")
    return 0


def _crawl(url: str) -> list[str]:
    print(url)
    try:
        return extract(url)
    except (OSError, ValueError) as err:
        print(err, file=sys.stderr)
        return []


def crawl_main(argv: list[str] | None = None) -> int:
    """Crawl the web breadth-first from the given URLs, printing each one."""
    urls = sys.argv[1:] if argv is None else argv
    breadth_first(_crawl, urls)
    return 0


def title_main(argv: list[str] | None = None) -> int:
    """Print the title of the HTML document at each URL."""
    urls = sys.argv[1:] if argv is None else argv
    for url in urls:
        try:
            found = title(url)
        except (OSError, ValueError) as err:
            print(f"title: {err}", file=sys.stderr)
            continue
        for text in found:
            print(text)
    return 0