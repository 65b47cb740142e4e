"""Search the GitHub issue tracker and format the results as text, a report or HTML."""

from __future__ import annotations

import argparse
import html
import json
import sys
import urllib.error
import urllib.parse
import urllib.request
from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any

ISSUES_URL = "https://api.github.com/search/issues"

_ZERO_TIME = datetime(1, 1, 1, tzinfo=timezone.utc)
_RULE = "-" * 40
_UNSAFE_URL = "#ZgotmplZ"


@dataclass
class User:
    """The author of an issue."""

    login: str = ""
    html_url: str = ""


@dataclass
class Issue:
    """One issue as returned by a search."""

    number: int = 0
    html_url: str = ""
    title: str = ""
    state: str = ""
    user: User | None = None
    created_at: datetime = _ZERO_TIME
    body: str = ""


@dataclass
class IssuesSearchResult:
    """The total number of matches and the issues on the first page."""

    total_count: int = 0
    items: list[Issue] = field(default_factory=list)


def _get(obj: Mapping[str, Any], key: str, default: Any = None) -> Any:
    """Look a key up exactly, then without regard to case; null means default."""
    if key in obj:
        value = obj[key]
    else:
        folded = key.casefold()
        value = next((v for k, v in obj.items() if k.casefold() == folded), None)
    return default if value is None else value


def _parse_time(text: str | None) -> datetime:
    if not text:
        return _ZERO_TIME
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    return datetime.fromisoformat(text)


def _parse_user(obj: Mapping[str, Any] | None) -> User | None:
    if obj is None:
        return None
    return User(login=_get(obj, "login", ""), html_url=_get(obj, "html_url", ""))


def _parse_issue(obj: Mapping[str, Any]) -> Issue:
    return Issue(
        number=int(_get(obj, "number", 0)),
        html_url=_get(obj, "html_url", ""),
        title=_get(obj, "title", ""),
        state=_get(obj, "state", ""),
        user=_parse_user(_get(obj, "user")),
        created_at=_parse_time(_get(obj, "created_at")),
        body=_get(obj, "body", ""),
    )


def parse_result(data: str | bytes | Mapping[str, Any]) -> IssuesSearchResult:
    """Decode a search response, given as JSON text or an already decoded object."""
    obj = data if isinstance(data, Mapping) else json.loads(data)
    if not isinstance(obj, Mapping):
        raise ValueError("search response is not a JSON object")
    items = [_parse_issue(item) for item in _get(obj, "items", []) if item is not None]
    return IssuesSearchResult(total_count=int(_get(obj, "total_count", 0)), items=items)


def search_issues(terms: list[str]) -> IssuesSearchResult:
    """Query the issue tracker for the given search terms.

    Raises OSError if the request fails or the status is not 200 OK.
    """
    q = urllib.parse.quote_plus(" ".join(terms))
    try:
        with urllib.request.urlopen(f"{ISSUES_URL}?q={q}") as resp:
            status, reason, body = resp.status, resp.reason, resp.read()
    except urllib.error.HTTPError as err:
        raise OSError(f"search query failed: {err.code} {err.reason}") from None
    if status != 200:
        raise OSError(f"search query failed: {status} {reason}")
    return parse_result(body)


def days_ago(t: datetime, now: datetime | None = None) -> int:
    """Return the whole number of days from t until now."""
    current = datetime.now(timezone.utc) if now is None else now
    return int((current - t).total_seconds() / 3600 / 24)


def _login(issue: Issue) -> str:
    return issue.user.login if issue.user is not None else ""


def format_text(result: IssuesSearchResult) -> str:
    """Format the result as a table of number, user and title."""
    lines = [f"{result.total_count} issues:"]
    for item in result.items:
        lines.append(f"#{item.number:<5d} {_login(item)[:9]:>9} {item.title[:55]}")
    return "\n".join(lines) + "\n"


def format_report(result: IssuesSearchResult, now: datetime | None = None) -> str:
    """Format the result as a report with each issue's age in days."""
    parts = [f"{result.total_count} issues:\n"]
    for item in result.items:
        parts.append(
            f"{_RULE}\n"
            f"Number: {item.number}\n"
            f"User:   {_login(item)}\n"
            f"Title:  {item.title[:64]}\n"
            f"Age:    {days_ago(item.created_at, now)} days\n"
        )
    return "".join(parts)


def _text(value: object) -> str:
    return html.escape(str(value), quote=True)


def _url(value: str) -> str:
    scheme = urllib.parse.urlsplit(value).scheme.lower()
    if scheme and scheme not in ("http", "https", "mailto"):
        return _UNSAFE_URL
    return html.escape(value, quote=True)


def format_html(result: IssuesSearchResult) -> str:
    """Format the result as an HTML table, escaping the issue data."""
    parts = [
        f"\n<h1>{_text(result.total_count)} issues</h1>\n"
        "<table>\n"
        "<tr style='text-align: left'>\n"
        "  <th>#</th>\n"
        "  <th>State</th>\n"
        "  <th>User</th>\n"
        "  <th>Title</th>\n"
        "</tr>\n"
    ]
    for item in result.items:
        user_url = item.user.html_url if item.user is not None else ""
        parts.append(
            "\n<tr>\n"
            f"  <td><a href='{_url(item.html_url)}'>{_text(item.number)}</a></td>\n"
            f"  <td>{_text(item.state)}</td>\n"
            f"  <td><a href='{_url(user_url)}'>{_text(_login(item))}</a></td>\n"
            f"  <td><a href='{_url(item.html_url)}'>{_text(item.title)}</a></td>\n"
            "</tr>\n"
        )
    parts.append("\n</table>\n")
    return "".join(parts)


def main(argv: list[str] | None = None) -> int:
    """Search for issues matching the terms and print them in the chosen form."""
    parser = argparse.ArgumentParser(prog="issues", description="Search issues.")
    parser.add_argument(
        "--format", choices=("text", "report", "html"), default="text",
        help="output form",
    )
    parser.add_argument("terms", nargs="*")
    ns = parser.parse_args(argv)
    try:
        result = search_issues(ns.terms)
    except (OSError, ValueError) as err:
        print(err, file=sys.stderr)
        return 1
    if ns.format == "report":
        sys.stdout.write(format_report(result))
    elif ns.format == "html":
        sys.stdout.write(format_html(result))
    else:
        sys.stdout.write(format_text(result))
    return 0