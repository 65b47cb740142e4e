"""A small HTML document tree with link, outline and title helpers."""

from __future__ import annotations

import enum
import sys
import urllib.request
from collections.abc import Callable, Iterator
from dataclasses import dataclass, field
from html.parser import HTMLParser

_VOID_ELEMENTS = frozenset(
    {
        "area", "base", "br", "col", "embed", "hr", "img", "input",
        "link", "meta", "param", "source", "track", "wbr",
    }
)


class NodeType(enum.IntEnum):
    """The kinds of node in a document tree."""

    ERROR = 0
    TEXT = 1
    DOCUMENT = 2
    ELEMENT = 3
    COMMENT = 4
    DOCTYPE = 5


@dataclass(eq=False)
class Node:
    """A node of an HTML document: its kind, tag or text, attributes and children."""

    type: NodeType
    data: str = ""
    attr: list[tuple[str, str]] = field(default_factory=list)
    children: list[Node] = field(default_factory=list)
    parent: Node | None = field(default=None, repr=False)

    @property
    def first_child(self) -> Node | None:
        """The first child, or None for a leaf."""
        return self.children[0] if self.children else None

    def __iter__(self) -> Iterator[Node]:
        return iter(self.children)


class _TreeBuilder(HTMLParser):
    def __init__(self) -> None:
        super().__init__(convert_charrefs=True)
        self.root = Node(NodeType.DOCUMENT)
        self._open = [self.root]

    def _append(self, node: Node) -> None:
        parent = self._open[-1]
        node.parent = parent
        parent.children.append(node)

    def handle_starttag(self, tag, attrs):
        node = Node(NodeType.ELEMENT, tag, [(k, v or "") for k, v in attrs])
        self._append(node)
        if tag not in _VOID_ELEMENTS:
            self._open.append(node)

    def handle_startendtag(self, tag, attrs):
        self._append(Node(NodeType.ELEMENT, tag, [(k, v or "") for k, v in attrs]))

    def handle_endtag(self, tag):
        depth = next(
            (
                i
                for i, node in reversed(list(enumerate(self._open)))
                if i > 0 and node.data == tag
            ),
            None,
        )
        if depth is not None:
            del self._open[depth:]

    def handle_data(self, data):
        parent = self._open[-1]
        if parent.children and parent.children[-1].type is NodeType.TEXT:
            parent.children[-1].data += data
        else:
            self._append(Node(NodeType.TEXT, data))

    def handle_comment(self, data):
        self._append(Node(NodeType.COMMENT, data))

    def handle_decl(self, decl):
        _, _, rest = decl.partition(" ")
        self._append(Node(NodeType.DOCTYPE, rest.strip()))


def parse(text: str | bytes) -> Node:
    """Parse an HTML document and return its document node."""
    if isinstance(text, bytes):
        text = text.decode("utf-8", errors="replace")
    builder = _TreeBuilder()
    builder.feed(text)
    builder.close()
    return builder.root


def for_each_node(
    n: Node,
    pre: Callable[[Node], None] | None = None,
    post: Callable[[Node], None] | None = None,
) -> None:
    """Call pre before and post after visiting the children of every node."""
    if pre is not None:
        pre(n)
    for child in n.children:
        for_each_node(child, pre, post)
    if post is not None:
        post(n)


def visit(n: Node) -> list[str]:
    """Return the href of every anchor element, in document order."""
    links: list[str] = []

    def collect(node: Node) -> None:
        if node.type is NodeType.ELEMENT and node.data == "a":
            links.extend(val for key, val in node.attr if key == "href")

    for_each_node(n, collect)
    return links


def outline(n: Node) -> list[list[str]]:
    """Return, for each element, the stack of tag names leading to it."""
    stacks: list[list[str]] = []

    def walk(stack: list[str], node: Node) -> None:
        if node.type is NodeType.ELEMENT:
            stack = stack + [node.data]
            stacks.append(stack)
        for child in node.children:
            walk(stack, child)

    walk([], n)
    return stacks


def outline_tags(n: Node) -> list[str]:
    """Return indented opening and closing tag lines for every element."""
    lines: list[str] = []
    depth = 0

    def start(node: Node) -> None:
        nonlocal depth
        if node.type is NodeType.ELEMENT:
            lines.append(f"{' ' * (depth * 2)}<{node.data}>")
            depth += 1

    def end(node: Node) -> None:
        nonlocal depth
        if node.type is NodeType.ELEMENT:
            depth -= 1
            lines.append(f"{' ' * (depth * 2)}</{node.data}>")

    for_each_node(n, start, end)
    return lines


def _title_texts(doc: Node) -> list[str]:
    found: list[str] = []

    def check(node: Node) -> None:
        if (
            node.type is NodeType.ELEMENT
            and node.data == "title"
            and node.first_child is not None
        ):
            found.append(node.first_child.data)

    for_each_node(doc, check)
    return found


def titles(doc: Node) -> list[str]:
    """Return the text of every non-empty title element."""
    return _title_texts(doc)


class _Bailout(Exception):
    pass


def sole_title(doc: Node) -> str:
    """Return the text of the only non-empty title element.

    Raises ValueError if there is none or more than one.
    """
    title = ""

    def check(node: Node) -> None:
        nonlocal title
        if (
            node.type is NodeType.ELEMENT
            and node.data == "title"
            and node.first_child is not None
        ):
            if title != "":
                raise _Bailout
            title = node.first_child.data

    try:
        for_each_node(doc, check)
    except _Bailout:
        raise ValueError("multiple title elements") from None
    if title == "":
        raise ValueError("no title element")
    return title


def _format_stack(stack: list[str]) -> str:
    return "[" + " ".join(stack) + "]"


def findlinks_main(argv: list[str] | None = None) -> int:
    """Print the links in an HTML document read from stdin."""
    try:
        doc = parse(sys.stdin.read())
    except (OSError, UnicodeError) as err:
        print(f"findlinks1: {err}", file=sys.stderr)
        return 1
    for link in visit(doc):
        print(link)
    return 0


def outline_main(argv: list[str] | None = None) -> int:
    """Print the element outline of each URL given, or of stdin without URLs."""
    urls = sys.argv[1:] if argv is None else argv
    if not urls:
        try:
            doc = parse(sys.stdin.read())
        except (OSError, UnicodeError) as err:
            print(f"outline: {err}", file=sys.stderr)
            return 1
        for stack in outline(doc):
            print(_format_stack(stack))
        return 0
    for url in urls:
        try:
            with urllib.request.urlopen(url) as resp:
                charset = resp.headers.get_content_charset() or "utf-8"
                body = resp.read().decode(charset, errors="replace")
        except (OSError, ValueError) as err:
            print(f"outline: {err}", file=sys.stderr)
            continue
        for line in outline_tags(parse(body)):
            print(line)
    return 0