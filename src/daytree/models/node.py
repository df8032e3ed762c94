"""Domain models for outline documents and their date trees."""

from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

from daytree.models.calendar import CalendarKey


class NodeKind(Enum):
    """Classification of a heading."""

    YEAR = "year"
    MONTH = "month"
    DAY = "day"
    CONTENT = "content"

    @property
    def is_calendar(self) -> bool:
        return self is not NodeKind.CONTENT


@dataclass(frozen=True)
class Heading:
    """A parsed heading label (everything after the stars and one space)."""

    text: str
    kind: NodeKind = NodeKind.CONTENT
    key: CalendarKey | None = None
    keyword: str | None = None
    priority: str | None = None
    title: str = ""
    tags: tuple[str, ...] = ()


@dataclass(frozen=True)
class ViewBounds:
    """Half-open span of 0-based line indices exposed to a caller."""

    start: int
    end: int

    def __contains__(self, line: object) -> bool:
        return isinstance(line, int) and self.start <= line < self.end

    def __len__(self) -> int:
        return self.end - self.start


class _Branch:
    """Shared child-list handling for nodes and documents."""

    children: list["Node"]

    def insert_child(self, index: int, node: "Node") -> None:
        node.parent = self  # type: ignore[assignment]
        self.children.insert(index, node)

    def append_child(self, node: "Node") -> None:
        node.parent = self  # type: ignore[assignment]
        self.children.append(node)

    def iter_nodes(self) -> Iterator["Node"]:
        """Yield all descendants in document (pre-)order."""
        for child in self.children:
            yield child
            yield from child.iter_nodes()


@dataclass(eq=False)
class Node(_Branch):
    """A heading with its body lines and nested sub-headings.

    Nodes compare by identity: the same heading located twice is the same object.
    """

    level: int
    heading: Heading
    body: list[str] = field(default_factory=list)
    children: list["Node"] = field(default_factory=list)
    folded: bool = False
    parent: "Node | Document | None" = field(default=None, repr=False)

    @property
    def kind(self) -> NodeKind:
        return self.heading.kind

    @property
    def key(self) -> CalendarKey | None:
        return self.heading.key

    @property
    def heading_line(self) -> str:
        return "*" * self.level + " " + self.heading.text

    def lines(self) -> list[str]:
        out = [self.heading_line, *self.body]
        for child in self.children:
            out.extend(child.lines())
        return out

    def line_count(self) -> int:
        return 1 + len(self.body) + sum(child.line_count() for child in self.children)

    def ancestors(self) -> Iterator["Node"]:
        """Yield enclosing nodes, nearest first."""
        parent = self.parent
        while isinstance(parent, Node):
            yield parent
            parent = parent.parent

    def enclosing(self, kind: NodeKind) -> "Node | None":
        """Return this node or the nearest ancestor of the given kind."""
        if self.kind is kind:
            return self
        return next((a for a in self.ancestors() if a.kind is kind), None)

    def detach(self) -> None:
        """Remove this node (and its subtree) from its parent."""
        if self.parent is None:
            return
        self.parent.children.remove(self)
        self.parent = None

    def copy(self) -> "Node":
        """Deep copy of the subtree, detached from any parent."""
        clone = Node(
            level=self.level,
            heading=self.heading,
            body=list(self.body),
            folded=self.folded,
        )
        for child in self.children:
            clone.append_child(child.copy())
        return clone


@dataclass(eq=False)
class Document(_Branch):
    """An outline document: preamble text followed by a forest of headings."""

    preamble: list[str] = field(default_factory=list)
    children: list[Node] = field(default_factory=list)
    path: Path | None = None
    trailing_newline: bool = True

    def lines(self) -> list[str]:
        out = list(self.preamble)
        for child in self.children:
            out.extend(child.lines())
        return out

    def render(self) -> str:
        lines = self.lines()
        if not lines:
            return ""
        return "\n".join(lines) + ("\n" if self.trailing_newline else "")

    def line_count(self) -> int:
        return len(self.preamble) + sum(child.line_count() for child in self.children)

    def contains(self, node: Node) -> bool:
        root: Node | Document | None = node
        while isinstance(root, Node):
            root = root.parent
        return root is self

    def heading_line_of(self, node: Node) -> int:
        """Return the line index of a node's heading."""
        line = len(self.preamble)
        for candidate in self.iter_nodes():
            if candidate is node:
                return line
            line += 1 + len(candidate.body)
        msg = f"Node {node.heading.text!r} is not part of this document"
        raise ValueError(msg)

    def span_of(self, node: Node) -> ViewBounds:
        """Bounds of a node's heading through the end of its subtree."""
        start = self.heading_line_of(node)
        return ViewBounds(start, start + node.line_count())

    def node_at_line(self, line: int) -> Node | None:
        """Return the innermost node whose region contains the line.

        Lines in the preamble (above the first heading) have no enclosing node.
        """
        if line < 0:
            return None
        found: Node | None = None
        position = len(self.preamble)
        for candidate in self.iter_nodes():
            if position > line:
                break
            found = candidate
            position += 1 + len(candidate.body)
        if found is not None and line >= self.line_count():
            return None
        return found

    def slice(self, bounds: ViewBounds) -> list[str]:
        return self.lines()[bounds.start : bounds.end]
