"""Parse outline text into a Document tree."""

import re
from collections.abc import Collection
from pathlib import Path

from daytree.config import TODO_KEYWORDS
from daytree.core.outline.heading import parse_heading
from daytree.models.node import Document, Node

_HEADING_RE = re.compile(r"(\*+) (.*)")


def parse_document(
    text: str,
    *,
    path: Path | None = None,
    keywords: Collection[str] = TODO_KEYWORDS,
) -> Document:
    """Parse outline text into a Document.

    A heading is a line starting with one or more ``*`` followed by a space. Each heading
    owns the lines up to the next heading as its body, and every following heading with a
    greater level as a descendant. ``Document.render()`` reproduces the text exactly.

    Args:
        text: Document text.
        path: Where the document was read from, if anywhere.
        keywords: Heading keywords (``TODO``, ``DONE``, ...) allowed before a date.
    """
    document = Document(path=path, trailing_newline=text.endswith("\n") or not text)

    # Open headings, outermost first
    stack: list[Node] = []
    # Only "\n" ends a line; str.splitlines() would also split on form feeds and U+2028
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    for line in lines:
        match = _HEADING_RE.fullmatch(line)
        if match is None:
            if stack:
                stack[-1].body.append(line)
            else:
                document.preamble.append(line)
            continue

        level = len(match.group(1))
        node = Node(level=level, heading=parse_heading(level, match.group(2), keywords))
        while stack and stack[-1].level >= level:
            stack.pop()
        (stack[-1] if stack else document).append_child(node)
        stack.append(node)

    return document
