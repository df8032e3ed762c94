"""Find or create year, month and day nodes in chronological order."""

from collections.abc import Iterator

from loguru import logger

from daytree.core.outline.heading import calendar_heading
from daytree.models.calendar import CalendarKey
from daytree.models.node import Document, Node, NodeKind

_KIND_BY_LEVEL = {1: NodeKind.YEAR, 2: NodeKind.MONTH, 3: NodeKind.DAY}


def _calendar_children(
    container: Document | Node, level: int
) -> Iterator[tuple[int, CalendarKey, Node]]:
    """Yield (index, key, child) for the calendar children expected at this level."""
    kind = _KIND_BY_LEVEL[level]
    for index, child in enumerate(container.children):
        if child.kind is kind and child.key is not None:
            yield index, child.key, child


def find_node(document: Document, key: CalendarKey) -> Node | None:
    """Return the node for a year, month or day key without creating anything."""
    container: Document | Node = document
    if key.parent is not None:
        parent = find_node(document, key.parent)
        if parent is None:
            return None
        container = parent
    for _, child_key, child in _calendar_children(container, key.level):
        if child_key == key:
            return child
    return None


def locate_or_create(document: Document, key: CalendarKey) -> Node:
    """Return the node for a year, month or day key, creating missing levels.

    Calendar siblings are scanned in document order: an equal key is returned as is,
    otherwise a new node is inserted before the first later sibling, or appended after
    the last child when there is none. Repeated calls return the same node.
    """
    container: Document | Node = document
    if key.parent is not None:
        container = locate_or_create(document, key.parent)

    insert_at = len(container.children)
    for index, child_key, child in _calendar_children(container, key.level):
        if child_key == key:
            return child
        if child_key > key:
            insert_at = index
            break

    node = Node(level=key.level, heading=calendar_heading(key))
    container.insert_child(insert_at, node)
    logger.debug("Created {} node {} at position {}", node.kind.value, key, insert_at)
    return node


def iter_days(document: Document) -> Iterator[Node]:
    """Yield every day node of the date tree in document order."""
    for _, _, year in _calendar_children(document, 1):
        for _, _, month in _calendar_children(year, 2):
            for _, _, day in _calendar_children(month, 3):
                yield day


def adjacent_day(document: Document, key: CalendarKey, step: int) -> Node | None:
    """Return the nearest existing day before (step < 0) or after (step > 0) a date."""
    if step == 0:
        msg = "step must be negative or positive"
        raise ValueError(msg)
    keyed = [(day.key, day) for day in iter_days(document) if day.key is not None]
    if step > 0:
        later = [item for item in keyed if item[0] > key]
        return min(later, key=lambda item: item[0])[1] if later else None
    earlier = [item for item in keyed if item[0] < key]
    return max(earlier, key=lambda item: item[0])[1] if earlier else None
