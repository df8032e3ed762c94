"""Focus a single day: view bounds, reveal/fold state and focus predicates."""

from contextlib import nullcontext
from datetime import date, timedelta

from loguru import logger

from daytree.core.dates.codec import as_day_key, from_date, today_key
from daytree.core.tree.locator import find_node, locate_or_create
from daytree.models.calendar import CalendarKey
from daytree.models.node import Document, Node, ViewBounds
from daytree.protocols import QuickAction
from daytree.session import Session


def reveal(node: Node) -> None:
    """Unfold a node, its whole subtree and every enclosing heading."""
    for item in [node, *node.iter_nodes(), *node.ancestors()]:
        item.folded = False


def fold(node: Node) -> None:
    node.folded = True


def toggle_fold(node: Node) -> bool:
    """Flip a node's fold state and return the new state."""
    node.folded = not node.folded
    return node.folded


def focus_on_day(
    document: Document,
    day: str | CalendarKey,
    *,
    session: Session | None = None,
    quick_action: QuickAction | None = None,
) -> ViewBounds:
    """Locate or create a day node, reveal it and return bounds spanning its subtree.

    With a session, the edit runs on the whole document, then the session view becomes the
    returned bounds and the cursor moves to the day heading. The quick action (or the
    session's pending one) runs last.

    Raises:
        InvalidDateFormat: If ``day`` is malformed; the document is left untouched.
    """
    key = as_day_key(day)
    with session.widened(document) if session else nullcontext():
        node = locate_or_create(document, key)
        reveal(node)
    bounds = document.span_of(node)
    logger.debug("Focused on {}: lines {}-{}", key, bounds.start, bounds.end)

    if session is not None:
        session.view = bounds
        session.cursor = bounds.start
        quick_action = quick_action or session.quick_action
    if quick_action is not None:
        quick_action()
    return bounds


def focus_on_today(
    document: Document,
    *,
    today: date | None = None,
    session: Session | None = None,
    quick_action: QuickAction | None = None,
) -> ViewBounds:
    return focus_on_day(document, today_key(today), session=session, quick_action=quick_action)


def focus_relative(
    document: Document,
    days: int,
    *,
    today: date | None = None,
    session: Session | None = None,
) -> ViewBounds:
    """Focus the day ``days`` away from today (1 is tomorrow, -1 yesterday)."""
    target = (today or date.today()) + timedelta(days=days)
    return focus_on_day(document, from_date(target), session=session)


def is_focused_on(document: Document, view: ViewBounds | None, day: str | CalendarKey) -> bool:
    """True when the view spans exactly the existing node for ``day``. Never creates nodes."""
    if view is None:
        return False
    node = find_node(document, as_day_key(day))
    return node is not None and document.span_of(node) == view


def is_focused_on_today(
    document: Document, view: ViewBounds | None, *, today: date | None = None
) -> bool:
    return is_focused_on(document, view, today_key(today))


def is_focused_on_tomorrow(
    document: Document, view: ViewBounds | None, *, today: date | None = None
) -> bool:
    tomorrow = (today or date.today()) + timedelta(days=1)
    return is_focused_on(document, view, from_date(tomorrow))
