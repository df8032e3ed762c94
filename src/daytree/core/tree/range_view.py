"""View bounds over several days: arbitrary ranges, weeks and months."""

from contextlib import nullcontext
from datetime import date, timedelta

from loguru import logger

from daytree.config import WEEK_START
from daytree.core.dates.codec import (
    enumerate_inclusive,
    format_key,
    from_date,
    parse_key,
    today_key,
    week_start_for,
)
from daytree.core.tree.focus import reveal
from daytree.core.tree.locator import locate_or_create
from daytree.models.calendar import CalendarKey
from daytree.models.node import Document, Node, ViewBounds
from daytree.session import Session


def show_range(
    document: Document,
    start: str,
    end: str,
    *,
    session: Session | None = None,
) -> ViewBounds:
    """Locate or create every day from start to end and return bounds covering them.

    The bounds run from the first day's heading to the end of the last day's subtree.
    Dates are validated before anything is created.

    Raises:
        InvalidDateFormat: If either date is malformed.
        RangeOrderingViolation: If start is after end.
    """
    dates = enumerate_inclusive(start, end)

    nodes: list[Node] = []
    with session.widened(document) if session else nullcontext():
        for day in dates:
            node = locate_or_create(document, parse_key(day))
            reveal(node)
            nodes.append(node)

    bounds = ViewBounds(document.span_of(nodes[0]).start, document.span_of(nodes[-1]).end)
    logger.debug(
        "Showing {} day(s) {}..{}: lines {}-{}", len(dates), start, end, bounds.start, bounds.end
    )
    if session is not None:
        session.view = bounds
        session.cursor = bounds.start
    return bounds


def show_week(
    document: Document,
    *,
    today: date | None = None,
    week_start: int = WEEK_START,
    session: Session | None = None,
) -> ViewBounds:
    """Show the seven days of the week containing today."""
    first = week_start_for(today or date.today(), week_start)
    last = first + timedelta(days=6)
    return show_range(
        document, format_key(from_date(first)), format_key(from_date(last)), session=session
    )


def show_month(
    document: Document,
    *,
    today: date | None = None,
    session: Session | None = None,
) -> ViewBounds:
    """Show the whole current month subtree, whichever days it holds."""
    current = today_key(today)
    with session.widened(document) if session else nullcontext():
        node = locate_or_create(document, CalendarKey(current.year, current.month))
        reveal(node)
    bounds = document.span_of(node)
    if session is not None:
        session.view = bounds
        session.cursor = bounds.start
    return bounds
