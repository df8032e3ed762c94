"""Move or copy subtrees under day nodes, once or on a repeating schedule."""

from collections.abc import Collection
from contextlib import nullcontext

from loguru import logger

from daytree.callbacks import CallbackRegistry
from daytree.config import TODO_KEYWORDS
from daytree.core.dates.codec import (
    as_day_key,
    format_key,
    parse_key,
    parse_period,
    shift_by_period,
)
from daytree.core.outline.heading import relevel_subtree
from daytree.core.tree.locator import locate_or_create
from daytree.errors import InvalidRefileSource, InvalidSeriesLength, RangeOrderingViolation
from daytree.models.calendar import CalendarKey, Period
from daytree.models.node import Document, Node, NodeKind
from daytree.session import Session


class RefileEngine:
    """Relocate content subtrees into the date tree.

    ``before_placement`` and ``after_placement`` callbacks are called with the target
    date (``YYYY-MM-DD``) around every single placement, including each copy of a series.
    """

    def __init__(self, *, keywords: Collection[str] = TODO_KEYWORDS) -> None:
        self.keywords = keywords
        self.before_placement: CallbackRegistry[[str]] = CallbackRegistry("before-placement")
        self.after_placement: CallbackRegistry[[str]] = CallbackRegistry("after-placement")

    def resolve_source(self, document: Document, source: Node | int) -> Node:
        """Return the subtree to refile: a node, or the heading enclosing a cursor line.

        Raises:
            InvalidRefileSource: If there is no such heading, it belongs to another document,
                or it is a year, month or day node.
        """
        if isinstance(source, Node):
            if not document.contains(source):
                msg = f"Heading {source.heading.text!r} is not part of this document"
                raise InvalidRefileSource(msg)
            node = source
        else:
            found = document.node_at_line(source)
            if found is None:
                msg = f"No heading encloses line {source}"
                raise InvalidRefileSource(msg)
            node = found

        if node.kind.is_calendar:
            msg = f"Cannot refile the {node.kind.value} node {node.key}"
            raise InvalidRefileSource(msg)
        return node

    def _place(self, document: Document, node: Node, key: CalendarKey, *, keep: bool) -> Node:
        target = format_key(key)
        self.before_placement.run(target)

        captured = node.copy() if keep else node
        if not keep:
            node.detach()
        day = locate_or_create(document, key)
        relevel_subtree(captured, day.level + 1, self.keywords)
        day.append_child(captured)
        logger.debug(
            "{} {!r} under {}", "Copied" if keep else "Moved", captured.heading.text, target
        )

        self.after_placement.run(target)
        return captured

    def refile_one(
        self,
        document: Document,
        source: Node | int,
        target_date: str | CalendarKey,
        *,
        keep_original: bool = False,
        session: Session | None = None,
    ) -> Node:
        """Move (or copy, with keep_original) a subtree to the end of a day's content.

        Returns the placed node: the original when moved, the copy otherwise.
        """
        node = self.resolve_source(document, source)
        key = as_day_key(target_date)
        with session.widened(document) if session else nullcontext():
            return self._place(document, node, key, keep=keep_original)

    def refile_series(
        self,
        document: Document,
        source: Node | int,
        start_date: str | CalendarKey,
        *,
        period: str | Period = "1d",
        count: int | None = None,
        until: str | CalendarKey | None = None,
        keep_original: bool = False,
        session: Session | None = None,
    ) -> list[str]:
        """Copy a subtree to a series of dates, then remove the original unless kept.

        Dates start at ``start_date`` and advance by ``period``; exactly one of ``count``
        (number of copies) or ``until`` (inclusive last date) ends the series. When the
        subtree already sits under ``start_date``, the series starts one period later.
        All arguments are validated before the document is touched.

        Returns:
            The dates a copy was placed under, in order.

        Raises:
            InvalidSeriesLength: If neither or both of count and until are given, or count
                is negative.
            UnrecognizedPeriodUnit: If the period is malformed.
            InvalidDateFormat: If a date is malformed.
            RangeOrderingViolation: If ``until`` is given and the period does not move forward,
                or ``until`` is before the first date.
            InvalidRefileSource: See ``resolve_source``.
        """
        step = parse_period(period) if isinstance(period, str) else period
        if (count is None) == (until is None):
            msg = "Give exactly one of count or until"
            raise InvalidSeriesLength(msg)
        if count is not None and count < 0:
            msg = f"count must not be negative, got {count}"
            raise InvalidSeriesLength(msg)
        start = as_day_key(start_date)
        last = format_key(as_day_key(until)) if until is not None else None
        if last is not None and step.amount <= 0:
            msg = f"Period {step} never reaches {last}"
            raise RangeOrderingViolation(msg)
        node = self.resolve_source(document, source)

        current = format_key(start)
        home = node.enclosing(NodeKind.DAY)
        if home is not None and home.key == start:
            current = shift_by_period(current, step)
        if last is not None and current > last:
            msg = f"Series starts at {current}, after its end {last}"
            raise RangeOrderingViolation(msg)

        placed: list[str] = []
        with session.widened(document) if session else nullcontext():
            while count is None or len(placed) < count:
                if last is not None and current > last:
                    break
                self._place(document, node, parse_key(current), keep=True)
                placed.append(current)
                current = shift_by_period(current, step)

            if not keep_original:
                node.detach()

        logger.info(
            "Placed {} cop{} of {!r} every {}{}",
            len(placed),
            "y" if len(placed) == 1 else "ies",
            node.heading.text,
            step,
            "" if keep_original else ", original removed",
        )
        return placed
