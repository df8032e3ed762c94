"""Year/month/day date trees inside outline documents."""

from daytree.core.dates.codec import (
    enumerate_inclusive,
    format_key,
    parse_key,
    parse_period,
    shift,
)
from daytree.core.files.router import RegisteredFile, resolve_active_file
from daytree.core.outline.reader import parse_document
from daytree.core.refile.engine import RefileEngine
from daytree.core.tree.focus import focus_on_day, is_focused_on
from daytree.core.tree.locator import find_node, locate_or_create
from daytree.core.tree.range_view import show_month, show_range, show_week
from daytree.errors import (
    DaytreeError,
    InvalidDateFormat,
    InvalidRefileSource,
    InvalidSeriesLength,
    RangeOrderingViolation,
    UnrecognizedPeriodUnit,
)
from daytree.models.calendar import CalendarKey, Period, TimeUnit
from daytree.models.node import Document, Node, NodeKind, ViewBounds
from daytree.session import Session
from daytree.store import DocumentStore

__all__ = [
    "CalendarKey",
    "DaytreeError",
    "Document",
    "DocumentStore",
    "InvalidDateFormat",
    "InvalidRefileSource",
    "InvalidSeriesLength",
    "Node",
    "NodeKind",
    "Period",
    "RangeOrderingViolation",
    "RefileEngine",
    "RegisteredFile",
    "Session",
    "TimeUnit",
    "UnrecognizedPeriodUnit",
    "ViewBounds",
    "enumerate_inclusive",
    "find_node",
    "focus_on_day",
    "format_key",
    "is_focused_on",
    "locate_or_create",
    "parse_document",
    "parse_key",
    "parse_period",
    "resolve_active_file",
    "shift",
    "show_month",
    "show_range",
    "show_week",
]
