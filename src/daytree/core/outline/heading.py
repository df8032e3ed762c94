"""Heading grammar: classify heading labels into year, month, day or content."""

import calendar
import re
from collections.abc import Collection
from datetime import date

from daytree.config import TODO_KEYWORDS
from daytree.models.calendar import CalendarKey
from daytree.models.node import Heading, Node, NodeKind

_PRIORITY_RE = re.compile(r"\[#([A-Za-z0-9])\]\s*")
_TAGS_RE = re.compile(r"\s+(:[\w@#%:]+:)\s*$")
_YEAR_RE = re.compile(r"([0-9]{4})")
_MONTH_RE = re.compile(r"([0-9]{4})-([0-9]{2})(?:\s+(.*))?")
_DAY_RE = re.compile(r"([0-9]{4})-([0-9]{2})-([0-9]{2})(?:\s+(.*))?")


def _split_tags(label: str) -> tuple[str, tuple[str, ...]]:
    match = _TAGS_RE.search(label)
    if match is None:
        return label, ()
    tags = tuple(tag for tag in match.group(1).split(":") if tag)
    return label[: match.start()], tags


def _calendar_key(level: int, label: str) -> tuple[CalendarKey, str] | None:
    """Return the key and free-text remainder if the label is a calendar label for its level."""
    if level == 1:
        match = _YEAR_RE.fullmatch(label)
        return (CalendarKey(int(match.group(1))), "") if match else None
    if level == 2:
        match = _MONTH_RE.fullmatch(label)
        if match is None or not 1 <= int(match.group(2)) <= 12:
            return None
        return CalendarKey(int(match.group(1)), int(match.group(2))), match.group(3) or ""
    if level == 3:
        match = _DAY_RE.fullmatch(label)
        if match is None:
            return None
        year, month, day = (int(part) for part in match.group(1, 2, 3))
        try:
            date(year, month, day)
        except ValueError:
            return None
        return CalendarKey(year, month, day), match.group(4) or ""
    return None


_KIND_BY_LEVEL = {1: NodeKind.YEAR, 2: NodeKind.MONTH, 3: NodeKind.DAY}


def parse_heading(
    level: int, text: str, keywords: Collection[str] = TODO_KEYWORDS
) -> Heading:
    """Parse a heading label (the text after the stars and one space).

    Grammar: ``[KEYWORD] [[#P]] label [:tag:tag:]``. The label is a calendar key when it
    matches the form expected at this level (``YYYY``, ``YYYY-MM ...``, ``YYYY-MM-DD ...``).
    """
    label, tags = _split_tags(text.strip())

    keyword: str | None = None
    words = label.split(None, 1)
    if words and words[0] in keywords:
        keyword = words[0]
        label = words[1] if len(words) > 1 else ""

    priority: str | None = None
    match = _PRIORITY_RE.match(label)
    if match:
        priority = match.group(1)
        label = label[match.end() :]

    label = label.strip()
    parsed = _calendar_key(level, label)
    if parsed is None:
        return Heading(text=text, keyword=keyword, priority=priority, title=label, tags=tags)

    key, remainder = parsed
    return Heading(
        text=text,
        kind=_KIND_BY_LEVEL[level],
        key=key,
        keyword=keyword,
        priority=priority,
        title=remainder,
        tags=tags,
    )


def calendar_heading(key: CalendarKey) -> Heading:
    """Build the canonical heading for a new year, month or day node."""
    if key.level == 1:
        text = str(key)
    elif key.level == 2:
        text = f"{key} {calendar.month_name[key.month]}"
    else:
        weekday = date(key.year, key.month, key.day).weekday()
        text = f"{key} {calendar.day_name[weekday]}"
    return parse_heading(key.level, text, keywords=())


def relevel_subtree(
    node: Node, level: int, keywords: Collection[str] = TODO_KEYWORDS
) -> None:
    """Move a subtree to a new level, keeping the relative depth of its descendants.

    Headings are re-classified, since kind depends on level.
    """
    delta = level - node.level
    if delta == 0:
        return
    for item in [node, *node.iter_nodes()]:
        item.level += delta
        item.heading = parse_heading(item.level, item.heading.text, keywords)
