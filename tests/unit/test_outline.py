"""Tests for the heading grammar and document parsing."""

from daytree.core.outline.heading import calendar_heading, parse_heading, relevel_subtree
from daytree.core.outline.reader import parse_document
from daytree.models.calendar import CalendarKey
from daytree.models.node import Document, NodeKind, ViewBounds
from tests.unit.conftest import JOURNAL_TEXT


def test_year_heading() -> None:
    heading = parse_heading(1, "2025")

    assert heading.kind is NodeKind.YEAR
    assert heading.key == CalendarKey(2025)


def test_year_heading_with_keyword_priority_and_tags() -> None:
    heading = parse_heading(1, "TODO [#A] 2025 :archive:old:")

    assert heading.kind is NodeKind.YEAR
    assert heading.keyword == "TODO"
    assert heading.priority == "A"
    assert heading.tags == ("archive", "old")


def test_year_with_extra_text_is_content() -> None:
    assert parse_heading(1, "2025 plans").kind is NodeKind.CONTENT


def test_month_heading_keeps_free_text() -> None:
    heading = parse_heading(2, "2025-07 July")

    assert heading.kind is NodeKind.MONTH
    assert heading.key == CalendarKey(2025, 7)
    assert heading.title == "July"


def test_invalid_month_is_content() -> None:
    assert parse_heading(2, "2025-13 Smarch").kind is NodeKind.CONTENT


def test_day_heading_with_tags() -> None:
    heading = parse_heading(3, "2025-07-29 Tuesday :work:")

    assert heading.kind is NodeKind.DAY
    assert heading.key == CalendarKey(2025, 7, 29)
    assert heading.title == "Tuesday"
    assert heading.tags == ("work",)


def test_date_at_wrong_level_is_content() -> None:
    assert parse_heading(2, "2025-07-29 Tuesday").kind is NodeKind.CONTENT
    assert parse_heading(4, "2025-07-29 Tuesday").kind is NodeKind.CONTENT
    assert parse_heading(3, "2025-02-30 Nope").kind is NodeKind.CONTENT


def test_non_ascii_digits_are_content() -> None:
    assert parse_heading(1, "２０２５").kind is NodeKind.CONTENT
    assert parse_heading(3, "２０２５-01-01 Wed").kind is NodeKind.CONTENT


def test_content_heading_strips_tokens_from_title() -> None:
    heading = parse_heading(4, "DONE [#B] Call mom :family:")

    assert heading.kind is NodeKind.CONTENT
    assert heading.keyword == "DONE"
    assert heading.title == "Call mom"
    assert heading.text == "DONE [#B] Call mom :family:"


def test_calendar_heading_names_month_and_weekday() -> None:
    assert calendar_heading(CalendarKey(2025)).text == "2025"
    assert calendar_heading(CalendarKey(2025, 7)).text == "2025-07 July"
    assert calendar_heading(CalendarKey(2025, 7, 29)).text == "2025-07-29 Tuesday"


def test_parse_then_render_is_identical() -> None:
    assert parse_document(JOURNAL_TEXT).render() == JOURNAL_TEXT


def test_render_keeps_missing_trailing_newline() -> None:
    text = "* 2025\nbody"
    assert parse_document(text).render() == text


def test_only_newline_separates_lines() -> None:
    text = "* Inbox\nbody\x0cmore\nnext\u2028* Fake heading\n"
    document = parse_document(text)

    assert document.render() == text
    assert len(document.children) == 1
    assert document.children[0].body == ["body\x0cmore", "next\u2028* Fake heading"]


def test_blank_lines_survive_render() -> None:
    text = "* Inbox\n\n\n"
    assert parse_document(text).render() == text


def test_empty_document_renders_empty() -> None:
    assert parse_document("").render() == ""


def test_star_without_space_is_body_text() -> None:
    document = parse_document("* Notes\n*bold* text\n")

    assert len(document.children) == 1
    assert document.children[0].body == ["*bold* text"]


def test_document_structure(journal: Document) -> None:
    assert journal.preamble == ["#+TITLE: Journal"]
    year, inbox = journal.children
    assert year.kind is NodeKind.YEAR
    assert inbox.kind is NodeKind.CONTENT
    assert [m.key for m in year.children] == [CalendarKey(2025, 1), CalendarKey(2025, 3)]
    first_day = year.children[0].children[0]
    assert first_day.body == ["New year notes"]
    assert first_day.children[0].heading.title == "Call mom"


def test_span_of_day_covers_its_subtree(journal: Document) -> None:
    day = journal.children[0].children[0].children[0]

    assert journal.span_of(day) == ViewBounds(3, 8)


def test_node_at_line_finds_innermost_heading(journal: Document) -> None:
    assert journal.node_at_line(0) is None
    assert journal.node_at_line(6).heading.title == "Call mom"  # type: ignore[union-attr]
    assert journal.node_at_line(7).heading.title == "Sub point"  # type: ignore[union-attr]
    assert journal.node_at_line(12).heading.title == "Buy milk"  # type: ignore[union-attr]
    assert journal.node_at_line(13) is None


def test_copy_is_deep_and_detached(journal: Document) -> None:
    original = journal.node_at_line(5)
    assert original is not None

    clone = original.copy()
    clone.children[0].body.append("changed")

    assert clone.parent is None
    assert clone.children[0] is not original.children[0]
    assert original.children[0].body == []
    assert clone.lines()[0] == original.lines()[0]


def test_relevel_reclassifies_descendants() -> None:
    document = parse_document("* Notes\n** 2025-01 January\n*** 2025-01-01 Wednesday\n")
    notes = document.children[0]
    month = notes.children[0]
    assert month.kind is NodeKind.MONTH

    relevel_subtree(notes, 4)

    assert notes.level == 4
    assert month.level == 5
    assert month.kind is NodeKind.CONTENT
    assert month.heading_line == "***** 2025-01 January"
