"""Shared test fixtures."""

import pytest

from daytree.core.outline.reader import parse_document
from daytree.models.node import Document

# Line numbers (0-based) are referenced by the tests.
JOURNAL_TEXT = """\
#+TITLE: Journal
* 2025
** 2025-01 January
*** 2025-01-01 Wednesday
New year notes
**** TODO Call mom :family:
Some detail
***** Sub point
*** 2025-01-15 Wednesday
** 2025-03 March
*** 2025-03-03 Monday
* Inbox
** Buy milk
"""


@pytest.fixture
def journal() -> Document:
    """A document with a small date tree followed by an inbox."""
    return parse_document(JOURNAL_TEXT)


@pytest.fixture
def empty_document() -> Document:
    return parse_document("")
