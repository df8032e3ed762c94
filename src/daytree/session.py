"""Per-caller session state: view, cursor, active file and scoped overrides."""

from collections.abc import Iterator, Sequence
from contextlib import contextmanager
from dataclasses import dataclass
from pathlib import Path

from loguru import logger

from daytree.core.files.router import RegisteredFile, resolve_active_file
from daytree.models.node import Document, ViewBounds
from daytree.protocols import QuickAction


@dataclass
class Session:
    """State owned by one caller, threaded explicitly through operations.

    ``view`` is None when the whole document is exposed. ``cursor`` is a 0-based line index.
    """

    view: ViewBounds | None = None
    cursor: int = 0
    active_file: Path | None = None
    file_override: Path | None = None
    quick_action: QuickAction | None = None

    @contextmanager
    def widened(self, document: Document) -> Iterator[None]:
        """Expose the whole document for a structural edit, then restore view and cursor.

        The cursor and the start of the view are restored relative to the headings that
        enclosed them, so lines inserted above do not leave them on unrelated text. The view
        keeps its length, cut at the end of the document.
        """
        saved_view, saved_cursor = self.view, self.cursor
        anchor = document.node_at_line(saved_cursor)
        offset = saved_cursor - document.heading_line_of(anchor) if anchor else 0
        view_anchor = document.node_at_line(saved_view.start) if saved_view is not None else None
        view_offset = (
            saved_view.start - document.heading_line_of(view_anchor)
            if saved_view is not None and view_anchor is not None
            else 0
        )
        self.view = None
        try:
            yield
        finally:
            total = document.line_count()
            self.view = saved_view
            if saved_view is not None and view_anchor is not None:
                if document.contains(view_anchor):
                    start = document.heading_line_of(view_anchor) + view_offset
                else:
                    start = saved_view.start
                start = min(start, total)
                self.view = ViewBounds(start, min(start + len(saved_view), total))
            if anchor is not None and document.contains(anchor):
                self.cursor = document.heading_line_of(anchor) + offset
            else:
                self.cursor = min(saved_cursor, max(total - 1, 0))

    @contextmanager
    def override_file(self, path: Path | None) -> Iterator[None]:
        """Make ``path`` the active document for the duration of the block."""
        saved = self.file_override
        self.file_override = path
        try:
            yield
        finally:
            self.file_override = saved

    @contextmanager
    def pending_quick_action(self, action: QuickAction | None) -> Iterator[None]:
        """Run ``action`` after the next focus within the block."""
        saved = self.quick_action
        self.quick_action = action
        try:
            yield
        finally:
            self.quick_action = saved

    def resolve_file(self, registry: Sequence[RegisteredFile], *, default_path: Path) -> Path:
        path = resolve_active_file(
            registry, self.active_file, self.file_override, default_path=default_path
        )
        logger.debug("Active document: {}", path)
        return path
