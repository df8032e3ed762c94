"""Read outline documents from disk and write them back when they changed."""

from collections.abc import Collection
from pathlib import Path

from loguru import logger

from daytree.config import TODO_KEYWORDS
from daytree.core.outline.reader import parse_document
from daytree.models.node import Document


class DocumentStore:
    """Load and save documents.

    - A missing file reads as an empty document; it is created on first save.
    - Saving does not touch the file if its text is unchanged.
    - In dry-run mode nothing is written, only logged.
    """

    def __init__(self, *, dry_run: bool = False, keywords: Collection[str] = TODO_KEYWORDS) -> None:
        self.dry_run = dry_run
        self.keywords = keywords
        # Text as last read or written, by resolved path.
        self._known: dict[Path, str] = {}

    def read(self, path: str | Path) -> Document:
        path = Path(path).expanduser()
        try:
            text = path.read_text(encoding="utf-8")
        except FileNotFoundError:
            logger.debug("{} does not exist yet, starting empty", path)
            return parse_document("", path=path, keywords=self.keywords)
        self._known[path.resolve()] = text
        return parse_document(text, path=path, keywords=self.keywords)

    def write(self, document: Document, path: str | Path | None = None) -> bool:
        """Write the document, returning True if the file changed.

        Raises:
            ValueError: If no path is given and the document has none.
        """
        target = Path(path).expanduser() if path is not None else document.path
        if target is None:
            msg = "Document has no path to write to"
            raise ValueError(msg)

        text = document.render()
        resolved = target.resolve()
        previous = self._known.get(resolved)
        if previous is None and target.exists():
            previous = target.read_text(encoding="utf-8")
        if previous == text:
            logger.debug("{} unchanged", target)
            return False

        action = "update" if previous is not None else "create"
        if self.dry_run:
            logger.info("dry-run: would {} {}", action, target)
            return True

        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(text, encoding="utf-8")
        self._known[resolved] = text
        logger.info("Wrote ({}) {}", action, target)
        return True
