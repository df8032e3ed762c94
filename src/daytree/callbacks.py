"""Ordered callback registries."""

from collections.abc import Callable, Iterator
from dataclasses import dataclass, field
from typing import Generic, ParamSpec

from loguru import logger

P = ParamSpec("P")


@dataclass
class CallbackRegistry(Generic[P]):
    """Callbacks run in ascending ``order``; equal orders run in registration order.

    Exceptions raised by a callback propagate to the caller of ``run``, and the remaining
    callbacks are skipped.
    """

    name: str
    _entries: list[tuple[int, int, Callable[P, object]]] = field(default_factory=list)
    _counter: int = 0

    def register(self, callback: Callable[P, object], *, order: int = 0) -> Callable[P, object]:
        self._entries.append((order, self._counter, callback))
        self._counter += 1
        self._entries.sort(key=lambda entry: entry[:2])
        return callback

    def unregister(self, callback: Callable[P, object]) -> None:
        self._entries = [entry for entry in self._entries if entry[2] is not callback]

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[Callable[P, object]]:
        return iter([entry[2] for entry in self._entries])

    def run(self, *args: P.args, **kwargs: P.kwargs) -> None:
        for _, _, callback in list(self._entries):
            logger.debug("Running {} callback {!r}", self.name, callback)
            callback(*args, **kwargs)
