"""Callback protocols consumed by the date tree engine."""

from typing import Protocol, runtime_checkable


@runtime_checkable
class PlacementCallback(Protocol):
    """Called with the ``YYYY-MM-DD`` date a subtree is being placed under."""

    def __call__(self, target_date: str) -> None: ...


@runtime_checkable
class QuickAction(Protocol):
    """Run right after a day has been focused, with the cursor on its heading."""

    def __call__(self) -> None: ...
