"""Advisory progress reporting for long fills."""
from __future__ import annotations

from typing import Callable, List


class ProgressReporter:
    """Simple pub/sub sink for human-readable status strings.

    Messages are echoed to stdout with ``prefix`` unless ``echo`` is off,
    forwarded to every subscriber and kept in :attr:`messages`.
    """

    def __init__(self, prefix: str = "[build]", *, echo: bool = True) -> None:
        self.prefix = prefix
        self.echo = echo
        self.messages: List[str] = []
        self._subs: List[Callable[[str], None]] = []

    def subscribe(self, cb: Callable[[str], None]) -> None:
        self._subs.append(cb)

    def report(self, message: str) -> None:
        self.messages.append(message)
        if self.echo:
            print(f"{self.prefix} {message}")
        for cb in self._subs:
            cb(message)


def quiet(prefix: str = "[build]") -> ProgressReporter:
    """Reporter that only records messages."""
    return ProgressReporter(prefix, echo=False)
