"""Helpers for server tests."""

import queue
from collections.abc import Iterator


class ControlledSource:
    """Stands in for an open NMEA device; yields lines put on its queue.

    Iteration blocks until a line is available and stops at ``None``.
    """

    def __init__(self) -> None:
        self.line_queue: queue.Queue[str | None] = queue.Queue()

    def __enter__(self) -> "ControlledSource":
        return self

    def __exit__(self, *_: object) -> None:
        pass

    def __iter__(self) -> Iterator[str]:
        while True:
            line = self.line_queue.get()
            if line is None:
                break
            yield line

    def send(self, *lines: str) -> None:
        for line in lines:
            self.line_queue.put(line + "\r\n")
