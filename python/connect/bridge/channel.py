"""Message channels from the host bridge to the embedding shell."""

from __future__ import annotations

import queue
from typing import Any, Callable, Protocol

Message = dict[str, Any]


class Channel(Protocol):
    """Anything that accepts a structured message, fire-and-forget."""

    def post(self, message: Message) -> None: ...


class CallbackChannel:
    """Delivers each message synchronously to a callable."""

    def __init__(self, receiver: Callable[[Message], None]) -> None:
        self._receiver = receiver

    def post(self, message: Message) -> None:
        self._receiver(message)


class QueueChannel:
    """Thread-safe mailbox; the receiver drains it on its own schedule."""

    def __init__(self) -> None:
        self._queue: queue.SimpleQueue[Message] = queue.SimpleQueue()

    def post(self, message: Message) -> None:
        self._queue.put(message)

    def drain(self) -> list[Message]:
        """Return all waiting messages in the order they were posted."""
        messages: list[Message] = []
        while True:
            try:
                messages.append(self._queue.get_nowait())
            except queue.Empty:
                return messages
