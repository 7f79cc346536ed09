"""Fan-out of decoded NMEA messages to WebSocket subscriber queues.

The NMEA thread produces messages; each connected client owns one bounded
``asyncio.Queue`` drained on the event loop. Queues are only ever mutated on
the event loop thread.
"""

import asyncio
import logging

__all__ = ["add_subscriber", "broadcast_message", "remove_subscriber", "subscriber_count"]

logger = logging.getLogger(__name__)

_subscriber_queues: list[asyncio.Queue[str]] = []


def add_subscriber(queue: asyncio.Queue[str]) -> None:
    """Start delivering broadcast messages to ``queue``."""
    _subscriber_queues.append(queue)
    logger.debug("Subscriber added (%d connected)", len(_subscriber_queues))


def remove_subscriber(queue: asyncio.Queue[str]) -> None:
    """Stop delivering broadcast messages to ``queue``."""
    _subscriber_queues.remove(queue)
    logger.debug("Subscriber removed (%d connected)", len(_subscriber_queues))


def subscriber_count() -> int:
    return len(_subscriber_queues)


def _enqueue_message(queue: asyncio.Queue[str], message: str) -> None:
    # A full queue belongs to a slow client: drop its oldest message
    if queue.full():
        queue.get_nowait()
        logger.debug("Subscriber queue full, dropped oldest message")
    queue.put_nowait(message)


def broadcast_message(message: str, loop: asyncio.AbstractEventLoop) -> None:
    """Schedule delivery of ``message`` to every subscriber.

    Safe to call from the NMEA reading thread.
    """
    for queue in list(_subscriber_queues):
        loop.call_soon_threadsafe(_enqueue_message, queue, message)
