"""
Event Broker Adapter

In-process publish/subscribe for per-user events, used to push note
analysis results to WebSocket clients.

Flow:
=====
    note pipeline ──publish(user_id, event)──► EventBroker
                                                   │ fan-out
                                  ┌────────────────┼────────────────┐
                                  ▼                ▼                ▼
                              queue (ws 1)     queue (ws 2)     queue (ws 3)

Subscribers only receive events published while they are subscribed.
The broker lives in one process; with several workers, each worker
only sees the events it published.

Usage:
======
    from src.shared.adapters.event_broker import event_broker

    async with event_broker.subscribe(user_id) as queue:
        event = await queue.get()

    await event_broker.publish(user_id, {"event": "note.ready", "note_id": "..."})
"""

import asyncio
from collections import defaultdict
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, Optional
from uuid import UUID

from src.shared.core.logging import get_logger


logger = get_logger("events")


class EventBroker:
    """
    Fan-out of JSON-serializable events to per-user subscriber queues.

    Attributes:
        max_queue_size: Events buffered per subscriber before new ones are dropped
    """

    def __init__(self, max_queue_size: int = 100) -> None:
        self.max_queue_size = max_queue_size
        self._subscribers: dict[UUID, set[asyncio.Queue]] = defaultdict(set)

    @asynccontextmanager
    async def subscribe(self, user_id: UUID) -> AsyncIterator[asyncio.Queue]:
        """
        Register a queue for the user's events for the duration of the block.
        """
        queue: asyncio.Queue = asyncio.Queue(maxsize=self.max_queue_size)
        self._subscribers[user_id].add(queue)
        logger.debug("Subscriber added", user_id=str(user_id))
        try:
            yield queue
        finally:
            subscribers = self._subscribers.get(user_id)
            if subscribers is not None:
                subscribers.discard(queue)
                if not subscribers:
                    del self._subscribers[user_id]
            logger.debug("Subscriber removed", user_id=str(user_id))

    async def publish(self, user_id: UUID, event: dict[str, Any]) -> int:
        """
        Deliver an event to every current subscriber of the user.

        Returns:
            Number of subscribers the event was delivered to
        """
        delivered = 0
        for queue in list(self._subscribers.get(user_id, ())):
            try:
                queue.put_nowait(event)
                delivered += 1
            except asyncio.QueueFull:
                logger.warning("Subscriber queue full, event dropped", user_id=str(user_id))
        return delivered

    def subscriber_count(self, user_id: Optional[UUID] = None) -> int:
        """Subscribers of one user, or of everyone when user_id is None."""
        if user_id is not None:
            return len(self._subscribers.get(user_id, ()))
        return sum(len(queues) for queues in self._subscribers.values())


# Process-wide broker shared by the API and background tasks
event_broker = EventBroker()
