"""
Adapters Package

Integrations outside the request/database path.

Contents:
=========
- event_broker: In-process pub/sub feeding the /ws/notes WebSocket

Note: Database access is handled by shared/db/session.py using async SQLAlchemy.

Usage:
======
    from src.shared.adapters import event_broker

    await event_broker.publish(user_id, {"event": "note.ready", ...})
"""

from src.shared.adapters.event_broker import EventBroker, event_broker

__all__ = [
    "EventBroker",
    "event_broker",
]
