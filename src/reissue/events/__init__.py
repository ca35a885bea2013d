"""Event infrastructure - event emitter and event types."""

from .base import BaseEmitter
from .emitter import EventEmitter
from .models import BaseEvent, RequestRetryEvent
from .null import NullEmitter
from .subscription import Subscription

__all__ = [
    "BaseEmitter",
    "BaseEvent",
    "EventEmitter",
    "NullEmitter",
    "RequestRetryEvent",
    "Subscription",
]
