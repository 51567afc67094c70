"""Notification messages and the console notification service."""

from __future__ import annotations

import sys
from enum import Enum, auto
from typing import ClassVar, Optional, TextIO


class NotificationMessage(Enum):
    """Kinds of notification the delivery system can emit."""

    ADD_NEW_CUSTOMER = auto()
    ADD_NEW_DRIVER = auto()
    CREATE_ORDER = auto()
    ORDER_ASSIGNED = auto()
    ORDER_PICKED_UP = auto()
    ORDER_DELIVERED = auto()
    ORDER_CANCELLED = auto()
    NEW_RATING = auto()
    LIST_ORDERS = auto()
    LIST_DRIVERS = auto()

    @property
    def text(self) -> Optional[str]:
        """The message prefix, or None when this kind has no text."""
        return _MESSAGES.get(self)


_MESSAGES: dict[NotificationMessage, str] = {
    NotificationMessage.ADD_NEW_CUSTOMER: "New Customer :",
    NotificationMessage.ADD_NEW_DRIVER: "New Driver :",
    NotificationMessage.CREATE_ORDER: "New Order :",
    NotificationMessage.ORDER_ASSIGNED: "Order Assigned :",
    NotificationMessage.ORDER_DELIVERED: "Order delivered :",
    NotificationMessage.ORDER_CANCELLED: "Order Cancelled:",
    NotificationMessage.NEW_RATING: "New rating :",
    NotificationMessage.LIST_DRIVERS: "Drivers :",
    NotificationMessage.LIST_ORDERS: "Orders :",
}


class NotificationService:
    """Writes notifications as lines of text; shared through get_instance()."""

    _instance: ClassVar[Optional["NotificationService"]] = None

    def __init__(self, stream: Optional[TextIO] = None) -> None:
        self._stream = stream

    @classmethod
    def get_instance(cls) -> "NotificationService":
        """Return the process-wide service, creating it on first use."""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    def notify(self, message: NotificationMessage | str, params: Optional[str] = None) -> str:
        """Emit a notification and return the line that was written.

        A NotificationMessage needs params, which follow its text after a space.
        A plain string is written as it is and takes no params.
        """
        if isinstance(message, NotificationMessage):
            if params is None:
                raise TypeError(f"{message.name} notification needs params")
            text = message.text
            if text is None:
                raise KeyError(f"no message text for {message.name}")
            line = f"{text} {params}"
        else:
            if params is not None:
                raise TypeError("a plain message takes no params")
            line = str(message)
        stream = self._stream if self._stream is not None else sys.stdout
        print(line, file=stream)
        return line