"""Customers, items, orders and drivers of the delivery system."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Optional


@dataclass(frozen=True)
class Customer:
    """A person who sends or receives orders."""

    name: str
    email: str
    address: str
    phone: str


@dataclass(frozen=True)
class Item:
    """Something that can be delivered."""

    name: str


class OrderStatus(Enum):
    CREATED = "Created"
    ASSIGNED = "Assigned"
    PICKED_UP = "PickedUp"
    DELIVERED = "Delivered"
    CANCELLED = "Cancelled"


@dataclass(eq=False)
class Order:
    """A delivery of one item from a sender to a receiver."""

    order_id: str
    sender: Customer
    receiver: Customer
    item: Item
    status: OrderStatus = OrderStatus.CREATED
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def describe(self) -> str:
        """A one-line summary of the order."""
        return (
            f"{self.order_id} ,sender:{self.sender.name}"
            f" , receiver:{self.receiver.name} , status:{self.status.value}"
        )


class DriverStatus(Enum):
    IDLE = "Idle"
    OCCUPIED = "Occupied"


@dataclass(eq=False)
class Driver:
    """A driver who carries one order at a time."""

    name: str
    status: DriverStatus = DriverStatus.IDLE
    assigned_order: Optional[Order] = None
    completed_orders: int = 0

    def assign_order(self, order: Optional[Order]) -> None:
        """Give the driver an order (or none) and mark that order assigned."""
        self.assigned_order = order
        if order is not None:
            order.status = OrderStatus.ASSIGNED

    def complete_order(self) -> None:
        """Finish the current order and become idle."""
        self.assign_order(None)
        self.status = DriverStatus.IDLE
        self.completed_orders += 1