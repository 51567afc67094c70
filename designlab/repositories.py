"""In-memory stores for drivers, orders and items."""

from __future__ import annotations

from typing import Optional

from designlab.models import Driver, Item, Order


class DriverRepo:
    """Keeps drivers split into idle and occupied sets."""

    def __init__(self) -> None:
        # dicts used as insertion-ordered sets
        self._idle: dict[Driver, None] = {}
        self._occupied: dict[Driver, None] = {}

    def add_idle(self, driver: Driver) -> None:
        self._idle[driver] = None

    def add_occupied(self, driver: Driver) -> None:
        self._occupied[driver] = None

    def remove_idle(self, driver: Driver) -> None:
        """Remove a driver from the idle set; absent drivers are ignored."""
        self._idle.pop(driver, None)

    def remove_occupied(self, driver: Driver) -> None:
        """Remove a driver from the occupied set; absent drivers are ignored."""
        self._occupied.pop(driver, None)

    def one_idle(self) -> Optional[Driver]:
        """Return some idle driver, or None when there is none."""
        return next(iter(self._idle), None)

    def drivers(self) -> list[Driver]:
        """All drivers, idle ones first."""
        return [*self._idle, *self._occupied]


class OrderRepo:
    """Keeps every order and which driver carries each assigned one."""

    def __init__(self) -> None:
        self._orders: list[Order] = []
        self._assignments: dict[str, Driver] = {}

    def add(self, order: Order) -> None:
        self._orders.append(order)

    def orders(self) -> list[Order]:
        """A copy of the orders in the order they were added."""
        return list(self._orders)

    def add_mapping(self, order_id: str, driver: Driver) -> None:
        """Record the driver of an order; an existing mapping is kept."""
        self._assignments.setdefault(order_id, driver)

    def remove_mapping(self, order_id: str) -> None:
        self._assignments.pop(order_id, None)

    def driver_for(self, order_id: str) -> Optional[Driver]:
        """The driver carrying the order, or None."""
        return self._assignments.get(order_id)


class ItemList:
    """Catalogue of items by name."""

    def __init__(self) -> None:
        self._items: dict[str, Item] = {}

    def add(self, name: str, item: Item) -> None:
        """Add an item; a name already present keeps its first item."""
        self._items.setdefault(name, item)

    def remove(self, name: str) -> None:
        self._items.pop(name, None)

    def get(self, name: str) -> Optional[Item]:
        """The item with that name, or None."""
        return self._items.get(name)