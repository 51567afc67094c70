"""The delivery service: customers, drivers, orders and driver assignment."""

from __future__ import annotations

import itertools
import threading
import time
from typing import ClassVar, Iterator, Optional

from designlab.driver_selection import DefaultDriverSelection, DriverSelection
from designlab.models import Customer, Driver, DriverStatus, Item, Order, OrderStatus
from designlab.notifications import NotificationMessage, NotificationService
from designlab.repositories import DriverRepo, ItemList, OrderRepo

CATALOGUE_SIZE = 10


class DeliveryService:
    """Places orders between customers and hands them to drivers.

    Each placed order gets a background worker that keeps trying to find a
    driver until the order leaves the created state or the assignment
    timeout runs out; an order still unassigned by then is cancelled.
    """

    _order_numbers: ClassVar[Iterator[int]] = itertools.count(1)
    _order_numbers_lock: ClassVar[threading.Lock] = threading.Lock()

    def __init__(
        self,
        notifier: Optional[NotificationService] = None,
        selection: Optional[DriverSelection] = None,
        *,
        assignment_timeout: float = 60.0,
        poll_interval: float = 0.05,
    ) -> None:
        self._notifier = notifier if notifier is not None else NotificationService.get_instance()
        self._selection = selection if selection is not None else DefaultDriverSelection()
        self._assignment_timeout = assignment_timeout
        self._poll_interval = poll_interval
        self._customers: list[Customer] = []
        self._orders = OrderRepo()
        self._drivers = DriverRepo()
        self._items = ItemList()
        self._lock = threading.RLock()
        self._workers: list[threading.Thread] = []
        for number in range(CATALOGUE_SIZE):
            name = str(number)
            self._items.add(name, Item(name))

    def generate_order_id(self) -> str:
        """A new order id, unique across all services in the process."""
        with self._order_numbers_lock:
            number = next(self._order_numbers)
        return f"order{number}"

    def add_customer(self, customer: Customer) -> None:
        self._customers.append(customer)
        self._notifier.notify(
            NotificationMessage.ADD_NEW_CUSTOMER, f"{customer.name}, {customer.email}"
        )

    def add_driver(self, driver: Driver) -> None:
        with self._lock:
            self._drivers.add_idle(driver)
        self._notifier.notify(NotificationMessage.ADD_NEW_DRIVER, driver.name)

    def place_order(self, sender: Customer, receiver: Customer, item_name: str) -> Optional[Order]:
        """Create an order and start looking for its driver.

        Returns the new order, or None (after a notification) when the item
        is not in the catalogue.
        """
        item = self._items.get(item_name)
        if item is None:
            self._notifier.notify(f"Failed to create order wrong item name:{item_name}")
            return None
        order = Order(self.generate_order_id(), sender, receiver, item)
        self._orders.add(order)
        self.schedule_driver_assignment(order)
        return order

    def orders(self) -> list[Order]:
        return self._orders.orders()

    def drivers(self) -> list[Driver]:
        with self._lock:
            return self._drivers.drivers()

    def assign_driver(self, order: Order) -> Optional[Driver]:
        """Try once to give the order a driver; return the driver or None."""
        with self._lock:
            driver = self._selection.select(order, self._drivers)
            if driver is None:
                return None
            self._drivers.remove_idle(driver)
            self._drivers.add_occupied(driver)
            driver.assign_order(order)
            driver.status = DriverStatus.OCCUPIED
            order.status = OrderStatus.ASSIGNED
            self._orders.add_mapping(order.order_id, driver)
            self._notifier.notify(
                NotificationMessage.ORDER_ASSIGNED, f"{order.describe()} driver:{driver.name}"
            )
            return driver

    def schedule_driver_assignment(self, order: Order) -> threading.Thread:
        """Start a background worker that assigns a driver to the order."""
        worker = threading.Thread(target=self._await_driver, args=(order,), daemon=True)
        with self._lock:
            self._workers.append(worker)
        worker.start()
        return worker

    def cancel_order(self, order: Order) -> bool:
        """Cancel an order that has no driver yet; return whether it was cancelled."""
        with self._lock:
            if order.status is OrderStatus.CREATED:
                order.status = OrderStatus.CANCELLED
                self._notifier.notify(NotificationMessage.ORDER_CANCELLED, order.describe())
                return True
            self._notifier.notify(f"Cannot cancel order:{order.describe()}")
            return False

    def pickup_order(self, order: Order) -> None:
        with self._lock:
            order.status = OrderStatus.PICKED_UP
            self._notifier.notify(f"Order picked up : {order.describe()}")

    def deliver_order(self, order: Order) -> None:
        """Mark the order delivered and free its driver.

        Raises LookupError when no driver carries the order.
        """
        with self._lock:
            driver = self._orders.driver_for(order.order_id)
            if driver is None:
                raise LookupError(f"no driver carries order {order.order_id!r}")
            order.status = OrderStatus.DELIVERED
            driver.complete_order()
            self._drivers.remove_occupied(driver)
            self._drivers.add_idle(driver)
            self._orders.remove_mapping(order.order_id)
            self._notifier.notify(NotificationMessage.ORDER_DELIVERED, order.describe())

    def _await_driver(self, order: Order) -> None:
        deadline = time.monotonic() + self._assignment_timeout
        while order.status is OrderStatus.CREATED:
            remaining = deadline - time.monotonic()
            if remaining <= 0:
                break
            if self.assign_driver(order) is None:
                time.sleep(min(self._poll_interval, remaining))
        with self._lock:
            if order.status is OrderStatus.CREATED:
                self.cancel_order(order)

    def _join_workers(self, timeout: Optional[float] = None) -> None:
        """Wait for every assignment worker started so far."""
        with self._lock:
            workers = list(self._workers)
        for worker in workers:
            worker.join(timeout)