"""A short run of the delivery service with a few customers and drivers."""

from __future__ import annotations

import argparse
from typing import Optional, Sequence

from designlab.delivery_service import DeliveryService
from designlab.models import Customer, Driver

_CUSTOMERS = [
    ("akhil", "London"),
    ("bidhuri", "Jaunpur"),
    ("don", "Baliya"),
    ("vitto", "Meerut"),
    ("jhon", "Kormangala"),
    ("shakal", "HSR Layout"),
]


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the demo; waits until every placed order is assigned or cancelled."""
    parser = argparse.ArgumentParser(description="P2P delivery demo")
    parser.add_argument(
        "--timeout",
        type=float,
        default=60.0,
        help="seconds an order waits for a driver before it is cancelled",
    )
    args = parser.parse_args(argv)

    print("P2P Delivery System")
    service = DeliveryService(assignment_timeout=args.timeout)
    customers = {}
    for name, city in _CUSTOMERS:
        customer = Customer(name, f"{name}@example.com", city, "unlisted")
        service.add_customer(customer)
        customers[name] = customer

    service.add_driver(Driver("Nattu"))
    service.add_driver(Driver("Bagha"))

    service.place_order(customers["akhil"], customers["bidhuri"], "2")
    service.place_order(customers["vitto"], customers["jhon"], "2")
    service.place_order(customers["shakal"], customers["don"], "2")

    service._join_workers()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())