# designlab

A handful of small object-oriented designs, each runnable on its own:

- **Peer-to-peer delivery** (`designlab.delivery_service`, with
  `designlab.models`, `designlab.repositories`,
  `designlab.driver_selection` and `designlab.notifications`): customers,
  drivers, items and orders. Placing an order starts a background worker
  that hands it to an idle driver, or cancels it if no driver turns up
  before the assignment timeout. Every event is written as a line of text
  by a `NotificationService`.
- **Bidding** (`designlab.bidding`): a `Bidder` dataclass holding a name
  and an amount, and an `Auction` dataclass holding an item and a minimum
  and maximum amount.
- **Factory method** (`designlab.loggers`): `ConsoleLogger`, `InfoLogger`,
  `DebugLogger` and `ErrorLogger`, each made by its own `LoggerFactory`
  subclass.
- **Abstract factory** (`designlab.network`): a `TcpNetworkFactory` that
  makes a `Tcp` protocol and `TcpPacket`s that belong together.

## Installation

```
pip install .
```

## Commands

```
designlab-delivery [--timeout SECONDS]   # registers six customers and two drivers, places three orders
designlab-bidding                        # sets a bidder's amount and prints it
designlab-loggers                        # logs one line through each kind of logger
designlab-network [--seed N]             # attaches a TCP port, then sends and reads packets
```

`designlab-delivery` waits until every order is either assigned or
cancelled. With two drivers and three orders, the third order waits for
`--timeout` seconds (60 by default) and is then cancelled.

`designlab-network` decides at random whether each port is free; `--seed`
makes the run repeatable.

## Using the delivery service

```python
from designlab.delivery_service import DeliveryService
from designlab.models import Customer, Driver

service = DeliveryService(assignment_timeout=5.0)
alice = Customer("alice", "alice@example.com", "1 Main Street", "unlisted")
bob = Customer("bob", "bob@example.com", "2 High Street", "unlisted")
service.add_customer(alice)
service.add_customer(bob)
service.add_driver(Driver("dana"))

order = service.place_order(alice, bob, "2")   # the catalogue holds items "0" to "9"
```

`place_order` returns the new `Order`, or `None` after a notification when
the item name is not in the catalogue. Once an order is assigned,
`pickup_order` and `deliver_order` move it on; `deliver_order` frees the
driver again and raises `LookupError` if no driver carries the order.
`cancel_order` cancels an order that has no driver yet and returns whether
it did. `orders()` and `drivers()` list what the service holds.

A `DeliveryService` can be given its own `NotificationService` (which
writes to any text stream) and its own `DriverSelection` strategy; the
default, `DefaultDriverSelection`, takes any idle driver.

## Using the factories

```python
from designlab.loggers import InfoLoggerFactory
from designlab.network import TcpNetworkFactory

InfoLoggerFactory().create_logger().log("application processing requests")

factory = TcpNetworkFactory()
tcp = factory.get_protocol()
port = 1024
while not tcp.attach_port(port):
    port += 1
tcp.send_packet(factory.create_packet(0))
```

`Logger.log` and the packet methods print their line and also return it.

## What it does not do

- Nothing is stored: customers, drivers and orders live in memory for the
  life of a `DeliveryService`.
- The bidding module has no bidding logic; `Bidder` and `Auction` only
  hold their data.
- `Tcp` opens no sockets and sends nothing over a network; it prints what
  it would do, and whether a port is free is decided by chance.

## Tests

```
pip install .[test]
pytest
```