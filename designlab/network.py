"""Protocols, packets and the abstract factory that creates matching pairs."""

from __future__ import annotations

import argparse
import random
from abc import ABC, abstractmethod
from enum import Enum, auto
from typing import Optional, Sequence


class ProtocolKind(Enum):
    TCP = auto()
    UDP = auto()


class ProtocolPacket(ABC):
    """A numbered packet that can be read, written and flushed."""

    @property
    @abstractmethod
    def number(self) -> int:
        """The packet's sequence number."""

    @abstractmethod
    def read(self, stream: str) -> str:
        """Read the packet from a stream."""

    @abstractmethod
    def write(self, stream: str) -> str:
        """Write the packet to a stream."""

    @abstractmethod
    def flush(self) -> str:
        """Flush the packet."""


class Protocol(ABC):
    """A transport that can be bound to a port and send packets."""

    @abstractmethod
    def attach_port(self, port: int) -> bool:
        """Try to bind to the port; return whether it worked."""

    @abstractmethod
    def send_packet(self, packet: ProtocolPacket) -> bool:
        """Send the packet; return whether it was sent."""


class TcpPacket(ProtocolPacket):
    def __init__(self, number: int) -> None:
        self._number = number

    @property
    def number(self) -> int:
        return self._number

    def _emit(self, line: str) -> str:
        print(line)
        return line

    def read(self, stream: str) -> str:
        return self._emit(f"Reading packet: {self._number}to stream: {stream}")

    def write(self, stream: str) -> str:
        return self._emit(f"Writing packet: {self._number}to stream: {stream}")

    def flush(self) -> str:
        return self._emit(f"Flushing packet: {self._number}")


class Tcp(Protocol):
    """TCP transport; whether a port is free is decided by chance."""

    def __init__(self, rng: Optional[random.Random] = None) -> None:
        self._port = 0
        self._rng = rng if rng is not None else random.Random()

    @property
    def port(self) -> int:
        """The attached port, 0 while none is attached."""
        return self._port

    def attach_port(self, port: int) -> bool:
        if self._port:
            print(f"Port {self._port} is already assigned, can't overwrite port!")
            return False
        attached = self._rng.randrange(100) % 2 == 0
        if attached:
            self._port = port
            print(f"Attached {port} to TCP server")
        else:
            print(f"Port {port} couldn't be attached, it might be in use!")
        return attached

    def send_packet(self, packet: ProtocolPacket) -> bool:
        print(f"Sent TCP packet {packet.number} on port {self._port}")
        packet.write(str(self._port))
        return True


class ProtocolFactory(ABC):
    @abstractmethod
    def get_protocol(self) -> Protocol:
        """Return a new protocol."""


class PacketFactory(ABC):
    @abstractmethod
    def create_packet(self, number: int) -> ProtocolPacket:
        """Return a new packet with the given number."""


class NetworkFactory(ABC):
    """Creates a protocol and packets that belong together."""

    @abstractmethod
    def get_protocol(self) -> Protocol:
        """Return a new protocol."""

    @abstractmethod
    def create_packet(self, number: int) -> ProtocolPacket:
        """Return a new packet with the given number."""


class TcpProtocolFactory(ProtocolFactory):
    def __init__(self, rng: Optional[random.Random] = None) -> None:
        self._rng = rng

    def get_protocol(self) -> Protocol:
        return Tcp(self._rng)


class TcpPacketFactory(PacketFactory):
    def create_packet(self, number: int) -> ProtocolPacket:
        return TcpPacket(number)


class TcpNetworkFactory(NetworkFactory):
    def __init__(self, rng: Optional[random.Random] = None) -> None:
        self._protocols = TcpProtocolFactory(rng)
        self._packets = TcpPacketFactory()

    def get_protocol(self) -> Protocol:
        return self._protocols.get_protocol()

    def create_packet(self, number: int) -> ProtocolPacket:
        return self._packets.create_packet(number)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Attach a TCP protocol to the first free port and move two packets."""
    parser = argparse.ArgumentParser(description="Abstract factory demo")
    parser.add_argument("--seed", type=int, default=None, help="seed for port availability")
    args = parser.parse_args(argv)

    print("Abstract Factory")
    factory = TcpNetworkFactory(random.Random(args.seed))
    protocol = factory.get_protocol()
    port = 1024
    while not protocol.attach_port(port):
        port += 1
    packet = factory.create_packet(0)
    packet.write("stream x09709")
    protocol.send_packet(packet)
    packet.flush()

    packet = factory.create_packet(1)
    packet.read("istream x0675")
    packet.flush()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())