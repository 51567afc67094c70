"""Bidders and auctions of the bidding system."""

from __future__ import annotations

import argparse
from dataclasses import dataclass
from typing import Optional, Sequence


@dataclass
class Auction:
    """An item on sale with the range of amounts it may fetch."""

    item: str
    min_amount: int
    max_amount: int


@dataclass
class Bidder:
    """A participant holding an amount to bid with."""

    name: str
    amount: int = 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Create a bidder, give it an amount and print it."""
    parser = argparse.ArgumentParser(description="Bidding system demo")
    parser.parse_args(argv)

    print("Bidding System")
    bidder = Bidder("akhil")
    bidder.amount = 100
    print(f"b1 amount:{bidder.amount}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())