"""Worked examples of object-oriented designs: a delivery service, a bidding sketch, and logger and network factories."""

__version__ = "0.1.0"