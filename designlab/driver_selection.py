"""Strategies for choosing a driver for an order."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional

from designlab.models import Driver, Order
from designlab.repositories import DriverRepo


class DriverSelection(ABC):
    """Chooses which driver should take an order."""

    @abstractmethod
    def select(self, order: Order, repo: DriverRepo) -> Optional[Driver]:
        """Return the chosen driver, or None when nobody can take the order."""


class DefaultDriverSelection(DriverSelection):
    """Picks any idle driver."""

    def select(self, order: Order, repo: DriverRepo) -> Optional[Driver]:
        return repo.one_idle()