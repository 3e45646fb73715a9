"""Core value types and the interface shared by every order book."""

from __future__ import annotations

import abc
from dataclasses import dataclass


class InvalidAmountError(ValueError):
    """Raised when an update would leave a negative amount at a price level."""


@dataclass(frozen=True)
class PriceAmount:
    """The total amount resting at one price level."""

    price: int
    amount: int


@dataclass(frozen=True)
class Snapshot:
    """The best price levels of both sides of a book, best first."""

    best_bids: tuple[PriceAmount, ...] = ()
    best_asks: tuple[PriceAmount, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "best_bids", tuple(self.best_bids))
        object.__setattr__(self, "best_asks", tuple(self.best_asks))


class OrderBook(abc.ABC):
    """An aggregated book of bid and ask amounts keyed by price."""

    @abc.abstractmethod
    def snapshot(self, depth: int) -> Snapshot:
        """Return at most ``depth`` best levels of each side."""

    @abc.abstractmethod
    def bid(self, price: int, amount: int) -> None:
        """Add ``amount`` (negative to cancel) to the bid level at ``price``."""

    @abc.abstractmethod
    def ask(self, price: int, amount: int) -> None:
        """Add ``amount`` (negative to cancel) to the ask level at ``price``."""

    @abc.abstractmethod
    def get_bid(self, price: int) -> int:
        """Return the bid amount at ``price``, or 0 if there is none."""

    @abc.abstractmethod
    def get_ask(self, price: int) -> int:
        """Return the ask amount at ``price``, or 0 if there is none."""

    @staticmethod
    def _check_depth(depth: int) -> None:
        if depth < 0:
            raise ValueError(f"depth must be non-negative, got {depth}")