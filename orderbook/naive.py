"""Order book backed by plain dictionaries, sorted on every snapshot."""

from __future__ import annotations

from .book import InvalidAmountError, OrderBook, PriceAmount, Snapshot


class NaiveOrderBook(OrderBook):
    """A simple reference order book."""

    def __init__(self) -> None:
        self._bids: dict[int, int] = {}
        self._asks: dict[int, int] = {}

    def snapshot(self, depth: int) -> Snapshot:
        self._check_depth(depth)
        asks = sorted(self._asks.items())[:depth]
        bids = sorted(self._bids.items(), reverse=True)[:depth]
        return Snapshot(
            best_bids=tuple(PriceAmount(price, amount) for price, amount in bids),
            best_asks=tuple(PriceAmount(price, amount) for price, amount in asks),
        )

    def bid(self, price: int, amount: int) -> None:
        self._update(self._bids, price, amount)

    def ask(self, price: int, amount: int) -> None:
        self._update(self._asks, price, amount)

    def get_bid(self, price: int) -> int:
        return self._bids.get(price, 0)

    def get_ask(self, price: int) -> int:
        return self._asks.get(price, 0)

    @staticmethod
    def _update(levels: dict[int, int], price: int, amount: int) -> None:
        total = levels.get(price, 0) + amount
        if total < 0:
            raise InvalidAmountError(
                f"invalid argument: negative amount {total} at price {price}"
            )
        if total == 0:
            levels.pop(price, None)
        else:
            levels[price] = total