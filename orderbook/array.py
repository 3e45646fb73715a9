"""Order book keeping each side as a sorted list of price levels."""

from __future__ import annotations

from bisect import bisect_left

from .book import InvalidAmountError, OrderBook, PriceAmount, Snapshot


class _Ladder:
    """One side of the book, kept sorted best price first."""

    def __init__(self, descending: bool) -> None:
        self._levels: list[PriceAmount] = []
        self._descending = descending

    def _sort_key(self, price: int) -> int:
        return -price if self._descending else price

    def _level_key(self, level: PriceAmount) -> int:
        return self._sort_key(level.price)

    def _locate(self, price: int) -> tuple[int, bool]:
        index = bisect_left(self._levels, self._sort_key(price), key=self._level_key)
        found = index < len(self._levels) and self._levels[index].price == price
        return index, found

    def amount(self, price: int) -> int:
        index, found = self._locate(price)
        return self._levels[index].amount if found else 0

    def update(self, price: int, amount: int) -> None:
        index, found = self._locate(price)
        total = amount + (self._levels[index].amount if found else 0)
        if total < 0:
            raise InvalidAmountError(
                f"invalid order: negative resulting amount {total} at price {price}"
            )
        if found:
            if total == 0:
                del self._levels[index]
            else:
                self._levels[index] = PriceAmount(price, total)
        elif total != 0:
            self._levels.insert(index, PriceAmount(price, total))

    def best(self, depth: int) -> tuple[PriceAmount, ...]:
        return tuple(self._levels[:depth])


class ArrayOrderBook(OrderBook):
    """An order book using binary search over sorted price levels."""

    def __init__(self) -> None:
        self._bids = _Ladder(descending=True)
        self._asks = _Ladder(descending=False)

    def snapshot(self, depth: int) -> Snapshot:
        self._check_depth(depth)
        return Snapshot(best_bids=self._bids.best(depth), best_asks=self._asks.best(depth))

    def bid(self, price: int, amount: int) -> None:
        self._bids.update(price, amount)

    def ask(self, price: int, amount: int) -> None:
        self._asks.update(price, amount)

    def get_bid(self, price: int) -> int:
        return self._bids.amount(price)

    def get_ask(self, price: int) -> int:
        return self._asks.amount(price)