"""Order books keeping each side in a B-tree of price levels."""

from __future__ import annotations

from itertools import islice

from .book import InvalidAmountError, OrderBook, PriceAmount, Snapshot
from .btree import BTree


def _ascending(a: PriceAmount, b: PriceAmount) -> bool:
    return a.price < b.price


def _descending(a: PriceAmount, b: PriceAmount) -> bool:
    return a.price > b.price


def _tree_snapshot(
    bids: BTree[PriceAmount], asks: BTree[PriceAmount], depth: int
) -> Snapshot:
    return Snapshot(
        best_bids=tuple(islice(bids, depth)),
        best_asks=tuple(islice(asks, depth)),
    )


def _amount(tree: BTree[PriceAmount], price: int) -> int:
    level = tree.get(PriceAmount(price, 0))
    return 0 if level is None else level.amount


def _update(tree: BTree[PriceAmount], price: int, amount: int, strict: bool) -> None:
    probe = PriceAmount(price, 0)
    current = tree.get(probe)
    if current is None:
        tree.replace_or_insert(PriceAmount(price, amount))
        return
    total = current.amount + amount
    if total == 0:
        tree.delete(probe)
        return
    if total < 0 and strict:
        raise InvalidAmountError(f"invalid amount {total} at price {price}")
    tree.replace_or_insert(PriceAmount(price, total))


class BTreeOrderBook(OrderBook):
    """B-tree book of order 8 that does not reject negative resulting amounts."""

    def __init__(self) -> None:
        self._bids: BTree[PriceAmount] = BTree(4, _descending)
        self._asks: BTree[PriceAmount] = BTree(4, _ascending)

    def snapshot(self, depth: int) -> Snapshot:
        self._check_depth(depth)
        return _tree_snapshot(self._bids, self._asks, depth)

    def bid(self, price: int, amount: int) -> None:
        _update(self._bids, price, amount, strict=False)

    def ask(self, price: int, amount: int) -> None:
        _update(self._asks, price, amount, strict=False)

    def get_bid(self, price: int) -> int:
        return _amount(self._bids, price)

    def get_ask(self, price: int) -> int:
        return _amount(self._asks, price)


class BTreeRefOrderBook(BTreeOrderBook):
    """Same behaviour as :class:`BTreeOrderBook`."""


class BTreeGoogleOrderBook(OrderBook):
    """B-tree book of degree 8 that rejects negative resulting amounts."""

    def __init__(self) -> None:
        self._bids: BTree[PriceAmount] = BTree(8, _descending)
        self._asks: BTree[PriceAmount] = BTree(8, _ascending)

    def snapshot(self, depth: int) -> Snapshot:
        self._check_depth(depth)
        return _tree_snapshot(self._bids, self._asks, depth)

    def bid(self, price: int, amount: int) -> None:
        _update(self._bids, price, amount, strict=True)

    def ask(self, price: int, amount: int) -> None:
        _update(self._asks, price, amount, strict=True)

    def get_bid(self, price: int) -> int:
        return _amount(self._bids, price)

    def get_ask(self, price: int) -> int:
        return _amount(self._asks, price)


class BTreeGoogleNoGOrderBook(BTreeGoogleOrderBook):
    """Same behaviour as :class:`BTreeGoogleOrderBook`."""