# orderbook

A small library that records the total amount resting at each price level on
the bid side and the ask side of a market. It answers two questions: how much
rests at a given price, and which price levels are best right now.

Each implementation subclasses the abstract base class `orderbook.book.OrderBook`:

| Class | Storage |
| --- | --- |
| `orderbook.naive.NaiveOrderBook` | dictionaries, sorted when a snapshot is taken |
| `orderbook.array.ArrayOrderBook` | sorted lists searched by bisection |
| `orderbook.tree_books.BTreeOrderBook` | B-trees of degree 4 |
| `orderbook.tree_books.BTreeRefOrderBook` | the same as `BTreeOrderBook` |
| `orderbook.tree_books.BTreeGoogleOrderBook` | B-trees of degree 8 |
| `orderbook.tree_books.BTreeGoogleNoGOrderBook` | the same as `BTreeGoogleOrderBook` |

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Usage

```python
from orderbook.array import ArrayOrderBook

book = ArrayOrderBook()
book.bid(100, 5)     # add 5 at price 100 on the bid side
book.bid(101, 3)
book.ask(105, 7)
book.ask(104, 2)

book.get_bid(100)    # 5
book.get_ask(103)    # 0: nothing rests there

book.bid(100, -5)    # cancel; the level goes away once it reaches zero

snap = book.snapshot(10)
snap.best_bids       # (PriceAmount(price=101, amount=3),)
snap.best_asks       # (PriceAmount(price=104, amount=2), PriceAmount(price=105, amount=7))
```

Amounts are changes, not totals. A positive amount adds to a level and a
negative amount takes from it. When an existing level reaches exactly zero it
is removed.

`snapshot(depth)` returns a frozen `orderbook.book.Snapshot` holding at most
`depth` levels per side as tuples of frozen `PriceAmount` values. Bids run from
highest price to lowest and asks from lowest to highest. Later updates to the
book do not change a snapshot already taken. A negative `depth` raises
`ValueError`.

## Where the implementations differ

For ordinary use, where cancels never take more than a level holds, every
implementation gives the same results. They differ on the edge cases:

- `NaiveOrderBook` and `ArrayOrderBook` raise
  `orderbook.book.InvalidAmountError` (a `ValueError`) for any update that would
  leave a level below zero, including a negative amount at an empty price. An
  update that leaves an empty price at zero stores nothing.
- `BTreeGoogleOrderBook` and `BTreeGoogleNoGOrderBook` raise
  `InvalidAmountError` when an update would take an existing level below zero.
  At a price with no level yet, they store the amount as given, even zero or
  negative.
- `BTreeOrderBook` and `BTreeRefOrderBook` never raise `InvalidAmountError`:
  they store a negative total as it is. Like the two above, they store the
  amount as given at a price with no level yet.

## The B-tree

The tree-based books are built on `orderbook.btree.BTree`, an ordered container
that can be used on its own. It takes a degree of at least 2 (otherwise
`ValueError`) and a strict "less than" function. Two items count as equal when
neither is less than the other.

```python
from orderbook.btree import BTree

tree = BTree(8, lambda a, b: a < b)
for value in (5, 1, 3):
    tree.replace_or_insert(value)   # returns the item replaced, or None
list(tree)      # [1, 3, 5]; tree.ascend() yields the same
tree.get(3)     # 3; None when absent
tree.delete(3)  # returns the removed item, or None when absent
len(tree)       # 2
```

## What this package does not do

It keeps aggregated amounts per price level only. It does not track individual
orders, match bids against asks, read market data feeds or save books to disk,
and it has no command-line interface.