import random

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from orderbook.book import InvalidAmountError, PriceAmount, Snapshot
from orderbook.naive import NaiveOrderBook
from orderbook.tree_books import (
    BTreeGoogleNoGOrderBook,
    BTreeGoogleOrderBook,
    BTreeOrderBook,
    BTreeRefOrderBook,
)

ALL_BOOKS = [BTreeOrderBook, BTreeRefOrderBook, BTreeGoogleOrderBook, BTreeGoogleNoGOrderBook]
STRICT_BOOKS = [BTreeGoogleOrderBook, BTreeGoogleNoGOrderBook]
LENIENT_BOOKS = [BTreeOrderBook, BTreeRefOrderBook]


def run_against_reference(book, seed, steps):
    rng = random.Random(seed)
    reference = NaiveOrderBook()
    for _ in range(steps):
        is_bid = rng.getrandbits(1) == 1
        is_cancel = rng.getrandbits(1) == 1
        price = rng.randrange(100)
        amount = rng.randrange(100)
        if is_cancel:
            amount = -amount
        depth = rng.randrange(10) + 5
        assert book.snapshot(depth) == reference.snapshot(depth)
        if amount < 0:
            current = book.get_bid(price) if is_bid else book.get_ask(price)
            if current == 0:
                amount = -amount
            elif amount + current < 0:
                amount = -((-amount) % current)
        if amount == 0:
            continue
        if is_bid:
            book.bid(price, amount)
            reference.bid(price, amount)
        else:
            book.ask(price, amount)
            reference.ask(price, amount)
    for price in range(100):
        assert book.get_bid(price) == reference.get_bid(price)
        assert book.get_ask(price) == reference.get_ask(price)


@pytest.mark.parametrize("factory", ALL_BOOKS)
@pytest.mark.parametrize("seed", [0, 123456])
def test_matches_naive_book(factory, seed):
    run_against_reference(factory(), seed, 3000)


@pytest.mark.parametrize("factory", ALL_BOOKS)
@settings(max_examples=10, deadline=None)
@given(seed=st.integers(min_value=-(2**63), max_value=2**63 - 1))
def test_fuzz_matches_naive_book(factory, seed):
    run_against_reference(factory(), seed, 500)


@pytest.mark.parametrize("factory", ALL_BOOKS)
def test_snapshot_orders_best_first(factory):
    book = factory()
    for price, amount in [(100, 5), (101, 3), (99, 2)]:
        book.bid(price, amount)
        book.ask(price + 10, amount)
    assert book.snapshot(2) == Snapshot(
        best_bids=(PriceAmount(101, 3), PriceAmount(100, 5)),
        best_asks=(PriceAmount(109, 2), PriceAmount(110, 5)),
    )


@pytest.mark.parametrize("factory", ALL_BOOKS)
def test_cancelling_whole_level_removes_it(factory):
    book = factory()
    book.bid(50, 7)
    book.ask(60, 4)
    book.bid(50, -7)
    book.ask(60, -4)
    assert book.get_bid(50) == 0
    assert book.get_ask(60) == 0
    assert book.snapshot(5) == Snapshot()


@pytest.mark.parametrize("factory", ALL_BOOKS)
def test_amounts_accumulate(factory):
    book = factory()
    book.ask(42, 10)
    book.ask(42, 5)
    book.ask(42, -3)
    assert book.get_ask(42) == 12
    assert book.get_bid(42) == 0
    assert book.snapshot(1) == Snapshot(best_bids=(), best_asks=(PriceAmount(42, 12),))


@pytest.mark.parametrize("factory", ALL_BOOKS)
def test_depth_zero_and_negative(factory):
    book = factory()
    book.bid(1, 1)
    assert book.snapshot(0) == Snapshot()
    with pytest.raises(ValueError):
        book.snapshot(-1)


@pytest.mark.parametrize("factory", STRICT_BOOKS)
def test_strict_books_reject_negative_result(factory):
    book = factory()
    book.bid(10, 5)
    book.ask(20, 5)
    with pytest.raises(InvalidAmountError):
        book.bid(10, -7)
    with pytest.raises(InvalidAmountError):
        book.ask(20, -6)
    assert book.get_bid(10) == 5
    assert book.get_ask(20) == 5
    assert book.snapshot(1) == Snapshot(
        best_bids=(PriceAmount(10, 5),), best_asks=(PriceAmount(20, 5),)
    )


@pytest.mark.parametrize("factory", LENIENT_BOOKS)
def test_lenient_books_keep_negative_result(factory):
    book = factory()
    book.bid(10, 5)
    book.bid(10, -7)
    assert book.get_bid(10) == -2
    assert book.snapshot(3).best_bids == (PriceAmount(10, -2),)


@pytest.mark.parametrize("factory", ALL_BOOKS)
def test_many_levels_snapshot_limited(factory):
    book = factory()
    for price in range(300):
        book.bid(price, price + 1)
        book.ask(price, price + 1)
    snapshot = book.snapshot(3)
    assert snapshot.best_bids == (
        PriceAmount(299, 300),
        PriceAmount(298, 299),
        PriceAmount(297, 298),
    )
    assert snapshot.best_asks == (
        PriceAmount(0, 1),
        PriceAmount(1, 2),
        PriceAmount(2, 3),
    )