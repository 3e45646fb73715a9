"""An in-memory B-tree ordered by a caller-supplied ``less`` function."""

from __future__ import annotations

from typing import Callable, Generic, Iterator, TypeVar

T = TypeVar("T")

_MISSING = object()
_REMOVE_MAX = object()


class _Node:
    __slots__ = ("items", "children")

    def __init__(self, items: list | None = None, children: list | None = None) -> None:
        self.items: list = items if items is not None else []
        self.children: list[_Node] = children if children is not None else []


class BTree(Generic[T]):
    """A B-tree of items; two items are equal when neither is less than the other.

    Each node other than the root holds between ``degree - 1`` and
    ``2 * degree - 1`` items.
    """

    def __init__(self, degree: int, less: Callable[[T, T], bool]) -> None:
        if degree < 2:
            raise ValueError(f"degree must be at least 2, got {degree}")
        self._degree = degree
        self._less = less
        self._root: _Node | None = None
        self._length = 0

    @property
    def _max_items(self) -> int:
        return 2 * self._degree - 1

    @property
    def _min_items(self) -> int:
        return self._degree - 1

    def __len__(self) -> int:
        return self._length

    def __iter__(self) -> Iterator[T]:
        return self.ascend()

    def ascend(self) -> Iterator[T]:
        """Yield every item in ascending order."""
        if self._root is not None:
            yield from self._walk(self._root)

    def get(self, item: T) -> T | None:
        """Return the stored item equal to ``item``, or None."""
        node = self._root
        while node is not None:
            index, found = self._find(node, item)
            if found:
                return node.items[index]
            if not node.children:
                return None
            node = node.children[index]
        return None

    def replace_or_insert(self, item: T) -> T | None:
        """Store ``item``; return the item it replaced, or None if it is new."""
        if self._root is None:
            self._root = _Node([item])
            self._length = 1
            return None
        if len(self._root.items) >= self._max_items:
            middle, second = self._split(self._root, self._max_items // 2)
            self._root = _Node([middle], [self._root, second])
        out = self._insert(self._root, item)
        if out is _MISSING:
            self._length += 1
            return None
        return out

    def delete(self, item: T) -> T | None:
        """Remove the item equal to ``item``; return it, or None if absent."""
        if self._root is None:
            return None
        out = self._remove(self._root, item)
        if not self._root.items and self._root.children:
            self._root = self._root.children[0]
        if out is _MISSING:
            return None
        self._length -= 1
        if self._length == 0:
            self._root = None
        return out

    def _walk(self, node: _Node) -> Iterator[T]:
        if not node.children:
            yield from node.items
            return
        for child, item in zip(node.children, node.items):
            yield from self._walk(child)
            yield item
        yield from self._walk(node.children[-1])

    def _find(self, node: _Node, item: T) -> tuple[int, bool]:
        lo, hi = 0, len(node.items)
        while lo < hi:
            mid = (lo + hi) // 2
            if self._less(item, node.items[mid]):
                hi = mid
            else:
                lo = mid + 1
        if lo > 0 and not self._less(node.items[lo - 1], item):
            return lo - 1, True
        return lo, False

    @staticmethod
    def _split(node: _Node, index: int) -> tuple[object, _Node]:
        middle = node.items[index]
        second = _Node(node.items[index + 1:], node.children[index + 1:] if node.children else [])
        node.items = node.items[:index]
        if node.children:
            node.children = node.children[: index + 1]
        return middle, second

    def _insert(self, node: _Node, item: T) -> object:
        index, found = self._find(node, item)
        if found:
            old = node.items[index]
            node.items[index] = item
            return old
        if not node.children:
            node.items.insert(index, item)
            return _MISSING
        if len(node.children[index].items) >= self._max_items:
            middle, second = self._split(node.children[index], self._max_items // 2)
            node.items.insert(index, middle)
            node.children.insert(index + 1, second)
            if self._less(item, middle):
                pass
            elif self._less(middle, item):
                index += 1
            else:
                old = node.items[index]
                node.items[index] = item
                return old
        return self._insert(node.children[index], item)

    def _remove(self, node: _Node, item: object) -> object:
        if item is _REMOVE_MAX:
            if not node.children:
                return node.items.pop()
            index, found = len(node.items), False
        else:
            index, found = self._find(node, item)
            if not node.children:
                return node.items.pop(index) if found else _MISSING
        if len(node.children[index].items) <= self._min_items:
            self._grow_child(node, index)
            return self._remove(node, item)
        child = node.children[index]
        if found:
            out = node.items[index]
            node.items[index] = self._remove(child, _REMOVE_MAX)
            return out
        return self._remove(child, item)

    def _grow_child(self, node: _Node, index: int) -> None:
        minimum = self._min_items
        if index > 0 and len(node.children[index - 1].items) > minimum:
            child, donor = node.children[index], node.children[index - 1]
            child.items.insert(0, node.items[index - 1])
            node.items[index - 1] = donor.items.pop()
            if donor.children:
                child.children.insert(0, donor.children.pop())
        elif index < len(node.items) and len(node.children[index + 1].items) > minimum:
            child, donor = node.children[index], node.children[index + 1]
            child.items.append(node.items[index])
            node.items[index] = donor.items.pop(0)
            if donor.children:
                child.children.append(donor.children.pop(0))
        else:
            if index >= len(node.items):
                index -= 1
            child = node.children[index]
            child.items.append(node.items.pop(index))
            merged = node.children.pop(index + 1)
            child.items.extend(merged.items)
            child.children.extend(merged.children)