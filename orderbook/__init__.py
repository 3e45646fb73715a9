"""Price-level order books with interchangeable storage strategies, and a B-tree."""

__version__ = "0.1.0"
__all__ = ["book", "naive", "array", "btree", "tree_books"]