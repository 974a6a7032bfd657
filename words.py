# words.py
# Uniform iterator type handed out for "all the words in a tree".

from typing import Iterator


class Words:
    """
    Iterator over the payloads of a word tree.

    Wraps whatever traversal produced the payloads so callers only ever see
    one type. Like any iterator it is single-pass; ask the tree for a new
    ``Words`` to start over.
    """

    __slots__ = ("_inner",)

    def __init__(self, inner: Iterator):
        self._inner = inner

    def __iter__(self) -> "Words":
        return self

    def __next__(self):
        return next(self._inner)
