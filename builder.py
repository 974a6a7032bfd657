# builder.py
# Assemble a word tree from (word, payload) pairs or a plain word list.

import time
from itertools import groupby
from typing import Any, Iterable, List, Tuple

import requests

import utils
from utils import vlog, DEFAULT_TIMEOUT
from word_tree import Edge, Node, Root


class TreeBuildError(ValueError):
    """The words handed to the builder cannot form a valid tree."""


def _is_tree_word(word: str) -> bool:
    return bool(word) and all(ch.islower() for ch in word)


def _assemble(entries: List[Tuple[str, Any]]) -> List[Edge]:
    """
    Root edges for ``entries``, which must be sorted by word.

    Groups are split top-down with an explicit stack, then nodes are made
    bottom-up since a Node needs its edges when it is created. Long words
    never touch the recursion limit.
    """
    root_specs: List[list] = []
    # spec: [char, idx_range, word, child specs, built edge]
    order: List[list] = []
    stack = [(0, len(entries), 0, root_specs)]
    while stack:
        lo, hi, depth, siblings = stack.pop()
        pos = lo
        for ch, group in groupby(entries[lo:hi], key=lambda e: e[0][depth]):
            start = pos
            pos += sum(1 for _ in group)
            # a word ending on this edge sorts before its extensions
            word = None
            rest = start
            if len(entries[start][0]) == depth + 1:
                word = entries[start][1]
                rest += 1
            spec = [ch, range(start, pos), word, [], None]
            siblings.append(spec)
            order.append(spec)
            if rest < pos:
                stack.append((rest, pos, depth + 1, spec[3]))
    # children always come after their parent in ``order``
    for spec in reversed(order):
        ch, idx_range, word, children, _ = spec
        spec[4] = Edge(ch, idx_range, Node(word, [c[4] for c in children]))
    return [spec[4] for spec in root_specs]


def build_tree(entries: Iterable[Tuple[str, Any]]) -> Root:
    """
    Build a tree from ``(word, payload)`` pairs.

    Words must be non-empty and entirely lowercase; payloads must not be
    None. Sibling edges come out in sorted char order, and each edge's
    ``idx_range`` covers the positions (in sorted word order) of the words
    passing through it.
    """
    t0 = time.time()
    checked = []
    for word, payload in entries:
        if not isinstance(word, str) or not _is_tree_word(word):
            raise TreeBuildError(f"not a lowercase word: {word!r}")
        if payload is None:
            raise TreeBuildError(f"missing payload for word {word!r}")
        checked.append((word, payload))
    ordered = sorted(checked, key=lambda e: e[0])
    for (prev, _), (word, _) in zip(ordered, ordered[1:]):
        if word == prev:
            raise TreeBuildError(f"duplicate word: {word!r}")
    root = Root(_assemble(ordered))
    vlog(f"Built tree from {len(ordered)} words", t0)
    return root


def build_word_tree(words: Iterable[str]) -> Root:
    """
    Build a tree where every word is its own payload.

    Words are stripped and lowercased; blanks and duplicates are dropped.
    Words with chars that have no lowercase form (digits, punctuation) are
    skipped.
    """
    kept = set()
    skipped = 0
    for w in words:
        ww = w.strip().lower()
        if not ww:
            continue
        if _is_tree_word(ww):
            kept.add(ww)
        else:
            skipped += 1
    if skipped:
        vlog(f"Skipped {skipped} words that are not all letters")
    return build_tree((w, w) for w in kept)


def load_word_list(source: str, timeout: float = DEFAULT_TIMEOUT) -> List[str]:
    """
    Read a newline-separated word list from a file path or an http(s) URL.

    Blank lines and ``#`` comments are skipped.
    """
    t0 = time.time()
    if source.startswith(("http://", "https://")):
        utils.log_with_time(f"⟳ Downloading word list from {source}…")
        resp = requests.get(source, timeout=timeout)
        resp.raise_for_status()
        # word lists are UTF-8 whatever charset the server reports
        text = resp.content.decode('utf-8')
    else:
        with open(source, 'r', encoding='utf-8') as f:
            text = f.read()
    words = [
        line.strip()
        for line in text.splitlines()
        if line.strip() and not line.strip().startswith('#')
    ]
    vlog(f"Word list loaded ({len(words)} lines)", t0)
    return words
