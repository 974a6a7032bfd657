# word_tree.py
# Read-only tree of lowercase char edges; nodes optionally hold a word payload.

from typing import Any, Iterable, Iterator, List, Tuple

from words import Words


class TreeStructureError(ValueError):
    """An edge or node was assembled in a shape the tree does not allow."""


def _freeze_edges(edges: Iterable["Edge"]) -> Tuple["Edge", ...]:
    """Copy ``edges`` into a tuple, rejecting non-edges and repeated labels."""
    frozen = tuple(edges)
    seen = set()
    for edge in frozen:
        if not isinstance(edge, Edge):
            raise TreeStructureError(f"expected an Edge, got {type(edge).__name__}")
        if edge.char_lowercase in seen:
            raise TreeStructureError(f"duplicate sibling edge {edge.char_lowercase!r}")
        seen.add(edge.char_lowercase)
    return frozen


class Node:
    """
    A point in the tree, reached by the chars on the edges above it.

    ``word`` is the payload of the word that ends here, or None. A node
    without edges is a leaf.
    """

    __slots__ = ("_word", "_edges")

    def __init__(self, word: Any = None, edges: Iterable["Edge"] = ()):
        self._word = word
        self._edges = _freeze_edges(edges)

    @property
    def word(self) -> Any:
        return self._word

    @property
    def edges(self) -> Tuple["Edge", ...]:
        return self._edges

    @property
    def is_leaf(self) -> bool:
        return not self._edges

    def __repr__(self) -> str:
        return f"Node(word={self._word!r}, edges={len(self._edges)})"


class Edge:
    """
    One lowercase char leading from a parent to ``child_node``.

    ``idx_range`` is carried for outside tooling (the builder stores the
    positions of the input words that pass through the edge). The tree never
    looks at it.
    """

    __slots__ = ("_char", "_idx_range", "_child")

    def __init__(self, char_lowercase: str, idx_range: Any, child_node: Node):
        if not (isinstance(char_lowercase, str) and len(char_lowercase) == 1 and char_lowercase.islower()):
            raise TreeStructureError(f"edge label must be one lowercase char, got {char_lowercase!r}")
        if not isinstance(child_node, Node):
            raise TreeStructureError(f"edge child must be a Node, got {type(child_node).__name__}")
        self._char = char_lowercase
        self._idx_range = idx_range
        self._child = child_node

    @property
    def char_lowercase(self) -> str:
        return self._char

    @property
    def idx_range(self) -> Any:
        return self._idx_range

    @property
    def child_node(self) -> Node:
        return self._child

    def __repr__(self) -> str:
        return f"Edge({self._char!r}, {self._idx_range!r}, {self._child!r})"


def _walk_nodes(edges: Tuple[Edge, ...]) -> Iterator[Tuple[Node, int]]:
    """Yield every node below ``edges`` with its depth in edges. Order is unspecified."""
    stack: List[Tuple[Node, int]] = [(edge.child_node, 1) for edge in edges]
    while stack:
        node, depth = stack.pop()
        yield node, depth
        for edge in node.edges:
            stack.append((edge.child_node, depth + 1))


class _PreOrderWords:
    """
    Pre-order walk over the payloads below a list of root edges.

    State is one ``(edges, next_index)`` cursor per node on the current
    path, so memory grows with depth, not with the size of the tree.
    """

    __slots__ = ("_stack",)

    def __init__(self, edges: Tuple[Edge, ...]):
        self._stack: List[Tuple[Tuple[Edge, ...], int]] = [(edges, 0)]

    def __iter__(self) -> "_PreOrderWords":
        return self

    def __next__(self) -> Any:
        stack = self._stack
        while stack:
            edges, idx = stack[-1]
            if idx >= len(edges):
                stack.pop()
                continue
            stack[-1] = (edges, idx + 1)
            node = edges[idx].child_node
            if node.edges:
                stack.append((node.edges, 0))
            if node.word is not None:
                return node.word
        raise StopIteration


class Root:
    """
    Entry point of a word tree: no incoming edge, no payload, just edges.

    The tree is immutable once built, so every query below is a pure read
    and can run any number of times, from any thread.
    """

    __slots__ = ("_edges",)

    def __init__(self, edges: Iterable[Edge] = ()):
        self._edges = _freeze_edges(edges)

    @property
    def edges(self) -> Tuple[Edge, ...]:
        return self._edges

    # ---------- Structural checks ----------
    def get_max_depth(self) -> int:
        """
        Number of char edges from the root to the deepest node.

        For a fully well-formed tree this is the length of the longest word.
        An empty tree has depth 0.
        """
        max_depth = 0
        for node, depth in _walk_nodes(self._edges):
            if node.is_leaf and depth > max_depth:
                max_depth = depth
        return max_depth

    def is_fully_well_formed(self) -> bool:
        """
        True when every leaf node carries a word.

        Non-leaf nodes may or may not carry a word. An empty tree is
        well-formed. If this is False, iterating the words silently skips a
        branch that was meant to end in a word.
        """
        for node, _ in _walk_nodes(self._edges):
            if node.is_leaf and node.word is None:
                return False
        return True

    def is_suitable_for_iterative_char_search(self) -> bool:
        """
        True when no non-leaf node carries a word.

        An iterative char search feeds the input one char at a time and
        reports the first word it reaches. With ``arm`` and ``army`` in the
        same tree, scanning "army man" would stop at ``arm``, because the
        ``arm`` node sits on the path to ``army``. Such a word list is not
        suitable. Leaves are unrestricted; an empty tree is suitable.
        """
        for node, _ in _walk_nodes(self._edges):
            if not node.is_leaf and node.word is not None:
                return False
        return True

    # ---------- Words ----------
    def words(self) -> Words:
        """
        Lazily yield every payload in pre-order.

        A node's own word comes before the words below it; children are
        visited in stored edge order. Each call starts a fresh, independent
        traversal.
        """
        return Words(_PreOrderWords(self._edges))

    def __iter__(self) -> Words:
        return self.words()

    def __repr__(self) -> str:
        return f"Root(edges={len(self._edges)})"

