# fixtures.py
# Hand-assembled example trees. Index ranges are the positions of the words
# (in the order listed by each enum) whose paths run through the edge.

from enum import Enum

from word_tree import Edge, Node, Root


class ExampleWords1(Enum):
    GET = "get"
    GIVE = "give"
    GO = "go"


class ExampleWords2(Enum):
    ARM = "arm"
    ARMY = "army"
    MAN = "man"


# Well-formed; suitable for iterative char search (pointless as it may be)
EXAMPLE_WORDLIST_EMPTY = Root()

# Well-formed; suitable for iterative char search
EXAMPLE_WORDLIST_1 = Root([
    Edge('g', range(0, 3), Node(None, [
        Edge('e', range(0, 1), Node(None, [
            Edge('t', range(0, 1), Node(ExampleWords1.GET)),
        ])),
        Edge('i', range(1, 2), Node(None, [
            Edge('v', range(1, 2), Node(None, [
                Edge('e', range(1, 2), Node(ExampleWords1.GIVE)),
            ])),
        ])),
        Edge('o', range(2, 3), Node(ExampleWords1.GO)),
    ])),
])

# Well-formed; NOT suitable for iterative char search ("arm" sits on the way to "army")
EXAMPLE_WORDLIST_2 = Root([
    Edge('a', range(0, 2), Node(None, [
        Edge('r', range(0, 2), Node(None, [
            Edge('m', range(0, 2), Node(ExampleWords2.ARM, [
                Edge('y', range(1, 2), Node(ExampleWords2.ARMY)),
            ])),
        ])),
    ])),
    Edge('m', range(2, 3), Node(None, [
        Edge('a', range(2, 3), Node(None, [
            Edge('n', range(2, 3), Node(ExampleWords2.MAN)),
        ])),
    ])),
])
