# tree.py
# Ordered word dictionary: plain binary search tree or red-black tree.
# An alternative to HashTable when sorted output matters more than speed.
# - Node keeps a frequency counter, duplicates never add nodes.
# - Everything is iterative (explicit stacks) so a degenerate BST built
#   from sorted input cannot hit the recursion limit.
# - No deletion.

from __future__ import annotations
from enum import Enum
from typing import Callable, Iterator, List, Optional, TextIO, Tuple


class TreeKind(Enum):
    BST = "bst"
    RBT = "rbt"


class Colour(Enum):
    RED = "red"
    BLACK = "black"


def _is_red(node: Optional["WordTree.Node"]) -> bool:
    return node is not None and node.colour is Colour.RED


class WordTree:
    """Binary search tree of word -> frequency, optionally red-black balanced."""

    class Node:
        __slots__ = ("word", "colour", "left", "right", "freq")

        def __init__(self, word: str, colour: Colour):
            self.word = word
            self.colour = colour
            self.left: Optional[WordTree.Node] = None
            self.right: Optional[WordTree.Node] = None
            self.freq = 1

    def __init__(self, kind: TreeKind = TreeKind.BST):
        self.kind = kind
        self.root: Optional[WordTree.Node] = None
        self._size = 0

    # rotations/fixing -----------------------------------------------------------
    @staticmethod
    def _rotate_right(r: "WordTree.Node") -> "WordTree.Node":
        pivot = r.left
        r.left = pivot.right
        pivot.right = r
        return pivot

    @staticmethod
    def _rotate_left(r: "WordTree.Node") -> "WordTree.Node":
        pivot = r.right
        r.right = pivot.left
        pivot.left = r
        return pivot

    @classmethod
    def _fix(cls, r: "WordTree.Node") -> "WordTree.Node":
        """
        Repair a red child with a red grandchild under r.
        Red uncle: recolour. Black uncle: rotate (twice for the inner cases).
        Returns the node now at r's position.
        """
        if _is_red(r.left) and _is_red(r.left.left):
            if _is_red(r.right):
                cls._recolour(r)
            else:
                r = cls._rotate_right(r)
                r.colour, r.right.colour = Colour.BLACK, Colour.RED
        elif _is_red(r.left) and _is_red(r.left.right):
            if _is_red(r.right):
                cls._recolour(r)
            else:
                r.left = cls._rotate_left(r.left)
                r = cls._rotate_right(r)
                r.colour, r.right.colour = Colour.BLACK, Colour.RED
        elif _is_red(r.right) and _is_red(r.right.left):
            if _is_red(r.left):
                cls._recolour(r)
            else:
                r.right = cls._rotate_right(r.right)
                r = cls._rotate_left(r)
                r.colour, r.left.colour = Colour.BLACK, Colour.RED
        elif _is_red(r.right) and _is_red(r.right.right):
            if _is_red(r.left):
                cls._recolour(r)
            else:
                r = cls._rotate_left(r)
                r.colour, r.left.colour = Colour.BLACK, Colour.RED
        return r

    @staticmethod
    def _recolour(r: "WordTree.Node") -> None:
        r.colour = Colour.RED
        r.left.colour = Colour.BLACK
        r.right.colour = Colour.BLACK

    # insertion -------------------------------------------------------------------
    def insert(self, word: str) -> int:
        """Insert word (or bump its count). Returns the word's frequency."""
        colour = Colour.RED if self.kind is TreeKind.RBT else Colour.BLACK
        if self.root is None:
            self.root = WordTree.Node(word, Colour.BLACK)
            self._size = 1
            return 1

        path: List[WordTree.Node] = []
        node = self.root
        while node is not None:
            if word == node.word:
                node.freq += 1
                return node.freq
            path.append(node)
            node = node.left if word < node.word else node.right

        parent = path[-1]
        if word < parent.word:
            parent.left = WordTree.Node(word, colour)
        else:
            parent.right = WordTree.Node(word, colour)
        self._size += 1

        if self.kind is TreeKind.RBT:
            self._fix_path(path)
        return 1

    def _fix_path(self, path: List["WordTree.Node"]) -> None:
        """Run _fix on every ancestor of the new node, bottom up, relinking rotated subtrees."""
        for depth in range(len(path) - 1, -1, -1):
            node = path[depth]
            fixed = self._fix(node)
            if fixed is node:
                continue
            if depth == 0:
                self.root = fixed
            else:
                above = path[depth - 1]
                if above.left is node:
                    above.left = fixed
                else:
                    above.right = fixed
        self.root.colour = Colour.BLACK

    def insert_many(self, words) -> None:
        for w in words:
            self.insert(w)

    # query -----------------------------------------------------------------------
    def search(self, word: str) -> int:
        """Frequency of word, 0 if absent."""
        node = self.root
        while node is not None:
            if word == node.word:
                return node.freq
            node = node.left if word < node.word else node.right
        return 0

    def __contains__(self, word: str) -> bool:
        return self.search(word) > 0

    def __len__(self) -> int:
        return self._size

    # traversal -------------------------------------------------------------------
    def inorder(self) -> Iterator[Tuple[int, str]]:
        """(freq, word) in sorted word order."""
        stack: List[WordTree.Node] = []
        node = self.root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.freq, node.word
            node = node.right

    def preorder(self) -> Iterator[Tuple[int, str]]:
        """(freq, word) with each node before its subtrees."""
        stack = [self.root] if self.root else []
        while stack:
            node = stack.pop()
            yield node.freq, node.word
            if node.right:
                stack.append(node.right)
            if node.left:
                stack.append(node.left)

    def traverse(self, visit: Callable[[int, str], None]) -> None:
        for freq, word in self.inorder():
            visit(freq, word)

    def depth(self) -> int:
        """Edges on the longest root-to-leaf path (0 for empty or single-node trees)."""
        if self.root is None:
            return 0
        best = 0
        stack = [(self.root, 0)]
        while stack:
            node, d = stack.pop()
            best = max(best, d)
            for child in (node.left, node.right):
                if child is not None:
                    stack.append((child, d + 1))
        return best

    # graphviz --------------------------------------------------------------------
    def output_dot(self, out: TextIO) -> None:
        """
        Write a Graphviz DOT description of the tree. Render it with e.g.
            dot -Tpdf < tree.dot > tree.pdf
        """
        out.write("digraph tree {\nnode [shape = Mrecord, penwidth = 2];\n")
        stack: list = [("node", self.root)] if self.root else []
        while stack:
            item = stack.pop()
            if item[0] == "edge":
                _, parent, port, child = item
                out.write(f'"{parent.word}":{port} -> "{child.word}":f0;\n')
                continue
            node = item[1]
            red = self.kind is TreeKind.RBT and node.colour is Colour.RED
            out.write(
                f'"{node.word}"[label="{{<f0>{node.word}:{node.freq}|{{<f1>|<f2>}}}}"'
                f'color={"red" if red else "black"}];\n'
            )
            # popped in order: left subtree, left edge, right subtree, right edge
            if node.right is not None:
                stack.append(("edge", node, "f2", node.right))
                stack.append(("node", node.right))
            if node.left is not None:
                stack.append(("edge", node, "f1", node.left))
                stack.append(("node", node.left))
        out.write("}\n")
