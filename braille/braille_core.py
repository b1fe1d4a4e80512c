# filename: braille_core.py

import logging
from collections import namedtuple

logger = logging.getLogger(__name__)

LEFT = "L"
RIGHT = "R"

# Tokens consumed per decoded character
CHUNK_WIDTH = 6


class Symbol(namedtuple("Symbol", ["character", "encoding"])):
    """A character paired with its L/R encoding.

    ``character`` is None for the placeholder symbols held by the root and
    by intermediate prefix nodes.
    """

    __slots__ = ()

    @classmethod
    def placeholder(cls, encoding=""):
        return cls(None, encoding)

    def has_character(self):
        return self.character is not None


class TreeNode:
    def __init__(self, symbol, left=None, right=None):
        self.symbol = symbol
        self.left = left
        self.right = right

    def is_leaf(self):
        return self.left is None and self.right is None

    def __repr__(self):
        return f"TreeNode({self.symbol!r})"


class BrailleLogic:
    def __init__(self):
        self.root = None

    def is_empty(self):
        return self.root is None

    def build(self, symbols):
        for symbol in symbols:
            self.insert(symbol)

    def insert(self, symbol):
        """Insert ``symbol`` at the slot named by its encoding.

        Missing intermediate nodes are created as placeholders carrying the
        prefix walked so far. Whatever already occupies the final slot is
        replaced, subtree included.
        """
        encoding = symbol.encoding
        if not encoding:
            raise ValueError("cannot insert a symbol with an empty encoding")

        if self.root is None:
            self.root = TreeNode(Symbol.placeholder())

        current = self.root
        for i, direction in enumerate(encoding[:-1]):
            prefix = encoding[:i + 1]
            # Anything that is not L goes right
            if direction == LEFT:
                if current.left is None:
                    current.left = TreeNode(Symbol.placeholder(prefix))
                current = current.left
            else:
                if current.right is None:
                    current.right = TreeNode(Symbol.placeholder(prefix))
                current = current.right

        leaf = TreeNode(symbol)
        if encoding[-1] == LEFT:
            replaced = current.left
            current.left = leaf
        else:
            replaced = current.right
            current.right = leaf

        if replaced is not None:
            logger.debug("insert %r replaced node at %s", symbol.character, encoding)
        else:
            logger.debug("insert %r at %s", symbol.character, encoding)

    def find_prefix_node(self, encoding):
        if self.root is None:
            return None

        current = self.root
        for direction in encoding:
            if direction == LEFT:
                current = current.left
            elif direction == RIGHT:
                current = current.right
            else:
                continue
            if current is None:
                return None
        return current

    def find_node(self, encoding):
        """Return the node at ``encoding`` if it holds a character, else None."""
        node = self.find_prefix_node(encoding)
        if node is None or not node.symbol.has_character():
            return None
        return node

    def find_encoding(self, character):
        if character is None:
            return None
        return self._find_encoding(self.root, character)

    def _find_encoding(self, node, character):
        if node is None:
            return None
        if node.symbol.character == character:
            return node.symbol.encoding

        found = self._find_encoding(node.left, character)
        if found is not None:
            return found
        return self._find_encoding(node.right, character)

    def symbols_with_prefix(self, prefix):
        result = []
        start = self.find_prefix_node(prefix)
        if start is not None:
            self._collect(start, result)
        return result

    def _collect(self, node, result):
        if node is None:
            return
        if node.symbol.has_character():
            result.append(node.symbol)
        self._collect(node.left, result)
        self._collect(node.right, result)

    def items(self):
        return [(s.character, s.encoding) for s in self.symbols_with_prefix("")]

    def __len__(self):
        return len(self.symbols_with_prefix(""))

    def __contains__(self, character):
        return self.find_encoding(character) is not None

    def decode(self, bits, chunk_width=CHUNK_WIDTH):
        """Translate ``bits`` one fixed-width chunk at a time.

        A trailing partial chunk is dropped and chunks with no character
        behind them are skipped, so the output may be shorter than
        ``len(bits) // chunk_width``.
        """
        if chunk_width < 1:
            raise ValueError(f"chunk width must be positive, got {chunk_width}")

        usable = len(bits) - len(bits) % chunk_width
        if usable != len(bits):
            logger.debug("dropping %d trailing tokens", len(bits) - usable)

        out = []
        for i in range(0, usable, chunk_width):
            chunk = bits[i:i + chunk_width]
            node = self.find_node(chunk)
            if node is None:
                logger.debug("skipping unknown chunk %s at offset %d", chunk, i)
                continue
            out.append(node.symbol.character)
        return "".join(out)

    def encode(self, text):
        out = []
        for character in text:
            encoding = self.find_encoding(character)
            if encoding is None:
                logger.debug("no encoding for %r", character)
                continue
            out.append(encoding)
        return "".join(out)

    def delete(self, character):
        """Remove ``character`` and prune ancestors left empty by it.

        Deleting a character that is not in the tree does nothing.
        """
        encoding = self.find_encoding(character)
        if encoding is None:
            return
        logger.debug("delete %r at %s", character, encoding)
        self._delete_encoding(encoding)

    def _delete_encoding(self, encoding):
        while encoding:
            parent = self.find_prefix_node(encoding[:-1])
            if parent is None:
                return

            direction = encoding[-1]
            target = parent.left if direction == LEFT else parent.right
            if target is None or not target.is_leaf():
                return

            if direction == LEFT:
                parent.left = None
            else:
                parent.right = None

            if not parent.is_leaf() or parent.symbol.has_character():
                return
            encoding = encoding[:-1]
            if encoding:
                logger.debug("pruning empty node at %s", encoding)

        # Walked back to a root with no children left
        if self.root is not None and self.root.is_leaf():
            self.root = None
