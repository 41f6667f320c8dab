"""This module represents the implementation of a Trie structure that's
used for exact word lookups and for censoring dictionary words in text.
"""


class Node:
    """Represent a vertex in the trie structure."""

    def __init__(self, terminal: bool = False) -> None:
        """Initialize a new trie vertex.

        Args:
            terminal (bool): Whether a dictionary word ends exactly
            at this vertex.

        Attributes:
            terminal (bool): Indicates whether this vertex marks the
            end of a dictionary word.
            children (dict): A dictionary mapping single characters to
            their corresponding child Node instances.

        """
        self.terminal = terminal
        self.children: dict[str, Node] = {}


class Trie:
    """Represents the dictionary trie used for lookups and filtering."""

    def __init__(self) -> None:
        """Initialize an empty trie."""
        self.root = Node()

    def add(self, word: str) -> None:
        """Insert a word into the trie.

        Adding a word that is already present leaves the trie unchanged.

        Args:
            word (str): The word to be inserted. The empty string marks
            the root itself as terminal.

        """
        node = self.root
        for char in word:
            child = node.children.get(char)
            if child is None:
                child = Node()
                node.children[char] = child
            node = child
        node.terminal = True

    def search(self, word: str) -> bool:
        """Check whether `word` was added to the trie.

        Args:
            word (str): The word to look up.

        Returns:
            bool: True only if `word` was added as a complete word.
            A strict prefix of an added word is not a member.

        """
        node = self.root
        for char in word:
            node = node.children.get(char)
            if node is None:
                return False
        return node.terminal

    def filter(self, text: str, replacement: str) -> str:
        """Replace every dictionary word found in `text` by `replacement`.

        The scan keeps a candidate start (`begin`), a lookahead cursor
        (`position`) and the vertex reached by `text[begin:position]`.
        A candidate is replaced as soon as it reaches a terminal vertex,
        so with both "ab" and "abc" in the trie "abc" becomes
        `replacement + "c"`. A candidate that cannot be extended, including
        one cut off by the end of the text, gives up a single character
        and the scan restarts right after it.

        Args:
            text (str): The text to scan.
            replacement (str): The token substituted for each match,
            whatever the length of the matched span.

        Returns:
            str: The filtered text.

        """
        result: list[str] = []
        length = len(text)
        begin = position = 0
        current = self.root

        while begin < length:
            node = None
            if position < length:
                node = current.children.get(text[position])

            if node is None:
                # No match starts at `begin`
                result.append(text[begin])
                begin += 1
                position = begin
                current = self.root
            elif node.terminal:
                result.append(replacement)
                position += 1
                begin = position
                current = self.root
            else:
                current = node
                position += 1

        return "".join(result)

    def __contains__(self, word: object) -> bool:
        """Support `word in trie`; non-string operands are never members."""
        return isinstance(word, str) and self.search(word)
