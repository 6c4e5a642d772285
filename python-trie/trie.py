from typing import Dict, Iterable, Iterator, List, NamedTuple, Optional


class RemoveOutcome(NamedTuple):
    """
    Result of removing a word below one node.

    Attributes:
        found (bool):
            True if the removed word was present (its terminal node
            had is_word set).
        now_empty (bool):
            True if the node is no longer a word and has no children,
            so its parent should detach it.
    """
    found: bool
    now_empty: bool


NOT_FOUND = RemoveOutcome(found=False, now_empty=False)


class TrieNode:
    """
    A single character position in the trie.

    Attributes:
        value (str):
            The character on the edge from the parent to this node.
        is_word (bool):
            True if the path from the root to this node spells a word.
        children (dict[str, TrieNode]):
            Mapping from a character to the next TrieNode, in insertion order.
    """
    __slots__ = ("value", "is_word", "children")

    def __init__(self, value: str):
        self.value = value
        self.is_word = False
        self.children: Dict[str, "TrieNode"] = {}

    def __repr__(self) -> str:
        return f"TrieNode({self.value!r}, is_word={self.is_word}, children={list(self.children)})"

    def complete_words(self, stem: str) -> List[str]:
        """
        Collect every word ending at or below this node.

        Args:
            stem (str): The characters on the path above this node.

        Returns:
            list[str]: Words in pre-order, this node's own word first.
        """
        return list(self.iter_complete_words(stem))

    def iter_complete_words(self, stem: str) -> Iterator[str]:
        """
        Lazily yield the same sequence as complete_words().

        The walk keeps its own stack of (node, stem) frames, so word
        length is not bounded by the interpreter's recursion limit.

        Yields:
            str: Next word at or below this node.
        """
        stack = [(self, stem)]
        while stack:
            node, stem = stack.pop()
            word = stem + node.value
            if node.is_word:
                yield word
            # reversed, so the first-inserted child is popped first
            stack.extend((child, word) for child in reversed(node.children.values()))

    def remove_word(self, word: str, idx: int) -> RemoveOutcome:
        """
        Unmark word[idx:] below this node and prune what it leaves empty.

        Args:
            word (str): The full word being removed.
            idx (int): Index of the first character below this node.

        Returns:
            RemoveOutcome: Whether the word was found, and whether this
            node is now empty so its parent should detach it.
        """
        path = [self]
        node = self
        for ch in word[idx:]:
            node = node.children.get(ch)
            if node is None:
                return NOT_FOUND
            path.append(node)

        if not node.is_word:
            return NOT_FOUND
        node.is_word = False

        child = path.pop()
        outcome = RemoveOutcome(found=True, now_empty=not child.children)
        while path and outcome.now_empty:
            parent = path.pop()
            del parent.children[child.value]
            outcome = RemoveOutcome(found=True, now_empty=not parent.children and not parent.is_word)
            child = parent
        return outcome


class Trie:
    """
    A prefix tree supporting insertion, membership checks, prefix
    completion, removal with pruning, and iteration over all stored words.

    Words are enumerated depth-first, a word before any longer word it
    prefixes, siblings in the order they were first inserted.
    """

    def __init__(self):
        """Initialize an empty trie."""
        self.children: Dict[str, TrieNode] = {}

    @classmethod
    def build_from(cls, words: Iterable[str]) -> "Trie":
        """
        Build a trie by inserting each word in order.

        Args:
            words (Iterable[str]): The words to insert.

        Returns:
            Trie: A new trie holding every word.
        """
        trie = cls()
        for word in words:
            trie.insert(word)
        return trie

    def _walk(self, s: str) -> Optional[TrieNode]:
        children = self.children
        node = None
        for ch in s:
            node = children.get(ch)
            if node is None:
                return None
            children = node.children
        return node

    # -------------------------------------------------------------
    # Core Operations
    # -------------------------------------------------------------

    def insert(self, word: str) -> None:
        """
        Insert a word into the trie. Inserting "" does nothing.

        Args:
            word (str): The word to insert.

        Returns:
            None
        """
        if not word:
            return

        children = self.children
        node = None
        for ch in word:
            node = children.get(ch)
            if node is None:
                node = children[ch] = TrieNode(ch)
            children = node.children
        node.is_word = True

    def contains(self, word: str) -> bool:
        """
        Determine whether a word was inserted into the trie.

        Args:
            word (str): The word to look up.

        Returns:
            bool: True if the word exists, False otherwise (including
            when it is only a prefix of a longer word).
        """
        node = self._walk(word)
        return node is not None and node.is_word

    def get_completions(self, prefix: str) -> List[str]:
        """
        Retrieve every word in the trie that begins with the given prefix.

        Args:
            prefix (str): The prefix to complete.

        Returns:
            list[str]: Matching words, the prefix itself first if it
            is a word. Empty for an empty or unknown prefix.
        """
        node = self._walk(prefix)
        if node is None:
            return []
        # the landing node supplies the prefix's last character
        return node.complete_words(prefix[:-1])

    def remove(self, word: str) -> bool:
        """
        Remove a word and prune nodes left without words beneath them.

        Args:
            word (str): The word to remove.

        Returns:
            bool: True if the word was removed,
                  False if the word was not present.
        """
        if not word:
            return False

        ch = word[0]
        node = self.children.get(ch)
        if node is None:
            return False

        outcome = node.remove_word(word, 1)
        if outcome.now_empty:
            del self.children[ch]
        return outcome.found

    # -------------------------------------------------------------
    # Additional Functionalities
    # -------------------------------------------------------------

    def starts_with(self, prefix: str) -> bool:
        """
        Check if any word in the trie begins with the given prefix.

        Args:
            prefix (str): The prefix to test.

        Returns:
            bool: True if at least one word begins with the prefix.
        """
        if not prefix:
            return bool(self.children)
        return self._walk(prefix) is not None

    def words(self) -> List[str]:
        """
        Collect every word stored in the trie.

        Returns:
            list[str]: All words, in enumeration order.
        """
        out: List[str] = []
        for node in self.children.values():
            out.extend(node.complete_words(""))
        return out

    def iter_words(self) -> Iterator[str]:
        """
        Iterate over all words stored in the trie without collecting them.

        Yields:
            str: Next word in the trie.
        """
        for node in self.children.values():
            yield from node.iter_complete_words("")

    def __iter__(self) -> Iterator[str]:
        return self.iter_words()

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and self.contains(word)

    def __len__(self) -> int:
        return sum(1 for _ in self.iter_words())

    def __bool__(self) -> bool:
        return bool(self.children)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(<{len(self)} words>)"
