# trie.py
# Arena-backed prefix trie for the Ghost dictionary.
# Nodes live in one list and point at their children by index, so teardown
# never has to recurse.

from typing import Dict, Iterable, Iterator, List, Optional, Tuple

from utils import CHARS, LoadError


def normalize_word(w: str) -> Optional[str]:
    """Case-fold ``w``; return None if anything but a-z is left."""
    ww = w.lower()
    if not ww:
        return None
    for ch in ww:
        if not 0 <= ord(ch) - ord("a") < CHARS:
            return None
    return ww


class Trie:
    """
    Prefix trie with the API the turn engine needs:
      - Trie.build(words) -> Trie
      - descend(node, letter) -> Optional[node]
      - is_terminal(node) -> bool
      - destroy() -> number of nodes released
    Internals:
      nodes: List[{'term': bool, 'edges': Dict[str, int]}]
      node 0 is the root. A node handed to callers is its index.
    """

    __slots__ = ("_nodes", "word_count", "skipped")

    def __init__(self, nodes: List[Dict], word_count: int = 0, skipped: Optional[List[str]] = None):
        # nodes[i] = {'term': bool, 'edges': {char: child_index}}
        self._nodes = nodes
        self.word_count = word_count
        self.skipped = skipped or []

    # ---------- Construction ----------
    @classmethod
    def empty(cls) -> "Trie":
        """A trie that was never built: no root, nothing to release."""
        return cls([])

    @classmethod
    def build(cls, words: Iterable[str]) -> "Trie":
        """
        Build a trie from the given words. Words are lowercased; any word with
        a character outside a-z is skipped and recorded in ``skipped``.
        """
        trie = cls([{"term": False, "edges": {}}])  # root at 0
        nodes = trie._nodes

        def add_word(w: str) -> bool:
            cur = 0
            edges = nodes[cur]["edges"]
            for ch in w:
                nxt = edges.get(ch)
                if nxt is None:
                    nodes.append({"term": False, "edges": {}})
                    nxt = len(nodes) - 1
                    edges[ch] = nxt
                cur = nxt
                edges = nodes[cur]["edges"]
            fresh = not nodes[cur]["term"]
            nodes[cur]["term"] = True
            return fresh

        try:
            for w in words:
                ww = normalize_word(w)
                if ww is None:
                    if w:
                        trie.skipped.append(w)
                    continue
                if add_word(ww):
                    trie.word_count += 1
        except MemoryError as exc:
            trie.destroy()
            raise LoadError("out of memory while building the dictionary") from exc

        return trie

    # ---------- Public API ----------
    @property
    def root(self) -> Optional[int]:
        return 0 if self._nodes else None

    def __len__(self) -> int:
        return len(self._nodes)

    def _live(self, node) -> bool:
        return node is not None and 0 <= node < len(self._nodes)

    def descend(self, node: Optional[int], letter: str) -> Optional[int]:
        """Child of ``node`` along ``letter``, or None if there is no such edge."""
        if not self._live(node):
            return None
        return self._nodes[node]["edges"].get(letter)

    def is_terminal(self, node: Optional[int]) -> bool:
        """True if some dictionary word ends exactly at ``node``."""
        if not self._live(node):
            return False
        return bool(self._nodes[node]["term"])

    def has_children(self, node: Optional[int]) -> bool:
        return self._live(node) and bool(self._nodes[node]["edges"])

    def extensions(self, node: Optional[int]) -> Iterator[Tuple[str, bool]]:
        """
        Yield (next_char, is_terminal_after_appending_char) for every child of
        ``node``. A dead or missing node yields nothing.
        """
        if not self._live(node):
            return
        edges: Dict[str, int] = self._nodes[node]["edges"]
        for ch, child in edges.items():
            yield ch, bool(self._nodes[child]["term"])

    def walk(self, s: str) -> Optional[int]:
        """Return node index after consuming s from the root, or None if no such path."""
        node = self.root
        for ch in s:
            node = self.descend(node, ch)
            if node is None:
                return None
        return node

    def has_prefix(self, s: str) -> bool:
        """True if s is a path from the root (empty string is always a prefix)."""
        return self.walk(s) is not None

    def is_word(self, s: str) -> bool:
        """True if s is in the trie as a terminal word."""
        return self.is_terminal(self.walk(s))

    # ---------- Teardown ----------
    def destroy(self) -> int:
        """
        Release every node, children before their parent. Returns how many
        nodes were released; a destroyed or empty trie releases nothing.
        """
        nodes = self._nodes
        if not nodes:
            return 0

        released = 0
        seen = [False] * len(nodes)
        stack: List[Tuple[int, bool]] = [(0, False)]
        while stack:
            idx, expanded = stack.pop()
            if expanded:
                nodes[idx]["edges"].clear()
                nodes[idx]["term"] = False
                released += 1
                continue
            if seen[idx]:
                # a second parent would mean the tree was corrupted
                continue
            seen[idx] = True
            stack.append((idx, True))
            for child in nodes[idx]["edges"].values():
                stack.append((child, False))

        self._nodes = []
        self.word_count = 0
        return released
