# node.py
# One state of the word-counting automaton. States live in the tree's arena
# and refer to each other by integer id only.

from typing import Dict, Iterable, List, Optional


class Node:
    """
    A trie state:
      - id: position in the owning tree's arena, assigned once at creation
      - prefix: the string that leads from the root to this state
      - edges: letter -> child state id
    The node never keeps a reference to its tree; operations that need to
    create or resolve other states take the tree as an argument.
    """

    __slots__ = ("_id", "_prefix", "_edges")

    def __init__(self, state_id: int, prefix: str = ""):
        self._id = state_id
        self._prefix = prefix
        self._edges: Dict[str, int] = {}

    @property
    def id(self) -> int:
        return self._id

    @property
    def prefix(self) -> str:
        return self._prefix

    def child(self, letter: str) -> Optional[int]:
        """Id of the state reached on ``letter``, or None without an edge."""
        return self._edges.get(letter)

    def letters(self) -> List[str]:
        return sorted(self._edges)

    def link(self, letter: str, child_id: int) -> None:
        self._edges[letter] = child_id

    def add(self, suffix: str, tree) -> int:
        """
        Insert ``suffix`` below this state, creating states for unseen
        prefixes. The state reached once the suffix is consumed is registered
        with ``tree`` as completing the word equal to its prefix; its id is
        returned.

        An empty suffix marks this state itself as a completion state, so
        adding "" from the root makes the root complete the empty word.
        """
        node = self
        for ch in suffix:
            nxt = node._edges.get(ch)
            if nxt is None:
                nxt = tree.new_state(node._prefix + ch)
                node.link(ch, nxt)
            node = tree.state(nxt)
        tree.add_final(node._prefix, node._id)
        return node._id

    def direct_transitions(self, alphabet: Iterable[str], default: Optional[int] = None) -> List[Optional[int]]:
        """
        Child ids for each letter of ``alphabet``, in order. Letters without
        an edge give ``default``; resolving them is the tree's job.
        """
        edges = self._edges
        return [edges.get(ch, default) for ch in alphabet]

    def show(self, tree) -> str:
        """Nested dump of this subtree, e.g. ``[0] (a: a[1] (b: ab[2]))``."""
        parts = [f"{self._prefix}[{self._id}]"]
        if self._edges:
            subs = [f"{ch}: {tree.state(self._edges[ch]).show(tree)}" for ch in self.letters()]
            parts.append(" (" + ", ".join(subs) + ")")
        return "".join(parts)

    def __repr__(self) -> str:
        return f"Node(id={self._id}, prefix={self._prefix!r}, edges={self._edges!r})"
