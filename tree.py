# tree.py
# Builds the trie for a fixed set of words and completes it into a total
# transition table for a counting DFA.

from typing import Dict, Iterable, List, Optional, Tuple

from node import Node
from utils import ROOT_ID


class StringTree:
    """
    Owner of every state of the counting automaton.

    Usage:
      tree = StringTree()
      for w in words:
          tree.add(w)
      table = tree.derive_table()

    Internals:
      _states: arena of Node records, index == state id, root at 0
      _prefix_table: prefix -> state id, one entry per state
      _finals: completed word -> state id
      _letters: every character seen in an added word

    State ids follow the order in which prefixes are first seen, so the same
    word set added in a different order gives an isomorphic table with other
    numbering.
    """

    __slots__ = ("_states", "_prefix_table", "_finals", "_letters")

    def __init__(self, words: Iterable[str] = ()):
        self._states: List[Node] = []
        self._prefix_table: Dict[str, int] = {}
        self._finals: Dict[str, int] = {}
        self._letters = set()
        self.new_state("")
        for w in words:
            self.add(w)

    # ---------- Construction ----------
    def add(self, word: str) -> None:
        """Add ``word`` to the automaton. Adding a word twice changes nothing."""
        self._letters.update(word)
        self._states[ROOT_ID].add(word, self)

    def new_state(self, prefix: str) -> int:
        """Create and register the state for ``prefix``. Used by Node.add."""
        state_id = len(self._states)
        self._states.append(Node(state_id, prefix))
        self._prefix_table[prefix] = state_id
        return state_id

    def add_final(self, word: str, state_id: int) -> None:
        """Record that reaching ``state_id`` completes ``word``."""
        self._finals[word] = state_id

    # ---------- Accessors ----------
    def count(self) -> int:
        """Number of states created so far."""
        return len(self._states)

    def root_id(self) -> int:
        return ROOT_ID

    def state(self, state_id: int) -> Node:
        return self._states[state_id]

    def lookup(self, prefix: str) -> Optional[int]:
        """Id of the state reached by ``prefix``, or None."""
        return self._prefix_table.get(prefix)

    def alphabet(self) -> Tuple[str, ...]:
        """Observed characters in code point order; this is the column order."""
        return tuple(sorted(self._letters))

    def alphabet_size(self) -> int:
        return len(self._letters)

    def word_list(self) -> List[str]:
        return sorted(self._finals)

    def completion_states(self) -> Dict[str, int]:
        """Word -> id of the state reached on completing it (a copy)."""
        return {w: self._finals[w] for w in sorted(self._finals)}

    # ---------- Table ----------
    def derive_table(self) -> List[List[int]]:
        """
        Return ``table[state][column]`` for every state and every letter of
        ``alphabet()``. A cell is the child on that letter when the trie has
        the edge, otherwise the fallback state from ``resolve_fallback``.

        The table is a fresh snapshot; words added afterwards are not
        reflected in it.
        """
        letters = self.alphabet()
        table = []
        for node in self._states:
            row = node.direct_transitions(letters)
            for col, to in enumerate(row):
                if to is None:
                    row[col] = self.resolve_fallback(node.id, letters[col])
            table.append(row)
        return table

    def resolve_fallback(self, state_id: int, letter: str) -> int:
        """
        Longest suffix of ``prefix + letter`` that is itself a known prefix,
        as a state id; the root when no non-empty suffix matches.
        """
        candidate = self._states[state_id].prefix + letter
        prefix_table = self._prefix_table
        while candidate:
            hit = prefix_table.get(candidate)
            if hit is not None:
                return hit
            candidate = candidate[1:]
        return ROOT_ID

    def show(self) -> str:
        """Nested text dump of the whole trie."""
        return self._states[ROOT_ID].show(self)

    def __len__(self) -> int:
        return len(self._states)
