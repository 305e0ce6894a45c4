# scanner.py
# Single-pass word counting over a derived transition table.

from collections import defaultdict
from typing import Dict, Iterable, List

from tree import StringTree


class WordCounter:
    """Counts occurrences of a tree's words while reading text once.

    The table is derived when the counter is created, so words added to the
    tree afterwards need a new counter. Characters outside the alphabet can
    not continue any word and send the scanner back to the start state.
    """

    def __init__(self, tree: StringTree):
        self._table = tree.derive_table()
        self._columns = {ch: i for i, ch in enumerate(tree.alphabet())}
        self._root = tree.root_id()
        self._words = tree.word_list()
        self._increments: Dict[int, List[str]] = defaultdict(list)
        for word, state_id in tree.completion_states().items():
            self._increments[state_id].append(word)
        self._state = self._root
        self._counts = dict.fromkeys(self._words, 0)

    @property
    def state(self) -> int:
        return self._state

    def reset(self) -> None:
        self._state = self._root
        self._counts = dict.fromkeys(self._words, 0)

    def feed(self, text: Iterable[str]) -> "WordCounter":
        table = self._table
        columns = self._columns
        increments = self._increments
        counts = self._counts
        state = self._state
        for ch in text:
            col = columns.get(ch)
            if col is None:
                state = self._root
                continue
            state = table[state][col]
            for word in increments.get(state, ()):
                counts[word] += 1
        self._state = state
        return self

    def counts(self) -> Dict[str, int]:
        return dict(self._counts)


def count_words(words: Iterable[str], text: str) -> Dict[str, int]:
    """Build an automaton for ``words`` and count them in ``text``."""
    return WordCounter(StringTree(words)).feed(text).counts()
