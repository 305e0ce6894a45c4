# emitter.py
# Writes a standalone program that counts the tree's words on stdin.

import sys

from tree import StringTree
from utils import TARGETS, DEFAULT_TARGET, vlog


class EmitError(ValueError):
    """The automaton can not be written for the requested target."""


def _cpp_string(s):
    return '"' + s.replace("\\", "\\\\").replace('"', '\\"') + '"'


def _rows(table, indent):
    return (",\n" + indent).join("{" + ", ".join(str(x) for x in row) + "}" for row in table)


class ProgramBuilder:
    """
    Serializes a StringTree into source text.

    The emitted scanner starts in the root state, moves through the table on
    every character of the alphabet, goes back to the root on any other
    character and bumps a word's counter whenever it lands on that word's
    completion state. Counts are printed as ``word: n`` lines in
    ``word_list()`` order.
    """

    def __init__(self, tree: StringTree, out=None, target=DEFAULT_TARGET):
        if target not in TARGETS:
            raise EmitError(f"Unknown target '{target}' (expected one of: {', '.join(TARGETS)})")
        self.tree = tree
        self.out = out if out is not None else sys.stdout
        self.target = target

    def build(self) -> str:
        if self.target == "cpp":
            return self._build_cpp()
        return self._build_python()

    def print_program(self) -> None:
        text = self.build()
        self.out.write(text)
        self.out.flush()
        vlog(f"Wrote {self.target} program ({len(text)} chars)")

    # ---------- C++ ----------
    def _build_cpp(self) -> str:
        tree = self.tree
        letters = tree.alphabet()
        bad = [ch for ch in letters if ord(ch) > 127]
        if bad:
            raise EmitError(f"C++ target needs ASCII words; got {' '.join(repr(c) for c in bad)}")
        table = tree.derive_table()
        words = tree.word_list()
        finals = tree.completion_states()
        n_states, n_letters = len(table), len(letters)

        lines = [
            "#include <iostream>",
            "",
            f"static const int TABLE[{n_states}][{max(n_letters, 1)}] = {{",
            "    " + (_rows(table, "    ") if n_letters else ",\n    ".join("{0}" for _ in table)),
            "};",
            "",
            "static int column(int c) {",
            "    switch (c) {",
        ]
        for col, ch in enumerate(letters):
            lines.append(f"    case {ord(ch)}: return {col};")
        lines += [
            "    default: return -1;",
            "    }",
            "}",
            "",
            "int main() {",
            f"    long counts[{max(len(words), 1)}] = {{0}};",
            f"    int state = {tree.root_id()};",
            "    char ch;",
            "    while (std::cin.get(ch)) {",
            "        int col = column(static_cast<unsigned char>(ch));",
            "        if (col < 0) {",
            f"            state = {tree.root_id()};",
            "            continue;",
            "        }",
            "        state = TABLE[state][col];",
            "        switch (state) {",
        ]
        by_state = {}
        for i, w in enumerate(words):
            by_state.setdefault(finals[w], []).append(i)
        for state_id in sorted(by_state):
            bumps = " ".join(f"counts[{i}]++;" for i in by_state[state_id])
            lines.append(f"        case {state_id}: {bumps} break;")
        lines += [
            "        default: break;",
            "        }",
            "    }",
        ]
        for i, w in enumerate(words):
            lines.append(f'    std::cout << {_cpp_string(w + ": ")} << counts[{i}] << "\\n";')
        lines += [
            "    return 0;",
            "}",
            "",
        ]
        return "\n".join(lines)

    # ---------- Python ----------
    def _build_python(self) -> str:
        tree = self.tree
        letters = tree.alphabet()
        table = tree.derive_table()
        words = tree.word_list()
        finals = tree.completion_states()
        increments = {}
        for w in words:
            increments.setdefault(finals[w], []).append(w)

        lines = [
            "import sys",
            "",
            f"WORDS = {words!r}",
            f"COLUMNS = {{{', '.join(f'{ch!r}: {i}' for i, ch in enumerate(letters))}}}",
            "TABLE = [",
        ]
        lines += [f"    {row!r}," for row in table]
        lines += [
            "]",
            f"INCREMENTS = {increments!r}",
            f"START = {tree.root_id()}",
            "",
            "",
            "def count(text):",
            "    counts = dict.fromkeys(WORDS, 0)",
            "    state = START",
            "    for ch in text:",
            "        col = COLUMNS.get(ch)",
            "        if col is None:",
            "            state = START",
            "            continue",
            "        state = TABLE[state][col]",
            "        for word in INCREMENTS.get(state, ()):",
            "            counts[word] += 1",
            "    return counts",
            "",
            "",
            "if __name__ == '__main__':",
            "    for word, n in count(sys.stdin.read()).items():",
            "        print(f'{word}: {n}')",
            "",
        ]
        return "\n".join(lines)
