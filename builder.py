import argparse
import sys
import time

from colorama import Fore, Style

import utils
from utils import TARGETS, DEFAULT_TARGET, log_with_time, vlog, PRINT_LOCK
from tree import StringTree
from scanner import WordCounter
from emitter import ProgramBuilder, EmitError
from validate import check_args


USAGE = (
    "\nUsage: \n"
    "Run with the words as the arguments to create a program counting them (C++ unless --target is given).\n"
    "The resulting program is written to standard output.\n"
)


def print_usage():
    print(USAGE)


def print_table(tree, table=None):
    """Print the transition table with a header row of letters."""
    if table is None:
        table = tree.derive_table()
    letters = tree.alphabet()
    finals = set(tree.completion_states().values())
    width = max(len(str(len(table))), max((len(repr(c)) for c in letters), default=1)) + 1
    with PRINT_LOCK:
        header = " " * (width + 1) + "".join(f"{c!r:>{width}}" for c in letters)
        lines = [Style.DIM + header + Style.RESET_ALL]
        for state_id, row in enumerate(table):
            color = Fore.GREEN if state_id in finals else Fore.CYAN
            label = color + f"{state_id:>{width}}" + Style.RESET_ALL
            lines.append(label + " " + "".join(f"{to:>{width}}" for to in row))
        print("\n".join(lines), file=sys.stderr, flush=True)


def build_parser():
    parser = argparse.ArgumentParser(
        description="Builds a DFA that counts the given words and writes a program running it"
    )
    parser.add_argument("words", nargs="*", help="Words to count (no whitespace, not empty)")
    parser.add_argument(
        "--target", choices=TARGETS, default=DEFAULT_TARGET, help=f"Language of the emitted program (default: {DEFAULT_TARGET})"
    )
    parser.add_argument("--output", type=str, default=None, help="Write the program to this file instead of stdout")
    parser.add_argument("--show-tree", action="store_true", help="Print the trie to stderr")
    parser.add_argument("--show-table", action="store_true", help="Print the transition table to stderr")
    parser.add_argument(
        "--count", type=str, default=None, metavar="FILE", help="Count the words in FILE instead of emitting a program"
    )
    parser.add_argument("--verbose", action="store_true", help="Enable verbose logging")
    return parser


def count_file(tree, path):
    t0 = time.time()
    counter = WordCounter(tree)
    with open(path, "r", encoding="utf-8") as f:
        for line in f:
            counter.feed(line)
    vlog(f"Scanned {path}", t0)
    for word, n in counter.counts().items():
        print(f"{word}: {n}")


def run_builder(argv=None):
    args = build_parser().parse_args(argv)

    utils.start_time = time.time()
    utils.VERBOSE = args.verbose

    if not args.words or not check_args(args.words):
        print_usage()
        return 1

    t0 = time.time()
    tree = StringTree()
    for w in args.words:
        tree.add(w)
    vlog(f"Built trie: {tree.count()} states, {tree.alphabet_size()} letters, {len(tree.word_list())} words", t0)

    if args.show_tree:
        log_with_time(tree.show(), color=Fore.CYAN)
    if args.show_table:
        print_table(tree)

    try:
        if args.count:
            count_file(tree, args.count)
        elif args.output:
            # build before opening so a failed emit leaves an existing file intact
            text = ProgramBuilder(tree, target=args.target).build()
            with open(args.output, "w", encoding="utf-8") as f:
                f.write(text)
            log_with_time(f"Program written to {args.output}", color=Fore.GREEN)
        else:
            ProgramBuilder(tree, sys.stdout, target=args.target).print_program()
    except EmitError as e:
        log_with_time(f"Could not write program: {e}", color=Fore.RED)
        return 1
    except OSError as e:
        log_with_time(f"File error: {e}", color=Fore.RED)
        return 1
    except UnicodeDecodeError as e:
        log_with_time(f"Could not read {args.count}: {e}", color=Fore.RED)
        return 1
    return 0
