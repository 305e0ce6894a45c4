import re

from colorama import Fore
from utils import log_with_time

_WHITESPACE = re.compile(r"\s")


def check(word, i):
    """Return the problems with argument ``i``; empty when it is usable."""
    errors = []
    if not word:
        errors.append(f"Argument {i} was empty")
    if _WHITESPACE.search(word):
        errors.append(f'Argument "{word}" contained a whitespace character.')
    return errors


def check_args(words):
    """Check every word and report each problem. True when all words are OK."""
    all_good = True
    for i, word in enumerate(words):
        for msg in check(word, i):
            log_with_time(msg, color=Fore.RED)
            all_good = False
    return all_good
