# --- utils.py ---

import sys
import time
import threading
from colorama import Fore, Style, init

init()

# Program targets the emitter knows how to write
TARGETS = ("cpp", "python")
DEFAULT_TARGET = "cpp"

# Start state of every derived automaton
ROOT_ID = 0

VERBOSE = False
start_time = None

# Lock used for synchronized printing
PRINT_LOCK = threading.Lock()

def log_with_time(msg, color=Fore.LIGHTBLUE_EX):
    """Print ``msg`` to stderr with a timestamp.

    stdout is reserved for the emitted program, so all diagnostics go to
    stderr.
    """
    elapsed = 0.0 if start_time is None else time.time() - start_time
    mins = int(elapsed // 60)
    secs = elapsed % 60
    timestamp = Style.DIM + f"[{mins:02}:{secs:06.3f}]" + Style.RESET_ALL
    with PRINT_LOCK:
        print(f"{timestamp} {color}{msg}{Style.RESET_ALL}", file=sys.stderr, flush=True)

def vlog(msg, t0=None):
    if VERBOSE:
        if t0 is not None:
            elapsed = time.time() - t0
            log_with_time(f"{msg} (took {elapsed:.3f}s)")
        else:
            log_with_time(msg)
