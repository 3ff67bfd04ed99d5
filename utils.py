# --- utils.py ---

import sys
import time
from colorama import Fore, Style, init

init()

# Dictionary to check against
DICTIONARY = "./words.txt"
DICT_TIMEOUT = 10

# Letters in the alphabet
CHARS = 26

# Maximum fragment length, and the length a word must exceed to lose
MAX_LENGTH = 45
MIN_LENGTH = 3

VERBOSE = False
start_time = None


class GhostError(Exception):
    """Base class for the fatal errors the CLI turns into exit codes."""


class LoadError(GhostError):
    """The dictionary could not be read or the trie could not be built."""


class UnloadError(GhostError):
    """Tearing down the trie did not release every node."""


class InvalidArgument(GhostError):
    """Bad or missing player count."""


def log_with_time(msg, color=Fore.LIGHTBLUE_EX):
    """Print ``msg`` with a timestamp."""
    global start_time
    if start_time is None:
        start_time = time.time()
    elapsed = time.time() - start_time
    mins = int(elapsed // 60)
    secs = elapsed % 60
    timestamp = Style.DIM + f"[{mins:02}:{secs:06.3f}]" + Style.RESET_ALL
    print(f"{timestamp} {color}{msg}{Style.RESET_ALL}", flush=True)

def vlog(msg, t0=None):
    if VERBOSE:
        if t0 is not None:
            elapsed = time.time() - t0
            log_with_time(f"{msg} (took {elapsed:.3f}s)")
        else:
            log_with_time(msg)

def log_error(msg):
    """Write a fatal diagnostic to stderr."""
    print(f"{Fore.RED}{msg}{Style.RESET_ALL}", file=sys.stderr, flush=True)
