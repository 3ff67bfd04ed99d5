import time
import requests
from colorama import Fore

import utils
from utils import DICTIONARY, DICT_TIMEOUT, MAX_LENGTH, LoadError, UnloadError, log_with_time, vlog
from trie import Trie


def _split_lines(text):
    # lines end at a line feed only; other separators stay in the word
    return text.split("\n")


def _read_words(path):
    try:
        with open(path, "r", encoding="utf-8", newline="") as f:
            return _split_lines(f.read())
    except (OSError, UnicodeDecodeError) as e:
        raise LoadError(f"Could not load {path}: {e}") from e


def _download_words(url):
    try:
        resp = requests.get(url, timeout=DICT_TIMEOUT)
        resp.raise_for_status()
    except requests.RequestException as e:
        raise LoadError(f"Could not download {url}: {e}") from e
    return _split_lines(resp.text)


def load_dictionary(path=DICTIONARY, url=None):
    """Read the word list at ``path`` (or download it from ``url``) into a Trie.

    One word per line. Words longer than MAX_LENGTH, and words with anything
    other than the letters a-z, are skipped.
    """
    t0 = time.time()
    source = url or path
    if url:
        vlog(f"⟳ Downloading dictionary from {url}…")
        lines = _download_words(url)
    else:
        vlog(f"⟳ Reading dictionary from {path}…")
        lines = _read_words(path)

    words = []
    too_long = 0
    for line in lines:
        w = line.strip(" \t\r")
        if not w:
            continue
        if len(w) > MAX_LENGTH:
            too_long += 1
            continue
        words.append(w)

    trie = Trie.build(words)
    if trie.skipped:
        vlog(f"Skipped {len(trie.skipped)} line(s) with characters outside a-z")
        for w in trie.skipped[:5]:
            vlog(f"  skipped {w!r}")
    if too_long:
        vlog(f"Skipped {too_long} word(s) longer than {MAX_LENGTH} letters")

    if trie.word_count == 0:
        trie.destroy()
        raise LoadError(f"Could not load {source}: no usable words")

    vlog(f"Dictionary loaded ({trie.word_count} words, {len(trie)} nodes)", t0)
    if utils.VERBOSE:
        log_with_time(f"✅ {trie.word_count} words", color=Fore.GREEN)
    return trie


def unload_dictionary(trie, source=DICTIONARY):
    """Release every node of ``trie``. ``None`` is a no-op."""
    if trie is None:
        return
    expected = len(trie)
    released = trie.destroy()
    if released != expected:
        raise UnloadError(f"Could not unload {source}: released {released} of {expected} nodes")
    vlog(f"Dictionary unloaded ({released} nodes released)")
