import argparse
import sys
import time

import utils
from utils import DICTIONARY, MIN_LENGTH, InvalidArgument, LoadError, UnloadError, log_error, vlog
from dictionary import load_dictionary, unload_dictionary
from display import greet, show_game_over
from game import GameState, run_game

USAGE = "Usage: ghost N\nwhere N is the number of players."

EXIT_OK = 0
EXIT_USAGE = 1
EXIT_BAD_PLAYERS = 2
EXIT_LOAD = 3
EXIT_UNLOAD = 4
EXIT_ABANDONED = 5


class _Parser(argparse.ArgumentParser):
    def error(self, message):
        raise InvalidArgument(message)


def build_parser():
    parser = _Parser(prog="ghost", description="Ghost: don't be the one who finishes the word.")
    parser.add_argument("players", nargs="*", help="Number of players (N >= 2)")
    parser.add_argument("--dict", default=DICTIONARY, help=f"Path to the word list, one word per line (default: {DICTIONARY})")
    parser.add_argument("--dict-url", default=None, help="Download the word list from this URL instead of reading --dict")
    parser.add_argument(
        "--min-length",
        type=int,
        default=MIN_LENGTH,
        help=f"Completing a word loses only when it is longer than this (default: {MIN_LENGTH})",
    )
    parser.add_argument("--no-banner", action="store_true", help="Skip the screen clear and title banner")
    parser.add_argument("--verbose", action="store_true", help="Enable verbose logging")
    return parser


def parse_player_count(raw):
    try:
        n = int(raw)
    except ValueError:
        raise InvalidArgument("Invalid argument. N must be an integer >= 2.") from None
    if n < 2:
        raise InvalidArgument("Invalid argument. N must be an integer >= 2.")
    return n


def run_ghost(argv=None):
    """Run one game from the command line and return the process exit code."""
    if argv is None:
        argv = sys.argv[1:]
    if "--no-banner" not in argv:
        greet()

    parser = build_parser()
    try:
        args = parser.parse_args(argv)
    except InvalidArgument as e:
        log_error(str(e))
        log_error(USAGE)
        return EXIT_USAGE

    utils.start_time = time.time()
    utils.VERBOSE = args.verbose

    if len(args.players) != 1:
        log_error(USAGE)
        return EXIT_USAGE

    try:
        n = parse_player_count(args.players[0])
    except InvalidArgument as e:
        log_error(str(e))
        return EXIT_BAD_PLAYERS
    if args.min_length < 0:
        log_error("Invalid argument. --min-length must be >= 0.")
        return EXIT_BAD_PLAYERS

    source = args.dict_url or args.dict
    try:
        trie = load_dictionary(args.dict, url=args.dict_url)
    except LoadError as e:
        log_error(str(e))
        return EXIT_LOAD

    status = EXIT_OK
    try:
        state = GameState.new(trie, n)
        vlog(f"Starting game: {n} players, words must exceed {args.min_length} letters")
        run_game(state, trie, args.min_length)
        show_game_over(state)
    except (EOFError, KeyboardInterrupt):
        print()
        log_error("Input closed before the game ended.")
        status = EXIT_ABANDONED
    finally:
        try:
            unload_dictionary(trie, source)
        except UnloadError as e:
            log_error(str(e))
            status = EXIT_UNLOAD

    return status


def main():
    sys.exit(run_ghost())
