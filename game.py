# game.py
# Turn engine: players take turns adding one letter to a shared fragment,
# walking a cursor down the dictionary trie as they go.

from enum import Enum
from typing import Callable, Optional

from utils import MIN_LENGTH, InvalidArgument, vlog
from display import show_fragment, prompt, show_rejected

ASCII_LETTERS = "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ"


class Outcome(Enum):
    REJECTED = "rejected"
    CONTINUE = "continue"
    GAME_OVER = "game_over"


class GameState:
    """Fragment spelled so far, where it sits in the trie, and whose turn it is."""

    __slots__ = ("fragment", "cursor", "current_player", "player_count", "loser")

    def __init__(self, cursor: Optional[int], player_count: int):
        if player_count < 2:
            raise InvalidArgument(f"Invalid argument. N must be an integer >= 2 (got {player_count}).")
        self.fragment = ""
        self.cursor = cursor
        self.current_player = 1
        self.player_count = player_count
        self.loser: Optional[int] = None

    @classmethod
    def new(cls, trie, player_count: int) -> "GameState":
        return cls(trie.root, player_count)

    @property
    def over(self) -> bool:
        return self.loser is not None

    def __repr__(self) -> str:
        return (
            f"GameState(fragment={self.fragment!r}, player={self.current_player}/{self.player_count}, "
            f"loser={self.loser})"
        )


def parse_letter(line: str) -> Optional[str]:
    """
    First non-blank character of ``line``, lowercased, if it is a letter a-z.
    Everything after it on the line is ignored.
    """
    stripped = line.lstrip()
    if not stripped:
        return None
    c = stripped[0]
    if c not in ASCII_LETTERS:
        return None
    return c.lower()


def play_letter(state: GameState, trie, letter: str, min_length: int = MIN_LENGTH) -> Outcome:
    """Apply one letter from the current player to ``state``.

    Spelling a word longer than ``min_length`` loses. A shorter word does not,
    unless no dictionary word extends it: then nothing more can be played and
    the player who reached it loses.
    """
    if state.over:
        return Outcome.GAME_OVER

    child = trie.descend(state.cursor, letter)
    if child is None:
        return Outcome.REJECTED

    state.cursor = child
    state.fragment += letter

    if trie.is_terminal(child) and len(state.fragment) > min_length:
        state.loser = state.current_player
        return Outcome.GAME_OVER

    if not trie.has_children(child):
        # short word nobody can extend: every later letter would be rejected
        vlog(f"'{state.fragment}' has no continuation; player {state.current_player} is stuck")
        state.loser = state.current_player
        return Outcome.GAME_OVER

    state.current_player = (state.current_player % state.player_count) + 1
    return Outcome.CONTINUE


def run_game(state: GameState, trie, min_length: int = MIN_LENGTH,
             read: Optional[Callable[[str], str]] = None) -> GameState:
    """
    Prompt players in turn until someone loses. ``read`` (default: input) is
    called with the prompt and must return one line; EOFError from it propagates.
    """
    if read is None:
        read = input
    while not state.over:
        show_fragment(state.fragment)
        letter = None
        while letter is None:
            letter = parse_letter(read(prompt(state.current_player)))

        outcome = play_letter(state, trie, letter, min_length)
        if outcome is Outcome.REJECTED:
            show_rejected(state.fragment, letter)
    return state
