import os, sys
sys.path.insert(0, os.path.dirname(os.path.dirname(__file__)))

import re
import pytest

from game import GameState, Outcome, parse_letter, play_letter, run_game
from trie import Trie
from utils import InvalidArgument

ANSI = re.compile(r'\x1b\[[0-9;]*[a-zA-Z]')


def feeder(lines):
    it = iter(lines)
    prompts = []
    def read(prompt):
        prompts.append(prompt)
        return next(it)
    read.prompts = prompts
    return read


def test_parse_letter():
    assert parse_letter("g") == "g"
    assert parse_letter("  Hello there") == "h"
    assert parse_letter("") is None
    assert parse_letter("   ") is None
    assert parse_letter("7a") is None
    assert parse_letter("é") is None


def test_player_count_must_be_two_or_more():
    trie = Trie.build(["ghost"])
    with pytest.raises(InvalidArgument):
        GameState.new(trie, 1)


def test_ghost_ends_on_fifth_letter():
    trie = Trie.build(["ghost"])
    state = GameState.new(trie, 2)
    for ch in "gho":
        assert play_letter(state, trie, ch, min_length=3) is Outcome.CONTINUE
    assert state.fragment == "gho"
    assert play_letter(state, trie, "s", min_length=3) is Outcome.CONTINUE
    assert state.current_player == 1
    assert play_letter(state, trie, "t", min_length=3) is Outcome.GAME_OVER
    assert state.loser == 1
    assert state.fragment == "ghost"


def test_short_word_does_not_end_game():
    trie = Trie.build(["cat", "cats", "catsup"])
    state = GameState.new(trie, 2)
    for ch in "cat":
        assert play_letter(state, trie, ch) is Outcome.CONTINUE
    assert play_letter(state, trie, "s") is Outcome.GAME_OVER
    assert state.loser == 2
    assert state.fragment == "cats"


def test_word_of_exactly_min_length_plus_one_loses():
    trie = Trie.build(["bird"])
    state = GameState.new(trie, 2)
    outcomes = [play_letter(state, trie, ch, min_length=3) for ch in "bird"]
    assert outcomes[-1] is Outcome.GAME_OVER
    assert state.loser == 2


def test_turn_rotation_three_players():
    trie = Trie.build(["abcdefghij"])
    state = GameState.new(trie, 3)
    for k, ch in enumerate("abcdefgh", 1):
        assert play_letter(state, trie, ch) is Outcome.CONTINUE
        assert state.current_player == (k % 3) + 1


def test_rejected_letter_leaves_state_unchanged():
    trie = Trie.build(["cat", "car", "dog"])
    state = GameState.new(trie, 3)
    play_letter(state, trie, "c")
    before = (state.fragment, state.cursor, state.current_player)
    assert play_letter(state, trie, "x") is Outcome.REJECTED
    assert (state.fragment, state.cursor, state.current_player) == before
    assert state.loser is None


def test_dead_end_short_word_loses():
    trie = Trie.build(["cat"])
    state = GameState.new(trie, 2)
    outcomes = [play_letter(state, trie, ch) for ch in "cat"]
    assert outcomes == [Outcome.CONTINUE, Outcome.CONTINUE, Outcome.GAME_OVER]
    assert state.loser == 1


def test_play_after_game_over_is_ignored():
    trie = Trie.build(["bird"])
    state = GameState.new(trie, 2)
    for ch in "bird":
        play_letter(state, trie, ch)
    assert play_letter(state, trie, "s") is Outcome.GAME_OVER
    assert state.fragment == "bird"


def test_run_game_reprompts_and_rejects(capsys):
    trie = Trie.build(["ghost"])
    state = GameState.new(trie, 2)
    read = feeder(["G", "?!", "", "x marks", "h", "o", "s", "Tango"])
    run_game(state, trie, min_length=3, read=read)
    out = ANSI.sub('', capsys.readouterr().out)

    assert state.loser == 1
    assert state.fragment == "ghost"
    assert 'There\'s no word that begins with "gx".' in out
    assert "Current word fragment: ghos" in out
    # the two blank / symbol lines and the rejected x all re-prompt player 2
    assert read.prompts[:5] == ["Player 1 says letter: "] + ["Player 2 says letter: "] * 4


def test_run_game_uses_input_by_default(monkeypatch):
    trie = Trie.build(["bird"])
    state = GameState.new(trie, 2)
    letters = iter("bird")
    monkeypatch.setattr("builtins.input", lambda prompt="": next(letters))
    run_game(state, trie)
    assert state.loser == 2


def test_run_game_propagates_eof():
    trie = Trie.build(["ghost"])
    state = GameState.new(trie, 2)

    def read(prompt):
        raise EOFError

    with pytest.raises(EOFError):
        run_game(state, trie, read=read)


def test_long_word_from_unfiltered_trie_plays_out():
    word = "q" * 60
    trie = Trie.build([word])
    state = GameState.new(trie, 2)
    outcomes = [play_letter(state, trie, "q") for _ in word]
    assert outcomes[:-1] == [Outcome.CONTINUE] * 59
    assert outcomes[-1] is Outcome.GAME_OVER
    assert state.fragment == word
    assert state.loser == 2
