import pytest

from wordle_game.models.game import (
    Accepted, InvalidInput, LetterState, Lost, SessionStatus, UnknownWord, Won
)
from wordle_game.services.game_session import GameSession

WORDS = ["ABIDE", "ERASE", "EERIE", "CRANE", "SLATE", "LEVEL", "ELLEN", "PIANO", "ROBOT", "GHOST"]
MISSES = ["ERASE", "EERIE", "SLATE", "PIANO", "ROBOT", "GHOST"]


def make_session(hidden="CRANE"):
    return GameSession(WORDS, hidden)


def test_new_session_starts_at_first_attempt():
    session = make_session()
    assert session.attempt_no == 1
    assert session.status == SessionStatus.IN_PROGRESS
    assert not session.is_over
    assert set(session.letter_states.values()) == {LetterState.UNKNOWN}


@pytest.mark.parametrize("raw", ["", "CRAN", "CRANES", "AB1DE", "12345", "CR NE", "éclat"])
def test_malformed_input_is_invalid(raw):
    session = make_session()
    outcome = session.submit(raw)
    assert isinstance(outcome, InvalidInput)
    assert outcome.raw == raw
    assert session.attempt_no == 1


def test_length_is_checked_before_letters():
    outcome = make_session().submit("AB1")
    assert "exactly 5 letters" in outcome.reason


def test_malformed_input_is_never_reported_as_unknown_word():
    outcome = make_session().submit("ZZZZ1")
    assert isinstance(outcome, InvalidInput)
    assert "only letters" in outcome.reason


def test_invalid_input_is_idempotent():
    session = make_session()
    first = session.submit("XY")
    second = session.submit("XY")
    assert first == second
    assert session.attempt_no == 1
    assert set(session.letter_states.values()) == {LetterState.UNKNOWN}


def test_unknown_word_does_not_change_state():
    session = make_session()
    outcome = session.submit("ZZZZZ")
    assert outcome == UnknownWord(word="ZZZZZ")
    assert session.attempt_no == 1
    assert set(session.letter_states.values()) == {LetterState.UNKNOWN}


def test_accepted_guess_advances_attempt():
    session = make_session()
    outcome = session.submit("SLATE")
    assert isinstance(outcome, Accepted)
    assert outcome.guess.attempt_no == 1
    assert outcome.guess.word == "SLATE"
    assert session.attempt_no == 2
    assert session.letter_states["A"] == LetterState.RIGHT_PLACE
    assert session.letter_states["S"] == LetterState.NOT_PRESENT


def test_input_is_case_and_whitespace_normalized():
    outcome = make_session().submit("  slate\n")
    assert isinstance(outcome, Accepted)
    assert outcome.guess.word == "SLATE"


def test_win_on_first_attempt():
    session = make_session()
    outcome = session.submit("crane")
    assert isinstance(outcome, Won)
    assert outcome.attempt_no == 1
    assert outcome.guess.is_solved
    assert session.status == SessionStatus.WON
    assert session.attempt_no == 1


def test_win_on_last_attempt_is_not_a_loss():
    session = make_session()
    for word in MISSES[:5]:
        assert isinstance(session.submit(word), Accepted)

    outcome = session.submit("CRANE")
    assert isinstance(outcome, Won)
    assert outcome.attempt_no == 6
    assert session.status == SessionStatus.WON


def test_six_misses_lose_and_reveal_hidden_word():
    session = make_session("LEVEL")
    outcomes = [session.submit(word) for word in ["ERASE", "EERIE", "SLATE", "PIANO", "ROBOT", "GHOST"]]

    assert all(isinstance(outcome, Accepted) for outcome in outcomes[:5])
    assert outcomes[-1] == Lost(hidden_word="LEVEL", guess=outcomes[-1].guess)
    assert outcomes[-1].guess.attempt_no == 6
    assert session.status == SessionStatus.LOST
    assert session.is_over


def test_rejected_input_does_not_use_up_attempts():
    session = make_session()
    for word in MISSES[:5]:
        session.submit(word)
    session.submit("QQ")
    session.submit("QQQQQ")
    assert session.attempt_no == 6
    assert isinstance(session.submit("CRANE"), Won)


def test_terminal_session_ignores_further_guesses():
    session = make_session()
    won = session.submit("CRANE")
    letter_states = session.letter_states

    assert session.submit("SLATE") is won
    assert session.submit("nonsense") is won
    assert session.attempt_no == 1
    assert session.letter_states == letter_states


def test_lost_session_keeps_returning_loss():
    session = make_session()
    for word in MISSES:
        lost = session.submit(word)
    assert isinstance(lost, Lost)
    assert session.submit("CRANE") is lost
    assert session.status == SessionStatus.LOST


def test_letter_states_never_regress():
    session = make_session("ELLEN")
    previous = session.letter_states
    for word in ["LEVEL", "ERASE", "EERIE", "SLATE", "ABIDE"]:
        session.submit(word)
        current = session.letter_states
        for letter, state in current.items():
            assert state.rank >= previous[letter].rank, letter
        previous = current

    assert session.letter_states["L"] == LetterState.RIGHT_PLACE
    assert session.letter_states["E"] == LetterState.RIGHT_PLACE


def test_letter_states_are_a_copy():
    session = make_session()
    session.letter_states["C"] = LetterState.RIGHT_PLACE
    assert session.letter_states["C"] == LetterState.UNKNOWN


def test_get_state_hides_answer_until_game_over():
    session = make_session()
    state = session.get_state()
    assert state.answer is None
    assert not state.game_over
    assert state.max_rounds == 6

    session.submit("CRANE")
    state = session.get_state()
    assert state.answer == "CRANE"
    assert state.status == SessionStatus.WON
    assert state.game_over


def test_sessions_sharing_a_word_list_are_independent():
    first = GameSession(WORDS, "CRANE")
    second = GameSession(WORDS, "GHOST")
    first.submit("SLATE")

    assert second.attempt_no == 1
    assert second.letter_states["A"] == LetterState.UNKNOWN
    assert first.game_id != second.game_id


def test_constructor_rejects_bad_input():
    with pytest.raises(ValueError):
        GameSession([], "CRANE")
    with pytest.raises(ValueError):
        GameSession(WORDS, "QUEEN")
    with pytest.raises(ValueError):
        GameSession(WORDS, "CRANES")


def test_constructor_normalizes_word_list_case():
    session = GameSession(["crane", "slate"], "crane")
    assert session.hidden_word == "CRANE"
    assert isinstance(session.submit("Slate"), Accepted)


@pytest.mark.parametrize("raw", ["ſtare", "pıano", "straß"])
def test_non_ascii_letters_are_invalid_even_if_upper_case_is_ascii(raw):
    session = GameSession(WORDS + ["STARE"], "CRANE")
    outcome = session.submit(raw)
    assert isinstance(outcome, InvalidInput)
    assert "only letters" in outcome.reason
    assert session.attempt_no == 1
    assert set(session.letter_states.values()) == {LetterState.UNKNOWN}


def test_constructor_skips_words_that_only_look_ascii_after_upper():
    session = GameSession(["CRANE", "ſtare"], "CRANE")
    assert session.word_list == frozenset(["CRANE"])
    with pytest.raises(ValueError):
        GameSession(["CRANE", "STARE"], "ſtare")
