"""
Game Session

Holds the state of a single game: the hidden word, the dictionary used
to check guesses, the attempt counter and the letter state map.
"""

import uuid
from typing import Dict, Iterable, Optional

from ..config.game_settings import MAX_ROUNDS, WORD_LENGTH, is_candidate_word, normalize_word
from ..models.game import (
    Accepted, Guess, InvalidInput, LetterState, Lost, Outcome,
    SessionState, SessionStatus, UnknownWord, Won
)
from .scoring import letter_multiset, merge_letter_states, new_letter_state_map, score_guess


class GameSession:
    """
    One game, from the first guess to a win or a loss.

    This class handles:
    - Guess validation (shape, then dictionary membership)
    - Scoring accepted guesses and tracking the best state per letter
    - The attempt counter and the won/lost decision

    The dictionary and the hidden word are passed in; picking the word is
    the caller's job, so a session is fully deterministic given its inputs.
    """

    def __init__(self, word_list: Iterable[str], hidden_word: str, max_rounds: int = MAX_ROUNDS):
        """
        Args:
            word_list: Words accepted as guesses, any case
            hidden_word: The answer; must be one of word_list
            max_rounds: Number of attempts before the game is lost

        Raises:
            ValueError: If the dictionary is empty or the hidden word is
                not a valid word from it
        """
        self.word_list = frozenset(
            normalize_word(word) for word in word_list if is_candidate_word(word.strip())
        )
        if not self.word_list:
            raise ValueError("Word list cannot be empty")

        if not is_candidate_word(hidden_word.strip()):
            raise ValueError(f"Hidden word '{hidden_word}' is not a {WORD_LENGTH}-letter word")
        hidden_word = normalize_word(hidden_word)
        if hidden_word not in self.word_list:
            raise ValueError(f"Hidden word '{hidden_word}' is not in the word list")
        if max_rounds < 1:
            raise ValueError("max_rounds must be at least 1")

        self.game_id = str(uuid.uuid4())
        self.max_rounds = max_rounds
        self._hidden_word = hidden_word
        self._letter_counts = letter_multiset(hidden_word)
        self._letter_states = new_letter_state_map()
        self._attempt_no = 1
        self._status = SessionStatus.IN_PROGRESS
        self._final_outcome: Optional[Outcome] = None

    @property
    def attempt_no(self) -> int:
        return self._attempt_no

    @property
    def status(self) -> SessionStatus:
        return self._status

    @property
    def is_over(self) -> bool:
        return self._status != SessionStatus.IN_PROGRESS

    @property
    def hidden_word(self) -> str:
        return self._hidden_word

    @property
    def letter_states(self) -> Dict[str, LetterState]:
        """A copy of the letter state map; changing it does not affect the session."""
        return dict(self._letter_states)

    def get_state(self) -> SessionState:
        """
        Returns a snapshot of the session.

        The answer is only included once the game is over.
        """
        return SessionState(
            game_id=self.game_id,
            attempt_no=self._attempt_no,
            max_rounds=self.max_rounds,
            status=self._status,
            letter_states=self.letter_states,
            answer=self._hidden_word if self.is_over else None,
        )

    def submit(self, raw_input: str) -> Outcome:
        """
        Processes one guess and advances the game.

        Checks run in a fixed order: length, letters only, dictionary,
        exact match, then attempts left. Rejected input never changes the
        session. Once the game is over every call returns the final
        outcome again.

        Args:
            raw_input: The guess as typed by the player

        Returns:
            InvalidInput, UnknownWord, Accepted, Won or Lost
        """
        if self._final_outcome is not None:
            return self._final_outcome

        # Check shape before upper-casing; upper() maps some non-ASCII letters (ſ, ı) to ASCII
        stripped = raw_input.strip()

        if len(stripped) != WORD_LENGTH:
            return InvalidInput(raw=raw_input, reason=f"Guess must be exactly {WORD_LENGTH} letters")

        if not (stripped.isascii() and stripped.isalpha()):
            return InvalidInput(raw=raw_input, reason="Guess must contain only letters")

        word = stripped.upper()

        if word not in self.word_list:
            return UnknownWord(word=word)

        guess = self._score(word)

        if word == self._hidden_word:
            return self._finish(SessionStatus.WON, Won(attempt_no=self._attempt_no, guess=guess))

        if self._attempt_no >= self.max_rounds:
            return self._finish(SessionStatus.LOST, Lost(hidden_word=self._hidden_word, guess=guess))

        self._attempt_no += 1
        return Accepted(guess=guess)

    def _score(self, word: str) -> Guess:
        result = score_guess(self._hidden_word, word, self._letter_counts)
        self._letter_states = merge_letter_states(self._letter_states, result.letter_updates)
        return Guess(attempt_no=self._attempt_no, word=word, states=result.states)

    def _finish(self, status: SessionStatus, outcome: Outcome) -> Outcome:
        self._status = status
        self._final_outcome = outcome
        return outcome
