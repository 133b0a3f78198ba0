"""
Game Data Models

Contains all game-related data structures and enums.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Optional, Tuple


class LetterState(Enum):
    """
    Letter evaluation state, ranked by how much it tells the player.

    UNKNOWN < NOT_PRESENT < WRONG_PLACE < RIGHT_PLACE
    """
    UNKNOWN = "UNKNOWN"
    NOT_PRESENT = "NOT_PRESENT"
    WRONG_PLACE = "WRONG_PLACE"
    RIGHT_PLACE = "RIGHT_PLACE"

    @property
    def rank(self) -> int:
        return _LETTER_STATE_RANKS[self]

    def merge(self, observed: "LetterState") -> "LetterState":
        """
        Combine this state with newly observed evidence.

        The higher-ranked state wins, so a letter never regresses once
        something better has been seen for it.
        """
        if observed.rank > self.rank:
            return observed
        return self


_LETTER_STATE_RANKS: Dict[LetterState, int] = {
    LetterState.UNKNOWN: 0,
    LetterState.NOT_PRESENT: 1,
    LetterState.WRONG_PLACE: 2,
    LetterState.RIGHT_PLACE: 3,
}


class SessionStatus(Enum):
    """Lifecycle of a single game session."""
    IN_PROGRESS = "IN_PROGRESS"
    WON = "WON"
    LOST = "LOST"


@dataclass(frozen=True)
class Guess:
    """A scored guess for one attempt."""
    attempt_no: int
    word: str
    states: Tuple[LetterState, ...]

    @property
    def is_solved(self) -> bool:
        return all(state == LetterState.RIGHT_PLACE for state in self.states)


@dataclass(frozen=True)
class Outcome:
    """Base class for everything GameSession.submit can return."""
    is_terminal = False
    consumes_attempt = False


@dataclass(frozen=True)
class InvalidInput(Outcome):
    """Guess has the wrong length or contains non-letters."""
    raw: str
    reason: str


@dataclass(frozen=True)
class UnknownWord(Outcome):
    """Guess is well formed but not in the dictionary."""
    word: str


@dataclass(frozen=True)
class Accepted(Outcome):
    """Guess was scored and the game goes on."""
    guess: Guess
    consumes_attempt = True


@dataclass(frozen=True)
class Won(Outcome):
    """Guess matched the hidden word."""
    attempt_no: int
    guess: Guess
    is_terminal = True
    consumes_attempt = True


@dataclass(frozen=True)
class Lost(Outcome):
    """Attempts are exhausted; the hidden word is revealed."""
    hidden_word: str
    guess: Optional[Guess] = None
    is_terminal = True
    consumes_attempt = True


@dataclass
class SessionState:
    """Snapshot of a session, safe to hand to the presentation layer."""
    game_id: str
    attempt_no: int
    max_rounds: int
    status: SessionStatus
    letter_states: Dict[str, LetterState] = field(default_factory=dict)
    answer: Optional[str] = None  # Only included when game is over

    @property
    def game_over(self) -> bool:
        return self.status != SessionStatus.IN_PROGRESS
