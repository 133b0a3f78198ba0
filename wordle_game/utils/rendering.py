"""
Terminal Rendering

Turns guesses, outcomes and the letter state map into printable text.
Nothing here prints; callers decide where the text goes.
"""

from typing import Dict, List

from colors import color  # pip install ansicolors

from ..models.game import (
    Accepted, Guess, InvalidInput, LetterState, Lost, Outcome, UnknownWord, Won
)

QWERTY_ROWS = ["QWERTYUIOP", "ASDFGHJKL", "ZXCVBNM"]

# ansicolors arguments per state; UNKNOWN stays uncoloured
STATE_STYLES = {
    LetterState.RIGHT_PLACE: {'fg': 'green', 'style': 'bold'},
    LetterState.WRONG_PLACE: {'fg': 'yellow', 'style': 'bold'},
    LetterState.NOT_PRESENT: {'fg': 8},
}

# plain-text fallback when colour is off
STATE_MARKERS = {
    LetterState.RIGHT_PLACE: "[{}]",
    LetterState.WRONG_PLACE: "({})",
    LetterState.NOT_PRESENT: " {} ",
    LetterState.UNKNOWN: " {} ",
}


def render_letter(letter: str, state: LetterState, use_color: bool = True) -> str:
    if use_color:
        style = STATE_STYLES.get(state)
        return color(letter, **style) if style else letter
    if state == LetterState.NOT_PRESENT:
        letter = letter.lower()
    return STATE_MARKERS[state].format(letter)


def render_tiles(word: str, states, use_color: bool = True) -> str:
    return "".join(render_letter(letter, state, use_color) for letter, state in zip(word, states))


def render_guess(guess: Guess, use_color: bool = True) -> str:
    """Formats a scored guess as 'Try N => WORD' with one tile per letter."""
    return f"Try {guess.attempt_no} => {render_tiles(guess.word, guess.states, use_color)}"


def render_keyboard(letter_states: Dict[str, LetterState], use_color: bool = True) -> str:
    """Three QWERTY rows showing the best known state of every letter."""
    rows: List[str] = []
    for indent, row in enumerate(QWERTY_ROWS):
        keys = [render_letter(key, letter_states.get(key, LetterState.UNKNOWN), use_color) for key in row]
        separator = " " if use_color else ""
        rows.append(" " * indent + separator.join(keys))
    return "\n".join(rows)


def render_outcome(outcome: Outcome, use_color: bool = True) -> str:
    """The message shown to the player after a submit."""
    if isinstance(outcome, InvalidInput):
        return f"Wrong input! {outcome.reason}."
    if isinstance(outcome, UnknownWord):
        return "The word is not known!"
    if isinstance(outcome, Accepted):
        return render_guess(outcome.guess, use_color)
    if isinstance(outcome, Won):
        tries = "try" if outcome.attempt_no == 1 else "tries"
        return f"{render_guess(outcome.guess, use_color)}\nYou won in {outcome.attempt_no} {tries}!"
    if isinstance(outcome, Lost):
        answer = color(outcome.hidden_word, fg='green', style='bold') if use_color else outcome.hidden_word
        lines = []
        if outcome.guess is not None:
            lines.append(render_guess(outcome.guess, use_color))
        lines.append(f"The word you were trying to guess was {answer}")
        return "\n".join(lines)
    raise TypeError(f"Unknown outcome type: {type(outcome).__name__}")
