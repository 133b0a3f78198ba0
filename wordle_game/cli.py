"""
Command Line Interface

Loads the dictionary, picks the hidden word and runs the read/submit/print
loop until the game is won or lost.
"""

import argparse
import logging
import sys
from typing import Callable, List, Optional

from .config import get_config, get_word_statistics, load_word_list, validate_word_list_integrity
from .models.game import Accepted, SessionStatus
from .services.game_session import GameSession
from .services.word_service import choose_hidden_word
from .utils.game_logger import game_logger
from .utils.rendering import render_keyboard, render_outcome


def build_parser(app_config) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="wordle",
        description="Guess the hidden five-letter word in six tries.",
    )
    parser.add_argument("--words", default=app_config.WORDS_FILE, metavar="PATH",
                        help="word list file (JSON array or one word per line); "
                             "defaults to the bundled list")
    parser.add_argument("--seed", type=int, default=app_config.SEED,
                        help="seed for picking the hidden word, for reproducible games")
    parser.add_argument("--no-color", dest="use_color", action="store_false",
                        default=app_config.USE_COLOR, help="disable ANSI colours")
    parser.add_argument("--check-words", action="store_true",
                        help="validate the word list, print statistics and exit")
    parser.add_argument("--log-level", default=app_config.LOG_LEVEL,
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"], type=str.upper,
                        help="level for the game log file")
    return parser


def run_game(session: GameSession,
             read_line: Callable[[str], str] = input,
             write: Callable[[str], None] = print,
             use_color: bool = True) -> Optional[SessionStatus]:
    """
    Play one session to the end.

    Returns the final status, or None if input ran out before the game
    was decided.
    """
    game_logger.log_game_event(session.game_id, 'game_started', max_rounds=session.max_rounds)

    while not session.is_over:
        try:
            raw = read_line(f"Try {session.attempt_no} => ")
        except EOFError:
            write("")
            game_logger.log_game_event(session.game_id, 'game_abandoned', attempt_no=session.attempt_no)
            return None

        outcome = session.submit(raw.strip())
        game_logger.log_guess(session.game_id, raw, outcome)

        write(render_outcome(outcome, use_color))
        if isinstance(outcome, Accepted):
            write(render_keyboard(session.letter_states, use_color))

    if session.status == SessionStatus.WON:
        game_logger.log_game_event(session.game_id, 'game_won', attempts=session.attempt_no)
    else:
        game_logger.log_game_event(session.game_id, 'game_lost', answer=session.hidden_word)
    return session.status


def check_words(words: List[str], write: Callable[[str], None] = print) -> int:
    """Validate the word list and print its statistics; returns an exit status."""
    try:
        validate_word_list_integrity(words)
    except ValueError as e:
        game_logger.log_error(e, 'check_words', level=logging.INFO)
        write(f"Word list validation failed: {e}")
        return 1

    stats = get_word_statistics(words)
    write("Word list validation passed")
    write(f"Total words: {stats['total_words']}")
    write(f"Average vowels per word: {stats['avg_vowel_count']}")
    write("Most common letters: " + ", ".join(f"{letter}={count}" for letter, count in stats['most_common_letters']))
    return 0


def main(argv: Optional[List[str]] = None,
         read_line: Callable[[str], str] = input,
         write: Callable[[str], None] = print) -> int:
    app_config = get_config()
    args = build_parser(app_config).parse_args(argv)
    game_logger.logger.setLevel(args.log_level)

    try:
        words = load_word_list(args.words)
    except (FileNotFoundError, ValueError) as e:
        # The diagnostic below goes to stderr; keep the JSON entry in the log file only
        game_logger.log_error(e, 'load_word_list', level=logging.INFO)
        print(f"Could not load word list: {e}", file=sys.stderr)
        return 1

    write(f"Loaded {len(words)} words...")

    if args.check_words:
        return check_words(words, write)

    session = GameSession(words, choose_hidden_word(words, args.seed))

    try:
        run_game(session, read_line, write, args.use_color)
    except KeyboardInterrupt:
        write("")
        game_logger.log_game_event(session.game_id, 'game_abandoned', attempt_no=session.attempt_no)
        return 130

    return 0
