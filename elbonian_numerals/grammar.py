"""Structural rules of symbolic (Elbonian) numerals.

Three rules are checked in order, and the first one that fails decides the
error message:

* repetition: base letters (M, C, X, I) at most three times, the x5 and x4
  analogs at most once;
* exclusion: a four-analog and the base letter of its group never appear
  together (``n``/``M``, ``d``/``C``, ``l``/``X``, ``v``/``I``);
* order: letters run from the thousands group down to the units group, and
  inside a group the five-analog precedes the four-analog, which precedes
  the base letters.
"""

import logging
from collections import Counter
from typing import List, Optional, Tuple

from .alphabet import ANALOG_LETTERS, BASE_LETTERS, EXCLUSIVE_PAIRS, GROUPS, MAX_ANALOG_REPEAT, MAX_BASE_REPEAT
from .config import get_grammar_config
from .errors import MalformedNumberError
from .lexer import Token, tokenize
from .logging_utils import apply_debug_logging

logger = logging.getLogger(__name__)


class Cursor:
    def __init__(self, tokens: List[Token]):
        self.toks = tokens
        self.i = 0

    def peek(self) -> Optional[Token]:
        return self.toks[self.i] if self.i < len(self.toks) else None

    def match(self, letter: str) -> Optional[Token]:
        t = self.peek()
        if t is not None and t[1] == letter:
            self.i += 1
            return t
        return None

    def at_end(self) -> bool:
        return self.i >= len(self.toks)


def _find_over_repeated(text: str) -> Optional[Tuple[str, int, int]]:
    counts = Counter(text)
    if get_grammar_config().repetition_rule == 'legacy':
        # only a numeral that over-uses every letter of a class at once is rejected
        bases = [g.base for g in GROUPS]
        analogs = [letter for g in GROUPS for letter in (g.five, g.four)]
        if all(counts[letter] > MAX_BASE_REPEAT for letter in bases):
            return bases[0], counts[bases[0]], MAX_BASE_REPEAT
        if all(counts[letter] > MAX_ANALOG_REPEAT for letter in analogs):
            return analogs[0], counts[analogs[0]], MAX_ANALOG_REPEAT
        return None
    for letter in text:
        if letter in BASE_LETTERS:
            limit = MAX_BASE_REPEAT
        elif letter in ANALOG_LETTERS:
            limit = MAX_ANALOG_REPEAT
        else:
            continue
        if counts[letter] > limit:
            return letter, counts[letter], limit
    return None


def _find_exclusive_pair(text: str) -> Optional[Tuple[str, str]]:
    present = set(text)
    for a, b in EXCLUSIVE_PAIRS:
        if a in present and b in present:
            return a, b
    return None


def _find_out_of_order(text: str) -> Optional[Token]:
    cur = Cursor(tokenize(text))
    for g in GROUPS:
        cur.match(g.five)
        cur.match(g.four)
        for _ in range(MAX_BASE_REPEAT):
            if cur.match(g.base) is None:
                break
    return cur.peek()


def is_repetition_valid(text: str) -> bool:
    return _find_over_repeated(text) is None


def is_exclusion_valid(text: str) -> bool:
    return _find_exclusive_pair(text) is None


def is_order_valid(text: str) -> bool:
    return _find_out_of_order(text) is None


def check_repetition(text: str) -> None:
    found = _find_over_repeated(text)
    if found is not None:
        letter, count, limit = found
        raise MalformedNumberError(
            f'letter {letter!r} repeated {count} times (at most {limit} allowed)', text
        )


def check_exclusion(text: str) -> None:
    found = _find_exclusive_pair(text)
    if found is not None:
        a, b = found
        raise MalformedNumberError(f'letters {a!r} and {b!r} cannot appear together', text)


def check_order(text: str) -> None:
    tok = _find_out_of_order(text)
    if tok is None:
        return
    kind, letter, _, col = tok
    if kind == 'UNKNOWN':
        raise MalformedNumberError(f'[col {col}] {letter!r} is not an Elbonian letter', text)
    raise MalformedNumberError(
        f'[col {col}] unexpected {letter!r}: letters must run from greatest to least', text
    )


def check_symbolic(text: str) -> None:
    """Raise MalformedNumberError unless ``text`` is a well-formed symbolic numeral."""
    check_repetition(text)
    check_exclusion(text)
    check_order(text)


apply_debug_logging(globals(), logger=logger, skip=["Cursor"])
