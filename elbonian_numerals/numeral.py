"""Numeral values that convert between decimal and symbolic (Elbonian) form."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Tuple

from .alphabet import DENOMINATIONS, MAX_VALUE, MIN_VALUE
from .errors import MalformedNumberError, ValueOutOfBoundsError
from .grammar import check_symbolic
from .lexer import tokenize
from .logging_utils import apply_debug_logging

logger = logging.getLogger(__name__)

_decimal_re = re.compile(r'-?[0-9]+(?:\.[0-9]+)?')
_letters_re = re.compile(r'[a-zA-Z]+')

OUT_OF_BOUNDS_MESSAGE = f'Value is out of bounds. Enter value between {MIN_VALUE} and {MAX_VALUE}.'


class NumeralKind(str, Enum):
    DECIMAL = 'decimal'
    SYMBOLIC = 'symbolic'


def _classify(raw: str) -> Tuple[str, NumeralKind]:
    if not isinstance(raw, str):
        raise TypeError(f'numeral text must be str, got {type(raw).__name__}')
    text = raw.strip()
    if not text:
        raise MalformedNumberError('empty numeral', text)
    if text != '0' and text.startswith('0'):
        raise MalformedNumberError(f'leading zero in {text!r}', text)

    if _decimal_re.fullmatch(text):
        value = float(text)
        if not 0 < value < MAX_VALUE + 1:
            raise ValueOutOfBoundsError(OUT_OF_BOUNDS_MESSAGE, text)
        if value % 1 != 0:
            raise MalformedNumberError(f'{text!r} is not a whole number', text)
        return text, NumeralKind.DECIMAL

    if not _letters_re.fullmatch(text):
        raise MalformedNumberError(f'{text!r} is neither a decimal nor a symbolic numeral', text)
    check_symbolic(text)
    return text, NumeralKind.SYMBOLIC


def int_to_symbolic(value: int) -> str:
    """Greedy conversion of a whole number in [1, 9999] to symbolic form."""
    if not MIN_VALUE <= value <= MAX_VALUE:
        raise ValueOutOfBoundsError(OUT_OF_BOUNDS_MESSAGE, str(value))
    out = []
    remaining = value
    for letter, weight in DENOMINATIONS:
        while remaining >= weight:
            out.append(letter)
            remaining -= weight
    return ''.join(out)


def symbolic_to_int(text: str) -> int:
    # unknown letters weigh nothing; validated text never contains any
    return sum(weight for _, _, weight, _ in tokenize(text))


@dataclass(frozen=True)
class NumeralValue:
    """A validated numeral in either decimal or symbolic form.

    Construction trims the input, decides which numeral system it belongs
    to and validates it, raising ``MalformedNumberError`` or
    ``ValueOutOfBoundsError`` on bad input. The value keeps only the text it
    was given; the other representation is computed on demand.

    >>> NumeralValue(' 4999 ').to_symbolic()
    'nDdLlVv'
    >>> NumeralValue('CX').to_decimal()
    110
    """

    text: str
    kind: NumeralKind = field(init=False)

    def __post_init__(self) -> None:
        text, kind = _classify(self.text)
        object.__setattr__(self, 'text', text)
        object.__setattr__(self, 'kind', kind)

    @property
    def is_decimal(self) -> bool:
        return self.kind is NumeralKind.DECIMAL

    def to_decimal(self) -> int:
        if self.is_decimal:
            return int(float(self.text))
        return symbolic_to_int(self.text)

    def to_symbolic(self) -> str:
        if self.is_decimal:
            return int_to_symbolic(self.to_decimal())
        return self.text

    def __str__(self) -> str:
        return self.text


def parse_numeral(text: str) -> NumeralValue:
    return NumeralValue(text)


apply_debug_logging(globals(), logger=logger, skip=["NumeralKind"])
