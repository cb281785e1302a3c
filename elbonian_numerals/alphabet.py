"""The Elbonian alphabet: twelve letters in four magnitude groups."""

from dataclasses import dataclass
from typing import Dict, List, Tuple


@dataclass(frozen=True)
class Group:
    """One magnitude group: a repeatable base letter plus its x5 and x4 analogs."""

    name: str
    base: str
    five: str
    four: str
    weight: int

    @property
    def letters(self) -> Tuple[str, str, str]:
        return (self.five, self.four, self.base)


GROUPS: Tuple[Group, ...] = (
    Group('thousands', base='M', five='N', four='n', weight=1000),
    Group('hundreds', base='C', five='D', four='d', weight=100),
    Group('tens', base='X', five='L', four='l', weight=10),
    Group('units', base='I', five='V', four='v', weight=1),
)

MAX_BASE_REPEAT = 3
MAX_ANALOG_REPEAT = 1

MIN_VALUE = 1
MAX_VALUE = 9999

WEIGHTS: Dict[str, int] = {}
for _g in GROUPS:
    WEIGHTS[_g.base] = _g.weight
    WEIGHTS[_g.five] = 5 * _g.weight
    WEIGHTS[_g.four] = 4 * _g.weight
del _g

# N n M D d C L l X V v I
DENOMINATIONS: List[Tuple[str, int]] = sorted(WEIGHTS.items(), key=lambda item: -item[1])

BASE_LETTERS = frozenset(g.base for g in GROUPS)
ANALOG_LETTERS = frozenset(letter for g in GROUPS for letter in (g.five, g.four))

# a four-analog never shares a numeral with the base letter of its group
EXCLUSIVE_PAIRS: Tuple[Tuple[str, str], ...] = tuple((g.four, g.base) for g in GROUPS)


def letter_kind(letter: str) -> str:
    """Return 'base', 'five' or 'four' for a letter of the alphabet, '' otherwise."""
    for g in GROUPS:
        if letter == g.base:
            return 'base'
        if letter == g.five:
            return 'five'
        if letter == g.four:
            return 'four'
    return ''
