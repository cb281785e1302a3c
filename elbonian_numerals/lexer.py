from typing import List, Tuple

from .alphabet import WEIGHTS, letter_kind

Token = Tuple[str, str, int, int]  # (kind, letter, weight, col)

# kinds: BASE, FIVE, FOUR, or UNKNOWN for anything outside the alphabet


def tokenize(s: str) -> List[Token]:
    tokens: List[Token] = []
    for i, ch in enumerate(s):
        kind = letter_kind(ch)
        if kind:
            tokens.append((kind.upper(), ch, WEIGHTS[ch], i + 1))
        else:
            tokens.append(('UNKNOWN', ch, 0, i + 1))
    return tokens
