"""Configuration helpers for the symbolic grammar."""

from __future__ import annotations

import copy
from dataclasses import dataclass

REPETITION_RULES = ('strict', 'legacy')


@dataclass
class GrammarConfig:
    # 'strict': every letter is held to its own limit.
    # 'legacy': reject only when all letters of a class exceed their limit at once.
    repetition_rule: str = 'strict'


_GRAMMAR_CONFIG = GrammarConfig()


def get_grammar_config() -> GrammarConfig:
    return copy.deepcopy(_GRAMMAR_CONFIG)


def set_grammar_config(config: GrammarConfig) -> None:
    global _GRAMMAR_CONFIG
    if config.repetition_rule not in REPETITION_RULES:
        raise ValueError(
            f'unknown repetition rule {config.repetition_rule!r}; expected one of {", ".join(REPETITION_RULES)}'
        )
    _GRAMMAR_CONFIG = copy.deepcopy(config)
