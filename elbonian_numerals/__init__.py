from .numeral import NumeralValue, NumeralKind, parse_numeral, int_to_symbolic, symbolic_to_int
from .errors import NumeralError, MalformedNumberError, ValueOutOfBoundsError
from .grammar import (
    check_symbolic,
    check_repetition,
    check_exclusion,
    check_order,
    is_repetition_valid,
    is_exclusion_valid,
    is_order_valid,
)
from .config import GrammarConfig, get_grammar_config, set_grammar_config

__all__ = [
    'NumeralValue',
    'NumeralKind',
    'parse_numeral',
    'int_to_symbolic',
    'symbolic_to_int',
    'NumeralError',
    'MalformedNumberError',
    'ValueOutOfBoundsError',
    'check_symbolic',
    'check_repetition',
    'check_exclusion',
    'check_order',
    'is_repetition_valid',
    'is_exclusion_valid',
    'is_order_valid',
    'GrammarConfig',
    'get_grammar_config',
    'set_grammar_config',
]
