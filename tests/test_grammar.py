import pytest

from elbonian_numerals import config
from elbonian_numerals.config import GrammarConfig
from elbonian_numerals.errors import MalformedNumberError
from elbonian_numerals.grammar import (
    check_exclusion,
    check_order,
    check_repetition,
    check_symbolic,
    is_exclusion_valid,
    is_order_valid,
    is_repetition_valid,
)
from elbonian_numerals.numeral import NumeralValue


@pytest.fixture
def legacy_repetition(monkeypatch):
    monkeypatch.setattr(config, '_GRAMMAR_CONFIG', GrammarConfig(repetition_rule='legacy'))


@pytest.mark.parametrize('text', ['MMM', 'CCC', 'XXX', 'III', 'NnDdLlVv', 'MMMCCCXXXIII', 'Xv'])
def test_repetition_accepts_limits(text):
    assert is_repetition_valid(text)
    check_repetition(text)


@pytest.mark.parametrize(
    'text, letter, count',
    [('MMMM', 'M', 4), ('CCCCC', 'C', 5), ('NN', 'N', 2), ('lXl', 'l', 2), ('vv', 'v', 2)],
)
def test_repetition_rejects_single_letter_over_limit(text, letter, count):
    assert not is_repetition_valid(text)
    with pytest.raises(MalformedNumberError) as exc:
        check_repetition(text)
    assert f"letter '{letter}' repeated {count} times" in str(exc.value)


def test_legacy_repetition_needs_every_letter_over_limit(legacy_repetition):
    assert is_repetition_valid('MMMM')
    assert is_repetition_valid('NN')
    assert not is_repetition_valid('MMMMCCCCXXXXIIII')
    assert not is_repetition_valid('NNnnDDddLLllVVvv')


def test_legacy_repetition_still_rejects_via_order(legacy_repetition):
    with pytest.raises(MalformedNumberError) as exc:
        NumeralValue('MMMM')
    assert 'greatest to least' in str(exc.value)


def test_strict_repetition_reports_repetition_first():
    with pytest.raises(MalformedNumberError) as exc:
        NumeralValue('MMMM')
    assert 'repeated 4 times' in str(exc.value)


@pytest.mark.parametrize('text, a, b', [('nM', 'n', 'M'), ('dC', 'd', 'C'), ('lX', 'l', 'X'), ('vI', 'v', 'I')])
def test_exclusion_rejects_pairs(text, a, b):
    assert not is_exclusion_valid(text)
    with pytest.raises(MalformedNumberError) as exc:
        check_exclusion(text)
    assert f"letters '{a}' and '{b}' cannot appear together" in str(exc.value)


def test_exclusion_allows_letters_from_different_groups():
    assert is_exclusion_valid('nC')
    assert is_exclusion_valid('MdXv')


@pytest.mark.parametrize('text', ['CX', 'Nn', 'NnMMM', 'DdCCC', 'LlXXX', 'VvIII', 'MDCLXVI'])
def test_order_accepts_descending(text):
    assert is_order_valid(text)
    check_order(text)


@pytest.mark.parametrize(
    'text, col, letter',
    [('XC', 2, 'C'), ('IX', 2, 'X'), ('nN', 2, 'N'), ('MIM', 3, 'M'), ('vV', 2, 'V')],
)
def test_order_rejects_ascending(text, col, letter):
    assert not is_order_valid(text)
    with pytest.raises(MalformedNumberError) as exc:
        check_order(text)
    assert f"[col {col}] unexpected '{letter}'" in str(exc.value)


def test_order_reports_unknown_letters():
    with pytest.raises(MalformedNumberError) as exc:
        check_order('XQ')
    assert "[col 2] 'Q' is not an Elbonian letter" in str(exc.value)


def test_order_allows_template_combinations_exclusion_rejects():
    assert is_order_valid('nM')
    with pytest.raises(MalformedNumberError) as exc:
        check_symbolic('nM')
    assert 'cannot appear together' in str(exc.value)


def test_check_symbolic_accepts_valid_numeral():
    check_symbolic('nDdLlVv')
