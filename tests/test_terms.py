"""Tests for the kinship vocabulary."""

import pytest

from models import FEMALE, MALE, UNKNOWN
import terms


@pytest.mark.parametrize(
    "sex, expected",
    [(MALE, "дядя"), (FEMALE, "тётя"), (UNKNOWN, "дядя/тётя"), ("garbage", "дядя/тётя")],
)
def test_word(sex, expected):
    assert terms.word("aunt_uncle", sex) == expected


@pytest.mark.parametrize(
    "degree, stem",
    [(0, ""), (1, "двоюродн"), (2, "троюродн"), (3, "четвероюродн"), (4, "пятиюродн"), (6, "6-юродн")],
)
def test_cousin_stem(degree, stem):
    assert terms.cousin_stem(degree) == stem


def test_prefixed_neutral_gives_both_forms():
    assert terms.prefixed("троюродн", "sibling", UNKNOWN) == "троюродный брат/троюродная сестра"


def test_direct_terms():
    assert terms.ancestor_term(3, FEMALE) == "прабабушка"
    assert terms.descendant_term(5, MALE) == "потомок в 5-м колене"


def test_grand_aunt_fallback():
    assert terms.grand_aunt_uncle_term(2, MALE) == "двоюродный дед"
    assert terms.grand_niece_nephew_term(3, UNKNOWN) == "троюродный внук/троюродная внучка"
    assert terms.grand_aunt_uncle_term(5, FEMALE) == "предок (удаление 4)"


def test_line():
    assert terms.line_of(FEMALE) == terms.MATERNAL_LINE
    assert terms.line_of(MALE) == terms.PATERNAL_LINE
    assert terms.line_of(UNKNOWN) == ""
    assert terms.with_line("мать", "") == "мать"
