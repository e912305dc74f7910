import re

import pytest

from codes import InvalidInput, derive_alpha_part


@pytest.mark.parametrize("name, expected", [
    ("Acme Global Holdings", "AGH"),
    ("acme global holdings ltd", "AGH"),
    ("Acme Co", "ACO"),
    ("Acme", "ACM"),
    ("A1", "AAA"),
    ("X", "XAB"),
    ("Xy", "XYA"),
    ("a-bc", "ABB"),
])
def test_derive_examples(name, expected):
    """Test the documented derivations for one, two and three+ words."""
    assert derive_alpha_part(name) == expected


def test_three_words_non_letter_start_falls_back_to_a():
    """A word starting with a digit contributes 'A', no deeper search."""
    assert derive_alpha_part("3M Global Co") == "AGC"


@pytest.mark.parametrize("name, expected", [
    ("Acme 1x", "AAX"),   # second word starts with a digit
    ("Acme C1d", "ACD"),  # scan past the digit in the second word
    ("Acme C", "ACA"),    # second word too short
    ("Acme C-1", "ACA"),  # no letter left in the second word
])
def test_two_word_third_letter(name, expected):
    assert derive_alpha_part(name) == expected


def test_space_runs_are_one_separator():
    assert derive_alpha_part("  Acme   Co  ") == "ACO"


@pytest.mark.parametrize("name, expected", [
    ("Acme\tCo", "ACM"),
    ("Acme\tGlobal\nHoldings", "ACM"),
    ("Acme Co Ltd", "ACL"),
    ("\tAcme Co", "ACO"),
    ("Acme\u00a0Co", "ACM"),
])
def test_only_ascii_space_separates_words(name, expected):
    """Tabs, newlines and non-breaking spaces stay inside their word."""
    assert derive_alpha_part(name) == expected


def test_non_ascii_letters_are_not_letters():
    """Only A-Z count; 'É' is replaced like any other non-letter."""
    assert derive_alpha_part("Émile Zola") == "AZO"
    assert derive_alpha_part("Ñu") == "UUA"


@pytest.mark.parametrize("name", ["", " ", "   ", "\t\n"])
def test_blank_name_rejected(name):
    with pytest.raises(InvalidInput):
        derive_alpha_part(name)


@pytest.mark.parametrize("name", [
    "Acme", "A", "1", "!!!", "12 34", "a b", "... --- ...",
    "Ωmega Σigma", "O'Brien & Sons Ltd", "x1y2z3", "日本 企業",
])
def test_always_three_uppercase_latin_letters(name):
    """Any non-blank name yields exactly three A-Z letters, deterministically."""
    first = derive_alpha_part(name)
    assert re.fullmatch(r"[A-Z]{3}", first)
    assert derive_alpha_part(name) == first
