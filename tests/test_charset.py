import string

import pytest

from entpass.core.errors import ConfigurationError
from entpass.core.models import DEFAULT_SYMBOLS, GenerationConfig
from entpass.generators.charset import (
    apply_exclusions,
    build_charset,
    build_separators,
    charset_for,
    separators_for,
)


def test_all_classes_in_order():
    charset = build_charset(symbol_chars=DEFAULT_SYMBOLS)
    assert charset == (string.ascii_uppercase + string.ascii_lowercase
                       + string.digits + DEFAULT_SYMBOLS)


def test_disabled_classes_are_left_out():
    charset = build_charset(uppercase=False, symbols=False, symbol_chars="!?")
    assert charset == string.ascii_lowercase + string.digits


def test_exclusion_removes_every_occurrence():
    charset = build_charset(uppercase=False, lowercase=False, digits=False,
                            symbol_chars="ABC", exclude="B")
    assert charset == "AC"
    assert apply_exclusions("ABBA-B", "B") == "AA-"


def test_symbol_duplicates_are_kept():
    charset = build_charset(uppercase=False, lowercase=False, digits=False,
                            symbol_chars="!!?")
    assert charset == "!!?"


def test_empty_charset_is_a_configuration_error():
    with pytest.raises(ConfigurationError):
        build_charset(uppercase=False, lowercase=False, digits=False, symbols=False)
    with pytest.raises(ConfigurationError):
        build_charset(uppercase=False, lowercase=False, symbols=False,
                      exclude=string.digits)


def test_separator_exclusion_is_a_literal_substring():
    assert build_separators("!@#$%", "@#") == "!$%"
    # characters of the exclusion in another order are not removed
    assert build_separators("!@#$%", "#@") == "!@#$%"


def test_excluded_substring_leaves_separator_draw_space():
    separators = "!@#$%^&*()_+1234567890-=,.></?;:[]|"
    result = build_separators(separators, "1234567890")
    assert "1234567890" not in result
    assert not any(c.isdigit() for c in result)


def test_empty_separators_are_a_configuration_error():
    with pytest.raises(ConfigurationError):
        build_separators("-_", "-_")


def test_config_helpers():
    config = GenerationConfig(digits=False, symbols=False, exclude="aeiou",
                              words=True, word_separators="-aeiou_")
    assert charset_for(config) == string.ascii_uppercase + "bcdfghjklmnpqrstvwxyz"
    assert separators_for(config) == "-_"
