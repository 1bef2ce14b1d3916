import pytest

from validkit.errors import InvalidCreditCard
from validkit.validations.format import validate_credit_card

VALID = "4532015112830366"


def test_known_valid_number():
    assert validate_credit_card(VALID) is None


def test_last_digit_changed_fails():
    err = validate_credit_card("4532015112830367")
    assert isinstance(err, InvalidCreditCard)
    assert err.reason == "checksum"


@pytest.mark.parametrize("formatted", [
    "4532-0151-1283-0366",
    "4532 0151 1283 0366",
    " 4532015112830366 ",
    "card:4532x0151x1283x0366",
])
def test_formatting_is_ignored(formatted):
    assert validate_credit_card(formatted) == validate_credit_card(VALID)
    assert validate_credit_card(formatted) is None


@pytest.mark.parametrize("value", ["", "-------------------", "    ", "abcdefghijklmnop"])
def test_no_digits_fails_on_length(value):
    err = validate_credit_card(value)
    assert isinstance(err, InvalidCreditCard)
    assert err.reason == "length"


def test_too_short_and_too_long():
    # 12 and 20 digits that would otherwise pass Luhn
    assert validate_credit_card("000000000000").reason == "length"
    assert validate_credit_card("0" * 20).reason == "length"
    assert validate_credit_card("0" * 13) is None
    assert validate_credit_card("0" * 19) is None


@pytest.mark.parametrize("number", [
    "4111111111111111",      # Visa
    "5500005555555559",      # Mastercard
    "378282246310005",       # Amex, 15 digits
    "6011111111111117",      # Discover
    "4222222222222",         # 13-digit Visa
])
def test_brand_agnostic(number):
    assert validate_credit_card(number) is None


def test_every_single_digit_substitution_is_detected():
    for pos, ch in enumerate(VALID):
        for replacement in "0123456789":
            if replacement == ch:
                continue
            mutated = VALID[:pos] + replacement + VALID[pos + 1:]
            assert validate_credit_card(mutated) is not None, mutated


def test_non_ascii_digits_are_discarded():
    # Arabic-Indic digits are not decimal ASCII; they are filtered like punctuation.
    assert validate_credit_card("٤" * 16).reason == "length"


def test_custom_bounds():
    assert validate_credit_card("4111111111111111", max_digits=15).reason == "length"
    assert validate_credit_card("4111111111111111", min_digits=16, max_digits=16) is None


def test_idempotent():
    assert [validate_credit_card(VALID) for _ in range(3)] == [None, None, None]
    errs = {validate_credit_card("4532015112830367") for _ in range(3)}
    assert errs == {InvalidCreditCard()}
