import base64

import pytest

from validkit import errors
from validkit.validations import format as fmt


class TestBase64:
    """Standard, URL-safe and raw URL-safe base64."""

    def test_standard(self):
        assert fmt.validate_base64(base64.b64encode(b"hello world").decode()) is None
        assert fmt.validate_base64("") is None
        assert fmt.validate_base64("+/+/") is None

    def test_standard_ignores_line_breaks(self):
        assert fmt.validate_base64("aGVsbG8g\r\nd29ybGQ=") is None

    @pytest.mark.parametrize("value", ["aGVsbG8", "a===", "aGVs bG8=", "-_-_", "QQ==QQ=="])
    def test_standard_rejects(self, value):
        assert isinstance(fmt.validate_base64(value), errors.InvalidBase64)

    def test_url(self):
        encoded = base64.urlsafe_b64encode(b"\xfb\xff\xfe").decode()
        assert encoded == "-__-"
        assert fmt.validate_base64_url(encoded) is None
        assert fmt.validate_base64_url("YQ==") is None
        assert isinstance(fmt.validate_base64_url("+/+/"), errors.InvalidBase64URL)
        assert isinstance(fmt.validate_base64_url("YQ"), errors.InvalidBase64URL)

    def test_raw_url(self):
        assert fmt.validate_base64_raw_url("YQ") is None
        assert fmt.validate_base64_raw_url("-__-") is None
        assert isinstance(fmt.validate_base64_raw_url("YQ=="), errors.InvalidBase64RawURL)
        assert isinstance(fmt.validate_base64_raw_url("YWJjZ"), errors.InvalidBase64RawURL)


@pytest.mark.parametrize("value", ["DEUTDEFF", "NEDSZAJJXXX", "BNPAFRPP", "CHASUS33"])
def test_bic_valid(value):
    assert fmt.validate_bic(value) is None


@pytest.mark.parametrize("value", ["", "DEUTDEF", "deutdeff", "DEUTDEFF5", "1EUTDEFF", "DEUTDEFFXXXX"])
def test_bic_invalid(value):
    assert isinstance(fmt.validate_bic(value), errors.InvalidBIC)


@pytest.mark.parametrize("value", ["en", "en-US", "zh-Hant-TW", "sl-rozaj-biske"])
def test_bcp47_valid(value):
    assert fmt.validate_bcp47_language_tag(value) is None


@pytest.mark.parametrize("value", ["", "en_US", "toolongtag-US", "en-", "-en"])
def test_bcp47_invalid(value):
    assert isinstance(fmt.validate_bcp47_language_tag(value), errors.InvalidBCP47LanguageTag)


def test_mongo_id():
    assert fmt.validate_mongo_id("507f1f77bcf86cd799439011") is None
    assert fmt.validate_mongo_id("507F1F77BCF86CD799439011") is None
    assert isinstance(fmt.validate_mongo_id("507f1f77bcf86cd79943901"), errors.InvalidMongoID)
    assert isinstance(fmt.validate_mongo_id("507f1f77bcf86cd79943901g"), errors.InvalidMongoID)
    assert isinstance(fmt.validate_mongo_id("507f1f77bcf86cd799439011\n"), errors.InvalidMongoID)


@pytest.mark.parametrize("value", ["* * * * *", "*/15 0 1,15 * 1-5", "0 12 ? JAN-MAR MON"])
def test_cron_valid(value):
    assert fmt.validate_cron(value) is None


@pytest.mark.parametrize("value", ["", "* * * *", "* * * * * *", "60 * * * *", "@daily"])
def test_cron_invalid(value):
    assert isinstance(fmt.validate_cron(value), errors.InvalidCron)


def test_datetime():
    assert fmt.validate_datetime("2023-07-14 09:30:00") is None
    assert fmt.validate_datetime("2024-02-29 23:59:59") is None
    for bad in ["2023-02-29 00:00:00", "2023-7-14 09:30:00", "2023-07-14T09:30:00",
                "2023-07-14", "2023-07-14 24:00:00", ""]:
        assert isinstance(fmt.validate_datetime(bad), errors.InvalidDatetime), bad


def test_e164():
    assert fmt.validate_e164_phone_number("+14155552671") is None
    assert fmt.validate_e164_phone_number("+442071838750") is None
    for bad in ["14155552671", "+0123456", "+1", "+1234567890123456", "+1 415 555 2671", "+1415555267\n"]:
        assert isinstance(fmt.validate_e164_phone_number(bad), errors.InvalidE164PhoneNumber), bad


def test_email():
    assert fmt.validate_email("alice@example.com") is None
    assert fmt.validate_email("a.b+c@sub.example.co.uk") is None
    for bad in ["alice", "alice@example", "a@b@c.com", "al ice@example.com", "@example.com"]:
        assert isinstance(fmt.validate_email(bad), errors.InvalidEmail), bad
