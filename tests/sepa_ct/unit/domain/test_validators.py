"""Tests for the field validators and their lookup tables."""

import pytest

from sepa_ct.domain.payments.exceptions import ConfigError, PaymentError
from sepa_ct.domain.payments.validators import (
    CONFIG_REQUIRED,
    PAYMENT_REQUIRED,
    InputField,
    check_required,
    config_validators,
    is_empty,
    payment_validators,
    run_validators,
    validate_amount,
    validate_batch,
    validate_bic,
    validate_ct_type,
    validate_currency,
    validate_date,
    validate_end_to_end_id,
    validate_iban,
    validate_text,
)
from sepa_ct.domain.payments.value_objects import TransferType


class TestValidateText:
    """Test cases for free-text fields (names, descriptions)."""

    def test_accepts_plain_text(self):
        assert validate_text("Salary January 2024") is None

    def test_accepts_exactly_140_characters(self):
        assert validate_text("a" * 140) is None

    def test_rejects_141_characters(self):
        assert validate_text("a" * 141) == "text is longer than 140 characters"

    def test_accepts_characters_outside_the_sepa_set(self):
        # The SEPA character class is not anchored, so it never rejects
        assert validate_text("Müller & Söhne") is None

    def test_accepts_non_string_values(self):
        assert validate_text(12345) is None

    @pytest.mark.parametrize("text", ["Salary\x00", "Rent\x1fMarch", "Bonus\x0b"])
    def test_rejects_characters_xml_cannot_hold(self, text):
        assert validate_text(text) == "text contains characters that cannot be written to XML"

    def test_accepts_line_breaks_and_tabs(self):
        assert validate_text("Salary\tJanuary\r\n2024") is None


class TestValidateIban:
    """Test cases for IBAN validation."""

    def test_accepts_valid_iban(self):
        assert validate_iban("NL91ABNA0417164300") is None

    def test_rejects_bad_checksum(self):
        assert validate_iban("NL91ABNA0417164301") == (
            "NL91ABNA0417164301 has an invalid checksum"
        )

    def test_rejects_bad_format(self):
        assert validate_iban("NL91 ABNA 0417 1643 00") == (
            "NL91 ABNA 0417 1643 00 is not a valid IBAN format"
        )

    def test_rejects_lowercase_country_code(self):
        assert validate_iban("nl91ABNA0417164300") is not None

    def test_disabled_check_accepts_anything(self):
        assert validate_iban("not an iban", checksum_enabled=False) is None


class TestValidateBic:
    """Test cases for BIC validation."""

    @pytest.mark.parametrize("bic", ["ABNANL2A", "COBADEFFXXX", "deutdeff"])
    def test_accepts_8_and_11_character_bics(self, bic):
        assert validate_bic(bic) is None

    @pytest.mark.parametrize("bic", ["ABNANL2", "ABNANL2AX", "1BNANL2A", "ABNANL2AXXXX"])
    def test_rejects_malformed_bics(self, bic):
        assert validate_bic(bic) == f"{bic} is not a valid BIC"

    def test_disabled_check_accepts_anything(self):
        assert validate_bic("??", checksum_enabled=False) is None


class TestValidateAmount:
    """Test cases for minor-unit amounts."""

    @pytest.mark.parametrize("amount", ["1", "1000", "999", 2500, "0" * 5 + "9" * 18])
    def test_accepts_digit_strings(self, amount):
        assert validate_amount(amount) is None

    @pytest.mark.parametrize("amount", ["10.00", "-5", "1e3", "", "12a"])
    def test_rejects_non_digit_input(self, amount):
        assert validate_amount(amount) == f"{amount} is not an amount in minor units"

    def test_rejects_booleans(self):
        assert validate_amount(True) is not None

    def test_rejects_more_than_18_digits(self):
        assert validate_amount("1" * 19) == f"{'1' * 19} exceeds 18 digits"


class TestValidateDate:
    """Test cases for execution dates."""

    def test_accepts_iso_date(self):
        assert validate_date("2024-01-15") is None

    @pytest.mark.parametrize("value", ["15-01-2024", "2024-1-15", "2024-02-30", "tomorrow"])
    def test_rejects_invalid_dates(self, value):
        assert validate_date(value) == f"{value} is not a valid ISO Date"


class TestValidateEndToEndId:
    """Test cases for end-to-end identifiers."""

    def test_accepts_35_ascii_characters(self):
        assert validate_end_to_end_id("A" * 35) is None

    def test_rejects_36_characters(self):
        assert validate_end_to_end_id("A" * 36) == (
            f"{'A' * 36} is longer than 35 characters"
        )

    def test_rejects_non_ascii(self):
        assert validate_end_to_end_id("Zahlung-é") == "Zahlung-é is not ASCII"

    def test_rejects_control_characters(self):
        assert validate_end_to_end_id("E2E\x07") == "end-to-end id contains control characters"

    def test_ascii_is_checked_before_length(self):
        assert validate_end_to_end_id("é" * 40).endswith("is not ASCII")


class TestSimpleValidators:
    """Test cases for type, batch flag and currency."""

    @pytest.mark.parametrize("code", ["FRST", "RCUR", "FNAL", "OOFF"])
    def test_accepts_transfer_type_codes(self, code):
        assert validate_ct_type(code) is None

    def test_accepts_transfer_type_enum(self):
        assert validate_ct_type(TransferType.ONE_OFF) is None

    def test_rejects_unknown_transfer_type(self):
        assert validate_ct_type("XXXX") == (
            "XXXX is not a valid Sepa Credit Transfer Transaction Type."
        )

    def test_batch_must_be_boolean(self):
        assert validate_batch(False) is None
        assert validate_batch("true") == "'true' is not a boolean"

    def test_currency_must_be_three_letters(self):
        assert validate_currency("EUR") is None
        assert validate_currency("eur") is None
        assert validate_currency("EU") is not None
        assert validate_currency("EU1") is not None


class TestValidatorTables:
    """Test cases for the config/payment lookup tables."""

    def test_config_table_covers_required_fields(self):
        table = config_validators(checksum_enabled=True)
        assert set(CONFIG_REQUIRED) <= set(table)

    def test_payment_table_covers_required_fields(self):
        table = payment_validators(checksum_enabled=True)
        assert set(PAYMENT_REQUIRED) <= set(table)
        assert InputField.TYPE in table
        assert InputField.END_TO_END_ID in table

    def test_checksum_flag_is_bound(self):
        table = payment_validators(checksum_enabled=False)
        assert table[InputField.IBAN]("garbage") is None
        assert table[InputField.BIC]("garbage") is None


class TestCheckRequired:
    """Test cases for required-field checks."""

    def test_missing_field(self):
        with pytest.raises(ConfigError) as exc_info:
            check_required({"name": "Test"}, CONFIG_REQUIRED, ConfigError)

        assert exc_info.value.field == "IBAN"
        assert exc_info.value.reason == "IBAN does not exist."

    def test_empty_field(self):
        data = {"name": "", "IBAN": "x", "batch": True, "currency": "EUR"}
        with pytest.raises(ConfigError, match="name is empty."):
            check_required(data, CONFIG_REQUIRED, ConfigError)

    def test_false_counts_as_present(self):
        data = {"name": "Test", "IBAN": "x", "batch": False, "currency": "EUR"}
        check_required(data, CONFIG_REQUIRED, ConfigError)

    def test_is_empty(self):
        assert is_empty(None)
        assert is_empty("")
        assert is_empty([])
        assert not is_empty(0)
        assert not is_empty(False)


class TestRunValidators:
    """Test cases for running a validator table."""

    def test_reports_first_failure(self):
        data = {"amount": "10.00", "execution_date": "bad"}
        with pytest.raises(PaymentError) as exc_info:
            run_validators(data, payment_validators(True), PaymentError)

        assert exc_info.value.field == "amount"
        assert exc_info.value.reason == (
            "amount does not validate: 10.00 is not an amount in minor units"
        )

    def test_skips_absent_and_none_values(self):
        run_validators({"BIC": None}, payment_validators(True), PaymentError)
