"""
Tests for the módulo 11 check digit computation.
"""

import pytest
from rutify.checksum import check_digit_matches, compute_check_digit


class TestComputeCheckDigit:
    """Tests for check digit computation."""

    @pytest.mark.parametrize(
        "body,expected",
        [
            ("18927589", "7"),
            ("20901792", "K"),
            ("12345678", "5"),
            ("11111111", "1"),
            ("7654321", "6"),
            ("1234567", "4"),
            ("1000005", "K"),
            ("1000013", "0"),
            ("1111111", "4"),
            ("1", "9"),
            ("12", "4"),
            ("5", "1"),
            ("6", "K"),
            ("0", "0"),
            ("1234567890", "3"),
        ],
        ids=[
            "eight_digits",
            "eight_digits_K",
            "standard",
            "ones",
            "seven_digits",
            "seven_digits_ascending",
            "dv_K",
            "dv_zero",
            "short_ones",
            "single_digit",
            "two_digits",
            "remainder_ten",
            "remainder_one_single",
            "zero_body",
            "ten_digits_weight_wraps",
        ],
    )
    def test_known_check_digits(self, body, expected):
        assert compute_check_digit(body) == expected

    @pytest.mark.parametrize(
        "body",
        ["", "abc", "12a45", "12.345", "12345-6", " 123", "123K", "١٢٣", None, 12345678],
        ids=[
            "empty",
            "letters",
            "mixed",
            "with_dot",
            "with_hyphen",
            "leading_space",
            "trailing_K",
            "non_ascii_digits",
            "none",
            "integer",
        ],
    )
    def test_invalid_body_returns_false(self, body):
        assert compute_check_digit(body) is False

    def test_leading_zeros_do_not_change_result(self):
        assert compute_check_digit("0018927589") == compute_check_digit("18927589")

    def test_long_body_is_processed_digit_by_digit(self):
        body = "9" * 60
        result = compute_check_digit(body)
        assert result in set("0123456789K")

    def test_result_is_always_in_alphabet(self):
        for n in range(1, 500):
            assert compute_check_digit(str(n)) in set("0123456789K")


class TestCheckDigitMatches:
    """Tests for check digit comparison."""

    def test_matching_digit(self):
        assert check_digit_matches("18927589", "7") is True

    def test_lowercase_k_matches(self):
        assert check_digit_matches("20901792", "k") is True

    def test_mismatch(self):
        assert check_digit_matches("18927589", "8") is False

    def test_invalid_body(self):
        assert check_digit_matches("1x", "9") is False
