"""
Tests for RUT shape checks.
"""

import pytest
from rutify.shape import is_valid_shape, split_identifier


class TestIsValidShape:
    """Tests for is_valid_shape()."""

    @pytest.mark.parametrize(
        "value,expected",
        [
            ("18.927.589-7", True),
            ("20901792K", True),
            ("20901792k", True),
            ("1-9", True),
            ("19", True),
            ("12K", True),
            ("1", False),
            ("K", False),
            ("", False),
            ("-", False),
            ("K1", False),
            ("1K9", False),
            ("KK", False),
        ],
        ids=[
            "standard",
            "clean_K",
            "clean_lowercase_k",
            "shortest_with_hyphen",
            "shortest",
            "short_with_K",
            "single_digit",
            "single_K",
            "empty",
            "only_hyphen",
            "K_in_body_first",
            "K_in_middle",
            "only_Ks",
        ],
    )
    def test_shape(self, value, expected):
        assert is_valid_shape(value) is expected

    @pytest.mark.parametrize("value", [None, 189275897, ["18927589", "7"]])
    def test_non_string_is_rejected(self, value):
        assert is_valid_shape(value) is False

    @pytest.mark.parametrize("value", ["18.927.589-7", "20901792K", "1-9", "1K9", "K"])
    def test_strict_agrees_with_relaxed(self, value):
        assert is_valid_shape(value, strict=True) == is_valid_shape(value)

    def test_preserve_structure_rejects_foreign_characters(self):
        assert is_valid_shape("RUT 1-9") is True
        assert is_valid_shape("RUT 1-9", normalize=False) is False


class TestSplitIdentifier:
    """Tests for split_identifier()."""

    def test_split(self):
        assert split_identifier("189275897") == ("18927589", "7")
        assert split_identifier("20901792K") == ("20901792", "K")
        assert split_identifier("19") == ("1", "9")
