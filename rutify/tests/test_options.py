"""
Tests for option resolution and error kinds.
"""

import pytest
from pydantic import ValidationError

from rutify.errors import ErrorKind, RutifyError
from rutify.options import DEFAULT_OPTIONS, RutFormat, RutifyOptions, resolve_options


class TestResolveOptions:
    """Tests for resolve_options()."""

    def test_defaults(self):
        options = resolve_options()
        assert options.separator == "."
        assert options.strict is False
        assert options.normalize is True
        assert options.format == RutFormat.STANDARD

    def test_none_returns_defaults(self):
        assert resolve_options(None) == DEFAULT_OPTIONS

    def test_partial_override(self):
        options = resolve_options({"format": "compact", "strict": True})
        assert options.format == RutFormat.COMPACT
        assert options.strict is True
        assert options.separator == "."
        assert options.normalize is True

    def test_enum_value_accepted(self):
        assert resolve_options({"format": RutFormat.CLEAN}).format == RutFormat.CLEAN

    def test_unknown_keys_ignored(self):
        options = resolve_options({"separator": ",", "colour": "blue"})
        assert options.separator == ","
        assert not hasattr(options, "colour")

    def test_instance_passes_through(self):
        options = RutifyOptions(separator=" ")
        assert resolve_options(options) is options

    @pytest.mark.parametrize(
        "options,field",
        [
            ({"separator": ""}, "separator"),
            ({"separator": ".."}, "separator"),
            ({"separator": 5}, "separator"),
            ({"format": "fancy"}, "format"),
            ({"format": "STANDARD"}, "format"),
            ({"strict": "maybe"}, "strict"),
        ],
        ids=[
            "empty_separator",
            "long_separator",
            "non_string_separator",
            "unknown_format",
            "uppercase_format",
            "non_boolean_strict",
        ],
    )
    def test_invalid_option_raises(self, options, field):
        with pytest.raises(RutifyError) as exc_info:
            resolve_options(options)

        error = exc_info.value
        assert error.code == ErrorKind.INVALID_OPTION
        assert field in error.details["fields"]
        assert field in error.message

    def test_non_mapping_raises(self):
        with pytest.raises(RutifyError) as exc_info:
            resolve_options("standard")

        assert exc_info.value.code == ErrorKind.INVALID_OPTION
        assert exc_info.value.details == {"type": "str"}

    def test_options_are_immutable(self):
        options = resolve_options({"separator": ","})
        with pytest.raises(ValidationError):
            options.separator = "."


class TestRutifyError:
    """Tests for the structured error."""

    def test_defaults_to_invalid_option(self):
        error = RutifyError("bad separator")
        assert error.code == ErrorKind.INVALID_OPTION
        assert error.details == {}
        assert str(error) == "bad separator"

    def test_to_dict(self):
        error = RutifyError("bad", ErrorKind.INVALID_SHAPE, {"value": "x"})
        assert error.to_dict() == {
            "message": "bad",
            "code": "INVALID_SHAPE",
            "details": {"value": "x"},
        }

    def test_kind_is_string_valued(self):
        assert ErrorKind.CHECKSUM_MISMATCH == "CHECKSUM_MISMATCH"
