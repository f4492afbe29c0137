"""
Tests for generic mapping and presentation-format conversions.
"""

import json

import pytest

from sshfp_rdata.errors import InvalidArgument, MissingRequiredField
from sshfp_rdata.interchange import GenericAttributeView, from_mapping, parse_presentation, to_presentation
from sshfp_rdata.records import create_dsa, create_rsa


class TestFromMapping:
    """Tests for from_mapping."""

    def test_round_trip_through_json(self):
        """Test a record survives serialization as a generic JSON object."""
        rec = create_rsa("dd465c09cfa51fb45020cc83316fff21b9ec74ac")
        payload = json.loads(json.dumps(dict(rec)))
        assert from_mapping(payload) == rec

    def test_record_is_accepted_as_mapping(self):
        """Test a record itself can seed a new record."""
        rec = create_dsa("ab")
        assert from_mapping(rec) == rec

    def test_extra_keys_ignored(self):
        """Test keys outside the three-key shape are ignored."""
        rec = from_mapping({"name": "host.", "ttl": 60, "algorithm": 1, "fptype": 2, "fingerprint": "ab"})
        assert dict(rec) == {"algorithm": 1, "fptype": 2, "fingerprint": "ab"}

    def test_numeric_strings_coerced(self):
        """Test integer fields given as text are converted."""
        rec = from_mapping({"algorithm": "4", "fptype": "2", "fingerprint": "ab"})
        assert (rec.algorithm, rec.fptype) == (4, 2)

    def test_integral_float_accepted(self):
        """Test a float with no fractional part is taken as that integer."""
        assert from_mapping({"algorithm": 2.0, "fptype": 1, "fingerprint": "ab"}).algorithm == 2

    def test_missing_integers_default_to_zero(self):
        """Test absent integer keys behave like unset builder fields."""
        rec = from_mapping({"fingerprint": "ab"})
        assert (rec.algorithm, rec.fptype) == (0, 0)

    def test_missing_fingerprint(self):
        """Test an absent fingerprint fails with MissingRequiredField."""
        with pytest.raises(MissingRequiredField):
            from_mapping({"algorithm": 1, "fptype": 1})

    @pytest.mark.parametrize("value", ["rsa", None, [1], True, 1.9, "1.5"])
    def test_non_numeric_algorithm(self, value):
        """Test non-integer values raise InvalidArgument."""
        with pytest.raises(InvalidArgument, match="algorithm must be an integer"):
            from_mapping({"algorithm": value, "fptype": 1, "fingerprint": "ab"})

    def test_negative_value(self):
        """Test negative values still fail in the builder."""
        with pytest.raises(InvalidArgument, match="fptype of ab must be unsigned"):
            from_mapping({"algorithm": 1, "fptype": -1, "fingerprint": "ab"})


class TestPresentation:
    """Tests for zone-file presentation text."""

    def test_to_presentation(self):
        """Test records render as '<alg> <fptype> <fingerprint>'."""
        assert to_presentation(create_dsa("123abc")) == "2 1 123abc"

    def test_parse_presentation(self):
        """Test zone text parses back into an equal record."""
        assert parse_presentation("2 1 123abc") == create_dsa("123abc")

    def test_parse_split_fingerprint(self):
        """Test fingerprint chunks separated by whitespace are joined."""
        assert parse_presentation("1 1 dd465c09 cfa51fb4\t5020cc83").fingerprint == "dd465c09cfa51fb45020cc83"

    @pytest.mark.parametrize("text", ["", "1 1", "one 1 ab", "1 -1 ab"])
    def test_parse_invalid(self, text):
        """Test malformed text raises InvalidArgument."""
        with pytest.raises(InvalidArgument):
            parse_presentation(text)


class TestGenericAttributeView:
    """Tests for the GenericAttributeView protocol."""

    def test_record_satisfies_protocol(self):
        """Test records can be handled as generic attribute views."""
        assert isinstance(create_rsa("ab"), GenericAttributeView)
