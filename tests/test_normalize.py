"""
Tests for submitted code normalization.
"""

import pytest

from eztotp import MalformedCode, normalize_code


class TestDefaultPolicy:

    def test_exact_digits_pass(self):
        assert normalize_code("287082", {6}) == "287082"

    def test_leading_zeros_kept(self):
        assert normalize_code("000123", {6}) == "000123"

    @pytest.mark.parametrize("code", [
        "12a456",
        "12345",
        "1234567",
        "",
        " 287082",
        "287 082",
        "２８７０８２",   # fullwidth digits
        "٢٨٧٠٨٢",         # Arabic-Indic digits
    ])
    def test_malformed(self, code):
        with pytest.raises(MalformedCode):
            normalize_code(code, {6})

    @pytest.mark.parametrize("code", [None, 287082, b"287082"])
    def test_non_string(self, code):
        with pytest.raises(MalformedCode):
            normalize_code(code, {6})

    def test_multiple_lengths(self):
        assert normalize_code("11112222", {6, 8}) == "11112222"


class TestIgnoredCharacters:

    def test_separators_removed(self):
        assert normalize_code("287 082", {6}, ignored_characters=" -") == "287082"
        assert normalize_code("1111-2222", {8}, ignored_characters=" -") == "11112222"

    def test_other_characters_still_rejected(self):
        with pytest.raises(MalformedCode):
            normalize_code("287.082", {6}, ignored_characters=" -")

    def test_only_separators(self):
        with pytest.raises(MalformedCode):
            normalize_code(" - ", {6}, ignored_characters=" -")
