"""
Unit Tests for Phone Number Normalisation
"""

import pytest

from stk_gateway.utils.validators import normalize_phone_number


class TestNormalizePhoneNumber:

    @pytest.mark.parametrize("raw, expected", [
        ("0712345678",       "254712345678"),  # local 07XX -> 2547XX
        ("254712345678",     "254712345678"),  # already international
        ("712345678",        "254712345678"),  # 9-digit -> prepend 254
        ("+254712345678",    "254712345678"),  # strip leading +
        ("254 712 345 678",  "254712345678"),  # strip spaces
        ("0712-345-678",     "254712345678"),  # strip dashes
        ("0110345678",       "254110345678"),  # 01XX prefix
        (712345678,          "254712345678"),  # numeric input
        (254712345678,       "254712345678"),
    ])
    def test_accepted_formats(self, raw, expected):
        assert normalize_phone_number(raw) == expected

    @pytest.mark.parametrize("raw", [
        "12345",
        "",
        None,
        "07123456789",     # 11 digits with leading 0
        "2547123456789",   # 13 digits
        "255712345678",    # foreign country code, 12 digits
        "abcdefghi",
    ])
    def test_rejected_formats(self, raw):
        assert normalize_phone_number(raw) is None
