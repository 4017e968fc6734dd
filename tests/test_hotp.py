"""Tests for counter-based OTPs against the RFC 4226 appendix D values."""

from __future__ import annotations

import pytest

from otpgen.hotp import HOTP

from conftest import SECRET_SHA1

RFC4226_CODES = [
    "755224",
    "287082",
    "359152",
    "969429",
    "338314",
    "254676",
    "287922",
    "162583",
    "399871",
    "520489",
]


@pytest.mark.parametrize("count, expected", list(enumerate(RFC4226_CODES)))
def test_rfc4226_vectors(count, expected):
    assert HOTP(SECRET_SHA1).at(count) == expected


def test_initial_count_offsets_counter():
    hotp = HOTP(SECRET_SHA1, initial_count=3)
    assert hotp.at(0) == "969429"
    assert hotp.at(2) == "254676"


def test_verify():
    hotp = HOTP(SECRET_SHA1)
    assert hotp.verify("755224", 0)
    assert hotp.verify(287082, 1)
    assert not hotp.verify("755224", 1)
    assert not hotp.verify("000000", 0)
