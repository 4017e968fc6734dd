from __future__ import annotations

import pytest

# base32 of the RFC 4226 / RFC 6238 ASCII test keys
SECRET_SHA1 = "GEZDGNBVGY3TQOJQGEZDGNBVGY3TQOJQ"
SECRET_SHA256 = "GEZDGNBVGY3TQOJQGEZDGNBVGY3TQOJQGEZDGNBVGY3TQOJQGEZA===="
SECRET_SHA512 = (
    "GEZDGNBVGY3TQOJQGEZDGNBVGY3TQOJQGEZDGNBVGY3TQOJQGEZDGNBVGY3TQOJQ"
    "GEZDGNBVGY3TQOJQGEZDGNBVGY3TQOJQGEZDGNA="
)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch, tmp_path):
    for name in ("OTPGEN_ALGORITHM", "OTPGEN_DIGITS", "OTPGEN_PERIOD", "OTPGEN_SIX_DIGIT_MODULUS"):
        monkeypatch.delenv(name, raising=False)
    # keep a stray .env in the working directory out of Settings
    monkeypatch.chdir(tmp_path)
