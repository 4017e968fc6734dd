"""Defaults for the command line, loaded from environment variables."""

from __future__ import annotations

from typing import Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from otpgen.digest import HashAlgorithm
from otpgen.otp import MAX_DIGITS
from otpgen.totp import DEFAULT_INTERVAL


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="OTPGEN_", env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    algorithm: HashAlgorithm = HashAlgorithm.SHA1
    digits: int = Field(default=6, ge=1, le=MAX_DIGITS)
    period: int = Field(default=DEFAULT_INTERVAL, gt=0)

    # Reduce modulo 10**6 before padding, as deployed verifiers do
    six_digit_modulus: bool = True

    @field_validator("algorithm", mode="before")
    @classmethod
    def _parse_algorithm(cls, value: Any) -> HashAlgorithm:
        return HashAlgorithm.parse(value)
