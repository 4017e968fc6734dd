"""otpgen CLI: print the current TOTP for a base32 secret.

Usage:
    python -m otpgen SECRET                       # SHA1, 6 digits, 30s
    python -m otpgen SECRET --algorithm SHA256 --digits 8
    python -m otpgen SECRET --time 1111111109     # code at a fixed time

Defaults come from OTPGEN_ALGORITHM, OTPGEN_DIGITS, OTPGEN_PERIOD and
OTPGEN_SIX_DIGIT_MODULUS.
"""

from __future__ import annotations

import argparse
import logging
import sys

from pydantic import ValidationError

from otpgen.config import Settings
from otpgen.exceptions import OtpError
from otpgen.totp import generate_totp


def build_parser(settings: Settings) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="otpgen",
        description="Generate a time-based one-time password",
    )
    parser.add_argument("secret", help="Base32-encoded shared secret")
    parser.add_argument("--algorithm", default=settings.algorithm.name, help="SHA1, SHA256 or SHA512")
    parser.add_argument("--digits", type=int, default=settings.digits)
    parser.add_argument("--period", type=int, default=settings.period, help="Seconds per time step")
    parser.add_argument("--time", type=int, default=None, help="Unix timestamp (defaults to now)")
    parser.add_argument(
        "--standard-modulus",
        action="store_true",
        default=not settings.six_digit_modulus,
        help="Reduce modulo 10**digits instead of 10**6",
    )
    parser.add_argument("-v", "--verbose", action="store_true")
    return parser


def main(argv: list[str] | None = None) -> int:
    try:
        settings = Settings()
    except ValidationError as e:
        problems = "; ".join(
            "OTPGEN_{}: {}".format("_".join(str(part) for part in err["loc"]).upper(), err["msg"]) for err in e.errors()
        )
        print(f"Error: invalid configuration: {problems}", file=sys.stderr)
        return 2

    args = build_parser(settings).parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
        datefmt="%H:%M:%S",
    )

    try:
        code = generate_totp(
            args.algorithm,
            args.secret,
            args.digits,
            args.period,
            for_time=args.time,
            six_digit_modulus=not args.standard_modulus,
        )
    except OtpError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    print(code)
    return 0


if __name__ == "__main__":
    sys.exit(main())
