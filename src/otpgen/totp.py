import calendar
import datetime
import logging
import time
from typing import Optional, Union

from . import utils
from .digest import HashAlgorithm
from .exceptions import InvalidParameterError
from .otp import OTP

logger = logging.getLogger(__name__)

DEFAULT_INTERVAL = 30

TimeLike = Union[int, float, datetime.datetime]


class TOTP(OTP):
    """
    Handler for time-based OTP counters.
    """

    def __init__(
        self,
        s: str,
        digits: int = 6,
        digest: Union[HashAlgorithm, str, None] = None,
        name: Optional[str] = None,
        interval: int = DEFAULT_INTERVAL,
        six_digit_modulus: bool = True,
    ) -> None:
        """
        :param s: secret in base32 format
        :param interval: the time interval in seconds for OTP. This defaults to 30.
        :param digits: number of integers in the OTP. Some apps expect this to be 6 digits, others support more.
        :param digest: hash algorithm of the HMAC, defaults to SHA1
        :param name: account name
        :param six_digit_modulus: see OTP
        """
        if isinstance(interval, bool) or not isinstance(interval, int) or interval <= 0:
            raise InvalidParameterError("interval must be a positive integer")
        self.interval = interval
        super().__init__(s=s, digits=digits, digest=digest, name=name, six_digit_modulus=six_digit_modulus)

    def at(self, for_time: TimeLike) -> str:
        """
        Accepts either a Unix timestamp integer or a datetime object.

        :param for_time: the time to generate an OTP for
        :returns: OTP value
        """
        return self.generate_otp(self.timecode(for_time))

    def now(self) -> str:
        """
        Generate the current time OTP

        :returns: OTP value
        """
        return self.at(time.time())

    def verify(self, otp: str, for_time: Optional[TimeLike] = None) -> bool:
        """
        Verifies the OTP passed in against the current time OTP.

        Only the time step containing for_time is checked.

        :param otp: the OTP to check against
        :param for_time: Time to check OTP at (defaults to now)
        :returns: True if verification succeeded, False otherwise
        """
        if otp is None:
            return False
        if for_time is None:
            for_time = time.time()
        return utils.strings_equal(str(otp), str(self.at(for_time)))

    def timecode(self, for_time: TimeLike) -> int:
        """
        Accepts either a timezone naive (`for_time.tzinfo is None`) or
        a timezone aware datetime as argument and returns the
        corresponding counter value (timecode).

        Unix timestamps are truncated to whole seconds first.
        """
        if isinstance(for_time, datetime.datetime):
            if for_time.tzinfo:
                seconds = calendar.timegm(for_time.utctimetuple())
            else:
                seconds = int(time.mktime(for_time.timetuple()))
        else:
            seconds = int(for_time)
        if seconds < 0:
            raise InvalidParameterError("time must not be before the Unix epoch")
        return seconds // self.interval


def generate_totp(
    algorithm: Union[HashAlgorithm, str],
    secret: str,
    digits: int,
    period: int,
    for_time: Optional[TimeLike] = None,
    six_digit_modulus: bool = True,
) -> str:
    """
    Generates the TOTP for a base32 secret.

    The system clock is read once when for_time is not given.

    :param algorithm: HMAC hash algorithm, as a HashAlgorithm or a name like "SHA1"
    :param secret: base32 secret, case-insensitive, padding optional
    :param digits: length of the returned code
    :param period: seconds per time step
    :param for_time: Unix timestamp or datetime to generate the code for
    :param six_digit_modulus: see OTP
    :returns: OTP value
    :raises InvalidParameterError: digits or period out of range
    :raises UnsupportedAlgorithmError: unknown algorithm
    :raises DecodeError: secret is not valid base32
    """
    totp = TOTP(secret, digits=digits, digest=algorithm, interval=period, six_digit_modulus=six_digit_modulus)
    # A bad secret fails before the clock is read.
    key = totp.byte_secret()
    if for_time is None:
        for_time = time.time()
    logger.debug("Generating TOTP with period %ds", period)
    return totp.generate_otp(totp.timecode(for_time), key=key)
