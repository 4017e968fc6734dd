from typing import Optional, Union

from . import utils
from .digest import HashAlgorithm
from .otp import OTP


class HOTP(OTP):
    """
    Handler for HMAC-based OTP counters.
    """

    def __init__(
        self,
        s: str,
        digits: int = 6,
        digest: Union[HashAlgorithm, str, None] = None,
        name: Optional[str] = None,
        initial_count: int = 0,
        six_digit_modulus: bool = True,
    ) -> None:
        """
        :param s: secret in base32 format
        :param initial_count: starting HMAC counter value, defaults to 0
        :param digits: number of integers in the OTP. Some apps expect this to be 6 digits, others support more.
        :param digest: hash algorithm of the HMAC, defaults to SHA1
        :param name: account name
        :param six_digit_modulus: see OTP
        """
        self.initial_count = initial_count
        super().__init__(s=s, digits=digits, digest=digest, name=name, six_digit_modulus=six_digit_modulus)

    def at(self, count: int) -> str:
        """
        Generates the OTP for the given count.

        :param count: the OTP HMAC counter
        :returns: OTP
        """
        return self.generate_otp(self.initial_count + count)

    def verify(self, otp: str, counter: int) -> bool:
        """
        Verifies the OTP passed in against the current counter OTP.

        :param otp: the OTP to check against
        :param counter: the OTP HMAC counter
        """
        return utils.strings_equal(str(otp), str(self.at(counter)))
