import logging
from typing import Optional, Union

from . import utils
from .digest import HashAlgorithm, keyed_hash
from .exceptions import InvalidParameterError

logger = logging.getLogger(__name__)

MAX_DIGITS = 10
# Counters are written into the low 4 bytes of the 8 byte HMAC message only.
MAX_COUNTER = 0xFFFFFFFF
LEGACY_MODULUS = 10**6


class OTP(object):
    """
    Base class for OTP handlers.
    """

    def __init__(
        self,
        s: str,
        digits: int = 6,
        digest: Union[HashAlgorithm, str, None] = None,
        name: Optional[str] = None,
        six_digit_modulus: bool = True,
    ) -> None:
        """
        :param s: secret in base32 format
        :param digits: number of integers in the OTP, 1 to 10
        :param digest: hash algorithm of the HMAC, defaults to SHA1
        :param name: account name, only used in repr
        :param six_digit_modulus: reduce the truncated hash modulo 10**6 before
            padding to digits, as deployed verifiers do. Pass False for the
            RFC 4226 reduction modulo 10**digits.
        """
        if isinstance(digits, bool) or not isinstance(digits, int) or not 0 < digits <= MAX_DIGITS:
            raise InvalidParameterError("digits must be an integer between 1 and {}".format(MAX_DIGITS))
        self.digits = digits
        self.digest = HashAlgorithm.parse(digest if digest is not None else HashAlgorithm.SHA1)
        self.secret = s
        self.name = name or "Secret"
        self.six_digit_modulus = six_digit_modulus

    def __repr__(self) -> str:
        return "<{} {!r} digits={} digest={}>".format(
            type(self).__name__, self.name, self.digits, self.digest.name
        )

    def generate_otp(self, input: int, key: Optional[bytes] = None) -> str:
        """
        :param input: the HMAC counter value to use as the OTP input.
            Usually either the counter, or the computed integer based on the Unix timestamp
        :param key: the already decoded secret, decoded from self.secret when omitted
        """
        # Implements RFC 4226
        if key is None:
            key = self.byte_secret()
        message = self.int_to_bytestring(input)
        logger.debug("Generating %d digit OTP with %s for counter %d", self.digits, self.digest.name, input)
        hmac_hash = keyed_hash(key, message, self.digest)
        return self.format_code(self.truncate(hmac_hash), self.digits, self.six_digit_modulus)

    def byte_secret(self) -> bytes:
        return utils.decode_base32(self.secret)

    @staticmethod
    def int_to_bytestring(i: int, padding: int = 8) -> bytes:
        """
        Turns an integer to the OATH specified
        bytestring, which is fed to the HMAC
        along with the secret
        """
        if i < 0:
            raise InvalidParameterError("input must be positive integer")
        if i > MAX_COUNTER:
            raise InvalidParameterError("counter {} does not fit in 32 bits".format(i))
        result = bytearray()
        while i != 0:
            result.append(i & 0xFF)
            i >>= 8
        return bytes(bytearray(reversed(result)).rjust(padding, b"\0"))

    @staticmethod
    def truncate(hmac_hash: bytes) -> int:
        """
        Dynamic truncation of RFC 4226 section 5.3.

        The low nibble of the last byte selects an offset; the four bytes
        starting there are read big-endian with the top bit cleared.

        :param hmac_hash: HMAC digest
        :returns: integer in [0, 2**31 - 1]
        """
        if not hmac_hash:
            raise InvalidParameterError("digest is empty")
        offset = hmac_hash[-1] & 0xF
        if len(hmac_hash) < offset + 4:
            raise InvalidParameterError(
                "digest of {} bytes is too short for offset {}".format(len(hmac_hash), offset)
            )
        return (
            (hmac_hash[offset] & 0x7F) << 24
            | (hmac_hash[offset + 1] & 0xFF) << 16
            | (hmac_hash[offset + 2] & 0xFF) << 8
            | (hmac_hash[offset + 3] & 0xFF)
        )

    @staticmethod
    def format_code(code: int, digits: int, six_digit_modulus: bool = True) -> str:
        """
        Renders a truncated hash as a zero-padded decimal string of length digits.

        With six_digit_modulus the code is first reduced to six decimal digits,
        so digits above 6 only add leading zeros.
        """
        if six_digit_modulus:
            str_code = str(code % LEGACY_MODULUS).rjust(6, "0")
            return str_code[-digits:].rjust(digits, "0")
        return str(code % 10**digits).rjust(digits, "0")
