import hmac
from enum import Enum
from typing import Union

from .exceptions import UnsupportedAlgorithmError


class HashAlgorithm(Enum):
    """
    Hash functions that may back the HMAC of an OTP.
    """

    SHA1 = "sha1"
    SHA256 = "sha256"
    SHA512 = "sha512"

    @classmethod
    def parse(cls, value: Union["HashAlgorithm", str]) -> "HashAlgorithm":
        """
        Resolves an algorithm given as a member or as a name.

        Names are matched case-insensitively with or without a dash,
        so "SHA1", "sha-256" and "SHA-512" are all accepted.

        :param value: the algorithm member or name
        :returns: HashAlgorithm member
        """
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            raise UnsupportedAlgorithmError("Algorithm must be a string, got {!r}".format(value))
        normalized = value.strip().lower().replace("-", "")
        for member in cls:
            if member.value == normalized:
                return member
        raise UnsupportedAlgorithmError("Invalid value for algorithm, must be SHA1, SHA256 or SHA512")


def keyed_hash(key: bytes, message: bytes, algorithm: Union[HashAlgorithm, str] = HashAlgorithm.SHA1) -> bytes:
    """
    HMAC of message under key, hashed with the selected algorithm.

    :param key: the decoded secret
    :param message: the encoded counter
    :param algorithm: HashAlgorithm member or name
    :returns: digest bytes
    """
    algorithm = HashAlgorithm.parse(algorithm)
    return hmac.new(key, message, algorithm.value).digest()
