import base64
import binascii
import unicodedata
from hmac import compare_digest

from .exceptions import DecodeError

BASE32_ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZ234567"


def decode_base32(secret: str) -> bytes:
    """
    Decodes a base32 secret into the raw key bytes fed to the HMAC.

    The secret is case-insensitive and may omit its "=" padding; padding is
    added to reach a multiple of 8 characters before decoding.

    :param secret: base32-encoded secret
    :returns: secret bytes
    :raises DecodeError: on characters outside the RFC 4648 alphabet, malformed
        padding, or a secret that decodes to nothing
    """
    if not isinstance(secret, str):
        raise DecodeError("Secret must be a base32 string")
    # upper() maps some non-ASCII letters onto the alphabet, e.g. "ß" to "SS"
    if not secret.isascii():
        raise DecodeError("Secret contains non-ASCII characters")
    secret = secret.upper()
    missing_padding = len(secret) % 8
    if missing_padding != 0:
        secret += "=" * (8 - missing_padding)

    invalid = sorted({c for c in secret if c not in BASE32_ALPHABET and c != "="})
    if invalid:
        raise DecodeError("Secret contains non-base32 characters: {}".format("".join(invalid)))

    try:
        key = base64.b32decode(secret)
    except binascii.Error as e:
        raise DecodeError("Secret is not valid base32: {}".format(e)) from e
    if not key:
        raise DecodeError("Secret decodes to zero bytes")
    return key


def strings_equal(s1: str, s2: str) -> bool:
    """
    Timing-attack resistant string comparison.

    Normal comparison using == will short-circuit on the first mismatching
    character. This avoids that by scanning the whole string, though we
    still reveal to a timing attack whether the strings are the same
    length.
    """
    s1 = unicodedata.normalize("NFKC", s1)
    s2 = unicodedata.normalize("NFKC", s2)
    return compare_digest(s1.encode("utf-8"), s2.encode("utf-8"))
