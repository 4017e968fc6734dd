class OtpError(ValueError):
    """
    Base class for errors raised while generating an OTP.
    """


class DecodeError(OtpError):
    """
    The secret is not valid base32, or decodes to no bytes at all.
    """


class UnsupportedAlgorithmError(OtpError):
    """
    The requested HMAC hash algorithm is not one of the supported variants.
    """


class InvalidParameterError(OtpError):
    """
    digits, period or the derived counter is out of range.
    """
