from .digest import HashAlgorithm as HashAlgorithm
from .digest import keyed_hash as keyed_hash
from .exceptions import DecodeError as DecodeError
from .exceptions import InvalidParameterError as InvalidParameterError
from .exceptions import OtpError as OtpError
from .exceptions import UnsupportedAlgorithmError as UnsupportedAlgorithmError
from .hotp import HOTP as HOTP
from .otp import OTP as OTP
from .totp import TOTP as TOTP
from .totp import generate_totp as generate_totp
from .utils import decode_base32 as decode_base32

__version__ = "0.1.0"
