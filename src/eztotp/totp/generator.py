"""
One-time code generation

Computes the RFC 4226 code for a counter value. The HMAC, dynamic
truncation and zero padding are delegated to PyOTP; this module only
adapts a raw byte secret to PyOTP's base32 interface and validates inputs.
"""

import base64

import pyotp

from ..exceptions import InvalidParameters
from .parameters import MAX_COUNTER, resolve_digest, validate_digits


def _base32_secret(secret):
    if isinstance(secret, str):
        secret = secret.encode('utf-8')
    if not isinstance(secret, (bytes, bytearray)) or not secret:
        raise InvalidParameters("Secret must be a non-empty byte sequence")
    return base64.b32encode(bytes(secret)).decode('ascii')


def generate(secret, counter, digits=6, algorithm='sha1'):
    """
    Generate the one-time code for a counter.

    Args:
        secret (bytes): Raw HMAC key
        counter (int): Non-negative counter value
        digits (int): Code length, 6 to 8
        algorithm (str): 'sha1', 'sha256' or 'sha512'

    Returns:
        str: Zero-padded code of exactly ``digits`` ASCII digits

    Raises:
        InvalidParameters: On bad digits, algorithm, secret or counter
    """
    validate_digits(digits)
    digest = resolve_digest(algorithm)
    if isinstance(counter, bool) or not isinstance(counter, int) or counter < 0:
        raise InvalidParameters(f"Counter must be a non-negative integer, got {counter!r}")
    if counter > MAX_COUNTER:
        raise InvalidParameters("Counter does not fit in 8 bytes")

    hotp = pyotp.HOTP(_base32_secret(secret), digits=digits, digest=digest)
    return hotp.at(counter)
