"""
Secret sealing

The persisted verifier state never contains the shared secret. Callers
that keep the secret next to it can seal it first: AES-GCM with a 32-byte
key and a random 12-byte nonce, encoded as URL-safe base64 of
``nonce + ciphertext``.
"""

import os
import base64
import binascii
import logging

from cryptography.exceptions import InvalidTag
from cryptography.hazmat.primitives.ciphers.aead import AESGCM

from ..exceptions import InvalidParameters, InvalidState
from .secure_string import SecureString

logger = logging.getLogger(__name__)

KEY_SIZE = 32
NONCE_SIZE = 12

# Binds ciphertexts to this use so they cannot be swapped with other AES-GCM blobs
ASSOCIATED_DATA = b'eztotp-secret-v1'


def _check_key(key):
    if not isinstance(key, (bytes, bytearray)) or len(key) != KEY_SIZE:
        raise InvalidParameters(f"Sealing key must be {KEY_SIZE} bytes")
    return bytes(key)


def generate_sealing_key():
    """Return a fresh random 32-byte sealing key."""
    return AESGCM.generate_key(bit_length=KEY_SIZE * 8)


def seal_secret(secret, key):
    """
    Encrypt a TOTP secret for storage.

    Args:
        secret (bytes or SecureString): The raw shared secret
        key (bytes): 32-byte sealing key

    Returns:
        str: URL-safe base64 token
    """
    key = _check_key(key)
    if isinstance(secret, SecureString):
        secret = secret.get_value()
    if not isinstance(secret, (bytes, bytearray)) or not secret:
        raise InvalidParameters("Secret must be a non-empty byte sequence")

    nonce = os.urandom(NONCE_SIZE)
    ciphertext = AESGCM(key).encrypt(nonce, bytes(secret), ASSOCIATED_DATA)
    return base64.urlsafe_b64encode(nonce + ciphertext).decode('ascii')


def unseal_secret(token, key):
    """
    Decrypt a token produced by ``seal_secret``.

    Args:
        token (str): URL-safe base64 token
        key (bytes): 32-byte sealing key

    Returns:
        bytes: The raw shared secret

    Raises:
        InvalidState: If the token is malformed, was tampered with, or the
            key is wrong
    """
    key = _check_key(key)
    try:
        blob = base64.urlsafe_b64decode(token.encode('ascii'))
    except (AttributeError, UnicodeEncodeError, binascii.Error, ValueError):
        raise InvalidState("Sealed secret is not valid base64")
    if len(blob) <= NONCE_SIZE:
        raise InvalidState("Sealed secret is too short")

    nonce, ciphertext = blob[:NONCE_SIZE], blob[NONCE_SIZE:]
    try:
        return AESGCM(key).decrypt(nonce, ciphertext, ASSOCIATED_DATA)
    except InvalidTag:
        logger.warning("Sealed secret failed authentication")
        raise InvalidState("Sealed secret could not be decrypted")
