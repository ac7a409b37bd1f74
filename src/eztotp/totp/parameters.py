"""
Verifier parameters

Digit count, period, tolerance and hash algorithm are fixed when a verifier
is built. Any change makes previously stored replay state meaningless, so
the parameters travel with the persisted state and are compared on load.
"""

import hashlib

from ..exceptions import InvalidParameters

MIN_DIGITS = 6
MAX_DIGITS = 8
MAX_TOLERANCE = 10

# Counters are fed to the HMAC as 8 big-endian bytes
MAX_COUNTER = 2 ** 64 - 1

ALGORITHMS = {
    'sha1': hashlib.sha1,
    'sha256': hashlib.sha256,
    'sha512': hashlib.sha512,
}


def resolve_digest(algorithm):
    """
    Map an algorithm name to its hashlib constructor.

    Args:
        algorithm (str): One of 'sha1', 'sha256' or 'sha512' (case-insensitive)

    Returns:
        callable: hashlib constructor suitable for hmac / pyotp

    Raises:
        InvalidParameters: If the algorithm is not supported
    """
    if not isinstance(algorithm, str):
        raise InvalidParameters(f"Algorithm must be a string, got {type(algorithm).__name__}")
    digest = ALGORITHMS.get(algorithm.lower())
    if digest is None:
        raise InvalidParameters(
            f"Unsupported algorithm '{algorithm}', expected one of {', '.join(sorted(ALGORITHMS))}"
        )
    return digest


def validate_digits(digits):
    if isinstance(digits, bool) or not isinstance(digits, int):
        raise InvalidParameters("Digit count must be an integer")
    if not MIN_DIGITS <= digits <= MAX_DIGITS:
        raise InvalidParameters(f"Digit count must be between {MIN_DIGITS} and {MAX_DIGITS}, got {digits}")
    return digits


class Parameters:
    """
    Immutable verification parameters.

    Args:
        digits (int): Length of generated codes, 6 to 8
        period (int): Seconds per time step, must be positive
        tolerance (int): Adjacent steps accepted on each side of the current one,
            0 to 10
        algorithm (str): HMAC hash name ('sha1', 'sha256' or 'sha512')
        reuse_allowed (bool): Disable replay enforcement when True

    Raises:
        InvalidParameters: If any value is out of range
    """

    __slots__ = ('_digits', '_period', '_tolerance', '_algorithm', '_reuse_allowed')

    def __init__(self, digits=6, period=30, tolerance=1, algorithm='sha1', reuse_allowed=False):
        validate_digits(digits)
        if isinstance(period, bool) or not isinstance(period, int) or period <= 0:
            raise InvalidParameters(f"Period must be a positive integer, got {period!r}")
        if isinstance(tolerance, bool) or not isinstance(tolerance, int) or tolerance < 0:
            raise InvalidParameters(f"Tolerance must be a non-negative integer, got {tolerance!r}")
        if tolerance > MAX_TOLERANCE:
            raise InvalidParameters(f"Tolerance must be at most {MAX_TOLERANCE}, got {tolerance}")
        resolve_digest(algorithm)
        if not isinstance(reuse_allowed, bool):
            raise InvalidParameters("reuse_allowed must be a boolean")

        object.__setattr__(self, '_digits', digits)
        object.__setattr__(self, '_period', period)
        object.__setattr__(self, '_tolerance', tolerance)
        object.__setattr__(self, '_algorithm', algorithm.lower())
        object.__setattr__(self, '_reuse_allowed', reuse_allowed)

    def __setattr__(self, name, value):
        raise AttributeError("Parameters are immutable")

    @property
    def digits(self):
        return self._digits

    @property
    def period(self):
        return self._period

    @property
    def tolerance(self):
        return self._tolerance

    @property
    def algorithm(self):
        return self._algorithm

    @property
    def reuse_allowed(self):
        return self._reuse_allowed

    @property
    def digest(self):
        return ALGORITHMS[self._algorithm]

    def _key(self):
        return (self._digits, self._period, self._tolerance, self._algorithm, self._reuse_allowed)

    def __eq__(self, other):
        if not isinstance(other, Parameters):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self):
        return hash(self._key())

    def __repr__(self):
        return (
            f"Parameters(digits={self._digits}, period={self._period}, "
            f"tolerance={self._tolerance}, algorithm='{self._algorithm}', "
            f"reuse_allowed={self._reuse_allowed})"
        )
