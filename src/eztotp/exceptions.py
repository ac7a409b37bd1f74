"""
Error taxonomy for eztotp.

All errors derive from ValueError so callers that already treat bad input
as a ValueError keep working. Rejections (a malformed or non-matching code)
are normally reported as ``Rejected`` results by the verifier rather than
raised; ``MalformedCode`` only escapes when ``normalize_code`` is called
directly.
"""


class EzTotpError(ValueError):
    """Base class for every error raised by eztotp."""


class InvalidParameters(EzTotpError):
    """Digit count, period, tolerance or algorithm is unusable."""


class InvalidTimestamp(EzTotpError):
    """The supplied time cannot be mapped to a non-negative counter."""


class MalformedCode(EzTotpError):
    """A submitted code failed shape validation."""


class InvalidState(EzTotpError):
    """
    Persisted verifier state, or a sealed secret, could not be loaded.

    Raised for unknown format versions, badly typed fields, parameter
    mismatches and failed authentication of sealed secrets.
    """
