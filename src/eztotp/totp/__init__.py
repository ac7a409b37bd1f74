"""
TOTP-related modules for eztotp

The verifier lives in ``eztotp.totp.verifier`` and is not imported here,
so that ``eztotp.state`` can depend on the parameters without a cycle.
"""

from .parameters import Parameters
from .generator import generate
from .window import candidates, timecode, seconds_remaining
from .normalize import normalize_code
from .results import Accepted, Rejected

__all__ = [
    'Parameters',
    'generate',
    'candidates',
    'timecode',
    'seconds_remaining',
    'normalize_code',
    'Accepted',
    'Rejected'
]
