"""
eztotp - TOTP verification with scratch codes and replay protection

The caller loads a ``Verifier`` from its stored state, verifies exactly one
submitted code, and saves the state back, all under one exclusive lock per
secret.
"""

from .exceptions import (
    EzTotpError,
    InvalidParameters,
    InvalidTimestamp,
    MalformedCode,
    InvalidState
)
from .totp import (
    Parameters,
    generate,
    candidates,
    normalize_code,
    Accepted,
    Rejected
)
from .totp.verifier import Verifier
from .security import (
    ScratchCode,
    ScratchCodeStore,
    ReplayGuard,
    SecureString,
    constant_time_equals,
    seal_secret,
    unseal_secret,
    generate_sealing_key
)
from .state import dumps_state, loads_state, STATE_VERSION

__version__ = "0.1.0"

__all__ = [
    'EzTotpError',
    'InvalidParameters',
    'InvalidTimestamp',
    'MalformedCode',
    'InvalidState',
    'Parameters',
    'generate',
    'candidates',
    'normalize_code',
    'Accepted',
    'Rejected',
    'Verifier',
    'ScratchCode',
    'ScratchCodeStore',
    'ReplayGuard',
    'SecureString',
    'constant_time_equals',
    'seal_secret',
    'unseal_secret',
    'generate_sealing_key',
    'dumps_state',
    'loads_state',
    'STATE_VERSION'
]
