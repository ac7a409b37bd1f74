"""
Security-related modules for eztotp

This package provides:
- Constant-time comparison for secret-derived values
- The scratch code store and the replay guard
- Masked, wipeable secret handling and AES-GCM sealing of secrets
- Security event tracking and alerting
"""

from .constant_time import constant_time_equals
from .scratch import ScratchCode, ScratchCodeStore
from .replay_guard import ReplayGuard
from .secure_string import SecureString
from .sealing import seal_secret, unseal_secret, generate_sealing_key
from .security_events import (
    SecurityEventTracker,
    record_security_event,
    get_security_event_count,
    reset_security_counters
)

__all__ = [
    'constant_time_equals',
    'ScratchCode',
    'ScratchCodeStore',
    'ReplayGuard',
    'SecureString',
    'seal_secret',
    'unseal_secret',
    'generate_sealing_key',
    'SecurityEventTracker',
    'record_security_event',
    'get_security_event_count',
    'reset_security_counters'
]
