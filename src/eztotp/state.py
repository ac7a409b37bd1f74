"""
Persisted verifier state

Explicit, versioned field list for everything a caller has to store after
a verification. The shared secret is deliberately absent; see
``security.sealing`` for storing it alongside.

Version 1 fields:

    version                int, always 1
    digits                 int, 6 to 8
    period                 int, seconds per step
    tolerance              int, 0 to 10 steps on each side of the current one
    algorithm              str, 'sha1' / 'sha256' / 'sha512'
    reuse_allowed          bool
    last_accepted_counter  int or null
    scratch_codes          list of {"code": str, "consumed": bool}

Loading ignores unknown keys and fills missing parameter keys with their
defaults, so adding a field later does not break older readers.
"""

import json

from .exceptions import InvalidParameters, InvalidState
from .security.replay_guard import ReplayGuard
from .security.scratch import ScratchCodeStore
from .totp.parameters import Parameters

STATE_VERSION = 1

PARAMETER_FIELDS = ('digits', 'period', 'tolerance', 'algorithm', 'reuse_allowed')

PARAMETER_DEFAULTS = {
    'digits': 6,
    'period': 30,
    'tolerance': 1,
    'algorithm': 'sha1',
    'reuse_allowed': False,
}


def build_state(parameters, replay_guard, scratch_store):
    """
    Assemble the state dict.

    Args:
        parameters (Parameters): Verifier parameters
        replay_guard (ReplayGuard): Replay guard holding the last counter
        scratch_store (ScratchCodeStore): Scratch code pool

    Returns:
        dict: JSON-compatible state
    """
    return {
        'version': STATE_VERSION,
        'digits': parameters.digits,
        'period': parameters.period,
        'tolerance': parameters.tolerance,
        'algorithm': parameters.algorithm,
        'reuse_allowed': parameters.reuse_allowed,
        'last_accepted_counter': replay_guard.last_accepted,
        'scratch_codes': scratch_store.to_list(),
    }


def parse_state(data):
    """
    Validate a state dict and rebuild its components.

    Args:
        data (dict): State as produced by ``build_state``

    Returns:
        tuple: (Parameters, ReplayGuard, ScratchCodeStore)

    Raises:
        InvalidState: If the dict is not a loadable state
    """
    if not isinstance(data, dict):
        raise InvalidState("State must be a mapping")

    version = data.get('version')
    if isinstance(version, bool) or not isinstance(version, int):
        raise InvalidState("State has no valid version")
    if version > STATE_VERSION:
        raise InvalidState(f"State version {version} is newer than supported version {STATE_VERSION}")
    if version < 1:
        raise InvalidState(f"Unknown state version {version}")

    values = {field: data.get(field, PARAMETER_DEFAULTS[field]) for field in PARAMETER_FIELDS}
    try:
        parameters = Parameters(**values)
    except InvalidParameters as e:
        raise InvalidState(f"Stored parameters are invalid: {e}")

    replay_guard = ReplayGuard(data.get('last_accepted_counter'))
    scratch_store = ScratchCodeStore.from_list(data.get('scratch_codes', []))
    return parameters, replay_guard, scratch_store


def dumps_state(state):
    """Encode a state dict as compact, key-sorted JSON."""
    return json.dumps(state, sort_keys=True, separators=(',', ':'))


def loads_state(text):
    """
    Decode JSON produced by ``dumps_state``.

    Raises:
        InvalidState: If the text is not a JSON object
    """
    try:
        data = json.loads(text)
    except (TypeError, ValueError) as e:
        raise InvalidState(f"State is not valid JSON: {e}")
    if not isinstance(data, dict):
        raise InvalidState("State must be a JSON object")
    return data
