"""
eztotp Verifier

The verification state machine. A ``Verifier`` aggregates the shared
secret, the parameters, the replay guard and the scratch code pool, and
answers one question per call: is this submitted code valid right now?

Each ``verify`` call is a single transition. On acceptance the verifier
mutates its replay guard or scratch pool and flags itself as needing a
save. The caller owns persistence and must run load, verify and save as
one exclusive critical section per secret; two concurrent attempts that
load the same state can otherwise both accept the same code.

Usage Flow:
1. Load: ``Verifier.from_dict(stored_state, secret)``
2. Verify: ``result = verifier.verify(code, time.time())``
3. Save: ``store(verifier.to_dict())`` whenever ``verifier.needs_save``
"""

import logging

from .. import config
from .. import state as state_format
from ..exceptions import InvalidParameters, InvalidState, InvalidTimestamp, MalformedCode
from ..security import security_events
from ..security.constant_time import constant_time_equals
from ..security.replay_guard import ReplayGuard
from ..security.scratch import ScratchCodeStore
from ..security.secure_string import SecureString
from . import window
from .generator import generate
from .normalize import normalize_code
from .parameters import Parameters
from .results import MALFORMED_CODE, NO_MATCH, Accepted, Rejected

logger = logging.getLogger(__name__)


class Verifier:
    """
    TOTP verifier with scratch codes and replay protection.

    Args:
        secret (bytes, str or SecureString): Shared HMAC key; strings are
            encoded as UTF-8
        parameters (Parameters): Verification parameters, defaults from
            ``config.default_parameters()``
        scratch_codes (Iterable): Scratch codes as strings or ScratchCode
        last_accepted_counter (int or None): Counter of the last accepted
            regular code
        ignored_characters (str): Characters dropped from submitted codes,
            defaults to ``config.IGNORED_CHARS``
        event_tracker (SecurityEventTracker): Receives outcome events,
            defaults to the module-level tracker

    Raises:
        InvalidParameters: On an empty secret or invalid scratch codes
    """

    def __init__(self, secret, parameters=None, scratch_codes=(), last_accepted_counter=None,
                 ignored_characters=None, event_tracker=None):
        try:
            secret = SecureString(secret)
        except TypeError:
            raise InvalidParameters("Secret must be bytes, str or SecureString")
        if not len(secret):
            raise InvalidParameters("Secret must not be empty")
        if parameters is None:
            parameters = config.default_parameters()
        if not isinstance(parameters, Parameters):
            raise InvalidParameters("parameters must be a Parameters instance")

        self._secret = secret
        self._parameters = parameters
        self._scratch = scratch_codes if isinstance(scratch_codes, ScratchCodeStore) else ScratchCodeStore(scratch_codes)
        if isinstance(last_accepted_counter, ReplayGuard):
            self._guard = last_accepted_counter
        else:
            try:
                self._guard = ReplayGuard(last_accepted_counter)
            except InvalidState as e:
                raise InvalidParameters(str(e))
        self._ignored_characters = config.IGNORED_CHARS if ignored_characters is None else ignored_characters
        self._events = event_tracker if event_tracker is not None else security_events.tracker
        self.needs_save = False

    @property
    def parameters(self):
        return self._parameters

    @property
    def last_accepted_counter(self):
        return self._guard.last_accepted

    def remaining_scratch_codes(self):
        """Scratch codes that have not been used yet."""
        return self._scratch.remaining()

    def mark_saved(self):
        """Call after the caller has persisted ``to_dict()``."""
        self.needs_save = False

    def verify(self, submitted_code, now):
        """
        Check a submitted code at time ``now``.

        Scratch codes are tried first and bypass the replay guard entirely.
        Regular codes are compared against every fresh counter in the
        tolerance window, earliest first; the earliest match wins and
        advances the replay guard to it.

        Args:
            submitted_code (str): Code as submitted by the user
            now (int or float): Current Unix time in seconds

        Returns:
            Accepted or Rejected

        Raises:
            InvalidTimestamp: If ``now`` cannot be mapped to a counter
        """
        params = self._parameters
        allowed_lengths = {params.digits} | self._scratch.code_lengths()
        try:
            code = normalize_code(submitted_code, allowed_lengths, self._ignored_characters)
        except MalformedCode as e:
            logger.debug(f"Rejected malformed code: {e}")
            self._events.record_event(security_events.MALFORMED_CODE)
            return Rejected(MALFORMED_CODE)

        if self._scratch.contains_unconsumed(code):
            self._scratch.consume(code)
            self.needs_save = True
            self._events.record_event(security_events.SCRATCH_USED)
            logger.info("Accepted scratch code")
            return Accepted.scratch()

        try:
            counters = window.candidates(now, params.period, params.tolerance)
        except InvalidTimestamp:
            self._events.record_event(security_events.INVALID_TIMESTAMP)
            raise

        secret = self._secret.get_value()
        for counter in counters:
            if not params.reuse_allowed and not self._guard.is_fresh(counter):
                continue
            expected = generate(secret, counter, params.digits, params.algorithm)
            if constant_time_equals(expected, code):
                if not params.reuse_allowed:
                    self._guard.advance(counter)
                    self.needs_save = True
                logger.debug(f"Accepted regular code at counter {counter}")
                return Accepted.regular(counter)

        self._events.record_event(security_events.NO_MATCH)
        return Rejected(NO_MATCH)

    def check(self, submitted_code, now):
        """
        Boolean form of ``verify``.

        Returns:
            bool: True if the code was accepted
        """
        return self.verify(submitted_code, now).accepted

    def to_dict(self):
        """Persistable state, without the secret."""
        return state_format.build_state(self._parameters, self._guard, self._scratch)

    @classmethod
    def from_dict(cls, data, secret, parameters=None, **kwargs):
        """
        Rebuild a verifier from ``to_dict()`` output.

        Args:
            data (dict): Stored state
            secret (bytes, str or SecureString): Shared HMAC key
            parameters (Parameters): Parameters the deployment requires; if
                given they must equal the stored ones
            **kwargs: ``ignored_characters`` and ``event_tracker``

        Raises:
            InvalidState: If the state cannot be loaded or its parameters
                differ from ``parameters``
        """
        stored_parameters, guard, scratch = state_format.parse_state(data)
        if parameters is not None and parameters != stored_parameters:
            raise InvalidState(
                "Stored parameters differ from the required ones; stored replay state is not valid for them"
            )
        return cls(secret, stored_parameters, scratch_codes=scratch, last_accepted_counter=guard, **kwargs)

    def __repr__(self):
        return (
            f"Verifier({self._parameters!r}, last_accepted_counter={self._guard.last_accepted}, "
            f"scratch_remaining={len(self._scratch.remaining())})"
        )
