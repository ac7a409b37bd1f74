"""
Scratch Code Store

Holds the pool of pre-generated emergency codes and tracks which have been
used. A consumed code never becomes usable again. Matching is by value;
the order of the pool only matters for stable serialization.
"""

import logging

from ..exceptions import InvalidParameters, InvalidState
from .constant_time import constant_time_equals

logger = logging.getLogger(__name__)


def _is_digit_string(value):
    return isinstance(value, str) and bool(value) and all('0' <= ch <= '9' for ch in value)


class ScratchCode:
    """
    A single emergency code and its consumed flag.

    The flag can only move from False to True.
    """

    __slots__ = ('code', '_consumed')

    def __init__(self, code, consumed=False):
        if not _is_digit_string(code):
            raise InvalidParameters("Scratch codes must be non-empty strings of digits")
        self.code = code
        self._consumed = bool(consumed)

    @property
    def consumed(self):
        return self._consumed

    def mark_consumed(self):
        self._consumed = True

    def to_dict(self):
        return {'code': self.code, 'consumed': self._consumed}

    def __eq__(self, other):
        if not isinstance(other, ScratchCode):
            return NotImplemented
        return self.code == other.code and self._consumed == other._consumed

    def __repr__(self):
        # Never print the code itself
        return f"ScratchCode(consumed={self._consumed})"


class ScratchCodeStore:
    """
    Ordered collection of scratch codes.

    Args:
        codes (Iterable[str or ScratchCode]): Initial pool; plain strings
            start out unconsumed
    """

    def __init__(self, codes=()):
        self._codes = []
        for code in codes:
            if isinstance(code, ScratchCode):
                self._codes.append(ScratchCode(code.code, code.consumed))
            else:
                self._codes.append(ScratchCode(code))

    def _find_unconsumed(self, candidate):
        # Scan every entry so timing does not reveal the position of a match
        found = None
        for index, entry in enumerate(self._codes):
            matches = constant_time_equals(entry.code, candidate)
            if matches and not entry.consumed and found is None:
                found = index
        return found

    def contains_unconsumed(self, candidate):
        """
        Check whether ``candidate`` matches a code that is still usable.

        Args:
            candidate (str): Normalized submitted code

        Returns:
            bool: True if an unconsumed entry has exactly this value
        """
        if not isinstance(candidate, str):
            return False
        return self._find_unconsumed(candidate) is not None

    def consume(self, candidate):
        """
        Mark the matching unconsumed entry as consumed.

        Must directly follow a successful ``contains_unconsumed`` check in
        the same verification attempt. After this call the store's
        serialized form changes and has to be persisted by the caller.

        Raises:
            ValueError: If no unconsumed entry matches
        """
        index = self._find_unconsumed(candidate) if isinstance(candidate, str) else None
        if index is None:
            raise ValueError("No unconsumed scratch code matches the candidate")
        self._codes[index].mark_consumed()
        logger.debug("Scratch code consumed, %d remaining", len(self.remaining()))

    def remaining(self):
        """Unconsumed codes, in pool order."""
        return [entry.code for entry in self._codes if not entry.consumed]

    def code_lengths(self):
        return {len(entry.code) for entry in self._codes}

    def to_list(self):
        return [entry.to_dict() for entry in self._codes]

    @classmethod
    def from_list(cls, entries):
        """
        Rebuild a store from its serialized form.

        Args:
            entries (list[dict]): ``[{"code": str, "consumed": bool}, ...]``

        Raises:
            InvalidState: If the list or any entry is badly formed
        """
        if not isinstance(entries, list):
            raise InvalidState("scratch_codes must be a list")
        codes = []
        for entry in entries:
            if not isinstance(entry, dict):
                raise InvalidState("Each scratch code entry must be a mapping")
            code = entry.get('code')
            consumed = entry.get('consumed', False)
            if not _is_digit_string(code):
                raise InvalidState("Scratch code entry has an invalid code")
            if not isinstance(consumed, bool):
                raise InvalidState("Scratch code entry has an invalid consumed flag")
            codes.append(ScratchCode(code, consumed))
        return cls(codes)

    def __len__(self):
        return len(self._codes)

    def __eq__(self, other):
        if not isinstance(other, ScratchCodeStore):
            return NotImplemented
        return self._codes == other._codes

    def __repr__(self):
        return f"ScratchCodeStore(total={len(self._codes)}, remaining={len(self.remaining())})"
