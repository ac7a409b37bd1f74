"""Verification outcomes."""

VIA_REGULAR = 'regular'
VIA_SCRATCH = 'scratch'

MALFORMED_CODE = 'malformed_code'
NO_MATCH = 'no_match'


class Accepted:
    """
    A code was accepted.

    Attributes:
        via (str): 'regular' for a time-based code, 'scratch' for a scratch code
        counter (int or None): Matched counter for regular codes
    """

    accepted = True

    __slots__ = ('via', 'counter')

    def __init__(self, via, counter=None):
        self.via = via
        self.counter = counter

    @classmethod
    def regular(cls, counter):
        return cls(VIA_REGULAR, counter)

    @classmethod
    def scratch(cls):
        return cls(VIA_SCRATCH)

    def __bool__(self):
        return True

    def __eq__(self, other):
        if not isinstance(other, Accepted):
            return NotImplemented
        return self.via == other.via and self.counter == other.counter

    def __hash__(self):
        return hash((self.via, self.counter))

    def __repr__(self):
        if self.via == VIA_REGULAR:
            return f"Accepted(via='regular', counter={self.counter})"
        return "Accepted(via='scratch')"


class Rejected:
    """
    A code was rejected.

    ``reason`` is 'malformed_code' or 'no_match'. Both should be shown to
    the user as the same generic "invalid code" message.
    """

    accepted = False

    __slots__ = ('reason',)

    def __init__(self, reason):
        self.reason = reason

    def __bool__(self):
        return False

    def __eq__(self, other):
        if not isinstance(other, Rejected):
            return NotImplemented
        return self.reason == other.reason

    def __hash__(self):
        return hash((Rejected, self.reason))

    def __repr__(self):
        return f"Rejected(reason='{self.reason}')"
