"""
Constant-time comparison

Equality for values derived from secret material. The loop always runs
over the full first operand and accumulates differences with XOR, so the
running time does not depend on where the first mismatch is. Only the
length of the first operand is observable.
"""


def _as_bytes(value):
    if isinstance(value, str):
        return value.encode('utf-8')
    return bytes(value)


def constant_time_equals(expected, candidate):
    """
    Compare two strings or byte sequences without short-circuiting.

    Args:
        expected (str or bytes): The secret-derived value
        candidate (str or bytes): The value to check against it

    Returns:
        bool: True if both are equal
    """
    left = _as_bytes(expected)
    right = _as_bytes(candidate)

    result = len(left) ^ len(right)
    if result:
        # Compare against itself so the loop length stays fixed
        right = left
    for x, y in zip(left, right):
        result |= x ^ y
    return result == 0
