"""
Submitted code normalization

The default policy is strict: digits only, exact length. Deployments that
let users type codes as "123 456" or "1234-5678" can list the separator
characters to drop before validation.
"""

from ..exceptions import MalformedCode

ASCII_DIGITS = frozenset('0123456789')


def normalize_code(submitted, allowed_lengths, ignored_characters=''):
    """
    Validate and normalize a submitted code.

    Args:
        submitted (str): Raw code as typed by the user
        allowed_lengths (Iterable[int]): Acceptable code lengths
        ignored_characters (str): Characters removed before validation

    Returns:
        str: The code as a string of ASCII digits

    Raises:
        MalformedCode: If the input is not a string, contains anything other
            than ASCII digits after removal, or has an unexpected length
    """
    if not isinstance(submitted, str):
        raise MalformedCode("Code must be a string")

    if ignored_characters:
        submitted = ''.join(ch for ch in submitted if ch not in ignored_characters)

    # str.isdigit() also accepts non-ASCII digits such as '٣'
    if not submitted or not set(submitted) <= ASCII_DIGITS:
        raise MalformedCode("Code must contain only digits")
    if len(submitted) not in set(allowed_lengths):
        raise MalformedCode("Code has an unexpected length")
    return submitted
