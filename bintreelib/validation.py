"""Value validation for BinTreeLib.

Trees only hold ordered real numbers. These helpers reject anything else
before it reaches a tree, so a failed insert or delete never leaves a
partially modified structure behind.
"""

import numbers
from typing import Any

from .core.node import Number
from .errors import InvalidValueError


def validate_value(value: Any) -> Number:
    """Check that a value can be stored in and compared by a tree.

    Args:
        value: Candidate value

    Returns:
        The value unchanged

    Raises:
        InvalidValueError: For bools, NaN, non-real numbers and non-numbers
    """
    # bool is an Integral subclass but never a meaningful tree key
    if isinstance(value, bool):
        raise InvalidValueError(value, "booleans are not tree values")
    if not isinstance(value, numbers.Real):
        raise InvalidValueError(value)
    # NaN, of any Real type, is the only value unequal to itself
    if value != value:
        raise InvalidValueError(value, "NaN cannot be ordered")
    return value


def parse_value(text: Any) -> Number:
    """Parse user input into a tree value.

    Numbers pass through ``validate_value``. Strings must hold a base-10
    integer, optionally surrounded by whitespace and signed.

    Args:
        text: Raw input, typically from a form field

    Returns:
        Parsed integer (or the validated number)

    Raises:
        InvalidValueError: If the input is empty or not an integer literal
    """
    if isinstance(text, str):
        stripped = text.strip()
        if not stripped:
            raise InvalidValueError(text, "empty input")
        try:
            return int(stripped, 10)
        except ValueError:
            raise InvalidValueError(text, "not an integer") from None
    return validate_value(text)
