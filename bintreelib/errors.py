"""Exception types for BinTreeLib.

All library errors derive from TreeError so callers can catch them in one
place. The concrete types also inherit from the closest builtin, so code
that already catches TypeError or LookupError keeps working.
"""


class TreeError(Exception):
    """Base class for all BinTreeLib errors."""
    pass


class InvalidValueError(TreeError, TypeError):
    """Raised when a value cannot be ordered against tree values.

    Only real numbers are accepted. Booleans, NaN, None and strings that
    don't parse as integers are rejected before the tree is touched.
    """

    def __init__(self, value, reason: str = "not an orderable number"):
        self.value = value
        self.reason = reason
        super().__init__(f"Invalid tree value {value!r}: {reason}")


class ValueNotFoundError(TreeError, LookupError):
    """Raised when deleting a value that is not in the tree.

    Only raised under StrictMissingPolicy; the default policy treats a
    missing value as a silent no-op.
    """

    def __init__(self, value, variant: str = ""):
        self.value = value
        self.variant = variant
        where = f" in {variant} tree" if variant else ""
        super().__init__(f"Value {value!r} not found{where}")


class EmptyTreeError(TreeError, ValueError):
    """Raised by min()/max() on an empty tree."""
    pass


class ConfigurationError(TreeError):
    """Raised when a TreeConfig fails validation."""
    pass


class UnorderedDeleteWarning(UserWarning):
    """Emitted when an unordered tree's comparison-based delete misses a value
    that is actually present in the tree."""
    pass
