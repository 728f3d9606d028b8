"""Built-in matchers.

Importing this package registers every built-in with
:func:`expectkit.registry.register_builtin`.
"""

from .equality import (
    DEEP_EQUALITY_NOTE,
    to_be,
    to_be_falsy,
    to_be_nan,
    to_be_none,
    to_be_truthy,
    to_equal,
    to_strict_equal,
)
from .functions import Thrown, capture_raised, to_raise
from .mocks import (
    to_have_been_called,
    to_have_been_called_times,
    to_have_been_called_with,
    to_have_been_last_called_with,
    to_have_been_nth_called_with,
)
from .numbers import (
    to_be_close_to,
    to_be_greater_than,
    to_be_greater_than_or_equal,
    to_be_less_than,
    to_be_less_than_or_equal,
)
from .objects import to_be_instance_of, to_contain, to_contain_equal, to_have_property, to_match_object
from .strings import to_have_length, to_match

__all__ = [
    # Equality
    "DEEP_EQUALITY_NOTE",
    "to_be",
    "to_be_falsy",
    "to_be_nan",
    "to_be_none",
    "to_be_truthy",
    "to_equal",
    "to_strict_equal",
    # Numbers
    "to_be_close_to",
    "to_be_greater_than",
    "to_be_greater_than_or_equal",
    "to_be_less_than",
    "to_be_less_than_or_equal",
    # Strings
    "to_have_length",
    "to_match",
    # Objects
    "to_be_instance_of",
    "to_contain",
    "to_contain_equal",
    "to_have_property",
    "to_match_object",
    # Callables
    "Thrown",
    "capture_raised",
    "to_raise",
    # Mocks
    "to_have_been_called",
    "to_have_been_called_times",
    "to_have_been_called_with",
    "to_have_been_last_called_with",
    "to_have_been_nth_called_with",
]
