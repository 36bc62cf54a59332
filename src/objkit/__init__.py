"""OBJKIT

Small helpers for writing ``__eq__``, ``__hash__`` and ``__str__``
implementations: null-safe equality, multi-value hash aggregation, a fluent
string-building helper and a first-non-null selector.
"""

from .errors import InvalidArgumentError, ObjkitError
from .objects import (
    ToStringHelper,
    equal,
    first_non_null,
    hash_code,
    simple_name,
    to_string_helper,
)

__all__ = [
    "InvalidArgumentError",
    "ObjkitError",
    "ToStringHelper",
    "__version__",
    "equal",
    "first_non_null",
    "hash_code",
    "simple_name",
    "to_string_helper",
]
__version__ = "0.1.0"
