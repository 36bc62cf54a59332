"""Constants shared by the objkit helpers.

There is nothing to configure at runtime: no environment variables and no
files are read. The values below define the textual and numeric conventions
of the formatting and hashing helpers.
"""

# Text used in place of an absent value.
NULL_TEXT = "null"  # pragma: no mutate

# Separator placed between fields by ``ToStringHelper.format``.
FIELD_SEPARATOR = ", "  # pragma: no mutate

# Separators used when deriving a simple type name from a qualified one.
INNER_TYPE_SEPARATOR = "$"  # pragma: no mutate
NAMESPACE_SEPARATOR = "."  # pragma: no mutate

# Array-hash convention: hash_code([]) == HASH_SEED.
HASH_SEED = 1  # pragma: no mutate
HASH_MULTIPLIER = 31  # pragma: no mutate
NULL_HASH = 0  # pragma: no mutate
