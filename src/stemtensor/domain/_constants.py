"""
Library-wide defaults.

These values are used whenever a caller does not pass an explicit `dtype`
or formatting option. The dtype is kept as a name so the domain layer does
not import any numerical backend.
"""

# Element type used by storages created without an explicit dtype
DEFAULT_DTYPE = "float64"

# printf-style format used when rendering floating-point elements
FLOAT_FORMAT = "%2.3f"

# printf-style format used when rendering integer elements
INT_FORMAT = "%d"
