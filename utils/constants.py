"""Constants for floating-point comparisons."""

# Default tolerance for floating-point comparisons
EPSILON = 1e-5

# Grid size used to quantize vector components before hashing
HASH_PRECISION = EPSILON
