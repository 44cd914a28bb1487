"""Format constants for the 8-bit tiny float layout (1 sign, 4 exponent, 3 mantissa)."""

# Bit masks
SIGN_MASK = 0x80      # 1 0000 000
EXPONENT_MASK = 0x78  # 0 1111 000
MANTISSA_MASK = 0x07  # 0 0000 111

SIGN_SHIFT = 7
EXPONENT_SHIFT = 3
MANTISSA_BITS = 3

# Exponent field all ones: infinities (mantissa 0) and NaNs (mantissa != 0)
EXPONENT_RESERVED = 0xF

EXPONENT_BIAS = -2

# Largest finite magnitude: exponent field 14, all mantissa bits set
MAX_MAGNITUDE = 122880

# Subnormal domain stores integer magnitudes 0..7 directly
SUBNORMAL_LIMIT = 1 << MANTISSA_BITS
MAX_SAFE_MAGNITUDE = SUBNORMAL_LIMIT - 1

# NaN rotation counter is 4 bits wide (sign + mantissa payload)
NAN_COUNTER_MODULUS = 16

# Reference configuration the fixed layout implements
REFERENCE_SIGNED = True
REFERENCE_EXPONENT_SIZE = 4
REFERENCE_EXPONENT_BIAS = EXPONENT_BIAS

# Exponent width bounds for format validation
MAX_EXPONENT_SIZE_SIGNED = 7
MAX_EXPONENT_SIZE_UNSIGNED = 8

CODE_COUNT = 256
