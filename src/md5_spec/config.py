"""MD5 spec configuration constants.

Keep this file aligned with RFC 1321 and the binary state record layout
(`magic || s0..s3 || buffer[64] || len`).
"""

# Sizes
SIZE = 16  # digest bytes
BLOCK_SIZE = 64  # bytes consumed per transform
WORD_SIZE = 4

# Masks
WORD_MASK = 0xFFFFFFFF
LENGTH_MASK = 0xFFFFFFFFFFFFFFFF  # total length wraps like a u64

# Initial chaining values (RFC 1321 section 3.3, word A..D)
INIT0 = 0x67452301
INIT1 = 0xEFCDAB89
INIT2 = 0x98BADCFE
INIT3 = 0x10325476
INIT_STATE = (INIT0, INIT1, INIT2, INIT3)

# Padding
PAD_MARKER = 0x80
LENGTH_FIELD_SIZE = 8

# Binary state record
MAGIC = b"md5\x01"
MARSHALED_SIZE = len(MAGIC) + 4 * WORD_SIZE + BLOCK_SIZE + 8  # 92 bytes

# Algorithm identity
ALGORITHM_NAME = "md5"

# Tooling
FIXTURES_ENV = "MD5_SPEC_FIXTURES"
