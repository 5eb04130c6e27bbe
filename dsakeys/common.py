"""
Common constants and global variables.
"""
import logging
import struct


def byte_chr(c):
    assert isinstance(c, int)
    return struct.pack("B", c)


zero_byte = byte_chr(0)

DEBUG = logging.DEBUG

# Modulus sizes the DSA parameter generator accepts.
VALID_BITS = (1024, 2048, 3072, 4096)
DEFAULT_BITS = 1024

# Key files are created readable by the owner only.
o600 = 0o600
