"""Integer bit widths.

This module provides centralized constants for the integer widths a C data
model can assign. Used with Size.bits() and ir.IntType(width).
"""

# A byte is assumed to be 8 bits
BITS_PER_BYTE = 8

# Integer type bit widths
INT8_BIT_WIDTH = 8      # char
INT16_BIT_WIDTH = 16    # short, int on LP32
INT32_BIT_WIDTH = 32    # int, long on 32-bit and LLP64 targets, float
INT64_BIT_WIDTH = 64    # long long, 64-bit pointers, double
