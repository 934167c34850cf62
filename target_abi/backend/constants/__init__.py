"""Backend constants facade.

Organized by category:
- bit_widths: integer bit widths and the byte width
"""

# Bit widths
from target_abi.backend.constants.bit_widths import (
    BITS_PER_BYTE,
    INT8_BIT_WIDTH,
    INT16_BIT_WIDTH,
    INT32_BIT_WIDTH,
    INT64_BIT_WIDTH,
)

__all__ = [
    # Bit widths
    'BITS_PER_BYTE',
    'INT8_BIT_WIDTH',
    'INT16_BIT_WIDTH',
    'INT32_BIT_WIDTH',
    'INT64_BIT_WIDTH',
]
