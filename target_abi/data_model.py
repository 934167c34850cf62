"""C data models and the sizes of C primitive types.

A C data model fixes the widths of `int`, `long`, `long long` and pointers on
a target ABI. Resolving a target to its data model happens elsewhere; this
module only answers size queries for a model that is already known.

See also https://en.cppreference.com/w/c/language/arithmetic_types
"""
from __future__ import annotations
from dataclasses import dataclass
from enum import Enum

from target_abi.backend.constants import (
    BITS_PER_BYTE,
    INT8_BIT_WIDTH,
    INT16_BIT_WIDTH,
    INT32_BIT_WIDTH,
    INT64_BIT_WIDTH,
)
from target_abi.internals.errors import format_error, raise_internal_error


class Size(Enum):
    """The size of a type."""
    U8 = "u8"
    U16 = "u16"
    U32 = "u32"
    U64 = "u64"

    def __str__(self) -> str:
        return self.value

    def bits(self) -> int:
        """Return the number of bits this size represents."""
        match self:
            case Size.U8:
                return INT8_BIT_WIDTH
            case Size.U16:
                return INT16_BIT_WIDTH
            case Size.U32:
                return INT32_BIT_WIDTH
            case Size.U64:
                return INT64_BIT_WIDTH

    def bytes(self) -> int:
        """Return the number of bytes in a size.

        A byte is assumed to be 8 bits.
        """
        return self.bits() // BITS_PER_BYTE

    @classmethod
    def from_bits(cls, bits: int) -> Size:
        """Return the size that is `bits` wide.

        Raises:
            ValueError: If `bits` is not 8, 16, 32 or 64.
        """
        for size in cls:
            if size.bits() == bits:
                return size
        raise ValueError(f"TE0001: {format_error('TE0001', bits=bits)}")


@dataclass(frozen=True)
class CTypeSizes:
    """Sizes of every C primitive type under one data model."""
    pointer: Size
    short: Size
    int: Size
    long: Size
    long_long: Size
    float: Size
    double: Size


class CDataModel(Enum):
    """The C data model used on a target.

    More models may be added later. Code that dispatches on a CDataModel
    should keep a fallback branch instead of assuming these five are all.
    """
    # Win16. `long` and pointer are 32 bits.
    LP32 = "LP32"
    # Win32 and 32-bit Unix. `int`, `long` and pointer are all 32 bits.
    ILP32 = "ILP32"
    # Win64. `long long` and pointer are 64 bits.
    LLP64 = "LLP64"
    # 64-bit Unix. `long` and pointer are 64 bits.
    LP64 = "LP64"
    # Rare, early 64-bit Unix. `int`, `long` and pointer are all 64 bits.
    ILP64 = "ILP64"

    def __str__(self) -> str:
        return self.value

    def pointer_width(self) -> Size:
        """The width of a pointer (in the default address space)."""
        match self:
            case CDataModel.LP32 | CDataModel.ILP32:
                return Size.U32
            case CDataModel.LLP64 | CDataModel.LP64 | CDataModel.ILP64:
                return Size.U64
            case _:
                raise_internal_error("CE0001", model=self, query="pointer_width")

    def short_size(self) -> Size:
        """The size of a C `short`. This is required to be at least 16 bits."""
        match self:
            case CDataModel.LP32 | CDataModel.ILP32 | CDataModel.LLP64 | CDataModel.LP64 | CDataModel.ILP64:
                return Size.U16
            case _:
                raise_internal_error("CE0001", model=self, query="short_size")

    def int_size(self) -> Size:
        """The size of a C `int`. This is required to be at least 16 bits."""
        match self:
            case CDataModel.LP32:
                return Size.U16
            case CDataModel.ILP32 | CDataModel.LLP64 | CDataModel.LP64:
                return Size.U32
            case CDataModel.ILP64:
                return Size.U64
            case _:
                raise_internal_error("CE0001", model=self, query="int_size")

    def long_size(self) -> Size:
        """The size of a C `long`. This is required to be at least 32 bits."""
        match self:
            case CDataModel.LP32 | CDataModel.ILP32 | CDataModel.LLP64:
                return Size.U32
            case CDataModel.LP64 | CDataModel.ILP64:
                return Size.U64
            case _:
                raise_internal_error("CE0001", model=self, query="long_size")

    def long_long_size(self) -> Size:
        """The size of a C `long long`. This is required (in C99+) to be at least 64 bits."""
        match self:
            case CDataModel.LP32 | CDataModel.ILP32 | CDataModel.LLP64 | CDataModel.LP64 | CDataModel.ILP64:
                return Size.U64
            case _:
                raise_internal_error("CE0001", model=self, query="long_long_size")

    def float_size(self) -> Size:
        """The size of a C `float`.

        Always 32 bits. This is not verified for every architecture, so callers
        that need exact float widths must not rely on the data model alone.
        """
        return Size.U32

    def double_size(self) -> Size:
        """The size of a C `double`.

        Always 64 bits, with the same caveat as float_size().
        """
        return Size.U64

    def type_sizes(self) -> CTypeSizes:
        """Return the sizes of all C primitive types under this model."""
        return CTypeSizes(
            pointer=self.pointer_width(),
            short=self.short_size(),
            int=self.int_size(),
            long=self.long_size(),
            long_long=self.long_long_size(),
            float=self.float_size(),
            double=self.double_size(),
        )
