"""LLVM IR types for C primitive types.

Maps the sizes a CDataModel assigns to C primitive types onto llvmlite IR
types, so code generators can declare C-compatible signatures and structs.
"""
from __future__ import annotations

from llvmlite import ir

from target_abi.backend.constants import INT8_BIT_WIDTH
from target_abi.data_model import CDataModel, Size
from target_abi.internals.errors import raise_internal_error


class CTypeMapper:
    """Maps C primitive types of one data model to LLVM IR types."""

    def __init__(self, data_model: CDataModel):
        """Initialize the mapper for a data model.

        Args:
            data_model: The C data model of the compilation target.
        """
        self.data_model = data_model
        sizes = data_model.type_sizes()

        # Integer types (signed and unsigned share one LLVM representation)
        self.short: ir.IntType = self.int_type(sizes.short)
        self.int: ir.IntType = self.int_type(sizes.int)
        self.long: ir.IntType = self.int_type(sizes.long)
        self.long_long: ir.IntType = self.int_type(sizes.long_long)
        self.intptr: ir.IntType = self.int_type(sizes.pointer)

        # Floating-point types
        self.float: ir.Type = self.float_type(sizes.float)
        self.double: ir.Type = self.float_type(sizes.double)

        # void* as i8*
        self.void_ptr: ir.PointerType = ir.IntType(INT8_BIT_WIDTH).as_pointer()

    @staticmethod
    def int_type(size: Size) -> ir.IntType:
        """Get the LLVM integer type of the given size."""
        return ir.IntType(size.bits())

    @staticmethod
    def float_type(size: Size) -> ir.Type:
        """Get the LLVM floating-point type of the given size.

        Raises:
            RuntimeError: If no C floating-point type has this size.
        """
        match size:
            case Size.U32:
                return ir.FloatType()
            case Size.U64:
                return ir.DoubleType()
            case _:
                raise_internal_error("CE0002", size=size)
