"""Tests for target_abi.backend.llvm_types."""

from __future__ import annotations

import pytest
from llvmlite import ir

from target_abi.backend.llvm_types import CTypeMapper
from target_abi.data_model import CDataModel, Size


@pytest.mark.parametrize("model", list(CDataModel))
def test_integer_types_follow_model(model: CDataModel) -> None:
    mapper = CTypeMapper(model)

    assert mapper.data_model is model
    assert mapper.short.width == model.short_size().bits()
    assert mapper.int.width == model.int_size().bits()
    assert mapper.long.width == model.long_size().bits()
    assert mapper.long_long.width == model.long_long_size().bits()
    assert mapper.intptr.width == model.pointer_width().bits()


@pytest.mark.parametrize("model", list(CDataModel))
def test_floating_point_types(model: CDataModel) -> None:
    mapper = CTypeMapper(model)

    assert isinstance(mapper.float, ir.FloatType)
    assert isinstance(mapper.double, ir.DoubleType)


def test_lp64_and_llp64_long_types_differ() -> None:
    assert CTypeMapper(CDataModel.LP64).long == ir.IntType(64)
    assert CTypeMapper(CDataModel.LLP64).long == ir.IntType(32)


def test_void_ptr_is_i8_pointer() -> None:
    mapper = CTypeMapper(CDataModel.ILP32)

    assert isinstance(mapper.void_ptr, ir.PointerType)
    assert mapper.void_ptr == ir.IntType(8).as_pointer()


@pytest.mark.parametrize("size", list(Size))
def test_int_type_width(size: Size) -> None:
    assert CTypeMapper.int_type(size) == ir.IntType(size.bits())


@pytest.mark.parametrize("size", [Size.U8, Size.U16])
def test_float_type_rejects_unmodelled_sizes(size: Size) -> None:
    with pytest.raises(RuntimeError, match="CE0002"):
        CTypeMapper.float_type(size)


def test_mapped_types_build_a_c_signature() -> None:
    mapper = CTypeMapper(CDataModel.LP64)
    module = ir.Module(name="c_abi")
    fnty = ir.FunctionType(mapper.long, [mapper.int, mapper.double, mapper.void_ptr])

    fn = ir.Function(module, fnty, name="strtol_like")

    assert fn.ftype.return_type == ir.IntType(64)
    assert list(fn.ftype.args) == [ir.IntType(32), ir.DoubleType(), mapper.void_ptr]
