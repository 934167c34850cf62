"""Tests for target_abi.internals.errors."""

from __future__ import annotations

import pytest

from target_abi.internals.errors import (
    ERR,
    REGISTRY,
    Category,
    ErrorMessage,
    Severity,
    _add,
    format_error,
    raise_internal_error,
)


def test_catalog_lookup_by_attribute_and_item() -> None:
    assert ERR.CE0001 is REGISTRY["CE0001"]
    assert ERR["CE0002"].category is Category.INTERNAL
    assert ERR.TE0001.severity is Severity.ERROR


def test_catalog_unknown_attribute() -> None:
    with pytest.raises(AttributeError):
        ERR.CE9999


def test_raise_internal_error_formats_message() -> None:
    with pytest.raises(RuntimeError) as excinfo:
        raise_internal_error("CE0001", model="LP128", query="long_size")

    assert str(excinfo.value) == "CE0001: unhandled C data model 'LP128' in long_size"


def test_missing_format_key_names_the_key() -> None:
    with pytest.raises(KeyError, match="query"):
        raise_internal_error("CE0001", model="LP128")


def test_unknown_code() -> None:
    with pytest.raises(KeyError, match="unknown error code"):
        format_error("CE9999")


def test_duplicate_code_is_rejected() -> None:
    with pytest.raises(ValueError, match="duplicate error code"):
        _add(ErrorMessage("CE0001", Severity.ERROR, "again"))
