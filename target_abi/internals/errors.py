# internals/errors.py
from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Dict, NoReturn


class Severity(str, Enum):
    ERROR = "error"
    WARNING = "warning"


class Category(str, Enum):
    GENERAL   = "general"
    TYPE      = "type"
    INTERNAL  = "internal"


@dataclass(frozen=True)
class ErrorMessage:
    code: str
    severity: Severity
    text: str
    category: Category = Category.GENERAL
    doc: str = ""


REGISTRY: Dict[str, ErrorMessage] = {}

class _ErrorCatalog:
    def __init__(self, backing: Dict[str, ErrorMessage]) -> None:
        self._registry = backing

    def __getattr__(self, name: str) -> ErrorMessage:
        try:
            return self._registry[name]
        except KeyError as e:
            raise AttributeError(name) from e

    def __getitem__(self, code: str) -> ErrorMessage:
        return self._registry[code]


ERR = _ErrorCatalog(REGISTRY)

def format_error(code: str, **kwargs) -> str:
    """Render the message text of a registered error code."""
    return _fmt(code, **kwargs)

def raise_internal_error(code: str, **kwargs) -> NoReturn:
    """Raise a RuntimeError for internal errors.

    Internal errors (CE codes) indicate a bug in this package, such as a data
    model member that one of the size tables does not handle.

    Args:
        code: Error code (e.g., "CE0001")
        **kwargs: Format parameters for the error message

    Raises:
        RuntimeError: Always raises with formatted error message
    """
    text = _fmt(code, **kwargs)
    raise RuntimeError(f"{code}: {text}")


#
# --- Helpers
#

def _add(msg: ErrorMessage) -> None:
    if msg.code in REGISTRY:
        raise ValueError(f"duplicate error code {REGISTRY[msg.code]} in {msg}")
    REGISTRY[msg.code] = msg

def _get(code: str) -> ErrorMessage:
    try:
        return REGISTRY[code]
    except KeyError:
        raise KeyError(f"unknown error code: {code}")

def _fmt(code: str, **kwargs) -> str:
    msg = _get(code)
    try:
        return msg.text.format(**kwargs)
    except KeyError as key_error:
        missing = key_error.args[0]
        raise KeyError(f"missing text key '{missing}' for {code} "
                       f"(needed by: {msg.text!r})") from None

#
# --- Registry population
#

# Internal errors - CE0xxx range
_add(ErrorMessage("CE0001", Severity.ERROR,
    "unhandled C data model '{model}' in {query}",
    Category.INTERNAL, "A data model member has no entry in one of the size tables."))

_add(ErrorMessage("CE0002", Severity.ERROR,
    "no C floating-point type of size '{size}'",
    Category.INTERNAL, "Only 32-bit float and 64-bit double are modelled."))

# Caller input - TE0xxx range
_add(ErrorMessage("TE0001", Severity.ERROR,
    "unsupported bit width {bits}, expected one of 8, 16, 32, 64",
    Category.TYPE, "Size.from_bits() only accepts the four modelled widths."))
