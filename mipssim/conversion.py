"""Strict conversion of command-line words into typed values."""

from __future__ import annotations

import math
from typing import Any

_DIGITS = frozenset("0123456789")

_INTEGER_KINDS: dict[str, tuple[bool, int]] = {
    "signed char": (True, 8),
    "short": (True, 16),
    "int": (True, 32),
    "long": (True, 64),
    "long long": (True, 64),
    "unsigned char": (False, 8),
    "unsigned short": (False, 16),
    "unsigned int": (False, 32),
    "unsigned long": (False, 64),
    "unsigned long long": (False, 64),
}

_FLOAT_KINDS = frozenset({"float", "double", "long double"})


class BadConversion(ValueError):
    """Raised when a word cannot be read as the requested type."""

    def __init__(self) -> None:
        super().__init__(
            "bad from_string conversion: "
            "source string value could not be interpreted as target"
        )


def _digits(text: str, limit: int) -> int:
    if not text or any(c not in _DIGITS for c in text):
        raise BadConversion()
    value = int(text)
    if value > limit:
        raise BadConversion()
    return value


def parse_unsigned(text: str, bits: int) -> int:
    """Read an unsigned integer of the given width, an optional '+' allowed."""
    if not text:
        raise BadConversion()
    if text[0] == "+":
        text = text[1:]
    return _digits(text, (1 << bits) - 1)


def parse_signed(text: str, bits: int) -> int:
    """Read a signed integer of the given width, with an optional sign."""
    if not text:
        raise BadConversion()
    unsigned_max = (1 << bits) - 1
    if text[0] == "-":
        value = _digits(text[1:], unsigned_max)
        if value > 1 << (bits - 1):
            raise BadConversion()
        return -value
    if text[0] == "+":
        text = text[1:]
    value = _digits(text, unsigned_max)
    if value > (1 << (bits - 1)) - 1:
        raise BadConversion()
    return value


def parse_bool(text: str) -> bool:
    """Read 'true', 'false', 1 or 0."""
    if text == "true":
        return True
    if text == "false":
        return False
    value = parse_signed(text, 64)
    if value == 1:
        return True
    if value == 0:
        return False
    raise BadConversion()


def parse_char(text: str) -> str:
    """Read exactly one character."""
    if len(text) != 1:
        raise BadConversion()
    return text


def parse_float(text: str) -> float:
    """Read a floating point number that fills the whole word."""
    if not text.isascii() or "_" in text or any(c.isspace() for c in text):
        raise BadConversion()
    body = text.lstrip("+-").lower()
    try:
        value = float(text)
    except ValueError:
        if not body.startswith("0x"):
            raise BadConversion() from None
        try:
            value = float.fromhex(text)
        except (ValueError, OverflowError):
            raise BadConversion() from None
    if math.isinf(value) and body not in ("inf", "infinity"):
        raise BadConversion()
    return value


def from_string(text: str, kind: Any) -> Any:
    """Convert text to the given kind.

    A kind is a Python type (str, int, bool, float, None) or the name of a
    C-style type such as "unsigned short" or "char". Any other callable is
    applied to the stripped text, and its failure becomes BadConversion.
    """
    if kind is str or kind == "string":
        return text
    if kind is None or kind is type(None):
        return None
    if kind is bool or kind == "bool":
        return parse_bool(text)
    if kind is int:
        return parse_signed(text, 64)
    if kind is float or kind in _FLOAT_KINDS:
        return parse_float(text)
    if kind == "char":
        return parse_char(text)
    if isinstance(kind, str):
        if kind not in _INTEGER_KINDS:
            raise TypeError(f"unknown conversion kind {kind!r}")
        signed, bits = _INTEGER_KINDS[kind]
        return parse_signed(text, bits) if signed else parse_unsigned(text, bits)
    stripped = text.strip()
    if not stripped:
        raise BadConversion()
    try:
        return kind(stripped)
    except (ValueError, TypeError, ArithmeticError):
        raise BadConversion() from None