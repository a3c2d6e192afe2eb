"""
Runtime values for the tlt evaluator.

A Value pairs a raw Python payload with its ValueKind. Values are immutable
and compare structurally, so ``int_val(1) != rat_val(1.0)``. The payload is
checked against the kind on construction, whichever way the Value is built.
"""

from dataclasses import dataclass
from typing import Any, Optional, Union

from .errors import error_int_out_of_range, error_invalid_payload
from .types import ValueKind, U64_MIN, U64_MAX

Payload = Union[bool, int, None, float, str]


def check_payload(data: Any, kind: ValueKind) -> None:
    """Raise InvalidValueError unless `data` is a valid payload for `kind`."""
    if not isinstance(kind, ValueKind):
        raise error_invalid_payload("kind", kind)
    if kind == ValueKind.BOO:
        ok = isinstance(data, bool)
    elif kind == ValueKind.INT:
        # bool is an int subclass but belongs to its own kind
        ok = isinstance(data, int) and not isinstance(data, bool)
        if ok and not U64_MIN <= data <= U64_MAX:
            raise error_int_out_of_range(data)
    elif kind == ValueKind.NIL:
        ok = data is None
    elif kind == ValueKind.RAT:
        ok = isinstance(data, float)
    else:
        ok = isinstance(data, str)
    if not ok:
        raise error_invalid_payload(kind.value, data)


@dataclass(frozen=True)
class Value:
    """
    A runtime value with its kind.

    The `data` field holds the Python payload.
    The `kind` field holds the value kind used for rule dispatch.
    """
    data: Payload
    kind: ValueKind

    def __post_init__(self):
        check_payload(self.data, self.kind)

    def __repr__(self) -> str:
        if self.kind == ValueKind.NIL:
            return "Nil"
        return f"{self.kind.value.capitalize()}({self.data!r})"

    def is_numeric(self) -> bool:
        """Check if this value can take part in arithmetic."""
        return self.kind.is_numeric


# Convenience constructors

def boo_val(b: bool) -> Value:
    """Create a boolean value."""
    return Value(b, ValueKind.BOO)


def int_val(n: int) -> Value:
    """Create an unsigned 64-bit integer value."""
    return Value(n, ValueKind.INT)


def nil_val() -> Value:
    """Create the absent value."""
    return NIL


def rat_val(x: float) -> Value:
    """Create a floating-point value. Integer payloads are converted."""
    if isinstance(x, int) and not isinstance(x, bool):
        x = float(x)
    return Value(x, ValueKind.RAT)


def txt_val(s: str) -> Value:
    """Create a text value."""
    return Value(s, ValueKind.TXT)


NIL = Value(None, ValueKind.NIL)


# Wrapping utilities

def wrap_value(data: Any) -> Value:
    """Wrap a raw Python object, inferring its kind."""
    if isinstance(data, Value):
        return data
    if isinstance(data, bool):
        return boo_val(data)
    if isinstance(data, int):
        return int_val(data)
    if data is None:
        return NIL
    if isinstance(data, float):
        return rat_val(data)
    if isinstance(data, str):
        return txt_val(data)
    raise error_invalid_payload("value", data)


def unwrap_value(v: Optional[Value]) -> Payload:
    """Extract the raw payload from a Value (None stays None)."""
    if v is None:
        return None
    return v.data


def widen(v: Value) -> float:
    """Widen a numeric value to floating point."""
    return float(v.data)
