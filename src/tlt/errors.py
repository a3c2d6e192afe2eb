"""
tlt exceptions.

A type mismatch is not an exception: rules and the evaluator signal it by
returning ``None``. The classes here cover the fatal conditions only.

Error codes:
- E401: invalid value payload
- E402: integer division by zero
- E403: integer overflow
- E404: unknown expression node
- E405: invalid configuration
"""

from typing import Optional


class TltError(Exception):
    """Base exception for tlt errors."""
    code: str = "E400"

    def __init__(self, message: str, code: Optional[str] = None):
        self.message = message
        if code is not None:
            self.code = code
        super().__init__(message)

    def __str__(self) -> str:
        return f"error[{self.code}]: {self.message}"


class InvalidValueError(TltError, ValueError):
    """A value constructor received a payload outside its kind (E401)."""
    code = "E401"


class DivisionByZeroError(TltError, ZeroDivisionError):
    """Integer division by zero under the fatal policy (E402)."""
    code = "E402"


class IntegerOverflowError(TltError, OverflowError):
    """Integer result outside the unsigned 64-bit range (E403)."""
    code = "E403"


class UnknownNodeError(TltError, TypeError):
    """The evaluator was handed something that is not an expression (E404)."""
    code = "E404"


class ConfigError(TltError, ValueError):
    """Invalid evaluator configuration (E405)."""
    code = "E405"


# --- Error constructors ---

def error_invalid_payload(kind: str, payload: object) -> InvalidValueError:
    """E401: Payload does not fit the requested kind."""
    return InvalidValueError(
        f"invalid payload for '{kind}': {payload!r} ({type(payload).__name__})"
    )


def error_int_out_of_range(n: int) -> InvalidValueError:
    """E401: Integer literal outside the u64 range."""
    return InvalidValueError(f"integer {n} is outside the unsigned 64-bit range")


def error_division_by_zero(dividend: int) -> DivisionByZeroError:
    """E402: Integer division by zero."""
    return DivisionByZeroError(f"integer division by zero ({dividend} / 0)")


def error_overflow(symbol: str, left: int, right: int, result: int) -> IntegerOverflowError:
    """E403: Integer arithmetic left the u64 range."""
    direction = "underflow" if result < 0 else "overflow"
    return IntegerOverflowError(
        f"integer {direction}: {left} {symbol} {right} = {result}"
    )


def error_unknown_node(node: object) -> UnknownNodeError:
    """E404: Not an expression node."""
    return UnknownNodeError(f"unknown expression type: {type(node).__name__}")


def error_invalid_policy(setting: str, name: str, choices) -> ConfigError:
    """E405: Unknown policy name."""
    options = ", ".join(choices)
    return ConfigError(f"invalid {setting} policy '{name}' (expected one of: {options})")
