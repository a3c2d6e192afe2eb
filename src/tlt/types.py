"""
Value kinds for the tlt evaluator.

Every runtime value belongs to exactly one of five kinds, each named with
three letters:

    boo: boolean
    int: unsigned 64-bit integer
    nil: absent value
    rat: 64-bit floating point
    txt: text string

Only ``int`` and ``rat`` take part in arithmetic.
"""

from enum import Enum


class ValueKind(Enum):
    """The closed set of runtime value kinds."""
    BOO = "boo"
    INT = "int"
    NIL = "nil"
    RAT = "rat"
    TXT = "txt"

    @property
    def is_numeric(self) -> bool:
        """True for kinds that arithmetic operators accept."""
        return self in NUMERIC_KINDS

    def __str__(self) -> str:
        return self.value


NUMERIC_KINDS = frozenset({ValueKind.INT, ValueKind.RAT})

# Unsigned 64-bit integer bounds
U64_MIN = 0
U64_MAX = 2**64 - 1
U64_MODULUS = 2**64


def resolve_kind_name(name: str) -> ValueKind:
    """Look up a kind by its three-letter name (case-insensitive)."""
    return ValueKind(name.strip().lower())
