"""Core AArch64 machine state: registers, flags and 128-bit arithmetic."""

from __future__ import annotations

from dataclasses import dataclass, field

__all__ = [
    "UInt128",
    "Arm64Registers",
    "PStateFlags",
    "read_x",
    "add128",
    "sub128",
    "mul128",
]

_MASK64 = (1 << 64) - 1
_GPR_COUNT = 31
_VECTOR_COUNT = 32


def _check_u64(name: str, value: int) -> None:
    if not 0 <= value <= _MASK64:
        raise ValueError(f"{name} must fit in 64 unsigned bits, got {value}")


@dataclass(frozen=True)
class UInt128:
    """A 128-bit unsigned value held as two 64-bit halves."""

    low: int = 0
    high: int = 0

    def __post_init__(self) -> None:
        _check_u64("low", self.low)
        _check_u64("high", self.high)

    @classmethod
    def from_int(cls, value: int) -> UInt128:
        """Split a non-negative integer below 2**128 into halves."""
        if not 0 <= value < (1 << 128):
            raise ValueError(f"value must fit in 128 unsigned bits, got {value}")
        return cls(value & _MASK64, value >> 64)

    def __int__(self) -> int:
        return (self.high << 64) | self.low

    def __add__(self, other: UInt128) -> UInt128:
        return add128(self, other)

    def __sub__(self, other: UInt128) -> UInt128:
        return sub128(self, other)

    def __mul__(self, other: UInt128) -> UInt128:
        return mul128(self, other)


@dataclass
class Arm64Registers:
    """General purpose registers x0-x30, sp, pc and the 32 vector registers."""

    x: list[int] = field(default_factory=lambda: [0] * _GPR_COUNT)
    sp: int = 0
    pc: int = 0
    v: list[UInt128] = field(
        default_factory=lambda: [UInt128() for _ in range(_VECTOR_COUNT)]
    )

    def __post_init__(self) -> None:
        if len(self.x) != _GPR_COUNT:
            raise ValueError(f"expected {_GPR_COUNT} general registers, got {len(self.x)}")
        if len(self.v) != _VECTOR_COUNT:
            raise ValueError(f"expected {_VECTOR_COUNT} vector registers, got {len(self.v)}")
        for number, value in enumerate(self.x):
            _check_u64(f"x{number}", value)
        _check_u64("sp", self.sp)
        _check_u64("pc", self.pc)


@dataclass
class PStateFlags:
    """The NZCV condition flags."""

    n: bool = False
    z: bool = False
    c: bool = False
    v: bool = False


def read_x(regs: Arm64Registers, index: int) -> int:
    """Return register ``index``; 0-30 are x0-x30 and 31 is the stack pointer."""
    if not 0 <= index <= _GPR_COUNT:
        raise IndexError(f"Invalid index: {index}")
    if index == _GPR_COUNT:
        return regs.sp
    return regs.x[index]


def add128(a: UInt128, b: UInt128) -> UInt128:
    """Add with carry from the low half into the high half, wrapping at 2**128."""
    low = (a.low + b.low) & _MASK64
    carry = 1 if low < a.low else 0
    high = (a.high + b.high + carry) & _MASK64
    return UInt128(low, high)


def sub128(a: UInt128, b: UInt128) -> UInt128:
    """Subtract with borrow from the high half, wrapping at 2**128."""
    low = (a.low - b.low) & _MASK64
    borrow = 1 if low > a.low else 0
    high = (a.high - b.high - borrow) & _MASK64
    return UInt128(low, high)


def mul128(a: UInt128, b: UInt128) -> UInt128:
    """Multiply by combining 64-bit partial products.

    The low product is kept to 64 bits and the cross products are folded in
    at a 32-bit offset, so the result is exact only when both high halves are
    zero and the product fits in 64 bits.
    """
    low_low = (a.low * b.low) & _MASK64
    low_high = (a.low * b.high) & _MASK64
    high_low = (a.high * b.low) & _MASK64
    high_high = (a.high * b.high) & _MASK64

    mid = (low_high + high_low) & _MASK64
    carry = 1 if mid < low_high else 0

    high = (high_high + carry + (mid >> 32)) & _MASK64
    mid_low = (mid << 32) & _MASK64
    low = (low_low + mid_low) & _MASK64
    if low < mid_low:
        high = (high + 1) & _MASK64
    return UInt128(low, high)