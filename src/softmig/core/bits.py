"""Bit-level codec between integers/reals and fixed-width bit vectors.

Bit vectors are 1-D numpy bool arrays in little-endian order: index 0 is the
least significant bit. Every function returns a fresh array and never mutates
its input.

Layout of a real encoded on n bits:
    [lower, upper] -> {0, 1, ..., 2**n - 1}, linear, round half away from zero
    resolution = (upper - lower) / (2**n - 1)
"""

from __future__ import annotations

import math
from collections.abc import Sequence

import numpy as np

from .errors import RangeError

# Keeps every representable value inside a signed 64-bit accumulator.
MIN_BITS = 1
MAX_BITS = 63


def _check_number_of_bits(number_of_bits: int) -> None:
    if number_of_bits < MIN_BITS or number_of_bits > MAX_BITS:
        raise RangeError(
            f"invalid number of bits: {number_of_bits} (expected {MIN_BITS}..{MAX_BITS})"
        )


def as_bits(bits: np.ndarray | Sequence[bool]) -> np.ndarray:
    """Coerce array-like to a 1-D bool array (copy)."""
    arr = np.array(bits, dtype=bool)
    if arr.ndim != 1:
        raise RangeError(f"bit vector must be 1-D, got shape {arr.shape}")
    return arr


def encode_binary(value: int, number_of_bits: int) -> np.ndarray:
    """Encode a non-negative integer in natural binary.

    Args:
        value: Integer in [0, 2**number_of_bits).
        number_of_bits: Width of the result, in [1, 63].

    Returns:
        Bool array of length number_of_bits; bit i equals bit i of value.
    """
    if isinstance(value, float) and not value.is_integer():
        raise RangeError(f"not an integer value: {value}")
    value = int(value)
    if value < 0:
        raise RangeError(f"negative value: {value}")
    _check_number_of_bits(number_of_bits)
    if value >= 1 << number_of_bits:
        raise RangeError(
            f"number of bits not sufficient to represent value: {value} >= 2**{number_of_bits}"
        )

    return np.array([(value >> i) & 1 for i in range(number_of_bits)], dtype=bool)


def decode_binary(bits: np.ndarray | Sequence[bool]) -> int:
    """Decode a natural-binary bit vector to its integer value."""
    arr = as_bits(bits)
    _check_number_of_bits(arr.size)

    value = 0
    for i in np.flatnonzero(arr):
        value |= 1 << int(i)
    return value


def to_gray(bits: np.ndarray | Sequence[bool]) -> np.ndarray:
    """Convert natural binary to reflected Gray code.

    The top bit is copied; every lower bit i becomes bits[i + 1] XOR bits[i].
    Integers that differ by one map to codes that differ in exactly one bit.
    """
    binary = as_bits(bits)
    gray = binary.copy()
    gray[:-1] = binary[1:] ^ binary[:-1]
    return gray


def from_gray(bits: np.ndarray | Sequence[bool]) -> np.ndarray:
    """Convert reflected Gray code back to natural binary.

    Bit i of the result is result[i + 1] XOR gray[i], so recovery runs from
    the top bit downward: a reversed cumulative XOR.
    """
    gray = as_bits(bits)
    if gray.size == 0:
        return gray
    return np.bitwise_xor.accumulate(gray[::-1])[::-1].copy()


def _check_bounds(lower: float, upper: float) -> None:
    if not (math.isfinite(lower) and math.isfinite(upper)) or upper <= lower:
        raise RangeError(f"degenerate bounds: lower={lower}, upper={upper}")


def encode_real(
    value: float,
    lower: float,
    upper: float,
    number_of_bits: int,
    gray: bool = False,
) -> np.ndarray:
    """Quantize a bounded real onto number_of_bits bits.

    Args:
        value: Real in [lower, upper].
        lower: Lower bound.
        upper: Upper bound (strictly greater than lower).
        number_of_bits: Width of the result, in [1, 63].
        gray: Return the Gray-coded form of the quantized index.

    Returns:
        Bool array of length number_of_bits.
    """
    _check_bounds(lower, upper)
    _check_number_of_bits(number_of_bits)
    if not (lower <= value <= upper):
        raise RangeError(f"value {value} outside bounds [{lower}, {upper}]")

    max_index = (1 << number_of_bits) - 1
    scale = (value - lower) / (upper - lower)
    # Non-negative, so floor(x + 0.5) is round half away from zero.
    index = min(int(math.floor(scale * max_index + 0.5)), max_index)

    bits = encode_binary(index, number_of_bits)
    return to_gray(bits) if gray else bits


def decode_real(
    bits: np.ndarray | Sequence[bool],
    lower: float,
    upper: float,
    gray: bool = False,
) -> float:
    """Inverse of encode_real: lower + (upper - lower) * index / (2**n - 1)."""
    _check_bounds(lower, upper)
    arr = from_gray(bits) if gray else as_bits(bits)
    index = decode_binary(arr)
    max_index = (1 << arr.size) - 1
    if index == max_index:
        return upper
    value = lower + (upper - lower) * (index / max_index)
    # Rounding in the scale step must not leave [lower, upper].
    return min(max(value, lower), upper)


def resolution(lower: float, upper: float, number_of_bits: int) -> float:
    """Quantization step of a real encoded on number_of_bits bits."""
    _check_bounds(lower, upper)
    _check_number_of_bits(number_of_bits)
    return (upper - lower) / ((1 << number_of_bits) - 1)
