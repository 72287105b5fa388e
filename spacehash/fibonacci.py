"""
Per-axis hash primitive: floor, Fibonacci-multiply, rotate.

A floored scalar is spread across the whole word by multiplying it with the
word width divided by the golden ratio, then rotated into its axis' band so
that several axes can be folded together with exclusive-or.
"""

import enum
import math

import numpy as np


class WordWidth(enum.IntEnum):
    """Width in bits of the hash word. Only 32 and 64 are supported."""

    W32 = 32
    W64 = 64

    @classmethod
    def coerce(cls, value):
        try:
            return cls(value)
        except ValueError:
            raise ValueError(f"word width must be 32 or 64 bits, got {value!r}") from None

    @property
    def mask(self):
        return (1 << self.value) - 1

    @property
    def multiplier(self):
        return FIBONACCI_MULTIPLIERS[self]

    @property
    def dtype(self):
        return np.uint32 if self is WordWidth.W32 else np.uint64


# 2**width / golden ratio, rounded to odd
FIBONACCI_MULTIPLIERS = {
    WordWidth.W32: 2654435769,
    WordWidth.W64: 11400714819323198485,
}


def rotate_left(word, amount, width=WordWidth.W64):
    width = WordWidth.coerce(width)
    amount %= width
    if amount == 0:
        return word
    return ((word << amount) | (word >> (width - amount))) & width.mask


def saturated_word(width=WordWidth.W64):
    """Integer a non-finite quotient floors to: the sign bit alone."""
    return 1 << (WordWidth.coerce(width) - 1)


def floor_and_fibo_hash(value, n_bit, i_axis, width=WordWidth.W64):
    """
    Hash the floor of a value into a word rotated by n_bit * i_axis.

    Args:
        value: Quantized coordinate, i.e. the raw coordinate already divided
            by its resolution. NaN and infinities all floor to
            saturated_word(width)
        n_bit: Bits reserved for each axis
        i_axis: Index of the axis, selects the band the result is rotated to
        width: Word width, 32 or 64

    Returns:
        Unsigned int in [0, 2**width)
    """
    width = WordWidth.coerce(width)
    if math.isfinite(value):
        # two's complement reinterpretation, negative buckets wrap around
        unsigned_value = math.floor(value) & width.mask
    else:
        unsigned_value = saturated_word(width)
    hashed_value = (width.multiplier * unsigned_value) & width.mask
    return rotate_left(hashed_value, n_bit * i_axis, width)


def _floor_to_unsigned(values, width):
    finite = np.isfinite(values)
    quotients = np.fmod(np.floor(np.where(finite, values, 0.0)), 2.0**width)
    quotients = np.where(quotients >= 2.0**63, quotients - 2.0**64, quotients)
    quotients = np.where(quotients < -(2.0**63), quotients + 2.0**64, quotients)
    unsigned = quotients.astype(np.int64).view(np.uint64) & np.uint64(width.mask)
    return np.where(finite, unsigned, np.uint64(saturated_word(width)))


def floor_and_fibo_hash_array(values, n_bit, i_axis, width=WordWidth.W64):
    """
    Vectorized floor_and_fibo_hash over an array of quantized coordinates.

    Returns an array of the same shape, uint32 or uint64 depending on width,
    element-wise equal to the scalar version.
    """
    width = WordWidth.coerce(width)
    values = np.asarray(values, dtype=np.float64)
    shape = values.shape
    # keep 1-d so that wraparound happens in array arithmetic, not scalar
    values = values.reshape(-1)
    mask = np.uint64(width.mask)
    hashed = (_floor_to_unsigned(values, width) * np.uint64(width.multiplier)) & mask
    amount = (n_bit * i_axis) % width
    if amount != 0:
        left = np.left_shift(hashed, np.uint64(amount)) & mask
        right = np.right_shift(hashed, np.uint64(width - amount))
        hashed = left | right
    return hashed.astype(width.dtype).reshape(shape)
