"""
Folds per-axis hashes of a quantized state into a single word.

Every axis gets width // n_dim bits: its Fibonacci hash is rotated by
n_bit * i_axis and all axes are combined with exclusive-or. When n_dim does
not divide the word width the remainder bits are never the start of any
axis' band, so the highest axes address a slightly smaller space. This is
a known limitation and is kept as is.

Resolutions must be positive, which is not checked. A zero resolution
divides with IEEE semantics (+-inf or NaN) and such quotients hash to a
fixed word, so the key is meaningless but the call never fails.
"""

import math

import numpy as np

from .fibonacci import WordWidth, floor_and_fibo_hash, floor_and_fibo_hash_array


def quantize(value, div):
    """value / div, returning +-inf or NaN on a zero divisor like numpy does."""
    try:
        return value / div
    except ZeroDivisionError:
        if value == 0 or math.isnan(value):
            return math.nan
        return math.copysign(math.inf, value) * math.copysign(1.0, div)


def bits_per_axis(width, n_dim):
    if n_dim < 1:
        raise ValueError(f"a state needs at least one axis, got {n_dim}")
    return int(width) // n_dim


def hash_axes(values, resolution, width=WordWidth.W64):
    """
    Quantizes each value by its resolution and folds the axis hashes.

    Args:
        values: Coordinates of one state, as floats
        resolution: Cell size along each axis, matching values by position
        width: Word width, 32 or 64

    Returns:
        Unsigned int hash of the cell containing the state
    """
    width = WordWidth.coerce(width)
    if len(values) != len(resolution):
        raise ValueError(f"state has {len(values)} axes but resolution has {len(resolution)}")
    n_bit = bits_per_axis(width, len(resolution))
    result = 0
    for i_axis, (value, div) in enumerate(zip(values, resolution)):
        result ^= floor_and_fibo_hash(quantize(value, div), n_bit, i_axis, width)
    return result


def hash_axes_array(values, resolution, width=WordWidth.W64):
    """
    Hashes a population of states stored as rows of an (n, n_dim) array.

    Returns an (n,) array of uint32 or uint64 keys; row i equals
    hash_axes(values[i], resolution, width).
    """
    width = WordWidth.coerce(width)
    n_dim = len(resolution)
    n_bit = bits_per_axis(width, n_dim)
    values = np.asarray(values, dtype=np.float64)
    if values.size == 0:
        values = values.reshape(0, n_dim)
    if values.ndim != 2 or values.shape[1] != n_dim:
        raise ValueError(f"expected states of shape (n, {n_dim}), got {values.shape}")
    result = np.zeros(len(values), dtype=width.dtype)
    with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
        quotients = [values[:, i_axis] / div for i_axis, div in enumerate(resolution)]
    for i_axis, quotient in enumerate(quotients):
        result ^= floor_and_fibo_hash_array(quotient, n_bit, i_axis, width)
    return result
