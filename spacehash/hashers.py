"""
Spatial hashers for the state shapes a sampler works with.

Each hasher owns a resolution vector and maps a state to the key of the
cell it falls in:

- ArrayHash: fixed-length homogeneous sequences or 1-d numpy arrays
- TupleHash: tuples of mixed numeric types, widened to float
- Pose2DHash: rigid 2D poses, hashed as (x, y, heading)

Hashers are immutable and keep no per-call state, so one instance can be
shared between threads. Keys of states that floor to the same cell are
equal; keys of different cells collide only with the odds of a good hash.
"""

import logging

import numpy as np

from .combine import bits_per_axis, hash_axes, hash_axes_array
from .fibonacci import WordWidth
from .geometry import wrap_angles

logger = logging.getLogger(__name__)


class SpatialHash:
    """
    Base class: holds the resolution and word width, and hashes the axes
    produced by a subclass' axes() / axes_array().

    Args:
        resolution: Cell size along each axis, all > 0 (not checked)
        width: Word width of the keys, 32 or 64 (default: 64)
    """

    __slots__ = ("_resolution", "_width", "_n_bit")

    def __init__(self, resolution, width=WordWidth.W64):
        self._resolution = tuple(float(div) for div in resolution)
        self._width = WordWidth.coerce(width)
        self._n_bit = bits_per_axis(self._width, len(self._resolution))
        logger.debug(
            "%s: resolution=%s width=%d bits_per_axis=%d",
            type(self).__name__,
            self._resolution,
            self._width,
            self._n_bit,
        )

    @property
    def resolution(self):
        return self._resolution

    @property
    def width(self):
        return self._width

    @property
    def dimensions(self):
        return len(self._resolution)

    @property
    def bits_per_axis(self):
        return self._n_bit

    def axes(self, state):
        """Coordinates of one state as floats. Implemented by subclasses."""
        raise NotImplementedError

    def axes_array(self, states):
        rows = [self.axes(state) for state in states]
        return np.asarray(rows, dtype=np.float64).reshape(len(rows), self.dimensions)

    def hash(self, state):
        return hash_axes(self.axes(state), self._resolution, self._width)

    def __call__(self, state):
        return self.hash(state)

    def hash_many(self, states):
        """Keys of a whole population, as a uint32/uint64 numpy array."""
        return hash_axes_array(self.axes_array(states), self._resolution, self._width)

    def _key(self):
        return type(self), self._resolution, self._width

    def __eq__(self, other):
        if not isinstance(other, SpatialHash):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self):
        return hash(self._key())

    def __repr__(self):
        return f"{type(self).__name__}({self._resolution!r}, width={int(self._width)})"


class ArrayHash(SpatialHash):
    """Hashes fixed-length sequences, element i quantized by resolution[i]."""

    __slots__ = ()

    def axes(self, state):
        values = [float(v) for v in state]
        if len(values) != self.dimensions:
            raise ValueError(f"expected {self.dimensions} values, got {len(values)}")
        return values

    def axes_array(self, states):
        return np.asarray(states, dtype=np.float64)


class TupleHash(SpatialHash):
    """
    Hashes tuples of numbers of possibly different types (int, float, bool,
    numpy scalars, fractions, ...). Each element is widened with float().
    """

    __slots__ = ()

    def axes(self, state):
        if len(state) != self.dimensions:
            raise ValueError(f"expected a {self.dimensions}-tuple, got {len(state)} elements")
        return tuple(float(v) for v in state)

    def axes_array(self, states):
        if isinstance(states, np.ndarray):
            return states.astype(np.float64)
        return SpatialHash.axes_array(self, states)


class Pose2DHash(SpatialHash):
    """
    Hashes rigid 2D poses as the tuple (x, y, theta).

    A pose is any object with translation() -> (x, y) and angle() -> heading
    in [-pi, pi], such as geometry.Pose2D.

    Pose2DHash()                      1.0 on every axis
    Pose2DHash(linear, angular)       linear for x and y, angular for theta
    Pose2DHash(x_res, y_res, theta_res)
    """

    __slots__ = ("_underlying",)

    def __init__(self, *resolutions, width=WordWidth.W64):
        if not resolutions:
            resolutions = (1.0, 1.0, 1.0)
        elif len(resolutions) == 2:
            linear, angular = resolutions
            resolutions = (linear, linear, angular)
        elif len(resolutions) != 3:
            raise TypeError(
                f"Pose2DHash takes 0, 2 or 3 resolutions ({len(resolutions)} given)"
            )
        SpatialHash.__init__(self, resolutions, width)
        self._underlying = TupleHash(self.resolution, self.width)

    @classmethod
    def from_axes(cls, x_res, y_res, theta_res, width=WordWidth.W64):
        return cls(x_res, y_res, theta_res, width=width)

    @classmethod
    def from_linear_angular(cls, linear_res, angular_res, width=WordWidth.W64):
        return cls(linear_res, angular_res, width=width)

    def axes(self, state):
        x, y = state.translation()
        return x, y, state.angle()

    def axes_array(self, states):
        if isinstance(states, np.ndarray):
            states = np.asarray(states, dtype=np.float64)
            if states.ndim != 2 or states.shape[1] != 3:
                raise ValueError(f"expected poses of shape (n, 3), got {states.shape}")
            return np.column_stack((states[:, 0], states[:, 1], wrap_angles(states[:, 2])))
        return SpatialHash.axes_array(self, states)

    def hash(self, state):
        return self._underlying.hash(self.axes(state))

    def hash_many(self, states):
        return self._underlying.hash_many(self.axes_array(states))


def is_pose(state):
    return callable(getattr(state, "translation", None)) and callable(
        getattr(state, "angle", None)
    )


def make_spatial_hash(example, resolution=None, width=WordWidth.W64):
    """
    Picks the hasher matching the shape of an example state.

    Args:
        example: A state of the kind that will be hashed
        resolution: Cell sizes; for poses, 2 or 3 values as accepted by
            Pose2DHash. Default: 1.0 on every axis
        width: Word width, 32 or 64

    Returns:
        Pose2DHash, TupleHash or ArrayHash
    """
    if is_pose(example):
        return Pose2DHash(*(() if resolution is None else resolution), width=width)
    if isinstance(example, tuple):
        cls = TupleHash
    elif isinstance(example, (list, np.ndarray)):
        cls = ArrayHash
    else:
        raise TypeError(f"no spatial hash for states of type {type(example).__name__}")
    if resolution is None:
        resolution = (1.0,) * len(example)
    return cls(resolution, width)
