"""
spacehash: fixed-width cell keys for continuous multi-dimensional states.

A state is quantized per axis by a resolution and the cell it falls in is
hashed into one 32- or 64-bit word. Samples of a state estimator, such as
weighted poses of a particle filter, can be bucketed by key without building
a tree or a grid.

Main classes:
- ArrayHash: fixed-length numeric sequences
- TupleHash: tuples of mixed numeric types
- Pose2DHash: rigid 2D poses (x, y, heading)
- Pose2D: minimal 2D pose

Usage:
    from spacehash import Pose2D, Pose2DHash

    hasher = Pose2DHash(0.1, 0.1)
    key = hasher(Pose2D(0.05, 0.05, 0.01))
"""

from .combine import bits_per_axis, hash_axes, hash_axes_array
from .fibonacci import (
    WordWidth,
    floor_and_fibo_hash,
    floor_and_fibo_hash_array,
    rotate_left,
    saturated_word,
)
from .geometry import Pose2D, wrap_angle, wrap_angles
from .hashers import ArrayHash, Pose2DHash, SpatialHash, TupleHash, make_spatial_hash

__version__ = "1.0.0"

__all__ = [
    "SpatialHash",
    "ArrayHash",
    "TupleHash",
    "Pose2DHash",
    "make_spatial_hash",
    "Pose2D",
    "wrap_angle",
    "wrap_angles",
    "WordWidth",
    "floor_and_fibo_hash",
    "floor_and_fibo_hash_array",
    "saturated_word",
    "rotate_left",
    "bits_per_axis",
    "hash_axes",
    "hash_axes_array",
]
