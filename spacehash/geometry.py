"""
Rigid 2D pose exposing what the pose hasher needs: translation and heading.
"""

import math

import numpy as np

TAU = 2.0 * math.pi


def wrap_angle(theta):
    """
    Wrap an angle in radians to [-pi, pi], the logarithm of SO(2).

    Like atan2(sin(theta), cos(theta)), headings of exactly -pi and pi are
    left as they are. The reduction is exact.
    """
    theta = math.fmod(theta, TAU)
    if theta > math.pi:
        theta -= TAU
    elif theta < -math.pi:
        theta += TAU
    return theta


def wrap_angles(thetas):
    """Array version of wrap_angle, bitwise equal to it element-wise."""
    thetas = np.fmod(np.asarray(thetas, dtype=np.float64), TAU)
    thetas = np.where(thetas > math.pi, thetas - TAU, thetas)
    return np.where(thetas < -math.pi, thetas + TAU, thetas)


class Pose2D:
    """
    2D pose in world coordinates.

    Attributes:
        x, y: position, meters
        theta: heading, radians, stored as given
    """

    __slots__ = ("x", "y", "theta")

    def __init__(self, x=0.0, y=0.0, theta=0.0):
        self.x = float(x)
        self.y = float(y)
        self.theta = float(theta)

    def translation(self):
        return self.x, self.y

    def angle(self):
        return wrap_angle(self.theta)

    def __eq__(self, other):
        if not isinstance(other, Pose2D):
            return NotImplemented
        return (self.x, self.y, self.theta) == (other.x, other.y, other.theta)

    def __hash__(self):
        return hash((self.x, self.y, self.theta))

    def __repr__(self):
        return f"Pose2D(x={self.x!r}, y={self.y!r}, theta={self.theta!r})"
