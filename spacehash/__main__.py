"""
Entry point for running spacehash as a module: python -m spacehash X Y THETA [LINEAR ANGULAR]
"""

import sys

from .fibonacci import WordWidth
from .geometry import Pose2D
from .hashers import Pose2DHash


def main(argv=None):
    """Print the cell keys of one pose."""
    args = sys.argv[1:] if argv is None else argv
    if len(args) not in (3, 5):
        print("Usage: python -m spacehash X Y THETA [LINEAR ANGULAR]")
        print("Example: python -m spacehash 0.05 0.05 0.01 0.1 0.1")
        return 1

    try:
        values = [float(arg) for arg in args]
    except ValueError as error:
        print(f"Error: {error}")
        return 1

    pose = Pose2D(*values[:3])
    resolutions = values[3:]
    print(f"Pose: {pose}")
    for width in WordWidth:
        hasher = Pose2DHash(*resolutions, width=width)
        key = hasher(pose)
        print(f"{int(width)}-bit key: {key:#0{width // 4 + 2}x}  {hasher}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
