"""3D game math: vectors, matrices, quaternions, collision, world transforms and tuning variables."""

__version__ = "0.1.0"
__all__ = [
    "vector",
    "matrix",
    "quaternion",
    "collision",
    "world_transform",
    "global_variables",
]