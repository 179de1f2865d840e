"""Vector, matrix and quaternion math, game data structures, tunable variables and input state."""

__version__ = "0.1.0"
__all__ = [
    "vector",
    "matrix",
    "quaternion",
    "structures",
    "global_variables",
    "input_state",
]