"""Utility helpers shared across core packages.

Kept limited to environment helpers so that ``config`` modules can import it
without pulling in any client or feature code.
"""

from .env import get_env, get_env_bool, get_env_float

__all__ = [
    "get_env",
    "get_env_bool",
    "get_env_float",
]
