"""Shared pytest fixtures and helpers."""

from .core import *  # noqa: F401,F403
from .products import *  # noqa: F401,F403
