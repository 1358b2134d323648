"""Errors package.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

from .base import StackBindError, StackLinkError

__all__ = [
    "StackBindError",
    "StackLinkError",
]
