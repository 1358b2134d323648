"""Cause-chained stack traces.

Wrap an error and get a single ``stack`` holding the new error frames,
without the library own frames, followed by the stack of the cause.

Logging is disabled by default, enable with
``loguru.logger.enable("stacklink")``.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

from loguru import logger

from .binder import bind_lazy_stack
from .config import Settings, settings
from .descriptors import (
    StackKind,
    StackPropertyDescriptor,
    classify_stack,
    describe_stack,
    is_lazy_stack,
    is_writable_stack,
)
from .errors import StackBindError, StackLinkError
from .factory import stacklink
from .frames import ErrorLike, StackView
from .joiner import join_stacks, strip_library_frames

logger.disable("stacklink")

__all__ = [
    "ErrorLike",
    "Settings",
    "StackBindError",
    "StackKind",
    "StackLinkError",
    "StackPropertyDescriptor",
    "StackView",
    "bind_lazy_stack",
    "classify_stack",
    "describe_stack",
    "is_lazy_stack",
    "is_writable_stack",
    "join_stacks",
    "settings",
    "stacklink",
    "strip_library_frames",
]
