"""Wrapped error factory.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

import sys
from typing import Any

from loguru import logger as loguru_logger

from stacklink.binder import bind_lazy_stack, install_stack
from stacklink.config import settings
from stacklink.descriptors import StackKind, classify_stack, describe_stack
from stacklink.errors import StackBindError, StackLinkError
from stacklink.frames import (
    ErrorLike,
    StackView,
    TracebackStack,
    capture_frames,
    render_stack,
)
from stacklink.joiner import join_stacks

log = loguru_logger.bind(name="stacklink")


def as_error_like(error: BaseException) -> ErrorLike:
    """Use error as is if it has a readable stack, else its traceback.

    The stack is inspected, not read, so a lazy cause stays lazy and its
    getter errors surface only when the wrapped stack is read.
    """
    descriptor = describe_stack(error)
    if descriptor is not None and (descriptor.get or descriptor.writable):
        return error  # type: ignore
    return TracebackStack(error)


def stacklink(
    cause: BaseException | None = None,
    message: str | None = None,
    *,
    error_type: type[BaseException] = StackLinkError,
    **props: Any,
) -> BaseException:
    """Create error wrapping cause, with a joined ``stack``.

    ```
    try:
        load(path)
    except OSError as err:
        raise stacklink(err, f"Can not load {path}") from err
    ```

    :param BaseException | None cause: wrapped error, never mutated
    :param str | None message: defaults to the cause message
    :param type error_type: class of the new error
    :return BaseException: new error, not raised
    """
    if message is None:
        message = str(cause) if cause is not None else ""

    if issubclass(error_type, StackLinkError):
        error = error_type(message, **props)
    else:
        error = error_type(message)
        for name, value in props.items():
            setattr(error, name, value)

    original = None
    if cause is not None:
        error.__cause__ = cause
        original = as_error_like(cause)

    descriptor = describe_stack(error)
    kind = classify_stack(descriptor)
    log.debug(f"{type(error).__name__} stack is {kind.value}")

    try:
        if kind is StackKind.LAZY and settings.STACKLINK_LAZY:
            bind_lazy_stack(descriptor, error, original)

        elif kind is StackKind.LAZY:
            stack = join_stacks(
                StackView(descriptor.get(error)),  # type: ignore
                original,
            )
            install_stack(error, lambda: stack)

    except StackBindError as err:
        log.debug(f"{type(error).__name__} stack left as is: {err}")
        return error

    if kind is StackKind.WRITABLE:
        frames = capture_frames(sys._getframe())
        error.stack = join_stacks(  # type: ignore
            StackView(render_stack(error, frames)),
            original,
        )

    return error
