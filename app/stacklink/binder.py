"""Lazy stack binder.

Replaces a lazily computed ``stack`` with one that strips library frames
and joins the cause stack on every read.

Properties live on types, so the error's class is swapped for a
subclass that reads the getter stored on the instance. The subclass is
cached on the class itself and collected with it; ``isinstance`` checks
and the class name are kept. Creating it runs ``__init_subclass__`` of
the error hierarchy once per class. Concurrent first binds of one class
may each create a subclass, the last one stays cached.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

import re
from typing import Callable

from loguru import logger as loguru_logger

from stacklink.descriptors import (
    StackKind,
    StackPropertyDescriptor,
    classify_stack,
)
from stacklink.errors import StackBindError
from stacklink.frames import ErrorLike, StackView
from stacklink.joiner import LIBRARY_CALL, join_stacks, strip_library_frames

log = loguru_logger.bind(name="stacklink")

_GETTER_ATTR = "_stacklink_getter"
_BOUND_CLASS_ATTR = "__stacklink_bound_class__"

StackGetter = Callable[[], str | None]


def _read_stack(error: object) -> str | None:
    return vars(error)[_GETTER_ATTR]()


def _bound_class(cls: type) -> type:
    """Get subclass of cls with an installable ``stack`` property."""
    if getattr(cls, "__stacklink_bound__", False):
        return cls

    bound = vars(cls).get(_BOUND_CLASS_ATTR)
    if bound is None:
        bound = type(cls)(
            cls.__name__,
            (cls,),
            {
                "__module__": cls.__module__,
                "__qualname__": cls.__qualname__,
                "__stacklink_bound__": True,
                "stack": property(_read_stack, doc="Joined stack."),
            },
        )
        setattr(cls, _BOUND_CLASS_ATTR, bound)
    return bound


def install_stack(error: object, getter: StackGetter) -> None:
    """Install ``stack`` property on error, replacing any previous one.

    :param object error: error to decorate
    :param StackGetter getter: called on every read of ``stack``
    :raises StackBindError: bound class can not be created or swapped in
    """
    try:
        bound = _bound_class(type(error))
    except Exception as err:
        raise StackBindError(
            f"Can not create bound class of {type(error).__name__}",
        ) from err

    try:
        error.__class__ = bound
    except TypeError as err:
        raise StackBindError(
            f"Can not install stack on {type(error).__name__}",
        ) from err

    vars(error)[_GETTER_ATTR] = getter
    log.debug(f"Installed lazy stack on {type(error).__name__}")


def bind_lazy_stack(
    descriptor: StackPropertyDescriptor | None,
    new_error: object,
    original_error: ErrorLike | None = None,
    marker: re.Pattern[str] = LIBRARY_CALL,
) -> None:
    """Bind stack of new_error to be joined with original_error on read.

    Nothing is memoized: each read calls the original getter and joins
    with whatever ``original_error.stack`` is at that moment.

    :param StackPropertyDescriptor descriptor: lazy descriptor of
        new_error ``stack``
    :param object new_error: error to decorate
    :param ErrorLike | None original_error: wrapped error, never mutated
    :param re.Pattern marker: pattern of a library frame line
    :raises StackBindError: descriptor is not lazy
    """
    if descriptor is None or classify_stack(descriptor) is not StackKind.LAZY:
        raise StackBindError("Stack descriptor is not lazy")

    lazy_get = descriptor.get
    if lazy_get is _read_stack:
        # Already bound, chain onto the installed getter.
        previous = vars(new_error)[_GETTER_ATTR]
        lazy_get = lambda _: previous()  # noqa: E731

    if original_error is not None:

        def getter() -> str | None:
            new_stack = lazy_get(new_error)
            return join_stacks(StackView(new_stack), original_error, marker)

    else:

        def getter() -> str | None:
            return strip_library_frames(lazy_get(new_error), marker)

    install_stack(new_error, getter)
