"""Classification of an error's ``stack`` attribute.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

import inspect
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable

STACK_ATTR = "stack"

_MISSING = object()


class StackKind(Enum):
    """How a ``stack`` attribute can be decorated.

    ```
    LAZY = computed by a getter that can be replaced
    WRITABLE = plain value that can be assigned
    FIXED = neither
    ```
    """

    LAZY = "lazy"
    WRITABLE = "writable"
    FIXED = "fixed"


@dataclass(frozen=True)
class StackPropertyDescriptor:
    """Shape of a ``stack`` attribute.

    ``get`` and ``set`` take the owning object first, like
    ``property.fget`` and ``property.fset``.
    """

    configurable: bool = False
    writable: bool = False
    get: Callable[[Any], str | None] | None = None
    set: Callable[[Any, str | None], None] | None = None


def is_lazy_stack(descriptor: StackPropertyDescriptor | None) -> bool:
    """Check if the stack is computed by a replaceable getter."""
    return bool(
        descriptor
        and descriptor.configurable
        and callable(descriptor.get),
    )


def is_writable_stack(descriptor: StackPropertyDescriptor | None) -> bool:
    """Check if the stack can be assigned.

    A missing attribute is writable, assigning it creates it.
    """
    return bool(
        descriptor is None
        or descriptor.writable
        or callable(descriptor.set),
    )


def classify_stack(descriptor: StackPropertyDescriptor | None) -> StackKind:
    """Classify stack descriptor."""
    if is_lazy_stack(descriptor):
        return StackKind.LAZY
    if is_writable_stack(descriptor):
        return StackKind.WRITABLE
    return StackKind.FIXED


def describe_stack(obj: object) -> StackPropertyDescriptor | None:
    """Build a descriptor of ``obj.stack`` without evaluating it.

    Lookup order follows attribute resolution: data descriptors on the
    type win over the instance ``__dict__``.

    :param object obj: error to inspect
    :return StackPropertyDescriptor | None: None when the attribute does
        not exist yet and can be created
    """
    has_dict = hasattr(obj, "__dict__")
    attr = inspect.getattr_static(type(obj), STACK_ATTR, _MISSING)

    if isinstance(attr, property):
        return StackPropertyDescriptor(
            configurable=has_dict,
            get=attr.fget,
            set=attr.fset,
        )

    if attr is not _MISSING and hasattr(type(attr), "__set__"):
        return StackPropertyDescriptor(
            configurable=has_dict,
            get=lambda owner: attr.__get__(owner, type(owner)),
            set=lambda owner, value: attr.__set__(owner, value),
        )

    if has_dict and STACK_ATTR in vars(obj):
        return StackPropertyDescriptor(configurable=True, writable=True)

    if attr is _MISSING:
        return None if has_dict else StackPropertyDescriptor()

    return StackPropertyDescriptor(configurable=has_dict, writable=has_dict)
