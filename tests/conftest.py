"""Test main config.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

import re

import pytest

from constants import CAUSE_STACK, LIB_MARKER, RAW_STACK
from stacklink import StackLinkError


class LazyError(Exception):
    """Error with a getter computed stack, counting reads."""

    def __init__(self, raw: str | None = RAW_STACK) -> None:
        """Set raw stack."""
        super().__init__("bad")
        self.raw = raw
        self.reads = 0

    @property
    def stack(self) -> str | None:
        """Return raw stack."""
        self.reads += 1
        return self.raw


class Cause:
    """Mutable error-like cause."""

    def __init__(self, stack: str | None = CAUSE_STACK) -> None:
        """Set stack."""
        self.stack = stack



class RegisteredError(StackLinkError):
    """Error hierarchy registering subclasses by unique name."""

    registry: dict[str, type] = {}

    def __init_subclass__(cls) -> None:
        """Register subclass."""
        super().__init_subclass__()

        if cls.__name__ in RegisteredError.registry:
            raise ValueError(f"duplicate {cls.__name__}")
        RegisteredError.registry[cls.__name__] = cls


class CatalogError(RegisteredError):
    """Registered error."""


@pytest.fixture
def marker() -> re.Pattern[str]:
    """Get marker of ``lib`` frames."""
    return LIB_MARKER


@pytest.fixture
def lazy_error() -> LazyError:
    """Get error with lazy stack."""
    return LazyError()


@pytest.fixture
def cause() -> Cause:
    """Get cause with plain stack."""
    return Cause()

