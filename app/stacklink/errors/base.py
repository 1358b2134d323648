"""Errors base.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

import sys
from typing import Any

from stacklink.frames import capture_frames, render_stack


class StackLinkError(Exception):
    """Base exception with a lazily formatted ``stack``.

    Frames are captured when the error is created; formatting them into
    a string is deferred until ``stack`` is read.
    """

    def __init__(self, message: str = "", **props: Any) -> None:
        """Capture caller frames and set extra properties."""
        super().__init__(message)
        self._frames = capture_frames(sys._getframe(1))
        for name, value in props.items():
            setattr(self, name, value)

    @property
    def stack(self) -> str:
        """Render the captured stack."""
        return render_stack(self, self._frames)


class StackBindError(StackLinkError):
    """Lazy stack cannot be bound to an error."""
