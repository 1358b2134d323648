"""Frame capture and stack rendering.

Stacks are rendered header first, then one line per frame with the
innermost call on top:

```
ValueError: bad input
    at parse (/app/reader.py:12)
    at main (/app/cli.py:40)
```

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

import traceback
from dataclasses import dataclass
from types import FrameType
from typing import Iterable, Protocol, runtime_checkable

from stacklink.config import settings

FRAME_FORMAT = "    at {name} ({filename}:{lineno})"


@runtime_checkable
class ErrorLike(Protocol):
    """Any object exposing an optional string ``stack``."""

    stack: str | None


@dataclass(frozen=True)
class StackView:
    """Plain holder of a stack value."""

    stack: str | None = None


class TracebackStack:
    """Expose a native exception traceback as ``stack``.

    Rendered on every read, so a traceback that grows while the
    exception propagates is reflected.
    """

    def __init__(self, error: BaseException) -> None:
        """Adapt error."""
        self._error = error

    @property
    def stack(self) -> str | None:
        """Render the traceback of the adapted error."""
        return traceback_stack(self._error)


def capture_frames(
    frame: FrameType | None,
    limit: int | None = None,
) -> traceback.StackSummary:
    """Capture frames from ``frame`` outwards, innermost first.

    Source lines are not looked up, rendering needs only names and
    positions.
    """
    if limit is None:
        limit = settings.STACKLINK_STACK_LIMIT
    return traceback.StackSummary.extract(
        traceback.walk_stack(frame),
        limit=limit,
        lookup_lines=False,
    )


def format_header(error: BaseException) -> str:
    """Format ``TypeName: message`` header line."""
    name = type(error).__name__
    message = str(error)
    return f"{name}: {message}" if message else name


def format_frames(frames: Iterable[traceback.FrameSummary]) -> list[str]:
    """Format one line per frame."""
    return [
        FRAME_FORMAT.format(
            name=frame.name,
            filename=frame.filename,
            lineno=frame.lineno,
        )
        for frame in frames
    ]


def render_stack(
    error: BaseException,
    frames: Iterable[traceback.FrameSummary],
) -> str:
    """Render header and frames into a stack string."""
    return "\n".join([format_header(error), *format_frames(frames)])


def traceback_stack(error: BaseException) -> str | None:
    """Render ``error.__traceback__``, or None if it was never raised."""
    if error.__traceback__ is None:
        return None

    frames = traceback.extract_tb(error.__traceback__)
    return render_stack(error, reversed(frames))
