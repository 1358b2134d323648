"""Stack joiner.

Removes the library's own frames from a new error's stack and appends
the stack of the error it wraps.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

import re

from stacklink.config import settings
from stacklink.frames import ErrorLike

NEWLINE = re.compile(r"\r?\n")
LIBRARY_CALL = re.compile(
    rf"\b{re.escape(settings.STACKLINK_MARKER_TOKEN)}[ @]",
)

CAUSE_SEPARATOR = "\n\n"


def strip_library_frames(
    stack: str | None,
    marker: re.Pattern[str] = LIBRARY_CALL,
) -> str | None:
    """Remove library frames, so the stack starts at the call site.

    Only the first contiguous run of marker lines is removed, later runs
    (recursion, retries) are left as is. A header line matching the
    marker starts the run and is removed with it.

    :param str | None stack: raw stack
    :param re.Pattern marker: pattern of a library frame line
    :return str | None: stripped stack, or the input when no run found
    """
    if not stack:
        return stack

    lines = NEWLINE.split(stack)
    start = None

    for i, line in enumerate(lines):
        if marker.search(line):
            if start is None:
                start = i
        elif start is not None:
            del lines[start:i]
            return "\n".join(lines)

    return stack


def join_stacks(
    new_error: ErrorLike,
    original_error: ErrorLike | None = None,
    marker: re.Pattern[str] = LIBRARY_CALL,
) -> str | None:
    """Append the original error stack to the stripped new one.

    The original stack is not stripped.
    """
    new_stack = strip_library_frames(new_error.stack, marker)
    original_stack = (
        original_error.stack if original_error is not None else None
    )

    if new_stack and original_stack:
        return new_stack + CAUSE_SEPARATOR + original_stack

    return new_stack or original_stack
