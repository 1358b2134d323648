"""Module with settings.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

import os

from pydantic import BaseModel, Field


class Settings(BaseModel):
    """Settings for stack linking."""

    STACKLINK_MARKER_TOKEN: str = Field("stacklink", min_length=1)
    STACKLINK_LAZY: bool = True
    STACKLINK_STACK_LIMIT: int = Field(10, ge=1)

    @classmethod
    def from_os(cls) -> "Settings":
        """Get cls from environ."""
        return Settings(**os.environ)


settings = Settings.from_os()
