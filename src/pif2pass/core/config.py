"""Import configuration for pif2pass."""

import os
from pathlib import Path

from pydantic import BaseModel, Field, field_validator

DEFAULT_STORE_DIR = "~/.password-store"
DEFAULT_INSERT_COMMAND = "gopass insert"


def default_store_dir() -> Path:
    """Store directory from $PASSWORD_STORE_DIR, falling back to ~/.password-store."""
    return Path(os.environ.get("PASSWORD_STORE_DIR") or DEFAULT_STORE_DIR).expanduser()


class ImportConfig(BaseModel):
    """Settings for the store writing stage.

    Parsing and extraction never read this; only the store writer and
    the pass store do.
    """

    force: bool = Field(
        default=False,
        description="Overwrite entries that already exist in the store",
    )

    parallel: bool = Field(
        default=False,
        description="Insert credentials concurrently",
    )

    max_workers: int = Field(
        default=8,
        ge=1,
        le=64,
        description="Thread pool size when parallel is set",
    )

    store_dir: Path = Field(
        default_factory=default_store_dir,
        description="Root directory of the password store",
    )

    insert_command: str = Field(
        default=DEFAULT_INSERT_COMMAND,
        min_length=1,
        description="Command used to insert a multiline entry",
    )

    entry_extension: str = Field(
        default=".gpg",
        description="File extension of encrypted entries in the store",
    )

    model_config = {"extra": "forbid", "frozen": True}

    @field_validator("store_dir")
    @classmethod
    def expand_store_dir(cls, v: Path) -> Path:
        """Expand ~ in the store path."""
        return Path(v).expanduser()
