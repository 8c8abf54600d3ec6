"""Credential model for pif2pass."""

from collections.abc import Iterator

from pydantic import BaseModel, Field


class Credential(BaseModel):
    """An importable credential extracted from a web form record.

    ``title`` already carries the ``/<username>`` suffix when a username
    is known. ``aliases`` are the remaining distinct domain titles and do
    not carry the suffix.
    """

    password: str = Field(
        ...,
        min_length=1,
        description="Secret to store",
    )

    title: str = Field(
        ...,
        min_length=1,
        description="Entry path inside the password store",
    )

    username: str | None = Field(
        default=None,
        description="Login name, if the record has one",
    )

    aliases: tuple[str, ...] = Field(
        default=(),
        description="Alternate domain titles linked to the entry",
    )

    model_config = {"extra": "forbid", "frozen": True}

    def alias_titles(self) -> Iterator[str]:
        """Yield alias entry paths with the username suffix applied."""
        for alias in self.aliases:
            if self.username:
                yield f"{alias}/{self.username}"
            else:
                yield alias
