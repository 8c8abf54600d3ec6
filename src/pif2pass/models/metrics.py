"""Import result and summary models for pif2pass."""

from pydantic import BaseModel, Field


class ImportResult(BaseModel):
    """Outcome of inserting a single credential."""

    title: str = Field(
        ...,
        description="Entry path that was inserted",
    )

    success: bool = Field(
        ...,
        description="Whether the insert command succeeded",
    )

    aliases_linked: list[str] = Field(
        default_factory=list,
        description="Alias paths linked to the entry",
    )

    detail: str | None = Field(
        default=None,
        description="Failure detail, if any",
    )

    model_config = {"extra": "forbid"}


class ImportSummary(BaseModel):
    """Metrics for one import run.

    Emitted to stderr as a debug log entry at the end of every run.
    """

    records_read: int = Field(
        default=0,
        ge=0,
        description="Credentials handed to the store writer",
    )

    imported: int = Field(
        default=0,
        ge=0,
        description="Credentials inserted successfully",
    )

    failed_titles: list[str] = Field(
        default_factory=list,
        description="Titles whose insert failed, in import order",
    )

    duration_ms: int = Field(
        default=0,
        ge=0,
        description="Wall time of the write stage in milliseconds",
    )

    model_config = {"extra": "forbid"}

    @property
    def failed(self) -> int:
        """Number of failed inserts."""
        return len(self.failed_titles)

    @property
    def ok(self) -> bool:
        """True when no insert failed."""
        return not self.failed_titles
