"""Export record models for pif2pass.

Only the keys the importer reads are declared. 1PIF records carry many
more (uuid, timestamps, folder references, ...) and those are ignored.
"""

from typing import Any

from pydantic import BaseModel, Field


class SourceField(BaseModel):
    """A single form field saved with a web form record."""

    designation: Any = Field(
        default=None,
        description="Role of the field (e.g., 'username', 'password')",
    )

    name: Any = Field(
        default=None,
        description="HTML name of the form input",
    )

    value: Any = Field(
        default=None,
        description="Saved field value",
    )

    model_config = {"extra": "ignore"}

    @property
    def text(self) -> str | None:
        """Field value when it is a non-empty string, else None."""
        if isinstance(self.value, str) and self.value:
            return self.value
        return None


class SourceURL(BaseModel):
    """A URL the record is associated with."""

    url: Any = Field(
        default=None,
        description="URL as saved by the password manager",
    )

    label: Any = Field(
        default=None,
        description="Optional user label",
    )

    model_config = {"extra": "ignore"}


class SecureContents(BaseModel):
    """Secret payload of an export record."""

    fields: list[SourceField] | None = Field(
        default=None,
        description="Saved form fields",
    )

    urls: list[SourceURL] | None = Field(
        default=None,
        alias="URLs",
        description="Associated URLs, in saved order",
    )

    model_config = {"extra": "ignore", "populate_by_name": True}

    def find_field(self, designation: str) -> SourceField | None:
        """Return the first field with the given designation."""
        for field in self.fields or []:
            if field.designation == designation:
                return field
        return None


class SourceRecord(BaseModel):
    """One record of a normalized 1PIF document."""

    type_name: str | None = Field(
        default=None,
        alias="typeName",
        description="Record kind tag (e.g., 'webforms.WebForm')",
    )

    title: Any = Field(
        default=None,
        description="Title given to the item by the user",
    )

    secure_contents: SecureContents | None = Field(
        default=None,
        alias="secureContents",
        description="Secret payload",
    )

    model_config = {"extra": "ignore", "populate_by_name": True}
