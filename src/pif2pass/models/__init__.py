"""Pydantic models for pif2pass."""

from pif2pass.models.credential import Credential
from pif2pass.models.error import StructuredError
from pif2pass.models.metrics import ImportResult, ImportSummary

__all__ = [
    "Credential",
    "StructuredError",
    "ImportResult",
    "ImportSummary",
]
