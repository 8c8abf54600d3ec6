"""Export parsers for pif2pass."""

from pif2pass.parsers.domain import title_from_url
from pif2pass.parsers.pif import (
    EXT_PIF,
    SUPPORTED_EXTENSIONS,
    check_extension,
    extract_credentials,
    load_pif,
    normalize_pif,
    read_pif,
)

__all__ = [
    "EXT_PIF",
    "SUPPORTED_EXTENSIONS",
    "check_extension",
    "extract_credentials",
    "load_pif",
    "normalize_pif",
    "read_pif",
    "title_from_url",
]
