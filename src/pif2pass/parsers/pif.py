"""1Password Interchange Format (1PIF) parser.

A 1PIF file is almost JSON: one JSON object per record, with records
separated by marker lines such as::

    ***5642bee8-a5ff-11dc-8314-0800200c9a66***

The separators are rewritten into commas and the whole text is wrapped
in brackets so it parses as a JSON array. Web form records are then
turned into Credential instances ready for the store writer.
"""

import json
import re
from collections.abc import Callable, Iterable
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from pif2pass.core import logging as log
from pif2pass.core.errors import ParseError, PifFormatError, UnsupportedFormatError
from pif2pass.models.credential import Credential
from pif2pass.models.record import SourceRecord
from pif2pass.parsers.domain import title_from_url

EXT_PIF = ".1pif"
SUPPORTED_EXTENSIONS = [EXT_PIF]

WEB_FORM_TYPE = "webforms.WebForm"

# Field designations used by 1Password
FIELD_PASSWORD = "password"
FIELD_USERNAME = "username"

SEPARATOR_RE = re.compile(r"^\*\*\*.*\*\*\*\r?$", re.MULTILINE)


def check_extension(path: Path | str) -> None:
    """Reject files that are not 1PIF exports.

    Raises:
        UnsupportedFormatError: If the extension is not supported
    """
    if Path(path).suffix.lower() not in SUPPORTED_EXTENSIONS:
        raise UnsupportedFormatError(str(path), SUPPORTED_EXTENSIONS)


def normalize_pif(text: str) -> str:
    """Rewrite 1PIF text into a JSON array document.

    Every separator line becomes a single comma, trailing whitespace and
    the comma left by the last separator are dropped, and the result is
    wrapped in brackets.

    Args:
        text: Raw export file contents

    Returns:
        JSON text of an array of record objects
    """
    body = SEPARATOR_RE.sub(",", text).rstrip()
    body = body.removesuffix(",").rstrip()
    return f"[{body}]"


def load_pif(text: str, path: str | None = None) -> list[dict[str, Any]]:
    """Parse 1PIF text into a list of raw record dicts.

    Args:
        text: Raw export file contents
        path: Source path, for error context

    Raises:
        PifFormatError: If the normalized text is not valid JSON
        ParseError: If a record is not a JSON object
    """
    try:
        document = json.loads(normalize_pif(text))
    except json.JSONDecodeError as e:
        raise PifFormatError(e.msg, e.lineno, e.colno, path=path) from e

    for index, record in enumerate(document):
        if not isinstance(record, dict):
            raise ParseError(
                f"Record {index} is a JSON {type(record).__name__}, not an object",
                path=path,
                context={"record_index": index},
            )

    return document


def read_pif(path: Path | str) -> list[dict[str, Any]]:
    """Read and parse a 1PIF export file."""
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8-sig")
    except UnicodeDecodeError as e:
        raise ParseError(f"Export is not UTF-8 text: {e.reason}", path=str(path)) from e

    log.debug(f"Read {len(text)} characters from {path}", path=str(path))
    return load_pif(text, path=str(path))


def extract_credentials(
    records: Iterable[dict[str, Any]],
    *,
    type_name: str = WEB_FORM_TYPE,
    password_designation: str = FIELD_PASSWORD,
    username_designation: str = FIELD_USERNAME,
    title_for_url: Callable[[str], str] = title_from_url,
) -> list[Credential]:
    """Extract importable credentials from raw 1PIF records.

    Records of other types, records without fields and records without a
    password are skipped silently. Output order follows document order.

    Args:
        records: Raw record dicts, as returned by load_pif
        type_name: Record type to import
        password_designation: Designation of the password field
        username_designation: Designation of the username field
        title_for_url: Maps a URL to an entry title

    Returns:
        Credentials in document order

    Raises:
        UrlParseError: If a record URL cannot be parsed
    """
    credentials = []

    for index, raw in enumerate(records):
        if raw.get("typeName") != type_name:
            continue

        try:
            record = SourceRecord.model_validate(raw)
        except ValidationError as e:
            log.debug(
                "Skipping record with unexpected structure",
                record_index=index,
                errors=e.error_count(),
            )
            continue

        credential = _credential_from_record(
            record,
            index,
            password_designation=password_designation,
            username_designation=username_designation,
            title_for_url=title_for_url,
        )
        if credential is not None:
            credentials.append(credential)

    return credentials


def _credential_from_record(
    record: SourceRecord,
    index: int,
    *,
    password_designation: str,
    username_designation: str,
    title_for_url: Callable[[str], str],
) -> Credential | None:
    contents = record.secure_contents
    if contents is None or contents.fields is None:
        log.debug("Skipping record without fields", record_index=index, title=record.title)
        return None

    password_field = contents.find_field(password_designation)
    password = password_field.text if password_field else None
    if password is None:
        log.debug("Skipping record without password", record_index=index, title=record.title)
        return None

    # Blank and non-string URL values carry no domain.
    urls = [
        entry.url
        for entry in contents.urls or []
        if isinstance(entry.url, str) and entry.url
    ]
    domains = list(dict.fromkeys(title_for_url(url) for url in urls))

    if domains:
        title = domains[0]
        aliases = tuple(domains[1:])
    else:
        title = record.title if isinstance(record.title, str) else None
        aliases = ()

    if not title:
        log.debug("Skipping record without title or URL", record_index=index)
        return None

    # Browserpass matches entries on {domain}/{username}.
    username_field = contents.find_field(username_designation)
    username = username_field.text if username_field else None
    if username is not None:
        title = f"{title}/{username}"

    return Credential(
        password=password,
        title=title,
        username=username,
        aliases=aliases,
    )
