"""Shared fixtures for pif2pass tests."""

import json
import threading
from typing import Any

import pytest

from pif2pass.core.errors import StoreError
from pif2pass.core.logging import configure_logging
from pif2pass.store.base import CredentialStore

SEPARATOR = "***5642bee8-a5ff-11dc-8314-0800200c9a66***"


class FakeStore(CredentialStore):
    """In-memory store recording inserts and links."""

    def __init__(self, fail_titles: set[str] | None = None, fail_links: set[str] | None = None):
        self.fail_titles = fail_titles or set()
        self.fail_links = fail_links or set()
        self.entries: dict[str, str] = {}
        self.links: dict[str, str] = {}
        self.link_forces: list[bool] = []
        self.inserts: list[tuple[str, bool]] = []
        self._lock = threading.Lock()

    def insert(self, title: str, password: str, force: bool = False) -> bool:
        with self._lock:
            self.inserts.append((title, force))
            if title in self.fail_titles:
                return False
            self.entries[title] = password
            return True

    def link(self, alias: str, title: str, force: bool = False) -> None:
        if alias in self.fail_links:
            raise StoreError(f"Cannot link {alias} to {title}")
        with self._lock:
            self.links[alias] = title
            self.link_forces.append(force)


@pytest.fixture(autouse=True)
def reset_logging():
    """Restore default logging switches between tests."""
    configure_logging()
    yield
    configure_logging()


@pytest.fixture
def make_store():
    """Build an in-memory store that fails the given titles or aliases."""
    return FakeStore


@pytest.fixture
def fake_store(make_store) -> FakeStore:
    return make_store()


@pytest.fixture
def make_record():
    """Build a raw 1PIF web form record."""

    def _make(
        title: str = "Example",
        password: str | None = "hunter2",
        username: str | None = None,
        urls: list[str] | None = None,
        type_name: str = "webforms.WebForm",
    ) -> dict[str, Any]:
        fields = []
        if username is not None:
            fields.append({"designation": "username", "name": "login", "value": username})
        if password is not None:
            fields.append({"designation": "password", "name": "pass", "value": password})
        contents: dict[str, Any] = {"fields": fields}
        if urls is not None:
            contents["URLs"] = [{"url": url} for url in urls]
        return {
            "uuid": "0C4F27910A64488BB339AED63565D148",
            "typeName": type_name,
            "title": title,
            "secureContents": contents,
        }

    return _make


@pytest.fixture
def make_pif():
    """Render raw records as 1PIF text."""

    def _make(*records: dict[str, Any]) -> str:
        lines = []
        for record in records:
            lines.append(json.dumps(record))
            lines.append(SEPARATOR)
        return "\n".join(lines) + "\n"

    return _make
