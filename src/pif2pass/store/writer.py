"""Store writer: pushes extracted credentials into a CredentialStore."""

import time
from collections.abc import Callable, Iterator, Sequence
from concurrent.futures import ThreadPoolExecutor

from pif2pass.core import logging as log
from pif2pass.core.config import ImportConfig
from pif2pass.core.errors import StoreError
from pif2pass.models.credential import Credential
from pif2pass.models.metrics import ImportResult, ImportSummary
from pif2pass.store.base import CredentialStore

Reporter = Callable[[ImportResult], None]


def log_result(result: ImportResult) -> None:
    """Default reporter: one log line per credential."""
    if result.success:
        log.info(f"Imported {result.title}")
    else:
        log.error(f"Failed to import {result.title}", detail=result.detail)


class StoreWriter:
    """Inserts credentials and links their aliases.

    A failed insert is recorded and the remaining credentials are still
    processed. Results are reported in credential order, also in
    parallel mode.
    """

    def __init__(
        self,
        store: CredentialStore,
        config: ImportConfig | None = None,
        reporter: Reporter | None = None,
    ) -> None:
        """Initialize the writer.

        Args:
            store: Destination store
            config: Import configuration (force, parallel, max_workers)
            reporter: Called once per credential with its result
        """
        self.store = store
        self.config = config or ImportConfig()
        self.reporter = reporter or log_result

    def write(self, credentials: Sequence[Credential]) -> ImportSummary:
        """Import all credentials.

        Args:
            credentials: Credentials in import order

        Returns:
            Summary with counts and failed titles
        """
        start_time = time.perf_counter()
        summary = ImportSummary(records_read=len(credentials))

        for result in self._results(credentials):
            self.reporter(result)
            if result.success:
                summary.imported += 1
            else:
                summary.failed_titles.append(result.title)

        summary.duration_ms = int((time.perf_counter() - start_time) * 1000)
        log.debug("Import finished", **summary.model_dump(mode="json"))
        return summary

    def _results(self, credentials: Sequence[Credential]) -> Iterator[ImportResult]:
        if not self.config.parallel or len(credentials) < 2:
            for credential in credentials:
                yield self.import_one(credential)
            return

        workers = min(self.config.max_workers, len(credentials))
        log.debug(f"Importing with {workers} threads")
        with ThreadPoolExecutor(max_workers=workers) as executor:
            yield from executor.map(self.import_one, credentials)

    def import_one(self, credential: Credential) -> ImportResult:
        """Insert one credential and link its aliases."""
        if not self.store.insert(credential.title, credential.password, self.config.force):
            return ImportResult(
                title=credential.title,
                success=False,
                detail="insert command failed",
            )

        linked = []
        for alias in credential.alias_titles():
            try:
                self.store.link(alias, credential.title, self.config.force)
            except StoreError as e:
                log.warning(str(e), alias=alias, title=credential.title)
                continue
            linked.append(alias)

        return ImportResult(
            title=credential.title,
            success=True,
            aliases_linked=linked,
        )
