"""pass/gopass backed credential store.

Entries are inserted by piping the password into the configured insert
command. Aliases are symlinks between entry files inside the store
directory, which is how browserpass-style lookups find one credential
under several domains.
"""

import os
import shlex
import subprocess
from pathlib import Path

from pif2pass.core import logging as log
from pif2pass.core.config import ImportConfig
from pif2pass.core.errors import StoreError
from pif2pass.store.base import CredentialStore


class PassStore(CredentialStore):
    """Credential store driven by the pass/gopass command line."""

    def __init__(self, config: ImportConfig | None = None) -> None:
        """Initialize the store.

        Args:
            config: Import configuration (store directory, insert command)
        """
        self.config = config or ImportConfig()
        self._insert_argv = shlex.split(self.config.insert_command)

    @property
    def store_dir(self) -> Path:
        """Root directory of the password store."""
        return self.config.store_dir

    def entry_path(self, title: str) -> Path:
        """Path of the encrypted file for an entry.

        Raises:
            StoreError: If the title points outside the store
        """
        path = self.store_dir / f"{title}{self.config.entry_extension}"
        root = self.store_dir.resolve()
        if not path.resolve().is_relative_to(root):
            raise StoreError(f"Entry '{title}' is outside the password store", path=str(path))
        return path

    def build_insert_command(self, title: str, force: bool) -> list[str]:
        """Build the argv used to insert a multiline entry."""
        argv = list(self._insert_argv)
        if force:
            argv.append("-f")
        argv.extend(["-m", title])
        return argv

    def insert_env(self) -> dict[str, str]:
        """Environment for the insert command, pointed at the configured store."""
        return {**os.environ, "PASSWORD_STORE_DIR": str(self.store_dir)}

    def insert(self, title: str, password: str, force: bool = False) -> bool:
        argv = self.build_insert_command(title, force)
        try:
            completed = subprocess.run(
                argv,
                input=f"{password}\n",
                text=True,
                stdout=subprocess.DEVNULL,
                stderr=subprocess.PIPE,
                env=self.insert_env(),
                check=False,
            )
        except OSError as e:
            log.debug(f"Cannot run {argv[0]}: {e}", title=title)
            return False

        if completed.returncode != 0:
            log.debug(
                f"{argv[0]} exited with status {completed.returncode}",
                title=title,
                stderr=completed.stderr.strip(),
            )
            return False

        return True

    def link(self, alias: str, title: str, force: bool = False) -> None:
        link_path = self.entry_path(alias)
        target_path = self.entry_path(title)
        relative_target = os.path.relpath(target_path, link_path.parent)

        if not force and link_path.is_file() and not link_path.is_symlink():
            raise StoreError(
                f"Cannot link {alias} to {title}: an entry already exists at {alias}",
                path=str(link_path),
            )

        try:
            link_path.parent.mkdir(parents=True, exist_ok=True)
            if link_path.is_symlink() or link_path.is_file():
                link_path.unlink()
            link_path.symlink_to(relative_target)
        except OSError as e:
            raise StoreError(f"Cannot link {alias} to {title}: {e}", path=str(link_path)) from e

        log.debug(f"Linked {alias} -> {title}", link=str(link_path), target=relative_target)
