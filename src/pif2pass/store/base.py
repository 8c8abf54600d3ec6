"""Password store interface for pif2pass."""

from abc import ABC, abstractmethod


class CredentialStore(ABC):
    """Destination for imported credentials.

    Implementations must tolerate calls from several threads at once
    when the writer runs in parallel mode.
    """

    @abstractmethod
    def insert(self, title: str, password: str, force: bool = False) -> bool:
        """Insert a password under title.

        Args:
            title: Entry path inside the store
            password: Secret to store
            force: Overwrite an existing entry

        Returns:
            True if the entry was written
        """
        ...

    @abstractmethod
    def link(self, alias: str, title: str, force: bool = False) -> None:
        """Make alias resolve to the existing entry title.

        Existing aliases are replaced. An entry already stored under the
        alias path is only replaced when force is set.

        Raises:
            StoreError: If the link cannot be created
        """
        ...
