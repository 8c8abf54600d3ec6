"""Password store backends for pif2pass."""

from pif2pass.store.base import CredentialStore
from pif2pass.store.pass_store import PassStore
from pif2pass.store.writer import StoreWriter

__all__ = ["CredentialStore", "PassStore", "StoreWriter"]
