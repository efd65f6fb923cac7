"""
In-memory store for API credentials.
"""
import itertools
import threading
from typing import Dict, List, Optional

from loguru import logger
from pydantic import SecretStr

from moodreply.models.credential import Credential


class CredentialStore:
    """
    Registry of named API credentials, kept only in process memory.

    Credentials are never mutated; replacing a key means removing the old
    one and adding a new one. Identifiers come from a monotonic counter and
    are never reused for the lifetime of the store.
    """

    def __init__(self):
        self._credentials: Dict[int, Credential] = {}
        self._ids = itertools.count(1)
        # Sync FastAPI dependencies run in a thread pool
        self._lock = threading.Lock()

    def add(self, display_name: str, secret: str, provider_family: str) -> Credential:
        """
        Register a new credential.

        Args:
            display_name: Name shown to the user.
            secret: The API key itself.
            provider_family: Provider label, e.g. "Gemini".

        Returns:
            The stored credential with its freshly assigned id.
        """
        with self._lock:
            credential = Credential(
                id=next(self._ids),
                display_name=display_name,
                secret=SecretStr(secret),
                provider_family=provider_family,
            )
            self._credentials[credential.id] = credential
        logger.info(
            f"Added credential {credential.id} for '{provider_family}' ({credential.masked_secret})"
        )
        return credential

    def remove(self, credential_id: int) -> None:
        """Remove a credential; unknown ids are ignored."""
        with self._lock:
            removed = self._credentials.pop(credential_id, None)
        if removed is not None:
            logger.info(f"Removed credential {credential_id}")

    def get(self, credential_id: int) -> Optional[Credential]:
        with self._lock:
            return self._credentials.get(credential_id)

    def find_by_provider_family(self, fragment: str) -> Optional[Credential]:
        """
        Return the first credential, in insertion order, whose provider
        family contains `fragment` (case-insensitive).
        """
        needle = fragment.lower()
        with self._lock:
            for credential in self._credentials.values():
                if needle in credential.provider_family.lower():
                    return credential
        return None

    def list_credentials(self) -> List[Credential]:
        """All credentials in insertion order."""
        with self._lock:
            return list(self._credentials.values())

    def clear(self) -> None:
        with self._lock:
            self._credentials.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._credentials)
