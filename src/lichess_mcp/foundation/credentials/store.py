"""In-memory holder for the bearer token.

One store lives for the whole process and is handed to the dispatcher.
Nothing is persisted; a restart starts from the configured initial token.
"""

from __future__ import annotations

import threading

from pydantic import SecretStr


class CredentialStore:
    """Holds at most one bearer token.

    Writers (set, clear, clear_if) are serialized by a lock so a revoke
    completing concurrently with a set never drops the newer token.

    Example:
        >>> store = CredentialStore()
        >>> store.set("lip_abc")
        >>> store.get()
        'lip_abc'
        >>> store.clear_if("lip_other")
        False
    """

    __slots__ = ("_token", "_lock")

    def __init__(self, token: str | SecretStr | None = None) -> None:
        self._lock = threading.Lock()
        self._token: SecretStr | None = None
        if token is not None:
            self.set(token)

    def set(self, token: str | SecretStr) -> None:
        """Replace the stored token unconditionally."""
        secret = token if isinstance(token, SecretStr) else SecretStr(token)
        with self._lock:
            self._token = secret

    def get(self) -> str | None:
        """Current token, or None when absent."""
        secret = self._token
        return secret.get_secret_value() if secret is not None else None

    def clear(self) -> None:
        with self._lock:
            self._token = None

    def clear_if(self, token: str) -> bool:
        """Clear only if the store still holds `token`. Returns True if cleared."""
        with self._lock:
            if self._token is None or self._token.get_secret_value() != token:
                return False
            self._token = None
            return True

    @property
    def is_set(self) -> bool:
        return self._token is not None

    def __repr__(self) -> str:
        return f"CredentialStore(token={'**********' if self.is_set else None})"
