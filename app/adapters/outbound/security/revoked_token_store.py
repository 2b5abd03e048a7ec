# app/adapters/outbound/security/revoked_token_store.py

import logging
import threading
from typing import Set

from app.application.ports.outbound.token_service_port import IRevokedTokenStore

logger = logging.getLogger(__name__)


class RevokedTokenStore(IRevokedTokenStore):
    """
    In-memory set of revoked session tokens.

    Lives as long as the process: entries are never evicted and are lost
    on restart. Insert and lookup are lock-protected so handlers running
    in the thread pool see a consistent set.
    """

    def __init__(self):
        self._tokens: Set[str] = set()
        self._lock = threading.Lock()

    def revoke(self, token: str) -> None:
        """Add a token to the revoked set. Revoking twice is a no-op."""
        with self._lock:
            if token in self._tokens:
                return
            self._tokens.add(token)
        logger.info("Session token revoked")

    def is_revoked(self, token: str) -> bool:
        with self._lock:
            return token in self._tokens

    def __len__(self) -> int:
        with self._lock:
            return len(self._tokens)
