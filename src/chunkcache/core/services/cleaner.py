"""Best-effort removal of every physical key behind a logical key."""

import logging

from chunkcache.core.entities.cache_key import CacheKey
from chunkcache.core.interfaces.kv_store import IKeyValueStore

logger = logging.getLogger(__name__)


class Cleaner:
    """Deletes a key's count marker, inline entry and all chunk entries.

    Every possible chunk index up to ``max_chunks`` is deleted, because a
    torn or evicted entry gives no reliable count. Deleting absent keys
    is a no-op in the store, so purging is idempotent.
    """

    def __init__(self, store: IKeyValueStore, max_chunks: int = 50) -> None:
        self._store = store
        self._max_chunks = max_chunks

    def purge(self, key: str) -> bool:
        """Remove every entry stored for ``key``.

        Failures are logged and swallowed.

        Returns:
            True if the store accepted the deletion, False otherwise.
        """
        keys = CacheKey(key).all_physical_keys(self._max_chunks)
        try:
            self._store.remove_all(keys)
        except Exception:
            logger.warning("Failed to purge cache key %r", key, exc_info=True)
            return False
        logger.debug("Purged cache key %r", key)
        return True
