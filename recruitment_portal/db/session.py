import logging

from recruitment_portal.core.config import Settings, settings
from recruitment_portal.db.store import JsonFileStore, KeyValueStore, MemoryStore, RedisStore

logger = logging.getLogger(__name__)

store: KeyValueStore | None = None


def create_store(config: Settings = settings) -> KeyValueStore:
    backend = config.STORE_BACKEND.lower()
    if backend == "memory":
        return MemoryStore()
    if backend == "file":
        return JsonFileStore(config.STORE_PATH)
    if backend == "redis":
        return RedisStore.from_url(config.REDIS_URL, prefix=config.REDIS_KEY_PREFIX)
    raise ValueError(f"Unknown STORE_BACKEND: {config.STORE_BACKEND!r}")


def connect_store(config: Settings = settings) -> KeyValueStore:
    global store
    if store is None:
        store = create_store(config)
        logger.info("Opened %s store.", config.STORE_BACKEND)
    return store


def get_store() -> KeyValueStore:
    if store is None:
        raise RuntimeError("Store is not initialized.")
    return store


def close_store():
    global store
    if store is not None:
        store.close()
        store = None
        logger.info("Store closed.")
