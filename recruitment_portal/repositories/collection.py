import json

from recruitment_portal.core.exceptions import StoreCorruptedError
from recruitment_portal.db.store import KeyValueStore


def load_collection(store: KeyValueStore, key: str) -> list[dict]:
    raw = store.get(key)
    if not raw:
        return []
    try:
        records = json.loads(raw)
    except json.JSONDecodeError:
        raise StoreCorruptedError(key)
    if not isinstance(records, list):
        raise StoreCorruptedError(key)
    return records


def save_collection(store: KeyValueStore, key: str, records: list[dict]) -> None:
    store.set(key, json.dumps(records, ensure_ascii=False))
