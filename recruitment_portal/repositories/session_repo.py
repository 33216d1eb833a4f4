from typing import Optional

from recruitment_portal.db.store import KeyValueStore

SESSION_KEY = "currentUserId"


class SessionRepository:
    """The persisted current-user pointer; an empty string means nobody."""

    def __init__(self, store: KeyValueStore):
        self.store = store

    def get(self) -> Optional[str]:
        return self.store.get(SESSION_KEY) or None

    def set(self, user_id: Optional[str]) -> None:
        self.store.set(SESSION_KEY, user_id or "")
