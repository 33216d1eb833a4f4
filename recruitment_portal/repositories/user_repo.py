import logging
from typing import Optional

from recruitment_portal.core.exceptions import DuplicateNationalIdException
from recruitment_portal.db.store import KeyValueStore
from recruitment_portal.repositories.collection import load_collection, save_collection
from recruitment_portal.schemas.user_schema import User

logger = logging.getLogger(__name__)

USERS_KEY = "users"


class UserRepository:

    def __init__(self, store: KeyValueStore):
        self.store = store

    def list_all(self) -> list[User]:
        return [User.model_validate(record) for record in load_collection(self.store, USERS_KEY)]

    def get_by_id(self, user_id: str) -> Optional[User]:
        return next((user for user in self.list_all() if user.id == user_id), None)

    def get_by_national_id(self, national_id: str) -> Optional[User]:
        return next((user for user in self.list_all() if user.national_id == national_id), None)

    def create(self, user: User) -> User:
        records = load_collection(self.store, USERS_KEY)
        if any(record.get("nationalId") == user.national_id for record in records):
            raise DuplicateNationalIdException(user.national_id)
        records.append(user.to_record())
        save_collection(self.store, USERS_KEY, records)
        logger.debug("Stored user %s (%d users total).", user.id, len(records))
        return user
