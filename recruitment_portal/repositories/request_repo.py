import logging
from typing import Optional

from recruitment_portal.db.store import KeyValueStore
from recruitment_portal.repositories.collection import load_collection, save_collection
from recruitment_portal.schemas.request_schema import Request

logger = logging.getLogger(__name__)

REQUESTS_KEY = "requests"


class RequestRepository:

    def __init__(self, store: KeyValueStore):
        self.store = store

    # ------------------ Retrieval Methods ------------------ #

    def list_all(self) -> list[Request]:
        return [Request.model_validate(record) for record in load_collection(self.store, REQUESTS_KEY)]

    def list_by_user(self, user_id: str) -> list[Request]:
        return [request for request in self.list_all() if request.user_id == user_id]

    def get_by_id(self, request_id: str) -> Optional[Request]:
        return next((request for request in self.list_all() if request.id == request_id), None)

    # ------------------ Creation / Removal ------------------ #

    def create(self, request: Request) -> Request:
        records = load_collection(self.store, REQUESTS_KEY)
        records.append(request.to_record())
        save_collection(self.store, REQUESTS_KEY, records)
        return request

    def delete(self, request_id: str) -> bool:
        records = load_collection(self.store, REQUESTS_KEY)
        remaining = [record for record in records if record.get("id") != request_id]
        if len(remaining) == len(records):
            return False
        save_collection(self.store, REQUESTS_KEY, remaining)
        logger.debug("Removed request %s.", request_id)
        return True
