import logging
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Iterator

from recruitment_portal.core.config import Settings, settings
from recruitment_portal.db.session import close_store, connect_store
from recruitment_portal.db.store import KeyValueStore
from recruitment_portal.repositories.request_repo import RequestRepository
from recruitment_portal.repositories.session_repo import SessionRepository
from recruitment_portal.repositories.user_repo import UserRepository
from recruitment_portal.services.account_service import AccountService
from recruitment_portal.services.request_service import RequestService


def configure_logging(level: str = settings.LOG_LEVEL) -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@dataclass
class Portal:
    """Services bound to one store; what the UI layer talks to."""

    store: KeyValueStore
    accounts: AccountService
    requests: RequestService


def build_portal(store: KeyValueStore, config: Settings = settings) -> Portal:
    accounts = AccountService(
        UserRepository(store),
        SessionRepository(store),
        password_hashing=config.PASSWORD_HASHING,
    )
    requests = RequestService(
        RequestRepository(store),
        accounts,
        default_message=config.DEFAULT_REQUEST_MESSAGE,
    )
    return Portal(store=store, accounts=accounts, requests=requests)


@contextmanager
def lifespan(config: Settings = settings) -> Iterator[Portal]:
    configure_logging(config.LOG_LEVEL)
    store = connect_store(config)
    try:
        yield build_portal(store, config)
    finally:
        close_store()
