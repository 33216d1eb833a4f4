"""Shared fixtures for the recruitment portal tests."""

from datetime import date, datetime, timedelta, timezone

import pytest

from recruitment_portal.db.store import MemoryStore
from recruitment_portal.repositories.request_repo import RequestRepository
from recruitment_portal.repositories.session_repo import SessionRepository
from recruitment_portal.repositories.user_repo import UserRepository
from recruitment_portal.services.account_service import AccountService
from recruitment_portal.services.request_service import RequestService

TODAY = date(2026, 10, 19)

# born 1996-05-12 in Cairo, male
VALID_NATIONAL_ID = "29605120100011"
# born 1998-02-03 in Giza, male
OTHER_NATIONAL_ID = "29802032100031"
PASSWORD = "s3cretpass"


class FakeClock:
    def __init__(self, start: datetime):
        self.now = start

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs) -> datetime:
        self.now = self.now + timedelta(**kwargs)
        return self.now


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock(datetime(TODAY.year, TODAY.month, TODAY.day, 9, 0, tzinfo=timezone.utc))


@pytest.fixture
def store() -> MemoryStore:
    return MemoryStore()


@pytest.fixture
def user_repo(store) -> UserRepository:
    return UserRepository(store)


@pytest.fixture
def session_repo(store) -> SessionRepository:
    return SessionRepository(store)


@pytest.fixture
def request_repo(store) -> RequestRepository:
    return RequestRepository(store)


@pytest.fixture
def accounts(user_repo, session_repo, clock) -> AccountService:
    return AccountService(user_repo, session_repo, clock=clock, password_hashing=False)


@pytest.fixture
def request_service(request_repo, accounts, clock) -> RequestService:
    return RequestService(request_repo, accounts, clock=clock, default_message="No additional notes")


def registration_data(**overrides) -> dict:
    data = {
        "full_name": "Ahmed Hassan Ali",
        "national_id": VALID_NATIONAL_ID,
        "address": "12 Tahrir Street, Downtown, Cairo",
        "phone": "01012345678",
        "email": "ahmed.hassan@example.com",
        "password": PASSWORD,
        "confirm_password": PASSWORD,
    }
    data.update(overrides)
    return data


def request_data(**overrides) -> dict:
    data = {
        "request_type": "Deferment",
        "requested_governorate": "Giza",
        "message": "Studying abroad until next summer",
        "uploaded_file_name": "enrollment.pdf",
    }
    data.update(overrides)
    return data


@pytest.fixture
def registered_user(accounts):
    return accounts.register(registration_data())


@pytest.fixture
def session(accounts, registered_user):
    return accounts.login(VALID_NATIONAL_ID, PASSWORD)
