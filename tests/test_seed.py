"""Tests for application wiring and demo seeding."""

from recruitment_portal.core.config import Settings
from recruitment_portal.db import session as store_session
from recruitment_portal.db.seed import DEMO_PASSWORD, seed
from recruitment_portal.db.store import JsonFileStore, MemoryStore
from recruitment_portal.main import build_portal, lifespan


class TestLifespan:
    def test_opens_and_closes_store(self, tmp_path) -> None:
        config = Settings(STORE_BACKEND="file", STORE_PATH=str(tmp_path / "portal.json"))

        with lifespan(config) as portal:
            assert isinstance(portal.store, JsonFileStore)
            assert store_session.store is portal.store

        assert store_session.store is None


class TestSeed:
    def test_seeded_users_can_log_in(self) -> None:
        portal = build_portal(MemoryStore())

        users = seed(portal, num_users=5, seed_value=1234)

        assert len(users) == 5
        assert len({u.national_id for u in users}) == 5
        session = portal.accounts.login(users[0].national_id, DEMO_PASSWORD)
        assert all(r.user_id == users[0].id for r in portal.requests.list_mine(session))

    def test_seed_logs_out_at_the_end(self) -> None:
        portal = build_portal(MemoryStore())

        seed(portal, num_users=2, seed_value=7)

        assert portal.accounts.current_user() is None
