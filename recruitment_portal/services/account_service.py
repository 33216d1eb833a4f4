import logging
from datetime import date, datetime, timezone
from typing import Any, Callable, Mapping, Optional

from pydantic import ValidationError

from recruitment_portal.core.exceptions import (
    DuplicateNationalIdException,
    FieldValidationError,
    InvalidCredentialsException,
)
from recruitment_portal.core.security import generate_id, password_matches, prepare_password
from recruitment_portal.repositories.session_repo import SessionRepository
from recruitment_portal.repositories.user_repo import UserRepository
from recruitment_portal.schemas.auth_schema import LoginForm, Session
from recruitment_portal.schemas.base import field_errors
from recruitment_portal.schemas.user_schema import RegistrationForm, User
from recruitment_portal.services.national_id import decode

logger = logging.getLogger(__name__)


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class AccountService:
    def __init__(
        self,
        user_repo: UserRepository,
        session_repo: SessionRepository,
        clock: Callable[[], datetime] = utc_now,
        password_hashing: Optional[bool] = None,
    ):
        self.user_repo = user_repo
        self.session_repo = session_repo
        self.clock = clock
        self.password_hashing = password_hashing

    def register(self, form_data: Mapping[str, Any], as_of: Optional[date] = None) -> User:
        """Validate a registration form and store the new user.

        Raises FieldValidationError with every rejected field, or
        DuplicateNationalIdException. Nothing is stored on failure.
        """
        now = self.clock()
        as_of = as_of or now.date()

        errors: dict[str, str] = {}
        form = None
        try:
            form = RegistrationForm.model_validate(dict(form_data), context={"as_of": as_of})
        except ValidationError as e:
            errors.update(field_errors(e))

        if (form_data.get("password") or "") != (form_data.get("confirm_password") or ""):
            errors["confirm_password"] = "Passwords do not match"

        if errors:
            logger.debug("Registration rejected, invalid fields: %s", sorted(errors))
            raise FieldValidationError(errors)

        if self.user_repo.get_by_national_id(form.national_id):
            logger.info("Registration rejected, national ID already registered.")
            raise DuplicateNationalIdException(form.national_id)

        decoded = decode(form.national_id)
        user = User(
            id=generate_id(),
            full_name=form.full_name,
            national_id=form.national_id,
            gender=decoded.gender,
            governorate=decoded.governorate.label,
            date_of_birth=decoded.date_of_birth,
            address=form.address,
            phone=form.phone,
            email=form.email,
            password=prepare_password(form.password, self.password_hashing),
            created_at=now,
        )
        self.user_repo.create(user)
        logger.info("Registered user %s from %s.", user.id, user.governorate)
        return user

    def authenticate(self, national_id: str, password: str) -> Optional[User]:
        user = self.user_repo.get_by_national_id(national_id)
        if not user:
            return None
        if not password_matches(password, user.password, self.password_hashing):
            return None
        return user

    def login(self, national_id: str, password: str) -> Session:
        try:
            form = LoginForm(national_id=national_id, password=password)
        except ValidationError as e:
            raise FieldValidationError(field_errors(e))

        user = self.authenticate(form.national_id, form.password)
        if user is None:
            # same error whether the ID is unknown or the password is wrong
            logger.info("Failed login attempt.")
            raise InvalidCredentialsException()

        self.session_repo.set(user.id)
        logger.info("User %s logged in.", user.id)
        return Session(user_id=user.id)

    def logout(self, session: Optional[Session] = None) -> Session:
        self.session_repo.set(None)
        if session is not None and session.is_authenticated:
            logger.info("User %s logged out.", session.user_id)
        return Session()

    def restore_session(self) -> Session:
        return Session(user_id=self.session_repo.get())

    def is_active(self, session: Optional[Session]) -> bool:
        """True only for the session the client is currently logged in with."""
        if session is None or not session.is_authenticated:
            return False
        return session.user_id == self.session_repo.get()

    def current_user(self, session: Optional[Session] = None) -> Optional[User]:
        """Resolve ``session`` (or the persisted one) to its user, if any.

        A session replaced by a later login or ended by logout resolves to
        nobody.
        """
        if session is None:
            session = self.restore_session()
        if not self.is_active(session):
            return None
        return self.user_repo.get_by_id(session.user_id)
