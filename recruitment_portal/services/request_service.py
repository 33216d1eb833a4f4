import logging
from datetime import datetime
from typing import Any, Callable, Mapping, Optional

from pydantic import ValidationError

from recruitment_portal.core.config import settings
from recruitment_portal.core.exceptions import (
    FieldValidationError,
    ForbiddenOperation,
    UnauthenticatedException,
)
from recruitment_portal.core.security import generate_id
from recruitment_portal.repositories.request_repo import RequestRepository
from recruitment_portal.schemas.auth_schema import Session
from recruitment_portal.schemas.enums import RequestStatus, RequestType
from recruitment_portal.schemas.base import field_errors
from recruitment_portal.schemas.request_schema import Request, RequestForm
from recruitment_portal.schemas.user_schema import User
from recruitment_portal.services.account_service import AccountService, utc_now

logger = logging.getLogger(__name__)


class RequestService:
    def __init__(
        self,
        request_repo: RequestRepository,
        account_service: AccountService,
        clock: Callable[[], datetime] = utc_now,
        default_message: Optional[str] = None,
    ):
        self.request_repo = request_repo
        self.account_service = account_service
        self.clock = clock
        self.default_message = default_message or settings.DEFAULT_REQUEST_MESSAGE

    def _session_user(self, session: Optional[Session]) -> Optional[User]:
        # an explicit session is required; the persisted pointer alone is not enough
        if session is None:
            return None
        return self.account_service.current_user(session)

    def submit(self, session: Optional[Session], form_data: Mapping[str, Any]) -> Request:
        user = self._session_user(session)
        if user is None:
            raise UnauthenticatedException()

        try:
            form = RequestForm.model_validate(dict(form_data))
        except ValidationError as e:
            errors = field_errors(e)
            logger.debug("Request rejected, invalid fields: %s", sorted(errors))
            raise FieldValidationError(errors)

        request = Request(
            id=generate_id(),
            user_id=user.id,
            user_name=user.full_name,
            type=RequestType(form.request_type),
            message=form.message or self.default_message,
            uploaded_file_name=form.uploaded_file_name,
            birth_governorate=user.governorate,
            requested_governorate=form.requested_governorate,
            status=RequestStatus.UNDER_REVIEW,
            created_at=self.clock(),
        )
        self.request_repo.create(request)
        logger.info("User %s submitted request %s (%s).", user.id, request.reference, request.type.value)
        return request

    def list_mine(self, session: Optional[Session]) -> list[Request]:
        """The session user's requests, newest first."""
        user = self._session_user(session)
        if user is None:
            return []
        requests = self.request_repo.list_by_user(user.id)
        # reversed first so equal timestamps keep the later insertion on top
        return sorted(reversed(requests), key=lambda r: r.created_at, reverse=True)

    def get_mine(self, session: Optional[Session], request_id: str) -> Optional[Request]:
        user = self._session_user(session)
        if user is None:
            return None
        request = self.request_repo.get_by_id(request_id)
        if request is None or request.user_id != user.id:
            return None
        return request

    def delete(self, session: Optional[Session], request_id: str) -> bool:
        """Delete one of the session user's requests.

        Returns False when no such request exists; that still counts as
        success.
        """
        user = self._session_user(session)
        if user is None:
            raise UnauthenticatedException()

        request = self.request_repo.get_by_id(request_id)
        if request is None:
            return False
        if request.user_id != user.id:
            raise ForbiddenOperation("Request does not belong to the current user.")

        deleted = self.request_repo.delete(request_id)
        logger.info("User %s deleted request %s.", user.id, request.reference)
        return deleted
