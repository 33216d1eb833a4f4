from datetime import datetime

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic_core import PydanticCustomError

from recruitment_portal.schemas.base import StoredModel
from recruitment_portal.schemas.enums import Governorate, RequestStatus, RequestType

REFERENCE_LENGTH = 8


class RequestForm(BaseModel):
    """Fields of the request form; the upload is represented by its file name."""

    model_config = ConfigDict(validate_default=True)

    request_type: str = ""
    requested_governorate: str = ""
    message: str = ""
    uploaded_file_name: str = ""

    @field_validator("*", mode="before")
    @classmethod
    def none_as_empty(cls, value):
        return "" if value is None else value

    @field_validator("request_type")
    @classmethod
    def check_request_type(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise PydanticCustomError("request_type", "Please select a request type")
        try:
            return RequestType(value).value
        except ValueError:
            raise PydanticCustomError("request_type", "Unknown request type")

    @field_validator("requested_governorate")
    @classmethod
    def check_requested_governorate(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise PydanticCustomError("requested_governorate", "Please select a governorate")
        try:
            # accept either the two-digit code or the display name
            governorate = Governorate(value) if value.isdigit() else Governorate.from_label(value)
        except ValueError:
            raise PydanticCustomError("requested_governorate", "Unknown governorate")
        return governorate.label

    @field_validator("message")
    @classmethod
    def strip_message(cls, value: str) -> str:
        return value.strip()

    @field_validator("uploaded_file_name")
    @classmethod
    def check_uploaded_file_name(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise PydanticCustomError("uploaded_file_name", "Please upload a file")
        return value


class Request(StoredModel):
    id: str
    user_id: str
    user_name: str
    type: RequestType
    message: str
    uploaded_file_name: str
    birth_governorate: str
    requested_governorate: str
    status: RequestStatus = RequestStatus.UNDER_REVIEW
    created_at: datetime

    @property
    def reference(self) -> str:
        return self.id[:REFERENCE_LENGTH]
