import re
from datetime import date, datetime

from pydantic import BaseModel, ConfigDict, ValidationInfo, field_validator
from pydantic_core import PydanticCustomError

from recruitment_portal.core.config import settings
from recruitment_portal.schemas.base import StoredModel
from recruitment_portal.schemas.enums import Gender
from recruitment_portal.services.eligibility import assess_national_id

PHONE_PATTERN = re.compile(r"^01[0125][0-9]{8}$")
# the portal's long-standing address rule, looser than EmailStr
EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
MIN_ADDRESS_LENGTH = 10


class RegistrationForm(BaseModel):
    """Raw registration fields as typed by the applicant.

    Pass ``context={"as_of": date}`` to validate eligibility against a fixed
    day; today is used otherwise. Password confirmation is compared by the
    account service so that it is reported even when the password itself is
    rejected.
    """

    model_config = ConfigDict(validate_default=True)

    full_name: str = ""
    national_id: str = ""
    address: str = ""
    phone: str = ""
    email: str = ""
    password: str = ""

    @field_validator("*", mode="before")
    @classmethod
    def none_as_empty(cls, value):
        return "" if value is None else value

    @field_validator("full_name")
    @classmethod
    def check_full_name(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise PydanticCustomError("full_name", "Full name is required")
        if len(value.split()) < 2:
            raise PydanticCustomError("full_name", "Please enter your full name (first and last name)")
        return value

    @field_validator("national_id")
    @classmethod
    def check_national_id(cls, value: str, info: ValidationInfo) -> str:
        value = value.strip()
        context = info.context or {}
        result = assess_national_id(
            value,
            context.get("as_of") or date.today(),
            min_age=context.get("min_age"),
            max_age=context.get("max_age"),
        )
        if not result.eligible:
            raise PydanticCustomError("national_id", "; ".join(result.reasons))
        return value

    @field_validator("address")
    @classmethod
    def check_address(cls, value: str) -> str:
        value = value.strip()
        if len(value) < MIN_ADDRESS_LENGTH:
            raise PydanticCustomError("address", "Address must be at least 10 characters")
        return value

    @field_validator("phone")
    @classmethod
    def check_phone(cls, value: str) -> str:
        value = value.strip()
        if not PHONE_PATTERN.match(value):
            raise PydanticCustomError("phone", "Please enter a valid Egyptian mobile number")
        return value

    @field_validator("email")
    @classmethod
    def check_email(cls, value: str) -> str:
        value = value.strip()
        if not EMAIL_PATTERN.match(value):
            raise PydanticCustomError("email", "Please enter a valid email address")
        return value

    @field_validator("password")
    @classmethod
    def check_password(cls, value: str) -> str:
        if len(value) < settings.PASSWORD_MIN_LENGTH:
            raise PydanticCustomError(
                "password",
                "Password must be at least {min_length} characters",
                {"min_length": settings.PASSWORD_MIN_LENGTH},
            )
        return value


class User(StoredModel):
    id: str
    full_name: str
    national_id: str
    gender: Gender
    governorate: str
    date_of_birth: str
    address: str
    phone: str
    email: str
    password: str
    created_at: datetime
