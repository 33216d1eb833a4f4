from pydantic import BaseModel, ConfigDict, field_validator
from pydantic_core import PydanticCustomError

from recruitment_portal.services.eligibility import check_login_identity


class Session(BaseModel):
    """The authenticated user of one client, or nobody."""

    model_config = ConfigDict(frozen=True)

    user_id: str | None = None

    @property
    def is_authenticated(self) -> bool:
        return bool(self.user_id)


class LoginForm(BaseModel):
    model_config = ConfigDict(validate_default=True)

    national_id: str = ""
    password: str = ""

    @field_validator("*", mode="before")
    @classmethod
    def none_as_empty(cls, value):
        return "" if value is None else value

    @field_validator("national_id")
    @classmethod
    def check_national_id(cls, value: str) -> str:
        value = value.strip()
        problems = check_login_identity(value)
        if problems:
            raise PydanticCustomError("national_id", problems[0])
        return value

    @field_validator("password")
    @classmethod
    def check_password(cls, value: str) -> str:
        if not value:
            raise PydanticCustomError("password", "Password is required")
        return value
