from datetime import datetime
from uuid import UUID

from email_validator import EmailNotValidError, validate_email
from pydantic import AwareDatetime, BaseModel, ConfigDict, field_validator


class NewUser(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    id: UUID
    email: str
    username: str
    created_at: AwareDatetime

    @field_validator("email")
    @classmethod
    def email_is_valid_address(cls, value: str) -> str:
        # Stored exactly as given; the normalized form is only used for checking.
        try:
            validate_email(value, check_deliverability=False)
        except EmailNotValidError as exc:
            raise ValueError(f"'{value}' is not a valid email address: {exc}") from exc
        return value

    @field_validator("username")
    @classmethod
    def username_is_single_token(cls, value: str) -> str:
        if not value:
            raise ValueError("username cannot be empty")
        if any(c.isspace() for c in value):
            raise ValueError(f"username cannot contain whitespace: '{value}'")
        return value


class UserRecord(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    email: str
    username: str
    created_at: datetime
