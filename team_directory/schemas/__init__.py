# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""Pydantic request/response schemas.

JSON field names are camelCase (``memberId``, ``firstName`` ...); the Python
attributes stay snake_case and map onto the ORM columns. Values are stored
exactly as sent, validators only accept or reject.
"""
from typing import Annotated, Optional

from email_validator import validate_email
from pydantic import AfterValidator, BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


def _check_email(v: str) -> str:
    # syntax only; the normalized form is discarded so the address round-trips
    validate_email(v, check_deliverability=False)
    return v


Email = Annotated[str, AfterValidator(_check_email)]


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class TeamMemberCreate(_CamelModel):
    member_id: str = Field(..., min_length=1, max_length=64, examples=["TM1"])
    first_name: str = Field(..., min_length=1, max_length=255, examples=["Ada"])
    last_name: str = Field(..., min_length=1, max_length=255, examples=["Lovelace"])
    email: Email = Field(..., max_length=320, examples=["ada@example.com"])


class TeamMemberUpdate(_CamelModel):
    """Full replacement of the mutable fields; a memberId in the body is ignored."""
    member_id: Optional[str] = None
    first_name: str = Field(..., min_length=1, max_length=255)
    last_name: str = Field(..., min_length=1, max_length=255)
    email: Email = Field(..., max_length=320)

    @field_validator("first_name", "last_name")
    @classmethod
    def not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("must not be blank")
        return v


class TeamMemberOut(_CamelModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)

    member_id: str
    first_name: str
    last_name: str
    email: str


class ErrorResponse(BaseModel):
    error: str
    detail: Optional[str] = None
