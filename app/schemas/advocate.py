"""
Advocate schemas - shapes for reading and creating directory records.

JSON field names are camelCase (firstName, yearsOfExperience, ...) because
that is the contract the directory UI consumes.
"""

import re
from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    SerializerFunctionWrapHandler,
    field_validator,
    model_serializer,
)
from pydantic.alias_generators import to_camel

PHONE_PATTERN = re.compile(r"^\+?[\d\s\-\(\)]{10,15}$")


class AdvocateBase(BaseModel):
    """Common advocate fields."""

    first_name: str = Field(..., min_length=1, max_length=50)
    last_name: str = Field(..., min_length=1, max_length=50)
    city: str = Field(..., min_length=1, max_length=50)
    degree: str = Field(..., min_length=1, max_length=100)
    specialties: List[str] = Field(default_factory=list)
    years_of_experience: int = Field(..., ge=0, le=50)

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        str_strip_whitespace=True,
    )

    @field_validator("specialties", mode="before")
    @classmethod
    def _specialties_not_null(cls, value):
        return [] if value is None else value

    @field_validator("specialties")
    @classmethod
    def _check_specialties(cls, value: List[str]) -> List[str]:
        for item in value:
            if len(item) > 50:
                raise ValueError("specialty must be at most 50 characters")
        return value


class AdvocateCreate(AdvocateBase):
    """
    Schema for inserting an advocate.

    The phone number is accepted in common display formats and stored
    as its digits.
    """

    phone_number: str

    @field_validator("phone_number", mode="before")
    @classmethod
    def _phone_as_text(cls, value):
        return str(value) if isinstance(value, int) else value

    @field_validator("phone_number")
    @classmethod
    def _check_phone(cls, value: str) -> str:
        if not PHONE_PATTERN.match(value):
            raise ValueError("phone number must be 10-15 digits")
        return value

    def phone_digits(self) -> int:
        return int(re.sub(r"\D", "", self.phone_number))


class AdvocateRead(AdvocateBase):
    """
    Schema for returning an advocate.

    id and created_at are absent for fallback entries that were never stored.
    """

    id: Optional[int] = None
    phone_number: str
    created_at: Optional[datetime] = None

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )

    @field_validator("phone_number", mode="before")
    @classmethod
    def _phone_as_text(cls, value):
        # Stored as bigint; treated as an opaque digit string everywhere else
        return str(value) if isinstance(value, int) else value

    @model_serializer(mode="wrap")
    def _omit_unstored_fields(self, handler: SerializerFunctionWrapHandler) -> Dict[str, Any]:
        data = handler(self)
        if self.id is None:
            data.pop("id", None)
        if self.created_at is None:
            data.pop("created_at", None)
            data.pop("createdAt", None)
        return data
