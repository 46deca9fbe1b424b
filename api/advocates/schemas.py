"""
Pydantic schemas for the advocates endpoint.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class Advocate(BaseModel):
    """
    Display shape of one directory entry, serialized with camelCase keys.
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    first_name: str = Field(..., alias="firstName")
    last_name: str = Field(..., alias="lastName")
    city: str
    degree: str
    specialties: list[str] = Field(default_factory=list)
    years_of_experience: str = Field(..., alias="yearsOfExperience")
    phone_number: str = Field(..., alias="phoneNumber")


class AdvocatesResponse(BaseModel):
    data: list[Advocate]


class ErrorResponse(BaseModel):
    error: str
