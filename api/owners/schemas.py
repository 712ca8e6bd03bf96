"""
Pydantic schemas for owner endpoints.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class CreateOwnerRequest(BaseModel):
    last_name: str = Field(..., min_length=1, max_length=200)
    first_name: str = Field(..., min_length=1, max_length=200)
    email: str = Field(..., min_length=3, max_length=320)
    phone_number: str = Field(..., min_length=1, max_length=50)


class UpdateOwnerRequest(BaseModel):
    """
    Partial update: a field left out (or sent as null) keeps its value.
    """

    last_name: str | None = Field(default=None, min_length=1, max_length=200)
    first_name: str | None = Field(default=None, min_length=1, max_length=200)
    email: str | None = Field(default=None, min_length=3, max_length=320)
    phone_number: str | None = Field(default=None, min_length=1, max_length=50)


def owner_to_dict(row: dict[str, Any]) -> dict[str, Any]:
    return {
        "id": int(row["id"]),
        "last_name": str(row["last_name"]),
        "first_name": str(row["first_name"]),
        "email": str(row["email"]),
        "phone_number": str(row["phone_number"]),
    }
