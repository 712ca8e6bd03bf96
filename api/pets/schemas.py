"""
Pydantic schemas for pet endpoints.
"""

from __future__ import annotations

from datetime import date
from typing import Any

from pydantic import BaseModel, Field


class CreatePetRequest(BaseModel):
    name: str = Field(..., min_length=1, max_length=200)
    date_of_birth: date
    species: str = Field(..., min_length=1, max_length=100)
    breed: str = Field(..., min_length=1, max_length=100)
    color: str = Field(..., min_length=1, max_length=100)
    weight: float = Field(..., ge=0.0, allow_inf_nan=False)
    owner_id: int = Field(..., ge=1)


class UpdatePetRequest(BaseModel):
    """
    Partial update: a field left out (or sent as null) keeps its value.
    Setting `owner_id` moves the pet to another existing owner.
    """

    name: str | None = Field(default=None, min_length=1, max_length=200)
    date_of_birth: date | None = None
    species: str | None = Field(default=None, min_length=1, max_length=100)
    breed: str | None = Field(default=None, min_length=1, max_length=100)
    color: str | None = Field(default=None, min_length=1, max_length=100)
    weight: float | None = Field(default=None, ge=0.0, allow_inf_nan=False)
    owner_id: int | None = Field(default=None, ge=1)


def pet_to_dict(row: dict[str, Any]) -> dict[str, Any]:
    return {
        "id": int(row["id"]),
        "name": str(row["name"]),
        "date_of_birth": row["date_of_birth"],
        "species": str(row["species"]),
        "breed": str(row["breed"]),
        "color": str(row["color"]),
        "weight": float(row["weight"]),
        "owner_id": int(row["owner_id"]),
    }
