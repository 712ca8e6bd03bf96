"""
Pet persistence (raw SQL).
"""

from __future__ import annotations

from datetime import date
from typing import Any

from core import db


def _species_filter(species: str | None) -> str | None:
    species = (species or "").strip()
    return species or None


async def list_pets(
    *,
    limit: int,
    offset: int,
    species: str | None = None,
) -> list[dict[str, Any]]:
    """
    One page of pets, optionally restricted to a species (case-insensitive).
    """
    return await db.fetch_all(
        """
        SELECT id, name, date_of_birth, species, breed, color, weight, owner_id
        FROM pets
        WHERE ($1::text IS NULL OR lower(species) = lower($1::text))
        ORDER BY id
        LIMIT $2
        OFFSET $3
        """,
        _species_filter(species),
        limit,
        offset,
    )


async def count_pets(*, species: str | None = None) -> int:
    return await db.fetch_count(
        """
        SELECT count(*) AS n
        FROM pets
        WHERE ($1::text IS NULL OR lower(species) = lower($1::text))
        """,
        _species_filter(species),
    )


async def list_all_pets() -> list[dict[str, Any]]:
    return await db.fetch_all(
        """
        SELECT id, name, date_of_birth, species, breed, color, weight, owner_id
        FROM pets
        ORDER BY id
        """
    )


async def list_all_pets_with_owner_names() -> list[dict[str, Any]]:
    return await db.fetch_all(
        """
        SELECT
          p.id, p.name, p.date_of_birth, p.species, p.breed, p.color, p.weight, p.owner_id,
          o.first_name AS owner_first_name,
          o.last_name AS owner_last_name
        FROM pets p
        JOIN owners o ON o.id = p.owner_id
        ORDER BY p.id
        """
    )


async def list_pets_for_owners(owner_ids: list[int]) -> list[dict[str, Any]]:
    if not owner_ids:
        return []
    return await db.fetch_all(
        """
        SELECT id, name, date_of_birth, species, breed, color, weight, owner_id
        FROM pets
        WHERE owner_id = ANY($1::bigint[])
        ORDER BY id
        """,
        owner_ids,
    )


async def count_pets_for_owner(owner_id: int) -> int:
    return await db.fetch_count(
        """
        SELECT count(*) AS n
        FROM pets
        WHERE owner_id = $1
        """,
        owner_id,
    )


async def get_pet(pet_id: int) -> dict[str, Any] | None:
    return await db.fetch_one(
        """
        SELECT id, name, date_of_birth, species, breed, color, weight, owner_id
        FROM pets
        WHERE id = $1
        """,
        pet_id,
    )


async def create_pet(
    *,
    name: str,
    date_of_birth: date,
    species: str,
    breed: str,
    color: str,
    weight: float,
    owner_id: int,
) -> dict[str, Any]:
    row = await db.fetch_one(
        """
        INSERT INTO pets (name, date_of_birth, species, breed, color, weight, owner_id)
        VALUES ($1, $2, $3, $4, $5, $6, $7)
        RETURNING id, name, date_of_birth, species, breed, color, weight, owner_id
        """,
        name,
        date_of_birth,
        species,
        breed,
        color,
        weight,
        owner_id,
    )
    if row is None:
        raise RuntimeError("Failed to insert pet.")
    return row


async def update_pet(
    pet_id: int,
    *,
    name: str | None = None,
    date_of_birth: date | None = None,
    species: str | None = None,
    breed: str | None = None,
    color: str | None = None,
    weight: float | None = None,
    owner_id: int | None = None,
) -> dict[str, Any] | None:
    """
    Apply the provided fields; None leaves a column as it is.
    Returns the updated row, or None when the pet does not exist.
    """
    return await db.fetch_one(
        """
        UPDATE pets
        SET name = COALESCE($2, name),
            date_of_birth = COALESCE($3, date_of_birth),
            species = COALESCE($4, species),
            breed = COALESCE($5, breed),
            color = COALESCE($6, color),
            weight = COALESCE($7, weight),
            owner_id = COALESCE($8, owner_id),
            updated_at = now()
        WHERE id = $1
        RETURNING id, name, date_of_birth, species, breed, color, weight, owner_id
        """,
        pet_id,
        name,
        date_of_birth,
        species,
        breed,
        color,
        weight,
        owner_id,
    )


async def delete_pet(pet_id: int) -> bool:
    return await db.fetch_exists(
        """
        DELETE FROM pets
        WHERE id = $1
        RETURNING id
        """,
        pet_id,
    )
