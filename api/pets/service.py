"""
Pet business logic.

Scope:
- CRUD with owner existence checks before any write
- paged listing with species filter
- statistics (oldest, most common species, heaviest)
- "with owner" lookup enriched with translated breed/color/species
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any

import asyncpg
import httpx
from fastapi import HTTPException, status

from core import aggregation, settings, translation
from core.errors import internal_errors
from core.pagination import PageParams, page_response
from owners import repository as owner_repository
from owners.schemas import owner_to_dict

from . import repository, schemas

logger = logging.getLogger(__name__)


def _pet_not_found(pet_id: int) -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Pet {pet_id} not found.")


def _owner_not_found(owner_id: int) -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Owner {owner_id} not found.")


@internal_errors("Failed to list pets.")
async def list_pets(page: PageParams, *, species: str | None = None) -> dict[str, Any]:
    rows = await repository.list_pets(limit=page.limit, offset=page.start, species=species)
    total_count = await repository.count_pets(species=species)

    owner_ids = sorted({int(row["owner_id"]) for row in rows})
    owners = {
        int(owner["id"]): owner_to_dict(owner)
        for owner in await owner_repository.list_owners_by_ids(owner_ids)
    }

    pets = []
    for row in rows:
        pet = schemas.pet_to_dict(row)
        pet["owner"] = owners.get(pet["owner_id"])
        pets.append(pet)

    return page_response(
        "pets",
        pets,
        total_count=total_count,
        page=page,
    )


@internal_errors("Failed to load pet.")
async def get_pet(pet_id: int) -> dict[str, Any]:
    row = await repository.get_pet(pet_id)
    if row is None:
        raise _pet_not_found(pet_id)
    return schemas.pet_to_dict(row)


async def _translate_or_original(text: str, *, field: str) -> str:
    try:
        return await translation.translate_text(
            text,
            source_lang=settings.translation_source_lang(),
            target_lang=settings.translation_target_lang(),
            base_url=settings.translation_base_url(),
            timeout_s=settings.translation_timeout_s(),
        )
    except (translation.TranslationError, httpx.HTTPError) as exc:
        logger.warning("translation_failed field=%s error=%s", field, exc)
        return text


@internal_errors("Failed to load pet with its owner.")
async def get_pet_with_owner(pet_id: int) -> dict[str, Any]:
    row = await repository.get_pet(pet_id)
    if row is None:
        raise _pet_not_found(pet_id)

    owner = await owner_repository.get_owner(int(row["owner_id"]))
    if owner is None:
        raise _owner_not_found(int(row["owner_id"]))

    breed, color, species = await asyncio.gather(
        _translate_or_original(str(row["breed"]), field="breed"),
        _translate_or_original(str(row["color"]).lower(), field="color"),
        _translate_or_original(str(row["species"]), field="species"),
    )

    pet = schemas.pet_to_dict(row)
    pet["owner"] = owner_to_dict(owner)
    pet["breed_translated"] = breed
    pet["color_translated"] = color
    pet["species_translated"] = species
    return pet


@internal_errors("Failed to create pet.")
async def create_pet(payload: schemas.CreatePetRequest) -> dict[str, Any]:
    if not await owner_repository.owner_exists(payload.owner_id):
        raise _owner_not_found(payload.owner_id)

    try:
        row = await repository.create_pet(
            name=payload.name,
            date_of_birth=payload.date_of_birth,
            species=payload.species,
            breed=payload.breed,
            color=payload.color,
            weight=payload.weight,
            owner_id=payload.owner_id,
        )
    except asyncpg.ForeignKeyViolationError as exc:
        # Owner removed between the check and the insert.
        raise _owner_not_found(payload.owner_id) from exc

    logger.info("pet_created pet_id=%s owner_id=%s", row["id"], row["owner_id"])
    return schemas.pet_to_dict(row)


@internal_errors("Failed to update pet.")
async def update_pet(pet_id: int, payload: schemas.UpdatePetRequest) -> dict[str, Any]:
    if await repository.get_pet(pet_id) is None:
        raise _pet_not_found(pet_id)

    if payload.owner_id is not None and not await owner_repository.owner_exists(payload.owner_id):
        raise _owner_not_found(payload.owner_id)

    try:
        row = await repository.update_pet(
            pet_id,
            name=payload.name,
            date_of_birth=payload.date_of_birth,
            species=payload.species,
            breed=payload.breed,
            color=payload.color,
            weight=payload.weight,
            owner_id=payload.owner_id,
        )
    except asyncpg.ForeignKeyViolationError as exc:
        raise _owner_not_found(payload.owner_id) from exc

    if row is None:
        raise _pet_not_found(pet_id)

    logger.info("pet_updated pet_id=%s owner_id=%s", row["id"], row["owner_id"])
    return schemas.pet_to_dict(row)


@internal_errors("Failed to delete pet.")
async def delete_pet(pet_id: int) -> dict[str, Any]:
    deleted = await repository.delete_pet(pet_id)
    if not deleted:
        raise _pet_not_found(pet_id)
    logger.info("pet_deleted pet_id=%s", pet_id)
    return {"ok": True, "pet_id": pet_id}


@internal_errors("Failed to find the oldest pets.")
async def oldest_pets() -> dict[str, Any]:
    rows = await repository.list_all_pets()
    return {"pets": [schemas.pet_to_dict(row) for row in aggregation.oldest(rows)]}


@internal_errors("Failed to find the most common species.")
async def most_common_species() -> dict[str, Any]:
    rows = await repository.list_all_pets()
    return {"species": aggregation.most_common_species(rows)}


@internal_errors("Failed to find the heaviest pets.")
async def heaviest_pets() -> dict[str, Any]:
    rows = await repository.list_all_pets_with_owner_names()
    return {"pets": aggregation.heaviest_pets(rows)}
