"""
Owner business logic.

Plain deletion refuses owners that still have pets (every pet keeps an
owner); `delete_owner_with_pets` removes the owner and its pets together.
"""

from __future__ import annotations

import logging
from collections import defaultdict
from typing import Any

import asyncpg
from fastapi import HTTPException, status

from core import aggregation
from core.errors import internal_errors
from core.pagination import PageParams, page_response
from pets import repository as pet_repository
from pets.schemas import pet_to_dict

from . import repository, schemas

logger = logging.getLogger(__name__)


def _owner_not_found(owner_id: int) -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Owner {owner_id} not found.")


def _owner_has_pets(owner_id: int, pet_count: int) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_409_CONFLICT,
        detail=f"Owner {owner_id} still has {pet_count} pet(s). Delete them with the owner or reassign them first.",
    )


@internal_errors("Failed to list owners.")
async def list_owners(page: PageParams) -> dict[str, Any]:
    rows = await repository.list_owners(limit=page.limit, offset=page.start)
    total_count = await repository.count_owners()

    pets_by_owner: dict[int, list[dict[str, Any]]] = defaultdict(list)
    for pet in await pet_repository.list_pets_for_owners([int(row["id"]) for row in rows]):
        pets_by_owner[int(pet["owner_id"])].append(pet_to_dict(pet))

    owners = []
    for row in rows:
        owner = schemas.owner_to_dict(row)
        owner["pets"] = pets_by_owner.get(owner["id"], [])
        owners.append(owner)

    return page_response("owners", owners, total_count=total_count, page=page)


@internal_errors("Failed to load owner.")
async def get_owner(owner_id: int) -> dict[str, Any]:
    row = await repository.get_owner(owner_id)
    if row is None:
        raise _owner_not_found(owner_id)
    return schemas.owner_to_dict(row)


@internal_errors("Failed to load owner with pets.")
async def get_owner_with_pets(owner_id: int) -> dict[str, Any]:
    row = await repository.get_owner(owner_id)
    if row is None:
        raise _owner_not_found(owner_id)

    owner = schemas.owner_to_dict(row)
    owner["pets"] = [pet_to_dict(pet) for pet in await pet_repository.list_pets_for_owners([owner_id])]
    return owner


@internal_errors("Failed to create owner.")
async def create_owner(payload: schemas.CreateOwnerRequest) -> dict[str, Any]:
    row = await repository.create_owner(
        last_name=payload.last_name,
        first_name=payload.first_name,
        email=payload.email,
        phone_number=payload.phone_number,
    )
    logger.info("owner_created owner_id=%s", row["id"])
    return schemas.owner_to_dict(row)


@internal_errors("Failed to update owner.")
async def update_owner(owner_id: int, payload: schemas.UpdateOwnerRequest) -> dict[str, Any]:
    row = await repository.update_owner(
        owner_id,
        last_name=payload.last_name,
        first_name=payload.first_name,
        email=payload.email,
        phone_number=payload.phone_number,
    )
    if row is None:
        raise _owner_not_found(owner_id)
    logger.info("owner_updated owner_id=%s", owner_id)
    return schemas.owner_to_dict(row)


@internal_errors("Failed to delete owner.")
async def delete_owner(owner_id: int) -> dict[str, Any]:
    if not await repository.owner_exists(owner_id):
        raise _owner_not_found(owner_id)

    pet_count = await pet_repository.count_pets_for_owner(owner_id)
    if pet_count > 0:
        raise _owner_has_pets(owner_id, pet_count)

    try:
        deleted = await repository.delete_owner(owner_id)
    except asyncpg.ForeignKeyViolationError as exc:
        # A pet was attached between the count and the delete.
        raise _owner_has_pets(owner_id, await pet_repository.count_pets_for_owner(owner_id)) from exc

    if not deleted:
        raise _owner_not_found(owner_id)
    logger.info("owner_deleted owner_id=%s", owner_id)
    return {"ok": True, "owner_id": owner_id}


@internal_errors("Failed to delete owner and pets.")
async def delete_owner_with_pets(owner_id: int) -> dict[str, Any]:
    if not await repository.owner_exists(owner_id):
        raise _owner_not_found(owner_id)

    deleted, pets_deleted = await repository.delete_owner_with_pets(owner_id)
    if not deleted:
        raise _owner_not_found(owner_id)
    logger.info("owner_deleted_with_pets owner_id=%s pets_deleted=%s", owner_id, pets_deleted)
    return {"ok": True, "owner_id": owner_id, "pets_deleted": pets_deleted}


@internal_errors("Failed to find the owners with the most pets.")
async def top_owners() -> dict[str, Any]:
    owners = await repository.list_all_owners()
    pets = await pet_repository.list_all_pets()
    return {"owners": aggregation.top_owners_by_count(owners, pets)}


@internal_errors("Failed to find the top owners for this species.")
async def top_owners_by_species(species: str) -> dict[str, Any]:
    species = (species or "").strip()
    if not species:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="species must not be empty.")

    owners = await repository.list_all_owners()
    pets = await pet_repository.list_all_pets()
    return {
        "species": species,
        "owners": aggregation.top_owners_by_species(owners, pets, species),
    }


@internal_errors("Failed to find the heaviest pet groups.")
async def heaviest_groups() -> dict[str, Any]:
    owners = await repository.list_all_owners()
    pets = await pet_repository.list_all_pets()
    return {"owners": aggregation.heaviest_owner_groups(owners, pets)}
