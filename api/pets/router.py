"""
Pet API endpoints.

Static paths (`/pets/oldest`, ...) are declared before `/pets/{pet_id}`.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query, status

from core.pagination import PageParams, page_params

from . import schemas, service

router = APIRouter()


@router.get("/pets")
async def list_pets(
    page: PageParams = Depends(page_params),
    species: str | None = Query(default=None, max_length=100),
) -> dict:
    """
    One page of pets plus `total_count` of all pets matching the filter.
    """
    return await service.list_pets(page, species=species)


@router.get("/pets/oldest")
async def oldest_pets() -> dict:
    return await service.oldest_pets()


@router.get("/pets/most-common-species")
async def most_common_species() -> dict:
    """
    `species` is null when there are no pets at all.
    """
    return await service.most_common_species()


@router.get("/pets/heaviest")
async def heaviest_pets() -> dict:
    """
    `pets` is null when there are no pets at all.
    """
    return await service.heaviest_pets()


@router.get("/pets/{pet_id}")
async def get_pet(pet_id: int) -> dict:
    return await service.get_pet(pet_id)


@router.get("/pets/{pet_id}/with-owner")
async def get_pet_with_owner(pet_id: int) -> dict:
    """
    Pet, its owner, and breed/color/species translated to the target language.
    """
    return await service.get_pet_with_owner(pet_id)


@router.post("/pets", status_code=status.HTTP_201_CREATED)
async def create_pet(request: schemas.CreatePetRequest) -> dict:
    return await service.create_pet(request)


@router.patch("/pets/{pet_id}")
async def update_pet(pet_id: int, request: schemas.UpdatePetRequest) -> dict:
    return await service.update_pet(pet_id, request)


@router.delete("/pets/{pet_id}")
async def delete_pet(pet_id: int) -> dict:
    return await service.delete_pet(pet_id)
