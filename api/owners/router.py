"""
Owner API endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query, status

from core.pagination import PageParams, page_params

from . import schemas, service

router = APIRouter()


@router.get("/owners")
async def list_owners(page: PageParams = Depends(page_params)) -> dict:
    """
    One page of owners (each with its pets) plus the total owner count.
    """
    return await service.list_owners(page)


@router.get("/owners/top")
async def top_owners() -> dict:
    return await service.top_owners()


@router.get("/owners/top-by-species")
async def top_owners_by_species(species: str = Query(..., max_length=100)) -> dict:
    return await service.top_owners_by_species(species)


@router.get("/owners/heaviest-groups")
async def heaviest_groups() -> dict:
    return await service.heaviest_groups()


@router.get("/owners/{owner_id}")
async def get_owner(owner_id: int) -> dict:
    return await service.get_owner(owner_id)


@router.get("/owners/{owner_id}/with-pets")
async def get_owner_with_pets(owner_id: int) -> dict:
    return await service.get_owner_with_pets(owner_id)


@router.post("/owners", status_code=status.HTTP_201_CREATED)
async def create_owner(request: schemas.CreateOwnerRequest) -> dict:
    return await service.create_owner(request)


@router.patch("/owners/{owner_id}")
async def update_owner(owner_id: int, request: schemas.UpdateOwnerRequest) -> dict:
    return await service.update_owner(owner_id, request)


@router.delete("/owners/{owner_id}")
async def delete_owner(owner_id: int) -> dict:
    """
    Delete an owner that has no pets left (409 otherwise).
    """
    return await service.delete_owner(owner_id)


@router.delete("/owners/{owner_id}/with-pets")
async def delete_owner_with_pets(owner_id: int) -> dict:
    return await service.delete_owner_with_pets(owner_id)
