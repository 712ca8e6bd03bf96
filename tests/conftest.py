"""Shared fixtures: an in-memory stand-in for the owner and pet repositories."""

from __future__ import annotations

import copy
from datetime import date
from typing import Any

import pytest

from owners import repository as owner_repository
from pets import repository as pet_repository


class FakeStore:
    """Mirrors the repository functions over two dicts keyed by id."""

    def __init__(self) -> None:
        self.owners: dict[int, dict[str, Any]] = {}
        self.pets: dict[int, dict[str, Any]] = {}
        self._next_owner_id = 1
        self._next_pet_id = 1

    # -- seeding helpers ----------------------------------------------------

    def add_owner(self, first_name: str = "Ada", last_name: str = "Lovelace", **extra: Any) -> dict[str, Any]:
        row = {
            "id": self._next_owner_id,
            "first_name": first_name,
            "last_name": last_name,
            "email": extra.get("email", f"{first_name.lower()}@example.com"),
            "phone_number": extra.get("phone_number", "0600000000"),
        }
        self.owners[row["id"]] = row
        self._next_owner_id += 1
        return copy.deepcopy(row)

    def add_pet(
        self,
        owner_id: int,
        *,
        name: str = "Rex",
        species: str = "Dog",
        weight: float = 10.0,
        date_of_birth: date = date(2020, 1, 1),
        breed: str = "Labrador",
        color: str = "Black",
    ) -> dict[str, Any]:
        row = {
            "id": self._next_pet_id,
            "name": name,
            "date_of_birth": date_of_birth,
            "species": species,
            "breed": breed,
            "color": color,
            "weight": weight,
            "owner_id": owner_id,
        }
        self.pets[row["id"]] = row
        self._next_pet_id += 1
        return copy.deepcopy(row)

    # -- owner repository ---------------------------------------------------

    async def list_owners(self, *, limit: int, offset: int) -> list[dict[str, Any]]:
        rows = [self.owners[k] for k in sorted(self.owners)]
        return copy.deepcopy(rows[offset : offset + limit])

    async def count_owners(self) -> int:
        return len(self.owners)

    async def list_all_owners(self) -> list[dict[str, Any]]:
        return copy.deepcopy([self.owners[k] for k in sorted(self.owners)])

    async def list_owners_by_ids(self, owner_ids: list[int]) -> list[dict[str, Any]]:
        wanted = set(owner_ids)
        return copy.deepcopy([self.owners[k] for k in sorted(self.owners) if k in wanted])

    async def get_owner(self, owner_id: int) -> dict[str, Any] | None:
        row = self.owners.get(owner_id)
        return copy.deepcopy(row) if row is not None else None

    async def owner_exists(self, owner_id: int) -> bool:
        return owner_id in self.owners

    async def create_owner(self, **fields: Any) -> dict[str, Any]:
        return self.add_owner(**fields)

    async def update_owner(self, owner_id: int, **fields: Any) -> dict[str, Any] | None:
        row = self.owners.get(owner_id)
        if row is None:
            return None
        for key, value in fields.items():
            if value is not None:
                row[key] = value
        return copy.deepcopy(row)

    async def delete_owner(self, owner_id: int) -> bool:
        return self.owners.pop(owner_id, None) is not None

    async def delete_owner_with_pets(self, owner_id: int) -> tuple[bool, int]:
        pet_ids = [pid for pid, pet in self.pets.items() if pet["owner_id"] == owner_id]
        for pid in pet_ids:
            del self.pets[pid]
        return self.owners.pop(owner_id, None) is not None, len(pet_ids)

    # -- pet repository -----------------------------------------------------

    def _filtered(self, species: str | None) -> list[dict[str, Any]]:
        rows = [self.pets[k] for k in sorted(self.pets)]
        wanted = (species or "").strip().lower()
        if wanted:
            rows = [row for row in rows if row["species"].lower() == wanted]
        return rows

    async def list_pets(self, *, limit: int, offset: int, species: str | None = None) -> list[dict[str, Any]]:
        return copy.deepcopy(self._filtered(species)[offset : offset + limit])

    async def count_pets(self, *, species: str | None = None) -> int:
        return len(self._filtered(species))

    async def list_all_pets(self) -> list[dict[str, Any]]:
        return copy.deepcopy(self._filtered(None))

    async def list_all_pets_with_owner_names(self) -> list[dict[str, Any]]:
        rows = []
        for pet in self._filtered(None):
            owner = self.owners[pet["owner_id"]]
            rows.append(
                {
                    **pet,
                    "owner_first_name": owner["first_name"],
                    "owner_last_name": owner["last_name"],
                }
            )
        return copy.deepcopy(rows)

    async def list_pets_for_owners(self, owner_ids: list[int]) -> list[dict[str, Any]]:
        wanted = set(owner_ids)
        return copy.deepcopy([pet for pet in self._filtered(None) if pet["owner_id"] in wanted])

    async def count_pets_for_owner(self, owner_id: int) -> int:
        return sum(1 for pet in self.pets.values() if pet["owner_id"] == owner_id)

    async def get_pet(self, pet_id: int) -> dict[str, Any] | None:
        row = self.pets.get(pet_id)
        return copy.deepcopy(row) if row is not None else None

    async def create_pet(self, *, owner_id: int, **fields: Any) -> dict[str, Any]:
        return self.add_pet(owner_id, **fields)

    async def update_pet(self, pet_id: int, **fields: Any) -> dict[str, Any] | None:
        row = self.pets.get(pet_id)
        if row is None:
            return None
        for key, value in fields.items():
            if value is not None:
                row[key] = value
        return copy.deepcopy(row)

    async def delete_pet(self, pet_id: int) -> bool:
        return self.pets.pop(pet_id, None) is not None


OWNER_FUNCTIONS = (
    "list_owners",
    "count_owners",
    "list_all_owners",
    "list_owners_by_ids",
    "get_owner",
    "owner_exists",
    "create_owner",
    "update_owner",
    "delete_owner",
    "delete_owner_with_pets",
)

PET_FUNCTIONS = (
    "list_pets",
    "count_pets",
    "list_all_pets",
    "list_all_pets_with_owner_names",
    "list_pets_for_owners",
    "count_pets_for_owner",
    "get_pet",
    "create_pet",
    "update_pet",
    "delete_pet",
)


@pytest.fixture
def store(monkeypatch) -> FakeStore:
    fake = FakeStore()
    for name in OWNER_FUNCTIONS:
        monkeypatch.setattr(owner_repository, name, getattr(fake, name))
    for name in PET_FUNCTIONS:
        monkeypatch.setattr(pet_repository, name, getattr(fake, name))
    return fake
