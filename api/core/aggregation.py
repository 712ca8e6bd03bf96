"""
Statistics over already-fetched rows.

Every function is tie-inclusive: all rows at the extremal value come back,
never a single representative. Inputs are plain row dicts as returned by
`core.db.fetch_all`.

Pet rows need: id, name, species, weight, date_of_birth, owner_id.
Owner rows need: id, first_name, last_name.
"""

from __future__ import annotations

import math
from collections import Counter, defaultdict
from typing import Any, Iterable

Row = dict[str, Any]


def full_name(first_name: str, last_name: str) -> str:
    return f"{first_name} {last_name}"


def _owner_name(owner: Row) -> str:
    return full_name(str(owner["first_name"]), str(owner["last_name"]))


def _pets_by_owner(pets: Iterable[Row]) -> dict[int, list[Row]]:
    grouped: dict[int, list[Row]] = defaultdict(list)
    for pet in pets:
        grouped[int(pet["owner_id"])].append(pet)
    return grouped


def oldest(pets: list[Row]) -> list[Row]:
    """
    Pets born on the earliest date of birth. Empty input gives [].
    """
    if not pets:
        return []
    earliest = min(pet["date_of_birth"] for pet in pets)
    return [pet for pet in pets if pet["date_of_birth"] == earliest]


def most_common_species(pets: list[Row]) -> list[Row] | None:
    """
    Species (case-sensitive, as stored) with the highest pet count.

    Returns None when there are no pets at all.
    """
    if not pets:
        return None
    counts = Counter(str(pet["species"]) for pet in pets)
    top = max(counts.values())
    return [
        {"species": species, "count": count}
        for species, count in counts.most_common()
        if count == top
    ]


def heaviest_pets(pets: list[Row]) -> list[Row] | None:
    """
    Pets at the maximum weight, with their owner's id and full name.

    Rows must carry `owner_first_name` and `owner_last_name`. Returns None
    when there are no pets at all.
    """
    if not pets:
        return None
    max_weight = max(float(pet["weight"]) for pet in pets)
    return [
        {
            "pet_id": int(pet["id"]),
            "name": str(pet["name"]),
            "species": str(pet["species"]),
            "weight": float(pet["weight"]),
            "owner_id": int(pet["owner_id"]),
            "owner_full_name": full_name(str(pet["owner_first_name"]), str(pet["owner_last_name"])),
        }
        for pet in pets
        if float(pet["weight"]) == max_weight
    ]


def _top_by(owners: list[Row], values: dict[int, Any], key: str) -> list[Row]:
    if not owners:
        return []
    scored = [
        {"owner_id": int(owner["id"]), "full_name": _owner_name(owner), key: values[int(owner["id"])]}
        for owner in owners
    ]
    best = max(item[key] for item in scored)
    return [item for item in scored if item[key] == best]


def top_owners_by_count(owners: list[Row], pets: list[Row]) -> list[Row]:
    """
    Owners with the most pets. Owners without pets count as 0 and still
    take part, so if nobody owns anything every owner is returned.
    """
    grouped = _pets_by_owner(pets)
    counts = {int(owner["id"]): len(grouped.get(int(owner["id"]), [])) for owner in owners}
    return _top_by(owners, counts, "count")


def top_owners_by_species(owners: list[Row], pets: list[Row], species: str) -> list[Row]:
    """
    Owners with the most pets of `species` (case-insensitive).

    Owners with no matching pet are never returned, even when 0 is the
    maximum. Raises ValueError for an empty or blank species.
    """
    if not species or not species.strip():
        raise ValueError("species must not be empty.")

    wanted = species.lower()
    matching = [pet for pet in pets if str(pet["species"]).lower() == wanted]
    grouped = _pets_by_owner(matching)
    counts = {int(owner["id"]): len(grouped.get(int(owner["id"]), [])) for owner in owners}
    return [item for item in _top_by(owners, counts, "count") if item["count"] > 0]


def heaviest_owner_groups(owners: list[Row], pets: list[Row]) -> list[Row]:
    """
    Owners whose pets weigh the most in total (0.0 for owners without pets).
    """
    grouped = _pets_by_owner(pets)
    totals = {
        int(owner["id"]): math.fsum(float(pet["weight"]) for pet in grouped.get(int(owner["id"]), []))
        for owner in owners
    }
    return _top_by(owners, totals, "total_weight")
