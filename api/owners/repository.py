"""
Owner persistence (raw SQL).
"""

from __future__ import annotations

from typing import Any

from core import db


async def list_owners(*, limit: int, offset: int) -> list[dict[str, Any]]:
    return await db.fetch_all(
        """
        SELECT id, last_name, first_name, email, phone_number
        FROM owners
        ORDER BY id
        LIMIT $1
        OFFSET $2
        """,
        limit,
        offset,
    )


async def count_owners() -> int:
    return await db.fetch_count("SELECT count(*) AS n FROM owners")


async def list_all_owners() -> list[dict[str, Any]]:
    return await db.fetch_all(
        """
        SELECT id, last_name, first_name, email, phone_number
        FROM owners
        ORDER BY id
        """
    )


async def list_owners_by_ids(owner_ids: list[int]) -> list[dict[str, Any]]:
    if not owner_ids:
        return []
    return await db.fetch_all(
        """
        SELECT id, last_name, first_name, email, phone_number
        FROM owners
        WHERE id = ANY($1::bigint[])
        ORDER BY id
        """,
        owner_ids,
    )


async def get_owner(owner_id: int) -> dict[str, Any] | None:
    return await db.fetch_one(
        """
        SELECT id, last_name, first_name, email, phone_number
        FROM owners
        WHERE id = $1
        """,
        owner_id,
    )


async def owner_exists(owner_id: int) -> bool:
    return await db.fetch_exists(
        """
        SELECT 1 AS ok
        FROM owners
        WHERE id = $1
        LIMIT 1
        """,
        owner_id,
    )


async def create_owner(
    *,
    last_name: str,
    first_name: str,
    email: str,
    phone_number: str,
) -> dict[str, Any]:
    row = await db.fetch_one(
        """
        INSERT INTO owners (last_name, first_name, email, phone_number)
        VALUES ($1, $2, $3, $4)
        RETURNING id, last_name, first_name, email, phone_number
        """,
        last_name,
        first_name,
        email,
        phone_number,
    )
    if row is None:
        raise RuntimeError("Failed to insert owner.")
    return row


async def update_owner(
    owner_id: int,
    *,
    last_name: str | None = None,
    first_name: str | None = None,
    email: str | None = None,
    phone_number: str | None = None,
) -> dict[str, Any] | None:
    """
    Apply the provided fields; None leaves a column as it is.
    Returns the updated row, or None when the owner does not exist.
    """
    return await db.fetch_one(
        """
        UPDATE owners
        SET last_name = COALESCE($2, last_name),
            first_name = COALESCE($3, first_name),
            email = COALESCE($4, email),
            phone_number = COALESCE($5, phone_number),
            updated_at = now()
        WHERE id = $1
        RETURNING id, last_name, first_name, email, phone_number
        """,
        owner_id,
        last_name,
        first_name,
        email,
        phone_number,
    )


async def delete_owner(owner_id: int) -> bool:
    return await db.fetch_exists(
        """
        DELETE FROM owners
        WHERE id = $1
        RETURNING id
        """,
        owner_id,
    )


async def delete_owner_with_pets(owner_id: int) -> tuple[bool, int]:
    """
    Delete an owner and all of its pets in a single transaction.

    Returns (owner_deleted, pets_deleted).
    """
    async with db.transaction() as conn:
        pet_rows = await conn.fetch(
            """
            DELETE FROM pets
            WHERE owner_id = $1
            RETURNING id
            """,
            owner_id,
        )
        owner_row = await conn.fetchrow(
            """
            DELETE FROM owners
            WHERE id = $1
            RETURNING id
            """,
            owner_id,
        )
        return owner_row is not None, len(pet_rows)
