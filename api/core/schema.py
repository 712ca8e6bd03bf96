"""
Table definitions, applied idempotently on startup.

Pets reference owners through `owner_id`; `ON DELETE RESTRICT` keeps the
"every pet has an owner" rule even if a delete skips the service checks.
"""

from __future__ import annotations

import logging

from . import db

logger = logging.getLogger(__name__)

SCHEMA_STATEMENTS: tuple[str, ...] = (
    """
    CREATE TABLE IF NOT EXISTS owners (
      id bigserial PRIMARY KEY,
      last_name text NOT NULL,
      first_name text NOT NULL,
      email text NOT NULL,
      phone_number text NOT NULL,
      created_at timestamptz NOT NULL DEFAULT now(),
      updated_at timestamptz NOT NULL DEFAULT now()
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS pets (
      id bigserial PRIMARY KEY,
      name text NOT NULL,
      date_of_birth date NOT NULL,
      species text NOT NULL,
      breed text NOT NULL,
      color text NOT NULL,
      weight double precision NOT NULL CHECK (weight >= 0),
      owner_id bigint NOT NULL REFERENCES owners (id) ON DELETE RESTRICT,
      created_at timestamptz NOT NULL DEFAULT now(),
      updated_at timestamptz NOT NULL DEFAULT now()
    )
    """,
    "CREATE INDEX IF NOT EXISTS pets_owner_id_idx ON pets (owner_id)",
    "CREATE INDEX IF NOT EXISTS pets_species_lower_idx ON pets (lower(species))",
)


async def ensure_schema() -> None:
    for statement in SCHEMA_STATEMENTS:
        await db.execute(statement)
    logger.info("schema_ready tables=owners,pets")
