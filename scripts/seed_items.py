"""
Demo data script for the Solr indexer.

Creates a small `items` table and fills it with deterministic pseudo-random
rows, so the indexer can be exercised locally and in integration tests.
"""

from __future__ import annotations

import random
import sys
from typing import Optional

import typer

from solr_indexer.config import get_settings
from solr_indexer.infrastructure.db_factory import scoped_connection

app = typer.Typer(help="Create and seed a demo `items` table in Postgres.")

CREATE_TABLE_SQL = """
CREATE TABLE IF NOT EXISTS {table} (
    id BIGSERIAL PRIMARY KEY,
    sku TEXT NOT NULL,
    title TEXT NOT NULL,
    description TEXT,
    price NUMERIC(10, 2) NOT NULL
)
"""

_ADJECTIVES = ["Red", "Compact", "Heavy-duty", "Café", "Smart", "Vintage"]
_NOUNS = ["Widget", "Gadget", "Lamp", "Kettle", "Bracket", "Sprocket"]


def _generate_rows(rows: int, seed: int) -> list[tuple[str, str, Optional[str], str]]:
    rng = random.Random(seed)
    generated: list[tuple[str, str, Optional[str], str]] = []
    for i in range(rows):
        title = f"{rng.choice(_ADJECTIVES)} {rng.choice(_NOUNS)}"
        # some descriptions carry markup and NULLs to exercise XML escaping
        description = rng.choice(
            [None, f"{title} & accessories", f"<b>{title}</b> \"limited\" edition", "Ünïcödé ✓"]
        )
        price = f"{rng.uniform(1, 500):.2f}"
        generated.append((f"SKU-{i + 1:05d}", title, description, price))
    return generated


def _seed_items(
    dsn: str,
    user: Optional[str],
    password: Optional[str],
    rows: int,
    seed: int = 42,
    table: str = "items",
    truncate: bool = True,
) -> int:
    data = _generate_rows(rows, seed)
    with scoped_connection(dsn, user=user, password=password) as conn:
        with conn.cursor() as cur:
            cur.execute(CREATE_TABLE_SQL.format(table=table))
            if truncate:
                cur.execute(f"TRUNCATE TABLE {table} RESTART IDENTITY")
            cur.executemany(
                f"INSERT INTO {table} (sku, title, description, price) VALUES (%s, %s, %s, %s)",
                data,
            )
        conn.commit()
    return len(data)


@app.command()
def main(
    rows: int = typer.Option(
        100,
        "--rows",
        "-r",
        help="Number of rows to insert.",
    ),
    seed: int = typer.Option(
        42,
        "--seed",
        help="Deterministic RNG seed.",
    ),
    table: str = typer.Option(
        "items",
        "--table",
        "-t",
        help="Table to create and fill.",
    ),
    keep: bool = typer.Option(
        False,
        "--keep",
        help="Append to existing rows instead of truncating the table.",
    ),
) -> None:
    """
    Create the demo table (if missing) and insert `rows` generated items.
    """
    settings = get_settings()
    if not settings.source_dsn:
        typer.echo("SOURCE_DSN is not set.", err=True)
        raise typer.Exit(code=2)

    inserted = _seed_items(
        settings.source_dsn,
        settings.source_user or None,
        settings.source_password or None,
        rows=rows,
        seed=seed,
        table=table,
        truncate=not keep,
    )
    typer.echo(f"Inserted {inserted:,} rows into {table}.")


if __name__ == "__main__":
    try:
        app()
    except KeyboardInterrupt:
        typer.echo("Cancelled by user.", err=True)
        sys.exit(130)
