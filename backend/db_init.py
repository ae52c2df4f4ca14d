from __future__ import annotations

from sqlalchemy import text as sql_text

from backend.db import get_engine


TIMELINE_TABLE = "timeline_items"

ID_COLUMN_BY_DIALECT = {
    "sqlite": "id INTEGER PRIMARY KEY AUTOINCREMENT",
    "postgresql": "id SERIAL PRIMARY KEY",
}


async def init_db():
    engine = get_engine()
    id_column = ID_COLUMN_BY_DIALECT.get(engine.dialect.name, ID_COLUMN_BY_DIALECT["postgresql"])
    async with engine.begin() as conn:
        await conn.execute(
            sql_text(
                f"""
                CREATE TABLE IF NOT EXISTS {TIMELINE_TABLE} (
                    {id_column},
                    group_name TEXT NOT NULL,
                    name TEXT NOT NULL,
                    start_date TEXT NOT NULL,
                    end_date TEXT
                )
                """
            )
        )
        await conn.execute(
            sql_text(
                f"CREATE INDEX IF NOT EXISTS idx_{TIMELINE_TABLE}_group ON {TIMELINE_TABLE} (group_name)"
            )
        )
