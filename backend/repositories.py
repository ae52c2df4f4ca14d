from __future__ import annotations

from datetime import date

from sqlalchemy import text as sql_text

from backend.db import get_sessionmaker
from backend.db_init import TIMELINE_TABLE

SELECT_COLUMNS = "id, group_name, name, start_date, end_date"


def _iso(value):
    if value is None:
        return None
    if isinstance(value, date):
        return value.isoformat()
    return str(value)


def _normalize_item_row(row) -> dict:
    if not row:
        return {}
    payload = dict(row)
    return {
        "id": int(payload["id"]),
        "group": payload.get("group_name"),
        "name": payload.get("name"),
        "start_date": _iso(payload.get("start_date")),
        "end_date": _iso(payload.get("end_date")),
    }


async def list_items() -> list[dict]:
    session_factory = get_sessionmaker()
    async with session_factory() as session:
        rows = (await session.execute(
            sql_text(f"SELECT {SELECT_COLUMNS} FROM {TIMELINE_TABLE} ORDER BY id")
        )).mappings().all()
    return [_normalize_item_row(row) for row in rows]


async def create_item(record: dict) -> dict:
    session_factory = get_sessionmaker()
    async with session_factory() as session:
        row = (await session.execute(
            sql_text(
                f"INSERT INTO {TIMELINE_TABLE} (group_name, name, start_date, end_date) "
                "VALUES (:group_name, :name, :start_date, :end_date) "
                f"RETURNING {SELECT_COLUMNS}"
            ),
            {
                "group_name": record["group"],
                "name": record["name"],
                "start_date": _iso(record["start_date"]),
                "end_date": _iso(record.get("end_date")),
            },
        )).mappings().fetchone()
        await session.commit()
    return _normalize_item_row(row)
