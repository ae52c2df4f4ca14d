from __future__ import annotations

import logging
from typing import List

from fastapi import APIRouter, HTTPException, status
from fastapi.encoders import jsonable_encoder

from backend import repositories
from backend.schemas import TimelineItemCreate, TimelineItemResponse

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/api/v1/timeline", response_model=List[TimelineItemResponse])
async def list_timeline_items():
    try:
        items = await repositories.list_items()
    except Exception as exc:
        logger.exception("Failed to list timeline items: %s", exc)
        raise HTTPException(status_code=500, detail="Internal error")
    return jsonable_encoder(items)


@router.post(
    "/api/v1/timeline",
    response_model=TimelineItemResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_timeline_item(payload: TimelineItemCreate):
    try:
        record = await repositories.create_item(payload.model_dump())
    except Exception as exc:
        logger.exception("Failed to create timeline item: %s", exc)
        raise HTTPException(status_code=500, detail="Internal error")
    logger.info("Created timeline item %s in group %r", record["id"], record["group"])
    return jsonable_encoder(record)
