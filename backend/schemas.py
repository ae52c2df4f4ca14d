from __future__ import annotations

from datetime import date
from typing import Optional

from pydantic import BaseModel, field_validator, model_validator


class TimelineItemCreate(BaseModel):
    group: str
    name: str
    start_date: date
    end_date: Optional[date] = None

    @field_validator("group", "name")
    @classmethod
    def _not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("must not be blank")
        return value

    @model_validator(mode="after")
    def _end_after_start(self):
        if self.end_date is not None and self.end_date < self.start_date:
            raise ValueError("end_date cannot be earlier than start_date")
        return self


class TimelineItemResponse(BaseModel):
    id: int
    group: str
    name: str
    start_date: date
    end_date: Optional[date] = None
