"""Shared test fixtures for pytest"""
from datetime import date

import pytest

from timeline.models import TimelineItem


@pytest.fixture
def today():
    return date(2024, 1, 20)


@pytest.fixture
def make_item():
    counter = {"id": 0}

    def _make(start_date, end_date=None, group="Careers", name=None, item_id=None):
        counter["id"] += 1
        return TimelineItem(
            id=item_id if item_id is not None else counter["id"],
            group=group,
            name=name or f"item-{counter['id']}",
            start_date=start_date,
            end_date=end_date,
        )

    return _make
