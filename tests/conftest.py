import asyncio
from datetime import datetime, timedelta, timezone

import pytest

from gulfjobs.sources import DataSource, DataSourceError


class FakeSource(DataSource):
    """In-memory stand-in for the hosted backend."""

    def __init__(self, rows=None, *, fail_fetch=False, fail_insert=False, delay=0.0):
        super().__init__("fake")
        self.rows = list(rows or [])
        self.fail_fetch = fail_fetch
        self.fail_insert = fail_insert
        self.delay = delay
        self.fetch_calls = 0
        self.inserted = []

    async def fetch_jobs(self, *, order_by_posted=True):
        self.fetch_calls += 1
        if self.delay:
            await asyncio.sleep(self.delay)
        if self.fail_fetch:
            raise DataSourceError("relation unavailable")
        return [dict(row) for row in self.rows]

    async def fetch_job(self, job_id):
        if self.fail_fetch:
            raise DataSourceError("relation unavailable")
        for row in self.rows:
            if str(row["id"]) == job_id:
                return dict(row)
        return None

    async def insert_application(self, record):
        if self.delay:
            await asyncio.sleep(self.delay)
        if self.fail_insert:
            raise DataSourceError("insert rejected")
        self.inserted.append(dict(record))
        return {**record, "id": len(self.inserted)}


def make_job_row(index, **overrides):
    row = {
        "id": f"job-{index}",
        "title": f"Job {index}",
        "company": f"Company {index}",
        "country": "UAE",
        "city": "Dubai",
        "category": "Driver",
        "experience": "2 years",
        "type": "Full-time",
        "salary": "3000",
        "currency": "AED",
        "positions": 2,
        "deadline": "2026-12-31",
        "description": "Visa provided.",
        "requirements": {"items": ["Valid passport"]},
        "benefits": {"items": ["Accommodation", "Transport"]},
        "posted_at": (datetime(2026, 10, 1, tzinfo=timezone.utc) - timedelta(days=index)).isoformat(),
    }
    row.update(overrides)
    return row


@pytest.fixture
def job_rows():
    """Ten postings, newest first."""
    return [make_job_row(i) for i in range(1, 11)]


@pytest.fixture
def fake_source(job_rows):
    return FakeSource(job_rows)


@pytest.fixture
def source_factory():
    return FakeSource


@pytest.fixture
def job_factory():
    return make_job_row
