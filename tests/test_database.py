import pytest
from datetime import date, datetime, timedelta, timezone

from gulfjobs.database.models import ApplicationRow, JobPostingRow
from gulfjobs.database.operations import Database
from gulfjobs.services.job_store import JobStore
from gulfjobs.sources import DataSourceError


def _job(index, **overrides):
    job = {
        "id": f"job-{index}",
        "title": f"Driver {index}",
        "company": "Al Futtaim",
        "country": "UAE",
        "city": "Dubai",
        "category": "Driver",
        "salary": "3000",
        "currency": "AED",
        "positions": 3,
        "deadline": date(2026, 12, 31),
        "requirements": {"items": ["Valid passport"]},
        "benefits": None,
        "posted_at": datetime(2026, 10, 1, tzinfo=timezone.utc) - timedelta(days=index),
    }
    job.update(overrides)
    return job


@pytest.fixture
def database_url(tmp_path):
    return f"sqlite+aiosqlite:///{tmp_path / 'jobs.db'}"


@pytest.mark.asyncio
async def test_database_connection(database_url):
    """Test database connection and disconnection"""
    db = Database(database_url)

    await db.connect()
    assert db.engine is not None
    assert db.session_maker is not None

    await db.disconnect()
    assert db.engine is None


@pytest.mark.asyncio
async def test_fetch_jobs_newest_first(database_url):
    db = Database(database_url)
    await db.connect()
    try:
        stats = await db.save_jobs([_job(3), _job(1), _job(2)])
        assert stats == {"new": 3, "updated": 0}

        rows = await db.fetch_jobs()
        assert [row["id"] for row in rows] == ["job-1", "job-2", "job-3"]
    finally:
        await db.disconnect()


@pytest.mark.asyncio
async def test_save_jobs_updates_existing(database_url):
    db = Database(database_url)
    await db.connect()
    try:
        await db.save_jobs([_job(1)])
        stats = await db.save_jobs([_job(1, salary="3500")])
        assert stats == {"new": 0, "updated": 1}

        row = await db.fetch_job("job-1")
        assert row["salary"] == "3500"
    finally:
        await db.disconnect()


@pytest.mark.asyncio
async def test_fetch_job_missing(database_url):
    db = Database(database_url)
    await db.connect()
    try:
        assert await db.fetch_job("job-404") is None
    finally:
        await db.disconnect()


@pytest.mark.asyncio
async def test_job_store_over_database(database_url):
    db = Database(database_url)
    await db.connect()
    try:
        await db.save_jobs([_job(1), _job(2)])
        listing = await JobStore(db).load_jobs()
    finally:
        await db.disconnect()

    assert listing.error is None
    assert [job.id for job in listing.jobs] == ["job-1", "job-2"]
    assert listing.jobs[0].requirements == ["Valid passport"]
    assert listing.jobs[0].benefits == []


@pytest.mark.asyncio
async def test_insert_application_keeps_duplicates(database_url):
    db = Database(database_url)
    await db.connect()
    record = {
        "job_id": "job-1",
        "name": "Ram",
        "email": "ram@example.com",
        "phone": "+9771234567890",
        "message": "",
        "created_at": datetime.now(timezone.utc).isoformat(),
    }
    try:
        first = await db.insert_application(record)
        second = await db.insert_application(record)
    finally:
        await db.disconnect()

    assert first["id"] != second["id"]
    assert first["job_id"] == second["job_id"] == "job-1"


@pytest.mark.asyncio
async def test_queries_before_connect_fail():
    db = Database("sqlite+aiosqlite:///:memory:")

    with pytest.raises(DataSourceError):
        await db.fetch_jobs()

    listing = await JobStore(db).load_jobs()
    assert listing.jobs == []
    assert listing.error is not None


def test_job_model_fields():
    """Test Job model has required fields"""
    job = JobPostingRow(
        id="test_id",
        title="Test Job",
        company="Test Company",
        country="UAE",
        category="Driver",
    )

    assert job.id == "test_id"
    assert job.title == "Test Job"
    assert job.company == "Test Company"
    assert ApplicationRow.__tablename__ == "applications"


def test_import_database_modules():
    """Test that database modules can be imported"""
    from gulfjobs.database.models import JobPostingRow, Base
    from gulfjobs.database.operations import Database

    assert JobPostingRow is not None
    assert Base is not None
    assert Database is not None
