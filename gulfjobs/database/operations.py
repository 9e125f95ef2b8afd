import ssl
from datetime import datetime
from typing import Any, Dict, List, Optional

from dateutil import parser
from sqlalchemy import select
from sqlalchemy.engine.url import make_url
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine
from sqlalchemy.orm import sessionmaker

from gulfjobs.database.models import ApplicationRow, Base, JobPostingRow
from gulfjobs.sources import DataSource, DataSourceError
from gulfjobs.utils.config import settings
from gulfjobs.utils.logger import setup_logger

logger = setup_logger(__name__)


class Database(DataSource):
    """SQL-backed data source for self-hosted deployments and local work."""

    def __init__(self, database_url: Optional[str] = None) -> None:
        super().__init__("database")
        self.database_url = database_url or settings.database_url
        self.engine = None
        self.session_maker: sessionmaker[AsyncSession] | None = None

    async def connect(self) -> None:
        """Initialize database connection and ensure tables exist."""

        connect_args = {}
        url = make_url(self.database_url)

        driver = url.drivername
        if driver in {"postgres", "postgresql"}:
            driver = "postgresql+asyncpg"
        elif driver == "sqlite":
            driver = "sqlite+aiosqlite"

        query = dict(url.query)
        sslmode = query.pop("sslmode", None)
        sslrootcert = query.pop("sslrootcert", None)
        ssl_no_verify = query.pop("ssl_no_verify", None)

        if sslmode:
            sslmode = sslmode.lower()

        if ssl_no_verify:
            ssl_no_verify = ssl_no_verify.lower() in {"1", "true", "yes"}

        if sslmode == "disable":
            connect_args["ssl"] = False
        elif sslmode in {"require", "verify-ca", "verify-full"}:
            if ssl_no_verify:
                context = ssl._create_unverified_context()
            else:
                context = ssl.create_default_context(cafile=sslrootcert) if sslrootcert else ssl.create_default_context()
                context.check_hostname = sslmode == "verify-full"
            connect_args["ssl"] = context

        async_url = url.set(drivername=driver, query=query)
        self.engine = create_async_engine(
            async_url.render_as_string(hide_password=False),
            echo=False,
            connect_args=connect_args,
        )
        self.session_maker = sessionmaker(self.engine, class_=AsyncSession, expire_on_commit=False)

        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

        logger.info("Database connected and tables ensured")

    async def disconnect(self) -> None:
        """Cleanly close database connections."""

        if self.engine:
            await self.engine.dispose()
            self.engine = None
            self.session_maker = None
            logger.info("Database disconnected")

    def _sessions(self) -> sessionmaker:
        if not self.session_maker:
            raise DataSourceError("Database session maker not initialized")
        return self.session_maker

    @staticmethod
    def _row_to_dict(row: Any) -> Dict[str, Any]:
        return {column.name: getattr(row, column.name) for column in row.__table__.columns}

    @staticmethod
    def _to_datetime(value: Any) -> Optional[datetime]:
        if value is None or isinstance(value, datetime):
            return value
        return parser.isoparse(str(value))

    async def fetch_jobs(self, *, order_by_posted: bool = True) -> List[Dict[str, Any]]:
        """Return every job row, newest first."""

        stmt = select(JobPostingRow)
        if order_by_posted:
            stmt = stmt.order_by(JobPostingRow.posted_at.desc().nulls_last())

        try:
            async with self._sessions()() as session:
                result = await session.execute(stmt)
                rows = result.scalars().all()
        except SQLAlchemyError as exc:
            raise DataSourceError(f"Query on {JobPostingRow.__tablename__} failed: {exc}") from exc

        logger.info("[%s] Fetched %d job rows", self.source_name, len(rows))
        return [self._row_to_dict(row) for row in rows]

    async def fetch_job(self, job_id: str) -> Optional[Dict[str, Any]]:
        """Fetch a single job by identifier."""

        try:
            async with self._sessions()() as session:
                row = await session.get(JobPostingRow, job_id)
        except SQLAlchemyError as exc:
            raise DataSourceError(f"Lookup of job {job_id} failed: {exc}") from exc

        return self._row_to_dict(row) if row else None

    async def insert_application(self, record: Dict[str, Any]) -> Dict[str, Any]:
        """Insert one application row; identical payloads are stored as distinct rows."""

        values = dict(record)
        values["created_at"] = self._to_datetime(values.get("created_at"))
        if values["created_at"] is None:
            values.pop("created_at")

        try:
            async with self._sessions()() as session:
                row = ApplicationRow(**values)
                session.add(row)
                await session.commit()
                await session.refresh(row)
        except SQLAlchemyError as exc:
            raise DataSourceError(f"Insert into {ApplicationRow.__tablename__} failed: {exc}") from exc

        logger.info("[%s] Inserted application %s for job %s", self.source_name, row.id, row.job_id)
        return self._row_to_dict(row)

    async def save_jobs(self, jobs: List[Dict[str, Any]]) -> Dict[str, int]:
        """Upsert job postings by id. Used by the seeding script."""

        stats = {"new": 0, "updated": 0}

        async with self._sessions()() as session:
            for job_data in jobs:
                values = dict(job_data)
                if "posted_at" in values:
                    values["posted_at"] = self._to_datetime(values["posted_at"])
                if isinstance(values.get("deadline"), str):
                    values["deadline"] = parser.parse(values["deadline"]).date()

                existing = await session.get(JobPostingRow, values["id"])
                if existing:
                    for key, value in values.items():
                        setattr(existing, key, value)
                    stats["updated"] += 1
                else:
                    session.add(JobPostingRow(**values))
                    stats["new"] += 1

            await session.commit()

        return stats
