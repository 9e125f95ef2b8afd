from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional


class DataSourceError(Exception):
    """Raised when the hosted backend cannot serve a read or accept a write."""


class JobNotFoundError(DataSourceError):
    """Raised when a single-row lookup matches nothing."""

    def __init__(self, job_id: str) -> None:
        super().__init__(f"Job not found: {job_id}")
        self.job_id = job_id


class DataSource(ABC):
    """Row-query / row-insert interface to the backend holding jobs and applications."""

    def __init__(self, source_name: str) -> None:
        self.source_name = source_name

    async def connect(self) -> None:
        """Open long-lived resources. Most adapters have none."""

    async def disconnect(self) -> None:
        """Release whatever ``connect`` opened."""

    @abstractmethod
    async def fetch_jobs(self, *, order_by_posted: bool = True) -> List[Dict[str, Any]]:
        """Return every job posting row, newest first when ``order_by_posted`` is set."""

    @abstractmethod
    async def fetch_job(self, job_id: str) -> Optional[Dict[str, Any]]:
        """Return the row whose ``id`` equals ``job_id``, or None."""

    @abstractmethod
    async def insert_application(self, record: Dict[str, Any]) -> Dict[str, Any]:
        """Insert one application row and return what the backend stored."""
