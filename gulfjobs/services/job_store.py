"""Loads job postings from the injected data source, once per activation."""

from __future__ import annotations

import asyncio
from typing import Optional

from gulfjobs.services.models import JobListing, JobPosting
from gulfjobs.sources import DataSource, JobNotFoundError
from gulfjobs.utils.config import settings
from gulfjobs.utils.logger import setup_logger

logger = setup_logger(__name__)

LOAD_ERROR = "Failed to load jobs. Please try again later."


class JobStore:
    """Read side of the job board. Holds no state between calls."""

    def __init__(self, source: DataSource, timeout: Optional[float] = None) -> None:
        self.source = source
        self.timeout = timeout or settings.request_timeout_seconds

    async def load_jobs(self) -> JobListing:
        """Fetch every posting, or an empty listing carrying the user-visible error."""

        try:
            rows = await asyncio.wait_for(
                self.source.fetch_jobs(order_by_posted=True), timeout=self.timeout
            )
            jobs = [JobPosting.model_validate(row) for row in rows]
        except Exception as exc:  # pylint: disable=broad-except
            logger.error("[%s] Error fetching jobs: %s", self.source.source_name, exc, exc_info=True)
            return JobListing(jobs=[], error=LOAD_ERROR)

        logger.info("[%s] Loaded %d jobs", self.source.source_name, len(jobs))
        return JobListing(jobs=jobs)

    async def load_job(self, job_id: str) -> JobPosting:
        """Fetch one posting by id. Any failure surfaces as ``JobNotFoundError``."""

        try:
            row = await asyncio.wait_for(self.source.fetch_job(job_id), timeout=self.timeout)
            if row is None:
                raise JobNotFoundError(job_id)
            return JobPosting.model_validate(row)
        except JobNotFoundError:
            logger.info("[%s] Job %s not found", self.source.source_name, job_id)
            raise
        except Exception as exc:  # pylint: disable=broad-except
            logger.error("[%s] Error fetching job %s: %s", self.source.source_name, job_id, exc, exc_info=True)
            raise JobNotFoundError(job_id) from exc
