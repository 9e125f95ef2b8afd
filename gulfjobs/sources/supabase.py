import asyncio
from typing import Any, Dict, List, Optional

import aiohttp

from gulfjobs.sources import DataSource, DataSourceError
from gulfjobs.utils.config import settings
from gulfjobs.utils.logger import setup_logger

logger = setup_logger(__name__)


class SupabaseSource(DataSource):
    """Reads and writes rows through a Supabase project's PostgREST endpoint."""

    REST_PATH = "/rest/v1"

    def __init__(
        self,
        base_url: Optional[str] = None,
        api_key: Optional[str] = None,
        *,
        jobs_table: Optional[str] = None,
        applications_table: Optional[str] = None,
        timeout: Optional[float] = None,
    ) -> None:
        super().__init__("supabase")
        self.base_url = (base_url or settings.supabase_url or "").rstrip("/")
        self.api_key = api_key or settings.supabase_key or ""
        self.jobs_table = jobs_table or settings.jobs_table
        self.applications_table = applications_table or settings.applications_table
        self.timeout = timeout or settings.request_timeout_seconds

    def _url(self, table: str) -> str:
        if not self.base_url:
            raise DataSourceError("Supabase URL is not configured")
        return f"{self.base_url}{self.REST_PATH}/{table}"

    def _headers(self, **extra: str) -> Dict[str, str]:
        headers = {
            "apikey": self.api_key,
            "Authorization": f"Bearer {self.api_key}",
            "Accept": "application/json",
        }
        headers.update(extra)
        return headers

    async def _request(
        self,
        method: str,
        table: str,
        *,
        params: Optional[Dict[str, str]] = None,
        json: Optional[Dict[str, Any]] = None,
        headers: Optional[Dict[str, str]] = None,
    ) -> Any:
        url = self._url(table)
        timeout = aiohttp.ClientTimeout(total=self.timeout)

        try:
            async with aiohttp.ClientSession(timeout=timeout) as session:
                async with session.request(
                    method, url, params=params, json=json, headers=headers or self._headers()
                ) as response:
                    if response.status >= 400:
                        body = await response.text()
                        logger.error("[%s] HTTP %s on %s %s: %s", self.source_name, response.status, method, table, body[:200])
                        raise DataSourceError(f"{method} {table} failed with HTTP {response.status}")
                    return await response.json(content_type=None)
        except (aiohttp.ClientError, asyncio.TimeoutError, ValueError) as exc:
            raise DataSourceError(f"{method} {table} failed: {exc}") from exc

    async def fetch_jobs(self, *, order_by_posted: bool = True) -> List[Dict[str, Any]]:
        params = {"select": "*"}
        if order_by_posted:
            params["order"] = "posted_at.desc.nullslast"

        rows = await self._request("GET", self.jobs_table, params=params)
        if not isinstance(rows, list):
            raise DataSourceError(f"Unexpected payload from {self.jobs_table}: {type(rows).__name__}")

        logger.info("[%s] Fetched %d job rows", self.source_name, len(rows))
        return rows

    async def fetch_job(self, job_id: str) -> Optional[Dict[str, Any]]:
        rows = await self._request(
            "GET", self.jobs_table, params={"select": "*", "id": f"eq.{job_id}", "limit": "1"}
        )
        if not isinstance(rows, list):
            raise DataSourceError(f"Unexpected payload from {self.jobs_table}: {type(rows).__name__}")
        if not rows:
            return None
        return rows[0]

    async def insert_application(self, record: Dict[str, Any]) -> Dict[str, Any]:
        rows = await self._request(
            "POST",
            self.applications_table,
            json=record,
            headers=self._headers(**{"Content-Type": "application/json", "Prefer": "return=representation"}),
        )
        logger.info("[%s] Inserted application for job %s", self.source_name, record.get("job_id"))
        if isinstance(rows, list) and rows:
            return rows[0]
        return dict(record)
