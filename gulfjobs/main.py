"""Application entrypoint and lightweight CLI."""

import argparse
import asyncio
import json

import uvicorn

from gulfjobs.api.main import app  # noqa: F401  (exposed for uvicorn)
from gulfjobs.services.job_store import JobStore
from gulfjobs.services.models import ALL, FilterCriteria
from gulfjobs.services.pagination import paginate
from gulfjobs.services.search import filter_jobs
from gulfjobs.sources.factory import build_source
from gulfjobs.utils.config import settings


async def _list_jobs_once(criteria: FilterCriteria, page: int) -> dict:
    source = build_source(settings)
    await source.connect()
    try:
        listing = await JobStore(source).load_jobs()
    finally:
        await source.disconnect()

    current = paginate(filter_jobs(listing.jobs, criteria), settings.page_size, page)
    return {
        "error": listing.error,
        "total": current.total,
        "page": current.page,
        "total_pages": current.total_pages,
        "jobs": [job.model_dump(mode="json") for job in current.items],
    }


def main() -> None:
    parser = argparse.ArgumentParser(description="Gulf jobs board API")
    parser.add_argument(
        "--list-jobs",
        action="store_true",
        help="Print one page of filtered jobs as JSON then exit",
    )
    parser.add_argument("--search", default="", help="Free-text term matched against title, company and city")
    parser.add_argument("--country", default=ALL)
    parser.add_argument("--category", default=ALL)
    parser.add_argument("--page", type=int, default=1)

    args = parser.parse_args()

    if args.list_jobs:
        criteria = FilterCriteria(term=args.search, country=args.country, category=args.category)
        summary = asyncio.run(_list_jobs_once(criteria, args.page))
        print(json.dumps(summary, indent=2))  # noqa: T201
        return

    uvicorn.run(
        "gulfjobs.api.main:app",
        host="0.0.0.0",
        port=settings.api_port,
        reload=settings.environment != "production",
    )


if __name__ == "__main__":
    main()
