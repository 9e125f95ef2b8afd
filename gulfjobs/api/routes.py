from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Request

from gulfjobs.api.schemas import (
    ApplicationRequest,
    ApplicationResponse,
    FiltersResponse,
    JobResponse,
    JobsPageResponse,
)
from gulfjobs.services.applications import ApplicationSubmitter
from gulfjobs.services.job_store import JobStore
from gulfjobs.services.models import ALL, ApplicationForm, FilterCriteria
from gulfjobs.services.pagination import paginate
from gulfjobs.services.search import filter_jobs, filter_options
from gulfjobs.sources import DataSource, JobNotFoundError
from gulfjobs.utils.config import settings

router = APIRouter(prefix="/api", tags=["jobs"])


def get_source(request: Request) -> DataSource:
    return request.app.state.source


def get_job_store(source: DataSource = Depends(get_source)) -> JobStore:
    return JobStore(source)


def get_submitter(source: DataSource = Depends(get_source)) -> ApplicationSubmitter:
    return ApplicationSubmitter(source)


@router.get("/health")
async def health_check() -> dict:
    """Basic health endpoint for uptime monitoring."""

    return {"status": "ok"}


@router.get("/jobs", response_model=JobsPageResponse)
async def list_jobs(
    search: str = Query(default=""),
    country: str = Query(default=ALL),
    category: str = Query(default=ALL),
    page: int = Query(default=1),
    page_size: Optional[int] = Query(default=None, ge=1, le=100),
    store: JobStore = Depends(get_job_store),
) -> JobsPageResponse:
    """Return one page of jobs matching the search term and selectors."""

    listing = await store.load_jobs()
    criteria = FilterCriteria(term=search, country=country, category=category)
    filtered = filter_jobs(listing.jobs, criteria)
    current = paginate(filtered, page_size or settings.page_size, page)
    options = filter_options(listing.jobs)

    return JobsPageResponse(
        total=current.total,
        page=current.page,
        page_size=current.page_size,
        total_pages=current.total_pages,
        has_prev=current.has_prev,
        has_next=current.has_next,
        jobs=[JobResponse.model_validate(job.model_dump()) for job in current.items],
        countries=options["countries"],
        categories=options["categories"],
        error=listing.error,
    )


@router.get("/jobs/{job_id}", response_model=JobResponse)
async def get_job(job_id: str, store: JobStore = Depends(get_job_store)) -> JobResponse:
    """Return a single job by identifier."""

    try:
        job = await store.load_job(job_id)
    except JobNotFoundError:
        raise HTTPException(status_code=404, detail="Job not found")
    return JobResponse.model_validate(job.model_dump())


@router.get("/filters", response_model=FiltersResponse)
async def get_filters(store: JobStore = Depends(get_job_store)) -> FiltersResponse:
    """Return the countries and categories present in the current postings."""

    listing = await store.load_jobs()
    return FiltersResponse(**filter_options(listing.jobs), error=listing.error)


@router.post("/applications", response_model=ApplicationResponse, status_code=201)
async def submit_application(
    payload: ApplicationRequest,
    submitter: ApplicationSubmitter = Depends(get_submitter),
) -> ApplicationResponse:
    """Validate and store one application. Resubmitting creates another record."""

    result = await submitter.submit(ApplicationForm(**payload.model_dump()))

    if result.errors:
        raise HTTPException(status_code=422, detail={"errors": result.errors})
    if not result.ok:
        raise HTTPException(status_code=502, detail=result.message)

    return ApplicationResponse(status=result.state.value, message=result.message)
