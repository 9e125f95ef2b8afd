from typing import List, Optional

from pydantic import BaseModel

from gulfjobs.services.models import JobPosting


class JobResponse(JobPosting):
    """Job representation returned via the public API."""


class JobsPageResponse(BaseModel):
    """One page of the filtered listing plus what the selectors need."""

    total: int
    page: int
    page_size: int
    total_pages: int
    has_prev: bool
    has_next: bool
    jobs: List[JobResponse]
    countries: List[str]
    categories: List[str]
    error: Optional[str] = None


class FiltersResponse(BaseModel):
    countries: List[str]
    categories: List[str]
    error: Optional[str] = None


class ApplicationRequest(BaseModel):
    name: str = ""
    email: str = ""
    phone: str = ""
    message: str = ""
    job_id: str = ""


class ApplicationResponse(BaseModel):
    status: str
    message: Optional[str] = None
