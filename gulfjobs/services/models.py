"""Domain types shared by the listing and application flows."""

from datetime import date, datetime, timezone
from enum import Enum
from typing import Any, Dict, List, Optional

from dateutil import parser
from pydantic import BaseModel, ConfigDict, Field, field_validator

ALL = "all"


def normalize_items(value: Any) -> List[str]:
    """Flatten ``{"items": [...]}``, a bare list or nothing into a list of strings."""

    if value is None:
        return []
    if isinstance(value, dict):
        value = value.get("items") or []
    if isinstance(value, str):
        return [value] if value.strip() else []
    return [str(item) for item in value if item is not None]


class JobPosting(BaseModel):
    """One employment opportunity as read from the data source."""

    model_config = ConfigDict(from_attributes=True, extra="ignore")

    id: str
    title: str = ""
    company: str = ""
    country: str = ""
    city: Optional[str] = None
    category: str = ""
    experience: str = ""
    type: str = ""
    salary: str = ""
    currency: str = ""
    positions: int = 0
    deadline: Optional[date] = None
    description: str = ""
    requirements: List[str] = Field(default_factory=list)
    benefits: List[str] = Field(default_factory=list)
    posted_at: Optional[datetime] = None

    @field_validator("id", mode="before")
    @classmethod
    def _stringify_id(cls, value: Any) -> Any:
        if value is None or isinstance(value, str):
            return value
        return str(value)

    @field_validator("salary", mode="before")
    @classmethod
    def _stringify_salary(cls, value: Any) -> Any:
        if value is None:
            return ""
        return value if isinstance(value, str) else str(value)

    @field_validator(
        "title", "company", "country", "category", "experience", "type", "currency", "description",
        mode="before",
    )
    @classmethod
    def _none_to_empty(cls, value: Any) -> Any:
        return "" if value is None else value

    @field_validator("city", mode="before")
    @classmethod
    def _blank_city(cls, value: Any) -> Any:
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @field_validator("positions", mode="before")
    @classmethod
    def _positions(cls, value: Any) -> Any:
        return 0 if value in (None, "") else value

    @field_validator("requirements", "benefits", mode="before")
    @classmethod
    def _items(cls, value: Any) -> List[str]:
        return normalize_items(value)

    @field_validator("deadline", mode="before")
    @classmethod
    def _deadline(cls, value: Any) -> Any:
        # Deadlines are typed by hand upstream; anything unparseable is shown as "no deadline".
        if value in (None, ""):
            return None
        if isinstance(value, datetime):
            return value.date()
        if isinstance(value, date):
            return value
        try:
            return parser.parse(str(value)).date()
        except (ValueError, OverflowError):
            return None


class JobListing(BaseModel):
    """Result of one listing load: the postings, or an empty list plus an error."""

    jobs: List[JobPosting] = Field(default_factory=list)
    error: Optional[str] = None

    @property
    def failed(self) -> bool:
        return self.error is not None


class FilterCriteria(BaseModel):
    term: str = ""
    country: str = ALL
    category: str = ALL


class Page(BaseModel):
    """One contiguous slice of a filtered sequence."""

    items: List[Any] = Field(default_factory=list)
    page: int = 1
    page_size: int
    total: int = 0
    total_pages: int = 1

    @property
    def has_prev(self) -> bool:
        return self.page > 1

    @property
    def has_next(self) -> bool:
        return self.page < self.total_pages


class ApplicationForm(BaseModel):
    """Raw form state as typed by the applicant."""

    name: str = ""
    email: str = ""
    phone: str = ""
    message: str = ""
    job_id: str = ""


class ApplicationSubmission(BaseModel):
    """A validated application, ready to be written to the sink."""

    job_id: str
    name: str
    email: str
    phone: str
    message: str = ""
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    @classmethod
    def from_form(cls, form: ApplicationForm) -> "ApplicationSubmission":
        return cls(
            job_id=form.job_id.strip(),
            name=form.name.strip(),
            email=form.email.strip(),
            phone=form.phone.strip(),
            message=form.message.strip(),
        )

    def to_record(self) -> Dict[str, Any]:
        return {
            "job_id": self.job_id,
            "name": self.name,
            "email": self.email,
            "phone": self.phone,
            "message": self.message,
            "created_at": self.created_at.isoformat(),
        }


class SubmissionState(str, Enum):
    IDLE = "idle"
    VALIDATING = "validating"
    SUBMITTING = "submitting"
    SUBMITTED = "submitted"
    IDLE_WITH_ERRORS = "idle_with_errors"


class SubmissionResult(BaseModel):
    state: SubmissionState
    errors: Dict[str, str] = Field(default_factory=dict)
    message: Optional[str] = None
    record: Optional[Dict[str, Any]] = None

    @property
    def ok(self) -> bool:
        return self.state == SubmissionState.SUBMITTED
