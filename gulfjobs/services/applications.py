"""Application form validation and the submit state machine."""

from __future__ import annotations

import asyncio
import re
from typing import Dict, Optional

from gulfjobs.services.models import (
    ApplicationForm,
    ApplicationSubmission,
    SubmissionResult,
    SubmissionState,
)
from gulfjobs.sources import DataSource
from gulfjobs.utils.config import settings
from gulfjobs.utils.logger import setup_logger

logger = setup_logger(__name__)

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
PHONE_PATTERN = re.compile(r"^\+?\d{7,15}$")
PHONE_SEPARATORS = re.compile(r"[\s\-()]")

SUBMITTED_MESSAGE = "Application submitted!"
SUBMIT_ERROR = "Failed to submit application."
BUSY_MESSAGE = "A submission is already in progress."


def validate_application(form: ApplicationForm) -> Dict[str, str]:
    """Return field -> message for every problem; empty when the form can be sent."""

    errors: Dict[str, str] = {}

    if not form.name.strip():
        errors["name"] = "Name is required."

    email = form.email.strip()
    if not email:
        errors["email"] = "Email is required."
    elif not EMAIL_PATTERN.match(email):
        errors["email"] = "Please enter a valid email address."

    phone = form.phone.strip()
    if not phone:
        errors["phone"] = "Phone number is required."
    elif not PHONE_PATTERN.match(PHONE_SEPARATORS.sub("", phone)):
        errors["phone"] = "Please enter a valid phone number."

    if not form.job_id.strip():
        errors["job_id"] = "Please select a job to apply for."

    return errors


class ApplicationSubmitter:
    """Drives one application form: Idle -> Validating -> Submitting -> Submitted | Idle-with-errors."""

    def __init__(self, sink: DataSource, timeout: Optional[float] = None) -> None:
        self.sink = sink
        self.timeout = timeout or settings.request_timeout_seconds
        self.state = SubmissionState.IDLE
        self.form = ApplicationForm()
        self.errors: Dict[str, str] = {}
        self.message: Optional[str] = None
        self._closed = False

    @property
    def is_submitting(self) -> bool:
        return self.state == SubmissionState.SUBMITTING

    def reset(self) -> None:
        """Acknowledge the last outcome and return to Idle, keeping the form."""

        self.state = SubmissionState.IDLE
        self.errors = {}
        self.message = None

    def close(self) -> None:
        """Stop listening; an in-flight result will no longer touch form state."""

        self._closed = True

    async def submit(self, form: Optional[ApplicationForm] = None) -> SubmissionResult:
        if self.is_submitting:
            return SubmissionResult(state=SubmissionState.SUBMITTING, message=BUSY_MESSAGE)

        if form is not None:
            self.form = form

        self.state = SubmissionState.VALIDATING
        errors = validate_application(self.form)
        if errors:
            self.state = SubmissionState.IDLE_WITH_ERRORS
            self.errors = errors
            self.message = None
            return SubmissionResult(state=self.state, errors=errors)

        submission = ApplicationSubmission.from_form(self.form)
        self.state = SubmissionState.SUBMITTING

        try:
            stored = await asyncio.wait_for(
                self.sink.insert_application(submission.to_record()), timeout=self.timeout
            )
        except Exception as exc:  # pylint: disable=broad-except
            logger.error("[%s] Application for job %s failed: %s", self.sink.source_name, submission.job_id, exc, exc_info=True)
            if self._closed:
                return SubmissionResult(state=SubmissionState.IDLE_WITH_ERRORS, message=SUBMIT_ERROR)
            self.state = SubmissionState.IDLE_WITH_ERRORS
            self.errors = {}
            self.message = SUBMIT_ERROR
            return SubmissionResult(state=self.state, message=SUBMIT_ERROR)

        logger.info("[%s] Application submitted for job %s", self.sink.source_name, submission.job_id)
        if self._closed:
            return SubmissionResult(state=SubmissionState.SUBMITTED, message=SUBMITTED_MESSAGE, record=stored)

        self.state = SubmissionState.SUBMITTED
        self.form = ApplicationForm()
        self.errors = {}
        self.message = SUBMITTED_MESSAGE
        return SubmissionResult(state=self.state, message=SUBMITTED_MESSAGE, record=stored)
