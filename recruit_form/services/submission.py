from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
import json
import logging
from typing import Any, Sequence

import httpx
from pydantic import ValidationError

from recruit_form.core.config import settings
from recruit_form.core.fields import OTHER, YES
from recruit_form.core.portfolio import project_for_submission
from recruit_form.middleware.logging import RequestLoggingHooks
from recruit_form.schemas.application import ApplicationDraft
from recruit_form.schemas.intake import IntakeFieldError, IntakeResponse

logger = logging.getLogger("rf.submit")

NETWORK_ERROR_MESSAGE = "Network error. Please check your connection and try again."
DEFAULT_FAILURE_MESSAGE = "Failed to submit application"


class SubmissionStatus(str, Enum):
    SUCCEEDED = "succeeded"
    REJECTED = "rejected"
    FAILED = "failed"
    NETWORK_ERROR = "network_error"


@dataclass(frozen=True)
class CvAttachment:
    filename: str
    content: bytes
    content_type: str


@dataclass(frozen=True)
class SubmissionResult:
    status: SubmissionStatus
    message: str = ""
    errors: tuple[IntakeFieldError, ...] = ()
    data: Any = None
    status_code: int | None = None

    @property
    def ok(self) -> bool:
        return self.status == SubmissionStatus.SUCCEEDED


def _bool_text(value: bool) -> str:
    return "true" if value else "false"


def build_form_fields(
    draft: ApplicationDraft,
    skills: Sequence[str],
    portfolio_links: Sequence[str],
) -> dict[str, str]:
    return {
        "fullName": draft.full_name,
        "email": draft.email,
        "phone": draft.phone,
        "location": draft.location,
        "primaryRole": draft.primary_role,
        "customRole": draft.custom_role,
        "experience": draft.experience,
        "skills": json.dumps(list(skills), ensure_ascii=False),
        "portfolioLinks": json.dumps(project_for_submission(portfolio_links), ensure_ascii=False),
        "availability": draft.availability,
        # The endpoint reads the chosen value back from here when it is "Other".
        "availabilityOther": draft.availability if draft.availability == OTHER else "",
        "ukHours": draft.uk_hours,
        "officeWork": draft.office_work,
        "salaryRange": draft.salary_range,
        "summary": draft.summary,
        "ukClients": draft.uk_clients,
        "ukClientsDetails": draft.uk_clients_details if draft.uk_clients == YES else "",
        "interest": draft.interest,
        "accuracyConsent": _bool_text(draft.accuracy_consent),
        "dataConsent": _bool_text(draft.data_consent),
    }


class IntakeClient:
    """POSTs a finished application to the intake endpoint as multipart form data."""

    def __init__(
        self,
        url: str,
        *,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.url = url
        self.timeout = timeout
        self._transport = transport

    @classmethod
    def from_settings(cls, *, transport: httpx.AsyncBaseTransport | None = None) -> "IntakeClient":
        return cls(settings.submit_url, timeout=settings.submit_timeout_seconds, transport=transport)

    async def submit(self, fields: dict[str, str], cv: CvAttachment | None = None) -> SubmissionResult:
        # Plain fields go in as (None, value) parts so the body is multipart even without a CV.
        parts: list[tuple[str, Any]] = [(name, (None, value)) for name, value in fields.items()]
        if cv is not None:
            parts.append(("cv", (cv.filename, cv.content, cv.content_type)))

        hooks = RequestLoggingHooks()
        try:
            async with httpx.AsyncClient(
                timeout=httpx.Timeout(self.timeout),
                transport=self._transport,
                event_hooks=hooks.as_event_hooks(),
            ) as client:
                response = await client.post(self.url, files=parts)
        except httpx.TransportError as exc:
            logger.warning("submission_transport_error", extra={"error": str(exc)})
            return SubmissionResult(status=SubmissionStatus.NETWORK_ERROR, message=NETWORK_ERROR_MESSAGE)

        return self._interpret(response)

    def _interpret(self, response: httpx.Response) -> SubmissionResult:
        try:
            body = IntakeResponse.model_validate_json(response.content)
        except ValidationError:
            logger.warning(
                "submission_malformed_response",
                extra={"status_code": response.status_code, "content_type": response.headers.get("content-type")},
            )
            return SubmissionResult(
                status=SubmissionStatus.NETWORK_ERROR,
                message=NETWORK_ERROR_MESSAGE,
                status_code=response.status_code,
            )

        if not response.is_success:
            if body.errors is not None:
                logger.info(
                    "submission_rejected",
                    extra={"status_code": response.status_code, "error_count": len(body.errors)},
                )
                return SubmissionResult(
                    status=SubmissionStatus.REJECTED,
                    message=body.message or DEFAULT_FAILURE_MESSAGE,
                    errors=tuple(body.errors),
                    status_code=response.status_code,
                )
            logger.info("submission_failed", extra={"status_code": response.status_code})
            return SubmissionResult(
                status=SubmissionStatus.FAILED,
                message=body.message or DEFAULT_FAILURE_MESSAGE,
                status_code=response.status_code,
            )

        logger.info("submission_succeeded", extra={"status_code": response.status_code})
        return SubmissionResult(
            status=SubmissionStatus.SUCCEEDED,
            message=body.message,
            data=body.data,
            status_code=response.status_code,
        )
