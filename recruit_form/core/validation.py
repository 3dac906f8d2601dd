from __future__ import annotations

import re
from typing import Sequence

from recruit_form.core.fields import OTHER, YES, FieldId
from recruit_form.core.portfolio import project_for_submission
from recruit_form.schemas.application import ApplicationDraft, FieldError

FULL_NAME_MAX = 100
SUMMARY_MIN = 50
SUMMARY_MAX = 2000
UK_CLIENTS_DETAILS_MAX = 1000
INTEREST_MIN = 50
INTEREST_MAX = 1000

# Deliberately lenient; the intake endpoint applies the same patterns.
EMAIL_RE = re.compile(r"\S+@\S+\.\S+")
# Same language as ^(https?://)?([\da-z.-]+)\.([a-z.]{2,256})([/\w .-]*)*/?$ with
# the nested repeat collapsed; ASCII \w and case-sensitive host like the endpoint.
PORTFOLIO_URL_RE = re.compile(r"^(https?://)?([\da-z.-]+)\.([a-z.]{2,256})[/\w .-]*/?\Z", re.ASCII)


def is_valid_email(value: str) -> bool:
    return EMAIL_RE.search(value) is not None


def is_valid_portfolio_url(value: str) -> bool:
    return PORTFOLIO_URL_RE.match(value) is not None


def validate_application(
    draft: ApplicationDraft,
    skills: Sequence[str],
    portfolio_links: Sequence[str],
) -> list[FieldError]:
    """Evaluate every form rule in display order.

    Returns all violations; the first one is where the form focuses. Inputs
    are only read.
    """
    errors: list[FieldError] = []

    def fail(field: FieldId, message: str) -> None:
        errors.append(FieldError(field=field, message=message))

    if not draft.full_name.strip():
        fail(FieldId.FULL_NAME, "Full name is required")
    elif len(draft.full_name) > FULL_NAME_MAX:
        fail(FieldId.FULL_NAME, f"Full name cannot exceed {FULL_NAME_MAX} characters")

    if not draft.email.strip():
        fail(FieldId.EMAIL, "Email is required")
    elif not is_valid_email(draft.email):
        fail(FieldId.EMAIL, "Please enter a valid email address")

    if not draft.phone.strip():
        fail(FieldId.PHONE, "Phone number is required")

    if not draft.location.strip():
        fail(FieldId.LOCATION, "Location is required")

    if not draft.primary_role:
        fail(FieldId.PRIMARY_ROLE, "Primary role is required")
    elif draft.primary_role == OTHER and not draft.custom_role.strip():
        fail(FieldId.CUSTOM_ROLE, 'Custom role is required when selecting "Other"')

    if not draft.experience:
        fail(FieldId.EXPERIENCE, "Experience is required")

    if len(skills) == 0:
        fail(FieldId.SKILLS, "At least one skill is required")

    for link in project_for_submission(portfolio_links):
        if not is_valid_portfolio_url(link):
            fail(FieldId.PORTFOLIO, "All portfolio links must be valid URLs")

    if not draft.availability:
        fail(FieldId.AVAILABILITY, "Availability is required")

    if not draft.uk_hours:
        fail(FieldId.UK_HOURS, "UK hours preference is required")

    if not draft.office_work:
        fail(FieldId.OFFICE_WORK, "Office work preference is required")

    if not draft.salary_range:
        fail(FieldId.SALARY_RANGE, "Salary range is required")

    # Optional; only checked once something has been typed.
    if draft.summary.strip():
        if len(draft.summary) < SUMMARY_MIN:
            fail(FieldId.SUMMARY, f"Summary must be at least {SUMMARY_MIN} characters")
        elif len(draft.summary) > SUMMARY_MAX:
            fail(FieldId.SUMMARY, f"Summary cannot exceed {SUMMARY_MAX} characters")

    if not draft.uk_clients:
        fail(FieldId.UK_CLIENTS, "UK clients experience is required")
    elif draft.uk_clients == YES and len(draft.uk_clients_details) > UK_CLIENTS_DETAILS_MAX:
        fail(FieldId.UK_CLIENTS_DETAILS, f"UK clients details cannot exceed {UK_CLIENTS_DETAILS_MAX} characters")

    if not draft.interest.strip():
        fail(FieldId.INTEREST, "Interest statement is required")
    elif len(draft.interest) < INTEREST_MIN:
        fail(FieldId.INTEREST, f"Interest statement must be at least {INTEREST_MIN} characters")
    elif len(draft.interest) > INTEREST_MAX:
        fail(FieldId.INTEREST, f"Interest statement cannot exceed {INTEREST_MAX} characters")

    if not draft.accuracy_consent:
        fail(FieldId.ACCURACY_CONSENT, "Accuracy consent must be accepted")

    if not draft.data_consent:
        fail(FieldId.DATA_CONSENT, "Data consent must be accepted")

    return errors
