from __future__ import annotations

import logging
from pathlib import Path
import time
from typing import Callable

import anyio

from recruit_form.core import portfolio
from recruit_form.core.config import settings
from recruit_form.core.fields import (
    CONSENT_FIELDS,
    FIELD_OPTIONS,
    OTHER,
    TEXT_FIELDS,
    YES,
    FieldId,
    is_allowed_option,
    parse_field_id,
)
from recruit_form.core.skills import SkillSet
from recruit_form.core.uploads import cv_content_type, validate_cv_path
from recruit_form.core.validation import validate_application
from recruit_form.schemas.application import ApplicationDraft, FieldError, FieldErrors
from recruit_form.services.draft_store import DraftState, DraftStoreManager
from recruit_form.services.submission import (
    CvAttachment,
    IntakeClient,
    SubmissionResult,
    SubmissionStatus,
    build_form_fields,
)

logger = logging.getLogger("rf.form")

CLEAR_CONFIRMATION_PROMPT = "Clear all saved form data?"


class ApplicationForm:
    """State container behind the application form.

    Every edit goes through a typed mutation that updates the in-memory
    state and writes it back through the draft store.
    """

    def __init__(
        self,
        store: DraftStoreManager,
        client: IntakeClient,
        *,
        success_banner_seconds: float | None = None,
        cv_max_bytes: int | None = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.store = store
        self.client = client
        self.success_banner_seconds = (
            settings.success_banner_seconds if success_banner_seconds is None else success_banner_seconds
        )
        self.cv_max_bytes = settings.cv_max_bytes if cv_max_bytes is None else cv_max_bytes
        self._clock = clock

        self.state = DraftState()
        self.cv_path: Path | None = None
        self.cv_filename: str | None = None
        self.errors = FieldErrors()
        self.error_message = ""
        self.is_loading = True
        self.is_submitting = False
        self._success_until: float | None = None

    @property
    def draft(self) -> ApplicationDraft:
        return self.state.draft

    @property
    def skills(self) -> SkillSet:
        return self.state.skills

    @property
    def portfolio_links(self) -> list[str]:
        return list(self.state.portfolio_links)

    def load(self) -> None:
        self.state = self.store.load()
        self.is_loading = False

    def _persist(self) -> None:
        if self.is_loading:
            return
        self.store.save(self.state)

    def _clear_errors_for(self, field: FieldId) -> None:
        self.errors = self.errors.without(field)

    # Field edits

    def set_field(self, field: FieldId, value: str | bool) -> None:
        if field in CONSENT_FIELDS:
            if not isinstance(value, bool):
                raise ValueError(f"{field.value} takes a boolean")
        elif field in TEXT_FIELDS or field in FIELD_OPTIONS:
            if not isinstance(value, str):
                raise ValueError(f"{field.value} takes a string")
            if field in FIELD_OPTIONS and not is_allowed_option(field, value):
                raise ValueError(f"'{value}' is not an option for {field.value}")
        else:
            raise ValueError(f"{field.value} cannot be set directly")

        self.state.draft = self.state.draft.with_value(field, value)
        self._clear_errors_for(field)
        if field == FieldId.UK_CLIENTS:
            self.state.last_uk_clients_choice = value
        self._persist()

    @property
    def custom_role_visible(self) -> bool:
        return self.state.draft.primary_role == OTHER

    @property
    def uk_clients_details_visible(self) -> bool:
        return self.state.last_uk_clients_choice == YES

    # Skills

    def toggle_skill(self, skill: str) -> None:
        self.state.skills.toggle(skill)
        self._clear_errors_for(FieldId.SKILLS)
        self._persist()

    def add_custom_skill(self, raw: str) -> bool:
        added = self.state.skills.add_custom(raw)
        if added:
            self._clear_errors_for(FieldId.SKILLS)
            self._persist()
        return added

    def remove_skill(self, skill: str) -> bool:
        removed = self.state.skills.remove(skill)
        if removed:
            self._persist()
        return removed

    # Portfolio links

    def _set_links(self, links: list[str]) -> None:
        self.state.portfolio_links = links
        self.state.draft = self.state.draft.model_copy(update={"portfolio": portfolio.project_for_submission(links)})
        self._clear_errors_for(FieldId.PORTFOLIO)
        self._persist()

    def set_portfolio_link(self, index: int, value: str) -> None:
        self._set_links(portfolio.set_link(self.state.portfolio_links, index, value))

    def add_portfolio_link(self) -> None:
        self._set_links(portfolio.add_link(self.state.portfolio_links))

    def remove_portfolio_link(self, index: int) -> bool:
        if len(self.state.portfolio_links) <= portfolio.MIN_LINK_SLOTS:
            return False
        self._set_links(portfolio.remove_link(self.state.portfolio_links, index))
        return True

    # CV

    def attach_cv(self, path: str | Path) -> str:
        cv_path = Path(path)
        filename = validate_cv_path(cv_path, max_bytes=self.cv_max_bytes)
        self.cv_path = cv_path
        self.cv_filename = filename
        self._clear_errors_for(FieldId.CV)
        return filename

    def remove_cv(self) -> None:
        self.cv_path = None
        self.cv_filename = None

    async def _read_cv(self) -> CvAttachment | None:
        if self.cv_path is None or self.cv_filename is None:
            return None
        content = await anyio.to_thread.run_sync(self.cv_path.read_bytes)
        return CvAttachment(
            filename=self.cv_filename,
            content=content,
            content_type=cv_content_type(self.cv_filename),
        )

    # Validation

    def validate(self) -> bool:
        self.errors = FieldErrors(
            validate_application(self.state.draft, self.state.skills.as_list(), self.state.portfolio_links)
        )
        return not self.errors

    @property
    def focus_target(self) -> FieldId | None:
        first = self.errors.first
        return first.field if first is not None else None

    # Submission

    @property
    def success_visible(self) -> bool:
        return self._success_until is not None and self._clock() < self._success_until

    async def submit(self) -> SubmissionResult | None:
        """Validate and send the application.

        Returns None when no request went out, for example when local
        validation fails or a submission is already in flight.
        """
        if self.is_loading or self.is_submitting:
            return None

        self.errors = FieldErrors()
        self.error_message = ""
        self._success_until = None

        if not self.validate():
            logger.info("submit_blocked_by_validation", extra={"error_count": len(self.errors)})
            return None

        self.is_submitting = True
        try:
            try:
                cv = await self._read_cv()
            except OSError as exc:
                logger.warning("cv_read_failed", extra={"error": str(exc)})
                self.errors = FieldErrors([FieldError(field=FieldId.CV, message="Could not read the selected CV file")])
                return None

            fields = build_form_fields(self.state.draft, self.state.skills.as_list(), self.state.portfolio_links)
            result = await self.client.submit(fields, cv)
            self._apply_result(result)
            return result
        finally:
            self.is_submitting = False

    def _apply_result(self, result: SubmissionResult) -> None:
        if result.status == SubmissionStatus.SUCCEEDED:
            self._reset()
            self._success_until = self._clock() + self.success_banner_seconds
            return

        if result.status == SubmissionStatus.REJECTED:
            known: list[FieldError] = []
            for item in result.errors:
                field = parse_field_id(item.field)
                if field is None:
                    logger.warning("unknown_server_error_field", extra={"field": item.field})
                    continue
                known.append(FieldError(field=field, message=item.message))
            self.errors = FieldErrors(known)
            if not known:
                self.error_message = result.message
            return

        self.error_message = result.message

    # Reset

    def _reset(self) -> None:
        self.state = self.store.clear()
        self.remove_cv()

    def clear(self, confirm: Callable[[str], bool]) -> bool:
        if not confirm(CLEAR_CONFIRMATION_PROMPT):
            return False
        self._reset()
        self.errors = FieldErrors()
        self.error_message = ""
        logger.info("draft_cleared_by_user")
        return True
