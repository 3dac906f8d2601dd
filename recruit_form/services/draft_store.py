from __future__ import annotations

from dataclasses import dataclass, field
import json
import logging

from pydantic import TypeAdapter

from recruit_form.core.portfolio import empty_links, normalize_links, project_for_submission
from recruit_form.core.skills import SkillSet
from recruit_form.schemas.application import ApplicationDraft
from recruit_form.services.kv_store import KeyValueStore, StorageError

logger = logging.getLogger("rf.draft")

DRAFT_FORM_KEY = "draftForm"
DRAFT_SKILLS_KEY = "draftSkills"
DRAFT_PORTFOLIO_LINKS_KEY = "draftPortfolioLinks"
DRAFT_KEYS: tuple[str, ...] = (DRAFT_FORM_KEY, DRAFT_SKILLS_KEY, DRAFT_PORTFOLIO_LINKS_KEY)

_STRING_LIST = TypeAdapter(list[str])


@dataclass
class DraftState:
    draft: ApplicationDraft = field(default_factory=ApplicationDraft)
    skills: SkillSet = field(default_factory=SkillSet)
    portfolio_links: list[str] = field(default_factory=empty_links)
    # Last UK-clients answer, drives whether the details field is shown.
    last_uk_clients_choice: str = ""


def _encode_list(values: list[str]) -> str:
    return json.dumps(values, ensure_ascii=False, separators=(",", ":"))


class DraftStoreManager:
    """Load, save and clear the in-progress application in a key-value store.

    The draft, the skill list and the raw portfolio links live under three
    separate keys. A decode failure on any of them discards all three, since
    they cannot be assumed consistent with each other.
    """

    def __init__(self, store: KeyValueStore) -> None:
        self.store = store
        self.loaded = False

    def load(self) -> DraftState:
        try:
            state = self._decode()
        except (ValueError, StorageError) as exc:
            logger.warning("draft_load_failed", extra={"error": str(exc)}, exc_info=True)
            self._remove_all()
            state = DraftState()
        finally:
            self.loaded = True
        return state

    def _decode(self) -> DraftState:
        raw_form = self.store.get(DRAFT_FORM_KEY)
        raw_skills = self.store.get(DRAFT_SKILLS_KEY)
        raw_links = self.store.get(DRAFT_PORTFOLIO_LINKS_KEY)

        # JSONDecodeError and pydantic's ValidationError are both ValueErrors.
        draft = ApplicationDraft.model_validate_json(raw_form) if raw_form is not None else None
        skills = _STRING_LIST.validate_json(raw_skills) if raw_skills is not None else []
        links = _STRING_LIST.validate_json(raw_links) if raw_links is not None else None

        if links is None:
            links = list(draft.portfolio) if draft is not None and draft.portfolio else empty_links()
        links = normalize_links(links)

        state = DraftState(skills=SkillSet(skills), portfolio_links=links)
        if draft is not None:
            state.draft = draft.model_copy(update={"portfolio": project_for_submission(links)})
            state.last_uk_clients_choice = draft.uk_clients
        logger.info(
            "draft_loaded",
            extra={"has_form": draft is not None, "skills": len(state.skills), "links": len(links)},
        )
        return state

    def save(self, state: DraftState) -> bool:
        if not self.loaded:
            logger.debug("draft_save_skipped_before_load")
            return False
        try:
            self.store.set(DRAFT_FORM_KEY, state.draft.model_dump_json(by_alias=True))
            self.store.set(DRAFT_SKILLS_KEY, _encode_list(state.skills.as_list()))
            self.store.set(DRAFT_PORTFOLIO_LINKS_KEY, _encode_list(state.portfolio_links))
        except StorageError as exc:
            logger.error("draft_save_failed", extra={"error": str(exc)}, exc_info=True)
            return False
        return True

    def clear(self) -> DraftState:
        self._remove_all()
        return DraftState()

    def _remove_all(self) -> None:
        for key in DRAFT_KEYS:
            try:
                self.store.remove(key)
            except StorageError as exc:
                logger.error("draft_remove_failed", extra={"key": key, "error": str(exc)})
