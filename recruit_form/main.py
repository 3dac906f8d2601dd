from __future__ import annotations

import logging

import httpx

from recruit_form.core.config import settings
from recruit_form.services.application_form import ApplicationForm
from recruit_form.services.draft_store import DraftStoreManager
from recruit_form.services.kv_store import KeyValueStore, SqlKeyValueStore
from recruit_form.services.submission import IntakeClient

logging.basicConfig(level=logging.INFO)
logging.getLogger("httpx").setLevel(logging.WARNING)
logger = logging.getLogger("rf")


def create_form(
    store: KeyValueStore | None = None,
    *,
    transport: httpx.AsyncBaseTransport | None = None,
) -> ApplicationForm:
    """Build a form wired to the configured store and intake endpoint, with its draft loaded."""
    form = ApplicationForm(
        DraftStoreManager(store if store is not None else SqlKeyValueStore()),
        IntakeClient.from_settings(transport=transport),
    )
    form.load()
    logger.info("form_ready", extra={"app_name": settings.app_name, "environment": settings.environment})
    return form
