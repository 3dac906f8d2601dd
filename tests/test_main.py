import json

import pytest

from recruit_form.core.fields import FieldId
from recruit_form.main import create_form
from recruit_form.services.draft_store import DRAFT_FORM_KEY, DRAFT_SKILLS_KEY
from recruit_form.services.kv_store import MemoryKeyValueStore


def test_create_form_loads_saved_draft(intake):
    store = MemoryKeyValueStore(
        {
            DRAFT_FORM_KEY: json.dumps({"fullName": "Ada Obi", "ukClients": "Yes"}),
            DRAFT_SKILLS_KEY: json.dumps(["Python"]),
        }
    )
    form = create_form(store, transport=intake.transport)

    assert form.is_loading is False
    assert form.draft.full_name == "Ada Obi"
    assert form.uk_clients_details_visible is True
    assert form.skills.as_list() == ["Python"]
    assert form.client.url == "https://intake.test/api/applications/submit"
    assert form.client.timeout is None


@pytest.mark.asyncio
async def test_created_form_posts_to_configured_endpoint(intake, valid_draft):
    form = create_form(MemoryKeyValueStore(), transport=intake.transport)
    for field in FieldId:
        if field in {FieldId.SKILLS, FieldId.PORTFOLIO, FieldId.CV, FieldId.CUSTOM_ROLE}:
            continue
        form.set_field(field, valid_draft.get(field))
    form.toggle_skill("Python")

    result = await form.submit()

    assert result is not None and result.ok
    assert str(intake.requests[0].url) == "https://intake.test/api/applications/submit"
