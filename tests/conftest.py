import os

os.environ.setdefault("RF_DRAFT_DATABASE_URL", "sqlite:///:memory:")
os.environ.setdefault("RF_SUBMIT_URL", "https://intake.test/api/applications/submit")
os.environ.setdefault("RF_ENVIRONMENT", "test")

import re

import httpx
import pytest

from recruit_form.core.fields import SALARY_RANGES
from recruit_form.schemas.application import ApplicationDraft
from recruit_form.services.application_form import ApplicationForm
from recruit_form.services.draft_store import DraftStoreManager
from recruit_form.services.kv_store import MemoryKeyValueStore
from recruit_form.services.submission import IntakeClient

INTAKE_URL = "https://intake.test/api/applications/submit"
INTEREST = (
    "I want to work with a studio that ships products for UK clients "
    "and I enjoy owning features from design to release."
)


@pytest.fixture()
def valid_draft() -> ApplicationDraft:
    return ApplicationDraft(
        full_name="Ada Obi",
        email="ada.obi@example.com",
        phone="+234 801 234 5678",
        location="Lagos, Nigeria",
        primary_role="Front-End Developer",
        experience="1–3",
        availability="Immediate",
        uk_hours="Yes",
        office_work="Hybrid",
        salary_range=SALARY_RANGES[1],
        uk_clients="No",
        interest=INTEREST,
        accuracy_consent=True,
        data_consent=True,
    )


@pytest.fixture()
def kv_store() -> MemoryKeyValueStore:
    return MemoryKeyValueStore()


class FakeIntake:
    """Stands in for the intake endpoint; records every request it receives."""

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self.status_code = 201
        self.body: object = {"success": True, "message": "Application submitted", "data": {"id": 7}}
        self.raw: bytes | None = None
        self.error: Exception | None = None

    def respond(self, status_code: int, body: object = None, *, raw: bytes | None = None) -> None:
        self.status_code = status_code
        self.body = body
        self.raw = raw

    def fail_with(self, error: Exception) -> None:
        self.error = error

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        if self.raw is not None:
            return httpx.Response(self.status_code, content=self.raw)
        return httpx.Response(self.status_code, json=self.body)

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)


@pytest.fixture()
def intake() -> FakeIntake:
    return FakeIntake()


@pytest.fixture()
def intake_client(intake: FakeIntake) -> IntakeClient:
    return IntakeClient(INTAKE_URL, transport=intake.transport)


class FakeClock:
    def __init__(self) -> None:
        self.now = 1000.0

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture()
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture()
def form(kv_store: MemoryKeyValueStore, intake_client: IntakeClient, clock: FakeClock) -> ApplicationForm:
    form = ApplicationForm(
        DraftStoreManager(kv_store),
        intake_client,
        success_banner_seconds=5,
        cv_max_bytes=1024,
        clock=clock,
    )
    form.load()
    return form


_NAME_RE = re.compile(rb'name="([^"]+)"(?:; filename="([^"]*)")?')


@pytest.fixture()
def multipart_parts():
    """Return a parser mapping part name -> (filename, payload bytes)."""

    def parse(request: httpx.Request) -> dict[str, tuple[str | None, bytes]]:
        content_type = request.headers["content-type"]
        assert content_type.startswith("multipart/form-data")
        boundary = content_type.split("boundary=", 1)[1].encode()
        parts: dict[str, tuple[str | None, bytes]] = {}
        for chunk in request.content.split(b"--" + boundary):
            if b"\r\n\r\n" not in chunk:
                continue
            head, payload = chunk.split(b"\r\n\r\n", 1)
            match = _NAME_RE.search(head)
            if not match:
                continue
            filename = match.group(2).decode() if match.group(2) is not None else None
            parts[match.group(1).decode()] = (filename, payload[:-2] if payload.endswith(b"\r\n") else payload)
        return parts

    return parse
