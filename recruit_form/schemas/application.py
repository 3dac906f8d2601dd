from __future__ import annotations

from typing import Iterable, Iterator

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from recruit_form.core.fields import FieldId


class ApplicationDraft(BaseModel):
    """Snapshot of the form while the candidate is filling it in.

    Stored and sent with camelCase keys (``fullName``, ``ukClientsDetails``),
    which are also the values of :class:`FieldId`.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        extra="ignore",
    )

    full_name: str = ""
    email: str = ""
    phone: str = ""
    location: str = ""
    primary_role: str = ""
    custom_role: str = ""
    experience: str = ""
    # Blank-filtered projection of the editable link list.
    portfolio: list[str] = []
    availability: str = ""
    uk_hours: str = ""
    office_work: str = ""
    salary_range: str = ""
    summary: str = ""
    uk_clients: str = ""
    uk_clients_details: str = ""
    interest: str = ""
    accuracy_consent: bool = False
    data_consent: bool = False

    def get(self, field: FieldId) -> str | bool:
        return getattr(self, draft_attribute(field))

    def with_value(self, field: FieldId, value: str | bool) -> "ApplicationDraft":
        return self.model_copy(update={draft_attribute(field): value})


def draft_attribute(field: FieldId) -> str:
    attr = _ATTRIBUTE_BY_FIELD.get(field)
    if attr is None:
        raise ValueError(f"{field.value} is not a draft attribute")
    return attr


_ATTRIBUTE_BY_FIELD: dict[FieldId, str] = {
    FieldId(info.alias): name
    for name, info in ApplicationDraft.model_fields.items()
    if info.alias in {f.value for f in FieldId}
}


class FieldError(BaseModel):
    model_config = ConfigDict(frozen=True)

    field: FieldId
    message: str


class FieldErrors:
    """Ordered field errors with typed lookup.

    The first entry decides where the form scrolls and focuses; lookups by
    field return the first message recorded for that field.
    """

    def __init__(self, errors: Iterable[FieldError] = ()) -> None:
        self._errors: tuple[FieldError, ...] = tuple(errors)
        self._by_field: dict[FieldId, str] = {}
        for error in self._errors:
            self._by_field.setdefault(error.field, error.message)

    def __iter__(self) -> Iterator[FieldError]:
        return iter(self._errors)

    def __len__(self) -> int:
        return len(self._errors)

    def __bool__(self) -> bool:
        return bool(self._errors)

    def __repr__(self) -> str:
        return f"FieldErrors({list(self._errors)!r})"

    @property
    def first(self) -> FieldError | None:
        return self._errors[0] if self._errors else None

    def has(self, field: FieldId) -> bool:
        return field in self._by_field

    def message_for(self, field: FieldId) -> str:
        return self._by_field.get(field, "")

    def fields(self) -> list[FieldId]:
        return list(self._by_field)

    def without(self, field: FieldId) -> "FieldErrors":
        return FieldErrors(error for error in self._errors if error.field != field)

    def as_list(self) -> list[FieldError]:
        return list(self._errors)
