from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, field_validator


class IntakeFieldError(BaseModel):
    model_config = ConfigDict(extra="ignore")

    field: str
    message: str


class IntakeResponse(BaseModel):
    model_config = ConfigDict(extra="ignore")

    success: bool = False
    message: str = ""
    data: Optional[Any] = None
    errors: Optional[list[IntakeFieldError]] = None

    @field_validator("message", mode="before")
    @classmethod
    def _message_or_empty(cls, value: Any) -> str:
        return value if isinstance(value, str) else ""

    @field_validator("errors", mode="before")
    @classmethod
    def _errors_array_only(cls, value: Any) -> Any:
        # Anything other than an array means "no field errors reported".
        if not isinstance(value, list):
            return None
        return [
            item
            for item in value
            if isinstance(item, dict) and isinstance(item.get("field"), str) and isinstance(item.get("message"), str)
        ]
