"""Request and response payloads exchanged with the BioLogreen API."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, JsonValue, model_validator


class LoginRequest(BaseModel):
    """Payload for ``POST /auth/login-face``."""

    model_config = ConfigDict(frozen=True)

    image_base64: str


class SignupRequest(BaseModel):
    """Payload for ``POST /auth/signup-face``.

    ``custom_fields`` must hold JSON-compatible values only; anything else is
    rejected with a ``ValidationError`` before the request is sent.
    """

    model_config = ConfigDict(frozen=True)

    image_base64: str
    custom_fields: dict[str, JsonValue] = Field(default_factory=dict)


class FaceAuthResponse(BaseModel):
    """Successful signup or login result.

    Fields missing or null in the payload fall back to ``0``, ``False`` and ``{}``.
    Unknown top-level keys are folded into ``custom_fields``.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    user_id: int = 0
    is_new_user: bool = False
    custom_fields: dict[str, Any] = Field(default_factory=dict)

    @model_validator(mode="before")
    @classmethod
    def _collect_extra_fields(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data

        known = set(cls.model_fields)
        custom_fields = data.get("custom_fields")
        if custom_fields is None:
            custom_fields = {}
        extras = {key: value for key, value in data.items() if key not in known}
        if extras and isinstance(custom_fields, dict):
            custom_fields = {**extras, **custom_fields}

        payload = {key: value for key, value in data.items() if key in known and value is not None}
        payload["custom_fields"] = custom_fields
        return payload
