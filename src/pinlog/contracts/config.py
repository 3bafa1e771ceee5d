"""Configuration contracts."""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator, model_validator

DEFAULT_API_URL = "https://slack.com/api/"


class PinLogConfig(BaseModel):
    channel_id: str
    store_id: str
    store: str = "csv"
    sheet_name: str = "Slack Logs"
    auth: str = "env"
    token: str | None = None
    token_env: str = "SLACK_API_TOKEN"
    sheets_token_env: str = "GOOGLE_SHEETS_TOKEN"
    api_url: str = DEFAULT_API_URL
    max_retries: int = Field(default=3, ge=0, le=10)

    model_config = {"frozen": True}

    @field_validator("channel_id", "store_id")
    @classmethod
    def _require_value(cls, value: str) -> str:
        stripped = value.strip()
        if not stripped:
            raise ValueError("must be a non-empty string")
        return stripped

    @field_validator("store")
    @classmethod
    def _known_store(cls, value: str) -> str:
        if value not in {"csv", "google-sheets"}:
            raise ValueError("store must be one of: csv, google-sheets")
        return value

    @field_validator("api_url")
    @classmethod
    def _trailing_slash(cls, value: str) -> str:
        return value if value.endswith("/") else f"{value}/"

    @model_validator(mode="after")
    def validate_auth_token(self) -> PinLogConfig:
        token = (self.token or "").strip()
        if self.auth == "token":
            if not token:
                raise ValueError("token auth requires a non-empty token")
            return self
        if token:
            raise ValueError("token must be unset when auth is not 'token'")
        if self.auth not in {"env", "token"}:
            raise ValueError("auth must be one of: env, token")
        return self
