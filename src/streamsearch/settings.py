from typing import NamedTuple

from pydantic import field_validator
from pydantic_settings import BaseSettings

from streamsearch.constants import TWITCH_API_BASE_URL
from streamsearch.errors import MissingCredentialError


class Credentials(NamedTuple):
    client_id: str
    token: str


class Settings(BaseSettings):
    twitch_client_id: str = ""
    twitch_token: str = ""
    twitch_api_base_url: str = TWITCH_API_BASE_URL

    # a single empty name never matches a real display name
    blocked_names: list[str] = [""]
    http_timeout: float | None = None

    log_level: str = "WARNING"

    @field_validator("twitch_api_base_url")
    @classmethod
    def ensure_trailing_slash(cls, v: str) -> str:
        # endpoint paths are joined relative to the last segment
        return v.rstrip("/") + "/"

    @field_validator("blocked_names")
    @classmethod
    def lowercase_names(cls, v: list[str]) -> list[str]:
        return [name.lower() for name in v]

    def credentials(self) -> Credentials:
        """Returns the client id and OAuth token, raises `MissingCredentialError` if either is unset."""
        if not self.twitch_client_id:
            raise MissingCredentialError("Client id missing")
        if not self.twitch_token:
            raise MissingCredentialError("OAuth token missing")
        return Credentials(self.twitch_client_id, self.twitch_token)


settings = Settings()  # type: ignore
