from datetime import datetime, timezone
from typing import Any, TypeVar

import orjson
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from streamsearch.errors import ResponseDecodeError

ModelT = TypeVar("ModelT", bound=BaseModel)


def parse_record(model: type[ModelT], record: Any) -> ModelT:
    """Validates a decoded JSON record into `model`.

    Raises `ResponseDecodeError` if a required field is missing or has the wrong type.
    """
    try:
        return model.model_validate(record)
    except ValidationError as e:
        raise ResponseDecodeError(f"Invalid {model.__name__} record: {e}") from e


def live_duration(started_at: str, now: datetime | None = None) -> str:
    """Time elapsed since `started_at` formatted as HH:MM.

    Hours are not wrapped into days. Returns an empty string if `started_at`
    is not an RFC 3339 timestamp with an offset.
    """
    try:
        started = datetime.fromisoformat(started_at)
    except ValueError:
        return ""
    if started.tzinfo is None:
        return ""

    now = now or datetime.now(timezone.utc)
    minutes = max(int((now - started).total_seconds()) // 60, 0)
    hours, minutes = divmod(minutes, 60)
    return f"{hours:02}:{minutes:02}"


class Category(BaseModel):
    """Model for a Twitch Game or Category"""

    model_config = ConfigDict(strict=True, frozen=True)

    id: str = Field(min_length=1)
    name: str


class Stream(BaseModel):
    """Model for the fields of a Twitch Stream used by the search"""

    model_config = ConfigDict(strict=True)

    id: str
    user_name: str
    game_id: str
    title: str
    viewer_count: int
    started_at: str
    language: str
    tags: Any = None


class StreamEntry(BaseModel):
    """A live stream as shown in the search results"""

    model_config = ConfigDict(frozen=True)

    language: str
    display_name: str
    title: str
    category_id: str
    viewer_count: int
    live_duration: str
    broadcaster_id: str
    tags: str = ""

    @classmethod
    def from_stream(cls, stream: Stream) -> "StreamEntry":
        return cls(
            language=stream.language,
            display_name=stream.user_name,
            title=stream.title,
            category_id=stream.game_id,
            viewer_count=stream.viewer_count,
            live_duration=live_duration(stream.started_at),
            broadcaster_id=stream.id,
            tags=orjson.dumps(stream.tags).decode("utf-8") if stream.tags is not None else "",
        )

    @classmethod
    def from_api(cls, record: Any) -> "StreamEntry":
        return cls.from_stream(parse_record(Stream, record))
