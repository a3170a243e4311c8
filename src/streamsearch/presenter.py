from typing import TextIO

from streamsearch.constants import TWITCH_WEB_URL
from streamsearch.schemas.twitch import StreamEntry


def format_tags(tags: str) -> str:
    # ["English","Speedrun"] -> English, Speedrun
    return tags.strip("[]").replace('"', "").replace(",", ", ")


def format_entry(entry: StreamEntry) -> str:
    prefix = f"{format_tags(entry.tags)} tags | " if entry.tags else ""
    return (
        f"{prefix}{entry.language} | "
        f"{TWITCH_WEB_URL}{entry.display_name:<14} | "
        f"{entry.viewer_count:>4} viewers | "
        f"{entry.live_duration} | "
        f"{entry.title}"
    )


def present(entry: StreamEntry, out: TextIO | None = None) -> None:
    print(format_entry(entry), file=out)
