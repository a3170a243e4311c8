from typing import Sequence

from streamsearch.schemas.twitch import StreamEntry


def matches(entry: StreamEntry, term: str, blocked_names: Sequence[str]) -> bool:
    """Whether the title of `entry` contains `term` and its channel is not blocked.

    `term` and `blocked_names` must already be lower case.
    """
    if entry.display_name.lower() in blocked_names:
        return False
    return term in entry.title.lower()
