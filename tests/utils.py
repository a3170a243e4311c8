from typing import Any

import httpx


def make_response(url: str, json: Any = None, status_code: int = 200, content: bytes | None = None) -> httpx.Response:
    """Builds a response as returned by `httpx.Client.get` for `url`."""
    if content is not None:
        response = httpx.Response(status_code, content=content)
    else:
        response = httpx.Response(status_code, json=json)
    response.request = httpx.Request("GET", url)
    return response


def make_stream(**overrides) -> dict:
    """A raw stream record as returned by the `streams` endpoint."""
    stream = {
        "id": "40952121085",
        "user_id": "101051819",
        "user_login": "afro",
        "user_name": "Afro",
        "game_id": "32982",
        "game_name": "Grand Theft Auto V",
        "type": "live",
        "title": "Jacob: Digital Den Laptops & Routers",
        "tags": ["English"],
        "viewer_count": 1490,
        "started_at": "2021-03-10T03:18:11Z",
        "language": "en",
        "thumbnail_url": "https://static-cdn.jtvnw.net/previews-ttv/live_user_afro-{width}x{height}.jpg",
        "is_mature": False,
    }
    stream.update(overrides)
    return stream
