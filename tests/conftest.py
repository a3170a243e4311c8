import pytest
from loguru import logger
from utils import make_stream

from streamsearch.schemas.twitch import Category
from streamsearch.settings import Credentials
from streamsearch.twitch import TwitchAPI

FAKE_CLIENT_ID = "test_client_id"
FAKE_ACCESS_TOKEN = "test_access_token"

SPEEDRUN_STREAM = make_stream(
    id="40952121085",
    user_name="Speedy",
    title="Any% SPEEDRUN attempts",
    tags=["English", "Speedrun"],
)

JUST_CHATTING = Category(id="509658", name="Just Chatting")
MINECRAFT = Category(id="27471", name="Minecraft")


@pytest.fixture
def caplog(caplog):
    handler_id = logger.add(caplog.handler, format="{message}")
    yield caplog
    logger.remove(handler_id)


@pytest.fixture
def credentials() -> Credentials:
    return Credentials(FAKE_CLIENT_ID, FAKE_ACCESS_TOKEN)


@pytest.fixture
def twitch(credentials):
    with TwitchAPI(credentials) as twitch_api:
        yield twitch_api
