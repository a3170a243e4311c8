TWITCH_API_BASE_URL = "https://api.twitch.tv/helix/"
TWITCH_WEB_URL = "https://twitch.tv/"

TOP_GAMES_PATH = "games/top"
SEARCH_CATEGORIES_PATH = "search/categories?query="
STREAMS_PATH = "streams?first={first}&game_id="

STREAMS_PAGE_SIZE = 100  # max allowed by the API
