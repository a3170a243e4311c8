import sys
import time
from typing import TextIO

import httpx
from loguru import logger

from streamsearch.errors import MissingCredentialError, NoDataError, ResponseDecodeError
from streamsearch.filters import matches
from streamsearch.presenter import present
from streamsearch.prompt import ReadLine, choose_game, choose_term
from streamsearch.settings import Settings, settings
from streamsearch.twitch import TwitchAPI


def search(
    twitch_api: TwitchAPI,
    blocked_names: list[str],
    read_line: ReadLine = input,
    out: TextIO | None = None,
) -> int:
    """Asks for a category and a search term, then prints every matching live stream."""
    print("Enter a category name to search for, or leave blank to list top categories:", file=out)
    category_term = choose_term(read_line)
    categories = twitch_api.fetch_categories(category_term)
    if not categories:
        print("No categories found.", file=out)
        return 0
    game_id = choose_game(categories, read_line, out)

    print("Enter a search term:", file=out)
    search_term = choose_term(read_line)
    print(f'Searching for "{search_term}" in chosen category...', file=out)
    search_term = search_term.lower()

    total = 0
    found = 0
    cursor = None
    start_time = time.perf_counter()
    while True:
        entries, cursor = twitch_api.fetch_streams(game_id, cursor)
        total += len(entries)
        for entry in entries:
            if matches(entry, search_term, blocked_names):
                present(entry, out)
                found += 1

        if cursor is None:
            break

    seconds, fraction = divmod(time.perf_counter() - start_time, 1)
    print(f"Done! Found {found}/{total} streams in {int(seconds)}.{int(fraction * 100):02} seconds.", file=out)
    return 0


def run(settings: Settings, read_line: ReadLine = input, out: TextIO | None = None) -> int:
    """Runs the search and returns the process exit code."""
    try:
        credentials = settings.credentials()
    except MissingCredentialError as e:
        logger.error(str(e))
        return 1

    with TwitchAPI(credentials, settings.twitch_api_base_url, settings.http_timeout) as twitch_api:
        try:
            return search(twitch_api, settings.blocked_names, read_line, out)
        except NoDataError as e:
            logger.info(f"{e}, nothing to show")
            return 0
        except ResponseDecodeError as e:
            logger.error(str(e))
            return 1
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            logger.error(f"Twitch API request failed: {e}")
            return 1
        except EOFError:
            logger.error("Input closed")
            return 1


def main() -> None:
    logger.remove()  # All default handlers are removed
    logger.add(sys.stderr, diagnose=False, level=settings.log_level.upper())
    sys.exit(run(settings))


if __name__ == "__main__":
    main()
