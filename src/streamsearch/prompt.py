from typing import Callable, Sequence, TextIO

from streamsearch.schemas.twitch import Category

ReadLine = Callable[[], str]


def choose_term(read_line: ReadLine = input) -> str:
    """Let the user enter a search term"""
    return read_line().strip()


def choose_game(categories: Sequence[Category], read_line: ReadLine = input, out: TextIO | None = None) -> str:
    """Let the user choose a category from `categories`, returns the id of the chosen one.

    Keeps asking until the input is a valid index.
    """
    for i, category in enumerate(categories):
        print(f"{i}: {category.name}", file=out)
    print("Choose a category from the list:", file=out)

    while True:
        try:
            choice = int(read_line().strip())
        except ValueError:
            print("Please enter a number:", file=out)
            continue

        if 0 <= choice < len(categories):
            break
        print(f"Please enter a number between 0 and {len(categories) - 1}:", file=out)

    category = categories[choice]
    print(f"Category: {category.name}", file=out)
    return category.id
