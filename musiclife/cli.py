"""Command-line entry point for the MusicLife game."""

import argparse

from .console import Console
from .game import Game

MENU_OPTIONS = ["1", "2", "3", "4", "5", "6", "7", "r", "n", "exit"]


def _new_game(console):
    game = Game(console)
    game.start()
    game.setup()
    game.next_year()
    return game


def _play(console):
    game = _new_game(console)
    actions = {
        "n": game.next_year,
        "1": game.rehearse,
        "2": game.record_album,
        "3": game.modify_band,
        "4": game.show_band,
        "5": game.help,
        "6": game.concert,
        "7": game.tour,
    }
    over = False
    while not over:
        game.show_data()
        game.menu()
        option = console.choose(MENU_OPTIONS)
        if option in actions:
            actions[option]()
        elif option == "r" and game.reset():
            return _play(console)
        over = game.is_over()
        if over or option == "exit":
            game.final_report()
            if game.retry():
                return _play(console)


def main(argv=None):
    """Run the game on standard input and output."""
    parser = argparse.ArgumentParser(
        prog="musiclife", description="Lead a band to international success."
    )
    parser.parse_args(argv)
    console = Console()
    try:
        _play(console)
    except EOFError:
        console.write("\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())