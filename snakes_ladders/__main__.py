"""CLI entry point: python -m snakes_ladders {play,auto,board,image}."""

from __future__ import annotations

import argparse
import logging
import sys

from snakes_ladders.board import DEFAULT_LAYOUT
from snakes_ladders.chart import make_board_image
from snakes_ladders.dice import RandomDice
from snakes_ladders.game import Game
from snakes_ladders.render import render_board, render_specials, render_status


def _show(game: Game) -> None:
    snap = game.snapshot()
    print(render_board(snap, game.layout))
    print(render_status(snap))


# ── play ─────────────────────────────────────────────────────────────

def cmd_play(args: argparse.Namespace) -> None:
    """Interactive game on stdin: Enter rolls, r resets, q quits."""
    game = Game(dice=RandomDice(args.seed))
    _show(game)

    while True:
        try:
            line = input("[Enter] roll, [r] reset, [q] quit > ").strip().lower()
        except (EOFError, KeyboardInterrupt):
            print()
            break

        if line == "q":
            break
        if line == "r":
            game.reset()
        elif line == "":
            if game.is_over:
                print("Game ended. Press r to play again.")
                continue
            game.roll_dice()
        else:
            print(f"Unknown command: {line!r}")
            continue
        _show(game)


# ── auto ─────────────────────────────────────────────────────────────

def cmd_auto(args: argparse.Namespace) -> None:
    """Roll for both players until someone wins or the cap is reached."""
    game = Game(dice=RandomDice(args.seed))

    for _ in range(args.max_rolls):
        if game.is_over:
            break
        game.roll_dice()
        if not args.quiet:
            print(game.message)

    if game.is_over:
        print(f"{game.winner.name} won after {len(game.history)} rolls.")
    else:
        print(f"No winner after {args.max_rolls} rolls.")
    if not args.quiet:
        print(render_board(game.snapshot(), game.layout))


# ── board ────────────────────────────────────────────────────────────

def cmd_board(args: argparse.Namespace) -> None:
    print(render_board(None, DEFAULT_LAYOUT))
    print(render_specials(DEFAULT_LAYOUT))


# ── image ────────────────────────────────────────────────────────────

def cmd_image(args: argparse.Namespace) -> None:
    """Optionally play some rolls, then save the board as a PNG."""
    game = Game(dice=RandomDice(args.seed))
    for _ in range(args.rolls):
        if game.is_over:
            break
        game.roll_dice()

    out = args.output or "board.png"
    make_board_image(game.snapshot(), game.layout, output_path=out)
    print(f"Board saved to {out}")


# ── main ─────────────────────────────────────────────────────────────

def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        prog="snakes_ladders",
        description="Two-player Snakes and Ladders",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    sub = parser.add_subparsers(dest="command")

    p_play = sub.add_parser("play", help="Play interactively")
    p_play.add_argument("--seed", type=int, help="Seed the dice")

    p_auto = sub.add_parser("auto", help="Play a whole game automatically")
    p_auto.add_argument("--seed", type=int, help="Seed the dice")
    p_auto.add_argument("--max-rolls", type=int, default=1000, help="Stop after this many rolls")
    p_auto.add_argument("--quiet", "-q", action="store_true", help="Only print the result")

    sub.add_parser("board", help="Print the empty board")

    p_image = sub.add_parser("image", help="Save the board as a PNG")
    p_image.add_argument("--output", "-o", help="Output PNG path")
    p_image.add_argument("--seed", type=int, help="Seed the dice")
    p_image.add_argument("--rolls", type=int, default=0, help="Rolls to play before drawing")

    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    if args.command == "play":
        cmd_play(args)
    elif args.command == "auto":
        cmd_auto(args)
    elif args.command == "board":
        cmd_board(args)
    elif args.command == "image":
        cmd_image(args)
    else:
        parser.print_help()


if __name__ == "__main__":
    main()
