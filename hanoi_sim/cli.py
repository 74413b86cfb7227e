"""
Interactive console driver.

Shows the main menu, prompts for a disk count and for moves, and reports
illegal moves and wins. All game rules live in ``hanoi_sim.state``.
"""

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import Callable, List, Optional, Tuple

from pydantic import ValidationError

from .config import GameConfig
from .prompts import get_message, instructions_text, menu_text
from .render import SnapshotRenderer, render_text
from .state import (
    EmptySource,
    GamePhase,
    HanoiState,
    IllegalMove,
    InvalidConfiguration,
    RodId,
    UnrecognizedRod,
)

logger = logging.getLogger(__name__)

QUIT_KEY = "Q"


def parse_move(text: str) -> Optional[Tuple[RodId, RodId]]:
    """
    Parse a move such as ``A C``, ``a c`` or ``AC``.

    Returns:
        (src, dst), or None if the input starts with Q (``q``, ``quit``, ...).

    Raises:
        UnrecognizedRod: if the input does not name two rods.
    """
    tokens = text.split()
    if tokens and tokens[0][:1].upper() == QUIT_KEY:
        return None
    if len(tokens) == 1 and len(tokens[0]) == 2:
        tokens = list(tokens[0])
    if len(tokens) != 2:
        raise UnrecognizedRod(f"expected two rod letters, got {text!r}")
    return RodId.parse(tokens[0]), RodId.parse(tokens[1])


def parse_disk_count(text: str) -> Optional[int]:
    """Disk count typed by the player, or None if it is not a number."""
    try:
        return int(text.strip())
    except ValueError:
        return None


class GameDriver:
    """Menu loop and game loop around a single HanoiState."""

    def __init__(self, config: GameConfig,
                 input_fn: Optional[Callable[[str], str]] = None,
                 output_fn: Optional[Callable[[str], None]] = None):
        self.config = config
        self.input = input_fn or input
        self.output = output_fn or print
        self.state = HanoiState.from_config(config)
        self.renderer = None
        if config.snapshot_dir is not None:
            self.renderer = SnapshotRenderer(
                image_size=config.image_size,
                max_disks=config.max_disks,
            )
        self.games_started = 0
        self.saved_snapshots: List[Path] = []

    # ── screen helpers ────────────────────────────────────────────────────────

    def clear(self) -> None:
        if self.config.clear_screen:
            os.system("cls" if os.name == "nt" else "clear")

    def pause(self, key: str = "continue") -> None:
        self.input(get_message(key))

    def show_board(self) -> None:
        snapshot = self.state.render_snapshot()
        self.output(render_text(snapshot))
        if self.renderer is not None:
            path = self.config.snapshot_dir / (
                f"game{self.games_started:02d}_move{self.state.moves_made:03d}.png"
            )
            # the board is redrawn after rejected moves; one file per position
            if path not in self.saved_snapshots:
                self.saved_snapshots.append(self.renderer.save(snapshot, path))

    # ── loops ─────────────────────────────────────────────────────────────────

    def run(self) -> int:
        """Run the main menu until the player exits or input ends."""
        try:
            while True:
                self.clear()
                self.output(menu_text())
                choice = self.input(get_message("menu_choice")).strip()
                if choice == "1":
                    self.play()
                elif choice == "2":
                    self.clear()
                    self.output(instructions_text(self.config.min_disks, self.config.max_disks))
                    self.pause("return_to_menu")
                elif choice == "3":
                    return 0
                else:
                    self.output(get_message("invalid_choice"))
        except EOFError:
            logger.debug("Input closed; exiting")
            return 0

    def choose_disk_count(self) -> int:
        self.clear()
        text = self.input(get_message(
            "disk_count",
            min_disks=self.config.min_disks,
            max_disks=self.config.max_disks,
        ))
        n = parse_disk_count(text)
        if n is not None:
            try:
                self.state.initialize(n)
                return n
            except InvalidConfiguration as e:
                logger.info("Rejected disk count: %s", e)

        n = self.config.default_disks
        self.output(get_message("invalid_disk_count", default=n))
        self.state.initialize(n)
        return n

    def play(self) -> None:
        """Play one game; returns when the game is won or the player quits."""
        self.games_started += 1
        self.choose_disk_count()

        while self.state.phase is GamePhase.PLAYING:
            self.clear()
            self.show_board()
            self.output("\n" + get_message("move_format"))
            text = self.input(get_message("move_prompt"))

            try:
                move = parse_move(text)
            except UnrecognizedRod:
                self.output(get_message("invalid_rods"))
                self.pause()
                continue

            if move is None:
                self.state.abort()
                return

            try:
                self.state.checked_move(*move)
            except EmptySource:
                self.output(get_message("empty_source"))
                self.pause()
            except IllegalMove:
                self.output(get_message("illegal_move"))
                self.pause()

        self.clear()
        self.show_board()
        self.output("\n" + get_message("win", moves=self.state.moves_made))
        self.pause("return_to_menu")
        self.state.acknowledge()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="hanoi-sim",
        description="Play the Tower of Hanoi in the terminal.",
    )
    parser.add_argument("--max-disks", type=int, default=None,
                        help="Largest disk count a game may use (default: 6)")
    parser.add_argument("--default-disks", type=int, default=None,
                        help="Disk count used when an invalid count is entered (default: 4)")
    parser.add_argument("--no-clear", action="store_true",
                        help="Do not clear the screen between moves")
    parser.add_argument("--snapshot-dir", type=Path, default=None,
                        help="Save a PNG of the board after every move into this directory")
    parser.add_argument("--log-level", default="WARNING",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                        help="Logging level (default: WARNING)")
    return parser


def config_from_args(args: argparse.Namespace) -> GameConfig:
    overrides = {"clear_screen": not args.no_clear, "snapshot_dir": args.snapshot_dir}
    if args.max_disks is not None:
        overrides["max_disks"] = args.max_disks
    if args.default_disks is not None:
        overrides["default_disks"] = args.default_disks
    return GameConfig(**overrides)


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(level=getattr(logging, args.log_level),
                        format="%(asctime)s - %(levelname)s - %(message)s")

    try:
        config = config_from_args(args)
    except ValidationError as e:
        parser.error(str(e))

    return GameDriver(config).run()


if __name__ == "__main__":
    sys.exit(main())
