"""
Rod/disk state machine for the Tower of Hanoi.

Three rods (A, B, C) hold disks as lists ordered bottom-to-top; disk sizes are
the integers 1..N. The only mutation is moving the top disk of one rod onto
another. ``can_move`` is the pure legality query, ``move_disk`` the unchecked
transfer and ``checked_move`` the atomic combination the driver uses.
"""

import enum
import logging
from typing import List, Optional, Tuple

from .config import MAX_N, MIN_N, GameConfig

logger = logging.getLogger(__name__)

NUM_RODS = 3
# Goal rod is always the rightmost rod (index 2)
GOAL_ROD = 2


class HanoiError(Exception):
    """Base class for Tower of Hanoi errors."""


class InvalidConfiguration(HanoiError, ValueError):
    """Disk count outside the configured bounds."""


class IllegalMove(HanoiError):
    """Move rejected by the legality rule; the state is unchanged."""


class EmptySource(IllegalMove):
    """Move attempted from a rod that holds no disks."""


class UnrecognizedRod(HanoiError, ValueError):
    """Text that does not name one of the rods A, B or C."""


class RodId(enum.IntEnum):
    A = 0
    B = 1
    C = 2

    @classmethod
    def parse(cls, text: str) -> "RodId":
        """Map a rod letter (case-insensitive) to its RodId."""
        key = text.strip().upper() if isinstance(text, str) else ""
        try:
            return cls[key]
        except KeyError:
            raise UnrecognizedRod(f"unrecognized rod {text!r}; use A, B, or C") from None


class GamePhase(enum.Enum):
    SETUP = "setup"
    PLAYING = "playing"
    WON = "won"


Snapshot = List[Tuple[RodId, Tuple[int, ...]]]


class HanoiState:
    """
    Three rods and the active disk count of one game.

    A fresh instance is in phase SETUP with empty rods; ``initialize(n)``
    starts a game with disks n..1 stacked on rod A.
    """

    def __init__(self, min_disks: int = MIN_N, max_disks: int = MAX_N):
        if min_disks < MIN_N:
            raise ValueError(f"min_disks must be at least {MIN_N}, got {min_disks}")
        if min_disks > max_disks:
            raise ValueError(f"min_disks ({min_disks}) exceeds max_disks ({max_disks})")
        self.min_disks = min_disks
        self.max_disks = max_disks
        self.rods: List[List[int]] = [[] for _ in range(NUM_RODS)]
        self.num_disks = 0
        self.moves_made = 0
        self.phase = GamePhase.SETUP

    @classmethod
    def from_config(cls, config: GameConfig) -> "HanoiState":
        return cls(min_disks=config.min_disks, max_disks=config.max_disks)

    # ── lifecycle ─────────────────────────────────────────────────────────────

    def initialize(self, n: int) -> None:
        """
        Start a new game with ``n`` disks on rod A (largest at the bottom).

        Raises:
            InvalidConfiguration: if n is not an int in [min_disks, max_disks].
                The current state is left as it was.
        """
        if isinstance(n, bool) or not isinstance(n, int):
            raise InvalidConfiguration(f"disk count must be an integer, got {n!r}")
        if not self.min_disks <= n <= self.max_disks:
            raise InvalidConfiguration(
                f"disk count must be in [{self.min_disks}, {self.max_disks}], got {n}"
            )

        self.rods = [[] for _ in range(NUM_RODS)]
        for disk in range(n, 0, -1):
            self.rods[RodId.A].append(disk)
        self.num_disks = n
        self.moves_made = 0
        self.phase = GamePhase.PLAYING
        logger.info("Initialized game with %d disks", n)

    def abort(self) -> None:
        """Abandon the game in progress, emptying the rods, and return to SETUP."""
        if self.phase is GamePhase.PLAYING:
            logger.info("Game aborted after %d moves", self.moves_made)
        self.rods = [[] for _ in range(NUM_RODS)]
        self.num_disks = 0
        self.phase = GamePhase.SETUP

    def acknowledge(self) -> None:
        """Leave the WON phase once the player has seen the result."""
        if self.phase is GamePhase.WON:
            self.phase = GamePhase.SETUP

    # ── queries ───────────────────────────────────────────────────────────────

    def top_disk(self, rod: int) -> Optional[int]:
        """Size of the top disk on ``rod``, or None if the rod is empty."""
        stack = self.rods[rod]
        return stack[-1] if stack else None

    def can_move(self, src: int, dst: int) -> bool:
        """
        Whether the top disk of ``src`` may be placed on ``dst``.

        ``src == dst`` is not special-cased; it is always rejected because
        either the rod is empty or its top disk is not smaller than itself.
        """
        if not (_valid_rod(src) and _valid_rod(dst)):
            return False
        moving = self.top_disk(src)
        if moving is None:
            return False
        target = self.top_disk(dst)
        if target is None:
            return True
        return moving < target

    def legal_moves(self) -> List[Tuple[RodId, RodId]]:
        """All (src, dst) pairs currently accepted by can_move."""
        return [
            (src, dst)
            for src in RodId
            for dst in RodId
            if self.can_move(src, dst)
        ]

    def is_won(self) -> bool:
        """True iff rod C holds all N disks, largest at the bottom."""
        if self.num_disks == 0:
            return False
        goal = self.rods[GOAL_ROD]
        if len(goal) != self.num_disks:
            return False
        return all(lower > upper for lower, upper in zip(goal, goal[1:]))

    def render_snapshot(self) -> Snapshot:
        """(RodId, disks bottom-to-top) for each rod, for display only."""
        return [(rod, tuple(self.rods[rod])) for rod in RodId]

    def state_key(self) -> Tuple[Tuple[int, ...], ...]:
        """Hashable view of the rods."""
        return tuple(tuple(r) for r in self.rods)

    # ── mutation ──────────────────────────────────────────────────────────────

    def move_disk(self, src: int, dst: int) -> bool:
        """
        Pop the top disk of ``src`` and push it onto ``dst``.

        Only an empty (or nonexistent) source is guarded against; ordering is
        the caller's responsibility, so check ``can_move`` first or use
        ``checked_move``. Returns False and changes nothing if ``src`` is empty.

        The phase is not consulted: after ``acknowledge()`` the won rods can
        still be rearranged, though the phase only advances from PLAYING.
        """
        if not (_valid_rod(src) and _valid_rod(dst)) or not self.rods[src]:
            return False

        disk = self.rods[src].pop()
        self.rods[dst].append(disk)
        self.moves_made += 1
        logger.debug("Moved disk %d from %s to %s", disk, RodId(src).name, RodId(dst).name)

        if self.phase is GamePhase.PLAYING and self.is_won():
            self.phase = GamePhase.WON
            logger.info("Game won in %d moves", self.moves_made)
        return True

    def checked_move(self, src: int, dst: int) -> int:
        """
        Move the top disk of ``src`` onto ``dst`` if the move is legal.

        Returns:
            The size of the disk that was moved.

        Raises:
            IllegalMove: no game in progress, or a larger disk onto a smaller one.
            EmptySource: ``src`` holds no disks.
        """
        if self.phase is not GamePhase.PLAYING:
            raise IllegalMove(f"no game in progress (phase: {self.phase.value})")
        if not self.can_move(src, dst):
            if _valid_rod(src) and not self.rods[src]:
                logger.debug("Rejected move from empty rod %s", RodId(src).name)
                raise EmptySource(f"rod {RodId(src).name} is empty")
            logger.debug("Rejected illegal move %s -> %s", _rod_name(src), _rod_name(dst))
            raise IllegalMove("cannot place larger disk on smaller one")

        disk = self.rods[src][-1]
        self.move_disk(src, dst)
        return disk


def _valid_rod(rod: int) -> bool:
    return isinstance(rod, int) and 0 <= rod < NUM_RODS


def _rod_name(rod: int) -> str:
    return RodId(rod).name if _valid_rod(rod) else repr(rod)
