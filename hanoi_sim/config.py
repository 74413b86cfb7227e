"""
╔══════════════════════════════════════════════════════════════════════════════╗
║                           GAME CONFIGURATION                                  ║
║                                                                               ║
║  Disk-count bounds, driver defaults and snapshot rendering settings.          ║
║  Command-line flags override these fields (see cli.py).                       ║
╚══════════════════════════════════════════════════════════════════════════════╝
"""

from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field, model_validator

# Ceiling a rod is provisioned for, independent of the active disk count
MAX_N = 6
MIN_N = 3
DEFAULT_N = 4


class GameConfig(BaseModel):
    """
    Settings for one interactive session.

    Fields:
        - min_disks: int              # Smallest disk count accepted by initialize()
        - max_disks: int              # MAX_N, the per-rod capacity ceiling
        - default_disks: int          # Substituted when the player types an invalid count
        - clear_screen: bool          # Clear the terminal between screens
        - snapshot_dir: Optional[Path] # Save a PNG of every displayed state here
        - image_size: tuple[int, int] # Snapshot dimensions
    """

    # ══════════════════════════════════════════════════════════════════════════
    #  DISK BOUNDS
    # ══════════════════════════════════════════════════════════════════════════

    min_disks: int = Field(
        default=MIN_N,
        ge=MIN_N,
        description="Minimum number of disks a game may be initialized with"
    )

    max_disks: int = Field(
        default=MAX_N,
        ge=MIN_N,
        description="Maximum number of disks a rod is provisioned for (MAX_N)"
    )

    default_disks: int = Field(
        default=DEFAULT_N,
        description="Disk count used when the player enters an invalid value"
    )

    # ══════════════════════════════════════════════════════════════════════════
    #  DRIVER SETTINGS
    # ══════════════════════════════════════════════════════════════════════════

    clear_screen: bool = Field(
        default=True,
        description="Clear the terminal before drawing the menu and the board"
    )

    # ══════════════════════════════════════════════════════════════════════════
    #  SNAPSHOT SETTINGS
    # ══════════════════════════════════════════════════════════════════════════

    snapshot_dir: Optional[Path] = Field(
        default=None,
        description="Directory for PNG snapshots of each displayed state (disabled if None)"
    )

    image_size: tuple[int, int] = Field(
        default=(512, 512),
        description="Snapshot image size in pixels (width, height)"
    )

    @model_validator(mode="after")
    def _check_bounds(self) -> "GameConfig":
        if self.min_disks > self.max_disks:
            raise ValueError(
                f"min_disks ({self.min_disks}) must not exceed max_disks ({self.max_disks})"
            )
        if not self.min_disks <= self.default_disks <= self.max_disks:
            raise ValueError(
                f"default_disks must be in [{self.min_disks}, {self.max_disks}], "
                f"got {self.default_disks}"
            )
        return self
