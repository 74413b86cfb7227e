"""
Board rendering: plain text for the terminal and PNG snapshots via matplotlib.
"""

import logging
from collections import OrderedDict
from pathlib import Path
from typing import Tuple

import matplotlib
matplotlib.use('Agg')  # Use non-interactive backend
import matplotlib.pyplot as plt
from matplotlib.patches import Rectangle
import numpy as np
from PIL import Image

from .state import GOAL_ROD, Snapshot

logger = logging.getLogger(__name__)

DISK_COLORS = ['#FF6B6B', '#4ECDC4', '#45B7D1', '#96CEB4', '#FFE66D', '#A8E6CF']


def render_text(snapshot: Snapshot) -> str:
    """
    Render rods one per line, bottom-to-top, e.g. ``A: 3,2,1``.

    Empty rods are shown as ``-``.
    """
    lines = ["Rods:"]
    for rod, disks in snapshot:
        body = ",".join(str(d) for d in disks) if disks else "-"
        lines.append(f"{rod.name}: {body}")
    return "\n".join(lines)


class SnapshotRenderer:
    """
    Draws a board snapshot as an RGB image.

    Rendered images are kept in a small LRU cache keyed by
    (max_disks, rod contents), since a game revisits the same states often.
    """

    def __init__(self, image_size: Tuple[int, int] = (512, 512), max_disks: int = 6,
                 cache_size: int = 64):
        self.image_size = image_size
        self.max_disks = max_disks
        self._cache: OrderedDict[tuple, Image.Image] = OrderedDict()
        self._cache_max = cache_size

    def render(self, snapshot: Snapshot) -> Image.Image:
        """Render ``snapshot`` as an image with three rods and the goal rod highlighted."""
        cache_key = (self.max_disks, tuple(disks for _, disks in snapshot))
        cached = self._cache.get(cache_key)
        if cached is not None:
            # refresh LRU
            self._cache.move_to_end(cache_key)
            return cached

        width, height = self.image_size
        fig, ax = plt.subplots(figsize=(width/100, height/100), dpi=100)

        rod_x = [width * 0.25, width * 0.5, width * 0.75]

        # Base platform
        base_height = height * 0.1
        ax.add_patch(Rectangle(
            (width * 0.05, 0),
            width * 0.9,
            base_height,
            facecolor='#8B4513',
            edgecolor='none',
            linewidth=0
        ))

        # Rods
        rod_width = width * 0.02
        rod_height = height * 0.6
        for x in rod_x:
            ax.add_patch(Rectangle(
                (x - rod_width/2, base_height),
                rod_width,
                rod_height,
                facecolor='#A0522D',
                edgecolor='none',
                linewidth=0
            ))

        # Disks, scaled against the capacity ceiling so sizes stay comparable
        disk_height = rod_height / (self.max_disks + 1)
        max_disk_width = width * 0.25

        for rod, disks in snapshot:
            for level, disk in enumerate(disks):
                disk_width = max_disk_width * (disk / self.max_disks)
                ax.add_patch(Rectangle(
                    (rod_x[rod] - disk_width / 2, base_height + level * disk_height),
                    disk_width,
                    disk_height * 0.9,
                    facecolor=DISK_COLORS[(disk - 1) % len(DISK_COLORS)],
                    edgecolor='black',
                    linewidth=2
                ))

        # Goal highlight (green dashed box around rod C)
        goal_box_width = width * 0.3
        goal_box_height = height * 0.7
        ax.add_patch(Rectangle(
            (rod_x[GOAL_ROD] - goal_box_width/2, base_height),
            goal_box_width,
            goal_box_height,
            fill=False,
            edgecolor='green',
            linewidth=3,
            linestyle='--'
        ))

        # Labels
        label_y = -height * 0.05
        for rod, _ in snapshot:
            is_goal = rod == GOAL_ROD
            ax.text(
                rod_x[rod], label_y, rod.name,
                ha='center', va='top',
                fontsize=max(10, width // 40),
                color='green' if is_goal else 'black',
                fontweight='bold' if is_goal else 'normal'
            )

        ax.set_xlim(0, width)
        ax.set_ylim(-height * 0.1, height)
        ax.set_aspect('equal')
        ax.axis('off')

        fig.canvas.draw()
        buf = np.frombuffer(fig.canvas.buffer_rgba(), dtype=np.uint8)
        canvas_width, canvas_height = fig.canvas.get_width_height()
        buf = buf.reshape((canvas_height, canvas_width, 4))[:, :, :3]
        plt.close(fig)

        out = Image.fromarray(buf).convert("RGB")

        self._cache[cache_key] = out
        self._cache.move_to_end(cache_key)
        while len(self._cache) > self._cache_max:
            self._cache.popitem(last=False)

        return out

    def save(self, snapshot: Snapshot, path: Path) -> Path:
        """Render ``snapshot`` and write it to ``path`` as PNG."""
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        self.render(snapshot).save(path, format="PNG")
        logger.debug("Saved snapshot to %s", path)
        return path
