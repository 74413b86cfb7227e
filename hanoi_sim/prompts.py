"""
╔══════════════════════════════════════════════════════════════════════════════╗
║                           PLAYER-FACING TEXT                                  ║
║                                                                               ║
║  Menu, instructions and status messages shown by the interactive driver.      ║
╚══════════════════════════════════════════════════════════════════════════════╝
"""

from .config import MAX_N, MIN_N


# ══════════════════════════════════════════════════════════════════════════════
#  MENU & INSTRUCTIONS
# ══════════════════════════════════════════════════════════════════════════════

TITLE = "=== Tower of Hanoi ==="

MENU_OPTIONS = [
    "1. Play",
    "2. Instructions",
    "3. Exit",
]

INSTRUCTIONS = [
    "Move all disks from rod A to rod C.",
    "You can move only the top disk of a rod.",
    "A larger disk cannot be placed on a smaller disk.",
    "Input moves as two letters: source and destination (e.g., A C).",
    "Press Q during a move prompt to return to the menu.",
]


# ══════════════════════════════════════════════════════════════════════════════
#  STATUS MESSAGES
# ══════════════════════════════════════════════════════════════════════════════

MESSAGES = {
    "menu_choice": "Enter your choice: ",
    "invalid_choice": "Invalid choice.",
    "disk_count": "Enter number of disks ({min_disks} to {max_disks}): ",
    "invalid_disk_count": "Invalid. Using {default} disks.",
    "move_format": "Move format: from(to) using letters A/B/C (e.g., A C)",
    "move_prompt": "Enter move (or Q to quit to menu): ",
    "invalid_rods": "Invalid rods. Use A, B, or C.",
    "illegal_move": "Illegal move: cannot place larger disk on smaller one.",
    "empty_source": "Move failed (empty source?).",
    "win": "You win! All disks moved to rod C in {moves} moves.",
    "continue": "Press Enter to continue...",
    "return_to_menu": "Press Enter to return to menu...",
}


def get_message(key: str, **values) -> str:
    """
    Look up a status message and fill in its placeholders.

    Args:
        key: Name of the message (key in MESSAGES dict)
        **values: Values for the message's ``{placeholders}``

    Returns:
        The formatted message
    """
    return MESSAGES[key].format(**values)


def menu_text() -> str:
    return "\n".join([TITLE, *MENU_OPTIONS])


def instructions_text(min_disks: int = MIN_N, max_disks: int = MAX_N) -> str:
    """Instruction block shown from the main menu."""
    lines = ["Instructions:"] + [f"- {line}" for line in INSTRUCTIONS]
    lines.append(f"- Games use between {min_disks} and {max_disks} disks.")
    return "\n".join(lines)
