"""
TASKPACE API - Calendar Colors

Stable display colors for tasks. The hash is a display heuristic: ids
that already have a color must keep it.
"""

import math

TASK_COLORS = (
    "#FFEAA7",  # pastel yellow
    "#FADBD8",  # pastel pink
    "#E8DAEF",  # lavender
    "#D6EAF8",  # baby blue
    "#D5F5E3",  # mint green
    "#FCF3CF",  # cream
    "#FDEDEC",  # rose white
    "#F8C471",  # soft orange
    "#ABEBC6",  # light green
    "#A9CCE3",  # light sky
)

SUBTASK_LIGHTEN_PERCENT = 30


def color_for_task(task_id: str) -> str:
    """Pick a palette color from the sum of the id's character codes."""
    # Character codes are UTF-16 code units
    units = task_id.encode("utf-16-le")
    total = sum(int.from_bytes(units[i:i + 2], "little") for i in range(0, len(units), 2))
    return TASK_COLORS[total % len(TASK_COLORS)]


def lighten(color: str, percent: float) -> str:
    """Add round(2.55 * percent) to each RGB channel, clamped to 0..255."""
    value = int(color.lstrip("#"), 16)
    # Half-up rounding, not banker's rounding
    amount = math.floor(2.55 * percent + 0.5)

    channels = ((value >> 16) & 0xFF, (value >> 8) & 0xFF, value & 0xFF)
    r, g, b = (min(255, max(0, channel + amount)) for channel in channels)
    return f"#{r:02x}{g:02x}{b:02x}"


def subtask_color(task_id: str) -> str:
    return lighten(color_for_task(task_id), SUBTASK_LIGHTEN_PERCENT)
