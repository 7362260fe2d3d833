# ==============================================
# Palette
# ==============================================
#
# Fixed colour cycle for datasets and pie slices. Colours are a pure
# function of the series index; caller-supplied colours are used
# left to right and the fixed palette fills in past their end.
#
# ==============================================

from typing import Optional, Sequence, Tuple

DEFAULT_PALETTE = (
    "#3b82f6",  # blue
    "#ef4444",  # red
    "#10b981",  # green
    "#f59e0b",  # yellow
    "#8b5cf6",  # purple
    "#06b6d4",  # cyan
    "#f97316",  # orange
    "#84cc16",  # lime
    "#ec4899",  # pink
    "#6b7280",  # gray
)


def get_default_color(index: int) -> str:
    return DEFAULT_PALETTE[index % len(DEFAULT_PALETTE)]


def pick_color(index: int, colors: Optional[Sequence[str]] = None) -> str:
    """Caller colour at `index` if there is one, else the palette colour."""
    if colors and index < len(colors) and colors[index]:
        return colors[index]
    return get_default_color(index)


def generate_colors(count: int, colors: Optional[Sequence[str]] = None) -> Tuple[str, ...]:
    return tuple(pick_color(index, colors) for index in range(count))
