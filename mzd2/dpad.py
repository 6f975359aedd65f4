"""Hit-testing and labelling for the direction pad control, plus help-text splitting."""

from __future__ import annotations

import enum
from typing import Callable, List, NamedTuple, Optional, Tuple

from .coord_store import Axis

Point = Tuple[float, float]
Icons = Tuple[str, str, str, str, str, str]

_ICONS = ("←", "→", "↑", "↓", "+", "-")
_ICONS_INVERTED = ("→", "←", "↓", "↑", "-", "+")


class DpadRegion(enum.Enum):
    """A clickable part of the direction pad and the move it stands for."""

    LEFT = (Axis.X, False)
    RIGHT = (Axis.X, True)
    UP = (Axis.Y, False)
    DOWN = (Axis.Y, True)
    PLUS = (Axis.Z, True)
    MINUS = (Axis.Z, False)

    @property
    def axis(self) -> Axis:
        return self.value[0]

    @property
    def positive(self) -> bool:
        return self.value[1]

    def polygon(self, text_size: float, base_size: float) -> List[Point]:
        """Vertices of the highlight drawn over this region."""
        t, b = text_size, base_size
        shapes = {
            DpadRegion.LEFT: [(0.0, t), (b, t + b), (0.0, t + b * 2)],
            DpadRegion.RIGHT: [(b, t + b), (b * 2, t), (b * 2, t + b * 2)],
            DpadRegion.UP: [(0.0, t), (b * 2, t), (b, t + b)],
            DpadRegion.DOWN: [(b, t + b), (b * 2, t + b * 2), (0.0, t + b * 2)],
            DpadRegion.PLUS: [(b * 2, t), (b * 3, t), (b * 3, t + b), (b * 2, t + b)],
            DpadRegion.MINUS: [
                (b * 2, t + b),
                (b * 3, t + b),
                (b * 3, t + b * 2),
                (b * 2, t + b * 2),
            ],
        }
        return shapes[self]


def dpad_region(x: float, y: float, text_size: float, base_size: float) -> Optional[DpadRegion]:
    """Return the region under the point ``(x, y)``, or None over borders and the title."""
    border = base_size * 0.1
    xdiff = abs(x - base_size)
    ydiff = abs(y - (text_size + base_size))
    t, b = text_size, base_size

    if x < b - border and y >= t and xdiff - border > ydiff:
        return DpadRegion.LEFT
    if b + border <= x < b * 2 and y >= t and xdiff - border > ydiff:
        return DpadRegion.RIGHT
    if t <= y < t + b - border and x < b * 2 and ydiff - border > xdiff:
        return DpadRegion.UP
    if y >= t + b + border and x < b * 2 and ydiff - border > xdiff:
        return DpadRegion.DOWN
    in_column = b * 2 + border <= x < b * 3 - border
    if in_column and t + border <= y < t + b - border:
        return DpadRegion.PLUS
    if in_column and t + b + border <= y < t + b * 2 - border:
        return DpadRegion.MINUS
    return None


def dpad_icons(dir_icon: Callable[[Axis, bool], str]) -> Icons:
    """Build the six labels in left, right, up, down, plus, minus order."""
    return (
        dir_icon(Axis.X, False),
        dir_icon(Axis.X, True),
        dir_icon(Axis.Y, False),
        dir_icon(Axis.Y, True),
        dir_icon(Axis.Z, True),
        dir_icon(Axis.Z, False),
    )


def default_dpad_icons(inverted: bool) -> Icons:
    """The arrow labels, mirrored when ``inverted``."""
    return _ICONS_INVERTED if inverted else _ICONS


class DocText(NamedTuple):
    """A help string split into its status line and its tooltip body."""

    status: str
    tooltip: str
    has_details: bool


def split_doc(doc: str) -> DocText:
    """Split help text at the first newline into a status line and a tooltip.

    The tooltip falls back to the status line when there is no body.
    """
    status, sep, body = doc.partition("\n")
    if not sep:
        body = ""
    status = status.strip()
    has_details = bool(body)
    tooltip = body.strip()
    if not tooltip and status:
        tooltip = status
    return DocText(status, tooltip, has_details)