"""Process-wide monotonically increasing identifier sources."""

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from typing import List

_I64_SPAN = 1 << 64
_I64_HALF = 1 << 63


def _wrap_i64(value: int) -> int:
    return (value + _I64_HALF) % _I64_SPAN - _I64_HALF


class IdOverflowError(RuntimeError):
    """Raised when an identifier source has run out of positive values."""


class IdGenerator:
    """A thread-safe counter with signed 64-bit wrap-around semantics."""

    def __init__(self, name: str, start: int = 64) -> None:
        self.name = name
        self._counter = _wrap_i64(start)
        self._lock = threading.Lock()

    def _fetch_add(self, amount: int) -> int:
        with self._lock:
            current = self._counter
            self._counter = _wrap_i64(current + amount)
        return current

    def next(self) -> int:
        current = self._fetch_add(1)
        if current > 0:
            return current
        raise IdOverflowError(f"{self.name} Overflow")

    def next_n(self, n: int) -> List[int]:
        """Reserve ``n`` consecutive ids (1 <= n <= 255)."""
        if not 0 < n <= 255:
            raise ValueError(f"n must be in 1..=255, got {n}")
        current = self._fetch_add(n)
        if current > 0 and _wrap_i64(current + n) > current:
            return [current + i for i in range(n)]
        raise IdOverflowError(f"{self.name} Overflow")


_EGUI_IDS = IdGenerator("Id")
_OP_GEN_EVO = IdGenerator("OpEvo")
_UR_OP_ID = IdGenerator("UROp")
_TEX_ID = IdGenerator("TexId")
_PALETTE_ID = IdGenerator("PaletteId")


@dataclass(frozen=True)
class TilesetId:
    """Unique identity of an open tileset."""

    value: int = field(default_factory=_EGUI_IDS.next)


@dataclass(frozen=True)
class MapId:
    """Unique identity of an open map, with separate ids for its two views."""

    map_id: int = field(default_factory=_EGUI_IDS.next)
    draw_id: int = field(default_factory=_EGUI_IDS.next)


def next_op_gen_evo() -> int:
    return _OP_GEN_EVO.next()


def next_op_gen_evo_n(n: int) -> List[int]:
    return _OP_GEN_EVO.next_n(n)


def next_ur_op_id() -> int:
    return _UR_OP_ID.next()


def next_tex_id() -> int:
    return _TEX_ID.next()


def next_palette_id() -> int:
    return _PALETTE_ID.next()