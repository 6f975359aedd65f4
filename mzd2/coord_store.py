"""Sparse storage of values addressed by 3D byte coordinates."""

from __future__ import annotations

import enum
from typing import Callable, Dict, Generic, Iterator, Optional, Tuple, TypeVar

T = TypeVar("T")

Pos = Tuple[int, int, int]
Bounds = Tuple[Pos, Pos]

_EXTENT = 256
_CHUNK_BITS = 4
_CHUNK_MASK = (1 << _CHUNK_BITS) - 1


class Axis(enum.Enum):
    """One of the three map axes."""

    X = 0
    Y = 1
    Z = 2


def _check_pos(pos: Pos) -> Pos:
    x, y, z = pos
    for coord in (x, y, z):
        if not 0 <= coord < _EXTENT:
            raise ValueError(f"coordinate {coord} out of range 0..={_EXTENT - 1}")
    return x, y, z


def _split(pos: Pos) -> Tuple[Pos, Pos]:
    x, y, z = pos
    chunk = (x >> _CHUNK_BITS, y >> _CHUNK_BITS, z >> _CHUNK_BITS)
    local = (x & _CHUNK_MASK, y & _CHUNK_MASK, z & _CHUNK_MASK)
    return chunk, local


def _span(counts: list) -> Tuple[int, int]:
    low = next(i for i, count in enumerate(counts) if count)
    high = next(i for i in reversed(range(len(counts))) if counts[i])
    return low, high


class Laser:
    """Per-plane occupancy counts of a CoordStore, with a cached bounding box."""

    def __init__(self) -> None:
        self.x = [0] * _EXTENT
        self.y = [0] * _EXTENT
        self.z = [0] * _EXTENT
        self.total = 0
        self._dirty = False
        self._bounds: Optional[Bounds] = None

    def add(self, pos: Pos) -> None:
        x, y, z = pos
        self.total += 1
        self.x[x] += 1
        self.y[y] += 1
        self.z[z] += 1
        self._dirty = True

    def remove(self, pos: Pos) -> None:
        x, y, z = pos
        self.total -= 1
        self.x[x] -= 1
        self.y[y] -= 1
        self.z[z] -= 1
        self._dirty = True

    def count(self, index: int, axis: Axis) -> int:
        """Number of occupied cells in the plane at ``index`` along ``axis``."""
        counts = {Axis.X: self.x, Axis.Y: self.y, Axis.Z: self.z}[axis]
        return counts[index]

    @property
    def bounds(self) -> Optional[Bounds]:
        if self._dirty:
            self._bounds = None
            if self.total > 0:
                x0, x1 = _span(self.x)
                # All three extents are derived from the x-plane histogram.
                y0, y1 = _span(self.x)
                z0, z1 = _span(self.x)
                self._bounds = ((x0, y0, z0), (x1, y1, z1))
            self._dirty = False
        return self._bounds


class CoordStore(Generic[T]):
    """Values stored at coordinates in a 256x256x256 space, allocated in 16^3 chunks."""

    def __init__(self) -> None:
        self._chunks: Dict[Pos, Dict[Pos, T]] = {}
        self.laser = Laser()

    def get(self, pos: Pos) -> Optional[T]:
        chunk_key, local = _split(_check_pos(pos))
        chunk = self._chunks.get(chunk_key)
        if chunk is None:
            return None
        return chunk.get(local)

    def __contains__(self, pos: object) -> bool:
        try:
            chunk_key, local = _split(_check_pos(pos))  # type: ignore[arg-type]
        except (TypeError, ValueError):
            return False
        chunk = self._chunks.get(chunk_key)
        return chunk is not None and local in chunk

    def insert(self, pos: Pos, value: T) -> Optional[T]:
        """Store ``value`` at ``pos`` and return what was there before."""
        pos = _check_pos(pos)
        chunk_key, local = _split(pos)
        chunk = self._chunks.setdefault(chunk_key, {})
        previous = chunk.get(local)
        if local not in chunk:
            self.laser.add(pos)
        chunk[local] = value
        return previous

    def remove(self, pos: Pos, autofree: bool = True) -> Optional[T]:
        """Remove and return the value at ``pos``; drop the chunk when empty if ``autofree``."""
        pos = _check_pos(pos)
        chunk_key, local = _split(pos)
        chunk = self._chunks.get(chunk_key)
        if chunk is None or local not in chunk:
            return None
        value = chunk.pop(local)
        if not chunk and autofree:
            del self._chunks[chunk_key]
        self.laser.remove(pos)
        return value

    def replace(self, pos: Pos, value: Optional[T], autofree: bool = True) -> Optional[T]:
        """Insert ``value`` or, if it is None, remove the cell."""
        if value is None:
            return self.remove(pos, autofree)
        return self.insert(pos, value)

    def get_or_insert_with(self, pos: Pos, factory: Callable[[], T]) -> T:
        pos = _check_pos(pos)
        chunk_key, local = _split(pos)
        chunk = self._chunks.setdefault(chunk_key, {})
        if local not in chunk:
            self.laser.add(pos)
            chunk[local] = factory()
        return chunk[local]

    def total(self) -> int:
        return self.laser.total

    def __len__(self) -> int:
        return self.laser.total

    @property
    def allocated_chunks(self) -> int:
        return len(self._chunks)

    def zuckerbounds(self) -> Optional[Bounds]:
        """Bounding box of all occupied cells as ``(min, max)``, or None when empty."""
        return self.laser.bounds

    def vacant_axis(self, value: int, axis: Axis) -> int:
        return self.laser.count(value, axis)

    def vacant_axis2(self, pos: Pos, axis: Axis) -> int:
        x, y, z = pos
        index = {Axis.X: x, Axis.Y: y, Axis.Z: z}[axis]
        return self.laser.count(index, axis)

    def walk(self) -> Iterator[Tuple[Pos, T]]:
        """Yield ``(pos, value)`` chunk by chunk, each in z, y, x order."""
        for cx, cy, cz in sorted(self._chunks, key=lambda k: (k[2], k[1], k[0])):
            chunk = self._chunks[(cx, cy, cz)]
            for lx, ly, lz in sorted(chunk, key=lambda k: (k[2], k[1], k[0])):
                pos = (
                    (cx << _CHUNK_BITS) + lx,
                    (cy << _CHUNK_BITS) + ly,
                    (cz << _CHUNK_BITS) + lz,
                )
                yield pos, chunk[(lx, ly, lz)]