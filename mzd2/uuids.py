"""Time-ordered UUID generation avoiding known and on-disk collisions."""

from __future__ import annotations

import os
import time
from typing import Container
from uuid import UUID

from .paths import PathLike, seltrix_resource_path, tex_resource_path


def uuid7() -> UUID:
    """Create a version 7 UUID from the current Unix time in milliseconds."""
    millis = (time.time_ns() // 1_000_000) & ((1 << 48) - 1)
    rand = int.from_bytes(os.urandom(10), "big")
    rand_a = (rand >> 68) & 0xFFF
    rand_b = rand & ((1 << 62) - 1)
    value = (millis << 80) | (0x7 << 76) | (rand_a << 64) | (0b10 << 62) | rand_b
    return UUID(int=value)


def generate_uuid(check: Container[UUID]) -> UUID:
    """Return a fresh UUID that is not in ``check``."""
    while True:
        candidate = uuid7()
        if candidate not in check:
            return candidate


def generate_res_uuid(check: Container[UUID], map_path: PathLike) -> UUID:
    """Return a fresh UUID with no texture or selection resource file next to ``map_path``."""
    while True:
        candidate = generate_uuid(check)
        if os.path.lexists(tex_resource_path(map_path, candidate)):
            continue
        if os.path.lexists(seltrix_resource_path(map_path, candidate)):
            continue
        return candidate